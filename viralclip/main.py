import logging
from pathlib import Path

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from viralclip import config
from viralclip.app.api import routes_analyze

logger = logging.getLogger("uvicorn.access")

STATIC_DIR = Path(__file__).resolve().parent / "static"

app = FastAPI(title="Viral Clip Finder API", version="0.1.0")


class LogRequestsMiddleware(BaseHTTPMiddleware):
    """Log when a request is received, before the route runs."""

    async def dispatch(self, request, call_next):
        logger.info("Request started: %s %s", request.method, request.url.path)
        return await call_next(request)


app.add_middleware(LogRequestsMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request, exc: StarletteHTTPException):
    # Clients read {"error": ...}, not FastAPI's {"detail": ...}
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request, exc: RequestValidationError):
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return JSONResponse(status_code=400, content={"error": f"Invalid request body: {message}"})


app.include_router(routes_analyze.router)


@app.get("/health")
async def health():
    return {"status": "ok"}


if STATIC_DIR.is_dir():

    @app.get("/", include_in_schema=False)
    async def index():
        return FileResponse(STATIC_DIR / "index.html")

    @app.get("/{full_path:path}", include_in_schema=False)
    async def serve_static(full_path: str):
        if full_path.startswith("api/"):
            raise HTTPException(status_code=404, detail="Not found")
        path = STATIC_DIR / full_path
        if path.is_file() and STATIC_DIR in path.resolve().parents:
            return FileResponse(path)
        return FileResponse(STATIC_DIR / "index.html")


def run() -> None:
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()

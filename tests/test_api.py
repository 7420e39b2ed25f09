import pytest
from fastapi.testclient import TestClient

from viralclip.main import app

client = TestClient(app)


def test_analyze_youtube_url():
    response = client.post("/api/analyze", json={"url": "https://youtu.be/abc123"})

    assert response.status_code == 200
    data = response.json()
    assert data["videoUrl"] == "https://youtu.be/abc123"
    assert data["platform"] == "YouTube"
    assert data["title"] == "Amazing Viral Video - Must Watch!"
    assert data["duration"] == 420
    assert data["thumbnailUrl"] == "https://img.youtube.com/vi/abc123/maxresdefault.jpg"
    assert [c["score"] for c in data["clips"]] == [95, 92, 91, 89, 88]


def test_clip_json_shape():
    response = client.post("/api/analyze", json={"url": "https://youtu.be/abc123"})

    peak = response.json()["clips"][0]
    assert set(peak) == {"startTime", "endTime", "duration", "score", "reason", "keywords"}
    assert (peak["startTime"], peak["endTime"], peak["duration"]) == (168, 233, 65)
    assert peak["keywords"] == ["climax", "high-energy", "emotional peak", "key moment"]
    for clip in response.json()["clips"]:
        assert clip["duration"] == clip["endTime"] - clip["startTime"]


def test_thumbnail_omitted_when_missing():
    response = client.post("/api/analyze", json={"url": "https://x.com/user/status/1"})

    assert response.status_code == 200
    data = response.json()
    assert data["platform"] == "Twitter/X"
    assert "thumbnailUrl" not in data


@pytest.mark.parametrize("body", [{}, {"url": None}, {"url": ""}, {"url": "   "}])
def test_missing_url_is_rejected(body):
    response = client.post("/api/analyze", json=body)

    assert response.status_code == 400
    assert response.json() == {"error": "Video URL is required"}


def test_unknown_platform_is_rejected():
    response = client.post("/api/analyze", json={"url": "https://example.com"})

    assert response.status_code == 400
    assert response.json()["error"].startswith("Unsupported video platform.")


def test_malformed_body_is_rejected():
    response = client.post(
        "/api/analyze",
        content="not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert "error" in response.json()


def test_wrong_url_type_is_rejected():
    response = client.post("/api/analyze", json={"url": 123})

    assert response.status_code == 400
    assert response.json()["error"].startswith("Invalid request body")


def test_unexpected_failure_returns_500(monkeypatch):
    def boom(url):
        raise RuntimeError("metadata backend exploded")

    monkeypatch.setattr("viralclip.app.api.routes_analyze.analyze_video", boom)
    response = client.post("/api/analyze", json={"url": "https://youtu.be/abc123"})

    assert response.status_code == 500
    assert response.json() == {"error": "metadata backend exploded"}


def test_unexpected_failure_without_message_uses_fallback(monkeypatch):
    def boom(url):
        raise RuntimeError()

    monkeypatch.setattr("viralclip.app.api.routes_analyze.analyze_video", boom)
    response = client.post("/api/analyze", json={"url": "https://youtu.be/abc123"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to analyze video"}


def test_list_platforms():
    response = client.get("/api/platforms")

    assert response.status_code == 200
    assert response.json()["platforms"] == [
        "YouTube",
        "TikTok",
        "Instagram",
        "Twitter/X",
        "Facebook",
        "Vimeo",
        "Twitch",
    ]


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_index_page_is_served():
    response = client.get("/")

    assert response.status_code == 200
    assert "Viral Video Clipper" in response.text


def test_unknown_api_path_returns_json_error():
    response = client.get("/api/nope")

    assert response.status_code == 404
    assert response.json() == {"error": "Not found"}

from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ClipOut(CamelModel):
    start_time: int
    end_time: int
    duration: int
    score: int
    reason: str
    keywords: List[str] = []

from pydantic import BaseModel
from typing import List, Optional

from scriptorium.domain.enums import Language


class PoemRequest(BaseModel):
    character: Optional[str] = None
    location: Optional[str] = None
    event: Optional[str] = None
    emotion: Optional[str] = None
    language: Optional[str] = Language.ENGLISH

    def missing_fields(self) -> List[str]:
        return [
            name
            for name in ("character", "location", "event", "emotion")
            if not getattr(self, name)
        ]


class GeneratedPoem(BaseModel):
    title: str
    stanzas: List[str]
    illuminated: str


class ErrorResponse(BaseModel):
    error: str

from __future__ import annotations

from pydantic import BaseModel

from services.content_types import ContentType


class TemplateResponse(BaseModel):
    id: str
    content_type: ContentType
    name: str
    description: str
    structure: list[str]
    example: str


class TemplateListResponse(BaseModel):
    templates: list[TemplateResponse]

from __future__ import annotations

from fastapi import APIRouter, Query

from schemas.templates import TemplateListResponse, TemplateResponse
from services.content_types import ContentType
from services.templates import list_templates

router = APIRouter(tags=["templates"])


@router.get("/templates", response_model=TemplateListResponse)
async def get_templates(content_type: ContentType | None = Query(default=None)) -> TemplateListResponse:
    return TemplateListResponse(
        templates=[
            TemplateResponse(
                id=template.id,
                content_type=template.content_type,
                name=template.name,
                description=template.description,
                structure=list(template.structure),
                example=template.example,
            )
            for template in list_templates(content_type)
        ]
    )

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

from services.content_generator import GenerationResult
from services.content_types import ContentType, WritingStyle, enum_value
from services.quality_analyzer import QualityAnalysis

MAX_TITLE_CHARS = 80


@dataclass(frozen=True)
class SavedContent:
    id: str
    title: str
    content: str
    content_type: str
    writing_style: str
    tags: list[str]
    is_favorite: bool
    created_at: datetime
    word_count: int
    reading_time_minutes: int
    quality_analysis: QualityAnalysis
    language: str = "id"
    updated_at: datetime | None = None


def _default_title(content: str) -> str:
    for line in content.splitlines():
        cleaned = line.strip().lstrip("#").strip()
        if cleaned:
            return cleaned[:MAX_TITLE_CHARS]
    return "Tanpa judul"


def to_saved_content(
    result: GenerationResult,
    content_type: ContentType | str,
    writing_style: WritingStyle | str,
    title: str | None = None,
    tags: list[str] | None = None,
    is_favorite: bool = False,
) -> SavedContent:
    """Build the record a persistence layer stores for a finished generation."""
    cleaned_tags = [tag.strip() for tag in tags or [] if tag.strip()]
    return SavedContent(
        id=uuid.uuid4().hex,
        title=(title or "").strip() or _default_title(result.content),
        content=result.content,
        content_type=enum_value(content_type),
        writing_style=enum_value(writing_style),
        tags=list(dict.fromkeys(cleaned_tags)),
        is_favorite=is_favorite,
        created_at=datetime.now(timezone.utc),
        word_count=result.metadata.word_count,
        reading_time_minutes=result.metadata.reading_time_minutes,
        quality_analysis=result.quality_analysis,
    )

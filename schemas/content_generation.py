from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from schemas.quality import QualityAnalysisResponse
from services.content_generator import GenerationRequest
from services.content_types import ContentType, LengthClass, WritingStyle


class ContentGenerationRequest(BaseModel):
    topic: str = Field(min_length=1, max_length=200)
    content_type: ContentType
    writing_style: WritingStyle
    template: str = Field(min_length=1, max_length=64)
    target_audience: str | None = Field(default="General Indonesian audience", max_length=200)
    tone: str | None = Field(default=None, max_length=64)
    length: LengthClass = LengthClass.medium
    include_examples: bool = True
    include_sources: bool = False
    seo_keywords: list[str] | None = Field(default=None, max_length=10)
    save: bool = False
    title: str | None = Field(default=None, max_length=200)
    tags: list[str] = Field(default_factory=list, max_length=20)

    def to_generation_request(self) -> GenerationRequest:
        keywords = self.seo_keywords
        if keywords is None:
            keywords = self.topic.split()[:3]
        return GenerationRequest(
            topic=self.topic,
            content_type=self.content_type,
            writing_style=self.writing_style,
            template=self.template,
            target_audience=self.target_audience,
            tone=self.tone or self.writing_style.value,
            length=self.length,
            include_examples=self.include_examples,
            include_sources=self.include_sources,
            seo_keywords=[item.strip() for item in keywords if item.strip()],
        )


class SavedContentResponse(BaseModel):
    id: str
    title: str
    content_type: ContentType
    writing_style: WritingStyle
    tags: list[str]
    is_favorite: bool
    language: str
    created_at: datetime
    word_count: int
    reading_time_minutes: int


class GenerationMetadataResponse(BaseModel):
    word_count: int
    reading_time_minutes: int
    generation_time_ms: int
    iterations: int


class ContentGenerationResponse(BaseModel):
    content: str
    quality_analysis: QualityAnalysisResponse
    alternatives: list[str]
    metadata: GenerationMetadataResponse
    is_demo_mode: bool
    saved_content: SavedContentResponse | None = None


class SEOOptimizationRequest(BaseModel):
    content: str = Field(min_length=1, max_length=20000)
    keywords: list[str] = Field(min_length=1, max_length=10)


class SEOOptimizationResponse(BaseModel):
    content: str

from __future__ import annotations

from pydantic import BaseModel, Field

from services.content_types import ContentType
from services.quality_analyzer import QualityAnalysis


class QualityScoreResponse(BaseModel):
    overall: float
    readability: float
    structure: float
    engagement: float
    seo: float
    originality: float
    factual_accuracy: float


class QualityAnalysisResponse(BaseModel):
    score: QualityScoreResponse
    suggestions: list[str]
    warnings: list[str]
    strengths: list[str]

    @classmethod
    def from_analysis(cls, analysis: QualityAnalysis) -> QualityAnalysisResponse:
        score = analysis.score
        return cls(
            score=QualityScoreResponse(
                overall=score.overall,
                readability=score.readability,
                structure=score.structure,
                engagement=score.engagement,
                seo=score.seo,
                originality=score.originality,
                factual_accuracy=score.factual_accuracy,
            ),
            suggestions=list(analysis.suggestions),
            warnings=list(analysis.warnings),
            strengths=list(analysis.strengths),
        )


class ContentAnalysisRequest(BaseModel):
    content: str = Field(max_length=20000)
    content_type: ContentType
    topic: str = Field(default="", max_length=200)

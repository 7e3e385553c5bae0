from __future__ import annotations

from datetime import date

from pydantic import BaseModel


class KPIResponse(BaseModel):
    date: date
    generated_posts: int
    demo_posts: int
    failure_rate: float
    average_processing_time_seconds: float | None
    average_quality_score: float | None
    content_type_distribution: dict[str, int]
    total_requests: int
    failed_requests: int

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from services.content_generator import GenerationResult
from services.content_types import ContentType, enum_value

logger = logging.getLogger(__name__)

STATUS_COMPLETED = "completed"
STATUS_DEMO = "demo"
STATUS_FAILED = "failed"


class GenerationLog:
    """Append one JSON line per generation attempt."""

    def __init__(self, output_path: Path) -> None:
        self._output_path = output_path
        self._output_path.parent.mkdir(parents=True, exist_ok=True)

    def write(self, payload: dict[str, object]) -> None:
        with self._output_path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(payload, ensure_ascii=False) + "\n")

    def record_result(
        self,
        result: GenerationResult,
        topic: str,
        content_type: ContentType | str,
    ) -> None:
        self.write(
            {
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "status": STATUS_DEMO if result.is_demo else STATUS_COMPLETED,
                "topic": topic,
                "content_type": enum_value(content_type),
                "overall_score": result.quality_analysis.score.overall,
                "word_count": result.metadata.word_count,
                "iterations": result.metadata.iterations,
                "processing_time_seconds": result.metadata.generation_time_ms / 1000,
            }
        )

    def record_failure(
        self,
        topic: str,
        content_type: ContentType | str,
        error: str,
        processing_time_seconds: float,
    ) -> None:
        self.write(
            {
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "status": STATUS_FAILED,
                "topic": topic,
                "content_type": enum_value(content_type),
                "error": error,
                "processing_time_seconds": processing_time_seconds,
            }
        )

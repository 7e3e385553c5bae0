from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Iterable

from services.generation_log import STATUS_COMPLETED, STATUS_DEMO, STATUS_FAILED

logger = logging.getLogger(__name__)


class ReportingError(RuntimeError):
    """Raised when KPI reporting cannot be produced."""


@dataclass(frozen=True)
class DailyKPIs:
    date: date
    generated_posts: int
    demo_posts: int
    failure_rate: float
    average_processing_time_seconds: float | None
    average_quality_score: float | None
    content_type_distribution: dict[str, int]
    total_requests: int
    failed_requests: int


class ReportingService:
    """Compute daily KPIs from the generation log."""

    def __init__(self, output_path: Path) -> None:
        self._output_path = output_path

    def _iter_records(self) -> Iterable[dict[str, object]]:
        if not self._output_path.exists():
            raise ReportingError(f"Generation log not found at {self._output_path}.")

        with self._output_path.open("r", encoding="utf-8") as handle:
            for line in handle:
                if not line.strip():
                    continue
                try:
                    yield json.loads(line)
                except json.JSONDecodeError:
                    logger.warning("Skipping invalid JSONL line in %s", self._output_path)
                    continue

    @staticmethod
    def _record_date(payload: dict[str, object]) -> date | None:
        timestamp = payload.get("timestamp")
        if not isinstance(timestamp, str):
            return None
        try:
            parsed = datetime.fromisoformat(timestamp)
        except ValueError:
            return None
        return parsed.date()

    def get_daily_kpis(self, target_date: date) -> DailyKPIs:
        total_requests = 0
        completed = 0
        demo = 0
        failed = 0
        processing_times: list[float] = []
        quality_scores: list[float] = []
        content_type_distribution: dict[str, int] = {}

        for record in self._iter_records():
            if self._record_date(record) != target_date:
                continue

            total_requests += 1
            status = record.get("status")
            if status == STATUS_COMPLETED:
                completed += 1
            elif status == STATUS_DEMO:
                demo += 1
            elif status == STATUS_FAILED:
                failed += 1

            processing_time = record.get("processing_time_seconds")
            if isinstance(processing_time, (int, float)):
                processing_times.append(float(processing_time))

            if status in (STATUS_COMPLETED, STATUS_DEMO):
                overall = record.get("overall_score")
                if isinstance(overall, (int, float)):
                    quality_scores.append(float(overall))

                content_type = record.get("content_type")
                if isinstance(content_type, str) and content_type.strip():
                    key = content_type.strip()
                else:
                    key = "unknown"
                content_type_distribution[key] = content_type_distribution.get(key, 0) + 1

        total_finished = completed + demo + failed
        failure_rate = failed / total_finished if total_finished else 0.0
        average_processing_time = (
            sum(processing_times) / len(processing_times)
            if processing_times
            else None
        )
        average_quality = (
            round(sum(quality_scores) / len(quality_scores), 1)
            if quality_scores
            else None
        )

        return DailyKPIs(
            date=target_date,
            generated_posts=completed,
            demo_posts=demo,
            failure_rate=failure_rate,
            average_processing_time_seconds=average_processing_time,
            average_quality_score=average_quality,
            content_type_distribution=content_type_distribution,
            total_requests=total_requests,
            failed_requests=failed,
        )

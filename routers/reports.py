from __future__ import annotations

from datetime import date, datetime, timezone
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, Query

from app.core.config import Settings, get_settings
from schemas.reports import KPIResponse
from services.reporting import ReportingError, ReportingService

router = APIRouter(tags=["reports"])


@router.get("/kpis", response_model=KPIResponse)
async def get_kpis(
    report_date: date | None = Query(default=None, alias="date"),
    settings: Settings = Depends(get_settings),
) -> KPIResponse:
    target_date = report_date or datetime.now(timezone.utc).date()
    service = ReportingService(Path(settings.output_path))
    try:
        kpis = service.get_daily_kpis(target_date)
    except ReportingError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    return KPIResponse(
        date=kpis.date,
        generated_posts=kpis.generated_posts,
        demo_posts=kpis.demo_posts,
        failure_rate=kpis.failure_rate,
        average_processing_time_seconds=kpis.average_processing_time_seconds,
        average_quality_score=kpis.average_quality_score,
        content_type_distribution=kpis.content_type_distribution,
        total_requests=kpis.total_requests,
        failed_requests=kpis.failed_requests,
    )

"""
Tests for the generation log and the daily KPI report built from it.

Run: pytest tests/test_reporting.py -v
"""

import json
from datetime import date, datetime, timezone

import pytest

from conftest import uniform_analysis
from services.content_generator import GenerationMetadata, GenerationResult
from services.generation_log import STATUS_COMPLETED, STATUS_DEMO, STATUS_FAILED, GenerationLog
from services.reporting import ReportingError, ReportingService


def _result(overall: float, is_demo: bool = False) -> GenerationResult:
    return GenerationResult(
        content="isi konten",
        quality_analysis=uniform_analysis(overall),
        alternatives=[],
        metadata=GenerationMetadata(word_count=2, reading_time_minutes=1, generation_time_ms=2000, iterations=2),
        is_demo=is_demo,
    )


@pytest.fixture
def log_path(tmp_path):
    return tmp_path / "logs" / "generations.jsonl"


class TestGenerationLog:
    def test_creates_parent_directory(self, log_path):
        GenerationLog(log_path)

        assert log_path.parent.is_dir()

    def test_records_one_line_per_attempt(self, log_path):
        log = GenerationLog(log_path)
        log.record_result(_result(7.5), "Kopi", "artikel")
        log.record_result(_result(6.0, is_demo=True), "Teh", "caption-ig")
        log.record_failure("Susu", "artikel", "Generation failed", 0.5)

        records = [json.loads(line) for line in log_path.read_text(encoding="utf-8").splitlines()]

        assert [record["status"] for record in records] == [STATUS_COMPLETED, STATUS_DEMO, STATUS_FAILED]
        assert records[0]["overall_score"] == 7.5
        assert records[0]["processing_time_seconds"] == 2.0
        assert records[0]["iterations"] == 2
        assert records[2]["error"] == "Generation failed"


class TestReportingService:
    def test_missing_log_raises(self, tmp_path):
        with pytest.raises(ReportingError):
            ReportingService(tmp_path / "missing.jsonl").get_daily_kpis(date(2026, 1, 1))

    def test_daily_kpis(self, log_path):
        log = GenerationLog(log_path)
        log.record_result(_result(8.0), "Kopi", "artikel")
        log.record_result(_result(6.0, is_demo=True), "Teh", "caption-ig")
        log.record_failure("Susu", "artikel", "Generation failed", 1.0)

        today = datetime.now(timezone.utc).date()
        kpis = ReportingService(log_path).get_daily_kpis(today)

        assert kpis.total_requests == 3
        assert kpis.generated_posts == 1
        assert kpis.demo_posts == 1
        assert kpis.failed_requests == 1
        assert kpis.failure_rate == pytest.approx(1 / 3)
        assert kpis.average_processing_time_seconds == pytest.approx(5 / 3)
        assert kpis.average_quality_score == 7.0
        assert kpis.content_type_distribution == {"artikel": 1, "caption-ig": 1}

    def test_skips_invalid_lines_and_other_days(self, log_path):
        log_path.parent.mkdir(parents=True)
        lines = [
            "not json",
            "",
            json.dumps({"timestamp": "2026-03-01T10:00:00+00:00", "status": "completed", "overall_score": 9.0}),
            json.dumps({"timestamp": "2026-03-02T10:00:00+00:00", "status": "completed", "overall_score": 5.0}),
            json.dumps({"status": "completed"}),
        ]
        log_path.write_text("\n".join(lines) + "\n", encoding="utf-8")

        kpis = ReportingService(log_path).get_daily_kpis(date(2026, 3, 1))

        assert kpis.total_requests == 1
        assert kpis.average_quality_score == 9.0
        assert kpis.content_type_distribution == {"unknown": 1}
        assert kpis.average_processing_time_seconds is None

    def test_empty_day(self, log_path):
        GenerationLog(log_path).record_failure("Kopi", "artikel", "boom", 0.1)

        kpis = ReportingService(log_path).get_daily_kpis(date(2000, 1, 1))

        assert kpis.total_requests == 0
        assert kpis.failure_rate == 0.0
        assert kpis.average_quality_score is None

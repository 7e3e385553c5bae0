"""
Shared fixtures: scripted text generator, stub analyzer, sample requests.
"""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from services.content_enhancer import ALTERNATIVE_SYSTEM_PROMPT, ENHANCER_SYSTEM_PROMPT, SEO_SYSTEM_PROMPT
from services.content_generator import SYSTEM_PROMPT_BASE, GenerationRequest
from services.content_types import ContentType, LengthClass, WritingStyle
from services.quality_analyzer import QualityAnalysis, QualityScore
from services.text_generator import TextGenerationError


@dataclass(frozen=True)
class RecordedCall:
    kind: str
    system_instruction: str
    user_prompt: str
    max_output_tokens: int
    temperature: float


def _call_kind(system_instruction: str) -> str:
    if system_instruction.startswith(SYSTEM_PROMPT_BASE):
        return "draft"
    if system_instruction == ENHANCER_SYSTEM_PROMPT:
        return "enhance"
    if system_instruction == ALTERNATIVE_SYSTEM_PROMPT:
        return "alternative"
    if system_instruction == SEO_SYSTEM_PROMPT:
        return "seo"
    return "unknown"


class FakeTextGenerator:
    """Replays scripted replies per call kind; an Exception entry is raised instead of returned."""

    def __init__(
        self,
        drafts: list[str | Exception] | None = None,
        enhancement: str | Exception = "ENHANCED_CONTENT:\n",
        alternatives: list[str | Exception] | None = None,
        seo: str | Exception = "Konten teroptimasi",
    ) -> None:
        self._replies: dict[str, list[str | Exception]] = {
            "draft": list(drafts or []),
            "enhance": [enhancement],
            "alternative": list(alternatives or []),
            "seo": [seo],
        }
        self.calls: list[RecordedCall] = []

    def calls_of(self, kind: str) -> list[RecordedCall]:
        return [call for call in self.calls if call.kind == kind]

    async def complete(
        self,
        system_instruction: str,
        user_prompt: str,
        max_output_tokens: int,
        temperature: float,
    ) -> str:
        kind = _call_kind(system_instruction)
        index = len(self.calls_of(kind))
        self.calls.append(
            RecordedCall(kind, system_instruction, user_prompt, max_output_tokens, temperature)
        )

        replies = self._replies.get(kind, [])
        if not replies:
            raise TextGenerationError(f"no scripted reply for {kind}")
        reply = replies[min(index, len(replies) - 1)]
        if isinstance(reply, Exception):
            raise reply
        return reply


def uniform_analysis(value: float) -> QualityAnalysis:
    return QualityAnalysis(
        score=QualityScore(
            readability=value,
            structure=value,
            engagement=value,
            seo=value,
            originality=value,
            factual_accuracy=value,
        ),
        suggestions=[],
        warnings=[],
        strengths=[],
    )


class StubAnalyzer:
    """Scores texts from a lookup table so loop decisions are predictable."""

    def __init__(self, scores: dict[str, float], default: float = 5.0) -> None:
        self._scores = scores
        self._default = default
        self.analyzed: list[str] = []

    def analyze(self, text: str, content_type: str, topic: str) -> QualityAnalysis:
        self.analyzed.append(text)
        return uniform_analysis(self._scores.get(text, self._default))


@pytest.fixture
def article_request() -> GenerationRequest:
    return GenerationRequest(
        topic="Kecerdasan Buatan",
        content_type=ContentType.article,
        writing_style=WritingStyle.formal,
        template="berita",
        target_audience="Pelajar SMA",
        tone="formal",
        length=LengthClass.medium,
        include_examples=True,
        seo_keywords=["kecerdasan", "buatan"],
    )


@pytest.fixture
def caption_request() -> GenerationRequest:
    return GenerationRequest(
        topic="Kopi Pagi",
        content_type="caption-ig",
        writing_style="santai",
        template="lifestyle",
    )

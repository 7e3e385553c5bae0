from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable

from services.text_generator import TextGenerationError, TextGenerator

logger = logging.getLogger(__name__)

ENHANCER_SYSTEM_PROMPT = (
    "Anda adalah editor profesional yang ahli dalam memperbaiki dan meningkatkan "
    "kualitas konten bahasa Indonesia."
)

ALTERNATIVE_SYSTEM_PROMPT = (
    "Anda adalah copywriter kreatif yang membuat variasi konten dengan gaya yang berbeda "
    "namun tetap mempertahankan pesan utama."
)

SEO_SYSTEM_PROMPT = (
    "Anda adalah SEO specialist yang ahli dalam mengoptimasi konten untuk mesin pencari "
    "tanpa mengurangi kualitas dan keterbacaan."
)

FOCUS_INSTRUCTIONS = {
    "grammar": "Perbaiki tata bahasa, ejaan, dan struktur kalimat",
    "style": "Tingkatkan gaya penulisan agar lebih menarik dan profesional",
    "structure": "Perbaiki struktur dan organisasi konten",
    "engagement": "Tambahkan elemen yang lebih engaging dan menarik pembaca",
    "seo": "Optimasi untuk SEO tanpa mengurangi kualitas",
}

DEFAULT_FOCUS_AREAS = ("grammar", "style", "engagement")

ALTERNATIVE_APPROACHES = (
    "lebih formal dan profesional",
    "lebih santai dan conversational",
    "lebih kreatif dan engaging",
)

ENHANCE_PROMPT_TEMPLATE = """
Tingkatkan kualitas konten berikut dengan fokus pada: {instructions}

Tipe konten: {content_type}
Konten asli:
{content}

Berikan hasil perbaikan dalam format:
ENHANCED_CONTENT:
[konten yang sudah diperbaiki]

IMPROVEMENTS:
[list perbaikan yang dilakukan dengan format: "ORIGINAL: [teks asli] -> IMPROVED: [teks perbaikan] (REASON: [alasan perbaikan])"]

Pastikan:
1. Mempertahankan pesan dan informasi utama
2. Menggunakan bahasa Indonesia yang baik dan benar
3. Meningkatkan keterbacaan dan engagement
4. Memberikan perbaikan yang signifikan
""".strip()

ALTERNATIVE_PROMPT_TEMPLATE = """
Buat ulang konten berikut dengan gaya yang berbeda namun tetap mempertahankan informasi dan pesan utama:

Konten asli:
{content}

Tipe konten: {content_type}

Variasi ke-{number}: Buat dengan pendekatan yang {approach}.
""".strip()

SEO_PROMPT_TEMPLATE = """
Optimasi konten berikut untuk SEO dengan kata kunci target: {keywords}

Konten asli:
{content}

Petunjuk optimasi:
1. Gunakan kata kunci secara natural (density 1-3%)
2. Tambahkan heading yang mengandung kata kunci
3. Perbaiki struktur untuk SEO
4. Jaga keterbacaan dan kualitas konten
5. Tambahkan meta description suggestion di akhir

Berikan hasil optimasi:
""".strip()

IMPROVEMENT_LINE = re.compile(
    r"ORIGINAL:\s*(?P<original>.+?)\s*->\s*IMPROVED:\s*(?P<improved>.+?)\s*\(REASON:\s*(?P<reason>.+?)\)\s*$"
)

MAX_ALTERNATIVES = len(ALTERNATIVE_APPROACHES)


@dataclass(frozen=True)
class EnhancementSuggestion:
    type: str
    original: str
    improved: str
    reason: str
    confidence: float


@dataclass(frozen=True)
class EnhancementResult:
    enhanced_content: str
    suggestions: list[EnhancementSuggestion]
    improvement_score: float


def parse_enhancement(response_text: str, original_content: str) -> EnhancementResult:
    """Split an ``ENHANCED_CONTENT:`` / ``IMPROVEMENTS:`` reply into its parts."""
    head, _, improvements_text = response_text.partition("IMPROVEMENTS:")
    enhanced = head.replace("ENHANCED_CONTENT:", "", 1).strip() or original_content

    suggestions: list[EnhancementSuggestion] = []
    for line in improvements_text.splitlines():
        match = IMPROVEMENT_LINE.search(line.strip())
        if not match:
            continue
        suggestions.append(
            EnhancementSuggestion(
                type="style",
                original=match.group("original").strip(),
                improved=match.group("improved").strip(),
                reason=match.group("reason").strip(),
                confidence=0.8,
            )
        )

    return EnhancementResult(
        enhanced_content=enhanced,
        suggestions=suggestions,
        improvement_score=min(10.0, len(suggestions) * 1.5),
    )


class ContentEnhancerService:
    """Secondary rewrite passes. Every method degrades to the input on model failure."""

    def __init__(self, generator: TextGenerator) -> None:
        self._generator = generator

    async def enhance(
        self,
        content: str,
        content_type: str,
        focus_areas: Iterable[str] = DEFAULT_FOCUS_AREAS,
    ) -> EnhancementResult:
        instructions = ", ".join(
            FOCUS_INSTRUCTIONS[area] for area in focus_areas if area in FOCUS_INSTRUCTIONS
        )
        prompt = ENHANCE_PROMPT_TEMPLATE.format(
            instructions=instructions,
            content_type=content_type,
            content=content,
        )
        try:
            response_text = await self._generator.complete(
                ENHANCER_SYSTEM_PROMPT,
                prompt,
                max_output_tokens=2000,
                temperature=0.3,
            )
        except TextGenerationError as exc:
            logger.warning("Content enhancement failed: %s", exc)
            return EnhancementResult(enhanced_content=content, suggestions=[], improvement_score=0.0)

        return parse_enhancement(response_text, content)

    async def generate_alternatives(self, content: str, content_type: str, count: int = 3) -> list[str]:
        alternatives: list[str] = []
        for index, approach in enumerate(ALTERNATIVE_APPROACHES[: max(0, count)]):
            prompt = ALTERNATIVE_PROMPT_TEMPLATE.format(
                content=content,
                content_type=content_type,
                number=index + 1,
                approach=approach,
            )
            try:
                text = await self._generator.complete(
                    ALTERNATIVE_SYSTEM_PROMPT,
                    prompt,
                    max_output_tokens=1500,
                    temperature=round(0.7 + index * 0.1, 2),
                )
            except TextGenerationError as exc:
                logger.warning("Failed to generate alternative %s: %s", index + 1, exc)
                continue
            alternatives.append(text)
        return alternatives

    async def optimize_for_seo(self, content: str, keywords: list[str]) -> str:
        prompt = SEO_PROMPT_TEMPLATE.format(keywords=", ".join(keywords), content=content)
        try:
            return await self._generator.complete(
                SEO_SYSTEM_PROMPT,
                prompt,
                max_output_tokens=2000,
                temperature=0.4,
            )
        except TextGenerationError as exc:
            logger.warning("SEO optimization failed: %s", exc)
            return content

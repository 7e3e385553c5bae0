from __future__ import annotations

import logging
from dataclasses import dataclass, field

from services.content_types import ContentType, enum_value
from services.quality_metrics import (
    engagement_score,
    factual_accuracy_score,
    originality_score,
    readability_score,
    seo_score,
    split_sentences,
    structure_score,
)

logger = logging.getLogger(__name__)

SCORE_WEIGHTS: dict[str, float] = {
    "readability": 0.15,
    "structure": 0.25,
    "engagement": 0.20,
    "seo": 0.15,
    "originality": 0.15,
    "factual_accuracy": 0.10,
}

MIN_CONTENT_CHARS = 100
MAX_CONTENT_CHARS = 3000
REPEATED_SENTENCE_LIMIT = 2
STRENGTH_THRESHOLD = 8.0

OVERGENERALIZATIONS = ("selalu", "tidak pernah", "semua orang", "tidak ada yang")

SUGGESTION_RULES: tuple[tuple[str, float, tuple[str, ...]], ...] = (
    (
        "readability",
        6.0,
        (
            "Gunakan kalimat yang lebih pendek dan sederhana",
            "Hindari kata-kata teknis yang sulit dipahami",
        ),
    ),
    (
        "structure",
        7.0,
        (
            "Tambahkan heading dan subheading untuk struktur yang lebih jelas",
            "Gunakan paragraf yang lebih pendek (3-4 kalimat)",
        ),
    ),
    (
        "engagement",
        6.0,
        (
            "Tambahkan pertanyaan untuk melibatkan pembaca",
            "Gunakan call-to-action yang jelas",
            "Sertakan contoh atau cerita untuk menarik perhatian",
        ),
    ),
    (
        "seo",
        6.0,
        (
            "Gunakan kata kunci topik lebih sering (1-3% dari total kata)",
            "Tambahkan heading dengan kata kunci",
        ),
    ),
    (
        "originality",
        7.0,
        (
            "Hindari frasa klise yang terlalu umum",
            "Tambahkan perspektif atau insight yang unik",
        ),
    ),
    (
        "factual_accuracy",
        7.0,
        (
            "Verifikasi data dan statistik yang disebutkan",
            "Gunakan sumber yang dapat dipercaya",
            "Tambahkan disclaimer jika diperlukan",
        ),
    ),
)

STRENGTH_MESSAGES: dict[str, str] = {
    "readability": "Konten mudah dibaca dan dipahami",
    "structure": "Struktur konten sangat baik dan terorganisir",
    "engagement": "Konten sangat engaging dan menarik",
    "seo": "Optimasi SEO sangat baik",
    "originality": "Konten original dan unik",
    "factual_accuracy": "Konten tampak akurat dan dapat dipercaya",
}

WARNING_TOO_SHORT = "Konten terlalu pendek, pertimbangkan untuk menambah detail"
WARNING_TOO_LONG = "Konten sangat panjang, pertimbangkan untuk membagi menjadi beberapa bagian"
WARNING_REPEATED = "Terdeteksi kalimat yang berulang, periksa kembali konten"
WARNING_OVERGENERALIZATION = "Hindari generalisasi yang terlalu luas"


@dataclass(frozen=True)
class QualityScore:
    """Six heuristic sub-scores in [0, 10] and their weighted ``overall``."""

    readability: float
    structure: float
    engagement: float
    seo: float
    originality: float
    factual_accuracy: float
    overall: float = field(init=False)

    def __post_init__(self) -> None:
        weighted = sum(weight * getattr(self, name) for name, weight in SCORE_WEIGHTS.items())
        object.__setattr__(self, "overall", round(weighted, 1))

    def subscores(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in SCORE_WEIGHTS}


@dataclass(frozen=True)
class QualityAnalysis:
    score: QualityScore
    suggestions: list[str]
    warnings: list[str]
    strengths: list[str]


def score(text: str, content_type: ContentType | str, topic: str) -> QualityScore:
    return QualityScore(
        readability=readability_score(text),
        structure=structure_score(text, content_type),
        engagement=engagement_score(text, content_type),
        seo=seo_score(text, topic),
        originality=originality_score(text),
        factual_accuracy=factual_accuracy_score(text),
    )


def count_repeated_sentences(text: str) -> int:
    normalized = [sentence.strip().lower() for sentence in split_sentences(text)]
    return len(normalized) - len(set(normalized))


class ContentQualityAnalyzer:
    """Score a text and turn the sub-scores into suggestions, warnings and strengths.

    Stateless; one instance can be shared across requests.
    """

    def analyze(self, text: str, content_type: ContentType | str, topic: str) -> QualityAnalysis:
        quality = score(text, content_type, topic)
        analysis = QualityAnalysis(
            score=quality,
            suggestions=self.suggestions(quality),
            warnings=self.warnings(text),
            strengths=self.strengths(quality),
        )
        logger.debug(
            "Analyzed %s chars of %s: overall %s", len(text), enum_value(content_type), quality.overall
        )
        return analysis

    @staticmethod
    def suggestions(quality: QualityScore) -> list[str]:
        subscores = quality.subscores()
        suggestions: list[str] = []
        for name, threshold, messages in SUGGESTION_RULES:
            if subscores[name] < threshold:
                suggestions.extend(messages)
        return suggestions

    @staticmethod
    def warnings(text: str) -> list[str]:
        warnings: list[str] = []
        if len(text) < MIN_CONTENT_CHARS:
            warnings.append(WARNING_TOO_SHORT)
        if len(text) > MAX_CONTENT_CHARS:
            warnings.append(WARNING_TOO_LONG)
        if count_repeated_sentences(text) >= REPEATED_SENTENCE_LIMIT:
            warnings.append(WARNING_REPEATED)
        lowered = text.lower()
        if any(word in lowered for word in OVERGENERALIZATIONS):
            warnings.append(WARNING_OVERGENERALIZATION)
        return warnings

    @staticmethod
    def strengths(quality: QualityScore) -> list[str]:
        subscores = quality.subscores()
        return [
            message
            for name, message in STRENGTH_MESSAGES.items()
            if subscores[name] >= STRENGTH_THRESHOLD
        ]

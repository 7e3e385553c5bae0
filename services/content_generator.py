from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass, field, replace

from services.content_enhancer import MAX_ALTERNATIVES, ContentEnhancerService
from services.content_types import ContentType, LengthClass, WritingStyle, enum_value
from services.quality_analyzer import ContentQualityAnalyzer, QualityAnalysis
from services.templates import template_structure
from services.text_generator import TextGenerationError, TextGenerator

logger = logging.getLogger(__name__)

MAX_TOPIC_CHARS = 200
WORDS_PER_MINUTE = 200

SYSTEM_PROMPT_BASE = (
    "Anda adalah AI content creator expert yang menghasilkan konten berkualitas tinggi "
    "dalam bahasa Indonesia."
)

SYSTEM_PROMPT_TEMPLATE = """
{base} Anda memiliki keahlian sebagai {expertise}.

Prinsip penulisan Anda:
1. Selalu mengutamakan kualitas dan akurasi informasi
2. Menggunakan bahasa Indonesia yang baik, benar, dan sesuai konteks
3. Membuat konten yang engaging dan mudah dipahami target audience
4. Mengoptimalkan struktur konten untuk keterbacaan maksimal
5. Menghindari plagiarisme dan selalu memberikan perspektif original
""".strip()

USER_PROMPT_TEMPLATE = """
Buat {content_type} tentang "{topic}" dengan gaya {writing_style}.

STRUKTUR TEMPLATE:
{structure}

REQUIREMENTS:
- Panjang: {length}
- Gaya: {writing_style}
- Kualitas: Premium dan professional
""".strip()

USER_PROMPT_CHECKLIST = """
Pastikan konten:
1. Original dan tidak klise
2. Informatif dan bernilai tinggi
3. Engaging dari awal hingga akhir
4. Terstruktur dengan baik
5. Sesuai dengan target audience dan tujuan konten
""".strip()

EXPERTISE = {
    ContentType.article: "jurnalis dan penulis artikel profesional",
    ContentType.school_assignment: "akademisi dan pendidik berpengalaman",
    ContentType.book_summary: "kritikus sastra dan reviewer buku",
    ContentType.instagram_caption: "social media specialist dan content creator",
    ContentType.formal_email: "komunikasi bisnis dan professional writer",
}

ITERATION_APPROACHES = (
    "Gunakan pendekatan yang lebih data-driven dan faktual",
    "Fokus pada storytelling dan narrative yang kuat",
    "Emphasize pada practical tips dan actionable insights",
)

LENGTH_REQUIREMENTS = {
    LengthClass.short: "200-500 kata",
    LengthClass.medium: "500-1000 kata",
    LengthClass.long: "1000-2000 kata",
}

MAX_OUTPUT_TOKENS = {
    LengthClass.short: 800,
    LengthClass.medium: 1500,
    LengthClass.long: 2500,
}

VALIDATION_MESSAGE = "Semua field harus diisi"
TOPIC_TOO_LONG_MESSAGE = f"Topik maksimal {MAX_TOPIC_CHARS} karakter"
INVALID_CHOICE_MESSAGE = "Pilihan {field} tidak valid"
GENERATION_FAILED_MESSAGE = "Terjadi kesalahan saat generate konten. Silakan coba lagi."


class ContentValidationError(ValueError):
    """Raised when a generation request is incomplete or malformed."""


class ContentGenerationError(RuntimeError):
    """Raised when content generation fails in the main generation loop."""


@dataclass(frozen=True)
class GenerationRequest:
    topic: str
    content_type: ContentType | str
    writing_style: WritingStyle | str
    template: str
    target_audience: str | None = None
    tone: str | None = None
    length: LengthClass | str = LengthClass.medium
    include_examples: bool = False
    include_sources: bool = False
    seo_keywords: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class GenerationMetadata:
    word_count: int
    reading_time_minutes: int
    generation_time_ms: int
    iterations: int


@dataclass(frozen=True)
class GenerationResult:
    content: str
    quality_analysis: QualityAnalysis
    alternatives: list[str]
    metadata: GenerationMetadata
    is_demo: bool = False


def build_metadata(content: str, started_at: float, iterations: int) -> GenerationMetadata:
    word_count = len(content.split())
    return GenerationMetadata(
        word_count=word_count,
        reading_time_minutes=math.ceil(word_count / WORDS_PER_MINUTE),
        generation_time_ms=int((time.perf_counter() - started_at) * 1000),
        iterations=iterations,
    )


def validate_request(request: GenerationRequest) -> GenerationRequest:
    """Check the four primary fields and coerce enum-valued ones."""
    primary = (request.topic, request.content_type, request.writing_style, request.template)
    if not all(isinstance(value, str) and value.strip() for value in primary):
        raise ContentValidationError(VALIDATION_MESSAGE)

    topic = request.topic.strip()
    if len(topic) > MAX_TOPIC_CHARS:
        raise ContentValidationError(TOPIC_TOO_LONG_MESSAGE)

    try:
        content_type = ContentType(request.content_type)
    except ValueError as exc:
        raise ContentValidationError(INVALID_CHOICE_MESSAGE.format(field="tipe konten")) from exc
    try:
        writing_style = WritingStyle(request.writing_style)
    except ValueError as exc:
        raise ContentValidationError(INVALID_CHOICE_MESSAGE.format(field="gaya penulisan")) from exc
    try:
        length = LengthClass(request.length)
    except ValueError as exc:
        raise ContentValidationError(INVALID_CHOICE_MESSAGE.format(field="panjang konten")) from exc

    return replace(
        request,
        topic=topic,
        content_type=content_type,
        writing_style=writing_style,
        length=length,
        template=request.template.strip(),
    )


def build_system_prompt(request: GenerationRequest) -> str:
    expertise = EXPERTISE.get(request.content_type, "content creator profesional")
    prompt = SYSTEM_PROMPT_TEMPLATE.format(base=SYSTEM_PROMPT_BASE, expertise=expertise)
    if request.target_audience:
        prompt += f"\n\nTarget audience: {request.target_audience}"
    if request.tone:
        prompt += f"\nTone yang diinginkan: {request.tone}"
    return prompt


def build_user_prompt(request: GenerationRequest, iteration: int) -> str:
    prompt = USER_PROMPT_TEMPLATE.format(
        content_type=enum_value(request.content_type),
        topic=request.topic,
        writing_style=enum_value(request.writing_style),
        structure=template_structure(request.template),
        length=LENGTH_REQUIREMENTS[request.length],
    )

    if request.include_examples:
        prompt += "\n- Sertakan contoh konkret dan relevan"
    if request.include_sources:
        prompt += "\n- Tambahkan referensi atau sumber (gunakan format umum, bukan URL spesifik)"
    if request.seo_keywords:
        keywords = ", ".join(request.seo_keywords)
        prompt += f"\n- Optimasi untuk kata kunci: {keywords} (gunakan secara natural)"

    if iteration > 0:
        approach = ITERATION_APPROACHES[(iteration - 1) % len(ITERATION_APPROACHES)]
        prompt += f"\n\nPENDEKATAN KHUSUS: {approach}"

    return f"{prompt}\n\n{USER_PROMPT_CHECKLIST}"


class ContentGeneratorService:
    """Generate Indonesian content as the best of several scored drafts.

    Each call to :meth:`generate` requests up to ``max_iterations`` drafts,
    keeps the first draft with the highest overall quality score, stops early
    once a draft reaches ``quality_threshold``, runs one enhancement pass when
    the best draft is below ``enhancement_threshold`` and finally asks for
    alternative phrasings. Only failures while drafting are fatal.
    """

    def __init__(
        self,
        generator: TextGenerator,
        analyzer: ContentQualityAnalyzer | None = None,
        enhancer: ContentEnhancerService | None = None,
        max_iterations: int = 3,
        quality_threshold: float = 8.5,
        enhancement_threshold: float = 8.0,
        alternative_count: int = 2,
    ) -> None:
        if max_iterations < 1:
            raise ValueError("max_iterations must be at least 1")
        self._generator = generator
        self._analyzer = analyzer or ContentQualityAnalyzer()
        self._enhancer = enhancer or ContentEnhancerService(generator)
        self._max_iterations = max_iterations
        self._quality_threshold = quality_threshold
        self._enhancement_threshold = enhancement_threshold
        self._alternative_count = min(max(alternative_count, 0), MAX_ALTERNATIVES)

    async def _draft(self, request: GenerationRequest, iteration: int) -> str:
        return await self._generator.complete(
            build_system_prompt(request),
            build_user_prompt(request, iteration),
            max_output_tokens=MAX_OUTPUT_TOKENS[request.length],
            temperature=round(0.7 + iteration * 0.1, 2),
        )

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        request = validate_request(request)
        started_at = time.perf_counter()

        best_content: str | None = None
        best_score = 0.0
        iterations = 0

        for iteration in range(self._max_iterations):
            iterations += 1
            try:
                candidate = await self._draft(request, iteration)
            except TextGenerationError as exc:
                logger.error("Draft %s failed for topic %r: %s", iteration + 1, request.topic, exc)
                raise ContentGenerationError(GENERATION_FAILED_MESSAGE) from exc

            analysis = self._analyzer.analyze(candidate, request.content_type, request.topic)
            overall = analysis.score.overall
            logger.info("Draft %s scored %.1f", iteration + 1, overall)

            if best_content is None or overall > best_score:
                best_content = candidate
                best_score = overall

            if overall >= self._quality_threshold:
                break

        if best_content is None:
            raise ContentGenerationError(GENERATION_FAILED_MESSAGE)

        if best_score < self._enhancement_threshold:
            enhanced = await self._enhancer.enhance(best_content, enum_value(request.content_type))
            if enhanced.improvement_score > 0:
                logger.info("Adopting enhanced draft (improvement %.1f)", enhanced.improvement_score)
                best_content = enhanced.enhanced_content

        alternatives: list[str] = []
        if self._alternative_count:
            alternatives = await self._enhancer.generate_alternatives(
                best_content,
                enum_value(request.content_type),
                count=self._alternative_count,
            )

        final_analysis = self._analyzer.analyze(best_content, request.content_type, request.topic)

        return GenerationResult(
            content=best_content,
            quality_analysis=final_analysis,
            alternatives=alternatives,
            metadata=build_metadata(best_content, started_at, iterations),
        )

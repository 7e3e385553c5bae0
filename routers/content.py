from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from app.core.config import Settings, get_settings
from routers.dependencies import get_generation_log, get_text_generator
from schemas.content_generation import (
    ContentGenerationRequest,
    ContentGenerationResponse,
    GenerationMetadataResponse,
    SavedContentResponse,
    SEOOptimizationRequest,
    SEOOptimizationResponse,
)
from schemas.quality import ContentAnalysisRequest, QualityAnalysisResponse
from services.content_enhancer import ContentEnhancerService
from services.content_generator import (
    GENERATION_FAILED_MESSAGE,
    ContentGenerationError,
    ContentGeneratorService,
    ContentValidationError,
    GenerationResult,
)
from services.demo_generator import build_demo_result
from services.generation_log import GenerationLog
from services.quality_analyzer import ContentQualityAnalyzer
from services.saved_content import SavedContent, to_saved_content
from services.text_generator import TextGenerator

logger = logging.getLogger(__name__)

router = APIRouter(tags=["content"])

AI_NOT_CONFIGURED_MESSAGE = "Layanan AI belum dikonfigurasi."


def _to_saved_response(saved: SavedContent) -> SavedContentResponse:
    return SavedContentResponse(
        id=saved.id,
        title=saved.title,
        content_type=saved.content_type,
        writing_style=saved.writing_style,
        tags=saved.tags,
        is_favorite=saved.is_favorite,
        language=saved.language,
        created_at=saved.created_at,
        word_count=saved.word_count,
        reading_time_minutes=saved.reading_time_minutes,
    )


def _to_response(
    result: GenerationResult,
    saved: SavedContent | None = None,
) -> ContentGenerationResponse:
    return ContentGenerationResponse(
        content=result.content,
        quality_analysis=QualityAnalysisResponse.from_analysis(result.quality_analysis),
        alternatives=result.alternatives,
        metadata=GenerationMetadataResponse(
            word_count=result.metadata.word_count,
            reading_time_minutes=result.metadata.reading_time_minutes,
            generation_time_ms=result.metadata.generation_time_ms,
            iterations=result.metadata.iterations,
        ),
        is_demo_mode=result.is_demo,
        saved_content=_to_saved_response(saved) if saved else None,
    )


@router.post("/generate-content", response_model=ContentGenerationResponse)
async def generate_content(
    payload: ContentGenerationRequest,
    settings: Settings = Depends(get_settings),
    generator: TextGenerator | None = Depends(get_text_generator),
    generation_log: GenerationLog = Depends(get_generation_log),
) -> ContentGenerationResponse:
    request = payload.to_generation_request()
    started_at = time.perf_counter()

    try:
        if generator is None:
            result = build_demo_result(request)
        else:
            service = ContentGeneratorService(
                generator,
                max_iterations=settings.max_iterations,
                quality_threshold=settings.quality_threshold,
                enhancement_threshold=settings.enhancement_threshold,
                alternative_count=settings.alternative_count,
            )
            result = await service.generate(request)
    except ContentValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except ContentGenerationError as exc:
        logger.warning("Content generation failed for %r: %s", request.topic, exc.__cause__ or exc)
        generation_log.record_failure(
            topic=request.topic,
            content_type=request.content_type,
            error=str(exc.__cause__ or exc),
            processing_time_seconds=time.perf_counter() - started_at,
        )
        raise HTTPException(status_code=502, detail=GENERATION_FAILED_MESSAGE) from exc

    generation_log.record_result(result, topic=request.topic, content_type=request.content_type)

    saved = None
    if payload.save:
        saved = to_saved_content(
            result,
            content_type=payload.content_type,
            writing_style=payload.writing_style,
            title=payload.title,
            tags=payload.tags,
        )
        logger.info("Built saved content record %s for %r", saved.id, request.topic)
    return _to_response(result, saved)


@router.post("/analyze-content", response_model=QualityAnalysisResponse)
async def analyze_content(payload: ContentAnalysisRequest) -> QualityAnalysisResponse:
    analysis = ContentQualityAnalyzer().analyze(payload.content, payload.content_type, payload.topic)
    return QualityAnalysisResponse.from_analysis(analysis)


@router.post("/optimize-seo", response_model=SEOOptimizationResponse)
async def optimize_seo(
    payload: SEOOptimizationRequest,
    generator: TextGenerator | None = Depends(get_text_generator),
) -> SEOOptimizationResponse:
    if generator is None:
        raise HTTPException(status_code=503, detail=AI_NOT_CONFIGURED_MESSAGE)

    keywords = [item.strip() for item in payload.keywords if item.strip()]
    if not keywords:
        raise HTTPException(status_code=400, detail="Kata kunci tidak boleh kosong.")

    optimized = await ContentEnhancerService(generator).optimize_for_seo(payload.content, keywords)
    return SEOOptimizationResponse(content=optimized)

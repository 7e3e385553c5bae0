from __future__ import annotations

import math
import time
from pathlib import Path

from fastapi import Depends, HTTPException, Request
from limits import parse
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.config import Settings, get_settings
from services.generation_log import GenerationLog
from services.text_generator import OpenAITextGenerator, TextGenerator

RATE_LIMIT_MESSAGE = "Terlalu banyak permintaan, coba lagi nanti"


def get_text_generator(settings: Settings = Depends(get_settings)) -> TextGenerator | None:
    """The live model client, or ``None`` when no API key is configured (demo mode)."""
    if not settings.openai_configured:
        return None
    return OpenAITextGenerator(api_key=settings.openai_api_key, model=settings.openai_model)


def get_generation_log(settings: Settings = Depends(get_settings)) -> GenerationLog:
    return GenerationLog(Path(settings.output_path))


def enforce_rate_limit(request: Request, settings: Settings = Depends(get_settings)) -> None:
    """Count the request against ``settings.rate_limit`` per client address and path."""
    limiter: Limiter = request.app.state.limiter
    item = parse(settings.rate_limit)
    identifiers = (get_remote_address(request), request.url.path)
    if limiter.limiter.hit(item, *identifiers):
        return

    reset_time, _ = limiter.limiter.get_window_stats(item, *identifiers)
    retry_after = max(0, math.ceil(reset_time - time.time()))
    raise HTTPException(
        status_code=429,
        detail=RATE_LIMIT_MESSAGE,
        headers={"Retry-After": str(retry_after)},
    )

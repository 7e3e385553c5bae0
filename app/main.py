import logging
import time

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.middleware.httpsredirect import HTTPSRedirectMiddleware
from starlette.middleware.trustedhost import TrustedHostMiddleware

from app.core.config import Settings, get_settings
from app.core.logging_config import configure_logging
from routers import content, reports, templates
from routers.dependencies import enforce_rate_limit

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "X-XSS-Protection": "0",
    "Permissions-Policy": "geolocation=(), microphone=(), camera=()",
}


def _install_middleware(app: FastAPI, settings: Settings) -> None:
    if settings.environment == "production":
        app.add_middleware(HTTPSRedirectMiddleware)

    app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.allowed_hosts)
    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins or ["*"],
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
    )

    # Counters for enforce_rate_limit, one in-memory store per app.
    app.state.limiter = Limiter(key_func=get_remote_address)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the AI Writer Pro API. Without an OpenAI key every generation is served in demo mode."""
    if settings is None:
        settings = get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.project_name,
        docs_url="/docs" if settings.enable_docs else None,
        redoc_url="/redoc" if settings.enable_docs else None,
        openapi_url="/openapi.json" if settings.enable_docs else None,
    )
    app.dependency_overrides[get_settings] = lambda: settings
    _install_middleware(app, settings)

    @app.middleware("http")
    async def log_and_harden(request: Request, call_next):  # type: ignore[no-untyped-def]
        started_at = time.perf_counter()
        response = await call_next(request)
        response.headers.update(SECURITY_HEADERS)
        logger.info(
            "%s %s -> %s (%.0f ms)",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - started_at) * 1000,
        )
        return response

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, object]:
        return {"status": "ok", "demo_mode": not settings.openai_configured}

    for module in (content, templates, reports):
        app.include_router(
            module.router,
            prefix=settings.api_v1_prefix,
            dependencies=[Depends(enforce_rate_limit)],
        )

    if not settings.openai_configured:
        logger.warning("AIWRITER_OPENAI_API_KEY is not set; generation runs in demo mode")
    return app

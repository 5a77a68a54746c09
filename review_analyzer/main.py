"""Review Analyzer — FastAPI application factory."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from review_analyzer.adapters.llm.openai_adapter import OpenAIAdapter
from review_analyzer.config import Settings, settings
from review_analyzer.infrastructure.api.errors import register_error_handlers
from review_analyzer.infrastructure.api.routes_analyze import router as analyze_router
from review_analyzer.infrastructure.api.routes_health import router as health_router

logger = logging.getLogger(__name__)


def configure_logging(app_settings: Settings) -> None:
    level = logging.DEBUG if app_settings.debug else app_settings.log_level.upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s | %(message)s")


def create_app(app_settings: Settings | None = None) -> FastAPI:
    app_settings = app_settings or settings
    configure_logging(app_settings)

    app = FastAPI(
        title="Review Analyzer",
        description="Sentiment, emotion and key-insight analysis of customer reviews",
        version="0.1.0",
    )

    # CORS for the Next.js frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = app_settings
    app.state.llm_adapter = OpenAIAdapter(settings=app_settings)

    register_error_handlers(app)

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(analyze_router, prefix="/api")

    if not app_settings.openai_configured:
        logger.warning("OPENAI_API_KEY is not configured; /api/analyze will fail")

    return app


app = create_app()

"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from src.agents.code_reviewer import (
    GeminiTextGenerator,
    TextGenerator,
    build_code_review_agent,
)
from src.api import review
from src.config.settings import Settings, settings
from src.services.review_gateway import ReviewGateway
from src.utils.cors import OriginGuardMiddleware
from src.utils.logging import setup_observability

VERSION = "0.1.0"

# Setup logging and observability
logfire_enabled = setup_observability()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    config: Settings = app.state.settings
    logger.info(
        f"Starting Code Review Gateway in {config.environment} environment "
        f"(model: {config.gemini_model})"
    )

    yield

    logger.info("Shutting down Code Review Gateway")


def create_app(
    config: Settings = settings, generator: TextGenerator | None = None
) -> FastAPI:
    """Build the application and its review gateway.

    Args:
        config: Settings to build from
        generator: Text generator to use instead of the Gemini agent

    Raises:
        MissingCredentialError: If no generator is given and GOOGLE_GEMINI_KEY is unset
    """
    if generator is None:
        generator = GeminiTextGenerator(build_code_review_agent(config))

    app = FastAPI(
        title="Code Review Gateway",
        description="Relays code snippets to Google Gemini for review feedback",
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.settings = config
    app.state.review_gateway = ReviewGateway(
        generator, timeout_seconds=config.review_timeout_seconds
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    # Added last so it wraps CORSMiddleware and rejects unknown origins first
    app.add_middleware(
        OriginGuardMiddleware, allowed_origins=config.cors_allowed_origins
    )

    app.include_router(review.router)

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        """Root endpoint."""
        return "Hello World"

    @app.get("/health")
    async def health_check() -> dict[str, str | bool]:
        """Health check endpoint with configuration status."""
        return {
            "status": "healthy",
            "environment": config.environment,
            "version": VERSION,
            "gemini_configured": bool(config.google_gemini_key),
            "model": config.gemini_model,
            "logfire_enabled": logfire_enabled,
        }

    return app


# Fails at import when GOOGLE_GEMINI_KEY is missing, before any request is served
app = create_app()

# Instrument FastAPI with Logfire if configured
if logfire_enabled:
    import logfire

    logfire.instrument_fastapi(app)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)

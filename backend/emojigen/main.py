"""FastAPI application entry point."""
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from emojigen.core.config import get_settings
from emojigen.core.logging import setup_logging

# Setup logging
logger = setup_logging("emojigen")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Initialize services at startup, clean up at shutdown."""
    settings = get_settings()
    owned = None
    # Tests may install their own service before startup.
    if getattr(app.state, "emoji_service", None) is None:
        try:
            from emojigen.services.emoji import EmojiGenerationService

            service = EmojiGenerationService.from_settings(settings)
            await service.client.initialize()
            app.state.emoji_service = owned = service
            logger.info("Services initialized successfully")
        except Exception as exc:
            logger.error(
                "Service initialization failed, running in degraded mode",
                exc_info=True,
                extra={"component": "main", "error_type": type(exc).__name__},
            )
            # Continue without services; endpoints return 503 until fixed

    yield

    if owned is not None:
        await owned.client.close()
        del app.state.emoji_service


# Create FastAPI app
app = FastAPI(
    title="Emoji Generator API",
    description="Validates, enhances and dispatches AI emoji generation requests",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS configuration
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=[f"http://localhost:{settings.frontend_port}"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
from emojigen.api.emoji import router as emoji_router  # noqa: E402

app.include_router(emoji_router)


@app.get("/health")
async def health_check(request: Request) -> dict:
    """Health check endpoint.

    Always returns HTTP 200; check `services.emoji_generation` for actual status.
    """
    svc = getattr(request.app.state, "emoji_service", None)

    logger.info("Health check requested")
    return {
        "status": "ok",
        "version": app.version,
        "services": {
            "emoji_generation": "ok" if svc is not None else "unavailable",
        },
    }

"""Emoji generation API router."""
import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from emojigen.core.config import get_settings
from emojigen.models.emoji import (
    BatchRequest,
    BatchResponse,
    CatalogResponse,
    DataProcessingInfo,
    GenerateEmojiRequest,
    GenerationRequest,
    GenerationResult,
    IdentityUpdate,
    ValidatePromptRequest,
    ValidationOutcome,
)
from emojigen.services.emoji import EmojiGenerationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/emoji", tags=["emoji"])


def get_emoji_service(request: Request) -> EmojiGenerationService:
    """FastAPI dependency: retrieve EmojiGenerationService from app.state.

    Returns HTTP 503 if the service was not initialized at startup.
    """
    svc: EmojiGenerationService | None = getattr(request.app.state, "emoji_service", None)
    if svc is None:
        raise HTTPException(
            status_code=503,
            detail="Emoji generation unavailable. Service not initialized.",
        )
    return svc


@router.post("/generate", response_model=GenerationResult)
async def generate_emoji(
    body: GenerateEmojiRequest,
    service: EmojiGenerationService = Depends(get_emoji_service),
) -> GenerationResult:
    """Generate a single emoji.

    Generation failures (invalid prompt, proxy error, transport fault) are
    returned as ``success: false`` with HTTP 200.
    """
    request = GenerationRequest(
        prompt=body.prompt, style=body.style, category=body.category, size=body.size
    )
    return await service.generate_emoji(request, caller_id=body.user_id)


@router.post("/batch", response_model=BatchResponse)
async def generate_batch(
    body: BatchRequest,
    service: EmojiGenerationService = Depends(get_emoji_service),
) -> BatchResponse:
    """Generate several emojis; results keep the order of ``requests``.

    Raises:
        HTTPException 422: More requests than MAX_BATCH_SIZE.
    """
    max_batch_size = get_settings().max_batch_size
    if len(body.requests) > max_batch_size:
        raise HTTPException(
            status_code=422,
            detail=f"Too many requests in batch (max {max_batch_size}).",
        )
    results = await service.generate_batch(body.requests, caller_id=body.user_id)
    return BatchResponse(results=results)


@router.post("/validate", response_model=ValidationOutcome)
async def validate_prompt(
    body: ValidatePromptRequest,
    service: EmojiGenerationService = Depends(get_emoji_service),
) -> ValidationOutcome:
    return service.validate_prompt(body.prompt)


@router.get("/catalog", response_model=CatalogResponse)
async def get_catalog(
    service: EmojiGenerationService = Depends(get_emoji_service),
) -> CatalogResponse:
    """Styles, categories and sizes for the UI selection controls."""
    return CatalogResponse(
        styles=service.available_styles(),
        categories=service.available_categories(),
        sizes=service.available_sizes(),
    )


@router.get("/privacy", response_model=DataProcessingInfo)
async def get_privacy_info(
    service: EmojiGenerationService = Depends(get_emoji_service),
) -> DataProcessingInfo:
    return service.data_processing_info()


@router.put("/identity")
async def set_identity(
    body: IdentityUpdate,
    service: EmojiGenerationService = Depends(get_emoji_service),
) -> dict:
    """Set the caller identity used by requests that carry no ``user_id``.

    Called by the client on sign-in and sign-out.
    """
    service.set_user_id(body.user_id)
    logger.info("Caller identity updated", extra={"caller_id": body.user_id})
    return {"user_id": service.user_id}

"""EmojiGenerationService: entry point of the emoji generation pipeline."""
import logging
from typing import Any, Optional, Sequence

from emojigen.core.config import Settings
from emojigen.models.emoji import (
    DataProcessingInfo,
    EmojiCategory,
    EmojiSize,
    EmojiStyle,
    GenerationRequest,
    GenerationResult,
    ValidationOutcome,
)
from emojigen.services.batch import DEFAULT_WINDOW_SIZE, BatchCoordinator
from emojigen.services.client import GenerationClient
from emojigen.services.enhancer import PromptEnhancer
from emojigen.services.validator import STRICT_RULES, PromptValidator, build_rules

logger = logging.getLogger(__name__)

ANONYMOUS_USER_ID = "anonymous"

USER_RIGHTS = [
    "Right to access your data",
    "Right to rectification of inaccurate data",
    "Right to erasure (right to be forgotten)",
    "Right to data portability",
    "Right to object to processing",
    "Right to withdraw consent at any time",
]


class EmojiGenerationService:
    """Validates, enhances and dispatches emoji generation requests.

    Responsibilities:
    1. Reject invalid prompts before any network call
    2. Build the enhanced prompt from style/category/size
    3. Send it through GenerationClient and return the normalized result
    4. Run batches through BatchCoordinator with bounded concurrency
    5. Hold the current caller identity used when none is passed explicitly

    The identity is captured when a call starts, so set_user_id() never
    affects calls already in flight.
    """

    def __init__(
        self,
        client: GenerationClient,
        validator: Optional[PromptValidator] = None,
        enhancer: Optional[PromptEnhancer] = None,
        window_size: int = DEFAULT_WINDOW_SIZE,
        user_id: str = ANONYMOUS_USER_ID,
        generation_provider: str = "Google Cloud Platform (Gemini API)",
    ) -> None:
        self.client = client
        self.validator = validator or PromptValidator(STRICT_RULES)
        self.enhancer = enhancer or PromptEnhancer()
        self.coordinator = BatchCoordinator(window_size)
        self.generation_provider = generation_provider
        self._user_id = user_id

    @classmethod
    def from_settings(cls, settings: Settings) -> "EmojiGenerationService":
        """Wire a service and its HTTP client from application settings."""
        rules = build_rules(
            settings.prompt_rules,
            min_length=settings.prompt_min_length,
            max_length=settings.prompt_max_length,
        )
        client = GenerationClient(
            str(settings.generation_proxy_url),
            timeout=settings.request_timeout_seconds,
        )
        return cls(
            client=client,
            validator=PromptValidator(rules),
            window_size=settings.batch_window_size,
            user_id=settings.default_user_id,
            generation_provider=settings.generation_provider,
        )

    @property
    def user_id(self) -> str:
        return self._user_id

    def set_user_id(self, user_id: str) -> None:
        """Replace the identity used by subsequent calls without an explicit caller_id."""
        self._user_id = user_id

    def validate_prompt(self, prompt: str) -> ValidationOutcome:
        return self.validator.validate(prompt)

    async def generate_emoji(
        self, request: GenerationRequest, caller_id: Optional[str] = None
    ) -> GenerationResult:
        """Generate one emoji.

        Args:
            request: Prompt, style, category and size.
            caller_id: Identity forwarded to the proxy; defaults to the
                service's current user id.

        Returns:
            GenerationResult. Invalid prompts fail without a network call.
        """
        identity = caller_id or self._user_id
        return await self._generate(request, identity)

    async def generate_batch(
        self, requests: Sequence[GenerationRequest], caller_id: Optional[str] = None
    ) -> list[GenerationResult]:
        """Generate several emojis; ``result[i]`` corresponds to ``requests[i]``."""
        identity = caller_id or self._user_id
        logger.info(
            "batch: %d requests",
            len(requests),
            extra={"caller_id": identity, "window_size": self.coordinator.window_size},
        )

        async def worker(request: GenerationRequest) -> GenerationResult:
            return await self._generate(request, identity)

        return await self.coordinator.run_batch(requests, worker)

    async def _generate(self, request: GenerationRequest, identity: str) -> GenerationResult:
        outcome = self.validator.validate(request.prompt)
        if not outcome.valid:
            logger.info(
                "Prompt rejected: %s",
                outcome.reason,
                extra={"caller_id": identity},
            )
            return GenerationResult.failed(self.validator.describe(outcome))

        enhanced = self.enhancer.enhance(request)
        self.log_data_processing(
            identity,
            "emoji_generation",
            ["prompt_text", "user_id"],
            "consent",
            style=request.style.value,
            category=request.category,
        )
        result = await self.client.send(enhanced, request, identity)
        logger.info(
            "generate: success=%s",
            result.success,
            extra={
                "caller_id": identity,
                "style": request.style.value,
                "category": request.category,
            },
        )
        return result

    def available_styles(self) -> list[str]:
        return [style.value for style in EmojiStyle]

    def available_categories(self) -> list[str]:
        return [category.value for category in EmojiCategory]

    def available_sizes(self) -> list[str]:
        return [size.value for size in EmojiSize]

    def data_processing_info(self) -> DataProcessingInfo:
        """Describe how prompts and identities are processed, for display to the user."""
        return DataProcessingInfo(
            purpose="Generate custom emoji images based on user text prompts",
            legal_basis="User consent (Article 6(1)(a) GDPR)",
            data_retention="User data retained until account deletion or 2 years of inactivity",
            third_parties=[self.generation_provider],
            user_rights=list(USER_RIGHTS),
        )

    def log_data_processing(
        self,
        user_id: str,
        processing_type: str,
        data_categories: list[str],
        legal_basis: str,
        **additional_info: Any,
    ) -> None:
        """Emit one structured record of a data processing activity.

        Failures are logged and never propagate to the generation path.
        """
        try:
            logger.info(
                "data processing: %s",
                processing_type,
                extra={
                    "caller_id": user_id,
                    "processing_type": processing_type,
                    "data_categories": data_categories,
                    "legal_basis": legal_basis,
                    **additional_info,
                },
            )
        except Exception as exc:
            logger.error(
                "Failed to log data processing: %s",
                exc,
                extra={"component": "EmojiGenerationService", "error_type": type(exc).__name__},
            )

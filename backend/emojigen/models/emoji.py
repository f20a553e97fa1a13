"""Emoji generation data models."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class EmojiStyle(str, Enum):
    """Artistic styles supported by the generation service."""

    cartoon = "cartoon"
    realistic = "realistic"
    pixel = "pixel"
    anime = "anime"
    minimalist = "minimalist"


class EmojiSize(str, Enum):
    """Output sizes supported by the generation service."""

    small = "small"
    medium = "medium"
    large = "large"


class EmojiCategory(str, Enum):
    """Known emoji categories offered to the user."""

    face = "face"
    animal = "animal"
    food = "food"
    nature = "nature"
    activity = "activity"
    object = "object"
    symbol = "symbol"
    flag = "flag"
    custom = "custom"


class GenerationRequest(BaseModel):
    """A single emoji generation request, built by the caller and consumed once."""

    model_config = ConfigDict(frozen=True)

    # Emptiness and length are checked by PromptValidator, not here.
    prompt: str
    style: EmojiStyle
    # Free-form; looked up against EmojiCategory by the enhancer.
    category: str = Field(..., min_length=1)
    size: EmojiSize = EmojiSize.medium


class GenerationResult(BaseModel):
    """Normalized outcome of one generation call.

    ``image_url`` is set exactly when ``success`` is true, ``error`` exactly
    when it is false.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    success: bool
    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    error: Optional[str] = None
    generation_time_ms: Optional[float] = Field(default=None, alias="generationTimeMs")

    @model_validator(mode="after")
    def _check_payload(self) -> "GenerationResult":
        if self.success and (not self.image_url or self.error is not None):
            raise ValueError("successful result requires image_url and no error")
        if not self.success and (not self.error or self.image_url is not None):
            raise ValueError("failed result requires error and no image_url")
        return self

    @classmethod
    def ok(cls, image_url: str, generation_time_ms: Optional[float] = None) -> "GenerationResult":
        return cls(success=True, image_url=image_url, generation_time_ms=generation_time_ms)

    @classmethod
    def failed(cls, error: str) -> "GenerationResult":
        return cls(success=False, error=error)


class ValidationOutcome(BaseModel):
    """Result of validating a raw prompt."""

    valid: bool
    reason: Optional[str] = None  # "empty" | "too short" | "too long" | "inappropriate content"
    suggestions: list[str] = Field(default_factory=list)


class PromptRules(BaseModel):
    """Configuration of the prompt validator.

    Blocklist entries are regular expressions matched case-insensitively.
    """

    model_config = ConfigDict(frozen=True)

    min_length: int = Field(default=1, ge=1)
    max_length: int = Field(default=200, ge=1)
    blocklist: tuple[str, ...] = ()

    @model_validator(mode="after")
    def _check_bounds(self) -> "PromptRules":
        if self.min_length > self.max_length:
            raise ValueError("min_length must not exceed max_length")
        return self


class GenerateEmojiRequest(GenerationRequest):
    """HTTP body for a single generation, with an optional caller identity."""

    user_id: Optional[str] = None


class BatchRequest(BaseModel):
    """HTTP body for batch generation."""

    requests: list[GenerationRequest] = Field(..., min_length=1)
    user_id: Optional[str] = None


class BatchResponse(BaseModel):
    """Results in the same order as the submitted requests."""

    results: list[GenerationResult]


class ValidatePromptRequest(BaseModel):
    prompt: str


class IdentityUpdate(BaseModel):
    user_id: str = Field(..., min_length=1)


class CatalogResponse(BaseModel):
    """Choices offered to the UI for style/category/size selection."""

    styles: list[str]
    categories: list[str]
    sizes: list[str]


class DataProcessingInfo(BaseModel):
    """Transparency record describing how prompts and identities are processed."""

    purpose: str
    legal_basis: str
    data_retention: str
    third_parties: list[str]
    user_rights: list[str]

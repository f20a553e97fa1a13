"""Prompt enhancement: style and category phrasing around the user's prompt."""
from emojigen.models.emoji import EmojiSize, EmojiStyle, GenerationRequest

STYLE_PROMPTS: dict[EmojiStyle, str] = {
    EmojiStyle.cartoon: "cartoon style, vibrant colors, simple shapes, friendly expression",
    EmojiStyle.realistic: "realistic style, detailed textures, natural lighting, photographic quality",
    EmojiStyle.pixel: "pixel art style, 8-bit aesthetic, retro gaming look, sharp edges",
    EmojiStyle.anime: "anime style, Japanese animation aesthetic, expressive eyes, clean lines",
    EmojiStyle.minimalist: "minimalist style, simple geometric shapes, clean design, limited colors",
}

CATEGORY_PROMPTS: dict[str, str] = {
    "face": "emoji face, expressive emotion",
    "smiley": "emoji face, expressive emotion",
    "animal": "cute animal, friendly expression",
    "food": "delicious food item, appetizing appearance",
    "nature": "natural element, organic shapes",
    "activity": "action or activity, dynamic pose",
    "object": "everyday object, clear silhouette",
    "symbol": "symbolic representation, universal meaning",
    "flag": "flag design, national colors",
}

GENERIC_CATEGORY_PROMPT = "emoji design"

SIZE_HINTS: dict[EmojiSize, str] = {
    EmojiSize.small: "Optimized for display at 64x64 pixels",
    EmojiSize.medium: "Optimized for display at 128x128 pixels",
    EmojiSize.large: "Optimized for display at 256x256 pixels",
}

REQUIREMENTS = (
    "Square format, suitable for emoji use",
    "Clear and recognizable at small sizes",
    "Transparent or solid background",
    "High quality, professional design",
    "Appropriate for all ages",
    "No text or words in the image",
)


def style_phrase(style: object) -> str:
    """Return the style description, falling back to the cartoon phrase."""
    try:
        return STYLE_PROMPTS[EmojiStyle(style)]
    except ValueError:
        return STYLE_PROMPTS[EmojiStyle.cartoon]


def category_phrase(category: str) -> str:
    """Return the category description, falling back to a generic phrase."""
    return CATEGORY_PROMPTS.get((category or "").strip().lower(), GENERIC_CATEGORY_PROMPT)


class PromptEnhancer:
    """Builds the final text sent to the generation service."""

    def enhance(self, request: GenerationRequest) -> str:
        """Compose the enhanced prompt for a request.

        The output names the category and style phrases, quotes the user's
        prompt verbatim (trimmed) and appends fixed generation constraints.
        Deterministic for a given request.

        Args:
            request: Generation parameters (prompt, style, category, size).

        Returns:
            Enhanced prompt text.
        """
        lines = [
            f"Create a {category_phrase(request.category)} emoji in {style_phrase(request.style)}.",
            f"The emoji should be: {request.prompt.strip()}",
            "",
            "Requirements:",
        ]
        lines.extend(f"- {item}" for item in REQUIREMENTS)
        size_hint = SIZE_HINTS.get(request.size)
        if size_hint:
            lines.append(f"- {size_hint}")
        return "\n".join(lines)

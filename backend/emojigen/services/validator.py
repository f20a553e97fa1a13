"""Prompt validation: length bounds, blocklist patterns and improvement hints."""
import re

from emojigen.models.emoji import PromptRules, ValidationOutcome

REASON_EMPTY = "empty"
REASON_TOO_SHORT = "too short"
REASON_TOO_LONG = "too long"
REASON_INAPPROPRIATE = "inappropriate content"

# Single-service check used by the generation facade.
STRICT_RULES = PromptRules(
    min_length=1,
    max_length=200,
    blocklist=(
        r"personal\s+data",
        r"private\s+information",
        r"copyright",
        r"trademark",
        r"nsfw",
        r"adult",
        r"violence",
    ),
)

# Long-form check with a minimum length and a wider word list.
EXTENDED_RULES = PromptRules(
    min_length=3,
    max_length=500,
    blocklist=(
        "violence",
        "hate",
        "discrimination",
        "nsfw",
        "adult",
        "explicit",
        "gore",
        "harassment",
        "bullying",
    ),
)

RULE_PRESETS: dict[str, PromptRules] = {
    "strict": STRICT_RULES,
    "extended": EXTENDED_RULES,
}

MAX_SUGGESTIONS = 2


class PromptValidator:
    """Checks raw prompt text against a set of PromptRules.

    Rules are applied in order and the first failure wins:
    empty, too short, too long, blocklisted content.
    """

    def __init__(self, rules: PromptRules = STRICT_RULES) -> None:
        self.rules = rules
        self._patterns = [re.compile(p, re.IGNORECASE) for p in rules.blocklist]

    def validate(self, prompt: str) -> ValidationOutcome:
        stripped = (prompt or "").strip()
        if not stripped:
            return ValidationOutcome(valid=False, reason=REASON_EMPTY)
        if len(stripped) < self.rules.min_length:
            return ValidationOutcome(valid=False, reason=REASON_TOO_SHORT)
        if len(prompt) > self.rules.max_length:
            return ValidationOutcome(valid=False, reason=REASON_TOO_LONG)
        if any(p.search(prompt) for p in self._patterns):
            return ValidationOutcome(valid=False, reason=REASON_INAPPROPRIATE)
        return ValidationOutcome(valid=True, suggestions=suggest_improvements(prompt))

    def describe(self, outcome: ValidationOutcome) -> str:
        """Return a user-facing message for a failed outcome."""
        if outcome.reason == REASON_EMPTY:
            return "Prompt cannot be empty"
        if outcome.reason == REASON_TOO_SHORT:
            return f"Prompt too short (min {self.rules.min_length} characters)"
        if outcome.reason == REASON_TOO_LONG:
            return f"Prompt is too long (max {self.rules.max_length} characters)"
        if outcome.reason == REASON_INAPPROPRIATE:
            return "Prompt contains inappropriate content"
        return "Invalid prompt"


def build_rules(preset: str, min_length: int | None = None, max_length: int | None = None) -> PromptRules:
    """Resolve a named preset, optionally overriding its length bounds."""
    base = RULE_PRESETS[preset]
    return PromptRules(
        min_length=min_length if min_length is not None else base.min_length,
        max_length=max_length if max_length is not None else base.max_length,
        blocklist=base.blocklist,
    )


def suggest_improvements(prompt: str) -> list[str]:
    """Return up to two hints for making a prompt more descriptive."""
    lowered = prompt.lower()
    suggestions = []
    if len(prompt) < 20:
        suggestions.append("Add more descriptive details")
    if "color" not in lowered and "colour" not in lowered:
        suggestions.append("Specify colors")
    if "style" not in lowered and "look" not in lowered:
        suggestions.append("Describe the artistic style")
    if "expression" not in lowered and "emotion" not in lowered:
        suggestions.append("Add emotional expression")
    return suggestions[:MAX_SUGGESTIONS]

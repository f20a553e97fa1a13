"""Generate emojis from the command line through the generation proxy.

This is a standalone script, independent of the FastAPI server. It runs the
same validation, enhancement and batching pipeline and prints the results
as JSON.

Usage:
    # from the project root
    python scripts/generate_emojis.py "a cute cat" "a slice of pizza" --category food
    python scripts/generate_emojis.py "a rocket" --style pixel --size large --user-id u123
    python scripts/generate_emojis.py "a cute cat" --dry-run   # print enhanced prompts only
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Optional, Sequence

# Put backend/ on the path when run as a standalone script
_BACKEND_PATH = Path(__file__).parent.parent / "backend"
if str(_BACKEND_PATH) not in sys.path:
    sys.path.insert(0, str(_BACKEND_PATH))

from emojigen.core.config import get_settings
from emojigen.core.logging import setup_logging
from emojigen.models.emoji import EmojiSize, EmojiStyle, GenerationRequest
from emojigen.services.emoji import EmojiGenerationService

# Logs go to stderr so stdout stays valid JSON
logger = setup_logging("emojigen", stream=sys.stderr)


def build_requests(
    prompts: Sequence[str], style: str, category: str, size: str
) -> list[GenerationRequest]:
    """Build one GenerationRequest per prompt with shared style/category/size."""
    return [
        GenerationRequest(
            prompt=prompt,
            style=EmojiStyle(style),
            category=category,
            size=EmojiSize(size),
        )
        for prompt in prompts
    ]


async def run(
    requests: Sequence[GenerationRequest],
    user_id: Optional[str] = None,
    window_size: Optional[int] = None,
) -> list[dict]:
    """Generate every request and return the results as JSON-ready dicts."""
    settings = get_settings()
    if window_size is not None:
        settings = settings.model_copy(update={"batch_window_size": window_size})

    service = EmojiGenerationService.from_settings(settings)
    async with service.client:
        results = await service.generate_batch(requests, caller_id=user_id)
    logger.info(
        "Generated %d of %d emojis",
        sum(1 for r in results if r.success),
        len(results),
    )
    return [result.model_dump(by_alias=True, exclude_none=True) for result in results]


def enhanced_prompts(requests: Sequence[GenerationRequest]) -> list[str]:
    """Return the enhanced prompt for each request without calling the proxy."""
    service = EmojiGenerationService.from_settings(get_settings())
    return [service.enhancer.enhance(request) for request in requests]


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate emojis through the configured generation proxy."
    )
    parser.add_argument("prompts", nargs="+", help="One prompt per emoji.")
    parser.add_argument(
        "--style",
        choices=[s.value for s in EmojiStyle],
        default=EmojiStyle.cartoon.value,
    )
    parser.add_argument("--category", default="custom")
    parser.add_argument(
        "--size",
        choices=[s.value for s in EmojiSize],
        default=EmojiSize.medium.value,
    )
    parser.add_argument("--user-id", default=None, help="Caller identity sent to the proxy.")
    parser.add_argument("--window-size", type=int, default=None, help="Concurrent requests per window.")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the enhanced prompts instead of calling the proxy.",
    )
    args = parser.parse_args(argv)

    if args.window_size is not None and args.window_size < 1:
        parser.error("--window-size must be at least 1")

    requests = build_requests(args.prompts, args.style, args.category, args.size)
    if args.dry_run:
        print(json.dumps(enhanced_prompts(requests), ensure_ascii=False, indent=2))
        return 0

    results = asyncio.run(run(requests, user_id=args.user_id, window_size=args.window_size))
    print(json.dumps(results, ensure_ascii=False, indent=2))
    return 0 if all(r["success"] for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())

"""Windowed concurrent execution of generation requests."""
import asyncio
import logging
from typing import Awaitable, Callable, Sequence

from emojigen.models.emoji import GenerationRequest, GenerationResult

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_SIZE = 3

Worker = Callable[[GenerationRequest], Awaitable[GenerationResult]]


class BatchCoordinator:
    """Runs requests in consecutive windows of at most ``window_size``.

    All requests of a window run concurrently; the next window starts only
    after every request of the current one has finished. Results keep the
    input order and one failure never cancels its siblings.
    """

    def __init__(self, window_size: int = DEFAULT_WINDOW_SIZE) -> None:
        if window_size < 1:
            raise ValueError("window_size must be at least 1")
        self.window_size = window_size

    async def run_batch(
        self, requests: Sequence[GenerationRequest], worker: Worker
    ) -> list[GenerationResult]:
        results: list[GenerationResult] = []
        for start in range(0, len(requests), self.window_size):
            window = requests[start : start + self.window_size]
            logger.debug(
                "Dispatching window %d (%d requests)",
                start // self.window_size,
                len(window),
                extra={"window": start // self.window_size, "window_size": len(window)},
            )
            outcomes = await asyncio.gather(
                *(worker(request) for request in window), return_exceptions=True
            )
            results.extend(self._to_result(outcome) for outcome in outcomes)
        return results

    @staticmethod
    def _to_result(outcome: object) -> GenerationResult:
        if isinstance(outcome, GenerationResult):
            return outcome
        if isinstance(outcome, Exception):
            logger.error(
                "Batch item failed: %s: %s",
                type(outcome).__name__,
                outcome,
                extra={"component": "BatchCoordinator", "error_type": type(outcome).__name__},
            )
            return GenerationResult.failed(str(outcome) or "Failed to generate emoji")
        if isinstance(outcome, BaseException):
            # Cancellation is not swallowed.
            raise outcome
        raise TypeError(f"worker returned {type(outcome).__name__}, expected GenerationResult")

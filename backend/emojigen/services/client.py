"""HTTP client for the remote emoji generation proxy."""
import logging
import time
from typing import Any, Optional

import httpx

from emojigen.models.emoji import GenerationRequest, GenerationResult

logger = logging.getLogger(__name__)

FALLBACK_ERROR = "Failed to generate emoji"


class GenerationClient:
    """Performs one request/response cycle against the generation proxy.

    ``send`` never raises: HTTP errors, service-reported failures and
    transport faults are all normalized to a failed GenerationResult.

    Usage:
        async with GenerationClient(url) as client:
            result = await client.send(enhanced, request, caller_id)
    """

    def __init__(
        self,
        endpoint_url: str,
        timeout: float = 60.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.endpoint_url = endpoint_url
        self.timeout = timeout
        self.client: Optional[httpx.AsyncClient] = http_client
        # Injected clients belong to the caller and are left open on close().
        self._owns_client = http_client is None

    async def __aenter__(self) -> "GenerationClient":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def initialize(self) -> httpx.AsyncClient:
        """Create the underlying HTTP client if none is set and return it."""
        if self.client is None:
            self.client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"Content-Type": "application/json"},
            )
            self._owns_client = True
            logger.info("GenerationClient initialized for %s", self.endpoint_url)
        return self.client

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self.client is not None and self._owns_client:
            await self.client.aclose()
            self.client = None
            logger.info("GenerationClient closed")

    @staticmethod
    def build_payload(
        enhanced_prompt: str, request: GenerationRequest, caller_id: str
    ) -> dict[str, Any]:
        """Build the JSON body posted to the proxy."""
        return {
            "prompt": request.prompt.strip(),
            "style": request.style.value,
            "category": request.category,
            "size": request.size.value,
            "userId": caller_id,
            "enhancedPrompt": enhanced_prompt,
        }

    async def send(
        self, enhanced_prompt: str, request: GenerationRequest, caller_id: str
    ) -> GenerationResult:
        """POST one generation request and normalize the response.

        Args:
            enhanced_prompt: Final prompt text built by PromptEnhancer.
            request: The caller's request (prompt, style, category, size).
            caller_id: Opaque caller identity forwarded as ``userId``.

        Returns:
            GenerationResult; failures carry a human-readable error.
        """
        payload = self.build_payload(enhanced_prompt, request, caller_id)
        started = time.perf_counter()
        try:
            http_client = await self.initialize()
            response = await http_client.post(self.endpoint_url, json=payload)
            if not response.is_success:
                logger.error(
                    "Proxy service error: %d %s",
                    response.status_code,
                    response.text[:200],
                    extra={
                        "component": "GenerationClient",
                        "status_code": response.status_code,
                        "caller_id": caller_id,
                    },
                )
                return GenerationResult.failed(
                    f"Proxy service error: {response.status_code} {response.reason_phrase}".rstrip()
                )
            body = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error(
                "Emoji generation request failed: %s: %s",
                type(exc).__name__,
                exc,
                extra={
                    "component": "GenerationClient",
                    "error_type": type(exc).__name__,
                    "caller_id": caller_id,
                },
            )
            return GenerationResult.failed(str(exc) or FALLBACK_ERROR)
        except Exception as exc:
            # Closed client, invalid endpoint and other faults outside httpx.HTTPError
            logger.error(
                "Emoji generation request failed unexpectedly: %s: %s",
                type(exc).__name__,
                exc,
                exc_info=True,
                extra={
                    "component": "GenerationClient",
                    "error_type": type(exc).__name__,
                    "caller_id": caller_id,
                },
            )
            return GenerationResult.failed(str(exc) or FALLBACK_ERROR)

        result = self._normalize(body)
        logger.debug(
            "Proxy responded success=%s",
            result.success,
            extra={
                "caller_id": caller_id,
                "elapsed_ms": round((time.perf_counter() - started) * 1000, 1),
            },
        )
        return result

    @staticmethod
    def _normalize(body: Any) -> GenerationResult:
        if not isinstance(body, dict):
            return GenerationResult.failed("Malformed response from proxy service")
        if not body.get("success"):
            error = body.get("error")
            if not isinstance(error, str) or not error:
                error = "Unknown error from proxy service"
            return GenerationResult.failed(error)
        image_url = body.get("imageUrl")
        if not image_url or not isinstance(image_url, str):
            return GenerationResult.failed("Proxy service returned no image")
        generation_time = body.get("generationTime")
        if not isinstance(generation_time, (int, float)) or isinstance(generation_time, bool):
            generation_time = None
        return GenerationResult.ok(image_url, generation_time)

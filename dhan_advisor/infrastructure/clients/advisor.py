"""Text-generation HTTP client for narrative advice"""

import asyncio
import httpx
from typing import Protocol
from dhan_advisor.domain.exceptions import AdvisorServiceError
from dhan_advisor.config import settings
from dhan_advisor.infrastructure.observability.metrics import advisor_latency_histogram, advisor_failure_counter


class TextAdvisor(Protocol):
    """Anything that can turn a prompt into advice text"""

    async def generate(self, prompt: str) -> str:
        """Raises AdvisorServiceError when no text can be produced"""
        ...


class HttpTextAdvisor:
    """Client for the external text-generation service"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        backoff_base: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.advisor_api_base
        self.timeout = timeout if timeout is not None else settings.advisor_timeout_seconds
        self.max_retries = max_retries if max_retries is not None else settings.advisor_max_retries
        self.backoff_base = backoff_base if backoff_base is not None else settings.advisor_backoff_base
        self.transport = transport

    async def generate(self, prompt: str) -> str:
        """
        Ask the service for advice text.

        Retry strategy:
        - Up to max_retries extra attempts after the first
        - Exponential backoff: base, 2*base, 4*base...
        - Retries on 5xx errors and network failures, never on 4xx

        Raises:
            AdvisorServiceError: When every attempt failed or the body is invalid
        """
        attempt = 0
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            while True:
                try:
                    with advisor_latency_histogram.time():
                        response = await client.post(
                            f"{self.base_url}/generate",
                            json={"prompt": prompt},
                        )
                        response.raise_for_status()
                    return self._parse(response)

                except httpx.HTTPStatusError as e:
                    advisor_failure_counter.inc()
                    if e.response.status_code < 500 or attempt >= self.max_retries:
                        raise AdvisorServiceError(f"Advisor API error: {e.response.status_code}") from e

                except httpx.TimeoutException as e:
                    advisor_failure_counter.inc()
                    if attempt >= self.max_retries:
                        raise AdvisorServiceError(f"Advisor API timeout after {self.timeout}s") from e

                except httpx.RequestError as e:
                    advisor_failure_counter.inc()
                    if attempt >= self.max_retries:
                        raise AdvisorServiceError(f"Advisor API unreachable: {e}") from e

                attempt += 1
                await asyncio.sleep(self.backoff_base * (2 ** (attempt - 1)))

    @staticmethod
    def _parse(response: httpx.Response) -> str:
        try:
            text = response.json()["text"]
        except (KeyError, ValueError, TypeError) as e:
            raise AdvisorServiceError(f"Invalid advice payload: {e}") from e
        if not isinstance(text, str) or not text.strip():
            raise AdvisorServiceError("Advisor returned empty text")
        return text.strip()

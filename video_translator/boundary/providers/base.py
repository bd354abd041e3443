"""
Shared HTTP plumbing for provider clients.

Every provider request runs with an explicit timeout and is retried a
bounded number of times on transient failures (network errors, HTTP 429
and 5xx). Other HTTP errors fail on the first attempt.

Dependencies: httpx, tenacity
System role: Timeout and retry policy for external AI providers
"""

import logging
from dataclasses import dataclass
from typing import Any

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = frozenset({408, 425, 429, 500, 502, 503, 504})


@dataclass(frozen=True)
class RetryPolicy:
    """Bounded exponential backoff with jitter."""

    max_attempts: int = 3
    initial_wait: float = 1.0
    max_wait: float = 20.0
    jitter: float = 1.0


def is_transient_error(exc: BaseException) -> bool:
    """True for failures worth another attempt."""
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code in RETRYABLE_STATUS_CODES
    return isinstance(exc, httpx.TransportError)


class ProviderClient:
    """
    Base class for provider clients.

    Args:
        name: Provider name used in logs and errors
        timeout: Per-request timeout in seconds
        retry_policy: Retry settings for transient failures
        transport: Optional httpx transport (tests use httpx.MockTransport)
    """

    def __init__(
        self,
        name: str,
        timeout: float,
        retry_policy: RetryPolicy | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.name = name
        self._timeout = timeout
        self._retry_policy = retry_policy or RetryPolicy()
        self._transport = transport

    async def _post(self, url: str, **kwargs: Any) -> httpx.Response:
        """
        POST with timeout and bounded retry.

        Returns:
            httpx.Response: Successful (2xx) response

        Raises:
            httpx.HTTPError: Last error once retries are exhausted, or the
                first non-transient error
        """
        policy = self._retry_policy
        retrying = AsyncRetrying(
            retry=retry_if_exception(is_transient_error),
            stop=stop_after_attempt(policy.max_attempts),
            wait=wait_exponential_jitter(
                initial=policy.initial_wait,
                max=policy.max_wait,
                jitter=policy.jitter,
            ),
            before_sleep=lambda retry_state: logger.warning(
                f"{__name__}:_post - {self.name} retry "
                f"{retry_state.attempt_number}/{policy.max_attempts}: "
                f"{retry_state.outcome.exception()}"
            ),
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                    response = await client.post(url, **kwargs)
                    response.raise_for_status()
                    return response

    @staticmethod
    def _describe(exc: httpx.HTTPError) -> tuple[str, int | None]:
        """Short error text and status code for a failed request."""
        if isinstance(exc, httpx.HTTPStatusError):
            body = exc.response.text[:300]
            return f"HTTP {exc.response.status_code}: {body}", exc.response.status_code
        return f"{type(exc).__name__}: {exc}", None

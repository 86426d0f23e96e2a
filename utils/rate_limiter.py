"""
Rate Limiting and Retry Utilities
Fixed pauses between outbound page loads and bounded retries with linear backoff.
"""

import asyncio
from typing import Any, Awaitable, Callable, Optional

from models.wallet_record import RetryPolicy
from utils.helpers import print_error, print_info, print_warning

Sleep = Callable[[float], Awaitable[Any]]


class RateLimiter:
    """Suspends for a fixed delay after every externally observable navigation step."""

    def __init__(self, delay_ms: int, sleep: Sleep = asyncio.sleep):
        if delay_ms < 0:
            raise ValueError(f"delay_ms must not be negative, got {delay_ms}")
        self.delay_ms = delay_ms
        self._sleep = sleep

    async def pause(self):
        """Wait the configured delay."""
        if self.delay_ms:
            print_info(f"⏳ Rate limiting - waiting {self.delay_ms / 1000:.1f}s")
        await self._sleep(self.delay_ms / 1000)


class RetryProgressDisplay:
    """Console feedback for retry attempts."""

    def __init__(self, label: str, max_attempts: int):
        self.label = label
        self.max_attempts = max_attempts

    def show_retry_attempt(self, attempt: int, delay_ms: int, error: Exception):
        print_warning(
            "Retrying after failure",
            {
                "label": self.label,
                "attempt": f"{attempt}/{self.max_attempts}",
                "error": str(error),
                "delay_ms": delay_ms,
            },
        )

    def show_final_failure(self, error: Exception):
        print_error(
            f"{self.label} failed after {self.max_attempts} attempts",
            {"error": str(error)},
        )

    def show_success_after_retry(self, attempt: int):
        print_info(f"{self.label} succeeded on attempt {attempt}/{self.max_attempts}")


async def execute_with_retry(
    operation: Callable[[], Awaitable[Any]],
    policy: RetryPolicy,
    *,
    label: str = "operation",
    on_failure: Optional[Callable[[Exception], Awaitable[Any]]] = None,
    sleep: Sleep = asyncio.sleep,
) -> Any:
    """
    Runs ``operation`` until it succeeds or ``policy.max_attempts`` is reached.

    After failed attempt k (k < max_attempts) the call sleeps
    ``policy.backoff_base_ms * k`` milliseconds. When the final attempt fails,
    ``on_failure`` is awaited once with the last error and the error is re-raised.
    A failing ``on_failure`` hook is reported but never replaces that error.

    Args:
        operation: Zero-argument coroutine function to attempt.
        policy: Attempt bound and backoff base.
        label: Human-readable name used in log lines.
        on_failure: Hook awaited once after the last attempt fails.
        sleep: Awaitable sleep taking seconds; injectable for tests.
    """
    progress = RetryProgressDisplay(label, policy.max_attempts)
    last_error: Optional[Exception] = None

    for attempt in range(1, policy.max_attempts + 1):
        try:
            result = await operation()
        except Exception as e:
            last_error = e
            if attempt < policy.max_attempts:
                delay_ms = policy.backoff_ms(attempt)
                progress.show_retry_attempt(attempt, delay_ms, e)
                await sleep(delay_ms / 1000)
            continue

        if attempt > 1:
            progress.show_success_after_retry(attempt)
        return result

    progress.show_final_failure(last_error)
    if on_failure is not None:
        try:
            await on_failure(last_error)
        except Exception as hook_error:
            print_error(f"Failure hook for {label} raised: {hook_error}")
    raise last_error

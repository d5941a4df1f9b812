"""Bounded retry with exponential backoff for external I/O calls.

Only transient failures (timeouts, network errors) are retried. Falling back
to the next extraction strategy is handled by the pipeline stages, not here.
"""

import random
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from docanalyzer.config.settings import Settings
from docanalyzer.logging.logger import Log

T = TypeVar("T")


@dataclass(frozen=True)
class RetryConfig:
    """Retry policy for one external collaborator call.

    Attributes:
        max_attempts: Total attempts including the first call.
        initial_delay_seconds: Delay before the first retry.
        max_delay_seconds: Upper bound for a single delay.
        exponential_base: Delay multiplier per attempt.
        jitter: Randomize each delay between 50% and 150%.
    """

    max_attempts: int = 2
    initial_delay_seconds: float = 0.5
    max_delay_seconds: float = 10.0
    exponential_base: float = 2.0
    jitter: bool = True

    @classmethod
    def from_settings(cls, settings: Settings) -> "RetryConfig":
        return cls(
            max_attempts=max(1, settings.external_call_max_attempts),
            initial_delay_seconds=settings.external_call_retry_delay_seconds,
        )


NO_RETRY = RetryConfig(max_attempts=1)


def retry_with_backoff(
    func: Callable[..., T],
    config: RetryConfig,
    retryable_exceptions: tuple[type[Exception], ...],
    *args: object,
    **kwargs: object,
) -> T:
    """Call ``func`` and retry it on ``retryable_exceptions``.

    Raises:
        The last retryable exception once attempts are exhausted, or any
        non-retryable exception immediately.
    """
    attempts = max(1, config.max_attempts)
    for attempt in range(attempts):
        try:
            return func(*args, **kwargs)
        except retryable_exceptions as exc:
            if attempt == attempts - 1:
                Log.error(f"All {attempts} attempts failed: {type(exc).__name__}: {exc}")
                raise
            delay = min(
                config.initial_delay_seconds * (config.exponential_base**attempt),
                config.max_delay_seconds,
            )
            if config.jitter:
                delay = delay * (0.5 + random.random())
            Log.warning(
                f"Attempt {attempt + 1}/{attempts} failed: {type(exc).__name__}: {exc}. "
                f"Retrying in {delay:.2f}s"
            )
            time.sleep(delay)
    raise RuntimeError("retry_with_backoff exhausted without a result")

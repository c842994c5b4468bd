"""
Retry logic with exponential backoff and jitter.

Used by the retrieval layer only; a parse is never retried on its own.
"""

import logging
import random
import time
from typing import Any, Callable, List, Optional, Type

from .config.constants import (
    RETRY_BASE_DELAY,
    RETRY_MAX_DELAY,
    RETRY_MULTIPLIER,
    RETRY_JITTER,
)

logger = logging.getLogger(__name__)


class RetryPolicy:
    """
    Retry policy configuration.

    Defines how retries should be performed based on error type. An error
    exposing a false ``retriable`` attribute is never retried, even when its
    type is listed.
    """

    def __init__(
        self,
        max_attempts: int = 3,
        base_delay: float = RETRY_BASE_DELAY,
        max_delay: float = RETRY_MAX_DELAY,
        multiplier: float = RETRY_MULTIPLIER,
        jitter: bool = RETRY_JITTER,
        retriable_errors: Optional[List[Type[Exception]]] = None,
    ):
        """
        Initialize retry policy.

        Args:
            max_attempts: Maximum number of attempts
            base_delay: Initial delay between retries (seconds)
            max_delay: Maximum delay between retries (seconds)
            multiplier: Exponential backoff multiplier
            jitter: Add random jitter to delays
            retriable_errors: List of error types to retry
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

        self.max_attempts = max_attempts
        self.base_delay = base_delay
        self.max_delay = max_delay
        self.multiplier = multiplier
        self.jitter = jitter
        self.retriable_errors = retriable_errors or [
            ConnectionError,
            TimeoutError,
            OSError,
        ]

    def should_retry(self, error: Exception) -> bool:
        """Check if error should be retried."""
        if not any(isinstance(error, error_type) for error_type in self.retriable_errors):
            return False
        return bool(getattr(error, "retriable", True))

    def calculate_delay(self, attempt: int) -> float:
        """
        Calculate delay before next retry.

        Args:
            attempt: Attempt number (0-indexed)

        Returns:
            Delay in seconds
        """
        delay = min(self.base_delay * (self.multiplier ** attempt), self.max_delay)

        if self.jitter:
            # Add ±25% jitter
            jitter_range = delay * 0.25
            delay += random.uniform(-jitter_range, jitter_range)

        return max(0, delay)


def retry_call(
    func: Callable[..., Any],
    *args,
    policy: Optional[RetryPolicy] = None,
    sleep: Optional[Callable[[float], None]] = None,
    **kwargs,
) -> Any:
    """
    Call ``func`` and retry it according to ``policy``.

    Args:
        func: Function to execute
        *args: Function arguments
        policy: Retry policy (defaults to RetryPolicy())
        sleep: Function used to wait between attempts (time.sleep by default)
        **kwargs: Function keyword arguments

    Returns:
        Function result

    Raises:
        The last error once attempts are exhausted, or the first
        non-retriable error
    """
    policy = policy or RetryPolicy()
    sleep = sleep or time.sleep
    name = getattr(func, "__name__", repr(func))

    for attempt in range(policy.max_attempts):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            if not policy.should_retry(e):
                logger.warning(f"Non-retriable error in {name}: {e}")
                raise

            if attempt == policy.max_attempts - 1:
                logger.error(f"Max retries ({policy.max_attempts}) reached for {name}")
                raise

            delay = policy.calculate_delay(attempt)
            logger.warning(
                f"Attempt {attempt + 1}/{policy.max_attempts} failed for {name}: {e}. "
                f"Retrying in {delay:.2f}s..."
            )
            sleep(delay)


__all__ = ["RetryPolicy", "retry_call"]

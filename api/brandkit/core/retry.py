"""Attempt policy for outbound provider calls.

Generation runs a single attempt by default. The policy lives here, apart
from the provider client, so more attempts or a backoff can be configured
without touching the client or the orchestrator.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Tuple, Type

from ..models.exceptions import ProviderError
from .structured_logging import LoggerFactory

logger = LoggerFactory.get_logger(__name__)


@dataclass
class RetryConfig:
    """Configuration for attempt behavior."""
    max_attempts: int = 1
    initial_delay: float = 0.0  # seconds
    max_delay: float = 10.0  # seconds
    exponential_base: float = 2.0
    retryable_exceptions: Tuple[Type[BaseException], ...] = field(
        default_factory=lambda: (ProviderError,)
    )
    on_retry: Optional[Callable] = None  # called as on_retry(attempt, delay, exc)

    @classmethod
    def single_attempt(cls) -> "RetryConfig":
        return cls(max_attempts=1, initial_delay=0.0)


class RetryManager:
    """Run an async operation under a RetryConfig."""

    def __init__(self, config: Optional[RetryConfig] = None):
        self.config = config or RetryConfig.single_attempt()

    def calculate_delay(self, attempt: int) -> float:
        """Delay before the attempt following `attempt` (zero-based)."""
        delay = self.config.initial_delay * (self.config.exponential_base ** attempt)
        return min(delay, self.config.max_delay)

    def should_retry(self, exception: BaseException, attempts_made: int) -> bool:
        if attempts_made >= self.config.max_attempts:
            return False
        return isinstance(exception, self.config.retryable_exceptions)

    async def execute_with_retry(
        self,
        func: Callable,
        *args,
        operation_name: Optional[str] = None,
        **kwargs
    ) -> Any:
        """Await func(*args, **kwargs), re-running it on retryable failures.

        The last exception propagates unchanged once attempts are exhausted.
        """
        operation_name = operation_name or func.__name__

        attempt = 0
        while True:
            try:
                if attempt > 0:
                    logger.info(
                        f"Retry attempt {attempt + 1}/{self.config.max_attempts} for {operation_name}",
                        operation=operation_name,
                        attempt=attempt + 1,
                    )
                return await func(*args, **kwargs)
            except Exception as e:
                if not self.should_retry(e, attempt + 1):
                    raise

                delay = self.calculate_delay(attempt)
                logger.warning(
                    f"Operation {operation_name} failed (attempt {attempt + 1}), retrying in {delay:.2f}s",
                    operation=operation_name,
                    error_type=type(e).__name__,
                )
                if self.config.on_retry:
                    self.config.on_retry(attempt + 1, delay, e)
                if delay > 0:
                    await asyncio.sleep(delay)
                attempt += 1

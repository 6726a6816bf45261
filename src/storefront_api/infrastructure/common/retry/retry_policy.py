from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TypeVar

from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from storefront_api.infrastructure.observability.logger_factory_service import (
    LoggerFactoryService,
)

_T = TypeVar("_T")

logger = LoggerFactoryService.build_logger(__name__)


def _never(exc: BaseException) -> bool:  # noqa: ARG001
    return False


def _log_retry(state: RetryCallState) -> None:
    exc = state.outcome.exception() if state.outcome else None
    logger.warning(f"Attempt {state.attempt_number} failed, retrying: {exc!r}")


@dataclass(frozen=True)
class RetryPolicy:
    max_attempts: int = 1  # Default: Fail fast (1 attempt, 0 retries)
    is_retryable: Callable[[BaseException], bool] = field(default=_never)
    initial_wait: float = 0.25
    max_wait: float = 5.0

    def run(self, fn: Callable[[], _T]) -> _T:
        """Calls ``fn`` until it succeeds, a non-retryable error occurs or attempts run out.

        The last exception is re-raised unchanged.
        """
        return self._retrying()(fn)

    def _retrying(self) -> Retrying:
        return Retrying(
            retry=retry_if_exception(self.is_retryable),
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential_jitter(initial=self.initial_wait, max=self.max_wait),
            before_sleep=_log_retry,
            reraise=True,
        )

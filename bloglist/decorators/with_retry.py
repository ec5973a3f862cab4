"""Exponential backoff for transient failures, built on tenacity."""

from collections.abc import Awaitable, Callable

from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from bloglist.monitoring import get_logger

logger = get_logger(__name__)

type ExceptionTypes = type[Exception] | tuple[type[Exception], ...]

RETRIABLE_EXCEPTIONS: tuple[type[Exception], ...] = (ConnectionError, TimeoutError)


def _announce_retry(attempts: int) -> Callable[[RetryCallState], None]:
    def before_sleep(state: RetryCallState) -> None:
        error = state.outcome.exception() if state.outcome else None
        delay = state.next_action.sleep if state.next_action else 0.0
        name = getattr(state.fn, "__qualname__", "call")
        logger.warning(
            f"{name} failed ({error!r}), attempt {state.attempt_number}/{attempts}, "
            f"retrying in {delay:.2f}s",
        )

    return before_sleep


def with_retry[**P, T](
    max_retries: int = 3,
    base_delay: float = 0.1,
    max_delay: float = 2.0,
    exec_retry: ExceptionTypes = RETRIABLE_EXCEPTIONS,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """
    Retry an async callable on ``exec_retry`` with exponential backoff.

    ``max_retries`` counts every attempt, the first included. The last
    failure is re-raised unchanged.
    """
    return retry(
        stop=stop_after_attempt(max_retries),
        wait=wait_exponential(multiplier=base_delay, min=base_delay, max=max_delay),
        retry=retry_if_exception_type(exec_retry),
        before_sleep=_announce_retry(max_retries),
        reraise=True,
    )

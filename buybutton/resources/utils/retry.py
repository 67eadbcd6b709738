"""Retry policy with exponential backoff for listings HTTP requests."""

import logging
from typing import Optional

import httpx
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from tenacity.wait import wait_base

from buybutton.config import settings


logger = logging.getLogger(__name__)


# Failures worth another attempt. HTTP status errors are not retried: a 4xx
# or 5xx answer is handed to the caller as is.
TRANSIENT_ERRORS = (
    httpx.TimeoutException,
    httpx.NetworkError,
)


def default_wait() -> wait_base:
    return wait_exponential(multiplier=1, min=2, max=10)


def build_transport_retry(
    max_attempts: Optional[int] = None,
    wait: Optional[wait_base] = None,
) -> AsyncRetrying:
    """Build an async retry controller for one request.

    Args:
        max_attempts: Total attempts including the first (defaults to
                      HTTP_MAX_RETRIES)
        wait: Wait strategy between attempts (defaults to exponential backoff)

    Returns:
        AsyncRetrying that re-raises the last transient error
    """
    return AsyncRetrying(
        stop=stop_after_attempt(max_attempts if max_attempts is not None else settings.HTTP_MAX_RETRIES),
        wait=wait if wait is not None else default_wait(),
        retry=retry_if_exception_type(TRANSIENT_ERRORS),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )

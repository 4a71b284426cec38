"""
Bounded retry for transient store failures.

Only StoreUnavailableError is retried. Once attempts are exhausted the call
returns a STORE_UNAVAILABLE error value instead of raising. A failed commit
(StoreCommitUncertainError) returns STORE_UNAVAILABLE straight away.
"""

import functools
import logging

from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from config import ApplicationConfig
from portal_access.domain.errors import StoreCommitUncertainError, StoreUnavailableError
from portal_access.libs.result import Error, Return

logger = logging.getLogger(__name__)

STORE_UNAVAILABLE = Error(
    "STORE_UNAVAILABLE", "Service temporarily unavailable, please try again"
)


def store_retry(func):
    retrying = retry(
        retry=retry_if_exception_type(StoreUnavailableError),
        stop=stop_after_attempt(ApplicationConfig.STORE_RETRY_ATTEMPTS),
        wait=wait_exponential(
            multiplier=ApplicationConfig.STORE_RETRY_BACKOFF_SECONDS, max=2
        ),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )(func)

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await retrying(*args, **kwargs)
        except StoreUnavailableError as exc:
            logger.error("Store unavailable in %s: %s", func.__qualname__, exc)
            return Return.err(STORE_UNAVAILABLE)
        except StoreCommitUncertainError as exc:
            logger.error("Commit outcome unknown in %s: %s", func.__qualname__, exc)
            return Return.err(STORE_UNAVAILABLE)

    return wrapper

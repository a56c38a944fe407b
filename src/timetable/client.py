"""HTTP download of timetable pages with retry classification.

Failures are mapped onto the error hierarchy so callers can tell a network
problem (TransientError, retried here) from a page that does not exist
(DocumentNotFound) or any other refusal (PermanentError).
"""

import requests
from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from src.timetable.config import TimetableConfig, get_config
from src.timetable.errors import (
    DocumentNotFound,
    PermanentError,
    RateLimitError,
    TransientError,
)
from src.timetable.logging import get_logger

log = get_logger(__name__)


def _log_retry(retry_state: RetryCallState) -> None:
    exc = retry_state.outcome.exception() if retry_state.outcome else None
    log.warning(
        "fetch_retry",
        attempt=retry_state.attempt_number,
        error=str(exc),
        type=type(exc).__name__,
    )


def _get(url: str, config: TimetableConfig) -> bytes:
    try:
        resp = requests.get(
            url,
            headers={"User-Agent": config.user_agent},
            timeout=config.request_timeout,
        )
    except (requests.ConnectionError, requests.Timeout) as e:
        raise TransientError(f"GET {url} failed: {e}") from e
    except requests.RequestException as e:
        raise PermanentError(f"GET {url} failed: {e}") from e

    status = resp.status_code
    if status == 404:
        raise DocumentNotFound(f"GET {url} returned 404")
    if status == 429:
        raise RateLimitError(f"GET {url} returned 429")
    if status >= 500:
        raise TransientError(f"GET {url} returned {status}")
    if status >= 400:
        raise PermanentError(f"GET {url} returned {status}")

    log.debug("fetch_succeeded", url=url, status=status, size=len(resp.content))
    return resp.content


def fetch_html(url: str, config: TimetableConfig | None = None) -> bytes:
    """Download a page.

    Returns the raw body so the HTML parser can apply the charset the page
    declares (timetable pages are not always UTF-8).

    Args:
        url: Absolute page URL.
        config: Settings for timeout, retries and User-Agent.

    Raises:
        TransientError: Still failing after config.max_retries attempts.
        DocumentNotFound: The server answered 404.
        PermanentError: Any other client error.
    """
    config = config or get_config()

    retrying = Retrying(
        stop=stop_after_attempt(max(config.max_retries, 1)),
        wait=wait_exponential(multiplier=0.5, max=8),
        retry=retry_if_exception_type(TransientError),
        before_sleep=_log_retry,
        reraise=True,
    )
    try:
        for attempt in retrying:
            with attempt:
                return _get(url, config)
    except TransientError as e:
        log.error("fetch_failed", url=url, error=str(e))
        raise

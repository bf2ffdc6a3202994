"""HTTP transport for release metadata requests."""

from __future__ import annotations

import logging

import requests

from gh_update_checker.config.settings import settings
from gh_update_checker.core.errors import NetworkError

logger = logging.getLogger(__name__)


def fetch(url: str, timeout: float | None = None) -> str:
    """GET ``url`` and return the response body as text.

    Only transport-level failures (DNS, connection, timeout, ...) raise
    :class:`NetworkError`.  HTTP error statuses still return the body:
    GitHub reports "Not Found" and rate limiting through a JSON
    ``message`` field that the caller wants to surface.
    """
    headers = {
        "User-Agent": settings.user_agent,
        "Accept": "application/vnd.github+json",
    }
    try:
        response = requests.get(
            url,
            headers=headers,
            timeout=timeout if timeout is not None else settings.timeout,
        )
    except (requests.RequestException, ValueError) as exc:
        # requests rejects non-positive timeouts with a bare ValueError
        logger.debug("Request to %s failed", url, exc_info=True)
        raise NetworkError(url, str(exc)) from exc

    logger.debug("GET %s -> %s (%d bytes)", url, response.status_code, len(response.content))
    return response.text

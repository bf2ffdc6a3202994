"""Compare a local version against the latest published GitHub release."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Any, Callable, Protocol

from gh_update_checker.config.settings import settings
from gh_update_checker.core import http_client
from gh_update_checker.core.errors import RemoteAPIError
from gh_update_checker.core.release_payload import ReleasePayload
from gh_update_checker.core.repo_url import to_api_url
from gh_update_checker.models.update import UpdateResult
from gh_update_checker.models.version import SemanticVersion, classify_update

logger = logging.getLogger(__name__)

TAG_FIELD = "tag_name"
MESSAGE_FIELD = "message"


class Payload(Protocol):
    def has_string_field(self, name: str) -> bool: ...

    def get_string_field(self, name: str) -> str: ...


Fetcher = Callable[[str], str]
PayloadLoader = Callable[[str], Payload]
StageCallback = Callable[[str], None]

# Shared pool for async checks, created on first use
_executor: ThreadPoolExecutor | None = None
_executor_lock = threading.Lock()


def check_github_update(
    repo_ref: str,
    local_version: str,
    *,
    fetch: Fetcher | None = None,
    load_payload: PayloadLoader | None = None,
    on_stage: StageCallback | None = None,
    strict: bool | None = None,
) -> UpdateResult:
    """Check whether ``repo_ref`` has a release newer than ``local_version``.

    The local version is validated before any network access, so a bad
    local version or repository URL never costs a request.  Every failure
    propagates as an :class:`~gh_update_checker.core.errors.UpdateCheckError`
    subclass; nothing is retried or cached.
    """
    fetch = fetch or http_client.fetch
    load_payload = load_payload or ReleasePayload.from_body
    if strict is None:
        strict = settings.strict_versions

    api_url = to_api_url(repo_ref)
    local = SemanticVersion.parse(local_version, strict=strict, source="local")

    if on_stage:
        on_stage(f"Fetching {api_url}")
    body = fetch(api_url)

    tag = _extract_tag(load_payload(body))

    if on_stage:
        on_stage(f"Comparing {local_version} with {tag}")
    remote = SemanticVersion.parse(tag, strict=strict, source="remote")
    logger.debug("Local %s, remote %s (tag %r)", local, remote, tag)

    return UpdateResult(
        has_update=remote > local,
        latest_version=tag,
        current_version=local_version,
        api_url=api_url,
        update_type=classify_update(local, remote),
    )


def check_github_update_async(
    repo_ref: str,
    local_version: str,
    *,
    executor: Executor | None = None,
    **kwargs: Any,
) -> Future[UpdateResult]:
    """Run :func:`check_github_update` on a worker thread.

    Errors are re-raised, with their original type, by ``Future.result()``.
    """
    pool = executor or _get_executor()
    return pool.submit(check_github_update, str(repo_ref), str(local_version), **kwargs)


def shutdown_executor(wait: bool = True) -> None:
    """Shut down the shared async pool (a new one is created on next use)."""
    global _executor
    with _executor_lock:
        if _executor is not None:
            _executor.shutdown(wait=wait)
            _executor = None


def _get_executor() -> ThreadPoolExecutor:
    global _executor
    with _executor_lock:
        if _executor is None:
            _executor = ThreadPoolExecutor(
                max_workers=settings.async_workers,
                thread_name_prefix="gh-update-check",
            )
        return _executor


def _extract_tag(payload: Payload) -> str:
    """Return the release tag, or raise with the API's own diagnostic."""
    if payload.has_string_field(TAG_FIELD):
        return payload.get_string_field(TAG_FIELD)

    if payload.has_string_field(MESSAGE_FIELD):
        message = payload.get_string_field(MESSAGE_FIELD)
        raise RemoteAPIError(f"GitHub API error: {message}", remote_message=message)
    raise RemoteAPIError("GitHub API returned no valid tag_name")

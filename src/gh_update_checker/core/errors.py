"""Exception taxonomy for update checks.

Every error carries an :class:`~gh_update_checker.models.ErrorKind` so
library callers can branch on ``exc.kind`` instead of parsing messages.
"""

from __future__ import annotations

from gh_update_checker.models import ErrorKind


class UpdateCheckError(Exception):
    """Base class for every failure surfaced by an update check."""

    kind: ErrorKind


class InvalidVersionFormat(UpdateCheckError):
    """A version string holds no recognizable ``major.minor[.patch]``."""

    kind = ErrorKind.INVALID_VERSION

    def __init__(self, text: str, source: str | None = None):
        self.text = text
        self.source = source  # "local", "remote" or None
        super().__init__(f"Invalid SemVer: {text}")


class InvalidRepositoryURL(UpdateCheckError):
    kind = ErrorKind.INVALID_REPOSITORY_URL

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Invalid GitHub URL: {url}")


class NetworkError(UpdateCheckError):
    """The transport could not complete the request."""

    kind = ErrorKind.NETWORK

    def __init__(self, url: str, detail: str = ""):
        self.url = url
        message = "HTTP request failed"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class RemoteAPIError(UpdateCheckError):
    """The request completed but the response holds no usable release tag."""

    kind = ErrorKind.REMOTE_API

    def __init__(self, message: str, remote_message: str | None = None):
        self.remote_message = remote_message
        super().__init__(message)

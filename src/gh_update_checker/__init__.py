"""GitHub release update checker."""

from gh_update_checker.config.settings import __version__
from gh_update_checker.core.errors import (
    InvalidRepositoryURL,
    InvalidVersionFormat,
    NetworkError,
    RemoteAPIError,
    UpdateCheckError,
)
from gh_update_checker.core.repo_url import to_api_url
from gh_update_checker.core.update_checker import check_github_update, check_github_update_async
from gh_update_checker.models import ErrorKind, UpdateType
from gh_update_checker.models.update import UpdateResult
from gh_update_checker.models.version import SemanticVersion

__all__ = [
    "__version__",
    "check_github_update",
    "check_github_update_async",
    "to_api_url",
    "SemanticVersion",
    "UpdateResult",
    "ErrorKind",
    "UpdateType",
    "UpdateCheckError",
    "InvalidVersionFormat",
    "InvalidRepositoryURL",
    "NetworkError",
    "RemoteAPIError",
]

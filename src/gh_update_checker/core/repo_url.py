"""Repository URL to release API URL normalization."""

from __future__ import annotations

import logging
import re

from gh_update_checker.config.settings import settings
from gh_update_checker.core.errors import InvalidRepositoryURL

logger = logging.getLogger(__name__)


def to_api_url(ref: str) -> str:
    """Return the latest-release API URL for a repository reference.

    ``ref`` is either a web URL (``https://github.com/owner/repo[.git]``)
    or an API URL.  Anything containing the API host is returned as is,
    which keeps the function idempotent.  No network access happens here.
    """
    if settings.api_host in ref:
        return ref

    pattern = rf"https://{re.escape(settings.web_host)}/([^/]+)/([^/?#]+)"
    match = re.search(pattern, ref)
    if match is None:
        raise InvalidRepositoryURL(ref)

    owner, repo = match.groups()
    if repo.endswith(".git"):
        repo = repo[: -len(".git")]
    if not repo:
        raise InvalidRepositoryURL(ref)

    api_url = settings.api_url_template.format(owner=owner, repo=repo)
    logger.debug("Normalized %s -> %s", ref, api_url)
    return api_url

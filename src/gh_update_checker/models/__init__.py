"""Data models for gh-update-checker."""

from __future__ import annotations

import enum


class ErrorKind(enum.Enum):
    INVALID_VERSION = "invalid-version"
    INVALID_REPOSITORY_URL = "invalid-repository-url"
    NETWORK = "network"
    REMOTE_API = "remote-api"


class UpdateType(enum.Enum):
    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    UP_TO_DATE = "up-to-date"

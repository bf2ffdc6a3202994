"""Application configuration and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

__version__ = "1.0.0"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "")
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "")
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _default_api_host() -> str:
    return os.environ.get("GH_UPDATE_API_HOST", "") or "api.github.com"


def _default_web_host() -> str:
    return os.environ.get("GH_UPDATE_WEB_HOST", "") or "github.com"


def _default_timeout() -> float:
    return _env_float("GH_UPDATE_TIMEOUT", 10.0)


def _default_user_agent() -> str:
    return os.environ.get("GH_UPDATE_USER_AGENT", "") or f"gh-update-checker/{__version__}"


def _default_strict_versions() -> bool:
    return os.environ.get("GH_UPDATE_STRICT_VERSIONS", "").strip().lower() in _TRUTHY


def _default_async_workers() -> int:
    return _env_int("GH_UPDATE_ASYNC_WORKERS", 4)


def _default_log_level() -> str:
    return (os.environ.get("GH_UPDATE_LOG_LEVEL", "") or "WARNING").upper()


@dataclass
class Settings:
    api_host: str = field(default_factory=_default_api_host)
    web_host: str = field(default_factory=_default_web_host)
    timeout: float = field(default_factory=_default_timeout)  # seconds, per request
    user_agent: str = field(default_factory=_default_user_agent)
    strict_versions: bool = field(default_factory=_default_strict_versions)
    async_workers: int = field(default_factory=_default_async_workers)
    log_level: str = field(default_factory=_default_log_level)

    @property
    def api_url_template(self) -> str:
        return f"https://{self.api_host}/repos/{{owner}}/{{repo}}/releases/latest"


# Global singleton
settings = Settings()

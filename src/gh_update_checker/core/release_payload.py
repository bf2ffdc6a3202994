"""Field access over a release metadata document."""

from __future__ import annotations

import json
from typing import Any

from gh_update_checker.core.errors import RemoteAPIError


class ReleasePayload:
    """Read-only view over a decoded JSON response body."""

    def __init__(self, data: Any):
        self._data = data if isinstance(data, dict) else {}

    @classmethod
    def from_body(cls, body: str) -> ReleasePayload:
        try:
            data = json.loads(body)
        except ValueError as exc:
            raise RemoteAPIError(f"GitHub API returned malformed JSON: {exc}") from exc
        return cls(data)

    def has_string_field(self, name: str) -> bool:
        return isinstance(self._data.get(name), str)

    def get_string_field(self, name: str) -> str:
        value = self._data.get(name)
        if not isinstance(value, str):
            raise KeyError(name)
        return value

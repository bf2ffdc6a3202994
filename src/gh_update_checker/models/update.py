"""Update check result model."""

from __future__ import annotations

from dataclasses import dataclass

from gh_update_checker.models import UpdateType


@dataclass(frozen=True)
class UpdateResult:
    has_update: bool
    latest_version: str  # raw tag as published, e.g. "v1.2.0"
    current_version: str = ""
    api_url: str = ""
    update_type: UpdateType = UpdateType.UP_TO_DATE

    def to_dict(self) -> dict[str, object]:
        return {
            "has_update": self.has_update,
            "latest_version": self.latest_version,
            "current_version": self.current_version,
            "update_type": self.update_type.value,
            "api_url": self.api_url,
        }

"""Three-component semantic version model."""

from __future__ import annotations

import re
from dataclasses import dataclass

from gh_update_checker.core.errors import InvalidVersionFormat
from gh_update_checker.models import UpdateType

_VERSION_RE = re.compile(r"[vV]?(\d+)\.(\d+)(?:\.(\d+))?", re.ASCII)


@dataclass(frozen=True, order=True)
class SemanticVersion:
    """A ``major.minor.patch`` triple ordered lexicographically.

    Build instances with :meth:`parse`; pre-release and build metadata
    segments are not modelled.
    """

    major: int
    minor: int
    patch: int

    def __post_init__(self) -> None:
        if min(self.major, self.minor, self.patch) < 0:
            raise ValueError(
                f"Version components must be non-negative: {self.major}.{self.minor}.{self.patch}"
            )

    @classmethod
    def parse(cls, text: str, strict: bool = False, source: str | None = None) -> SemanticVersion:
        """Parse ``text`` into a version.

        By default the first ``[v]M.N[.P]`` found anywhere in the text is
        used, so ``"Release v2.0 (stable)"`` parses as ``2.0.0``.  With
        ``strict=True`` the whole stripped text must match.

        ``source`` ("local" or "remote") is attached to the raised error.
        """
        if strict:
            match = _VERSION_RE.fullmatch(text.strip())
        else:
            match = _VERSION_RE.search(text)
        if match is None:
            raise InvalidVersionFormat(text, source=source)

        major, minor, patch = match.groups()
        try:
            return cls(int(major), int(minor), int(patch) if patch is not None else 0)
        except ValueError as exc:
            # int() refuses digit strings past the interpreter's conversion limit
            raise InvalidVersionFormat(text, source=source) from exc

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def classify_update(current: SemanticVersion, latest: SemanticVersion) -> UpdateType:
    """Classify the step from ``current`` to ``latest``."""
    if latest <= current:
        return UpdateType.UP_TO_DATE
    if latest.major > current.major:
        return UpdateType.MAJOR
    if latest.minor > current.minor:
        return UpdateType.MINOR
    return UpdateType.PATCH

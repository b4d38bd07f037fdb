"""Data models for vault items returned by the bridge."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FileMetadata:
    """Path plus modification/creation timestamps (ISO-8601 strings)."""

    path: str
    modified: str
    created: str

    def as_payload(self) -> dict[str, Any]:
        """Return a serializable payload representation."""
        return {
            "path": self.path,
            "modified": self.modified,
            "created": self.created,
        }

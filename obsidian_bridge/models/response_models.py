"""Pydantic models for payloads returned by the Obsidian Local REST API.

Unknown keys are ignored so that newer plugin versions keep decoding.
"""

from __future__ import annotations

from pydantic import BaseModel


class VaultListResponse(BaseModel):
    """Body of ``GET /vault/`` and ``GET /vault/{path}/`` for folders."""

    files: list[str]


class NoteContentResponse(BaseModel):
    """Body of ``GET /vault/{path}/`` for a file."""

    content: str

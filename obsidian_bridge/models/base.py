"""Base Pydantic models for MCP tool input validation.

Base Models:
- BasePathInput: optional vault-relative path shared by file and folder tools
- BaseContentInput: adds the required ``content`` body for write operations
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class BasePathInput(BaseModel):
    """Base model for tools addressing a single vault path.

    The path is optional and defaults to the empty string (the vault root).
    """

    path: str = Field(
        "",
        description=(
            "Path relative to the vault root. "
            "Examples: 'Daily Notes/2025-10-27.md', 'Projects'. "
            "Forward slashes for folders, case-sensitive."
        ),
        examples=["Daily Notes/2025-10-27.md", "Projects/Roadmap.md", ""],
    )

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Strip surrounding whitespace and reject traversal segments.

        Args:
            v: The path to validate

        Returns:
            The stripped path

        Raises:
            ValueError: If the path contains '.' or '..' segments
        """
        cleaned = v.strip()
        parts = cleaned.strip("/").split("/")
        if any(part in {".", ".."} for part in parts):
            raise ValueError(
                "Path cannot contain '.' or '..' segments. "
                f"Invalid path: '{cleaned}'"
            )
        return cleaned


class BaseContentInput(BasePathInput):
    """Base model for tools that write a file body.

    ``content`` is required; an empty string is a valid body.
    """

    content: str = Field(
        description="Full file content (markdown). May be empty.",
        examples=["# Meeting Notes\n\n- Item"],
    )

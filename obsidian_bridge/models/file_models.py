"""Pydantic input models for file operations.

This module defines input models for file tools:
- Read a single file
- Create a file
- Update a file
- Read several files in one call
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .base import BaseContentInput, BasePathInput


class GetFileContentInput(BasePathInput):
    """Input model for get_file_content tool.

    Examples:
        >>> GetFileContentInput(path="Daily Notes/2025-10-27.md")
    """

    model_config = ConfigDict(
        json_schema_extra={"examples": [{"path": "Daily Notes/2025-10-27.md"}]}
    )


class CreateFileInput(BaseContentInput):
    """Input model for create_file tool.

    Examples:
        >>> CreateFileInput(path="Inbox/Idea.md", content="# Idea")
    """

    model_config = ConfigDict(
        json_schema_extra={"examples": [{"path": "Inbox/Idea.md", "content": "# Idea"}]}
    )


class UpdateFileInput(BaseContentInput):
    """Input model for update_file tool.

    Examples:
        >>> UpdateFileInput(path="Inbox/Idea.md", content="- follow up")
    """

    model_config = ConfigDict(
        json_schema_extra={"examples": [{"path": "Inbox/Idea.md", "content": "- follow up"}]}
    )


class BatchGetFileContentsInput(BaseModel):
    """Input model for batch_get_file_contents tool.

    Examples:
        >>> BatchGetFileContentsInput(filepaths=["a.md", "Projects/b.md"])
    """

    filepaths: list[str] = Field(
        description=(
            "Paths of the files to read, relative to the vault root. "
            "Results keep this order; unreadable files are skipped."
        ),
        examples=[["Daily Notes/2025-10-27.md", "Projects/Roadmap.md"]],
    )

    @field_validator("filepaths")
    @classmethod
    def validate_filepaths(cls, v: list[str]) -> list[str]:
        """Strip whitespace from every path and drop blank entries."""
        return [path.strip() for path in v if path.strip()]

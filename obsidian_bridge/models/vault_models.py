"""Pydantic input models for vault listing operations.

This module defines input models for vault-level tools:
- List the vault root
- List a folder
- Report recently changed files
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from obsidian_bridge.constants import DEFAULT_RECENT_DAYS, DEFAULT_RECENT_LIMIT
from .base import BasePathInput


class ListFilesInVaultInput(BaseModel):
    """Input model for list_files_in_vault tool.

    Takes no parameters, but using a model keeps every tool on the same
    validation path.

    Examples:
        >>> ListFilesInVaultInput()
    """

    model_config = ConfigDict(json_schema_extra={"examples": [{}]})


class ListFilesInDirInput(BasePathInput):
    """Input model for list_files_in_dir tool.

    Examples:
        >>> ListFilesInDirInput(path="Projects")
    """

    model_config = ConfigDict(json_schema_extra={"examples": [{"path": "Projects"}]})


class GetRecentChangesInput(BaseModel):
    """Input model for get_recent_changes tool.

    Examples:
        >>> GetRecentChangesInput()
        >>> GetRecentChangesInput(limit=5, days=7)
    """

    limit: int = Field(
        DEFAULT_RECENT_LIMIT,
        ge=1,
        description="Maximum number of files to return.",
    )

    days: int = Field(
        DEFAULT_RECENT_DAYS,
        ge=1,
        description=(
            "Look-back window in days. The Local REST API does not report "
            "modification times, so this does not filter the result."
        ),
    )

    model_config = ConfigDict(
        json_schema_extra={"examples": [{"limit": 10, "days": 30}, {"limit": 5, "days": 7}]}
    )

"""MCP tools for browsing the vault.

This module provides tool handlers for listing operations:
- List the vault root
- List a folder
- Report recent changes

All tools delegate to the remote vault client.
"""

from __future__ import annotations

from typing import Any

from obsidian_bridge.core.obsidian_client import ObsidianClient
from obsidian_bridge.dispatcher import ToolRegistry
from obsidian_bridge.models import (
    GetRecentChangesInput,
    ListFilesInDirInput,
    ListFilesInVaultInput,
)


def _listing_payload(files: list[str]) -> list[dict[str, str]]:
    return [{"file": path} for path in files]


def register_vault_tools(registry: ToolRegistry) -> None:
    """Register the listing tools on ``registry``."""

    @registry.tool("list_files_in_vault", ListFilesInVaultInput)
    async def list_files_in_vault(
        client: ObsidianClient,
        input: ListFilesInVaultInput,
    ) -> list[dict[str, str]]:
        """Lists all files and directories in the root directory of your Obsidian vault.

        Returns:
            [{"file": str}, ...]  # directories end with "/"

        Examples:
            - Use when: Starting a conversation, need an overview of the vault
            - Don't use: Browsing a subfolder → Use list_files_in_dir()

        Error Handling:
            - Vault unreachable → Empty list
        """
        return _listing_payload(await client.list_files())

    @registry.tool("list_files_in_dir", ListFilesInDirInput)
    async def list_files_in_dir(
        client: ObsidianClient,
        input: ListFilesInDirInput,
    ) -> list[dict[str, str]]:
        """Lists all files and directories in a specific directory of your Obsidian vault.

        Args:
            path (str, optional): Folder relative to the vault root.
                Empty string lists the vault root.

        Returns:
            [{"file": str}, ...]  # paths relative to the folder

        Error Handling:
            - Folder missing or vault unreachable → Empty list
        """
        return _listing_payload(await client.list_files(input.path))

    @registry.tool("get_recent_changes", GetRecentChangesInput)
    async def get_recent_changes(
        client: ObsidianClient,
        input: GetRecentChangesInput,
    ) -> list[dict[str, Any]]:
        """Get recently modified files in the vault.

        Args:
            limit (int, optional): Maximum number of files to return (default 10)
            days (int, optional): Look-back window in days (default 30). Has no
                filtering effect: modification times are not available

        Returns:
            [{"path": str, "modified": str, "created": str}, ...]

        Note:
            The Local REST API does not report modification times. Files are
            taken in listing order and the timestamps are approximate.
        """
        changes = await client.get_recent_changes(limit=input.limit, days=input.days)
        return [change.as_payload() for change in changes]

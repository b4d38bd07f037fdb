"""File MCP tools.

This module provides tool handlers for reading and writing files:
- Read one file
- Create a file
- Update a file
- Read several files at once

All tools delegate to the remote vault client. Write failures are reported as
result text, not as errors.
"""

from __future__ import annotations

from obsidian_bridge.core.obsidian_client import ObsidianClient
from obsidian_bridge.dispatcher import ToolRegistry
from obsidian_bridge.models import (
    BatchGetFileContentsInput,
    CreateFileInput,
    GetFileContentInput,
    UpdateFileInput,
)


def format_batch_contents(contents: dict[str, str]) -> str:
    """Join file contents into one text, each framed by a ``# File:`` header."""
    return "".join(f"# File: {path}\n\n{content}\n\n" for path, content in contents.items())


def register_file_tools(registry: ToolRegistry) -> None:
    """Register the file read/write tools on ``registry``."""

    # ==========================================================================
    # READ OPERATIONS
    # ==========================================================================

    @registry.tool("get_file_content", GetFileContentInput)
    async def get_file_content(client: ObsidianClient, input: GetFileContentInput) -> str:
        """Return the content of a single file in your vault.

        Args:
            path (str): Path to the file, relative to the vault root.
                Example: "Daily Notes/2025-10-27.md"

        Returns:
            The raw file text, or "File not found: {path}".
        """
        content = await client.get_file_content(input.path)
        if content is None:
            return f"File not found: {input.path}"
        return content

    @registry.tool("batch_get_file_contents", BatchGetFileContentsInput)
    async def batch_get_file_contents(
        client: ObsidianClient,
        input: BatchGetFileContentsInput,
    ) -> str:
        """Return the contents of multiple files concatenated with headers.

        Args:
            filepaths (list[str]): Paths to read, relative to the vault root.

        Returns:
            One text where each readable file appears as
            "# File: {path}" followed by its content, in the requested order.
            Files that cannot be read are skipped.
        """
        contents = await client.get_batch_file_contents(input.filepaths)
        return format_batch_contents(contents)

    # ==========================================================================
    # WRITE OPERATIONS
    # ==========================================================================

    @registry.tool("create_file", CreateFileInput)
    async def create_file(client: ObsidianClient, input: CreateFileInput) -> str:
        """Create a new file in your vault.

        Args:
            path (str): Path of the new file, relative to the vault root.
            content (str): File content (required, may be empty).

        Returns:
            "File created successfully" or "Failed to create file".
        """
        if await client.create_file(input.path, input.content):
            return "File created successfully"
        return "Failed to create file"

    @registry.tool("update_file", UpdateFileInput)
    async def update_file(client: ObsidianClient, input: UpdateFileInput) -> str:
        """Update the content of an existing file in your vault.

        Args:
            path (str): Path of the file, relative to the vault root.
            content (str): Content to send (required).

        Returns:
            "File updated successfully" or "Failed to update file".
        """
        if await client.update_file(input.path, input.content):
            return "File updated successfully"
        return "Failed to update file"

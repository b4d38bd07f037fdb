"""MCP tool definitions for Obsidian vault operations.

Each tool module exposes a ``register_*`` function that adds its handlers to a
:class:`~obsidian_bridge.dispatcher.ToolRegistry`.
"""

from obsidian_bridge.dispatcher import ToolRegistry
from obsidian_bridge.tools.file_tools import register_file_tools
from obsidian_bridge.tools.vault_tools import register_vault_tools


def build_registry() -> ToolRegistry:
    """Create a registry holding the full tool catalog."""
    registry = ToolRegistry()
    register_vault_tools(registry)
    register_file_tools(registry)
    return registry


__all__ = [
    "build_registry",
    "register_file_tools",
    "register_vault_tools",
]

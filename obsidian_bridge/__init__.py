"""Obsidian REST Bridge MCP Server

Exposes the Obsidian Local REST API as Model Context Protocol tools.
"""

__version__ = "1.0.0"

from obsidian_bridge.config import BridgeSettings, load_settings
from obsidian_bridge.core.obsidian_client import ObsidianClient
from obsidian_bridge.data_models import FileMetadata
from obsidian_bridge.dispatcher import Dispatcher, ToolDescriptor, ToolRegistry
from obsidian_bridge.errors import (
    ArgumentError,
    BridgeError,
    ConfigurationError,
    DuplicateToolError,
    UnknownToolError,
)
from obsidian_bridge.tools import build_registry

__all__ = [
    "BridgeSettings",
    "load_settings",
    "ObsidianClient",
    "FileMetadata",
    "Dispatcher",
    "ToolDescriptor",
    "ToolRegistry",
    "build_registry",
    "BridgeError",
    "ArgumentError",
    "ConfigurationError",
    "DuplicateToolError",
    "UnknownToolError",
]

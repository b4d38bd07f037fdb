"""Errors raised at the tool dispatch boundary.

The remote vault client never raises these: it reports I/O faults through
sentinel return values instead.
"""

from __future__ import annotations


class BridgeError(Exception):
    """Base class for all bridge errors."""


class ConfigurationError(BridgeError, ValueError):
    """Startup configuration is missing or malformed."""


class UnknownToolError(BridgeError):
    """No tool with the requested name is registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class DuplicateToolError(BridgeError):
    """A tool with the same name is already registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Tool '{name}' is already registered")


class ArgumentError(BridgeError, ValueError):
    """Tool arguments failed validation."""

    def __init__(self, tool: str, detail: str) -> None:
        self.tool = tool
        self.detail = detail
        super().__init__(f"Invalid arguments for tool '{tool}': {detail}")

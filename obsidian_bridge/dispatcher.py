"""Tool registry and dispatcher.

The registry holds the immutable tool catalog. The dispatcher validates the
arguments of an incoming call, routes it to the tool handler with the vault
client, and wraps the handler result in a single text content block.

Unlike the vault client, the dispatcher never swallows errors: anything that
goes wrong is logged and re-raised so the host sees a failed tool call.
"""

from __future__ import annotations

import inspect
import json
import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

from mcp.types import TextContent
from pydantic import BaseModel, ValidationError

from obsidian_bridge.errors import ArgumentError, DuplicateToolError, UnknownToolError

if TYPE_CHECKING:
    from obsidian_bridge.core.obsidian_client import ObsidianClient

logger = logging.getLogger(__name__)

ToolHandler = Callable[["ObsidianClient", Any], Awaitable[Any]]


@dataclass(frozen=True)
class ToolDescriptor:
    """Name, description and input model of a registered tool."""

    name: str
    description: str
    input_model: type[BaseModel]

    @property
    def input_schema(self) -> dict[str, Any]:
        """JSON schema of the accepted arguments."""
        return self.input_model.model_json_schema()


@dataclass(frozen=True)
class RegisteredTool:
    descriptor: ToolDescriptor
    handler: ToolHandler


class ToolRegistry:
    """Catalog of tools keyed by name.

    Registering a second tool under an existing name raises
    :class:`DuplicateToolError`; the first registration stays in force.
    """

    def __init__(self) -> None:
        self._tools: dict[str, RegisteredTool] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def register(self, descriptor: ToolDescriptor, handler: ToolHandler) -> None:
        """Add a tool to the catalog.

        Raises:
            DuplicateToolError: If ``descriptor.name`` is already registered.
        """
        if descriptor.name in self._tools:
            raise DuplicateToolError(descriptor.name)
        self._tools[descriptor.name] = RegisteredTool(descriptor, handler)
        logger.debug("Registered tool '%s'", descriptor.name)

    def tool(
        self,
        name: str,
        input_model: type[BaseModel],
        description: Optional[str] = None,
    ) -> Callable[[ToolHandler], ToolHandler]:
        """Decorator form of :meth:`register`.

        The handler docstring is used as the description when none is given.
        """

        def decorator(handler: ToolHandler) -> ToolHandler:
            text = description if description is not None else inspect.getdoc(handler) or ""
            self.register(ToolDescriptor(name, text, input_model), handler)
            return handler

        return decorator

    def get(self, name: str) -> RegisteredTool:
        """Look up a tool by name.

        Raises:
            UnknownToolError: If no tool is registered under ``name``.
        """
        try:
            return self._tools[name]
        except KeyError as exc:
            raise UnknownToolError(name) from exc

    def descriptors(self) -> list[ToolDescriptor]:
        """Descriptors in registration order."""
        return [registered.descriptor for registered in self._tools.values()]


def _normalize_arguments(arguments: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    # Missing or malformed argument objects behave like an empty mapping.
    if not isinstance(arguments, Mapping):
        return {}
    return dict(arguments)


def _format_validation_error(exc: ValidationError) -> str:
    details = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or "arguments"
        details.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(details)


def to_text_content(result: Any) -> TextContent:
    """Wrap a handler result as a text block, JSON-encoding non-strings."""
    if isinstance(result, str):
        text = result
    else:
        text = json.dumps(result, indent=2, ensure_ascii=False)
    return TextContent(type="text", text=text)


class Dispatcher:
    """Routes tool calls from the server shell to the vault client."""

    def __init__(self, registry: ToolRegistry, client: ObsidianClient) -> None:
        self.registry = registry
        self.client = client

    def list_tools(self) -> list[ToolDescriptor]:
        return self.registry.descriptors()

    def parse_arguments(self, tool: RegisteredTool, arguments: Optional[Mapping[str, Any]]) -> BaseModel:
        """Validate raw arguments against the tool's input model.

        Raises:
            ArgumentError: If a required argument is missing or a value is invalid.
        """
        try:
            return tool.descriptor.input_model.model_validate(_normalize_arguments(arguments))
        except ValidationError as exc:
            raise ArgumentError(tool.descriptor.name, _format_validation_error(exc)) from exc

    async def dispatch(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> list[TextContent]:
        """Execute one tool call.

        Args:
            name: Registered tool name.
            arguments: Raw argument mapping from the host; may be ``None``.

        Returns:
            A single-element list holding the text content block.

        Raises:
            UnknownToolError: If ``name`` is not registered.
            ArgumentError: If validation fails. No remote call is made.
        """
        try:
            tool = self.registry.get(name)
            payload = self.parse_arguments(tool, arguments)
            result = await tool.handler(self.client, payload)
        except Exception:
            logger.exception("Error executing tool '%s'", name)
            raise
        return [to_text_content(result)]

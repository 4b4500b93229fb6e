"""Tool bindings: a tool identifier paired with its handler."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ToolBinding:
    """A candidate tool for registration on the MCP server.

    Attributes:
        name: Tool identifier, matched against the tool registry.
        fn: Handler function; its signature defines the input schema.
        description: Description shown to MCP clients.
    """

    name: str
    fn: Callable[..., Any]
    description: str

"""Read-only registry of tool metadata.

The ToolRegistry maps tool identifiers to their ToolDescriptor. It is built
once at process start from the compiled-in TOOL_DEFINITIONS table and never
mutated afterwards, so it can be shared freely between readers.
"""

from collections.abc import Iterable, Iterator
from types import MappingProxyType

from pydantic import ValidationError as PydanticValidationError

from railway_mcp.lib.errors import ToolRegistryError
from railway_mcp.lib.logging_config import get_logger
from railway_mcp.lib.tool_filter.definitions import TOOL_DEFINITIONS
from railway_mcp.lib.validation import flatten_pydantic_errors
from railway_mcp.models.tool import ComplexityLevel, ToolDescriptor, UseCase

logger = get_logger(__name__)


class ToolRegistry:
    """Immutable mapping from tool identifier to ToolDescriptor.

    Insertion order of the source descriptors is preserved, so listings
    derived from the registry are stable across runs.

    Attributes:
        tools: Read-only mapping of tool name to descriptor.
    """

    def __init__(self, descriptors: Iterable[ToolDescriptor]) -> None:
        """Build the registry, rejecting duplicate identifiers.

        Args:
            descriptors: Tool descriptors to register.

        Raises:
            ToolRegistryError: If two descriptors share the same name.
        """
        tools: dict[str, ToolDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.name in tools:
                raise ToolRegistryError(
                    f"Duplicate tool identifier: '{descriptor.name}'"
                )
            tools[descriptor.name] = descriptor

        if not tools:
            raise ToolRegistryError("Tool registry must contain at least one tool")

        self.tools: MappingProxyType[str, ToolDescriptor] = MappingProxyType(tools)
        self._names: frozenset[str] = frozenset(tools)

        logger.debug(f"Built tool registry with {len(tools)} tools")

    @classmethod
    def from_definitions(
        cls, definitions: Iterable[dict[str, object]]
    ) -> "ToolRegistry":
        """Build a registry from plain dictionaries.

        Args:
            definitions: Mappings with name, complexity, use_cases and
                description keys.

        Returns:
            A new ToolRegistry.

        Raises:
            ToolRegistryError: If any definition is malformed or duplicated.
        """
        descriptors: list[ToolDescriptor] = []
        for index, definition in enumerate(definitions):
            try:
                descriptors.append(ToolDescriptor.model_validate(definition))
            except PydanticValidationError as e:
                name = definition.get("name", f"#{index}")
                details = "; ".join(flatten_pydantic_errors(e))
                raise ToolRegistryError(
                    f"Invalid definition for tool '{name}': {details}"
                ) from e
        return cls(descriptors)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(self.tools)

    def __len__(self) -> int:
        return len(self.tools)

    def exists(self, name: str) -> bool:
        """Return True if ``name`` is a registered tool identifier."""
        return name in self._names

    def get(self, name: str) -> ToolDescriptor | None:
        """Return the descriptor for ``name``, or None if not registered."""
        return self.tools.get(name)

    @property
    def tool_names(self) -> frozenset[str]:
        """All registered tool identifiers."""
        return self._names

    def tools_by_complexity(self, complexity: ComplexityLevel | str) -> list[str]:
        """Get tools at exactly the given complexity level, in registry order."""
        level = ComplexityLevel(complexity)
        return [name for name, tool in self.tools.items() if tool.complexity == level]

    def tools_by_use_case(self, use_case: UseCase | str) -> list[str]:
        """Get tools tagged with the given use case, in registry order."""
        tag = UseCase(use_case)
        return [name for name, tool in self.tools.items() if tag in tool.use_cases]


def build_default_registry() -> ToolRegistry:
    """Build the registry from the compiled-in tool table."""
    return ToolRegistry(TOOL_DEFINITIONS)

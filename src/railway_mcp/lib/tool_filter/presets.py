"""Named category presets derived from the tool registry.

A preset is a name an operator can put in the filter string to select a
group of tools at once. Three families exist:

- Complexity presets ("simple", "intermediate", "pro") are cumulative:
  each one admits every tool at or below its tier.
- Use-case presets (one per UseCase tag) admit every tool carrying the tag.
- Curated presets list their tools explicitly and are checked against
  the registry when the index is built.

The index is computed eagerly and never changes afterwards.
"""

from collections.abc import Mapping
from functools import cache
from types import MappingProxyType

from railway_mcp.lib.errors import ToolRegistryError, UnknownCategoryError
from railway_mcp.lib.logging_config import get_logger
from railway_mcp.lib.tool_filter.definitions import (
    COMPLEXITY_PRESET_DESCRIPTIONS,
    CURATED_PRESETS,
    USE_CASE_PRESET_DESCRIPTIONS,
)
from railway_mcp.lib.tool_filter.registry import ToolRegistry, build_default_registry
from railway_mcp.models.tool import CategoryPreset, ComplexityLevel, UseCase

logger = get_logger(__name__)


class CategoryPresetIndex:
    """Index of preset names to the tool identifiers they admit.

    Attributes:
        registry: The registry the presets were derived from.
        presets: Read-only mapping of preset name to CategoryPreset, in
            listing order (curated, complexity, then use-case presets).
    """

    def __init__(
        self,
        registry: ToolRegistry,
        curated: Mapping[str, tuple[str, tuple[str, ...]]] | None = None,
        complexity_descriptions: Mapping[str, str] | None = None,
        use_case_descriptions: Mapping[str, str] | None = None,
        strict: bool = True,
    ) -> None:
        """Derive all presets from the registry.

        Args:
            registry: Tool registry to derive presets from.
            curated: Hand-authored presets as name -> (description, tools).
            complexity_descriptions: Descriptions keyed by complexity level.
            use_case_descriptions: Descriptions keyed by use-case tag.
            strict: Reject preset names that equal a tool identifier
                and presets that match no tools. When False, both are only
                logged and a colliding name resolves as a preset.

        Raises:
            ToolRegistryError: If a curated preset references an unknown
                tool, or a preset is defined twice. In strict mode also
                if a preset name collides with a tool identifier or a
                preset matches no tools.
        """
        self.registry = registry
        complexity_descriptions = complexity_descriptions or {}
        use_case_descriptions = use_case_descriptions or {}

        presets: dict[str, CategoryPreset] = {}

        for name, (description, tools) in (curated or {}).items():
            missing = [tool for tool in tools if not registry.exists(tool)]
            if missing:
                raise ToolRegistryError(
                    f"Preset '{name}' references unknown tools: "
                    f"{', '.join(missing)}",
                    field=f"presets.{name}",
                )
            presets[name] = CategoryPreset(
                name=name,
                description=description,
                tools=tuple(dict.fromkeys(tools)),
                curated=True,
            )

        for preset in self._complexity_presets(complexity_descriptions):
            self._add(presets, preset)

        for preset in self._use_case_presets(use_case_descriptions):
            self._add(presets, preset)

        collisions = sorted(name for name in presets if registry.exists(name))
        if collisions:
            message = (
                f"Preset names collide with tool identifiers: {', '.join(collisions)}"
            )
            if strict:
                raise ToolRegistryError(message, field="presets")
            logger.warning(f"{message} (resolving as presets)")

        empty = [name for name, preset in presets.items() if not preset.tools]
        for name in empty:
            message = f"Preset '{name}' matches no tools"
            if strict:
                raise ToolRegistryError(message, field=f"presets.{name}")
            logger.warning(message)

        self.presets: MappingProxyType[str, CategoryPreset] = MappingProxyType(
            presets
        )
        self._tool_sets: dict[str, frozenset[str]] = {
            name: preset.tool_set for name, preset in presets.items()
        }

        logger.debug(f"Built {len(presets)} category presets")

    def _complexity_presets(
        self, descriptions: Mapping[str, str]
    ) -> list[CategoryPreset]:
        # Partition once, then accumulate in tier order
        by_level: dict[ComplexityLevel, list[str]] = {
            level: [] for level in ComplexityLevel
        }
        for name, tool in self.registry.tools.items():
            by_level[tool.complexity].append(name)

        result: list[CategoryPreset] = []
        accumulated: set[str] = set()
        for level in ComplexityLevel:
            accumulated.update(by_level[level])
            # Keep registry order in the cumulative list
            tools = tuple(name for name in self.registry if name in accumulated)
            result.append(
                CategoryPreset(
                    name=level.value,
                    description=descriptions.get(level.value, f"{level.value} tools"),
                    tools=tools,
                )
            )
        return result

    def _use_case_presets(
        self, descriptions: Mapping[str, str]
    ) -> list[CategoryPreset]:
        return [
            CategoryPreset(
                name=tag.value,
                description=descriptions.get(tag.value, f"{tag.value} tools"),
                tools=tuple(self.registry.tools_by_use_case(tag)),
            )
            for tag in UseCase
        ]

    @staticmethod
    def _add(presets: dict[str, CategoryPreset], preset: CategoryPreset) -> None:
        if preset.name in presets:
            raise ToolRegistryError(
                f"Preset '{preset.name}' is defined more than once",
                field=f"presets.{preset.name}",
            )
        presets[preset.name] = preset

    def __contains__(self, name: object) -> bool:
        return name in self._tool_sets

    def __len__(self) -> int:
        return len(self.presets)

    def preset_names(self) -> list[str]:
        """Get all preset names in listing order."""
        return list(self.presets)

    def is_preset(self, name: str) -> bool:
        """Return True if ``name`` is a known preset."""
        return name in self._tool_sets

    def get(self, name: str) -> CategoryPreset:
        """Get the preset called ``name``.

        Raises:
            UnknownCategoryError: If the preset does not exist.
        """
        try:
            return self.presets[name]
        except KeyError:
            raise UnknownCategoryError(name) from None

    def tools_of(self, name: str) -> frozenset[str]:
        """Get the tool identifiers admitted by preset ``name``.

        Raises:
            UnknownCategoryError: If the preset does not exist.
        """
        try:
            return self._tool_sets[name]
        except KeyError:
            raise UnknownCategoryError(name) from None


def build_default_index(
    registry: ToolRegistry | None = None,
) -> CategoryPresetIndex:
    """Build the preset index from the compiled-in definitions.

    Args:
        registry: Registry to derive from. Defaults to the compiled-in one.

    Returns:
        A strict CategoryPresetIndex.
    """
    return CategoryPresetIndex(
        registry if registry is not None else build_default_registry(),
        curated=CURATED_PRESETS,
        complexity_descriptions=COMPLEXITY_PRESET_DESCRIPTIONS,
        use_case_descriptions=USE_CASE_PRESET_DESCRIPTIONS,
        strict=True,
    )


@cache
def get_default_index() -> CategoryPresetIndex:
    """Get the shared preset index for the compiled-in definitions.

    Built on first use and reused for the rest of the process.
    """
    return build_default_index()

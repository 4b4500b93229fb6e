"""Tool metadata models for tool categorization and filtering.

This module defines the Pydantic models describing every tool the server
can expose, together with the closed vocabularies used to categorize them.

Key models:
- ComplexityLevel: Ordered complexity tier (simple < intermediate < pro)
- UseCase: Closed vocabulary of use-case tags
- ToolDescriptor: Metadata for a single tool
- CategoryPreset: A named, resolved set of tool identifiers
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ComplexityLevel(str, Enum):
    """Complexity tier of a tool.

    Members are declared in tier order: simple < intermediate < pro.
    """

    SIMPLE = "simple"
    INTERMEDIATE = "intermediate"
    PRO = "pro"


class UseCase(str, Enum):
    """Use-case tags a tool can carry."""

    CORE = "core"
    DEPLOYMENT = "deployment"
    DATA = "data"
    MONITORING = "monitoring"
    ENTERPRISE = "enterprise"
    TEAM = "team"
    INTEGRATION = "integration"
    UTILITY = "utility"


class ToolDescriptor(BaseModel):
    """Metadata for a single tool in the registry.

    Attributes:
        name: Unique tool identifier (e.g., "project_list", "backup-restore").
        complexity: Complexity tier of the tool.
        use_cases: Non-empty set of use-case tags.
        description: Short human-readable description.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Unique tool identifier")
    complexity: ComplexityLevel = Field(..., description="Complexity tier")
    use_cases: frozenset[UseCase] = Field(..., description="Use-case tags")
    description: str = Field(default="", description="Human-readable description")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate name is not empty."""
        if not v or not v.strip():
            raise ValueError("name must be a non-empty string")
        if v != v.strip():
            raise ValueError("name must not have surrounding whitespace")
        return v

    @field_validator("use_cases")
    @classmethod
    def validate_use_cases(cls, v: frozenset[UseCase]) -> frozenset[UseCase]:
        """Validate at least one use case is assigned."""
        if not v:
            raise ValueError("use_cases must contain at least one tag")
        return v

    def has_use_case(self, use_case: UseCase | str) -> bool:
        """Return True if the tool is tagged with ``use_case``."""
        return UseCase(use_case) in self.use_cases


class CategoryPreset(BaseModel):
    """A named preset resolving to a fixed set of tool identifiers.

    Attributes:
        name: Preset name used in filter strings (e.g., "simple", "data").
        description: Human-readable description of the preset.
        tools: Tool identifiers admitted by the preset, in registry order.
        curated: True for hand-authored presets listing tools explicitly.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Preset name")
    description: str = Field(..., description="Preset description")
    tools: tuple[str, ...] = Field(..., description="Tool identifiers")
    curated: bool = Field(default=False, description="Hand-authored tool list")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate name is not empty."""
        if not v or not v.strip():
            raise ValueError("name must be a non-empty string")
        return v

    @property
    def tool_set(self) -> frozenset[str]:
        """Tool identifiers as a set for membership checks."""
        return frozenset(self.tools)

"""Tests for pydantic error flattening."""

import pytest
from pydantic import ValidationError

from railway_mcp.lib.validation import flatten_pydantic_errors
from railway_mcp.models.tool import ToolDescriptor


class TestFlattenPydanticErrors:
    """Tests for flatten_pydantic_errors."""

    def test_value_error_includes_input(self) -> None:
        """Test that custom validator failures show the received value."""
        with pytest.raises(ValidationError) as exc_info:
            ToolDescriptor(name="tool", complexity="simple", use_cases=set())

        messages = flatten_pydantic_errors(exc_info.value)

        assert len(messages) == 1
        assert messages[0].startswith("Field 'use_cases':")
        assert "received:" in messages[0]

    def test_multiple_errors(self) -> None:
        """Test one message per failing field."""
        with pytest.raises(ValidationError) as exc_info:
            ToolDescriptor(name="", complexity="expert", use_cases={"core"})

        messages = flatten_pydantic_errors(exc_info.value)

        assert any("'name'" in m for m in messages)
        assert any("'complexity'" in m for m in messages)

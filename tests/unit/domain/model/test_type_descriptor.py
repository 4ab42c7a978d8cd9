"""Tests for domain/model/type_descriptor.py."""

import pytest

from archmeta.domain.model.type_descriptor import TypeDescriptor


class TestTypeDescriptor:
    """Tests for TypeDescriptor."""

    def test_minimal_valid(self) -> None:
        descriptor = TypeDescriptor("string", lambda: "x")
        assert descriptor.constraint_add_on is None
        assert descriptor.mock_generator() == "x"

    def test_empty_kind_raises(self) -> None:
        with pytest.raises(ValueError, match="structural_kind must not be empty"):
            TypeDescriptor("", lambda: "x")

    def test_kind_must_be_identifier(self) -> None:
        with pytest.raises(ValueError, match="must be an identifier"):
            TypeDescriptor("string()", lambda: "x")

    def test_generator_must_be_callable(self) -> None:
        with pytest.raises(TypeError, match="mock_generator must be callable"):
            TypeDescriptor("string", "x")  # type: ignore[arg-type]

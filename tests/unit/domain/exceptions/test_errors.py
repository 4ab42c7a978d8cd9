"""Tests for domain/exceptions."""

import pytest

from archmeta.domain.exceptions import (
    ArchMetaError,
    ConfigurationError,
    MissingCollaboratorError,
    ModelLoadError,
    RuleSyntaxError,
)


class TestConfigurationError:
    """Tests for ConfigurationError exception."""

    def test_is_archmeta_error(self) -> None:
        assert issubclass(ConfigurationError, ArchMetaError)
        assert issubclass(ConfigurationError, ValueError)

    def test_attributes_and_message(self) -> None:
        err = ConfigurationError("CLASS [stereotype_name='Service']", "dependentDaos", "a vs b")
        assert err.scope == "CLASS [stereotype_name='Service']"
        assert err.name == "dependentDaos"
        assert err.reason == "a vs b"
        assert str(err) == (
            "Conflicting capability 'dependentDaos' on CLASS [stereotype_name='Service']: a vs b"
        )

    @pytest.mark.parametrize(
        ("scope", "name", "reason"),
        [("", "n", "r"), ("s", "", "r"), ("s", "n", "")],
    )
    def test_empty_fields_raise(self, scope: str, name: str, reason: str) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            ConfigurationError(scope, name, reason)


class TestMissingCollaboratorError:
    """Tests for MissingCollaboratorError exception."""

    def test_is_lookup_error(self) -> None:
        assert issubclass(MissingCollaboratorError, ArchMetaError)
        assert issubclass(MissingCollaboratorError, LookupError)

    def test_message_names_owner(self) -> None:
        err = MissingCollaboratorError("OrderService", "find", "code", "Barcode")
        assert err.class_name == "OrderService"
        assert err.operation_name == "find"
        assert err.parameter_name == "code"
        assert err.type_name == "Barcode"
        assert str(err) == "No type descriptor for 'Barcode' (parameter OrderService.find.code)"

    def test_empty_parameter_raises(self) -> None:
        with pytest.raises(ValueError, match="parameter_name must not be empty"):
            MissingCollaboratorError("A", "op", "", "T")


class TestModelLoadError:
    """Tests for ModelLoadError exception."""

    def test_message_format(self) -> None:
        err = ModelLoadError("classes[0].name", "is required")
        assert err.path == "classes[0].name"
        assert str(err) == "Invalid model at classes[0].name: is required"

    def test_root_path(self) -> None:
        assert str(ModelLoadError("", "expected an object")) == (
            "Invalid model at <root>: expected an object"
        )

    def test_can_catch_as_archmeta_error(self) -> None:
        with pytest.raises(ArchMetaError) as exc_info:
            raise ModelLoadError("x", "reason")
        assert isinstance(exc_info.value, ModelLoadError)


class TestRuleSyntaxError:
    """Tests for RuleSyntaxError exception."""

    def test_message_format(self) -> None:
        err = RuleSyntaxError("Joi.string()required()", "expected '.' at offset 12")
        assert err.expression == "Joi.string()required()"
        assert str(err) == "Malformed rule 'Joi.string()required()': expected '.' at offset 12"

    def test_empty_reason_raises(self) -> None:
        with pytest.raises(ValueError, match="reason must not be empty"):
            RuleSyntaxError("x", "")

"""Tests for ConsoleReporter.

Tests:
- ConsoleConfig default values and validation
- Header with model summary
- Service section (external access, dependent classes)
- Parameter table (validation rule, mock value)
"""

import json

import pytest

from archmeta.application.reporters.console import ConsoleConfig, ConsoleReporter
from archmeta.domain.exceptions.collaborator import MissingCollaboratorError
from archmeta.domain.model.tag import Tag
from tests.factories import (
    make_augmented,
    make_class,
    make_operation,
    make_parameter,
    make_service,
)


def plain_reporter(**kwargs: object) -> ConsoleReporter:
    return ConsoleReporter(ConsoleConfig(width=200, color=False, **kwargs))  # type: ignore[arg-type]


class TestConsoleConfig:
    """Tests for ConsoleConfig."""

    def test_default_values(self) -> None:
        """Default values are set correctly."""
        config = ConsoleConfig()
        assert config.width == 120
        assert config.color is True
        assert config.show_parameters is True

    def test_narrow_width_raises(self) -> None:
        """Width below 40 is rejected."""
        with pytest.raises(ValueError, match="width must be >= 40"):
            ConsoleConfig(width=39)


class TestConsoleReporter:
    """Tests for ConsoleReporter."""

    def test_report_contains_header(self) -> None:
        """report() contains MODEL header with model name."""
        output = plain_reporter().report(make_augmented(make_class("Orders", "Service")))
        assert "MODEL test" in output

    def test_report_counts(self) -> None:
        """report() shows class and service counts."""
        augmented = make_augmented(
            make_class("Orders", "Service"),
            make_class("Order", "Entity"),
            make_class("Billing", "Service"),
        )
        output = plain_reporter().report(augmented)
        assert "Classes: 3  Services: 2" in output

    def test_service_section(self) -> None:
        """report() renders dependent classes per service."""
        repo = make_class("OrderRepo", "Entity")
        billing = make_class("Billing", "Service")
        orders = make_service("Orders", billing, repo)

        output = plain_reporter().report(make_augmented(repo, billing, orders))

        assert "Orders «Service»" in output
        assert "Dependent services" in output
        assert "Billing" in output
        assert "OrderRepo" in output

    def test_no_dependencies_rendered_as_dash(self) -> None:
        """Empty dependency lists render as '-'."""
        output = plain_reporter().report(make_augmented(make_class("Orders", "Service")))
        line = next(line for line in output.splitlines() if "Dependent DAOs" in line)
        assert line.rstrip().endswith(" -")

    def test_external_access(self) -> None:
        """External access renders yes/no."""
        internal = make_class("Audit", "Service", tags=(Tag("externalAccess", False),))
        output = plain_reporter().report(make_augmented(internal))
        assert "External access" in output
        assert "no" in output.split("External access", 1)[1].splitlines()[0]

    def test_entities_are_not_reported(self) -> None:
        """Classes without service capabilities have no section."""
        output = plain_reporter().report(make_augmented(make_class("Order", "Entity")))
        assert "Order «Entity»" not in output
        assert "Services: 0" in output

    def test_parameter_table(self) -> None:
        """report() renders rule and mock per parameter."""
        service = make_class(
            "Orders",
            "Service",
            operations=(make_operation("place", make_parameter("qty", "Integer", True, 1, 10)),),
        )
        augmented = make_augmented(service)
        output = plain_reporter().report(augmented)

        view = augmented.parameters_of("Orders")[0]
        assert "place" in output
        assert "qty" in output
        assert "Joi.number().integer().min(1).max(10).required()" in output
        assert view.mockValue in output
        assert isinstance(json.loads(view.mockValue), int)

    def test_parameters_hidden(self) -> None:
        """show_parameters=False skips the parameter table."""
        service = make_class(
            "Orders",
            "Service",
            operations=(make_operation("place", make_parameter("qty", "Integer")),),
        )
        output = plain_reporter(show_parameters=False).report(make_augmented(service))
        assert "Joi." not in output

    def test_unknown_parameter_type_raises(self) -> None:
        """Unresolvable parameter types surface from report()."""
        service = make_class(
            "Orders",
            "Service",
            operations=(make_operation("place", make_parameter("code", "Barcode")),),
        )
        with pytest.raises(MissingCollaboratorError):
            plain_reporter().report(make_augmented(service))

    def test_plain_output_has_no_ansi(self) -> None:
        """color=False produces no escape sequences."""
        output = plain_reporter().report(make_augmented(make_class("Orders", "Service")))
        assert "\x1b[" not in output

"""Tests for application/registry/capability.py."""

import pytest

from archmeta.application.registry.capability import (
    Capability,
    CapabilityKind,
    CapabilityRegistry,
    NodeFilter,
)
from archmeta.domain.exceptions.configuration import ConfigurationError
from archmeta.domain.model.enums import NodeKind
from tests.factories import make_class


def first(view: object) -> str:
    return "first"


def second(view: object) -> str:
    return "second"


SERVICES = NodeFilter.where(stereotype_name="Service")


class TestNodeFilter:
    """Tests for NodeFilter."""

    def test_matches_attribute(self) -> None:
        assert SERVICES.matches(make_class("A", "Service")) is True
        assert SERVICES.matches(make_class("B", "Entity")) is False

    def test_missing_attribute_does_not_match(self) -> None:
        assert NodeFilter.where(color="red").matches(make_class("A")) is False

    def test_match_all(self) -> None:
        assert NodeFilter.match_all().matches(object()) is True

    def test_where_is_order_independent(self) -> None:
        assert NodeFilter.where(a=1, b=2) == NodeFilter.where(b=2, a=1)

    def test_str(self) -> None:
        assert str(SERVICES) == "stereotype_name='Service'"
        assert str(NodeFilter.match_all()) == "*"

    def test_unsorted_criteria_raise(self) -> None:
        with pytest.raises(ValueError, match="sorted"):
            NodeFilter(criteria=(("b", 1), ("a", 2)))

    def test_duplicate_criteria_raise(self) -> None:
        with pytest.raises(ValueError, match="duplicate attributes"):
            NodeFilter(criteria=(("a", 1), ("a", 2)))


class TestCapability:
    """Tests for Capability."""

    def test_of_callable_uses_function_name(self) -> None:
        capability = Capability.of(first, CapabilityKind.FUNCTION)
        assert capability.name == "first"
        assert capability.kind is CapabilityKind.FUNCTION

    def test_of_capability_rebinds_kind(self) -> None:
        capability = Capability.of(Capability("x", first), CapabilityKind.FUNCTION)
        assert capability.kind is CapabilityKind.FUNCTION

    def test_name_must_be_identifier(self) -> None:
        with pytest.raises(ValueError, match="must be an identifier"):
            Capability("not a name", first)

    def test_name_must_be_public(self) -> None:
        with pytest.raises(ValueError, match="must be public"):
            Capability("_hidden", first)

    def test_definition_must_be_callable(self) -> None:
        with pytest.raises(TypeError, match="must be callable"):
            Capability("x", "nope")  # type: ignore[arg-type]


class TestCapabilityRegistry:
    """Tests for CapabilityRegistry."""

    def test_capabilities_for_matching_node(self) -> None:
        registry = CapabilityRegistry()
        registry.register(NodeKind.CLASS, SERVICES, accessors=(first,), functions=(second,))

        found = registry.capabilities_for(NodeKind.CLASS, make_class("A", "Service"))

        assert list(found) == ["first", "second"]
        assert found["first"].kind is CapabilityKind.ACCESSOR
        assert found["second"].kind is CapabilityKind.FUNCTION

    def test_non_matching_node_gets_nothing(self) -> None:
        registry = CapabilityRegistry()
        registry.register(NodeKind.CLASS, SERVICES, accessors=(first,))
        assert dict(registry.capabilities_for(NodeKind.CLASS, make_class("B", "Entity"))) == {}

    def test_other_kind_gets_nothing(self) -> None:
        registry = CapabilityRegistry()
        registry.register(NodeKind.PARAMETER, NodeFilter.match_all(), accessors=(first,))
        assert dict(registry.capabilities_for(NodeKind.CLASS, make_class("A", "Service"))) == {}

    def test_identical_registration_is_idempotent(self) -> None:
        registry = CapabilityRegistry()
        registry.register(NodeKind.CLASS, SERVICES, accessors=(first,))
        revision = registry.revision

        registry.register(NodeKind.CLASS, SERVICES, accessors=(first,))

        assert len(registry) == 1
        assert registry.revision == revision
        registry.check_conflicts()

    def test_conflicting_definition_raises_on_check(self) -> None:
        registry = CapabilityRegistry()
        registry.register(NodeKind.CLASS, SERVICES, accessors=(Capability("value", first),))
        registry.register(NodeKind.CLASS, SERVICES, accessors=(Capability("value", second),))

        with pytest.raises(ConfigurationError) as exc_info:
            registry.check_conflicts()

        assert exc_info.value.name == "value"
        assert "stereotype_name='Service'" in exc_info.value.scope

    def test_same_name_as_accessor_and_function_conflicts(self) -> None:
        registry = CapabilityRegistry()
        registry.register(NodeKind.CLASS, SERVICES, accessors=(first,))
        registry.register(NodeKind.CLASS, SERVICES, functions=(first,))

        with pytest.raises(ConfigurationError, match="accessor .* vs function"):
            registry.check_conflicts()

    def test_same_name_in_different_scopes_is_not_a_registration_conflict(self) -> None:
        registry = CapabilityRegistry()
        registry.register(NodeKind.CLASS, SERVICES, accessors=(Capability("value", first),))
        registry.register(
            NodeKind.CLASS,
            NodeFilter.where(stereotype_name="Entity"),
            accessors=(Capability("value", second),),
        )

        registry.check_conflicts()
        found = registry.capabilities_for(NodeKind.CLASS, make_class("B", "Entity"))
        assert found["value"].definition is second

    def test_overlapping_filters_with_different_definitions_raise(self) -> None:
        registry = CapabilityRegistry()
        registry.register(NodeKind.CLASS, SERVICES, accessors=(Capability("value", first),))
        registry.register(
            NodeKind.CLASS, NodeFilter.match_all(), accessors=(Capability("value", second),)
        )

        with pytest.raises(ConfigurationError, match="several filters"):
            registry.capabilities_for(NodeKind.CLASS, make_class("A", "Service"))

    def test_kinds(self) -> None:
        registry = CapabilityRegistry()
        registry.register(NodeKind.PARAMETER, NodeFilter.match_all(), accessors=(first,))
        assert registry.kinds() == frozenset({NodeKind.PARAMETER})

    def test_wrong_kind_type_raises(self) -> None:
        with pytest.raises(TypeError, match="node_kind must be NodeKind"):
            CapabilityRegistry().register("CLASS", SERVICES)  # type: ignore[arg-type]

    def test_wrong_filter_type_raises(self) -> None:
        with pytest.raises(TypeError, match="node_filter must be NodeFilter"):
            CapabilityRegistry().register(NodeKind.CLASS, {"stereotype_name": "Service"})  # type: ignore[arg-type]


class TestReservedNames:
    """Capabilities must not hide view attributes."""

    @pytest.mark.parametrize(
        ("node_kind", "name"),
        [
            (NodeKind.CLASS, "class_"),
            (NodeKind.CLASS, "parameter_views"),
            (NodeKind.CLASS, "node"),
            (NodeKind.PARAMETER, "owner"),
            (NodeKind.PARAMETER, "descriptor"),
            (NodeKind.PARAMETER, "operation"),
            (NodeKind.PARAMETER, "augmented"),
        ],
    )
    def test_view_attribute_name_raises(self, node_kind: NodeKind, name: str) -> None:
        registry = CapabilityRegistry()
        with pytest.raises(ConfigurationError, match=f"'{name}'.*taken by a view attribute"):
            registry.register(node_kind, NodeFilter.match_all(), accessors=(Capability(name, first),))

    def test_rejected_registration_leaves_registry_unchanged(self) -> None:
        registry = CapabilityRegistry()
        with pytest.raises(ConfigurationError):
            registry.register(
                NodeKind.PARAMETER,
                NodeFilter.match_all(),
                accessors=(first, Capability("owner", second)),
            )

        assert len(registry) == 0
        assert registry.revision == 0
        assert registry.kinds() == frozenset()

    def test_name_reserved_for_other_kind_only(self) -> None:
        registry = CapabilityRegistry()
        registry.register(NodeKind.CLASS, SERVICES, accessors=(Capability("owner", first),))
        assert "owner" in registry.capabilities_for(NodeKind.CLASS, make_class("A", "Service"))

"""Capability registry for model node augmentation.

A capability is a named, lazily evaluated derivation attached to every
node of one kind that matches a filter. Accessors are read as plain
attributes (``view.allowExternalAccess``); functions are called with
arguments (``view.getDependentClasses("Entity")``).

One registry per generation run. The host pipeline constructs it and
passes it to the AugmentationEngine; nothing is process-global.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, replace
from enum import Enum, auto
from types import MappingProxyType

from archmeta.domain.exceptions.configuration import ConfigurationError
from archmeta.domain.model.enums import NodeKind

logger = logging.getLogger(__name__)

_MISSING = object()

_VIEW_ATTRIBUTES = frozenset({"augmented", "capability_names", "has_capability", "node"})

RESERVED_NAMES: Mapping[NodeKind, frozenset[str]] = MappingProxyType(
    {
        NodeKind.CLASS: _VIEW_ATTRIBUTES | {"class_", "parameter_views"},
        NodeKind.PARAMETER: _VIEW_ATTRIBUTES | {"descriptor", "operation", "owner", "parameter"},
    }
)


class CapabilityKind(Enum):
    """How a capability is exposed on a view."""

    ACCESSOR = auto()  # read as attribute, memoized
    FUNCTION = auto()  # bound callable, evaluated per call


@dataclass(frozen=True, slots=True)
class NodeFilter:
    """Attribute-equality filter over model nodes.

    Empty criteria match every node.

    Attributes:
        criteria: (attribute, expected value) pairs, sorted by attribute
    """

    criteria: tuple[tuple[str, object], ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        names = [name for name, _ in self.criteria]
        if any(not name for name in names):
            raise ValueError("filter attribute names must not be empty")
        if len(names) != len(set(names)):
            raise ValueError(f"filter has duplicate attributes: {names}")
        if names != sorted(names):
            raise ValueError("filter criteria must be sorted by attribute, use NodeFilter.where()")

    @classmethod
    def where(cls, **criteria: object) -> NodeFilter:
        """Build a filter from keyword criteria."""
        return cls(criteria=tuple(sorted(criteria.items())))

    @classmethod
    def match_all(cls) -> NodeFilter:
        """Filter matching every node."""
        return cls()

    def matches(self, node: object) -> bool:
        """Check node attributes against all criteria."""
        return all(getattr(node, name, _MISSING) == expected for name, expected in self.criteria)

    def __str__(self) -> str:
        """Format as attr=value pairs, '*' for the empty filter."""
        if not self.criteria:
            return "*"
        return ", ".join(f"{name}={value!r}" for name, value in self.criteria)


@dataclass(frozen=True, slots=True)
class Capability:
    """Named derivation attached to a view.

    Attributes:
        name: Attribute name consumers read (e.g. "allowExternalAccess")
        definition: Callable taking the view (plus arguments for functions)
        kind: ACCESSOR or FUNCTION
    """

    name: str
    definition: Callable[..., object]
    kind: CapabilityKind = CapabilityKind.ACCESSOR

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name.isidentifier():
            raise ValueError(f"capability name must be an identifier, got {self.name!r}")
        if self.name.startswith("_"):
            raise ValueError(f"capability name must be public, got {self.name!r}")
        if not callable(self.definition):
            raise TypeError(f"capability '{self.name}' definition must be callable")

    @classmethod
    def of(
        cls,
        item: Capability | Callable[..., object],
        kind: CapabilityKind,
    ) -> Capability:
        """Normalize a Capability or bare callable (named by __name__)."""
        if isinstance(item, Capability):
            return item if item.kind is kind else replace(item, kind=kind)
        return cls(name=item.__name__, definition=item, kind=kind)


_Scope = tuple[NodeKind, NodeFilter]


class CapabilityRegistry:
    """Table of (node kind, filter) -> capabilities.

    Registration is idempotent: declaring an identical capability again
    is a no-op. A differing definition under the same name and scope is
    kept as a conflict and reported by check_conflicts(), which the
    engine calls before building any view.
    """

    def __init__(self) -> None:
        self._table: dict[_Scope, dict[str, Capability]] = {}
        self._conflicts: list[tuple[_Scope, Capability, Capability]] = []
        self._revision = 0

    def register(
        self,
        node_kind: NodeKind,
        node_filter: NodeFilter,
        accessors: Iterable[Capability | Callable[..., object]] = (),
        functions: Iterable[Capability | Callable[..., object]] = (),
    ) -> None:
        """Register capabilities for nodes of a kind matching a filter.

        Args:
            node_kind: Node kind receiving the capabilities
            node_filter: Filter selecting nodes of that kind
            accessors: Attribute-style capabilities
            functions: Callable capabilities

        Raises:
            TypeError: If node_kind or node_filter has the wrong type
            ConfigurationError: If a name is taken by a view attribute of
                node_kind
        """
        if not isinstance(node_kind, NodeKind):
            raise TypeError(f"node_kind must be NodeKind, got {type(node_kind).__name__}")
        if not isinstance(node_filter, NodeFilter):
            raise TypeError(f"node_filter must be NodeFilter, got {type(node_filter).__name__}")

        items = [Capability.of(a, CapabilityKind.ACCESSOR) for a in accessors]
        items += [Capability.of(f, CapabilityKind.FUNCTION) for f in functions]
        for capability in items:
            if capability.name in RESERVED_NAMES[node_kind]:
                raise ConfigurationError(
                    scope=f"{node_kind.name} [{node_filter}]",
                    name=capability.name,
                    reason="name is taken by a view attribute",
                )

        scope = (node_kind, node_filter)
        entries = self._table.setdefault(scope, {})
        for capability in items:
            existing = entries.get(capability.name)
            if existing is None:
                entries[capability.name] = capability
                self._revision += 1
                logger.debug(
                    "registered %s %s on %s [%s]",
                    capability.kind.name.lower(),
                    capability.name,
                    node_kind.name,
                    node_filter,
                )
            elif existing != capability:
                self._conflicts.append((scope, existing, capability))
                self._revision += 1

    def check_conflicts(self) -> None:
        """Raise on the first conflicting registration.

        Raises:
            ConfigurationError: If a name was registered twice in one
                scope with different definitions
        """
        if not self._conflicts:
            return
        (kind, node_filter), first, second = self._conflicts[0]
        raise ConfigurationError(
            scope=f"{kind.name} [{node_filter}]",
            name=first.name,
            reason=f"{_describe(first)} vs {_describe(second)}",
        )

    def capabilities_for(self, node_kind: NodeKind, node: object) -> Mapping[str, Capability]:
        """Capabilities applying to a node, in registration order.

        Raises:
            ConfigurationError: If two matching filters give one name
                different definitions
        """
        found: dict[str, Capability] = {}
        for (kind, node_filter), entries in self._table.items():
            if kind is not node_kind or not node_filter.matches(node):
                continue
            for name, capability in entries.items():
                existing = found.get(name)
                if existing is not None and existing != capability:
                    raise ConfigurationError(
                        scope=f"{node_kind.name} {node!s}",
                        name=name,
                        reason="matched by several filters with different definitions",
                    )
                found[name] = capability
        return MappingProxyType(found)

    def kinds(self) -> frozenset[NodeKind]:
        """Node kinds with at least one registration."""
        return frozenset(kind for kind, _ in self._table)

    @property
    def revision(self) -> int:
        """Counter bumped by every effective registration."""
        return self._revision

    def __len__(self) -> int:
        """Number of registered capabilities across all scopes."""
        return sum(len(entries) for entries in self._table.values())


def _describe(capability: Capability) -> str:
    definition = capability.definition
    qualname = getattr(definition, "__qualname__", repr(definition))
    return f"{capability.kind.name.lower()} {qualname}"

"""Read-only views composing a model node with its capabilities.

A view never mutates the node it wraps. Attribute reads resolve, in
order: view attributes, registered capabilities, the wrapped node.
Accessor results are memoized write-once per view, so concurrent
readers may compute a value twice but always observe the first one.
"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

from archmeta.application.registry.capability import CapabilityKind
from archmeta.domain.exceptions.collaborator import MissingCollaboratorError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from archmeta.application.augmentation.engine import AugmentedModel
    from archmeta.application.registry.capability import Capability
    from archmeta.domain.model.class_ import Class
    from archmeta.domain.model.operation import Operation
    from archmeta.domain.model.parameter import Parameter
    from archmeta.domain.model.type_descriptor import TypeDescriptor


class NodeView:
    """Base view: node + capabilities + owning augmented model."""

    __slots__ = ("_augmented", "_cache", "_capabilities", "_node")

    def __init__(
        self,
        node: object,
        capabilities: Mapping[str, Capability],
        augmented: AugmentedModel,
    ) -> None:
        object.__setattr__(self, "_node", node)
        object.__setattr__(self, "_capabilities", capabilities)
        object.__setattr__(self, "_augmented", augmented)
        object.__setattr__(self, "_cache", {})

    @property
    def node(self) -> object:
        """Wrapped model node."""
        return self._node

    @property
    def augmented(self) -> AugmentedModel:
        """Augmented model this view belongs to."""
        return self._augmented

    @property
    def capability_names(self) -> frozenset[str]:
        """Names of capabilities installed on this view."""
        return frozenset(self._capabilities)

    def has_capability(self, name: str) -> bool:
        """Check if a capability with given name is installed."""
        return name in self._capabilities

    def __getattr__(self, name: str) -> object:
        if name.startswith("_"):
            raise AttributeError(name)

        capability = self._capabilities.get(name)
        if capability is None:
            return getattr(self._node, name)

        if capability.kind is CapabilityKind.FUNCTION:
            return partial(capability.definition, self)

        cache = self._cache
        if name in cache:
            return cache[name]
        value = capability.definition(self)
        return cache.setdefault(name, value)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._capabilities) | set(dir(self._node)))

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._node == other._node and self._augmented is other._augmented

    def __hash__(self) -> int:
        return hash((type(self), self._node))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._node!s})"


class ClassView(NodeView):
    """View over a model Class."""

    __slots__ = ()

    @property
    def class_(self) -> Class:
        """Wrapped class."""
        return self._node  # type: ignore[return-value]

    @property
    def parameter_views(self) -> tuple[ParameterView, ...]:
        """Views of this class's parameters in declaration order."""
        return self._augmented.parameters_of(self.class_.id)


class ParameterView(NodeView):
    """View over an operation Parameter, aware of its owners."""

    __slots__ = ("_operation", "_owner")

    def __init__(
        self,
        node: Parameter,
        capabilities: Mapping[str, Capability],
        augmented: AugmentedModel,
        owner: Class,
        operation: Operation,
    ) -> None:
        super().__init__(node, capabilities, augmented)
        object.__setattr__(self, "_owner", owner)
        object.__setattr__(self, "_operation", operation)

    @property
    def parameter(self) -> Parameter:
        """Wrapped parameter."""
        return self._node  # type: ignore[return-value]

    @property
    def owner(self) -> ClassView:
        """View of the class declaring this parameter."""
        return self._augmented.class_view(self._owner.id)

    @property
    def operation(self) -> Operation:
        """Operation declaring this parameter."""
        return self._operation

    @property
    def descriptor(self) -> TypeDescriptor:
        """Resolve the parameter type through the type system.

        Raises:
            MissingCollaboratorError: If the type system does not know the type
        """
        parameter = self.parameter
        descriptor = self._augmented.type_system.resolve(parameter.type)
        if descriptor is None:
            raise MissingCollaboratorError(
                class_name=self._owner.name,
                operation_name=self._operation.name,
                parameter_name=parameter.name,
                type_name=parameter.type.name,
            )
        return descriptor

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (
            self._node == other._node
            and self._owner.id == other._owner.id
            and self._operation == other._operation
            and self._augmented is other._augmented
        )

    def __hash__(self) -> int:
        return hash((type(self), self._owner.id, self._operation.name, self._node))

    def __repr__(self) -> str:
        return f"ParameterView({self._owner.name}.{self._operation.name}.{self._node.name})"

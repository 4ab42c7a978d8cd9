"""Augmentation engine.

Applies a CapabilityRegistry to a Model once per generation pass and
returns an AugmentedModel of read-only views. Policy on re-application:
idempotent. Applying the same registry state to the same, unchanged
model returns the same AugmentedModel instance, so results never change
between runs of the engine inside one pass. Adding a class to the model
or a capability to the registry makes the next apply rebuild.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from archmeta.application.augmentation.views import ClassView, ParameterView
from archmeta.domain.model.configuration import AugmentationConfig
from archmeta.domain.model.enums import NodeKind

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from archmeta.application.registry.capability import CapabilityRegistry
    from archmeta.domain.model.class_ import Class
    from archmeta.domain.model.model import Model
    from archmeta.domain.ports.type_system import TypeSystem

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AugmentedModel:
    """Views over every node of one model.

    Built once by AugmentationEngine.apply and not modified afterwards.

    Attributes:
        model: Underlying model, never mutated
        type_system: Collaborator resolving parameter types
        config: Capability configuration
    """

    model: Model
    type_system: TypeSystem
    config: AugmentationConfig
    _classes: Mapping[str, ClassView] = field(default_factory=dict, repr=False)
    _parameters: Mapping[str, tuple[ParameterView, ...]] = field(
        default_factory=dict, repr=False
    )

    def class_view(self, class_id: str) -> ClassView:
        """View of the class with given id.

        Raises:
            KeyError: If no class with that id exists in the model
        """
        try:
            return self._classes[class_id]
        except KeyError:
            raise KeyError(f"class '{class_id}' is not part of the model") from None

    def find(self, name: str) -> ClassView | None:
        """View of the first class with given name. Returns None if not found."""
        for view in self._classes.values():
            if view.class_.name == name:
                return view
        return None

    def view_of(self, cls: Class) -> ClassView:
        """View wrapping a class of this model."""
        return self.class_view(cls.id)

    def parameters_of(self, class_id: str) -> tuple[ParameterView, ...]:
        """Parameter views of a class in declaration order."""
        return self._parameters.get(class_id, ())

    def iter_classes(self) -> tuple[ClassView, ...]:
        """All class views in model order."""
        return tuple(self._classes.values())

    def iter_parameters(self) -> Iterator[ParameterView]:
        """All parameter views across the model."""
        for views in self._parameters.values():
            yield from views

    def with_capability(self, name: str) -> tuple[ClassView, ...]:
        """Class views carrying a capability (e.g. all services)."""
        return tuple(view for view in self._classes.values() if view.has_capability(name))


class AugmentationEngine:
    """Install registered capabilities on model views.

    Must run before any consumer reads a capability. Conflicting
    registrations abort the pass before any view is produced.
    """

    def __init__(
        self,
        registry: CapabilityRegistry,
        type_system: TypeSystem,
        config: AugmentationConfig | None = None,
    ) -> None:
        """Initialize engine.

        Args:
            registry: Capabilities of this run
            type_system: Collaborator resolving parameter types
            config: Capability configuration. Uses defaults if None.

        Raises:
            TypeError: If registry or type_system is None
        """
        if registry is None:
            raise TypeError("registry must not be None")
        if type_system is None:
            raise TypeError("type_system must not be None")

        self._registry = registry
        self._type_system = type_system
        self._config = config or AugmentationConfig()
        self._applied: dict[int, tuple[Model, tuple[int, int], AugmentedModel]] = {}

    def apply(self, model: Model) -> AugmentedModel:
        """Build views for every node of the model.

        Args:
            model: Model of this generation pass

        Returns:
            Augmented model. Same instance on repeated calls while neither
            the registry nor the model has changed.

        Raises:
            TypeError: If model is None
            ConfigurationError: If registrations conflict
        """
        if model is None:
            raise TypeError("model must not be None")

        revision = (self._registry.revision, model.revision)
        cached = self._applied.get(id(model))
        if cached is not None and cached[0] is model and cached[1] == revision:
            logger.debug("model %r already augmented, reusing views", model.name)
            return cached[2]

        self._registry.check_conflicts()

        augmented = AugmentedModel(
            model=model,
            type_system=self._type_system,
            config=self._config,
        )
        classes: dict[str, ClassView] = {}
        parameters: dict[str, tuple[ParameterView, ...]] = {}

        for cls in model.iter_classes():
            classes[cls.id] = ClassView(
                cls,
                self._registry.capabilities_for(NodeKind.CLASS, cls),
                augmented,
            )
            parameters[cls.id] = tuple(
                ParameterView(
                    parameter,
                    self._registry.capabilities_for(NodeKind.PARAMETER, parameter),
                    augmented,
                    owner=cls,
                    operation=operation,
                )
                for operation, parameter in cls.iter_parameters()
            )

        augmented._classes = MappingProxyType(classes)
        augmented._parameters = MappingProxyType(parameters)
        self._applied[id(model)] = (model, revision, augmented)

        logger.debug(
            "augmented model %r: %d classes, %d parameters",
            model.name,
            len(classes),
            sum(len(views) for views in parameters.values()),
        )
        return augmented

"""Service stereotype support.

The host pipeline calls init_stereotype(context) once per run, before
the first class with the stereotype is processed, then
init_class(context, cls) for every class. Capabilities land in the
run's own registry; augment() runs both hooks and the engine.

Example:
    context = GenerationContext(model=load_model_file(path))
    augmented = augment(context)
    for service in augmented.with_capability("allowExternalAccess"):
        print(service.name, service.dependentDaos)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from archmeta.application.augmentation.engine import AugmentationEngine
from archmeta.application.capabilities.parameter import register_parameter_capabilities
from archmeta.application.capabilities.service import register_service_capabilities
from archmeta.application.registry.capability import CapabilityRegistry
from archmeta.domain.model.configuration import AugmentationConfig
from archmeta.infrastructure.type_catalog import TypeCatalog

if TYPE_CHECKING:
    from archmeta.application.augmentation.engine import AugmentedModel
    from archmeta.domain.model.class_ import Class
    from archmeta.domain.model.model import Model
    from archmeta.domain.ports.type_system import TypeSystem

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class GenerationContext:
    """State of one generation run.

    Attributes:
        model: Model being generated
        config: Capability configuration
        registry: Capabilities of this run. Fresh registry if omitted.
        type_system: Type collaborator. TypeCatalog seeded from config if omitted.
    """

    model: Model
    config: AugmentationConfig = field(default_factory=AugmentationConfig)
    registry: CapabilityRegistry = field(default_factory=CapabilityRegistry)
    type_system: TypeSystem | None = None
    _engine: AugmentationEngine | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.model is None:
            raise TypeError("model must not be None")
        if self.type_system is None:
            self.type_system = TypeCatalog(seed=self.config.mock_seed)

    @property
    def engine(self) -> AugmentationEngine:
        """Engine of this run, created on first use."""
        if self._engine is None:
            self._engine = AugmentationEngine(self.registry, self.type_system, self.config)
        return self._engine


def init_stereotype(context: GenerationContext) -> None:
    """Register service and parameter capabilities for this run.

    Safe to call again: identical registrations are no-ops.
    """
    register_service_capabilities(context.registry, context.config)
    register_parameter_capabilities(context.registry)
    logger.debug(
        "%s stereotype initialized (%d capabilities)",
        context.config.service_stereotype,
        len(context.registry),
    )


def init_class(context: GenerationContext, cls: Class) -> None:
    """Per-class hook. Services need no per-class setup."""


def augment(context: GenerationContext) -> AugmentedModel:
    """Run the stereotype hooks and the engine over the context's model."""
    init_stereotype(context)
    for cls in context.model.iter_classes():
        init_class(context, cls)
    return context.engine.apply(context.model)

"""Capabilities of classes with the service stereotype."""

from __future__ import annotations

from typing import TYPE_CHECKING

from archmeta.application.capabilities.dependencies import get_dependent_classes
from archmeta.application.registry.capability import Capability, NodeFilter
from archmeta.domain.model.enums import NodeKind

if TYPE_CHECKING:
    from archmeta.application.augmentation.views import ClassView
    from archmeta.application.registry.capability import CapabilityRegistry
    from archmeta.domain.model.configuration import AugmentationConfig


def allow_external_access(view: ClassView) -> bool:
    """Services are reachable from outside unless explicitly tagged off."""
    tag_name = view.augmented.config.external_access_tag
    if not view.class_.has_tag(tag_name):
        return True
    return view.class_.is_tagged_as(tag_name)


def dependent_classes(view: ClassView, stereotype_name: str) -> tuple[ClassView, ...]:
    """Views of the classes this class depends on, filtered by stereotype."""
    augmented = view.augmented
    return tuple(
        augmented.view_of(target)
        for target in get_dependent_classes(view.class_, stereotype_name, augmented.model)
    )


def dependent_services(view: ClassView) -> tuple[ClassView, ...]:
    return view.getDependentClasses(view.augmented.config.service_stereotype)


def dependent_daos(view: ClassView) -> tuple[ClassView, ...]:
    return view.getDependentClasses(view.augmented.config.dao_stereotype)


SERVICE_ACCESSORS = (
    Capability("allowExternalAccess", allow_external_access),
    Capability("dependentServices", dependent_services),
    Capability("dependentDaos", dependent_daos),
)

SERVICE_FUNCTIONS = (Capability("getDependentClasses", dependent_classes),)


def register_service_capabilities(
    registry: CapabilityRegistry,
    config: AugmentationConfig,
) -> None:
    """Attach service capabilities to classes with the service stereotype."""
    registry.register(
        NodeKind.CLASS,
        NodeFilter.where(stereotype_name=config.service_stereotype),
        accessors=SERVICE_ACCESSORS,
        functions=SERVICE_FUNCTIONS,
    )

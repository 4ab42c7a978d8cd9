"""Capabilities installed by the service stereotype support."""

from archmeta.application.capabilities.dependencies import get_dependent_classes
from archmeta.application.capabilities.parameter import (
    PARAMETER_ACCESSORS,
    register_parameter_capabilities,
)
from archmeta.application.capabilities.service import (
    SERVICE_ACCESSORS,
    SERVICE_FUNCTIONS,
    register_service_capabilities,
)

__all__ = [
    "PARAMETER_ACCESSORS",
    "SERVICE_ACCESSORS",
    "SERVICE_FUNCTIONS",
    "get_dependent_classes",
    "register_parameter_capabilities",
    "register_service_capabilities",
]

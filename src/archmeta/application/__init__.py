"""Application layer for model augmentation.

Components:
- registry: Capability registry (node kind + filter -> capabilities)
- augmentation: Engine building read-only views over a model
- capabilities: Service and parameter capabilities
- synthesis: Validation rule and mock value synthesizers
- reporters: Output formatting (rich console)
"""

from archmeta.application.augmentation import (
    AugmentationEngine,
    AugmentedModel,
    ClassView,
    ParameterView,
)
from archmeta.application.capabilities import (
    get_dependent_classes,
    register_parameter_capabilities,
    register_service_capabilities,
)
from archmeta.application.registry import Capability, CapabilityRegistry, NodeFilter
from archmeta.application.reporters import ConsoleConfig, ConsoleReporter
from archmeta.application.synthesis import build_mock_value, build_validation_spec

__all__ = [
    # Registry
    "Capability",
    "CapabilityRegistry",
    "NodeFilter",
    # Augmentation
    "AugmentationEngine",
    "AugmentedModel",
    "ClassView",
    "ParameterView",
    # Capabilities
    "get_dependent_classes",
    "register_parameter_capabilities",
    "register_service_capabilities",
    # Synthesis
    "build_mock_value",
    "build_validation_spec",
    # Reporters
    "ConsoleConfig",
    "ConsoleReporter",
]

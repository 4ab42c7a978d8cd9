"""Capabilities of operation parameters."""

from __future__ import annotations

from typing import TYPE_CHECKING

from archmeta.application.registry.capability import Capability, NodeFilter
from archmeta.application.synthesis.mock import build_mock_value
from archmeta.application.synthesis.validation import build_validation_spec
from archmeta.domain.model.enums import NodeKind

if TYPE_CHECKING:
    from archmeta.application.augmentation.views import ParameterView
    from archmeta.application.registry.capability import CapabilityRegistry


def joi_definition(view: ParameterView) -> str:
    """Validation rule expression for the parameter."""
    return build_validation_spec(
        view.parameter,
        view.descriptor,
        namespace=view.augmented.config.validation_namespace,
    )


def mock_value(view: ParameterView) -> str:
    """Sample value for the parameter as a code literal."""
    return build_mock_value(view.descriptor)


PARAMETER_ACCESSORS = (
    Capability("joiDefinition", joi_definition),
    Capability("mockValue", mock_value),
)


def register_parameter_capabilities(registry: CapabilityRegistry) -> None:
    """Attach validation and mock capabilities to every parameter."""
    registry.register(
        NodeKind.PARAMETER,
        NodeFilter.match_all(),
        accessors=PARAMETER_ACCESSORS,
    )

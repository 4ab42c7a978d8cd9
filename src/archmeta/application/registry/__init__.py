"""Capability registry: which derived properties apply to which nodes."""

from archmeta.application.registry.capability import (
    RESERVED_NAMES,
    Capability,
    CapabilityKind,
    CapabilityRegistry,
    NodeFilter,
)

__all__ = [
    "RESERVED_NAMES",
    "Capability",
    "CapabilityKind",
    "CapabilityRegistry",
    "NodeFilter",
]

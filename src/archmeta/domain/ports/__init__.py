"""Domain ports (interfaces for adapters)."""

from archmeta.domain.ports.type_system import TypeSystem

__all__ = ["TypeSystem"]

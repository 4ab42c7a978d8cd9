"""Type-system protocol.

The semantic type catalog is an external collaborator. Adapters
implement this Protocol; infrastructure.type_catalog ships a default.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from archmeta.domain.model.type_descriptor import TypeDescriptor
    from archmeta.domain.model.type_ref import TypeRef


class TypeSystem(Protocol):
    """Contract for semantic type catalogs.

    Implementations must be free of shared mutable state: views
    resolve types lazily and may be read from several threads.

    Example:
        class FixedTypes:
            def resolve(self, type_ref: TypeRef) -> TypeDescriptor | None:
                if type_ref.name == "Flag":
                    return TypeDescriptor("boolean", lambda: True)
                return None
    """

    def resolve(self, type_ref: TypeRef) -> TypeDescriptor | None:
        """Describe a semantic type.

        Args:
            type_ref: Type to describe

        Returns:
            Descriptor, or None if the type is unknown
        """
        ...

"""Semantic type reference value object."""

from dataclasses import dataclass

from archmeta.domain.model.enums import TargetKind


@dataclass(frozen=True, slots=True)
class TypeRef:
    """Reference to a domain type carried by a parameter or dependency end.

    Object references point at their class by id only; the class is
    resolved through Model.get_class so ownership stays acyclic.

    Attributes:
        name: Semantic type name (e.g. "String", "Email", "Order")
        kind: OBJECT, PRIMITIVE or UNKNOWN
        class_id: Referenced class id, object references only
    """

    name: str
    kind: TargetKind = TargetKind.PRIMITIVE
    class_id: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.kind is TargetKind.PRIMITIVE and self.class_id is not None:
            raise ValueError(f"primitive type '{self.name}' must not reference a class")
        if not self.name and self.kind is not TargetKind.UNKNOWN:
            raise ValueError("type name must not be empty")

    @property
    def is_object(self) -> bool:
        """Check if this is an object reference to a model class."""
        return self.kind is TargetKind.OBJECT and self.class_id is not None

    @classmethod
    def primitive(cls, name: str) -> "TypeRef":
        """Create a primitive type reference."""
        return cls(name=name, kind=TargetKind.PRIMITIVE)

    @classmethod
    def object_ref(cls, class_id: str, name: str | None = None) -> "TypeRef":
        """Create an object reference to the class with given id."""
        return cls(name=name or class_id, kind=TargetKind.OBJECT, class_id=class_id)

    def __str__(self) -> str:
        """Format as type name."""
        return self.name

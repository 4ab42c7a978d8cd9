"""Dependency edge value object."""

from dataclasses import dataclass

from archmeta.domain.model.type_ref import TypeRef


@dataclass(frozen=True, slots=True)
class Dependency:
    """Directed design-time usage edge from a class to a type.

    Attributes:
        target: Type at the far end of the edge
    """

    target: TypeRef

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.target is None:
            raise TypeError("target must not be None")

    @property
    def target_class_id(self) -> str | None:
        """Id of the target class for object ends, None otherwise."""
        return self.target.class_id if self.target.is_object else None

"""Model class entity."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from archmeta.domain.model.dependency import Dependency
    from archmeta.domain.model.operation import Operation
    from archmeta.domain.model.parameter import Parameter
    from archmeta.domain.model.tag import Tag


@dataclass(frozen=True, slots=True)
class Class:
    """Class from the diagram model.

    Attributes:
        id: Stable identifier, target of dependency back-references
        name: Class name
        stereotype_name: Architectural role ("Service", "Entity", ...)
        dependencies: Outgoing dependency edges in declaration order
        operations: Operations in declaration order
        tags: Key/value annotations
    """

    id: str
    name: str
    stereotype_name: str | None = None
    dependencies: tuple[Dependency, ...] = ()
    operations: tuple[Operation, ...] = ()
    tags: tuple[Tag, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.id:
            raise ValueError("class id must not be empty")

        if not self.name:
            raise ValueError("class name must not be empty")

        names = [tag.name for tag in self.tags]
        if len(names) != len(set(names)):
            raise ValueError(f"class '{self.name}' has duplicate tags")

    def has_tag(self, name: str) -> bool:
        """Check if class carries a tag with given name."""
        return self.get_tag(name) is not None

    def get_tag(self, name: str) -> Tag | None:
        """Get tag by name. Returns None if not found."""
        for tag in self.tags:
            if tag.name == name:
                return tag
        return None

    def is_tagged_as(self, name: str) -> bool:
        """Check if tag is present with a truthy value."""
        tag = self.get_tag(name)
        return tag is not None and tag.is_truthy

    def iter_parameters(self) -> Iterator[tuple[Operation, Parameter]]:
        """Iterate (operation, parameter) pairs in declaration order."""
        for operation in self.operations:
            for parameter in operation.parameters:
                yield operation, parameter

    def __str__(self) -> str:
        """Format as name «stereotype»."""
        if self.stereotype_name:
            return f"{self.name} «{self.stereotype_name}»"
        return self.name

"""Model aggregate root."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from archmeta.domain.model.class_ import Class
    from archmeta.domain.model.operation import Operation
    from archmeta.domain.model.parameter import Parameter


@dataclass(slots=True)
class Model:
    """Aggregate root for one generation run.

    Owns every Class node. Dependencies reference classes by id,
    resolved here. Classes are added through add_class, which bumps
    revision so cached augmentations can tell the model changed.
    Augmentation never mutates the model.

    Attributes:
        name: Model name, informational
        classes: Class id -> Class mapping, insertion ordered
    """

    name: str = "model"
    classes: dict[str, Class] = field(default_factory=dict)
    _revision: int = field(default=0, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for key, cls in self.classes.items():
            if key != cls.id:
                raise ValueError(f"class id {cls.id!r} does not match key {key!r}")

    def add_class(self, cls: Class) -> None:
        """Add class to model.

        Raises:
            ValueError: If class with same id already exists
        """
        if cls.id in self.classes:
            raise ValueError(f"class '{cls.id}' already exists in model")
        self.classes[cls.id] = cls
        self._revision += 1

    @property
    def revision(self) -> int:
        """Counter bumped by every add_class call."""
        return self._revision

    def get_class(self, class_id: str) -> Class | None:
        """Get class by id. Returns None if not found."""
        return self.classes.get(class_id)

    def find_class(self, name: str) -> Class | None:
        """Get first class with given name. Returns None if not found."""
        for cls in self.classes.values():
            if cls.name == name:
                return cls
        return None

    def iter_classes(self) -> Sequence[Class]:
        """All classes in insertion order."""
        return tuple(self.classes.values())

    def iter_parameters(self) -> Iterator[tuple[Class, Operation, Parameter]]:
        """Iterate (class, operation, parameter) across the whole model."""
        for cls in self.classes.values():
            for operation, parameter in cls.iter_parameters():
                yield cls, operation, parameter

    @classmethod
    def of(cls, *classes: Class, name: str = "model") -> Model:
        """Build a model from classes."""
        model = cls(name=name)
        for klass in classes:
            model.add_class(klass)
        return model

"""Type descriptor returned by the type-system collaborator."""

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TypeDescriptor:
    """Structural description of a semantic type.

    Attributes:
        structural_kind: Base rule kind ("string", "number", "boolean", ...)
        mock_generator: Zero-argument callable producing a sample value
        constraint_add_on: Extra rule clauses (e.g. ".email()"), None if none
    """

    structural_kind: str
    mock_generator: Callable[[], object]
    constraint_add_on: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.structural_kind:
            raise ValueError("structural_kind must not be empty")
        if not self.structural_kind.isidentifier():
            raise ValueError(f"structural_kind must be an identifier, got {self.structural_kind!r}")
        if not callable(self.mock_generator):
            raise TypeError("mock_generator must be callable")

"""Operation value object."""

from dataclasses import dataclass

from archmeta.domain.model.parameter import Parameter


@dataclass(frozen=True, slots=True)
class Operation:
    """Class operation with its parameters in declaration order."""

    name: str
    parameters: tuple[Parameter, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("operation name must not be empty")

        seen: set[str] = set()
        for param in self.parameters:
            if param.name in seen:
                raise ValueError(f"operation '{self.name}' has duplicate parameter '{param.name}'")
            seen.add(param.name)

"""Operation parameter value object."""

from dataclasses import dataclass

from archmeta.domain.model.type_ref import TypeRef


@dataclass(frozen=True, slots=True)
class Parameter:
    """Operation parameter.

    Attributes:
        name: Parameter name
        type: Semantic type of the parameter
        is_required: Must be present in requests
        has_min_value: Lower bound declared
        min_value: Lower bound, meaningful only if has_min_value
        has_max_value: Upper bound declared
        max_value: Upper bound, meaningful only if has_max_value
    """

    name: str
    type: TypeRef
    is_required: bool = False
    has_min_value: bool = False
    min_value: int | float | None = None
    has_max_value: bool = False
    max_value: int | float | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("parameter name must not be empty")

        if self.type is None:
            raise TypeError(f"parameter '{self.name}' must have a type")

        if self.has_min_value and self.min_value is None:
            raise ValueError(f"parameter '{self.name}' declares a min bound without a value")

        if self.has_max_value and self.max_value is None:
            raise ValueError(f"parameter '{self.name}' declares a max bound without a value")

        if (
            self.has_min_value
            and self.has_max_value
            and self.min_value is not None
            and self.max_value is not None
            and self.min_value > self.max_value
        ):
            raise ValueError(
                f"parameter '{self.name}' min ({self.min_value}) must be <= max ({self.max_value})"
            )

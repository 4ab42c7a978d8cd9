"""Tag value object."""

from dataclasses import dataclass

_FALSY_VALUES = frozenset({"false", "0", "no", "off", ""})


@dataclass(frozen=True, slots=True)
class Tag:
    """Key/value annotation on a model class.

    Attributes:
        name: Tag key
        value: Raw tag value; None for a bare tag
    """

    name: str
    value: str | bool | int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("tag name must not be empty")

    @property
    def is_truthy(self) -> bool:
        """Interpret the value as a flag.

        A bare tag counts as set. Only explicit falsy values
        (False, 0, "false", "0", "no", "off", "") switch it off.
        """
        if self.value is None:
            return True
        if isinstance(self.value, bool):
            return self.value
        if isinstance(self.value, int):
            return self.value != 0
        return self.value.strip().lower() not in _FALSY_VALUES

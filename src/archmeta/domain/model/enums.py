"""Domain enumerations."""

from enum import Enum, auto


class TargetKind(Enum):
    """Kind of the far end of a dependency or parameter type."""

    OBJECT = "Object"  # reference to another model class
    PRIMITIVE = "Primitive"
    UNKNOWN = "Unknown"  # malformed ingestion data, skipped by classifiers

    @classmethod
    def from_name(cls, name: str | None) -> "TargetKind":
        """Map an ingestion value to a kind, UNKNOWN if unrecognised."""
        for kind in cls:
            if kind is not cls.UNKNOWN and kind.value == name:
                return kind
        return cls.UNKNOWN


class NodeKind(Enum):
    """Model node kinds capabilities can be attached to."""

    CLASS = auto()
    PARAMETER = auto()

"""Model loading exceptions."""

from archmeta.domain.exceptions.base import ArchMetaError


class ModelLoadError(ArchMetaError, ValueError):
    """Ingestion data does not describe a valid model.

    Attributes:
        path: Location inside the ingestion data (e.g. classes[2].name)
        reason: Why loading failed
    """

    def __init__(self, path: str, reason: str) -> None:
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Invalid model at {path or '<root>'}: {reason}")

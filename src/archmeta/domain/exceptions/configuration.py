"""Capability registration exceptions."""

from archmeta.domain.exceptions.base import ArchMetaError


class ConfigurationError(ArchMetaError, ValueError):
    """Conflicting capability registrations.

    Raised when two registrations for the same node kind and filter
    declare the same name with different definitions. Fatal: the
    augmentation pass aborts before any view is produced.

    Attributes:
        scope: Node kind and filter of the conflicting registrations
        name: Capability name declared twice
        reason: Why the registrations conflict
    """

    def __init__(self, scope: str, name: str, reason: str) -> None:
        # FAIL-FIRST validation
        if not scope:
            raise ValueError("scope must not be empty")
        if not name:
            raise ValueError("name must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.scope = scope
        self.name = name
        self.reason = reason
        super().__init__(f"Conflicting capability '{name}' on {scope}: {reason}")

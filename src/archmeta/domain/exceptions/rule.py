"""Validation rule exceptions."""

from archmeta.domain.exceptions.base import ArchMetaError


class RuleSyntaxError(ArchMetaError, ValueError):
    """Assembled rule expression is not a well-formed clause chain.

    Attributes:
        expression: Offending expression
        reason: What is malformed
    """

    def __init__(self, expression: str, reason: str) -> None:
        if not reason:
            raise ValueError("reason must not be empty")

        self.expression = expression
        self.reason = reason
        super().__init__(f"Malformed rule {expression!r}: {reason}")

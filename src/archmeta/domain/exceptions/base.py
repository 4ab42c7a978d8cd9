"""Base exceptions for archmeta domain."""


class ArchMetaError(Exception):
    """Root exception for all archmeta errors.

    All domain exceptions inherit from this.
    Allows catching all archmeta-specific errors.
    """

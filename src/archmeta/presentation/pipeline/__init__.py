"""Hooks the host generation pipeline calls for the service stereotype."""

from archmeta.presentation.pipeline.service_support import (
    GenerationContext,
    augment,
    init_class,
    init_stereotype,
)

__all__ = [
    "GenerationContext",
    "augment",
    "init_class",
    "init_stereotype",
]

"""archmeta - derived service-layer metadata for class-diagram models."""

__version__ = "0.1.0"

from archmeta.application.augmentation import AugmentationEngine, AugmentedModel
from archmeta.application.registry import Capability, CapabilityRegistry, NodeFilter
from archmeta.domain.exceptions import (
    ArchMetaError,
    ConfigurationError,
    MissingCollaboratorError,
)
from archmeta.domain.model import AugmentationConfig, Model, NodeKind
from archmeta.infrastructure import TypeCatalog, load_model, load_model_file
from archmeta.presentation.pipeline import (
    GenerationContext,
    augment,
    init_class,
    init_stereotype,
)

__all__ = [
    "ArchMetaError",
    "AugmentationConfig",
    "AugmentationEngine",
    "AugmentedModel",
    "Capability",
    "CapabilityRegistry",
    "ConfigurationError",
    "GenerationContext",
    "MissingCollaboratorError",
    "Model",
    "NodeFilter",
    "NodeKind",
    "TypeCatalog",
    "__version__",
    "augment",
    "init_class",
    "init_stereotype",
    "load_model",
    "load_model_file",
]

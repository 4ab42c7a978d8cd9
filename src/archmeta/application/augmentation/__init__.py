"""Augmentation engine: registry + model -> read-only views."""

from archmeta.application.augmentation.engine import AugmentationEngine, AugmentedModel
from archmeta.application.augmentation.views import ClassView, NodeView, ParameterView

__all__ = [
    "AugmentationEngine",
    "AugmentedModel",
    "ClassView",
    "NodeView",
    "ParameterView",
]

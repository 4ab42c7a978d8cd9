"""Domain model entities."""

from archmeta.domain.model.class_ import Class
from archmeta.domain.model.configuration import AugmentationConfig
from archmeta.domain.model.dependency import Dependency
from archmeta.domain.model.enums import NodeKind, TargetKind
from archmeta.domain.model.model import Model
from archmeta.domain.model.operation import Operation
from archmeta.domain.model.parameter import Parameter
from archmeta.domain.model.tag import Tag
from archmeta.domain.model.type_descriptor import TypeDescriptor
from archmeta.domain.model.type_ref import TypeRef

__all__ = [
    "AugmentationConfig",
    "Class",
    "Dependency",
    "Model",
    "NodeKind",
    "Operation",
    "Parameter",
    "Tag",
    "TargetKind",
    "TypeDescriptor",
    "TypeRef",
]

"""Domain exceptions."""

from archmeta.domain.exceptions.base import ArchMetaError
from archmeta.domain.exceptions.collaborator import MissingCollaboratorError
from archmeta.domain.exceptions.configuration import ConfigurationError
from archmeta.domain.exceptions.loading import ModelLoadError
from archmeta.domain.exceptions.rule import RuleSyntaxError

__all__ = [
    "ArchMetaError",
    "ConfigurationError",
    "MissingCollaboratorError",
    "ModelLoadError",
    "RuleSyntaxError",
]

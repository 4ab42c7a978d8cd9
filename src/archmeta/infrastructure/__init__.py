"""Infrastructure adapters: model loading and the default type catalog."""

from archmeta.infrastructure.loader import load_model, load_model_file
from archmeta.infrastructure.type_catalog import BUILTIN_ENTRIES, CatalogEntry, TypeCatalog

__all__ = [
    "BUILTIN_ENTRIES",
    "CatalogEntry",
    "TypeCatalog",
    "load_model",
    "load_model_file",
]

"""Host-side type catalog construction."""

from .loader import build_catalog, load_catalog
from .schema import ConstructorEntry, MethodEntry, ModuleEntry, ParameterEntry, TypeEntry

__all__ = [
    # Loader
    "build_catalog",
    "load_catalog",
    # Document schema
    "ConstructorEntry",
    "MethodEntry",
    "ModuleEntry",
    "ParameterEntry",
    "TypeEntry",
]

"""Data models and transfer objects."""

from .catalog import (
    CONSTRUCTOR_NAME,
    NESTED_TYPE_SEPARATOR,
    MethodDescriptor,
    ParameterDescriptor,
    TypeCatalog,
    TypeDescriptor,
    Visibility,
)
from .frame import ParsedFrame
from .trace import StackTrace

__all__ = [
    # Frame models
    "ParsedFrame",
    "StackTrace",
    # Catalog models
    "CONSTRUCTOR_NAME",
    "NESTED_TYPE_SEPARATOR",
    "MethodDescriptor",
    "ParameterDescriptor",
    "TypeCatalog",
    "TypeDescriptor",
    "Visibility",
]

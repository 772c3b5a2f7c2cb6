"""Configuration loading and validation."""

from .loader import load_config
from .schema import (
    CaptureConfig,
    EntryModuleConfig,
    LoggingConfig,
    ResolverConfig,
    SymbolicatorConfig,
)

__all__ = [
    # Loader
    "load_config",
    # Root config
    "SymbolicatorConfig",
    # Section configs
    "CaptureConfig",
    "EntryModuleConfig",
    "LoggingConfig",
    "ResolverConfig",
]

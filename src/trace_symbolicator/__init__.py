"""Symbolication of textual .NET-style stack traces.

Parses raw stack trace text into structured frames and resolves each frame's
textual signature to a unique method of a host-supplied type catalog.

Example:
    from trace_symbolicator import capture, load_catalog

    catalog = load_catalog(Path("catalog.yaml"))
    trace = capture(raw_text, skip_frames=0)
    for frame in trace:
        method = frame.resolve(catalog)
"""

from trace_symbolicator._version import __version__
from trace_symbolicator.catalog import build_catalog, load_catalog
from trace_symbolicator.config import SymbolicatorConfig, load_config
from trace_symbolicator.core import (
    EntryModuleIdentifier,
    FrameParser,
    MethodResolver,
    TraceAssembler,
    capture,
    capture_single,
    parse_frame,
)
from trace_symbolicator.models import (
    MethodDescriptor,
    ParameterDescriptor,
    ParsedFrame,
    StackTrace,
    TypeCatalog,
    TypeDescriptor,
)

__all__ = [
    "__version__",
    "EntryModuleIdentifier",
    "FrameParser",
    "MethodDescriptor",
    "MethodResolver",
    "ParameterDescriptor",
    "ParsedFrame",
    "StackTrace",
    "SymbolicatorConfig",
    "TraceAssembler",
    "TypeCatalog",
    "TypeDescriptor",
    "build_catalog",
    "capture",
    "capture_single",
    "load_catalog",
    "load_config",
    "parse_frame",
]

"""Core symbolication components.

This module exports the main business logic classes:
- FrameParser: Parses one line of trace text into a ParsedFrame
- TraceAssembler: Splits raw trace text and builds a StackTrace
- MethodResolver: Resolves parsed frames to catalog methods
- EntryModuleIdentifier: Infers the entry module from a trace
"""

from trace_symbolicator.core.entry_module import DEFAULT_IGNORED_MODULES, EntryModuleIdentifier
from trace_symbolicator.core.frame_parser import FrameParser, parse_frame
from trace_symbolicator.core.method_resolver import (
    MethodResolver,
    configure_default_resolver,
    default_resolver,
    nested_type_name,
)
from trace_symbolicator.core.trace_assembler import (
    DEFAULT_SKIP_FRAMES,
    SELF_FRAME_COUNT,
    TraceAssembler,
    capture,
    capture_single,
)

__all__ = [
    "DEFAULT_IGNORED_MODULES",
    "DEFAULT_SKIP_FRAMES",
    "SELF_FRAME_COUNT",
    "EntryModuleIdentifier",
    "FrameParser",
    "MethodResolver",
    "TraceAssembler",
    "capture",
    "capture_single",
    "configure_default_resolver",
    "default_resolver",
    "nested_type_name",
    "parse_frame",
]

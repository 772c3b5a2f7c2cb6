"""Exceptions raised by the trace symbolicator.

Domain outcomes such as "this line is not a frame" or "this frame does not
resolve to a unique method" are modelled as ``None`` values, never raised.
Only caller contract violations and host-level failures use exceptions.
"""

from __future__ import annotations


class SymbolicatorError(Exception):
    """Base exception for all symbolicator errors."""


class PreconditionError(SymbolicatorError, ValueError):
    """A public entry point was called with an invalid argument."""


class FrameIndexError(PreconditionError, IndexError):
    """A frame index was outside the bounds of a stack trace.

    Attributes:
        index: The requested index.
        frame_count: Number of frames in the trace.
    """

    def __init__(self, index: int, frame_count: int) -> None:
        super().__init__(f"Frame index {index} out of range for trace with {frame_count} frames")
        self.index = index
        self.frame_count = frame_count


class CatalogLoadError(SymbolicatorError):
    """The type catalog document could not be read."""


class EntryModuleNotFoundError(SymbolicatorError):
    """No frame of a captured trace resolved to an application module."""

"""Assembly of raw stack trace text into a StackTrace.

Raw text produced by the host's capture primitive starts with frames that
belong to the capture mechanism itself (the call into the capture routine
and its internal helpers). Those are discarded unconditionally, together
with any frames the caller asks to skip.
"""

from __future__ import annotations

import re

import structlog

from trace_symbolicator.core.frame_parser import FrameParser
from trace_symbolicator.models.frame import ParsedFrame
from trace_symbolicator.models.trace import StackTrace
from trace_symbolicator.utils.errors import PreconditionError
from trace_symbolicator.utils.logging import LogEventNames

log = structlog.get_logger()

# Frames emitted by the host capture primitive itself. This is a property of
# the runtime's capture routine, not derived from the text: a different host
# primitive needs this recalibrated (see TraceAssembler(self_frame_count=...)).
SELF_FRAME_COUNT = 3

# Skip used when the caller does not say otherwise: the caller's own wrapper frame
DEFAULT_SKIP_FRAMES = 1

LINE_SEPARATOR_PATTERN = re.compile(r"\r\n|\n")


def split_lines(raw_text: str) -> list[str]:
    """Split trace text on CRLF or LF, dropping empty lines."""
    return [line for line in LINE_SEPARATOR_PATTERN.split(raw_text) if line]


class TraceAssembler:
    """Builds StackTrace objects from raw trace text.

    Example:
        assembler = TraceAssembler()
        trace = assembler.capture(raw_text, skip_frames=0)
        for frame in trace:
            print(frame.type_name, frame.method_name)
    """

    def __init__(
        self,
        self_frame_count: int = SELF_FRAME_COUNT,
        parser: FrameParser | None = None,
    ) -> None:
        """Initialize the TraceAssembler.

        Args:
            self_frame_count: Number of leading lines produced by the host
                capture primitive itself
            parser: Frame parser to use (defaults to a new FrameParser)

        Raises:
            PreconditionError: If self_frame_count is negative
        """
        if self_frame_count < 0:
            raise PreconditionError(f"self_frame_count must be >= 0, got {self_frame_count}")
        self.self_frame_count = self_frame_count
        self.parser = parser or FrameParser()

    def capture(self, raw_text: str, skip_frames: int = DEFAULT_SKIP_FRAMES) -> StackTrace:
        """Parse raw trace text into a StackTrace.

        Args:
            raw_text: Full trace text as produced by the host
            skip_frames: Frames to skip after the capture mechanism's own frames

        Returns:
            StackTrace with the remaining frames in their original order;
            empty if there are fewer lines than frames to skip

        Raises:
            PreconditionError: If raw_text is None or skip_frames is negative
        """
        if raw_text is None:
            raise PreconditionError("raw_text must not be None")
        if skip_frames < 0:
            raise PreconditionError(f"skip_frames must be >= 0, got {skip_frames}")

        lines = split_lines(raw_text)
        skipped = self.self_frame_count + skip_frames
        frames = tuple(self.parser.parse(line) for line in lines[skipped:])

        log.debug(
            LogEventNames.TRACE_CAPTURED,
            line_count=len(lines),
            skipped=min(skipped, len(lines)),
            frame_count=len(frames),
        )

        return StackTrace(frames=frames)

    def capture_single(self, frame: ParsedFrame) -> StackTrace:
        """Wrap one pre-parsed frame in a StackTrace.

        Raises:
            PreconditionError: If frame is None
        """
        if frame is None:
            raise PreconditionError("frame must not be None")
        return StackTrace(frames=(frame,))


_default_assembler = TraceAssembler()


def capture(raw_text: str, skip_frames: int = DEFAULT_SKIP_FRAMES) -> StackTrace:
    """Parse raw trace text with the default self-frame count.

    See TraceAssembler.capture.
    """
    return _default_assembler.capture(raw_text, skip_frames)


def capture_single(frame: ParsedFrame) -> StackTrace:
    """Wrap one pre-parsed frame in a StackTrace."""
    return _default_assembler.capture_single(frame)

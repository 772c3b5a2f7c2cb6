"""Data model for a captured stack trace."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from trace_symbolicator.models.catalog import MethodDescriptor, TypeCatalog
from trace_symbolicator.models.frame import ParsedFrame
from trace_symbolicator.utils.errors import FrameIndexError


@dataclass(frozen=True)
class StackTrace:
    """An immutable, ordered sequence of parsed frames.

    Frames keep the order in which they appeared in the raw text.
    """

    frames: tuple[ParsedFrame, ...] = ()

    def __post_init__(self) -> None:
        # Own the sequence even if a list was passed in
        object.__setattr__(self, "frames", tuple(self.frames))

    @property
    def frame_count(self) -> int:
        """Total number of frames."""
        return len(self.frames)

    def frame_at(self, index: int) -> ParsedFrame:
        """Return the frame at ``index``.

        Raises:
            FrameIndexError: If index is negative or not less than frame_count
        """
        if not 0 <= index < len(self.frames):
            raise FrameIndexError(index, len(self.frames))
        return self.frames[index]

    def all_frames(self) -> list[ParsedFrame]:
        """Return an independent copy of the frames."""
        return list(self.frames)

    def resolve_all(self, catalog: TypeCatalog) -> list[MethodDescriptor | None]:
        """Resolve every frame against ``catalog``, preserving order."""
        return [frame.resolve(catalog) for frame in self.frames]

    def __len__(self) -> int:
        return len(self.frames)

    def __iter__(self) -> Iterator[ParsedFrame]:
        return iter(self.frames)

    def __getitem__(self, index: int) -> ParsedFrame:
        return self.frame_at(index)

    def __str__(self) -> str:
        return "\n".join(frame.raw_text for frame in self.frames)

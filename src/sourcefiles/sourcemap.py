from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterator
from dataclasses import dataclass, field
from itertools import accumulate

from .errors import OffsetBoundaryError
from .spans import Position, Span


@dataclass(frozen=True, slots=True, order=True)
class SourceMap:
    """Concatenated contents of several files plus the tables to map offsets back.

    Offsets are byte offsets into the UTF-8 encoding of `contents`. Instances are
    immutable and can be shared between threads.
    """

    contents: str = ""
    file_names: tuple[str, ...] = ()
    file_lines: tuple[int, ...] = ()
    line_lengths: tuple[int, ...] = ()

    # Derived: running totals of line_lengths / file_lines, and the encoded contents.
    _line_ends: tuple[int, ...] = field(init=False, repr=False, compare=False)
    _file_ends: tuple[int, ...] = field(init=False, repr=False, compare=False)
    _data: bytes = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        data = self.contents.encode("utf-8")
        if len(self.file_names) != len(self.file_lines):
            raise ValueError(
                f"file_names ({len(self.file_names)}) and file_lines ({len(self.file_lines)}) differ in length"
            )
        if sum(self.file_lines) != len(self.line_lengths):
            raise ValueError(
                f"file_lines sum to {sum(self.file_lines)} but there are {len(self.line_lengths)} lines"
            )
        if sum(self.line_lengths) != len(data):
            raise ValueError(
                f"line_lengths sum to {sum(self.line_lengths)} but contents are {len(data)} bytes"
            )
        object.__setattr__(self, "file_names", tuple(self.file_names))
        object.__setattr__(self, "file_lines", tuple(self.file_lines))
        object.__setattr__(self, "line_lengths", tuple(self.line_lengths))
        object.__setattr__(self, "_line_ends", tuple(accumulate(self.line_lengths)))
        object.__setattr__(self, "_file_ends", tuple(accumulate(self.file_lines)))
        object.__setattr__(self, "_data", data)

    @property
    def size(self) -> int:
        """Length of the contents in bytes."""
        return len(self._data)

    def __len__(self) -> int:
        return len(self.file_names)

    def __bool__(self) -> bool:
        return bool(self.file_names)

    def files(self) -> Iterator[tuple[str, int]]:
        return zip(self.file_names, self.file_lines)

    def resolve_offset(self, offset: int) -> Position | None:
        """Get the file, line and column of a byte offset.

        Returns None if the offset is outside the contents. Raises
        OffsetBoundaryError if it points into the middle of a multi-byte character.
        """
        if offset < 0 or offset >= len(self._data):
            return None
        # UTF-8 continuation bytes look like 0b10xxxxxx.
        if self._data[offset] & 0xC0 == 0x80:
            raise OffsetBoundaryError(offset)

        # First line whose end is past the offset.
        line_idx = bisect_right(self._line_ends, offset)
        line_start = self._line_ends[line_idx - 1] if line_idx else 0

        file_idx = bisect_right(self._file_ends, line_idx)
        file_start = self._file_ends[file_idx - 1] if file_idx else 0

        return Position(
            filename=self.file_names[file_idx],
            line=line_idx - file_start,
            col=offset - line_start,
        )

    def resolve_offset_span(self, start: int, end: int) -> Span | None:
        """Resolve both ends of a span; None if end < start or either end is out of range."""
        if end < start:
            return None
        start_pos = self.resolve_offset(start)
        if start_pos is None:
            return None
        end_pos = self.resolve_offset(end)
        if end_pos is None:
            return None
        return Span(start=start_pos, end=end_pos)

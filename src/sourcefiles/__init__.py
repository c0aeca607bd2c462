from __future__ import annotations

from .api import from_files, from_sources
from .builder import SourceMapBuilder, split_line_lengths
from .errors import FileReadError, OffsetBoundaryError
from .sourcemap import SourceMap
from .spans import Position, Span

__all__ = [
    "FileReadError",
    "OffsetBoundaryError",
    "Position",
    "SourceMap",
    "SourceMapBuilder",
    "Span",
    "from_files",
    "from_sources",
    "split_line_lengths",
]

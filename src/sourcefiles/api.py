from __future__ import annotations

import os
from collections.abc import Iterable

from .builder import SourceMapBuilder
from .sourcemap import SourceMap


def from_sources(items: Iterable[tuple[object, str]]) -> SourceMap:
    """Build a SourceMap from (name, text) pairs, in order."""
    b = SourceMapBuilder()
    for name, text in items:
        b.add_file_raw(name, text)
    return b.build()


def from_files(paths: Iterable[str | os.PathLike[str]]) -> SourceMap:
    """Build a SourceMap by reading each path in order.

    Raises FileReadError for the first path that can't be read.
    """
    return SourceMapBuilder().add_files(paths).build()

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass, field

from .errors import FileReadError
from .sourcemap import SourceMap


logger = logging.getLogger(__name__)


def split_line_lengths(text: str) -> list[int]:
    """Byte length of every line of `text`, newline included.

    Splits on "\\n" only, so a "\\r" before it stays part of the line. A trailing
    newline does not open an extra empty line.
    """
    pieces = text.split("\n")
    lengths = [len(p.encode("utf-8")) + 1 for p in pieces[:-1]]
    # Last piece is empty when the text ends with a newline.
    if pieces[-1]:
        lengths.append(len(pieces[-1].encode("utf-8")))
    return lengths


@dataclass(slots=True)
class SourceMapBuilder:
    """Append-only collector of file contents and their line tables.

    Call `build()` to take an immutable `SourceMap` for resolving offsets.
    Not safe to append from several threads at once.
    """

    _chunks: list[str] = field(default_factory=list, init=False)
    _file_names: list[str] = field(default_factory=list, init=False)
    _file_lines: list[int] = field(default_factory=list, init=False)
    _line_lengths: list[int] = field(default_factory=list, init=False)

    @property
    def contents(self) -> str:
        return "".join(self._chunks)

    @property
    def file_names(self) -> tuple[str, ...]:
        return tuple(self._file_names)

    @property
    def file_lines(self) -> tuple[int, ...]:
        return tuple(self._file_lines)

    @property
    def line_lengths(self) -> tuple[int, ...]:
        return tuple(self._line_lengths)

    @property
    def size(self) -> int:
        return sum(self._line_lengths)

    def add_file(self, path: str | bytes | os.PathLike[str] | os.PathLike[bytes]) -> SourceMapBuilder:
        """Read a whole file as UTF-8 and append it under its path.

        Raises FileReadError if the file can't be read or decoded; nothing is
        appended in that case.
        """
        name = os.fsdecode(path)
        try:
            with open(path, "rb") as f:
                data = f.read()
            text = data.decode("utf-8")
        # UnicodeDecodeError is a ValueError, as is a NUL byte in the path.
        except (OSError, ValueError) as exc:
            raise FileReadError(name, exc) from exc
        return self.add_file_raw(name, text)

    def add_files(self, paths: Iterable[str | os.PathLike[str]]) -> SourceMapBuilder:
        for p in paths:
            self.add_file(p)
        return self

    def add_file_raw(self, name: object, contents: str) -> SourceMapBuilder:
        # An empty file has no offsets pointing into it.
        if not contents:
            logger.debug("skipping empty file %s", name)
            return self

        lengths = split_line_lengths(contents)
        self._line_lengths.extend(lengths)
        self._file_names.append(str(name))
        self._file_lines.append(len(lengths))
        self._chunks.append(contents)
        logger.debug("added %s: %d lines, %d bytes", name, len(lengths), sum(lengths))
        return self

    def build(self) -> SourceMap:
        return SourceMap(
            contents=self.contents,
            file_names=self.file_names,
            file_lines=self.file_lines,
            line_lengths=self.line_lengths,
        )

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """A resolved source position.

    Line and column are 0-based; the column counts bytes from the start of the line.
    """

    filename: str
    line: int
    col: int

    def format(self) -> str:
        return f"{self.filename}:{self.line}:{self.col}"


@dataclass(frozen=True, slots=True, order=True)
class Span:
    """Inclusive pair of positions; end may lie in a later file than start."""

    start: Position
    end: Position

    @property
    def files(self) -> tuple[str, ...]:
        if self.start.filename == self.end.filename:
            return (self.start.filename,)
        return (self.start.filename, self.end.filename)

    def format(self) -> str:
        return self.start.format()

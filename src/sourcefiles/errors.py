from __future__ import annotations


class FileReadError(OSError):
    """A file could not be opened, read, or decoded as UTF-8 text."""

    def __init__(self, path: str, cause: BaseException) -> None:
        super().__init__(f"{path}: {cause}")
        self.path = path
        self.cause = cause

    def __str__(self) -> str:
        return f"{self.path}: {self.cause}"

    def __reduce__(self):
        return (type(self), (self.path, self.cause))


class OffsetBoundaryError(ValueError):
    def __init__(self, offset: int) -> None:
        super().__init__(f"offset {offset} is not on a character boundary")
        self.offset = offset

    def __reduce__(self):
        return (type(self), (self.offset,))

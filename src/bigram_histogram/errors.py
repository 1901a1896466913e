from __future__ import annotations


EXIT_OK = 0
EXIT_INVALID_ARGUMENTS = 2
EXIT_IO_ERROR = 9


class BigramHistogramError(Exception):
    """Base class for errors raised by this package."""


class InvalidArgumentsError(BigramHistogramError):
    """The command line did not name an input file (or was malformed)."""


class HistogramIOError(BigramHistogramError, OSError):
    """The input file could not be opened or read."""

    def __init__(self, path, message: str, line_no: int | None = None):
        self.path = str(path)
        self.line_no = line_no
        super().__init__(message)

    def __str__(self) -> str:
        detail = self.args[0] if self.args else ""
        if self.line_no is not None:
            return f"{self.path}, line {self.line_no}: {detail}"
        return f"{self.path}: {detail}"


class FileOpenError(HistogramIOError):
    """Path is missing, is a directory, or cannot be opened."""


class LineDecodeError(HistogramIOError):
    """A line is not valid text in the configured encoding."""


class LineReadError(HistogramIOError):
    """Reading failed part way through the file."""

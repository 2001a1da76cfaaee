"""Error kinds raised by the note core."""
from __future__ import annotations

from pathlib import Path


class NoteError(Exception):
    """Base exception for note storage errors."""

    def __init__(self, message: str, *, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = Path(path) if path is not None else None


class InvalidDate(NoteError, ValueError):
    """Day/month/year do not form a real calendar date."""


class DecodeError(NoteError, ValueError):
    """Stored bytes are not well-formed for the codec."""


class SchemaError(NoteError, ValueError):
    """Stored note is well-formed but misses a field or has a wrong type."""


class FileError(NoteError):
    """Notes directory or file is missing or not accessible."""


class PersistError(NoteError):
    """A note could not be written."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, TypeVar

from notekeeper.core.codecs import known_extensions
from notekeeper.core.errors import FileError
from notekeeper.core.filenames import check_file_name
from notekeeper.logging_setup import get_logger
from notekeeper.settings import DEFAULT_NOTES_DIR

log = get_logger(__name__)

T = TypeVar("T")


class NoteCatalog:
    """
    The notes directory seen as a flat collection of files.

    Nothing is cached: every call looks at the directory as it is now.
    If the configured directory is unusable, the default one is used.
    """

    def __init__(self, notes_dir: Path = DEFAULT_NOTES_DIR, *, fallback_dir: Path = DEFAULT_NOTES_DIR) -> None:
        self.notes_dir = Path(notes_dir)
        self.fallback_dir = Path(fallback_dir)

    # ───────────────────────── directory ─────────────────────────

    def ensure_directory(self) -> Path:
        """Create the notes directory if needed and return the one in use."""
        return self._with_fallback(self._ensure)

    @staticmethod
    def _ensure(directory: Path) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        if not directory.is_dir():
            raise NotADirectoryError(f"not a directory: {directory}")
        return directory

    def _with_fallback(self, action: Callable[[Path], T]) -> T:
        try:
            return action(self.notes_dir)
        except OSError as e:
            if self.fallback_dir == self.notes_dir:
                raise FileError(f"notes directory unavailable: {e}", path=self.notes_dir) from e
            log.warning("Notes dir unavailable (%s), falling back to %s", e, self.fallback_dir)

        try:
            return action(self.fallback_dir)
        except OSError as e:
            raise FileError(f"notes directory unavailable: {e}", path=self.fallback_dir) from e

    # ───────────────────────── queries ─────────────────────────

    def list(self, filter_substring: str = "") -> list[str]:
        """
        File names directly inside the notes directory, sorted case-insensitively.
        A non-empty filter keeps names containing it, ignoring case.
        """
        def scan(directory: Path) -> list[str]:
            return [p.name for p in self._ensure(directory).iterdir() if p.is_file()]

        names = self._with_fallback(scan)
        needle = (filter_substring or "").casefold()
        if needle:
            names = [n for n in names if needle in n.casefold()]
        return sorted(names, key=str.lower)

    def path_for(self, file_name: str) -> Path:
        reason = check_file_name(file_name)
        if reason:
            raise FileError(reason, path=file_name)
        return self.ensure_directory() / file_name

    def read(self, file_name: str) -> bytes:
        path = self.path_for(file_name)
        try:
            return path.read_bytes()
        except FileNotFoundError as e:
            raise FileError(f"note not found: {file_name}", path=path) from e
        except OSError as e:
            raise FileError(f"cannot read {file_name}: {e.strerror or e}", path=path) from e

    # ───────────────────────── mutations ─────────────────────────

    def delete(self, file_name: str) -> None:
        """Remove one note file. A missing file is an error, not a no-op."""
        path = self.path_for(file_name)
        try:
            path.unlink()
        except FileNotFoundError as e:
            raise FileError(f"note not found: {file_name}", path=path) from e
        except OSError as e:
            raise FileError(f"cannot delete {file_name}: {e.strerror or e}", path=path) from e
        log.info("Deleted note file %s", path)


def display_name(file_name: str) -> str:
    """File name without a note extension, for presentation."""
    for ext in known_extensions():
        if file_name.lower().endswith(ext):
            return file_name[: -len(ext)]
    return file_name

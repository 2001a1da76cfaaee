# notekeeper/services/persistence.py

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from notekeeper.core.codecs import JSON_CODEC, NoteCodec, codec_for_file_name, codec_for_format
from notekeeper.core.errors import FileError, NoteError, PersistError
from notekeeper.core.filenames import check_file_name
from notekeeper.core.models import Date, Note
from notekeeper.infrastructure.filesystem import atomic_write_bytes, write_recovery_copy
from notekeeper.logging_setup import get_logger
from notekeeper.settings import MAX_CONTENT_LENGTH, MAX_TITLE_LENGTH, RECOVERY_DIR, NotesConfig
from notekeeper.vault.catalog import NoteCatalog, display_name

log = get_logger(__name__)

SAVED_MESSAGE = "Note saved successfully!"


@dataclass(frozen=True)
class Outcome:
    """Result of one service operation, as shown to the user."""
    ok: bool
    message: str
    error: NoteError | None = None
    note: Note | None = None


@dataclass
class EditingSession:
    """
    The one open note and where it will be saved.

    The save path is the title-derived name unless the user typed one;
    a typed path sticks until the next new note. A loaded note is written
    back to its file for as long as its title is unchanged.
    """
    note: Note = field(default_factory=Note.new_default)
    user_override: str | None = None
    loaded_from: str | None = None
    loaded_title: str | None = None
    status: str | None = None
    search_query: str = ""


class PersistenceService:
    """
    Single entry point for the UI: owns the editing session and drives the
    codec and the catalog. Storage failures come back as Outcome values,
    never as exceptions.
    """

    def __init__(
        self,
        catalog: NoteCatalog,
        codec: NoteCodec = JSON_CODEC,
        *,
        recovery_dir: Path = RECOVERY_DIR,
    ) -> None:
        self.catalog = catalog
        self.codec = codec
        self.recovery_dir = Path(recovery_dir)
        self.session = EditingSession()

    @classmethod
    def from_config(cls, config: NotesConfig) -> "PersistenceService":
        return cls(NoteCatalog(config.notes_dir), codec_for_format(config.format))

    # ───────────────────────── session state ─────────────────────────

    @property
    def note(self) -> Note:
        return self.session.note

    @property
    def status(self) -> str | None:
        return self.session.status

    def set_title(self, title: str) -> None:
        self.session.note.title = (title or "")[:MAX_TITLE_LENGTH]

    def set_content(self, content: str) -> None:
        self.session.note.content = (content or "")[:MAX_CONTENT_LENGTH]

    def set_date(self, day: int, month: int, year: int) -> None:
        """Raises InvalidDate; the open note keeps its date in that case."""
        self.session.note.date = Date.from_parts(day, month, year)

    def derive_default_save_path(self, note: Note) -> str:
        return self.codec.file_name_for(note.title)

    @property
    def derived_path(self) -> str:
        return self.derive_default_save_path(self.session.note)

    @property
    def save_path(self) -> str:
        session = self.session
        if session.user_override:
            return session.user_override
        if session.loaded_from and session.note.title == session.loaded_title:
            return session.loaded_from
        return self.derived_path

    @save_path.setter
    def save_path(self, value: str | None) -> None:
        self.set_save_path(value)

    def set_save_path(self, value: str | None) -> None:
        """An explicit path overrides the derived one; blank clears the override."""
        self.session.user_override = value if value and value.strip() else None

    @property
    def has_override(self) -> bool:
        return self.session.user_override is not None

    @property
    def search_query(self) -> str:
        return self.session.search_query

    @search_query.setter
    def search_query(self, value: str) -> None:
        self.session.search_query = value or ""

    def clear_search(self) -> None:
        self.session.search_query = ""

    # ───────────────────────── operations ─────────────────────────

    def new_note(self) -> None:
        self.session = EditingSession(search_query=self.session.search_query)

    def save(self, path: str | None = None) -> Outcome:
        """Save the open note to `path` (which becomes the override) or the current save path."""
        if path is not None:
            self.set_save_path(path)
        return self.save_note(self.session.note, self.save_path)

    def save_note(self, note: Note, save_path: str) -> Outcome:
        if not note.has_title():
            return self._fail("Save", PersistError("note title must not be empty"))

        reason = check_file_name(save_path)
        if reason:
            return self._fail("Save", PersistError(reason, path=save_path))

        codec = codec_for_file_name(save_path, self.codec)
        try:
            data = codec.encode(note)
        except NoteError as e:
            e.path = Path(save_path)
            return self._fail("Save", e)

        try:
            directory = self.catalog.ensure_directory()
            target = directory / save_path
            atomic_write_bytes(target, data)
        except (FileError, OSError) as e:
            reason = e.message if isinstance(e, NoteError) else (e.strerror or str(e))
            message = f"cannot write {save_path}: {reason}"
            recovery = self._recover(save_path, data)
            if recovery is not None:
                message += f" (recovery copy: {recovery})"
            err = PersistError(message, path=save_path)
            err.__cause__ = e
            return self._fail("Save", err)

        log.info("Saved note %r to %s (%s)", note.title, target, codec.name)
        self.session.status = SAVED_MESSAGE
        return Outcome(ok=True, message=SAVED_MESSAGE, note=note)

    def load(self, file_name: str) -> Outcome:
        """Replace the open note with a stored one; on failure the open note is kept."""
        try:
            data = self.catalog.read(file_name)
            note = codec_for_file_name(file_name, self.codec).decode(data)
        except NoteError as e:
            if e.path is None:
                e.path = Path(file_name)
            return self._fail("Load", e)

        if not note.date.is_valid():
            log.warning("Note %s has an out-of-range date %s, loaded as is", file_name, note.date)

        self.session.note = note
        self.session.user_override = None
        self.session.loaded_from = file_name
        self.session.loaded_title = note.title

        message = f"Loaded {display_name(file_name)}"
        self.session.status = message
        log.info("Loaded note %r from %s", note.title, file_name)
        return Outcome(ok=True, message=message, note=note)

    def list_notes(self, filter_substring: str | None = None) -> list[str]:
        """Catalog entries; without a filter the session search query is used."""
        needle = self.session.search_query if filter_substring is None else filter_substring
        try:
            return self.catalog.list(needle)
        except FileError as e:
            self._fail("List", e)
            return []

    def delete_note(self, file_name: str) -> Outcome:
        """The open note is left alone, even if it came from this file."""
        try:
            self.catalog.delete(file_name)
        except FileError as e:
            return self._fail("Delete", e)

        message = f"Deleted {display_name(file_name)}"
        self.session.status = message
        return Outcome(ok=True, message=message)

    # ───────────────────────── helpers ─────────────────────────

    def _recover(self, save_path: str, data: bytes) -> Path | None:
        try:
            path = write_recovery_copy(save_path, data, recovery_dir=self.recovery_dir)
        except OSError:
            log.exception("Recovery copy failed for %s", save_path)
            return None
        log.warning("Recovery copy written: %s", path)
        return path

    def _fail(self, operation: str, error: NoteError) -> Outcome:
        message = f"{operation} failed: {error.message}"
        log.warning("%s failed: %s", operation, error.message)
        self.session.status = message
        return Outcome(ok=False, message=message, error=error)

"""
Note codecs: byte encodings of a Note.

  json   - canonical, field-tagged object (.json)
  legacy - "Title: ...\\nDate: dd-mm-yyyy\\n\\n<content>" plain text (.txt)

The codec for a stored file is picked by its extension.
"""
from __future__ import annotations

import json
import re
from pathlib import PurePath

from notekeeper.core.errors import DecodeError, PersistError, SchemaError
from notekeeper.core.filenames import title_to_stem
from notekeeper.core.models import Date, Note

ENCODING = "utf-8"


class NoteCodec:
    name: str = ""
    extension: str = ""

    def encode(self, note: Note) -> bytes:
        raise NotImplementedError

    def decode(self, data: bytes) -> Note:
        raise NotImplementedError

    def file_name_for(self, title: str) -> str:
        return f"{title_to_stem(title)}.{self.extension}"

    @staticmethod
    def _bytes(text: str) -> bytes:
        try:
            return text.encode(ENCODING)
        except UnicodeEncodeError as e:
            raise PersistError(f"cannot encode note as {ENCODING}: {e.reason}") from e

    @staticmethod
    def _text(data: bytes) -> str:
        try:
            return data.decode(ENCODING)
        except UnicodeDecodeError as e:
            raise DecodeError(f"not valid {ENCODING}: {e.reason}") from e


def _require(obj: dict, key: str, kind: type, where: str = "") -> object:
    label = f"{where}{key}"
    if key not in obj:
        raise SchemaError(f"missing field: {label}")
    value = obj[key]
    # bool is an int subclass; a stored true/false is not a date part
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise SchemaError(f"field {label} must be {kind.__name__}, got {type(value).__name__}")
    return value


class JsonNoteCodec(NoteCodec):
    name = "json"
    extension = "json"

    def encode(self, note: Note) -> bytes:
        payload = {
            "title": note.title,
            "content": note.content,
            "date": {
                "day": note.date.day,
                "month": note.date.month,
                "year": note.date.year,
            },
        }
        return self._bytes(json.dumps(payload, indent=2, ensure_ascii=False))

    def decode(self, data: bytes) -> Note:
        text = self._text(data)
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            raise DecodeError(f"invalid JSON at line {e.lineno} column {e.colno}: {e.msg}") from e
        except RecursionError as e:
            raise DecodeError("JSON nested too deeply") from e

        if not isinstance(raw, dict):
            raise SchemaError(f"note must be a JSON object, got {type(raw).__name__}")

        title = _require(raw, "title", str)
        content = _require(raw, "content", str)
        date = _require(raw, "date", dict)
        # Date is taken verbatim, out-of-range values included
        return Note(
            title=title,
            content=content,
            date=Date(
                day=_require(date, "day", int, "date."),
                month=_require(date, "month", int, "date."),
                year=_require(date, "year", int, "date."),
            ),
        )


_DATE_RE = re.compile(r"^\s*(\d+)-(\d+)-(\d+)\s*$")


class LegacyTextCodec(NoteCodec):
    name = "legacy"
    extension = "txt"

    TITLE_LABEL = "Title: "
    DATE_LABEL = "Date: "

    def encode(self, note: Note) -> bytes:
        # the title occupies exactly one line in this format
        title = " ".join(note.title.splitlines())
        text = f"{self.TITLE_LABEL}{title}\n{self.DATE_LABEL}{note.date}\n\n{note.content}"
        return self._bytes(text)

    def decode(self, data: bytes) -> Note:
        parts = self._text(data).split("\n", 3)
        if len(parts) < 3:
            raise DecodeError("legacy note needs a title line, a date line and a blank line")

        title_line = parts[0].rstrip("\r")
        date_line = parts[1].rstrip("\r")
        if not title_line.startswith(self.TITLE_LABEL.rstrip()):
            raise DecodeError("first line must start with 'Title:'")
        if not date_line.startswith(self.DATE_LABEL.rstrip()):
            raise DecodeError("second line must start with 'Date:'")
        if parts[2].strip():
            raise DecodeError("third line must be blank")

        m = _DATE_RE.match(date_line[len(self.DATE_LABEL.rstrip()):])
        if not m:
            raise SchemaError(f"date must be dd-mm-yyyy, got {date_line!r}")
        day, month, year = (int(g) for g in m.groups())

        title = title_line[len(self.TITLE_LABEL.rstrip()):]
        if title.startswith(" "):
            title = title[1:]

        return Note(
            title=title,
            content=parts[3] if len(parts) == 4 else "",
            date=Date(day=day, month=month, year=year),
        )


JSON_CODEC = JsonNoteCodec()
LEGACY_CODEC = LegacyTextCodec()

CODECS: dict[str, NoteCodec] = {
    JSON_CODEC.name: JSON_CODEC,
    LEGACY_CODEC.name: LEGACY_CODEC,
}


def codec_for_format(name: str) -> NoteCodec:
    try:
        return CODECS[name]
    except KeyError:
        raise ValueError(f"unknown note format: {name!r}") from None


def codec_for_file_name(file_name: str, default: NoteCodec | None = None) -> NoteCodec:
    """Pick the codec by extension; unknown extensions use `default` (json if not given)."""
    ext = PurePath(file_name).suffix.lstrip(".").lower()
    for codec in CODECS.values():
        if codec.extension == ext:
            return codec
    return default or JSON_CODEC


def known_extensions() -> tuple[str, ...]:
    return tuple(f".{c.extension}" for c in CODECS.values())

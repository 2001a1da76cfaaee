# notekeeper/core/filenames.py

from __future__ import annotations

import unicodedata

SEPARATORS = ("/", "\\")
SEPARATOR_REPLACEMENT = "-"


def _is_control(ch: str) -> bool:
    return unicodedata.category(ch) == "Cc"


def check_file_name(name: str | None) -> str | None:
    """
    Validate a save path typed by the user or derived from a title.

    Only rejects names that would leave the notes directory or cannot be a
    single directory entry anywhere. Returns a reason, or None when the
    name may be handed to the OS.
    """
    if name is None or not name.strip():
        return "file name is empty"
    if any(sep in name for sep in SEPARATORS):
        return f"file name must not contain a path separator: {name!r}"
    if name in (".", ".."):
        return f"file name is reserved: {name!r}"
    if any(_is_control(ch) for ch in name):
        return "file name contains control characters"
    return None


def title_to_stem(title: str | None) -> str:
    """
    File stem for a note title.

    Path separators become "-" and control characters are dropped, so
    "Q1/Q2 plan" is stored as "Q1-Q2 plan". Any other title is kept as typed.
    """
    out = []
    for ch in title or "":
        if ch in SEPARATORS:
            out.append(SEPARATOR_REPLACEMENT)
        elif not _is_control(ch):
            out.append(ch)
    return "".join(out)

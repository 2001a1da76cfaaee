from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from PySide6.QtCore import QSettings

APP_NAME = "notekeeper"
LOG_DIR = Path.home() / f".{APP_NAME}" / "logs"
LOG_PATH = LOG_DIR / f"{APP_NAME}.log"
RECOVERY_DIR = Path.home() / f".{APP_NAME}" / "recovery"

DEFAULT_NOTES_DIR = Path("notes")
DEFAULT_FORMAT = "json"
FORMATS = ("json", "legacy")

# Soft limits, applied by the editing session, not by the codecs
MAX_TITLE_LENGTH = 100
MAX_CONTENT_LENGTH = 1000


@dataclass(frozen=True)
class SettingsKeys:
    NOTES_DIR: str = "notes/dir"
    NOTES_FORMAT: str = "notes/format"


@dataclass(frozen=True)
class NotesConfig:
    notes_dir: Path = DEFAULT_NOTES_DIR
    format: str = DEFAULT_FORMAT


def get_str(settings: QSettings, key: str, default: str) -> str:
    try:
        val = settings.value(key, default)
        return str(val) if val is not None else default
    except Exception:
        return default


def normalize_format(name: str) -> str:
    name = (name or "").strip().lower()
    return name if name in FORMATS else DEFAULT_FORMAT


def load_config(settings: QSettings | None = None) -> NotesConfig:
    """
    Read the notes configuration from QSettings.
    Missing or broken values fall back to the defaults.
    """
    if settings is None:
        return NotesConfig()

    raw_dir = get_str(settings, SettingsKeys.NOTES_DIR, str(DEFAULT_NOTES_DIR)).strip()
    notes_dir = Path(raw_dir) if raw_dir else DEFAULT_NOTES_DIR
    fmt = normalize_format(get_str(settings, SettingsKeys.NOTES_FORMAT, DEFAULT_FORMAT))
    return NotesConfig(notes_dir=notes_dir, format=fmt)


def save_config(settings: QSettings, config: NotesConfig) -> None:
    """Best-effort write of the notes configuration."""
    try:
        settings.setValue(SettingsKeys.NOTES_DIR, str(config.notes_dir))
        settings.setValue(SettingsKeys.NOTES_FORMAT, normalize_format(config.format))
        settings.sync()
    except Exception:
        pass

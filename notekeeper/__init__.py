from .core import (
    Date,
    DecodeError,
    FileError,
    InvalidDate,
    Note,
    NoteError,
    PersistError,
    SchemaError,
)
from .infrastructure.filesystem import atomic_write_bytes, write_recovery_copy
from .services.persistence import EditingSession, Outcome, PersistenceService
from .vault.catalog import NoteCatalog, display_name

__all__ = ['Date',
           'Note',
           'NoteError',
           'InvalidDate',
           'DecodeError',
           'SchemaError',
           'FileError',
           'PersistError',
           'atomic_write_bytes',
           'write_recovery_copy',
           'NoteCatalog',
           'display_name',
           'EditingSession',
           'Outcome',
           'PersistenceService',
           ]

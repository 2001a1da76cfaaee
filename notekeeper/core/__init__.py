from .codecs import CODECS, JSON_CODEC, LEGACY_CODEC, NoteCodec, codec_for_file_name, codec_for_format
from .errors import DecodeError, FileError, InvalidDate, NoteError, PersistError, SchemaError
from .filenames import check_file_name, title_to_stem
from .models import Date, Note

__all__ = ["CODECS",
           "JSON_CODEC",
           "LEGACY_CODEC",
           "NoteCodec",
           "codec_for_file_name",
           "codec_for_format",
           "DecodeError",
           "FileError",
           "InvalidDate",
           "NoteError",
           "PersistError",
           "SchemaError",
           "check_file_name",
           "title_to_stem",
           "Date",
           "Note",
           ]

from .stream import LineRecordStream, Mode
from .config import DEFAULT_ENCODING, DEFAULT_SEPARATOR, default_config, load_config
from .errors import (
    LineRecordError,
    FileAccessError,
    RecordFileNotFoundError,
    InvalidModeError,
    InvalidSeparatorError,
    StreamNotOpenError,
    NotOpenForReadingError,
    NotOpenForWritingError,
)

__all__ = [
    "LineRecordStream",
    "Mode",
    "DEFAULT_ENCODING",
    "DEFAULT_SEPARATOR",
    "default_config",
    "load_config",
    "LineRecordError",
    "FileAccessError",
    "RecordFileNotFoundError",
    "InvalidModeError",
    "InvalidSeparatorError",
    "StreamNotOpenError",
    "NotOpenForReadingError",
    "NotOpenForWritingError",
]

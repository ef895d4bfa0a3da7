from __future__ import annotations
from typing import Any


class LineRecordError(Exception):
    """Base class for all line_record_stream errors."""


class FileAccessError(LineRecordError, OSError):
    """
    open() failed for a reason other than a missing file on read
    (permissions, locked file, invalid path on write).
    """


class RecordFileNotFoundError(FileAccessError, FileNotFoundError):
    """open() in READ mode on a path that does not exist."""


class InvalidModeError(LineRecordError, ValueError):
    def __init__(self, path: str, mode: Any) -> None:
        super().__init__(f"Unknown file mode {mode!r} for {path}")
        self.path = path
        self.mode = mode


class InvalidSeparatorError(LineRecordError, ValueError):
    """A separator that is not exactly one character."""


class StreamNotOpenError(LineRecordError):
    """read() or write() without the matching handle attached."""


class NotOpenForReadingError(StreamNotOpenError):
    def __init__(self, msg: str = "stream is not open for reading") -> None:
        super().__init__(msg)


class NotOpenForWritingError(StreamNotOpenError):
    def __init__(self, msg: str = "stream is not open for writing") -> None:
        super().__init__(msg)

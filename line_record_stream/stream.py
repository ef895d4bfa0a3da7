from __future__ import annotations
import codecs
import enum
import errno
import logging
from typing import Any, Dict, Iterable, Iterator, List, Optional, TextIO, Tuple

from .config import DEFAULT_ENCODING, DEFAULT_SEPARATOR, default_config, merge_config
from .errors import (
    FileAccessError,
    InvalidModeError,
    InvalidSeparatorError,
    NotOpenForReadingError,
    NotOpenForWritingError,
    RecordFileNotFoundError,
)

logger = logging.getLogger(__name__)


class Mode(enum.Flag):
    READ = 1
    WRITE = 2


_MODE_ALIASES = {
    "r": Mode.READ,
    "read": Mode.READ,
    "w": Mode.WRITE,
    "write": Mode.WRITE,
}


def _coerce_mode(mode: Any) -> Optional[Mode]:
    if isinstance(mode, Mode):
        return mode
    if isinstance(mode, str):
        return _MODE_ALIASES.get(mode.lower())
    return None


def _check_separator(name: str, sep: Any) -> str:
    if not isinstance(sep, str) or len(sep) != 1:
        raise InvalidSeparatorError(f"{name} must be a single character, got {sep!r}")
    return sep


class LineRecordStream:
    """
    Sequential record access over one text file, opened for reading or writing.

    A record is one line split into fields by a single-character separator.
    Read and write separators are independent so a file written with one
    delimiter can be re-read with another. With a single positional argument
    both separators take that value.

    Use it in a ``with`` block; leaving the block releases any attached handle
    exactly once. ``close()`` may be called any number of times and keeps the
    instance reusable for a new ``open()``.
    """

    def __init__(
        self,
        read_separator: Optional[str] = None,
        write_separator: Optional[str] = None,
        *,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        self._reader: Optional[TextIO] = None
        self._writer: Optional[TextIO] = None
        # one separator given: both sides use it
        if write_separator is None:
            write_separator = read_separator if read_separator is not None else DEFAULT_SEPARATOR
        if read_separator is None:
            read_separator = DEFAULT_SEPARATOR
        self._read_sep = _check_separator("read_separator", read_separator)
        self._write_sep = _check_separator("write_separator", write_separator)
        self._encoding = encoding

    @classmethod
    def from_config(cls, options: Optional[Dict[str, Any]] = None) -> "LineRecordStream":
        cfg = merge_config(default_config(), dict(options or {}))
        return cls(cfg["read_separator"], cfg["write_separator"], encoding=cfg["encoding"])

    @property
    def read_separator(self) -> str:
        return self._read_sep

    @property
    def write_separator(self) -> str:
        return self._write_sep

    @property
    def encoding(self) -> str:
        return self._encoding

    @property
    def is_open_for_reading(self) -> bool:
        return self._reader is not None and not self._reader.closed

    @property
    def is_open_for_writing(self) -> bool:
        return self._writer is not None and not self._writer.closed

    # ----- Lifecycle -----

    def open(self, path: str, mode: Mode | str) -> None:
        """
        READ requires an existing file; WRITE creates or truncates it.

        An already attached handle of the same kind is replaced without being
        closed first. Callers that reopen must close() in between.
        """
        m = _coerce_mode(mode)
        if m == Mode.READ:
            if self.is_open_for_reading:
                logger.warning("reopening %s for reading without closing the previous handle", path)
            self._reader = self._open_reader(path)
            logger.debug("opened %s for reading", path)
        elif m == Mode.WRITE:
            if self.is_open_for_writing:
                logger.warning("reopening %s for writing without closing the previous handle", path)
            self._writer = self._open_writer(path)
            logger.debug("opened %s for writing", path)
        else:
            raise InvalidModeError(str(path), mode)

    def _read_encoding(self) -> str:
        # a leading byte-order mark is not part of the first field
        if codecs.lookup(self._encoding).name == "utf-8":
            return "utf-8-sig"
        return self._encoding

    def _open_reader(self, path: str) -> TextIO:
        try:
            # undecodable bytes become U+FFFD instead of failing the read
            return open(path, "r", encoding=self._read_encoding(), errors="replace")
        except FileNotFoundError as exc:
            raise RecordFileNotFoundError(exc.errno, exc.strerror, str(path)) from exc
        except OSError as exc:
            raise FileAccessError(exc.errno, exc.strerror, str(path)) from exc
        except ValueError as exc:
            # e.g. embedded null byte
            raise FileAccessError(errno.EINVAL, str(exc), str(path)) from exc

    def _open_writer(self, path: str) -> TextIO:
        try:
            return open(path, "w", encoding=self._encoding)
        except OSError as exc:
            # a missing parent directory is an access failure, not "not found"
            raise FileAccessError(exc.errno, exc.strerror, str(path)) from exc
        except ValueError as exc:
            raise FileAccessError(errno.EINVAL, str(exc), str(path)) from exc

    def close(self) -> None:
        """Flush and release attached handles. Safe to call repeatedly."""
        try:
            if self._writer is not None:
                self._writer.close()
        finally:
            if self._reader is not None:
                self._reader.close()

    def dispose(self) -> None:
        """Release attached handles once and drop them."""
        writer, reader = self._writer, self._reader
        self._writer = None
        self._reader = None
        if writer is None and reader is None:
            return
        logger.debug("disposing stream")
        try:
            if writer is not None:
                writer.close()
        finally:
            if reader is not None:
                reader.close()

    def __enter__(self) -> "LineRecordStream":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()

    def __del__(self) -> None:
        # Diagnostic only; release is the job of the with block.
        if self.is_open_for_reading or self.is_open_for_writing:
            logger.warning("LineRecordStream garbage-collected with an open handle")
            self.dispose()

    # ----- Records -----

    def _read_line(self) -> Optional[str]:
        if not self.is_open_for_reading:
            raise NotOpenForReadingError()
        line = self._reader.readline()
        if line == "":
            return None
        if line.endswith("\n"):
            line = line[:-1]
        return line

    def read(self) -> Optional[List[str]]:
        """
        Next record as a list of fields, or None at end of stream.
        An empty line gives [""].
        """
        line = self._read_line()
        if line is None:
            return None
        return line.split(self._read_sep)

    def read_pair(self) -> Tuple[bool, Optional[str], Optional[str]]:
        """
        Legacy two-column read.

        Returns (found, column1, column2). Columns beyond the second are
        dropped; column2 is None for a one-column line.
        """
        columns = self.read()
        if columns is None:
            return False, None, None
        if len(columns) == 0:
            return False, None, None
        if len(columns) == 1:
            return True, columns[0], None
        return True, columns[0], columns[1]

    def __iter__(self) -> Iterator[List[str]]:
        while True:
            record = self.read()
            if record is None:
                return
            yield record

    def write(self, fields: Iterable[str]) -> None:
        """Write one line: fields joined by the write separator. No escaping."""
        if not self.is_open_for_writing:
            raise NotOpenForWritingError()
        self._writer.write(self._write_sep.join(fields) + "\n")

    def write_records(self, records: Iterable[Iterable[str]]) -> int:
        n = 0
        for fields in records:
            self.write(fields)
            n += 1
        return n

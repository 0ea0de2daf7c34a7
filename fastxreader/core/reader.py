#!/usr/bin/env python3
"""
fastxreader, reader.py - Streaming FASTA/FASTQ parser.
======================================================

Purpose
-------

Read FASTA and FASTQ records one at a time from a text stream using the readfq
algorithm. Sequences and qualities may be wrapped over any number of lines,
and FASTA and FASTQ records may be mixed in a single stream.

The line that ends a record is usually the header of the next one, so the
reader keeps it between calls (the lookahead state).

"""

import sys
from collections.abc import Generator, Iterator
from enum import Enum
from pathlib import Path
from typing import TextIO

from fastxreader.core.constants import HEADER_MARKERS, QUALITY_SEPARATOR, SEQUENCE_TERMINATORS, STDIN_PATH
from fastxreader.core.errors import ResourceError
from fastxreader.core.logging_config import get_logger
from fastxreader.core.sequence_utils import split_header
from fastxreader.models.models import Record

logger = get_logger(__name__)


class ReaderState(Enum):
    """Lookahead state of a FastxReader between two calls."""

    AWAITING_HEADER = "awaiting_header"
    HAVE_HEADER = "have_header"
    EXHAUSTED = "exhausted"


def is_stdin(path: str | Path | None) -> bool:
    return path is None or str(path) == STDIN_PATH


def open_handle(path: str | Path | None) -> tuple[TextIO, bool]:
    """Open a sequence file for reading, or return standard input.

    Args:
        path: File to open. None or "-" selects standard input.

    Returns:
        Tuple of (handle, owned). Owned handles must be closed by the caller.

    Raises:
        ResourceError: If the file cannot be opened.
    """
    if is_stdin(path):
        return sys.stdin, False
    try:
        return Path(path).open(encoding="utf-8"), True
    except OSError as e:
        raise ResourceError(path, e.strerror or str(e)) from e


class FastxReader:
    """Read FASTA/FASTQ records one at a time.

    Usage:
        with FastxReader.open("reads.fastq") as reader:
            for record in reader:
                print(record.name, record.sequence, record.quality)

    ``next_record()`` returns None once the stream is exhausted, and keeps doing
    so on every further call.
    """

    def __init__(self, handle: TextIO, source: str | None = None, owns_handle: bool = False) -> None:
        self._handle = handle
        self._owns_handle = owns_handle
        self.source = source or getattr(handle, "name", "<stream>")
        self._state = ReaderState.AWAITING_HEADER
        self._lookahead: str | None = None
        self.records_read = 0

    @classmethod
    def open(cls, path: str | Path | None = None) -> "FastxReader":
        """Open a file (or standard input for None / "-") and return a reader owning it."""
        handle, owned = open_handle(path)
        source = "<stdin>" if is_stdin(path) else str(path)
        return cls(handle, source=source, owns_handle=owned)

    @property
    def state(self) -> ReaderState:
        return self._state

    def _readline(self) -> str | None:
        line = self._handle.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def _seek_header(self) -> str | None:
        """Skip lines until a FASTA or FASTQ header; None at end of stream."""
        while (line := self._readline()) is not None:
            if line.startswith(HEADER_MARKERS):
                return line
        return None

    def next_record(self) -> Record | None:
        """Return the next record, or None at end of stream."""
        if self._state is ReaderState.EXHAUSTED:
            return None

        if self._state is ReaderState.HAVE_HEADER:
            header = self._lookahead
        else:
            header = self._seek_header()
            if header is None:
                self._state = ReaderState.EXHAUSTED
                return None

        self._lookahead = None
        self._state = ReaderState.AWAITING_HEADER
        name, comment = split_header(header)

        seq_lines = []
        line = self._readline()
        while line is not None and not line.startswith(SEQUENCE_TERMINATORS):
            seq_lines.append(line)
            line = self._readline()
        sequence = "".join(seq_lines)

        if line is None:
            self._state = ReaderState.EXHAUSTED
            return self._emit(name, comment, sequence)

        if not line.startswith(QUALITY_SEPARATOR):
            # Header of the next record
            self._lookahead = line
            self._state = ReaderState.HAVE_HEADER
            return self._emit(name, comment, sequence)

        # Quality lines may be wrapped differently from the sequence; only the
        # total length matters. At least one quality line is always consumed.
        qual_lines = []
        qual_length = 0
        while (line := self._readline()) is not None:
            qual_lines.append(line)
            qual_length += len(line)
            if qual_length >= len(sequence):
                quality = "".join(qual_lines)
                if qual_length > len(sequence):
                    logger.warning(
                        f"{self.source}: quality of record '{name}' is longer than its sequence "
                        f"({qual_length} > {len(sequence)} characters), trimming it"
                    )
                    quality = quality[: len(sequence)]
                return self._emit(name, comment, sequence, quality)

        # Stream ended inside the quality block: keep the record, drop the
        # incomplete quality string.
        logger.warning(
            f"{self.source}: quality of record '{name}' truncated at end of input "
            f"({qual_length} of {len(sequence)} characters), returning it without quality"
        )
        self._state = ReaderState.EXHAUSTED
        return self._emit(name, comment, sequence)

    def _emit(self, name: str, comment: str, sequence: str, quality: str | None = None) -> Record:
        self.records_read += 1
        return Record(name=name, comment=comment, sequence=sequence, quality=quality)

    def __iter__(self) -> Iterator[Record]:
        while (record := self.next_record()) is not None:
            yield record

    def close(self) -> None:
        """Release the underlying handle if this reader opened it."""
        self._state = ReaderState.EXHAUSTED
        self._lookahead = None
        if self._owns_handle and not self._handle.closed:
            self._handle.close()
            logger.debug(f"Closed {self.source} after {self.records_read} records")

    def __enter__(self) -> "FastxReader":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()


def read_records(path: str | Path | None = None) -> Generator[Record, None, None]:
    """Read all records of a FASTA/FASTQ file using a generator.

    Args:
        path: File to read; None or "-" reads standard input.

    Yields:
        Record objects in file order.
    """
    with FastxReader.open(path) as reader:
        yield from reader

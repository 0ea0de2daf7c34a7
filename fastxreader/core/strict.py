#!/usr/bin/env python3
"""Fast FASTQ reader for canonical four-line records.

Unlike ``FastxReader`` this reader keeps no lookahead and does not support
wrapped sequences. In exchange every record is validated: header and
separator markers, the ACGTN alphabet, and matching sequence/quality lengths.
Problems are returned as ``FormatViolation`` values so the caller can decide
whether to stop.
"""

from collections.abc import Iterator
from pathlib import Path
from typing import Literal, TextIO

from fastxreader.core.constants import FASTA_MARKER, FASTQ_MARKER, QUALITY_SEPARATOR, STRICT_ALPHABET
from fastxreader.core.logging_config import get_logger
from fastxreader.core.reader import is_stdin, open_handle
from fastxreader.core.sequence_utils import split_header
from fastxreader.models.models import FormatViolation, Record

logger = get_logger(__name__)


class StrictFastqReader:
    """Read four-line FASTQ records with format validation.

    ``message`` and ``status`` describe the most recent violation, if any.
    """

    def __init__(self, handle: TextIO, source: str | None = None, owns_handle: bool = False) -> None:
        self._handle = handle
        self._owns_handle = owns_handle
        self.source = source or getattr(handle, "name", "<stream>")
        self._line_number = 0
        self.records_read = 0
        self.violations = 0
        self.message: str | None = None
        self.status = True

    @classmethod
    def open(cls, path: str | Path | None = None) -> "StrictFastqReader":
        handle, owned = open_handle(path)
        source = "<stdin>" if is_stdin(path) else str(path)
        return cls(handle, source=source, owns_handle=owned)

    def next_strict_record(self) -> Record | FormatViolation | None:
        """Read the next four lines as one FASTQ record.

        Returns:
            The record, a FormatViolation describing why the four lines are not
            a valid record, or None when fewer than four lines remain.
        """
        lines = [self._handle.readline() for _ in range(4)]
        if not lines[3]:
            return None

        first_line = self._line_number + 1
        self._line_number += 4
        header, sequence, separator, quality = (line.rstrip("\r\n") for line in lines)

        if not (header.startswith(FASTQ_MARKER) and separator.startswith(QUALITY_SEPARATOR)):
            hint = None
            if header.startswith(FASTA_MARKER) or sequence.startswith(FASTA_MARKER):
                hint = "might be FASTA instead"
            return self._violation("header", "Unknown format: expecting FASTQ (wrong header)", first_line, hint)

        if not STRICT_ALPHABET.match(sequence):
            return self._violation(
                "alphabet", "Unknown format: expecting FASTQ (corrupted?): sequence is not ACGTN", first_line
            )

        if len(sequence) != len(quality):
            return self._violation(
                "length",
                f"Unknown format: expecting FASTQ (corrupted?): sequence length {len(sequence)} "
                f"differs from quality length {len(quality)}",
                first_line,
            )

        name, comment = split_header(header)
        self.records_read += 1
        return Record(name=name, comment=comment, sequence=sequence, quality=quality)

    def _violation(
        self,
        kind: Literal["header", "alphabet", "length"],
        message: str,
        line_number: int,
        hint: str | None = None,
    ) -> FormatViolation:
        violation = FormatViolation(kind=kind, message=message, hint=hint, line_number=line_number)
        self.violations += 1
        self.message = str(violation)
        self.status = False
        logger.debug(f"{self.source}: {violation}")
        return violation

    def __iter__(self) -> Iterator[Record | FormatViolation]:
        while (item := self.next_strict_record()) is not None:
            yield item

    def close(self) -> None:
        if self._owns_handle and not self._handle.closed:
            self._handle.close()

    def __enter__(self) -> "StrictFastqReader":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

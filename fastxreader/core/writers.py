#!/usr/bin/env python3
"""Render records back to canonical single-line FASTA/FASTQ text."""

from collections.abc import Iterable
from typing import TextIO

from fastxreader.models.models import PairedRecord, Record


def format_header(record: Record) -> str:
    if record.comment:
        return f"{record.name} {record.comment}"
    return record.name


def format_record(record: Record) -> str:
    """Format a record as FASTQ if it has a quality, otherwise as FASTA."""
    if record.quality is not None:
        return f"@{format_header(record)}\n{record.sequence}\n+\n{record.quality}\n"
    return f">{format_header(record)}\n{record.sequence}\n"


def format_pair(pair: PairedRecord) -> str:
    """Format both mates of a pair, mate 1 first (interleaved layout)."""
    return format_record(pair.mate1()) + format_record(pair.mate2())


def write_records(records: Iterable[Record | PairedRecord], outfile: TextIO) -> int:
    """Write records or pairs to an open file handle.

    Returns:
        Number of items written.
    """
    count = 0
    for item in records:
        if isinstance(item, PairedRecord):
            outfile.write(format_pair(item))
        else:
            outfile.write(format_record(item))
        count += 1
    return count

#!/usr/bin/env python3
"""Guess whether a file is FASTA or FASTQ from its first lines."""

from pathlib import Path
from typing import Literal

from fastxreader.core.constants import FASTA_MARKER, FASTQ_MARKER, QUALITY_SEPARATOR
from fastxreader.core.errors import ResourceError


def get_file_format(filename: str | Path) -> Literal["fasta", "fastq"] | None:
    """Return 'fasta', 'fastq' or None for a sequence file.

    A first line starting with '>' means FASTA. A first line starting with '@'
    means FASTQ only if the third line starts with '+'.

    Args:
        filename: Path to the file to inspect.

    Returns:
        The detected format, or None if it cannot be determined.

    Raises:
        ResourceError: If the file cannot be opened.
    """
    try:
        with Path(filename).open(encoding="utf-8") as f:
            first = f.readline()
            if first.startswith(FASTA_MARKER):
                return "fasta"
            if first.startswith(FASTQ_MARKER):
                f.readline()
                if f.readline().startswith(QUALITY_SEPARATOR):
                    return "fastq"
    except OSError as e:
        raise ResourceError(filename, e.strerror or str(e)) from e
    return None

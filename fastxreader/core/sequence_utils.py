#!/usr/bin/env python3
"""Pure helpers on headers, sequences and paired-end file names.

None of these functions touch the filesystem.
"""

import re
from collections.abc import Iterable
from pathlib import Path

from fastxreader.core.constants import COMPLEMENT_TABLE, DEFAULT_TAG_PAIRS, TagPair

_HEADER_RE = re.compile(r"(\S*)(?:\s+(.*))?", re.DOTALL)


def split_header(header: str) -> tuple[str, str]:
    """Split a header line into name and comment.

    The first character (``>`` or ``@``) is dropped. The name is everything up to
    the first whitespace run; the comment is what follows it.

    Args:
        header: Header line without the trailing newline.

    Returns:
        Tuple of (name, comment). The comment is empty when absent.

    Example:
        >>> split_header("@r1 extra info")
        ('r1', 'extra info')
    """
    match = _HEADER_RE.match(header[1:])
    name, comment = match.group(1), match.group(2)
    return name, comment or ""


def reverse_complement(sequence: str) -> str:
    """Reverse complement a nucleotide sequence, preserving case.

    Bases other than A, C, G and T (e.g. N) are kept as they are.
    """
    return sequence.translate(COMPLEMENT_TABLE)[::-1]


def reverse_quality(quality: str | None) -> str | None:
    """Reverse a quality string; qualities are not complemented."""
    if quality is None:
        return None
    return quality[::-1]


def derive_mate_path(path: str | Path, tag_pairs: Iterable[TagPair] = DEFAULT_TAG_PAIRS) -> Path | None:
    """Guess the mate-2 file name from the mate-1 file name.

    Tag pairs are tried in order and the first one that changes the file name
    wins. Only the first occurrence of the tag in the file name is replaced;
    parent directories are left alone.

    Args:
        path: Path of the mate-1 file.
        tag_pairs: Ordered (tag1, tag2) substitutions.

    Returns:
        The derived path, or None if no substitution applied.

    Example:
        >>> derive_mate_path("data/sample_R1.fastq")
        PosixPath('data/sample_R2.fastq')
    """
    path = Path(path)
    for tag1, tag2 in tag_pairs:
        renamed = path.name.replace(tag1, tag2, 1)
        if renamed != path.name:
            return path.with_name(renamed)
    return None

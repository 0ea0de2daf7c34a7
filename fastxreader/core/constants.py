#!/usr/bin/env python3
"""Constants and type aliases used throughout the fastxreader package."""

import re
from typing import TypeAlias

# =============================================================================
# Type Aliases
# =============================================================================
TagPair: TypeAlias = tuple[str, str]

# =============================================================================
# Header Markers
# =============================================================================
FASTA_MARKER = ">"
"""First character of a FASTA header line."""

FASTQ_MARKER = "@"
"""First character of a FASTQ header line."""

QUALITY_SEPARATOR = "+"
"""First character of the line separating a FASTQ sequence from its quality."""

HEADER_MARKERS = (FASTA_MARKER, FASTQ_MARKER)
SEQUENCE_TERMINATORS = (FASTA_MARKER, FASTQ_MARKER, QUALITY_SEPARATOR)

# =============================================================================
# Strict FASTQ Validation
# =============================================================================
STRICT_ALPHABET = re.compile(r"^[ACGTNacgtn]+$")
"""Sequences accepted by the strict FASTQ reader (no IUPAC ambiguity codes)."""

# =============================================================================
# Paired-end Defaults
# =============================================================================
DEFAULT_TAG_PAIRS: tuple[TagPair, ...] = (("_R1", "_R2"), ("_1", "_2"))
"""Substitutions tried in order to derive the mate-2 filename from mate 1."""

STDIN_PATH = "-"
"""Path value meaning standard input."""

COMPLEMENT_TABLE = str.maketrans("ACGTacgt", "TGCAtgca")

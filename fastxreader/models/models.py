from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from fastxreader.core.constants import DEFAULT_TAG_PAIRS, STDIN_PATH, TagPair

# =============================================================================
# Sequence Records
# =============================================================================


class Record(BaseModel):
    """A single FASTA or FASTQ record.

    ``quality`` is None for FASTA records. ``comment`` holds whatever followed
    the first whitespace run of the header line.
    """

    name: str
    comment: str = ""
    sequence: str = ""
    quality: str | None = None

    @property
    def is_fastq(self) -> bool:
        return self.quality is not None


class PairedRecord(BaseModel):
    """Two mates of a paired-end read, sharing a single name."""

    name: str
    comment1: str = ""
    comment2: str = ""
    sequence1: str = ""
    sequence2: str = ""
    quality1: str | None = None
    quality2: str | None = None

    def mate1(self) -> Record:
        return Record(name=self.name, comment=self.comment1, sequence=self.sequence1, quality=self.quality1)

    def mate2(self) -> Record:
        return Record(name=self.name, comment=self.comment2, sequence=self.sequence2, quality=self.quality2)


class FormatViolation(BaseModel):
    """A malformed record reported by the strict FASTQ reader.

    Violations are returned to the caller, which decides whether to stop.
    """

    kind: Literal["header", "alphabet", "length"]
    message: str
    hint: str | None = None
    line_number: int  # 1-based line of the offending record's header

    def __str__(self) -> str:
        text = f"line {self.line_number}: {self.message}"
        if self.hint:
            text += f" ({self.hint})"
        return text


# =============================================================================
# Paired-end Configuration
# =============================================================================


class PairConfig(BaseModel):
    """Configuration of a paired-end reader, fixed at construction.

    A ``read1`` of None or ``"-"`` means standard input, which is always read
    as interleaved.
    """

    read1: Path | None = None
    read2: Path | None = None
    interleaved: bool = False
    tag_pairs: tuple[TagPair, ...] = DEFAULT_TAG_PAIRS
    check_names: bool = True
    reverse_complement: bool = False
    require_mate: bool = False  # fail instead of falling back to interleaved

    model_config = ConfigDict(frozen=True)

    @field_validator("tag_pairs")
    @classmethod
    def validate_tag_pairs(cls, v: tuple[TagPair, ...]) -> tuple[TagPair, ...]:
        for tag1, tag2 in v:
            if not tag1 or not tag2:
                raise ValueError("Tags used to derive the mate-2 file name cannot be empty")
            if tag1 == tag2:
                raise ValueError(f"Tag pair ({tag1!r}, {tag2!r}) would derive the same file name")
        return v

    @model_validator(mode="after")
    def validate_mode(self) -> PairConfig:
        if self.read2 is not None and self.interleaved:
            raise ValueError("An explicit read2 file cannot be combined with interleaved mode")
        if self.read2 is not None and self.is_stdin:
            raise ValueError("An explicit read2 file requires read1 to be a file, not standard input")
        return self

    @property
    def is_stdin(self) -> bool:
        return self.read1 is None or str(self.read1) == STDIN_PATH

#!/usr/bin/env python3
"""
fastxreader, paired.py - Paired-end FASTA/FASTQ reader.
=======================================================

Purpose
-------

Read paired-end sequencing data as a single stream of read pairs. Handles:
1. Two files given explicitly (R1 and R2).
2. A single R1 file, with the R2 file name derived by tag substitution
   (``_R1`` -> ``_R2``, then ``_1`` -> ``_2``).
3. Interleaved files, where mate 1 and mate 2 alternate in one stream.
4. Standard input, always read as interleaved.

Mate names are checked for equality unless disabled, and mate 2 can be
reverse complemented on the fly.

"""

from collections.abc import Iterator
from contextlib import ExitStack
from pathlib import Path
from typing import Literal

from fastxreader.core.errors import PairingViolation
from fastxreader.core.logging_config import get_logger
from fastxreader.core.reader import FastxReader
from fastxreader.core.sequence_utils import derive_mate_path, reverse_complement, reverse_quality
from fastxreader.models.models import PairConfig, PairedRecord, Record

logger = get_logger(__name__)


class PairedReader:
    """Read paired-end records from two files or one interleaved stream.

    Usage:
        with PairedReader(read1="sample_R1.fastq") as pairs:
            for pair in pairs:
                print(pair.name, pair.sequence1, pair.sequence2)

    Either pass a PairConfig or its fields as keyword arguments. Streams are
    opened during construction, so a missing file fails immediately with
    ResourceError.
    """

    def __init__(self, config: PairConfig | None = None, **kwargs) -> None:
        if config is None:
            config = PairConfig(**kwargs)
        elif kwargs:
            raise TypeError("Pass either a PairConfig or keyword arguments, not both")

        self.config = config
        self.check_names = config.check_names
        self.read2_path: Path | None = None
        self.mode: Literal["paired", "interleaved"] = "interleaved"
        self.pairs_read = 0
        self._finished = False

        with ExitStack() as stack:
            self._reader1 = stack.enter_context(FastxReader.open(config.read1))
            self._reader2 = self._reader1
            if self._resolve_mate_path():
                self._reader2 = stack.enter_context(FastxReader.open(self.read2_path))
                self.mode = "paired"
            self._stack = stack.pop_all()

        if self.mode == "paired":
            logger.debug(f"Reading pairs from {self._reader1.source} and {self.read2_path}")
        else:
            logger.debug(f"Reading {self._reader1.source} as interleaved")

    def _resolve_mate_path(self) -> bool:
        """Decide where mate 2 comes from; True if it is a separate file."""
        config = self.config
        if config.is_stdin or config.interleaved:
            return False
        if config.read2 is not None:
            self.read2_path = config.read2
            return True

        derived = derive_mate_path(config.read1, config.tag_pairs)
        if derived is None:
            reason = "no mate tag found in the file name"
        elif not derived.exists():
            reason = f'"{derived}" not found'
        elif derived.samefile(config.read1):
            reason = f'"{derived}" is the same file'
        else:
            self.read2_path = derived
            return True

        if config.require_mate:
            raise PairingViolation(f'No mate-2 file for "{config.read1}": {reason}')
        logger.warning(f'Pair not specified and {reason} for "{config.read1}": trying parsing as interleaved')
        self.check_names = True
        return False

    def next_pair(self) -> PairedRecord | None:
        """Return the next read pair, or None when either side is exhausted.

        Raises:
            PairingViolation: If name checking is enabled and the mate names differ.
        """
        if self._finished:
            return None

        # Mate 1 must be read before mate 2: in interleaved mode both come from one reader.
        mate1 = self._reader1.next_record()
        mate2 = self._reader2.next_record()

        if mate1 is None or mate2 is None:
            self._finished = True
            self._warn_unpaired(mate1, mate2)
            return None

        if self.check_names and mate1.name != mate2.name:
            raise PairingViolation.name_mismatch(mate1.name, mate2.name)

        sequence2, quality2 = mate2.sequence, mate2.quality
        if self.config.reverse_complement:
            sequence2 = reverse_complement(sequence2)
            quality2 = reverse_quality(quality2)

        self.pairs_read += 1
        return PairedRecord(
            name=mate1.name,
            comment1=mate1.comment,
            comment2=mate2.comment,
            sequence1=mate1.sequence,
            sequence2=sequence2,
            quality1=mate1.quality,
            quality2=quality2,
        )

    def _warn_unpaired(self, mate1: Record | None, mate2: Record | None) -> None:
        leftover = mate1 or mate2
        if leftover is None:
            return
        if self.mode == "interleaved":
            logger.warning(f"{self._reader1.source}: odd number of records, '{leftover.name}' has no mate")
        else:
            longer, shorter = (self._reader1, self._reader2) if mate1 else (self._reader2, self._reader1)
            logger.warning(f"{longer.source} has more records than {shorter.source}, ignoring the rest")

    def __iter__(self) -> Iterator[PairedRecord]:
        while (pair := self.next_pair()) is not None:
            yield pair

    def close(self) -> None:
        """Close every stream opened by this reader."""
        self._finished = True
        self._stack.close()

    def __enter__(self) -> "PairedReader":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

"""Streaming FASTA/FASTQ reader with paired-end support."""

from fastxreader.core.errors import PairingViolation, ResourceError
from fastxreader.core.file_format import get_file_format
from fastxreader.core.paired import PairedReader
from fastxreader.core.reader import FastxReader, ReaderState, read_records
from fastxreader.core.sequence_utils import derive_mate_path, reverse_complement, split_header
from fastxreader.core.strict import StrictFastqReader
from fastxreader.core.writers import format_pair, format_record, write_records
from fastxreader.models.models import FormatViolation, PairConfig, PairedRecord, Record
from fastxreader.version import __version__

__all__ = [
    "FastxReader",
    "FormatViolation",
    "PairConfig",
    "PairedReader",
    "PairedRecord",
    "PairingViolation",
    "ReaderState",
    "Record",
    "ResourceError",
    "StrictFastqReader",
    "__version__",
    "derive_mate_path",
    "format_pair",
    "format_record",
    "get_file_format",
    "read_records",
    "reverse_complement",
    "split_header",
    "write_records",
]

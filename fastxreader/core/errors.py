#!/usr/bin/env python3
"""Exceptions raised by the readers.

End of stream is not an error: readers return ``None``. Strict FASTQ format
problems are returned as ``FormatViolation`` values, not raised.
"""


class PairingViolation(ValueError):
    """Mates cannot be paired: names differ or no mate-2 source was found."""

    def __init__(self, message: str, name1: str | None = None, name2: str | None = None) -> None:
        super().__init__(message)
        self.name1 = name1
        self.name2 = name2

    @classmethod
    def name_mismatch(cls, name1: str, name2: str) -> "PairingViolation":
        return cls(f"Read name different in paired-end input: [{name1}] != [{name2}]", name1, name2)


class ResourceError(OSError):
    """A sequence stream could not be opened."""

    def __init__(self, path, reason: str) -> None:
        super().__init__(f"Unable to read file {path}: {reason}")
        self.path = path

"""Shared pytest fixtures for fastxreader tests."""

import io
from pathlib import Path

import pytest
from loguru import logger


@pytest.fixture
def test_data_dir():
    """Return path to the main test_data directory."""
    return Path(__file__).parent / "test_data"


@pytest.fixture
def write_file(tmp_path):
    """Factory writing text to a file in a temporary directory.

    Usage: ``path = write_file("reads.fq", "@r1\\nACGT\\n+\\nIIII\\n")``
    """

    def _write(name: str, content: str):
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def stream():
    """Factory wrapping text in an in-memory text stream."""

    def _stream(content: str) -> io.StringIO:
        return io.StringIO(content)

    return _stream


@pytest.fixture
def warnings_logged():
    """Collect messages of WARNING level and above emitted through loguru."""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="WARNING")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def paired_fastq(write_file):
    """Write a matching R1/R2 pair of FASTQ files and return their paths.

    Contains:
    - p1: AACG / TTGC
    - p2: ACGT / CCGG
    """
    r1 = write_file("sample_R1.fastq", "@p1 1:N:0\nAACG\n+\n1234\n@p2 1:N:0\nACGT\n+\nIIII\n")
    r2 = write_file("sample_R2.fastq", "@p1 2:N:0\nTTGC\n+\n5678\n@p2 2:N:0\nCCGG\n+\nHHHH\n")
    return r1, r2

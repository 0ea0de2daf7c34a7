"""Unit tests for fastxreader.core.paired module."""

import io

import pytest

from fastxreader.core.errors import PairingViolation, ResourceError
from fastxreader.core.paired import PairedReader
from fastxreader.models.models import PairConfig, PairedRecord


class TestExplicitMode:
    """Tests for two files given explicitly."""

    def test_pairs(self, paired_fastq):
        r1, r2 = paired_fastq
        with PairedReader(read1=r1, read2=r2) as reader:
            pairs = list(reader)
        assert reader.mode == "paired"
        assert pairs[0] == PairedRecord(
            name="p1",
            comment1="1:N:0",
            comment2="2:N:0",
            sequence1="AACG",
            sequence2="TTGC",
            quality1="1234",
            quality2="5678",
        )
        assert [p.name for p in pairs] == ["p1", "p2"]
        assert reader.pairs_read == 2

    def test_end_of_stream_is_idempotent(self, paired_fastq):
        r1, r2 = paired_fastq
        with PairedReader(PairConfig(read1=r1, read2=r2)) as reader:
            reader.next_pair()
            reader.next_pair()
            assert reader.next_pair() is None
            assert reader.next_pair() is None

    def test_missing_read2_raises_at_construction(self, paired_fastq, tmp_path):
        r1, _ = paired_fastq
        with pytest.raises(ResourceError, match="nope_R2.fastq"):
            PairedReader(read1=r1, read2=tmp_path / "nope_R2.fastq")

    def test_missing_read1_raises_at_construction(self, tmp_path):
        with pytest.raises(ResourceError):
            PairedReader(read1=tmp_path / "absent_R1.fastq")

    def test_unequal_file_lengths(self, write_file, warnings_logged):
        """No partial pair is returned when one file runs out first."""
        r1 = write_file("x_R1.fq", "@a\nAC\n+\nII\n@b\nAC\n+\nII\n")
        r2 = write_file("x_R2.fq", "@a\nGT\n+\nII\n")
        with PairedReader(read1=r1, read2=r2) as reader:
            assert reader.next_pair().name == "a"
            assert reader.next_pair() is None
        assert any("more records" in message for message in warnings_logged)

    def test_config_and_kwargs_are_exclusive(self, paired_fastq):
        r1, r2 = paired_fastq
        with pytest.raises(TypeError):
            PairedReader(PairConfig(read1=r1), read2=r2)


class TestAutoDerive:
    """Tests for deriving the R2 file from the R1 file name."""

    def test_derives_r2(self, paired_fastq):
        r1, r2 = paired_fastq
        with PairedReader(read1=r1) as reader:
            assert reader.mode == "paired"
            assert reader.read2_path == r2
            assert len(list(reader)) == 2

    def test_derives_with_underscore_number(self, write_file):
        r1 = write_file("run_1.fq", "@a\nAC\n+\nII\n")
        r2 = write_file("run_2.fq", "@a\nGT\n+\nII\n")
        with PairedReader(read1=r1) as reader:
            assert reader.read2_path == r2

    def test_custom_tags(self, write_file):
        r1 = write_file("lib.fwd.fq", "@a\nAC\n+\nII\n")
        r2 = write_file("lib.rev.fq", "@a\nGT\n+\nII\n")
        with PairedReader(read1=r1, tag_pairs=((".fwd", ".rev"),)) as reader:
            assert reader.read2_path == r2
            assert reader.next_pair().sequence2 == "GT"

    def test_missing_r2_falls_back_to_interleaved(self, write_file, warnings_logged):
        r1 = write_file("only_R1.fq", "@a\nAC\n+\nII\n@a\nGT\n+\nII\n")
        with PairedReader(read1=r1, check_names=False) as reader:
            assert reader.mode == "interleaved"
            assert reader.read2_path is None
            assert reader.check_names is True
            pair = reader.next_pair()
        assert pair.sequence1 == "AC"
        assert pair.sequence2 == "GT"
        assert any("interleaved" in message for message in warnings_logged)

    def test_no_tag_falls_back_to_interleaved(self, test_data_dir, warnings_logged):
        with PairedReader(read1=test_data_dir / "interleaved.fastq") as reader:
            assert reader.mode == "interleaved"
            assert [p.name for p in reader] == ["p1", "p2"]
        assert warnings_logged

    def test_r2_resolving_to_r1_falls_back_to_interleaved(self, write_file, tmp_path, warnings_logged):
        """A derived R2 that is the R1 file itself is not used as mate file."""
        r1 = write_file("s_R1.fq", "@a\nAC\n+\nII\n@a\nGT\n+\nII\n")
        (tmp_path / "s_R2.fq").symlink_to(r1)
        with PairedReader(read1=r1) as reader:
            assert reader.mode == "interleaved"
            assert reader.read2_path is None
            pair = reader.next_pair()
        assert (pair.sequence1, pair.sequence2) == ("AC", "GT")
        assert any("is the same file" in message for message in warnings_logged)

    def test_require_mate(self, write_file):
        r1 = write_file("only_R1.fq", "@a\nAC\n+\nII\n")
        with pytest.raises(PairingViolation, match="only_R2.fq"):
            PairedReader(read1=r1, require_mate=True)


class TestInterleavedMode:
    """Tests for one stream with alternating mates."""

    def test_four_records_give_two_pairs(self, write_file):
        path = write_file("reads.fa", ">A\nAAAA\n>A\nCCCC\n>C\nGGGG\n>C\nTTTT\n")
        with PairedReader(read1=path, interleaved=True) as reader:
            pairs = list(reader)
        assert [(p.sequence1, p.sequence2) for p in pairs] == [("AAAA", "CCCC"), ("GGGG", "TTTT")]
        assert pairs[0].quality1 is None

    def test_odd_record_count(self, write_file, warnings_logged):
        path = write_file("odd.fa", ">a\nAC\n>a\nGT\n>b\nTT\n")
        with PairedReader(read1=path, interleaved=True) as reader:
            assert reader.next_pair().name == "a"
            assert reader.next_pair() is None
        assert any("no mate" in message for message in warnings_logged)

    def test_stdin_is_interleaved(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("@x\nAC\n+\nII\n@x\nGT\n+\nJJ\n"))
        with PairedReader() as reader:
            assert reader.mode == "interleaved"
            pair = reader.next_pair()
        assert pair.quality2 == "JJ"

    def test_dash_is_stdin(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO(">x\nAC\n>x\nGT\n"))
        with PairedReader(read1="-") as reader:
            assert reader.next_pair().sequence2 == "GT"


class TestNameCheck:
    """Tests for mate name concordance."""

    def test_mismatch_raises(self, write_file):
        path = write_file("mm.fa", ">x\nAC\n>y\nGT\n")
        with PairedReader(read1=path, interleaved=True) as reader, pytest.raises(PairingViolation) as excinfo:
            reader.next_pair()
        assert excinfo.value.name1 == "x"
        assert excinfo.value.name2 == "y"
        assert "[x]" in str(excinfo.value)

    def test_mismatch_allowed_when_disabled(self, write_file):
        path = write_file("mm.fa", ">x\nAC\n>y\nGT\n")
        with PairedReader(read1=path, interleaved=True, check_names=False) as reader:
            pair = reader.next_pair()
        assert pair.name == "x"

    def test_comments_are_not_compared(self, paired_fastq):
        r1, r2 = paired_fastq
        with PairedReader(read1=r1, read2=r2) as reader:
            pair = reader.next_pair()
        assert pair.comment1 != pair.comment2


class TestReverseComplement:
    """Tests for reverse complementing mate 2."""

    def test_mate2_reverse_complemented(self, write_file):
        path = write_file("rc.fq", "@r\nACGT\n+\nABCD\n@r\nAACG\n+\n1234\n")
        with PairedReader(read1=path, interleaved=True, reverse_complement=True) as reader:
            pair = reader.next_pair()
        assert pair.sequence1 == "ACGT"
        assert pair.quality1 == "ABCD"
        assert pair.sequence2 == "CGTT"
        assert pair.quality2 == "4321"

    def test_case_preserved(self, test_data_dir):
        with PairedReader(
            read1=test_data_dir / "sample_R1.fastq", reverse_complement=True
        ) as reader:
            pairs = list(reader)
        assert pairs[2].sequence2 == "ncgt"
        assert pairs[2].quality2 == "HGFE"

    def test_fasta_mate_has_no_quality(self, write_file):
        path = write_file("rc.fa", ">r\nAC\n>r\nGG\n")
        with PairedReader(read1=path, interleaved=True, reverse_complement=True) as reader:
            pair = reader.next_pair()
        assert pair.sequence2 == "CC"
        assert pair.quality2 is None


def test_close_releases_both_handles(paired_fastq):
    r1, r2 = paired_fastq
    reader = PairedReader(read1=r1, read2=r2)
    reader.next_pair()
    reader.close()
    assert reader._reader1._handle.closed
    assert reader._reader2._handle.closed
    assert reader.next_pair() is None

import pytest

from converters.contracts import LineRecord
from converters.ingest import read_line_records

pytestmark = [pytest.mark.unit, pytest.mark.grid]


def test_reads_lines_in_file_order(write_file):
    p = write_file("in.txt", "1 0 2\n0 0 1\n4 1 0\n")

    records = read_line_records(p)

    assert records == [
        LineRecord(line_no=1, text="1 0 2"),
        LineRecord(line_no=2, text="0 0 1"),
        LineRecord(line_no=3, text="4 1 0"),
    ]


def test_last_line_without_terminator(write_file):
    p = write_file("in.txt", "1 0\n0 1")
    assert [r.text for r in read_line_records(p)] == ["1 0", "0 1"]


def test_crlf_and_cr_terminators(write_file):
    p = write_file("in.txt", "1 0\r\n0 1\r1 1\r\n")
    assert [r.text for r in read_line_records(p)] == ["1 0", "0 1", "1 1"]


def test_blank_middle_line_is_kept(write_file):
    p = write_file("in.txt", "1 0\n\n0 1\n")
    assert [r.text for r in read_line_records(p)] == ["1 0", "", "0 1"]


def test_empty_file_has_no_records(write_file):
    p = write_file("in.txt", "")
    assert read_line_records(p) == []


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_line_records(tmp_path / "nope.txt")


def test_invalid_utf8_is_replaced_not_fatal(tmp_path):
    p = tmp_path / "in.txt"
    p.write_bytes(b"1 \xe9 0\n0 1\n")

    records = read_line_records(p)

    assert [r.text for r in records] == ["1 \ufffd 0", "0 1"]

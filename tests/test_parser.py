"""Tests for reading and validating import rows."""

import csv
import io

import pytest

from hrpipeline.services.imports.exceptions import ImportStreamError, InvalidHeaderError, RowSkipped
from hrpipeline.services.imports.parser import make_reader, parse_row, read_header, read_rows


def reader_for(text: str):
    return make_reader(io.StringIO(text, newline=""))


class FlakyReader:
    """Iterator that raises csv.Error for selected positions."""

    def __init__(self, rows, bad_positions):
        self._rows = iter(rows)
        self._bad = set(bad_positions)
        self._position = 0

    def __iter__(self):
        return self

    def __next__(self):
        position = self._position
        self._position += 1
        if position in self._bad:
            raise csv.Error("malformed line")
        return next(self._rows)


def test_parse_row_trims_every_field():
    row = [" 001 ", "Jane Doe ", "JG1", " desc", "BranchA", " ", "Target", "note", "RMFT "]

    record = parse_row(row, 0)

    assert record.personnel_number == "001"
    assert record.full_name == "Jane Doe"
    assert record.description == "desc"
    assert record.branch_name == "BranchA"
    assert record.unit_name == ""
    assert record.target_unit_name == "Target"
    assert record.new_job_group == "RMFT"
    assert record.unit_id is None


def test_parse_row_ignores_extra_columns():
    row = ["001", "Jane", "JG1", "d", "B", "U", "T", "R", "K", "extra", "more"]

    record = parse_row(row, 3)

    assert record.new_job_group == "K"


def test_parse_row_skips_short_row():
    with pytest.raises(RowSkipped) as exc_info:
        parse_row(["001", "Jane", "JG1", "d", "B"], 4)

    assert exc_info.value.index == 4
    assert "got 5" in exc_info.value.reason


def test_parse_row_skips_blank_personnel_number():
    with pytest.raises(RowSkipped) as exc_info:
        parse_row([" ", "X", "", "", "", "", "", "", ""], 1)

    assert exc_info.value.reason == "empty personnel number"


def test_read_header_accepts_nine_columns():
    reader = reader_for("PN;Nama;JG;ESGDESC;Kanca;Uker;UkerTujuan;Ket;Kel\n")

    header = read_header(reader)

    assert header[0] == "PN"
    assert len(header) == 9


def test_read_header_rejects_short_header():
    reader = reader_for("PN;Nama;JG\n001;Jane;JG1\n")

    with pytest.raises(InvalidHeaderError, match="insufficient columns"):
        read_header(reader)


def test_read_header_on_empty_file():
    with pytest.raises(ImportStreamError, match="Failed to read header"):
        read_header(reader_for(""))


def test_reader_is_lenient_with_quotes_and_leading_spaces():
    reader = reader_for('001; Jane "JD" Doe;JG1;d;B;;;;\n')

    row = next(reader)

    assert row[0] == "001"
    assert row[1] == 'Jane "JD" Doe'
    assert len(row) == 9


def test_read_rows_drops_blank_lines():
    reader = reader_for("001;a;b;c;d;e;f;g;h\n\n002;a;b;c;d;e;f;g;h\n")

    rows = read_rows(reader)

    assert [row[0] for row in rows] == ["001", "002"]


def test_read_rows_drops_unreadable_lines_without_counting_them():
    rows = [["001"] * 9, ["002"] * 9]
    reader = FlakyReader(rows, bad_positions={1})

    result = read_rows(reader)

    assert [row[0] for row in result] == ["001", "002"]

"""Tests for the end-to-end text-to-Dataset parse."""

import logging

import pytest

pytestmark = pytest.mark.unit

from specscope.ingest import (
    EmptyInputError,
    HeaderLengthMismatchError,
    HeaderOnlyError,
    IngestError,
    NonUniformRowsError,
    NoValidRowsError,
    RowParseError,
)
from specscope.pipeline import DatasetParser, parse_dataset


class TestParseDataset:
    """Accepted inputs."""

    def test_headerless_single_pair(self):
        ds = parse_dataset("1 2\n3 4\n5 6")
        assert ds.header is None
        assert ds.num_pairs == 1
        assert ds.num_cols == 2
        assert ds.rows == (((1.0, 2.0),), ((3.0, 4.0),), ((5.0, 6.0),))

    def test_with_header(self):
        ds = parse_dataset("a b\n1 2\n3 4")
        assert ds.header == ("a", "b")
        assert ds.num_rows == 2
        assert ds.num_pairs == 1

    def test_multiple_pairs(self):
        ds = parse_dataset("re0 im0 re1 im1\n1 2 3 4\n5 6 7 8\n")
        assert ds.num_pairs == 2
        assert ds.rows[1] == ((5.0, 6.0), (7.0, 8.0))

    def test_messy_whitespace(self):
        """Tabs, runs of spaces, CRLF and blank lines are all tolerated."""
        ds = parse_dataset("\n\n  1\t2  \r\n\r\n   3    4\n\n")
        assert ds.rows == (((1.0, 2.0),), ((3.0, 4.0),))

    def test_scientific_notation_and_signs(self):
        ds = parse_dataset("-1.5e-3 +2E2\n.5 -0")
        assert ds.rows[0] == ((-0.0015, 200.0),)
        assert ds.rows[1] == ((0.5, -0.0),)

    def test_single_row(self):
        ds = parse_dataset("1 2")
        assert ds.num_rows == 1

    def test_parse_is_deterministic(self):
        text = "x y\n1 2\n3 4"
        assert parse_dataset(text) == parse_dataset(text)


class TestParseDatasetRejects:
    """Rejected inputs: one typed error, never a partial Dataset."""

    def test_empty(self):
        with pytest.raises(EmptyInputError):
            parse_dataset("   \n  ")

    def test_header_only(self):
        with pytest.raises(HeaderOnlyError):
            parse_dataset("re im\n")

    def test_invalid_row_cites_row_two(self):
        with pytest.raises(RowParseError) as exc_info:
            parse_dataset("1 2\n3 4 5")
        assert exc_info.value.row_indices == (2,)

    def test_row_numbers_exclude_header(self):
        """Row indices count data lines only."""
        with pytest.raises(RowParseError) as exc_info:
            parse_dataset("re im\n1 2\n3 x\n5 6")
        assert exc_info.value.row_indices == (2,)

    def test_all_rows_invalid(self):
        with pytest.raises(NoValidRowsError):
            parse_dataset("re im\nfoo bar\nbaz qux")

    def test_python_only_number_syntax_rejected(self):
        with pytest.raises(NoValidRowsError) as exc_info:
            parse_dataset("1_000 2\n\u0661\u0662 4")
        assert exc_info.value.row_indices == (1,)

    def test_non_uniform(self):
        with pytest.raises(NonUniformRowsError) as exc_info:
            parse_dataset("1 2\n3 4 5 6")
        err = exc_info.value
        assert (err.index, err.found, err.expected) == (2, 4, 2)

    def test_header_length_mismatch(self):
        with pytest.raises(HeaderLengthMismatchError):
            parse_dataset("a b c\n1 2\n3 4")

    def test_odd_rows_rejected_before_pairing(self):
        """Row parsing rejects odd rows first, so pairing never sees them."""
        with pytest.raises(NoValidRowsError):
            parse_dataset("re im\n4 5 6\n7 8 9\n")

    def test_every_failure_is_an_ingest_error(self):
        for text in ["", "h\n", "1 2\n3", "1 2\n3 4 5 6", "a b c\n1 2"]:
            with pytest.raises(IngestError):
                parse_dataset(text)


class TestDatasetParserLogging:

    def test_rejection_logged_as_warning(self, caplog):
        parser = DatasetParser(name="scope")
        with caplog.at_level(logging.WARNING, logger="specscope.pipeline.parser"):
            with pytest.raises(NonUniformRowsError):
                parser.parse("1 2\n3 4 5 6")
        assert "scope: input rejected (NonUniformRowsError)" in caplog.text

    def test_success_logged_as_info(self, caplog):
        with caplog.at_level(logging.INFO, logger="specscope.pipeline.parser"):
            DatasetParser().parse("a b\n1 2")
        assert "parsed 1 rows, 1 pair(s), with header" in caplog.text

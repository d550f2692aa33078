"""Tests for header detection."""

import pytest

pytestmark = pytest.mark.unit

from specscope.ingest import HeaderOnlyError, detect_header


class TestDetectHeader:
    """First line: data or header."""

    def test_numeric_first_line_is_data(self):
        """Even count of finite numbers means no header."""
        split = detect_header(["1 2", "3 4"])
        assert split.header is None
        assert split.data_lines == ["1 2", "3 4"]

    def test_text_first_line_is_header(self):
        split = detect_header(["re im", "1 2", "3 4"])
        assert split.header == ("re", "im")
        assert split.data_lines == ["1 2", "3 4"]

    def test_mixed_first_line_is_header(self):
        """One non-numeric token is enough to make a header."""
        split = detect_header(["time 2", "1 2"])
        assert split.header == ("time", "2")

    def test_odd_numeric_first_line_is_header(self):
        """Numeric but odd count: classified as a header."""
        split = detect_header(["1 2 3", "1 2"])
        assert split.header == ("1", "2", "3")
        assert split.data_lines == ["1 2"]

    def test_single_number_first_line_is_header(self):
        """Fewer than two tokens never looks like data."""
        split = detect_header(["42", "1 2"])
        assert split.header == ("42",)

    def test_non_finite_first_line_is_header(self):
        """inf / nan tokens do not count as data."""
        split = detect_header(["inf nan", "1 2"])
        assert split.header == ("inf", "nan")

    def test_numeric_header_with_even_count_reads_as_data(self):
        """Known limitation: an even numeric header is indistinguishable from data."""
        split = detect_header(["100 200", "1 2"])
        assert split.header is None
        assert len(split.data_lines) == 2

    def test_header_only_fails(self):
        with pytest.raises(HeaderOnlyError, match="no data rows") as exc_info:
            detect_header(["re im"])
        assert exc_info.value.header == ("re", "im")

    def test_python_only_number_syntax_is_header(self):
        """Underscore grouping and non-ASCII digits do not make a data line."""
        split = detect_header(["1_000 2", "1 2"])
        assert split.header == ("1_000", "2")

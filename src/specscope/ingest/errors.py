"""Typed errors raised by the ingest stages.

Every error is recoverable: the caller shows the message and keeps whatever
dataset it already had. Each error carries the structured context (row
index, expected vs found counts) needed to render an actionable message.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


class IngestError(ValueError):
    """Base error for all text-to-dataset failures."""


class EmptyInputError(IngestError):
    """Raised when the input is empty after trimming."""

    def __init__(self, message: str = "No content provided"):
        super().__init__(message)


class NoDataRowsError(IngestError):
    """Raised when no non-empty lines remain after splitting."""

    def __init__(self, message: str = "No valid data rows found"):
        super().__init__(message)


class HeaderOnlyError(IngestError):
    """Raised when a header line is detected but no data lines follow it."""

    def __init__(self, header: Iterable[str]):
        self.header = tuple(header)
        super().__init__(
            f"Header detected ({' '.join(self.header)}) but no data rows follow it"
        )


@dataclass(frozen=True)
class RowIssue:
    """One rejected data line (1-based index within the data lines)."""
    row_index: int
    reason: str

    def __str__(self) -> str:
        return f"Invalid row {self.row_index}: {self.reason}"


class RowParseError(IngestError):
    """Raised after a full scan when one or more data lines are invalid.

    ``issues`` lists every rejected row, in input order.
    """

    def __init__(self, issues: Iterable[RowIssue]):
        self.issues = tuple(issues)
        super().__init__(self._format())

    @property
    def row_indices(self) -> tuple[int, ...]:
        return tuple(issue.row_index for issue in self.issues)

    def _format(self) -> str:
        count = len(self.issues)
        noun = "row" if count == 1 else "rows"
        lines = [f"{count} invalid {noun}:"]
        lines.extend(f"  {issue}" for issue in self.issues)
        return "\n".join(lines)


class NoValidRowsError(RowParseError):
    """Raised when every scanned line is invalid, or no line was scanned."""

    def _format(self) -> str:
        if not self.issues:
            return "No valid data rows found"
        return "No valid data rows found; " + super()._format()


class NonUniformRowsError(IngestError):
    """Raised at the first row whose column count differs from the first row."""

    def __init__(self, index: int, found: int, expected: int):
        self.index = index
        self.found = found
        self.expected = expected
        super().__init__(
            f"Row {index} has different number of columns ({found}), expected {expected}"
        )


class HeaderLengthMismatchError(IngestError):
    """Raised when the header label count differs from the data column count."""

    def __init__(self, header_length: int, num_cols: int):
        self.header_length = header_length
        self.num_cols = num_cols
        super().__init__(
            f"Header has {header_length} labels but data rows have {num_cols} columns"
        )


class OddColumnCountError(IngestError):
    """Raised when the column count cannot be split into (real, imag) pairs."""

    def __init__(self, num_cols: int):
        self.num_cols = num_cols
        super().__init__(
            f"Number of columns must be even for pairing, got {num_cols}"
        )

"""Row parsing with accumulated diagnostics.

Unlike the later stages, row parsing never stops at the first bad line:
every line is checked and all problems are reported together.
"""

import logging
from typing import Optional, Sequence

from specscope.ingest.dataset import NumericRow
from specscope.ingest.errors import NoValidRowsError, RowIssue, RowParseError
from specscope.ingest.tokens import parse_finite, tokenize

logger = logging.getLogger(__name__)


class RowIssueCollector:
    """Collects per-row failures and raises them as one error."""

    def __init__(self):
        self.issues: list[RowIssue] = []

    def add(self, row_index: int, reason: str) -> None:
        self.issues.append(RowIssue(row_index=row_index, reason=reason))

    def __len__(self) -> int:
        return len(self.issues)

    def raise_if_any(self, num_valid: int) -> None:
        """Raise the aggregated error, if anything was collected.

        NoValidRowsError when nothing survived (including an empty scan),
        RowParseError otherwise.
        """
        if num_valid == 0:
            raise NoValidRowsError(self.issues)
        if self.issues:
            raise RowParseError(self.issues)


def parse_row(line: str) -> tuple[Optional[NumericRow], Optional[str]]:
    """Parse one data line.

    Returns
    -------
    tuple
        ``(row, None)`` on success, ``(None, reason)`` on failure.
    """
    tokens = tokenize(line)

    values = []
    for col, token in enumerate(tokens, start=1):
        value = parse_finite(token)
        if value is None:
            return None, f"column {col} ('{token}') is not a finite number"
        values.append(value)

    if len(values) < 2 or len(values) % 2 != 0:
        return None, (
            f"expected even number of finite numbers (>=2), got {len(values)}"
        )

    return tuple(values), None


def parse_rows(data_lines: Sequence[str]) -> list[NumericRow]:
    """Parse every data line into a numeric row.

    Parameters
    ----------
    data_lines : sequence of str
        Lines after header removal.

    Returns
    -------
    list of tuple of float
        One row per line, in input order.

    Raises
    ------
    RowParseError
        If any line is invalid. Lists every invalid line (1-based index).
    NoValidRowsError
        If no line is valid, or `data_lines` is empty.
    """
    collector = RowIssueCollector()
    rows: list[NumericRow] = []

    for index, line in enumerate(data_lines, start=1):
        row, reason = parse_row(line)
        if row is None:
            collector.add(index, reason)
        else:
            rows.append(row)

    if collector:
        logger.warning("Rejected %d of %d data rows", len(collector), len(data_lines))
    collector.raise_if_any(num_valid=len(rows))

    logger.debug("Parsed %d data rows", len(rows))
    return rows

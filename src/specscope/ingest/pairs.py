"""Splitting uniform numeric rows into (real, imaginary) pairs."""

import logging
from typing import NamedTuple, Optional, Sequence

from specscope.ingest.dataset import NumericRow, PairedRow
from specscope.ingest.errors import HeaderLengthMismatchError, OddColumnCountError

logger = logging.getLogger(__name__)


class PairedRows(NamedTuple):
    header: Optional[tuple[str, ...]]
    rows: list[PairedRow]
    num_pairs: int
    num_cols: int


def pair_row(row: NumericRow) -> PairedRow:
    """(row[0], row[1]), (row[2], row[3]), ..."""
    return tuple((row[i], row[i + 1]) for i in range(0, len(row), 2))


def flatten_row(row: PairedRow) -> NumericRow:
    """Inverse of pair_row."""
    return tuple(value for pair in row for value in pair)


def split_pairs(
    header: Optional[Sequence[str]],
    rows: Sequence[NumericRow],
    num_cols: int,
) -> PairedRows:
    """Validate the column layout and pair up every row.

    Checks run in order: header length first, then column parity.

    Raises
    ------
    HeaderLengthMismatchError
        If a header is present and its length is not `num_cols`.
    OddColumnCountError
        If `num_cols` is odd.
    """
    if header is not None and len(header) != num_cols:
        raise HeaderLengthMismatchError(header_length=len(header), num_cols=num_cols)
    if num_cols % 2 != 0:
        raise OddColumnCountError(num_cols)

    num_pairs = num_cols // 2
    paired = [pair_row(row) for row in rows]
    logger.debug("Split %d rows into %d pair(s) each", len(paired), num_pairs)

    return PairedRows(
        header=None if header is None else tuple(header),
        rows=paired,
        num_pairs=num_pairs,
        num_cols=num_cols,
    )

"""Column-count uniformity check (fail-fast)."""

import logging
from typing import NamedTuple, Sequence

from specscope.ingest.dataset import NumericRow
from specscope.ingest.errors import NonUniformRowsError

logger = logging.getLogger(__name__)


class UniformRows(NamedTuple):
    rows: list[NumericRow]
    num_cols: int


def check_uniform(rows: Sequence[NumericRow]) -> UniformRows:
    """Verify every row is as wide as the first one.

    Raises
    ------
    NonUniformRowsError
        At the first row (1-based) whose length differs.
    """
    num_cols = len(rows[0])
    for i, row in enumerate(rows[1:], start=2):
        if len(row) != num_cols:
            raise NonUniformRowsError(index=i, found=len(row), expected=num_cols)

    logger.debug("Rows uniform: %d columns", num_cols)
    return UniformRows(rows=list(rows), num_cols=num_cols)

"""Final assembly of the immutable Dataset."""

import logging
from typing import Optional, Sequence

from specscope.contracts.dataset import assert_dataset
from specscope.ingest.dataset import Dataset, PairedRow

logger = logging.getLogger(__name__)


def assemble_dataset(
    header: Optional[Sequence[str]],
    rows: Sequence[PairedRow],
    num_pairs: int,
    num_cols: int,
) -> Dataset:
    """Freeze the paired rows into a Dataset and check its shape.

    Raises
    ------
    ContractViolation
        If the inputs break a Dataset invariant.
    """
    dataset = Dataset(
        header=None if header is None else tuple(header),
        rows=tuple(tuple(row) for row in rows),
        num_pairs=num_pairs,
        num_cols=num_cols,
    )
    assert_dataset(dataset)

    logger.debug(
        "Dataset assembled: %d rows x %d pair(s), header=%s",
        dataset.num_rows, dataset.num_pairs, dataset.header is not None,
    )
    return dataset

"""Dataset stage contract.

Enforces the guarantee that the assembled Dataset has a consistent shape
before it is handed to spectrum computation or plotting.
"""

import math
from typing import TYPE_CHECKING

from specscope.contracts.base import require

if TYPE_CHECKING:
    from specscope.ingest.dataset import Dataset


def assert_dataset(dataset: "Dataset") -> None:
    """Enforce dataset stage contract.

    Called by assemble_dataset(). The ingest stages already reject every
    malformed input, so a failure here is a bug in one of them.

    Parameters
    ----------
    dataset : Dataset
        Freshly assembled dataset

    Raises
    ------
    ContractViolation
        If any shape invariant is violated
    """
    require(
        len(dataset.rows) > 0,
        "Dataset contract violated: rows is empty"
    )
    require(
        dataset.num_cols == 2 * dataset.num_pairs,
        f"Dataset contract violated: num_cols={dataset.num_cols} but num_pairs={dataset.num_pairs}"
    )
    require(
        dataset.num_pairs >= 1,
        f"Dataset contract violated: num_pairs={dataset.num_pairs}, expected >= 1"
    )

    if dataset.header is not None:
        require(
            len(dataset.header) == dataset.num_cols,
            f"Dataset contract violated: header has {len(dataset.header)} labels, "
            f"expected {dataset.num_cols}"
        )

    for i, row in enumerate(dataset.rows, start=1):
        require(
            len(row) == dataset.num_pairs,
            f"Dataset contract violated: row {i} has {len(row)} pairs, expected {dataset.num_pairs}"
        )
        for pair in row:
            require(
                len(pair) == 2 and all(math.isfinite(v) for v in pair),
                f"Dataset contract violated: row {i} holds malformed pair {pair!r}"
            )

"""Immutable dataset of (real, imaginary) sample pairs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

ReImPair = tuple[float, float]
PairedRow = tuple[ReImPair, ...]
NumericRow = tuple[float, ...]


@dataclass(frozen=True, slots=True)
class Dataset:
    """
    Parsed sample matrix: one row per input line, one pair per channel.

    Row order is sample-time order. Pair ``k`` of every row belongs to the
    same channel, so ``column(k)`` is one complex signal.

    Built only by ``assemble_dataset``; the shape invariants are checked
    there by the dataset contract.
    """
    header: Optional[tuple[str, ...]]
    rows: tuple[PairedRow, ...]
    num_pairs: int
    num_cols: int

    @property
    def num_rows(self) -> int:
        return len(self.rows)

    def column(self, pair_index: int) -> tuple[ReImPair, ...]:
        """Return channel `pair_index` across all rows, in sample-time order."""
        if not 0 <= pair_index < self.num_pairs:
            raise IndexError(
                f"pair_index {pair_index} out of range for {self.num_pairs} pair(s)"
            )
        return tuple(row[pair_index] for row in self.rows)

    def signal(self, pair_index: int) -> np.ndarray:
        """Return channel `pair_index` as a complex128 array."""
        pairs = np.asarray(self.column(pair_index), dtype=np.float64)
        return pairs[:, 0] + 1j * pairs[:, 1]

    def pair_labels(self) -> Optional[tuple[tuple[str, str], ...]]:
        """Header labels grouped per pair, or None when there is no header."""
        if self.header is None:
            return None
        return tuple(
            (self.header[i], self.header[i + 1]) for i in range(0, self.num_cols, 2)
        )

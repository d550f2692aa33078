"""Magnitude spectrum of one dataset channel.

Extracts channel ``pair_index`` from a Dataset, hands its real and
imaginary parts to the transform, then shifts phasors and frequency labels
with the same fftshift so they stay aligned.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd

from specscope.contracts import assert_spectrum
from specscope.ingest.dataset import Dataset, ReImPair
from specscope.spectral.indexing import fftfreq, fftshift
from specscope.spectral.transform import Transform, numpy_transform

__all__ = ['Spectrum', 'PairIndexError', 'compute_spectrum', 'magnitude_db']

logger = logging.getLogger(__name__)

DEFAULT_DB_FLOOR = 1e-12


class PairIndexError(IndexError):
    """Raised when the requested channel does not exist in the dataset."""

    def __init__(self, pair_index: int, num_pairs: int):
        self.pair_index = pair_index
        self.num_pairs = num_pairs
        super().__init__(
            f"Pair index {pair_index} is out of range: dataset has {num_pairs} pair(s)"
        )


@dataclass(frozen=True)
class Spectrum:
    """Shifted (or natural-order) spectrum of one channel.

    ``frequencies[k]``, ``magnitude_db[k]`` and ``phasors[k]`` describe the
    same DFT bin.
    """
    frequencies: tuple[float, ...]
    magnitude_db: tuple[float, ...]
    phasors: tuple[ReImPair, ...]
    sample_rate: float
    pair_index: int
    pair_labels: Optional[tuple[str, str]] = None

    @property
    def num_samples(self) -> int:
        return len(self.frequencies)

    @property
    def channel_name(self) -> str:
        """Header labels of the channel ("re0/im0"), or "pair N" without a header."""
        if self.pair_labels is None:
            return f"pair {self.pair_index}"
        return "/".join(self.pair_labels)

    def points(self) -> list[tuple[float, float]]:
        """(label, value) pairs in plotting order."""
        return list(zip(self.frequencies, self.magnitude_db))

    def to_frame(self) -> pd.DataFrame:
        """One row per bin: frequency_hz, magnitude_db, real, imag."""
        phasors = np.asarray(self.phasors, dtype=np.float64).reshape(-1, 2)
        return pd.DataFrame({
            "frequency_hz": np.asarray(self.frequencies, dtype=np.float64),
            "magnitude_db": np.asarray(self.magnitude_db, dtype=np.float64),
            "real": phasors[:, 0],
            "imag": phasors[:, 1],
        })


def magnitude_db(phasors: list[ReImPair], db_floor: float = DEFAULT_DB_FLOOR) -> list[float]:
    """20*log10(|p| + db_floor) for every phasor."""
    parts = np.asarray(phasors, dtype=np.float64).reshape(-1, 2)
    magnitude = np.hypot(parts[:, 0], parts[:, 1])
    return (20.0 * np.log10(magnitude + db_floor)).tolist()


def compute_spectrum(
    dataset: Dataset,
    pair_index: int = 0,
    sample_rate: float = 1.0,
    *,
    transform: Transform = numpy_transform,
    db_floor: float = DEFAULT_DB_FLOOR,
    centered: bool = True,
) -> Spectrum:
    """Compute the magnitude spectrum of channel `pair_index`.

    Parameters
    ----------
    dataset : Dataset
        Parsed samples; row count is the transform length.
    pair_index : int, optional
        Channel to analyze (default 0).
    sample_rate : float, optional
        Sampling frequency in Hz, must be > 0 (default 1.0).
    transform : callable, optional
        In-place DFT honoring the Transform contract (default numpy.fft).
    db_floor : float, optional
        Added to the magnitude before the log so silent bins stay finite.
    centered : bool, optional
        Apply fftshift to labels and values (default True).

    Returns
    -------
    Spectrum

    Raises
    ------
    PairIndexError
        If `pair_index` is not a channel of `dataset`.
    ValueError
        If `sample_rate` is not a positive finite number.
    """
    if not 0 <= pair_index < dataset.num_pairs:
        raise PairIndexError(pair_index, dataset.num_pairs)
    if not (math.isfinite(sample_rate) and sample_rate > 0):
        raise ValueError(f"sample_rate must be a positive number, got {sample_rate}")

    signal = dataset.signal(pair_index)
    real = signal.real.tolist()
    imag = signal.imag.tolist()

    transform(real, imag)

    phasors: list[ReImPair] = list(zip(real, imag))
    labels = dataset.pair_labels()
    frequencies = fftfreq(len(signal), sample_rate)
    if centered:
        phasors = fftshift(phasors)
        frequencies = fftshift(frequencies)

    spectrum = Spectrum(
        frequencies=tuple(frequencies),
        magnitude_db=tuple(magnitude_db(phasors, db_floor)),
        phasors=tuple(phasors),
        sample_rate=float(sample_rate),
        pair_index=pair_index,
        pair_labels=None if labels is None else labels[pair_index],
    )
    assert_spectrum(spectrum, centered=centered)

    logger.info(
        "Spectrum computed: pair=%d, n=%d, sample_rate=%g Hz",
        pair_index, spectrum.num_samples, sample_rate,
    )
    return spectrum

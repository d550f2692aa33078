"""DFT bin labelling and zero-frequency centering.

Both functions follow numpy.fft.fftfreq / numpy.fft.fftshift bin layout.
"""

from __future__ import annotations

from typing import Sequence, TypeVar

T = TypeVar("T")


def fftfreq(n: int, sample_rate: float) -> list[float]:
    """Frequency (Hz) of each DFT bin in natural order.

    Bin ``i`` maps to ``i`` when ``i < n/2`` and to ``i - n`` otherwise,
    scaled by ``sample_rate / n``. The comparison uses real division, so
    for odd ``n`` the positive half holds ``ceil(n/2)`` bins.

    Parameters
    ----------
    n : int
        Number of samples (>= 0).
    sample_rate : float
        Sampling frequency in Hz.

    Returns
    -------
    list of float
        ``n`` labels. Empty for ``n == 0``.

    Examples
    --------
    >>> fftfreq(5, 100)
    [0.0, 20.0, 40.0, -40.0, -20.0]
    """
    if n == 0:
        return []
    step = sample_rate / n
    return [(i if i < n / 2 else i - n) * step for i in range(n)]


def fftshift(sequence: Sequence[T]) -> list[T]:
    """Rotate a bin-indexed sequence so the zero-frequency bin is centered.

    The sequence is rotated right by ``floor(n/2)`` positions, as
    numpy.fft.fftshift does: the trailing ``floor(n/2)`` bins (the negative
    frequencies) move to the front. For even ``n`` this is
    ``seq[n//2:] + seq[:n//2]``. Use the same call for labels and for
    spectrum values so index ``k`` of both still refers to the same bin.

    Examples
    --------
    >>> fftshift([0.0, 20.0, 40.0, -40.0, -20.0])
    [-40.0, -20.0, 0.0, 20.0, 40.0]
    """
    items = list(sequence)
    half = len(items) // 2
    if half == 0:
        return items
    return items[-half:] + items[:-half]

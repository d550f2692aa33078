"""Adapter for the external DFT routine.

The transform contract: given two equal-length lists ``real`` and ``imag``
holding one signal in sample-time order, overwrite them in place with the
DFT components in natural bin order (bin 0 is DC). Any length >= 1 is
accepted. The numbers are produced by numpy.fft; nothing here computes a
DFT itself.
"""

import logging
from typing import Protocol, runtime_checkable

import numpy as np

logger = logging.getLogger(__name__)


@runtime_checkable
class Transform(Protocol):
    def __call__(self, real: list[float], imag: list[float]) -> None:
        ...


def numpy_transform(real: list[float], imag: list[float]) -> None:
    """In-place DFT of ``real + 1j*imag`` using numpy.fft.fft."""
    if len(real) != len(imag):
        raise ValueError(
            f"real and imag must have equal length, got {len(real)} and {len(imag)}"
        )
    if not real:
        return

    out = np.fft.fft(np.asarray(real, dtype=np.float64) + 1j * np.asarray(imag, dtype=np.float64))
    real[:] = out.real.tolist()
    imag[:] = out.imag.tolist()
    logger.debug("numpy.fft.fft applied to %d samples", len(real))

"""Spectral utilities.

- indexing: fftfreq / fftshift bin labelling
- transform: Adapter for the external DFT routine
- spectrum: Magnitude spectrum of one dataset channel
"""

from specscope.spectral.indexing import fftfreq, fftshift
from specscope.spectral.transform import Transform, numpy_transform
from specscope.spectral.spectrum import (
    Spectrum,
    PairIndexError,
    compute_spectrum,
    magnitude_db,
)

__all__ = [
    "fftfreq",
    "fftshift",
    "Transform",
    "numpy_transform",
    "Spectrum",
    "PairIndexError",
    "compute_spectrum",
    "magnitude_db",
]

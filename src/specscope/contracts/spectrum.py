"""Spectrum stage contract.

Enforces the guarantee that frequency labels and spectrum values stay
aligned bin-for-bin after shifting.
"""

import math
from typing import TYPE_CHECKING

from specscope.contracts.base import require

if TYPE_CHECKING:
    from specscope.spectral.spectrum import Spectrum


def assert_spectrum(spectrum: "Spectrum", centered: bool = True) -> None:
    """Enforce spectrum stage contract.

    Called at the end of compute_spectrum(). We do NOT validate the
    transform's numerical output, only structure and alignment.

    Parameters
    ----------
    spectrum : Spectrum
        Output of compute_spectrum()

    centered : bool, optional
        Whether labels were shifted; centered labels must ascend.

    Raises
    ------
    ContractViolation
        If structural requirements are violated
    """
    n = spectrum.num_samples
    require(
        len(spectrum.frequencies) == n,
        f"Spectrum contract violated: {len(spectrum.frequencies)} labels, expected {n}"
    )
    require(
        len(spectrum.magnitude_db) == n,
        f"Spectrum contract violated: {len(spectrum.magnitude_db)} magnitudes, expected {n}"
    )
    require(
        len(spectrum.phasors) == n,
        f"Spectrum contract violated: {len(spectrum.phasors)} phasors, expected {n}"
    )
    require(
        all(math.isfinite(f) for f in spectrum.frequencies),
        "Spectrum contract violated: non-finite frequency label"
    )

    if centered:
        labels = spectrum.frequencies
        require(
            all(a <= b for a, b in zip(labels, labels[1:])),
            "Spectrum contract violated: centered labels are not ascending"
        )

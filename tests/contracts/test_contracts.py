"""Tests for pipeline contracts.

These tests verify that contracts are enforced at stage boundaries.
They build malformed outputs directly, the way a buggy stage would.
"""

import math

import pytest

pytestmark = pytest.mark.unit

from specscope.contracts import (
    ContractViolation,
    assert_dataset,
    assert_spectrum,
    require,
)
from specscope.ingest import Dataset, assemble_dataset
from specscope.spectral import Spectrum


def _spectrum(frequencies, magnitudes=None, phasors=None):
    n = len(frequencies)
    return Spectrum(
        frequencies=tuple(frequencies),
        magnitude_db=tuple(magnitudes if magnitudes is not None else [0.0] * n),
        phasors=tuple(phasors if phasors is not None else [(0.0, 0.0)] * n),
        sample_rate=1.0,
        pair_index=0,
    )


class TestRequire:

    def test_true_condition_passes(self):
        require(True, "never raised")

    def test_false_condition_raises(self):
        with pytest.raises(ContractViolation, match="boom"):
            require(False, "boom")

    def test_violation_is_runtime_error(self):
        """Pipeline bugs are not ValueErrors, so they never pass as bad input."""
        assert issubclass(ContractViolation, RuntimeError)
        assert not issubclass(ContractViolation, ValueError)


class TestDatasetContract:
    """Test dataset stage contract."""

    def test_passes_with_valid_dataset(self):
        ds = Dataset(header=("a", "b"), rows=(((1.0, 2.0),), ((3.0, 4.0),)), num_pairs=1, num_cols=2)
        # Should not raise
        assert_dataset(ds)

    def test_fails_with_no_rows(self):
        ds = Dataset(header=None, rows=(), num_pairs=1, num_cols=2)
        with pytest.raises(ContractViolation, match="rows is empty"):
            assert_dataset(ds)

    def test_fails_when_cols_not_twice_pairs(self):
        ds = Dataset(header=None, rows=(((1.0, 2.0),),), num_pairs=1, num_cols=3)
        with pytest.raises(ContractViolation, match="num_cols=3"):
            assert_dataset(ds)

    def test_fails_with_zero_pairs(self):
        ds = Dataset(header=None, rows=((),), num_pairs=0, num_cols=0)
        with pytest.raises(ContractViolation, match="num_pairs=0"):
            assert_dataset(ds)

    def test_fails_with_wrong_header_length(self):
        ds = Dataset(header=("a",), rows=(((1.0, 2.0),),), num_pairs=1, num_cols=2)
        with pytest.raises(ContractViolation, match="header has 1 labels"):
            assert_dataset(ds)

    def test_fails_with_short_row(self):
        rows = (((1.0, 2.0), (3.0, 4.0)), ((5.0, 6.0),))
        ds = Dataset(header=None, rows=rows, num_pairs=2, num_cols=4)
        with pytest.raises(ContractViolation, match="row 2 has 1 pairs"):
            assert_dataset(ds)

    def test_fails_with_non_finite_value(self):
        ds = Dataset(header=None, rows=(((1.0, math.nan),),), num_pairs=1, num_cols=2)
        with pytest.raises(ContractViolation, match="malformed pair"):
            assert_dataset(ds)

    def test_assembler_enforces_contract(self):
        """assemble_dataset never returns an inconsistent Dataset."""
        with pytest.raises(ContractViolation):
            assemble_dataset(None, [], 1, 2)


class TestSpectrumContract:
    """Test spectrum stage contract."""

    def test_passes_with_ascending_labels(self):
        assert_spectrum(_spectrum([-0.5, -0.25, 0.0, 0.25]))

    def test_fails_with_misaligned_magnitudes(self):
        spec = _spectrum([0.0, 0.5], magnitudes=[1.0])
        with pytest.raises(ContractViolation, match="1 magnitudes, expected 2"):
            assert_spectrum(spec)

    def test_fails_with_misaligned_phasors(self):
        spec = _spectrum([0.0, 0.5], phasors=[(0.0, 0.0)] * 3)
        with pytest.raises(ContractViolation, match="3 phasors"):
            assert_spectrum(spec)

    def test_fails_with_non_finite_label(self):
        with pytest.raises(ContractViolation, match="non-finite"):
            assert_spectrum(_spectrum([0.0, math.inf]))

    def test_fails_with_unsorted_centered_labels(self):
        with pytest.raises(ContractViolation, match="not ascending"):
            assert_spectrum(_spectrum([0.0, 0.25, -0.5, -0.25]))

    def test_natural_order_labels_allowed_when_not_centered(self):
        assert_spectrum(_spectrum([0.0, 0.25, -0.5, -0.25]), centered=False)

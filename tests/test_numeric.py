"""Unit tests for the domain-safe logarithm helpers."""

from __future__ import annotations

import math
import sys
import warnings
from pathlib import Path

import numpy as np
import pytest

# Ensure 'src' is importable without installing the package
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from axis_scale.utils.numeric import finite_or_nan, log10, log_range_fraction, pow10  # noqa: E402


def test_log10_basic_values() -> None:
    """Test log10 for exact powers of ten."""
    assert log10(1.0) == 0.0
    assert log10(1000.0) == pytest.approx(3.0)
    assert log10(0.01) == pytest.approx(-2.0)


def test_log10_returns_python_float_for_scalars() -> None:
    assert isinstance(log10(10.0), float)
    assert isinstance(log10(10), float)


def test_log10_out_of_domain_does_not_raise_or_warn() -> None:
    """Zero gives -inf and negatives give nan, without numpy warnings."""
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert log10(0.0) == float("-inf")
        assert math.isnan(log10(-1.0))
        assert math.isnan(log10(float("nan")))
        result = log10(np.array([0.0, -5.0, 100.0]))

    assert result[0] == -np.inf
    assert np.isnan(result[1])
    assert result[2] == pytest.approx(2.0)


def test_pow10_inverts_log10() -> None:
    for v in (0.001, 1.0, 42.5, 1e6):
        assert pow10(log10(v)) == pytest.approx(v, rel=1e-12)


def test_pow10_overflow_saturates() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert pow10(400.0) == float("inf")
        assert pow10(float("-inf")) == 0.0


def test_log_range_fraction_midpoint_and_bounds() -> None:
    """Test interpolation in log space between two positive bounds."""
    assert log_range_fraction(1.0, 100.0, 0.5) == pytest.approx(10.0)
    assert log_range_fraction(1.0, 100.0, 0.0) == pytest.approx(1.0)
    assert log_range_fraction(1.0, 100.0, 1.0) == pytest.approx(100.0)
    # Swapped bounds walk the range backwards
    assert log_range_fraction(100.0, 1.0, 0.25) == pytest.approx(10**1.5)


def test_log_range_fraction_extrapolates() -> None:
    assert log_range_fraction(1.0, 100.0, 1.5) == pytest.approx(1000.0)
    assert log_range_fraction(1.0, 100.0, -0.5) == pytest.approx(0.1)


def test_log_range_fraction_with_array() -> None:
    result = log_range_fraction(1.0, 1000.0, np.array([0.0, 1 / 3, 2 / 3, 1.0]))
    np.testing.assert_allclose(result, [1.0, 10.0, 100.0, 1000.0])


def test_finite_or_nan() -> None:
    assert finite_or_nan(1.5) == 1.5
    assert math.isnan(finite_or_nan(float("inf")))
    assert math.isnan(finite_or_nan(float("-inf")))

    result = finite_or_nan(np.array([1.0, np.inf, -np.inf, np.nan]))
    assert result[0] == 1.0
    assert np.isnan(result[1:]).all()

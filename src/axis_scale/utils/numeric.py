"""Domain-safe logarithm helpers shared by the axis scale transforms.

All helpers accept a Python number or a numpy array. Scalars come back as
plain ``float``; arrays come back as arrays of the same shape. Out-of-domain
input never raises: ``log10(0)`` is ``-inf`` and ``log10`` of a negative
number is ``nan``.
"""

from typing import overload

import numpy as np

LOG_SCALE: float = 10.0


def _as_output(result: np.ndarray | np.floating) -> float | np.ndarray:
    if np.ndim(result) == 0:
        return float(result)
    return result


@overload
def log10(x: float) -> float: ...
@overload
def log10(x: np.ndarray) -> np.ndarray: ...
def log10(x: float | np.ndarray) -> float | np.ndarray:
    """Base-10 logarithm that yields ``-inf``/``nan`` instead of raising or warning.

    Example:
        >>> log10(1000.0)
        3.0
        >>> log10(0.0)
        -inf
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return _as_output(np.log10(x))


@overload
def pow10(exponent: float) -> float: ...
@overload
def pow10(exponent: np.ndarray) -> np.ndarray: ...
def pow10(exponent: float | np.ndarray) -> float | np.ndarray:
    """Raise 10 to ``exponent``; overflow saturates to ``inf``."""
    with np.errstate(over="ignore", invalid="ignore"):
        return _as_output(np.power(LOG_SCALE, exponent))


def log_range_fraction(
    range_start: float, range_end: float, frac: float | np.ndarray
) -> float | np.ndarray:
    """Return the data value at fraction ``frac`` between two positive bounds in log space.

    ``frac`` is not clamped, so values outside [0, 1] extrapolate past the bounds.

    Args:
        range_start: Bound that ``frac == 0`` maps to
        range_end: Bound that ``frac == 1`` maps to
        frac: Interpolation fraction(s)

    Returns:
        Interpolated data value(s), same type as ``frac``

    Example:
        >>> log_range_fraction(1.0, 100.0, 0.5)
        10.0
    """
    log_start = log10(range_start)
    log_end = log10(range_end)
    with np.errstate(invalid="ignore"):
        exponent = log_start + (frac * (log_end - log_start))
    return pow10(exponent)


def finite_or_nan(x: float | np.ndarray) -> float | np.ndarray:
    """Replace ``+inf``/``-inf`` by ``nan`` so callers have a single undefined marker."""
    if np.ndim(x) == 0:
        return float(x) if np.isfinite(x) else float("nan")
    return np.where(np.isfinite(x), x, np.nan)

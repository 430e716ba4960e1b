"""Linear and logarithmic axis scaling between data values and relative positions.

``AxisScale`` translates between raw data-space values on a chart axis and the
relative positions used for layout, hit-testing and zoom/pan. Whether an axis
is logarithmic is asked from the owning chart on every call, so the strategy
itself carries no per-axis state.

Invalid input never raises. Out-of-domain logarithms propagate as ``nan`` or
``-inf``, and ``range_error`` reports ranges the logarithmic transform cannot
represent.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Hashable

import numpy as np

from axis_scale.model import LogScaleSource
from axis_scale.utils.numeric import finite_or_nan, log10, log_range_fraction, pow10


@dataclass(frozen=True)
class AxisScale:
    """Default axis scaling for charts with linear and logarithmic axes.

    Args:
        source: Chart (or stand-in) answering ``is_log_scale(axis)``
    """

    source: LogScaleSource

    def _is_log(self, axis: Hashable) -> bool:
        return bool(self.source.is_log_scale(axis))

    def data_point_to_scaled_value(self, axis: Hashable, v: float | np.ndarray) -> float | np.ndarray:
        """Convert a data value to its scaled equivalent, ignoring any range.

        Linear axes return ``v`` unchanged, logarithmic axes return ``log10(v)``.
        """
        if not self._is_log(axis):
            return v
        return log10(v)

    def scaled_value_to_data_point(self, axis: Hashable, sv: float | np.ndarray) -> float | np.ndarray:
        """Convert a scaled value back to the original data value."""
        if not self._is_log(axis):
            return sv
        return pow10(sv)

    def relative_scaled_value_to_data_point(
        self,
        axis: Hashable,
        rsv: float | np.ndarray,
        range_start: float,
        range_end: float,
        invert: bool = False,
    ) -> float | np.ndarray:
        """Convert a relative position on the axis back to a data value in the given range.

        Args:
            axis: Axis the value belongs to
            rsv: Relative scale value; 0 and 1 are the range bounds, values outside are extrapolated
            range_start: Starting data value of the axis range
            range_end: Ending data value of the axis range
            invert: If True, ``rsv == 0`` represents ``range_end`` instead of ``range_start``

        Returns:
            Data value(s) at the given relative position(s)
        """
        if not self._is_log(axis):
            range_width = range_end - range_start
            if invert:
                return range_end - (rsv * range_width)
            return range_start + (rsv * range_width)

        if invert:
            return log_range_fraction(range_end, range_start, rsv)
        return log_range_fraction(range_start, range_end, rsv)

    def data_point_to_relative_scaled_value(
        self,
        axis: Hashable,
        value: float | np.ndarray,
        range_start: float,
        range_end: float,
        invert: bool = False,
    ) -> float | np.ndarray:
        """Convert a data value in the given range to its relative position on the axis.

        A zero-width range is treated as width 1.0. On logarithmic axes any
        non-finite result (for example ``value <= 0``) is reported as ``nan``.

        Args:
            axis: Axis the value belongs to
            value: Data value(s) to convert
            range_start: Starting data value of the axis range
            range_end: Ending data value of the axis range
            invert: If True, relative position 0 represents ``range_end`` instead of ``range_start``

        Returns:
            Relative position(s), nominally within [0, 1]
        """
        if not self._is_log(axis):
            range_width = range_end - range_start
            if range_width == 0:
                range_width = 1.0
            scaled_value = (value - range_start) / range_width
        else:
            log_range_start = log10(range_start)
            log_range_width = log10(range_end) - log_range_start
            if log_range_width == 0:
                log_range_width = 1.0
            with np.errstate(invalid="ignore", divide="ignore"):
                scaled_value = finite_or_nan((log10(value) - log_range_start) / log_range_width)

        if invert:
            return 1.0 - scaled_value
        return scaled_value

    def range_error(self, axis: Hashable, range_start: float, range_end: float) -> bool:
        """Return True if the range cannot be represented on this axis.

        Linear ranges are always representable. Logarithmic ranges fail when
        either bound is non-positive, since their logarithms are not finite.
        """
        if not self._is_log(axis):
            return False

        log_range_width = log10(float(range_end)) - log10(float(range_start))
        if log_range_width == 0:
            log_range_width = 1.0
        log_scale = 1.0 / log_range_width

        return not (math.isfinite(log_scale) and math.isfinite(log_range_width))

"""
axis_scale

Axis scaling for interactive charts: converts between data values and
relative axis positions for linear and logarithmic axes.

Public API:
- AxisScale: Default scaling strategy with the five conversion/check operations.
- ScaleKind: Closed set of supported scale kinds.
- LogScaleSource: Protocol the owning chart implements (is_log_scale(axis)).
- AxisScaleMap: Immutable axis -> ScaleKind mapping implementing LogScaleSource.
- log10, log_range_fraction: Domain-safe logarithm helpers.
- load_config, get_scale_kind_for_axis: YAML configuration of per-axis scale kinds.
"""

from __future__ import annotations

from axis_scale.config import get_scale_kind_for_axis, load_config
from axis_scale.model import AxisScaleMap, LogScaleSource, ScaleKind
from axis_scale.scale import AxisScale
from axis_scale.utils.numeric import log10, log_range_fraction

__version__ = "0.1.0"

__all__ = [
    "AxisScale",
    "AxisScaleMap",
    "LogScaleSource",
    "ScaleKind",
    "get_scale_kind_for_axis",
    "load_config",
    "log10",
    "log_range_fraction",
]

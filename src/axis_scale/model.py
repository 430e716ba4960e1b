from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Hashable, Mapping, Protocol, cast, runtime_checkable

_ALIASES = {
    "lin": "linear",
    "log": "logarithmic",
    "logscale": "logarithmic",
}


class ScaleKind(str, Enum):
    """
    Supported axis scale kinds.

    - LINEAR: Data values map proportionally onto the axis.
    - LOGARITHMIC: Base-10 logarithms of data values map proportionally onto the axis.
    """

    LINEAR = "linear"
    LOGARITHMIC = "logarithmic"

    @classmethod
    def from_string(cls, value: str) -> ScaleKind:
        """
        Convert a user/config string to a ScaleKind (case-insensitive).

        Accepts the aliases "lin", "log" and "logscale" in addition to the member values.

        Raises:
            ValueError: If the string does not name a supported scale kind.
        """
        normalized = value.strip().lower()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls(normalized)
        except ValueError as exc:
            msg = f"Invalid scale kind '{value}'. Supported: linear, logarithmic."
            raise ValueError(msg) from exc


@runtime_checkable
class LogScaleSource(Protocol):
    """Read-only view of a chart's per-axis configuration."""

    def is_log_scale(self, axis: Hashable) -> bool: ...


@dataclass(frozen=True)
class AxisScaleMap:
    """
    Immutable axis -> ScaleKind mapping that satisfies LogScaleSource.

    Axes missing from ``kinds`` use ``default``.
    """

    kinds: Mapping[Hashable, ScaleKind] = field(default_factory=dict)
    default: ScaleKind = ScaleKind.LINEAR

    def scale_kind(self, axis: Hashable) -> ScaleKind:
        return self.kinds.get(axis, self.default)

    def is_log_scale(self, axis: Hashable) -> bool:
        return self.scale_kind(axis) is ScaleKind.LOGARITHMIC

    def with_kind(self, axis: Hashable, kind: ScaleKind) -> AxisScaleMap:
        """Return a copy where ``axis`` uses ``kind``."""
        kinds = dict(self.kinds)
        kinds[axis] = kind
        return replace(self, kinds=kinds)

    @classmethod
    def from_config(cls, cfg: Mapping[str, object]) -> AxisScaleMap:
        """Build the map from the 'axes' and 'default_scale' entries of a loaded config."""
        axes_obj = cfg.get("axes", {})
        axes = cast(Mapping[Hashable, object], axes_obj) if isinstance(axes_obj, Mapping) else {}
        kinds = {axis: ScaleKind.from_string(str(kind)) for axis, kind in axes.items()}
        default = ScaleKind.from_string(str(cfg.get("default_scale", ScaleKind.LINEAR.value)))
        return cls(kinds=kinds, default=default)

from __future__ import annotations

import os
from pathlib import Path
from typing import Hashable, TypedDict, cast

import yaml  # type: ignore

from axis_scale.model import ScaleKind
from axis_scale.utils.logger import get_logger

_logger = get_logger("axis_scale.config")

_CWD_CONFIG_NAME = "axis_scale.yaml"
_HOME_CONFIG_PATH = "~/.config/axis_scale/config.yaml"


class CliConfig(TypedDict):
    log_level: str


class AxisScaleConfig(TypedDict):
    axes: dict[str, str]
    default_scale: str
    cli: CliConfig


def _default_config() -> AxisScaleConfig:
    """Return the built-in defaults."""
    return {
        "axes": {
            "x": ScaleKind.LINEAR.value,
            "y": ScaleKind.LINEAR.value,
            "y2": ScaleKind.LINEAR.value,
        },
        "default_scale": ScaleKind.LINEAR.value,
        "cli": {
            "log_level": "INFO",
        },
    }


def _deep_merge(base: dict[str, object], override: dict[str, object]) -> dict[str, object]:
    """
    Deep-merge two dictionaries. 'override' wins on conflicts.

    Lists and scalars are replaced; nested dicts are merged recursively.
    """
    out = dict(base)
    for k, v in override.items():
        existing = out.get(k)
        if isinstance(v, dict) and isinstance(existing, dict):
            out[k] = _deep_merge(cast(dict[str, object], existing), cast(dict[str, object], v))
        else:
            out[k] = v
    return out


def _resolve_config_path(path: str | Path | None) -> Path | None:
    """
    Determine the config file path. Search order:
      1. Path supplied explicitly (e.g. via --config).
      2. Current working directory: ./axis_scale.yaml
      3. ~/.config/axis_scale/config.yaml
    """
    if path is not None:
        p = Path(os.path.expandvars(str(path))).expanduser()
        return p if p.is_file() else None

    cwd_path = Path.cwd() / _CWD_CONFIG_NAME
    if cwd_path.is_file():
        return cwd_path

    home_path = Path(_HOME_CONFIG_PATH).expanduser()
    if home_path.is_file():
        return home_path

    return None


def _load_yaml_file(file_path: Path) -> dict[str, object]:
    """Load a YAML file and return a top-level mapping; raise RuntimeError on I/O or parse errors."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Failed to read config file: {file_path}"
        raise RuntimeError(msg) from exc

    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        msg = f"YAML parse error in config: {file_path}"
        raise RuntimeError(msg) from exc

    if not isinstance(data, dict):
        msg = f"Config file must contain a mapping at the top level: {file_path}"
        raise RuntimeError(msg)
    return data


def _normalize_scales(cfg: dict[str, object]) -> dict[str, object]:
    """Validate scale kind strings and rewrite aliases to canonical names; raise RuntimeError on invalid entries."""
    axes_obj = cfg.get("axes", {})
    if axes_obj is None:
        axes_obj = {}
    if not isinstance(axes_obj, dict):
        msg = "Config 'axes' section must be a mapping of {axis: scale_kind}."
        raise RuntimeError(msg)

    invalid: list[str] = []
    axes: dict[Hashable, str] = {}
    for axis, kind in axes_obj.items():
        try:
            axes[axis] = ScaleKind.from_string(str(kind)).value
        except ValueError:
            invalid.append(f"{axis}={kind!r}")

    default_obj = cfg.get("default_scale", ScaleKind.LINEAR.value)
    try:
        default_scale = ScaleKind.from_string(str(default_obj)).value
    except ValueError:
        invalid.append(f"default_scale={default_obj!r}")
        default_scale = ScaleKind.LINEAR.value

    if invalid:
        joined = ", ".join(invalid)
        msg = "Invalid scale kinds in config: " + joined + ". Supported: linear, logarithmic."
        raise RuntimeError(msg)

    out = dict(cfg)
    out["axes"] = axes
    out["default_scale"] = default_scale
    return out


# Cache of the last loaded configuration for get_scale_kind_for_axis().
_last_loaded_config: dict[str, object] | None = None


def load_config(path: str | Path | None = None, overrides: dict[str, object] | None = None) -> dict[str, object]:
    """
    Load the axis scale configuration.

    Merges:
      - Built-in defaults
      - User YAML config (if found by search order or explicit path)
      - Optional overrides (highest precedence)

    Args:
        path: Optional explicit path to a YAML config file.
        overrides: Optional dictionary of values overriding both defaults and file values.

    Returns:
        A merged configuration dictionary with keys: 'axes', 'default_scale', 'cli'.

    Raises:
        RuntimeError: If the file cannot be read or parsed, or names an unknown scale kind.
    """
    file_path = _resolve_config_path(path)

    merged = cast(dict[str, object], _default_config())
    if file_path is not None:
        merged = _deep_merge(merged, _load_yaml_file(file_path))

    if overrides:
        merged = _deep_merge(merged, overrides)

    merged = _normalize_scales(merged)

    global _last_loaded_config
    _last_loaded_config = merged
    _logger.debug("Configuration loaded. Using file: %s", file_path)
    return merged


def get_scale_kind_for_axis(axis: Hashable) -> ScaleKind:
    """
    Resolve the configured ScaleKind for an axis.

    If no config has been loaded yet, defaults are used. Axes without an entry
    fall back to 'default_scale'.
    """
    if _last_loaded_config is not None:
        cfg_map: dict[str, object] = _last_loaded_config
    else:
        cfg_map = cast(dict[str, object], _default_config())
    axes_obj = cfg_map.get("axes", {})
    axes = cast(dict[Hashable, object], axes_obj) if isinstance(axes_obj, dict) else {}
    kind = axes.get(axis, cfg_map.get("default_scale", ScaleKind.LINEAR.value))
    return ScaleKind.from_string(str(kind))

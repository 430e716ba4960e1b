from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from axis_scale.config import load_config
from axis_scale.model import AxisScaleMap, ScaleKind
from axis_scale.scale import AxisScale
from axis_scale.utils.logger import setup_logger


def _add_range_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--range",
        dest="data_range",
        nargs=2,
        type=float,
        metavar=("START", "END"),
        required=True,
        help="Data range of the axis",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="axis-scale", description="Convert between data values and axis positions")
    parser.add_argument("--config", help="Path to YAML config file", default=None)
    parser.add_argument("--axis", help="Axis to convert for (default: y)", default="y")
    parser.add_argument(
        "--scale",
        help="Scale kind for the axis (overrides config)",
        choices=[kind.value for kind in ScaleKind],
        default=None,
    )

    sub = parser.add_subparsers(dest="command", required=True)

    to_relative = sub.add_parser("to-relative", help="Data values to relative axis positions")
    to_relative.add_argument("values", nargs="+", type=float, help="Data values")
    _add_range_argument(to_relative)
    to_relative.add_argument("--invert", action="store_true", help="Axis is flipped")

    to_data = sub.add_parser("to-data", help="Relative axis positions to data values")
    to_data.add_argument("values", nargs="+", type=float, help="Relative positions")
    _add_range_argument(to_data)
    to_data.add_argument("--invert", action="store_true", help="Axis is flipped")

    check = sub.add_parser("check", help="Check whether a range can be represented on the axis")
    _add_range_argument(check)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        cfg = load_config(path=args.config)
        axes = AxisScaleMap.from_config(cfg)
    except (RuntimeError, ValueError) as exc:
        sys.stderr.write(f"{exc}\n")
        return 2

    cli_cfg = cfg.get("cli", {})
    level_name = str(cli_cfg.get("log_level", "INFO")) if isinstance(cli_cfg, dict) else "INFO"
    logger = setup_logger("axis_scale", level=getattr(logging, level_name.upper(), logging.INFO))

    if args.scale is not None:
        axes = axes.with_kind(args.axis, ScaleKind.from_string(args.scale))
    logger.debug("Axis %s uses %s scale", args.axis, axes.scale_kind(args.axis).value)

    scale = AxisScale(axes)
    start, end = args.data_range

    if args.command == "check":
        if scale.range_error(args.axis, start, end):
            sys.stderr.write(f"Range [{start}, {end}] cannot be represented on axis {args.axis}\n")
            return 1
        print("ok")
        return 0

    for value in args.values:
        if args.command == "to-relative":
            result = scale.data_point_to_relative_scaled_value(args.axis, value, start, end, args.invert)
        else:
            result = scale.relative_scaled_value_to_data_point(args.axis, value, start, end, args.invert)
        print(repr(float(result)))
    return 0


if __name__ == "__main__":
    sys.exit(main())

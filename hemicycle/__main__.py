import argparse
import logging
import math
import sys
from pathlib import Path
from typing import Optional, Sequence

from hemicycle import (
    ChartStyle,
    ConfigurationError,
    HemicycleLayout,
    RowConnectedSeatingPlan,
    SeatingPlan,
    generate_seating_plan_svg,
    parse_groups,
    total_seats,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _hex_color(value: str) -> int:
    text = value.strip().lstrip("#")
    if len(text) != 6:
        raise argparse.ArgumentTypeError(f"expected six hex digits, got {value!r}")
    try:
        return int(text, 16)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected six hex digits, got {value!r}") from exc


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Draw hemicycle seating charts as SVG")
    parser.add_argument(
        "groups",
        help="Groups as size.RRGGBB[.name[.character]], comma separated; size may be lower-median[-total]",
    )
    parser.add_argument(
        "--angle",
        type=float,
        default=180.0,
        help="Angle of the hemicycle in degrees (default: 180)",
    )
    parser.add_argument(
        "--radius-ratio",
        type=float,
        default=1.0 / 3.0,
        help="Ratio between the inner and the outer radius (default: 1/3)",
    )
    parser.add_argument(
        "--row-connected",
        action="store_true",
        help="Keep every group on connected rows where possible",
    )
    parser.add_argument("--font-color", type=_hex_color, help="Font color as RRGGBB")
    parser.add_argument("--font-family", help="Font family for all text")
    parser.add_argument("--background-color", type=_hex_color, help="Background color as RRGGBB")
    parser.add_argument("--title", help="Chart title")
    parser.add_argument("--subtitle", help="Chart subtitle")
    parser.add_argument("--copyright-notice", help="Copyright holder shown in the margin")
    parser.add_argument(
        "--legend",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Force the legend on or off (default: shown when a group has a name)",
    )
    parser.add_argument(
        "--rotate-letters",
        action="store_true",
        help="Rotate group characters towards the centre of the hemicycle",
    )
    parser.add_argument("--output", help="Write the SVG document to this path instead of stdout")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    try:
        groups = parse_groups(args.groups)
    except SyntaxError as exc:
        logger.error("Invalid group definition: %s", exc)
        raise SystemExit(1)
    logger.info("Parsed %d group(s) with %d seat(s)", len(groups), total_seats(groups))

    try:
        layout = HemicycleLayout(total_seats(groups), math.pi * (args.angle / 180.0), args.radius_ratio)
    except ConfigurationError as exc:
        logger.error("Invalid hemicycle configuration: %s", exc)
        raise SystemExit(1)

    if args.row_connected:
        plan = RowConnectedSeatingPlan(layout.seat_positions, groups)
    else:
        plan = SeatingPlan(groups)

    style = ChartStyle(
        font_color=args.font_color,
        font_family=args.font_family,
        background_color=args.background_color,
        title=args.title,
        subtitle=args.subtitle,
        copyright_notice=args.copyright_notice,
        display_legend=args.legend,
        rotate_letters=args.rotate_letters,
    )
    document = generate_seating_plan_svg(plan, layout, style)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing SVG document to %s", output_path)
        output_path.write_text(document + "\n", encoding="utf-8")
    else:
        print(document)


if __name__ == "__main__":
    main(sys.argv[1:])

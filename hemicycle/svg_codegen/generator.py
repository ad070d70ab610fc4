"""SVG renderer for hemicycle layouts and seating plans."""

from __future__ import annotations

import datetime
import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from ..config import (
    SEAT_RADIUS_ROW_WIDTH_RATIO,
    VIEW_BOX_TO_SVG_FACTOR,
    ChartStyle,
    get_chart_style,
)
from ..groups import ParliamentaryGroup
from ..layout import HemicycleLayout, SeatPosition
from ..seating import RowConnectedSeatingPlan, SeatingPlan, SeatStatus
from .utils import element, format_color, format_float, render_attributes

logger = logging.getLogger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
WHITE = 0xFFFFFF
BLACK = 0x000000

# Moves text down so that it looks vertically centred on its anchor.
FONT_SIZE_FACTOR_TO_CENTER_VERTICALLY = 1.0 / 3.0
COPYRIGHT_NOTICE_ROTATION_ANGLE = 270.0
PRODUCED_BY = "chart produced using hemicycle"

TITLE_BAND_FACTOR = 3.0
SUBTITLE_BAND_FACTOR = 2.0
LEGEND_BAND_FACTOR = 3.0

STATUS_OPACITY: Dict[SeatStatus, Optional[float]] = {
    SeatStatus.CERTAIN: None,
    SeatStatus.LIKELY: 0.5,
    SeatStatus.UNLIKELY: 0.2,
}

Plan = Union[SeatingPlan, RowConnectedSeatingPlan]


@dataclass
class CanvasGeometry:
    """View box of a rendered chart, in layout units (y axis pointing down)."""

    min_x: float
    min_y: float
    width: float
    height: float
    seat_radius: float
    chamber_top: float
    title_band: float
    subtitle_band: float

    def view_box(self) -> str:
        return " ".join(format_float(v) for v in (self.min_x, self.min_y, self.width, self.height))


def _svg_open(geometry: CanvasGeometry) -> str:
    attrs = {
        "width": geometry.width * VIEW_BOX_TO_SVG_FACTOR,
        "height": geometry.height * VIEW_BOX_TO_SVG_FACTOR,
        "viewBox": geometry.view_box(),
        "xmlns": SVG_NAMESPACE,
    }
    return f"<svg {render_attributes(attrs)}>"


def _chamber_top(layout: HemicycleLayout) -> float:
    return layout.row_radii[-1] + layout.row_width / 2.0


def _seat_radius(layout: HemicycleLayout) -> float:
    return layout.row_width * SEAT_RADIUS_ROW_WIDTH_RATIO


def _text_attrs(style: ChartStyle, fill: int, font_size: float, anchor: str, x: float, y: float) -> Dict[str, object]:
    return {
        "fill": format_color(fill),
        "font-family": style.font_family,
        "font-size": font_size,
        "text-anchor": anchor,
        "x": x,
        "y": y,
    }


def _size_label(group: ParliamentaryGroup) -> str:
    return f"{group.name or ''} ({group.size})".strip()


def compute_canvas(layout: HemicycleLayout, style: ChartStyle, display_legend: bool) -> CanvasGeometry:
    seat_radius = _seat_radius(layout)
    chamber_top = _chamber_top(layout)
    title_band = seat_radius * TITLE_BAND_FACTOR if style.title else 0.0
    subtitle_band = seat_radius * SUBTITLE_BAND_FACTOR if style.subtitle else 0.0
    legend_band = seat_radius * LEGEND_BAND_FACTOR if display_legend else 0.0
    return CanvasGeometry(
        min_x=-layout.width / 2.0,
        min_y=-chamber_top - title_band - subtitle_band,
        width=layout.width,
        height=title_band + subtitle_band + layout.height + legend_band,
        seat_radius=seat_radius,
        chamber_top=chamber_top,
        title_band=title_band,
        subtitle_band=subtitle_band,
    )


def _render_seat(
    position: SeatPosition,
    group: ParliamentaryGroup,
    status: SeatStatus,
    seat_radius: float,
    style: ChartStyle,
) -> List[str]:
    x = position.x
    y = -position.y
    opacity = STATUS_OPACITY[status]
    lines = [
        element("circle", {"cx": x, "cy": y, "r": seat_radius, "fill": format_color(group.color), "fill-opacity": opacity})
    ]
    extra = len(group.colors)
    for idx, color in enumerate(group.colors[1:], start=1):
        # Further colours are drawn as concentric inner discs.
        lines.append(
            element(
                "circle",
                {
                    "cx": x,
                    "cy": y,
                    "r": seat_radius * (1.0 - idx / extra),
                    "fill": format_color(color),
                    "fill-opacity": opacity,
                },
            )
        )
    if group.character:
        attrs = _text_attrs(
            style,
            WHITE,
            seat_radius,
            "middle",
            x,
            y + seat_radius * FONT_SIZE_FACTOR_TO_CENTER_VERTICALLY,
        )
        if style.rotate_letters:
            degrees = 180.0 * (math.pi / 2.0 - position.angle) / math.pi
            attrs["transform"] = f"rotate({format_float(degrees)} {format_float(x)},{format_float(y)})"
        lines.append(element("text", attrs, group.character))
    return lines


def _render_legend(
    groups: List[ParliamentaryGroup],
    geometry: CanvasGeometry,
    layout: HemicycleLayout,
    style: ChartStyle,
) -> List[str]:
    lines: List[str] = []
    if not groups:
        return lines
    r = geometry.seat_radius
    y = -geometry.chamber_top + layout.height + r * 2.0
    text_y = y + r * FONT_SIZE_FACTOR_TO_CENTER_VERTICALLY
    font_color = BLACK if style.font_color is None else style.font_color
    for idx, group in enumerate(groups):
        x = geometry.min_x + r + geometry.width * idx / len(groups)
        lines.append(element("circle", {"cx": x, "cy": y, "r": r, "fill": format_color(group.color)}))
        if group.character:
            lines.append(element("text", _text_attrs(style, WHITE, r, "middle", x, text_y), group.character))
        lines.append(element("text", _text_attrs(style, font_color, r, "start", x + 1.5 * r, text_y), _size_label(group)))
    return lines


def _render_titles(geometry: CanvasGeometry, style: ChartStyle) -> List[str]:
    lines: List[str] = []
    font_color = BLACK if style.font_color is None else style.font_color
    r = geometry.seat_radius
    if style.title:
        y = geometry.min_y + geometry.title_band * 2.0 / 3.0
        lines.append(element("text", _text_attrs(style, font_color, r * 2.0, "middle", 0.0, y), style.title))
    if style.subtitle:
        y = geometry.min_y + geometry.title_band + geometry.subtitle_band * 2.0 / 3.0
        lines.append(element("text", _text_attrs(style, font_color, r * 1.25, "middle", 0.0, y), style.subtitle))
    return lines


def copyright_text(notice: Optional[str], year: Optional[int] = None) -> str:
    if notice is None:
        return "Chart produced using hemicycle"
    year = year if year is not None else datetime.date.today().year
    return f"© {year} {notice}, {PRODUCED_BY}"


def _render_copyright(geometry: CanvasGeometry, style: ChartStyle) -> str:
    x = geometry.min_x + geometry.width
    y = geometry.min_y
    size = max(geometry.width, geometry.height)
    attrs = _text_attrs(
        style,
        BLACK if style.font_color is None else style.font_color,
        size / 100.0,
        "end",
        x - size / 200.0,
        y - size / 200.0,
    )
    attrs["transform"] = (
        f"rotate({format_float(COPYRIGHT_NOTICE_ROTATION_ANGLE)} {format_float(x)},{format_float(y)})"
    )
    return element("text", attrs, copyright_text(style.copyright_notice))


def generate_layout_svg(layout: HemicycleLayout) -> str:
    """Render the bare seat positions of ``layout``."""

    geometry = compute_canvas(layout, ChartStyle(), display_legend=False)
    lines = [_svg_open(geometry)]
    for position in layout.seat_positions:
        lines.append(element("circle", {"cx": position.x, "cy": -position.y, "r": geometry.seat_radius}))
    lines.append("</svg>")
    return "\n".join(lines)


def generate_seating_plan_svg(
    plan: Plan,
    layout: Optional[HemicycleLayout] = None,
    style: Optional[ChartStyle] = None,
) -> str:
    """Render ``plan`` seat by seat over ``layout`` (default: a half circle)."""

    style = style if style is not None else get_chart_style()
    if layout is None:
        layout = HemicycleLayout(plan.number_of_seats)
    if layout.number_of_seats != plan.number_of_seats:
        raise ValueError(
            f"layout has {layout.number_of_seats} seat(s), plan has {plan.number_of_seats}"
        )
    groups = list(plan.parliamentary_groups)
    display_legend = style.display_legend
    if display_legend is None:
        display_legend = any(group.name for group in groups)

    geometry = compute_canvas(layout, style, display_legend)
    logger.info(
        "Rendering seating plan: %d seat(s), legend=%s, view box=%s",
        plan.number_of_seats,
        display_legend,
        geometry.view_box(),
    )

    lines = [_svg_open(geometry)]
    if style.background_color is not None:
        lines.append(
            element(
                "rect",
                {
                    "x": geometry.min_x,
                    "y": geometry.min_y,
                    "width": geometry.width,
                    "height": geometry.height,
                    "fill": format_color(style.background_color),
                },
            )
        )
    lines.extend(_render_titles(geometry, style))
    for seat_number, position in enumerate(layout.seat_positions):
        lines.extend(
            _render_seat(
                position,
                plan.group_at_seat(seat_number),
                plan.seat_status(seat_number),
                geometry.seat_radius,
                style,
            )
        )
    if display_legend:
        lines.extend(_render_legend(groups, geometry, layout, style))
    lines.append(_render_copyright(geometry, style))
    lines.append("</svg>")
    return "\n".join(lines)

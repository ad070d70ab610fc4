"""Layout constants and the default chart style."""

from __future__ import annotations

import copy
import math
from dataclasses import dataclass
from typing import Optional

DEFAULT_ANGLE = math.pi
DEFAULT_RADIUS_RATIO = 1.0 / 3.0

# Angles closer than this are treated as the same direction when ordering seats.
ANGLE_DELTA = 0.000001

SEAT_RADIUS_ROW_WIDTH_RATIO = 0.45
VIEW_BOX_TO_SVG_FACTOR = 1000.0


@dataclass
class ChartStyle:
    """Presentation options for the SVG code generator."""

    font_color: Optional[int] = None
    font_family: Optional[str] = None
    background_color: Optional[int] = None
    title: Optional[str] = None
    subtitle: Optional[str] = None
    copyright_notice: Optional[str] = None
    # None means: show the legend when at least one group has a name.
    display_legend: Optional[bool] = None
    rotate_letters: bool = False


_CHART_STYLE = ChartStyle()


def get_chart_style() -> ChartStyle:
    return copy.deepcopy(_CHART_STYLE)


def set_chart_style(style: ChartStyle) -> None:
    global _CHART_STYLE
    _CHART_STYLE = copy.deepcopy(style)

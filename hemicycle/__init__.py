from .groups import GroupSize, GroupSizeKind, ParliamentaryGroup, total_seats
from .layout import ConfigurationError, HemicycleLayout, SeatPosition
from .ordering import compare_seat_positions, seat_ordering_key, sort_seat_positions, south_distance
from .seating import RowConnectedSeatingPlan, SeatingPlan, SeatStatus
from .parser import parse_groups
from .printer import format_group, print_groups
from .config import ChartStyle, get_chart_style, set_chart_style
from .svg_codegen import generate_layout_svg, generate_seating_plan_svg

__all__ = [
    'GroupSize',
    'GroupSizeKind',
    'ParliamentaryGroup',
    'total_seats',
    'ConfigurationError',
    'HemicycleLayout',
    'SeatPosition',
    'compare_seat_positions',
    'seat_ordering_key',
    'sort_seat_positions',
    'south_distance',
    'RowConnectedSeatingPlan',
    'SeatingPlan',
    'SeatStatus',
    'parse_groups',
    'format_group',
    'print_groups',
    'ChartStyle',
    'get_chart_style',
    'set_chart_style',
    'generate_layout_svg',
    'generate_seating_plan_svg',
]

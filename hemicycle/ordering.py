"""Canonical seat order: a clockwise sweep starting from the left end of the chamber.

Seat positions are compared by their angular distance from the south
(``3π/2``), measured clockwise. Angles that differ by less than
``ANGLE_DELTA`` count as the same direction; such seats are ordered from the
inner row outwards.
"""

from __future__ import annotations

import math
from functools import cmp_to_key
from typing import TYPE_CHECKING, Iterable, List

from .config import ANGLE_DELTA

if TYPE_CHECKING:  # pragma: no cover
    from .layout import SeatPosition

ONE_AND_A_HALF_PI = 1.5 * math.pi
TWO_PI = 2.0 * math.pi


def south_distance(angle: float) -> float:
    """Clockwise distance of ``angle`` from ``3π/2``, in ``[0, 2π)``."""

    distance = ONE_AND_A_HALF_PI - angle
    if distance < 0.0:
        distance += TWO_PI
    return distance


def angles_practically_equal(first: "SeatPosition", second: "SeatPosition") -> bool:
    return abs(first.angle - second.angle) < ANGLE_DELTA


def _compare_floats(a: float, b: float) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def compare_seat_positions(first: "SeatPosition", second: "SeatPosition") -> int:
    """Three-way comparison of two seat positions in canonical order."""

    if angles_practically_equal(first, second):
        return _compare_floats(first.radius, second.radius)
    return _compare_floats(south_distance(first.angle), south_distance(second.angle))


seat_ordering_key = cmp_to_key(compare_seat_positions)


def sort_seat_positions(positions: Iterable["SeatPosition"]) -> List["SeatPosition"]:
    """Return ``positions`` in canonical order (stable for equal positions)."""

    return sorted(positions, key=seat_ordering_key)


__all__ = [
    "south_distance",
    "angles_practically_equal",
    "compare_seat_positions",
    "seat_ordering_key",
    "sort_seat_positions",
]

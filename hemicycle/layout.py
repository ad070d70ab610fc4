"""Hemicycle geometry: rows, seats per row and canonically ordered seat positions."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np

from .config import DEFAULT_ANGLE, DEFAULT_RADIUS_RATIO
from .logging_utils import debug_log_call
from .ordering import sort_seat_positions

logger = logging.getLogger(__name__)

TWO_PI = 2.0 * math.pi


class ConfigurationError(ValueError):
    """Raised when a hemicycle layout is requested with invalid parameters."""


@dataclass(frozen=True)
class SeatPosition:
    """Polar position of a seat; ``row`` is 1-based and ignored by equality."""

    radius: float
    angle: float
    row: int = field(default=0, compare=False)

    @property
    def x(self) -> float:
        return self.radius * math.cos(self.angle)

    @property
    def y(self) -> float:
        return self.radius * math.sin(self.angle)

    def __str__(self) -> str:
        return f"Seat position ({self.radius}, {self.angle} rad)"


def row_radii(number_of_rows: int, radius_ratio: float, row_width: float) -> np.ndarray:
    """Radius of the centre line of every row, innermost first."""

    return radius_ratio + (np.arange(1, number_of_rows + 1) - 0.5) * row_width


@debug_log_call(logger)
def compute_number_of_rows(number_of_seats: int, angle: float, radius_ratio: float) -> int:
    """Smallest row count whose ceiling capacity covers ``number_of_seats``."""

    number_of_rows = 0
    while True:
        number_of_rows += 1
        row_width = (1.0 - radius_ratio) / number_of_rows
        radii = row_radii(number_of_rows, radius_ratio, row_width)
        capacity = int(np.ceil(angle * radii / row_width).sum())
        if capacity >= number_of_seats:
            return number_of_rows


@debug_log_call(logger)
def apportion_seats(number_of_seats: int, radii: np.ndarray) -> np.ndarray:
    """Spread seats over rows by highest quota; the lowest row index wins ties."""

    quotas = 2.0 * radii
    seats = np.zeros(len(radii), dtype=int)
    for _ in range(number_of_seats):
        # argmax returns the first maximum, i.e. a strict ">" scan in row order.
        row = int(np.argmax(quotas))
        seats[row] += 1
        quotas[row] = radii[row] / seats[row]
    return seats


def place_row(row: int, radius: float, number_of_seats: int, angle: float) -> List[SeatPosition]:
    if number_of_seats == 1:
        return [SeatPosition(radius, math.pi / 2.0, row)]
    first_seat_angle = (math.pi - angle) / 2.0
    angle_per_seat = angle / (number_of_seats - 1)
    positions = []
    for i in range(number_of_seats):
        seat_angle = first_seat_angle + angle_per_seat * i
        if seat_angle < 0.0:
            seat_angle += TWO_PI
        positions.append(SeatPosition(radius, seat_angle, row))
    return positions


def place_seats(seats_per_row: np.ndarray, radii: np.ndarray, angle: float) -> List[SeatPosition]:
    positions: List[SeatPosition] = []
    for index, (count, radius) in enumerate(zip(seats_per_row, radii)):
        if count > 0:
            positions.extend(place_row(index + 1, float(radius), int(count), angle))
    return positions


class HemicycleLayout:
    """Seat geometry of a hemicycle with ``number_of_seats`` seats.

    The chamber spans ``angle`` radians, symmetric around the vertical axis,
    between the inner radius ``radius_ratio`` and the outer radius 1. All
    derived values are computed here and exposed read-only.
    """

    def __init__(
        self,
        number_of_seats: int,
        angle: float = DEFAULT_ANGLE,
        radius_ratio: float = DEFAULT_RADIUS_RATIO,
    ) -> None:
        if number_of_seats <= 0:
            raise ConfigurationError(f"number of seats must be positive, got {number_of_seats}")
        if not 0.0 < angle <= TWO_PI:
            raise ConfigurationError(f"angle must be in (0, 2π], got {angle}")
        if not 0.0 < radius_ratio < 1.0:
            raise ConfigurationError(f"radius ratio must be in (0, 1), got {radius_ratio}")

        self._number_of_seats = int(number_of_seats)
        self._angle = float(angle)
        self._radius_ratio = float(radius_ratio)

        self._number_of_rows = compute_number_of_rows(self._number_of_seats, self._angle, self._radius_ratio)
        self._row_width = (1.0 - self._radius_ratio) / self._number_of_rows
        radii = row_radii(self._number_of_rows, self._radius_ratio, self._row_width)
        seats_per_row = apportion_seats(self._number_of_seats, radii)

        self._row_radii: Tuple[float, ...] = tuple(float(r) for r in radii)
        self._seats_per_row: Tuple[int, ...] = tuple(int(s) for s in seats_per_row)
        self._seat_positions: Tuple[SeatPosition, ...] = tuple(
            sort_seat_positions(place_seats(seats_per_row, radii, self._angle))
        )

        logger.info(
            "Hemicycle layout: %d seat(s) over %d row(s), seats per row=%s",
            self._number_of_seats,
            self._number_of_rows,
            self._seats_per_row,
        )

    @property
    def number_of_seats(self) -> int:
        return self._number_of_seats

    @property
    def angle(self) -> float:
        return self._angle

    @property
    def radius_ratio(self) -> float:
        return self._radius_ratio

    @property
    def number_of_rows(self) -> int:
        return self._number_of_rows

    @property
    def row_width(self) -> float:
        return self._row_width

    @property
    def row_radii(self) -> Tuple[float, ...]:
        return self._row_radii

    @property
    def seats_per_row(self) -> Tuple[int, ...]:
        return self._seats_per_row

    @property
    def seat_positions(self) -> Tuple[SeatPosition, ...]:
        return self._seat_positions

    @property
    def width(self) -> float:
        """Horizontal extent, half a row width beyond the seat centre lines."""

        half_row = self._row_width / 2.0
        outer = self._row_radii[-1]
        if self._angle > math.pi:
            return 2.0 * (outer + half_row)
        return 2.0 * (outer * math.cos((math.pi - self._angle) / 2.0) + half_row)

    @property
    def height(self) -> float:
        """Vertical extent; below the centre the outer edge dominates past a half circle."""

        half_row = self._row_width / 2.0
        outer = self._row_radii[-1]
        top = outer + half_row
        if self._angle > math.pi:
            return top + outer * math.sin((self._angle - math.pi) / 2.0) + half_row
        inner = self._row_radii[0]
        return top - inner * math.sin((math.pi - self._angle) / 2.0) + half_row

    def __repr__(self) -> str:
        return (
            f"HemicycleLayout(number_of_seats={self._number_of_seats}, "
            f"angle={self._angle!r}, radius_ratio={self._radius_ratio!r})"
        )


__all__ = [
    "ConfigurationError",
    "SeatPosition",
    "HemicycleLayout",
    "compute_number_of_rows",
    "apportion_seats",
    "place_row",
    "place_seats",
    "row_radii",
]

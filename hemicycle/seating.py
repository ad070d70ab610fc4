"""Allocation of parliamentary groups to canonically ordered seats."""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from .groups import GroupSize, GroupSizeKind, ParliamentaryGroup, total_seats
from .layout import SeatPosition

logger = logging.getLogger(__name__)


class SeatStatus(Enum):
    CERTAIN = "certain"
    LIKELY = "likely"
    UNLIKELY = "unlikely"


def seat_status_within_group(
    seat_index: int,
    start_index: int,
    size: GroupSize,
    number_of_seats: int,
) -> SeatStatus:
    """Status of the ``seat_index``-th seat claimed by a group whose first seat is ``start_index``.

    Groups in the left half of the chamber have their certain seats first; in
    the right half the banding is mirrored so that uncertain seats always
    face the other side of the chamber.
    """

    if size.kind is GroupSizeKind.SIMPLE:
        return SeatStatus.CERTAIN
    if start_index * 2 + size.full_size < number_of_seats:
        if seat_index < size.lower_bound:
            return SeatStatus.CERTAIN
        if seat_index < size.median:
            return SeatStatus.LIKELY
        return SeatStatus.UNLIKELY
    remaining = size.full_size - seat_index
    if remaining <= size.lower_bound:
        return SeatStatus.CERTAIN
    if remaining <= size.median:
        return SeatStatus.LIKELY
    return SeatStatus.UNLIKELY


def has_uncertain_seats(groups: Sequence[ParliamentaryGroup]) -> bool:
    return any(group.size.is_uncertain for group in groups)


class _AllocatedPlan:
    """Read-only accessors shared by the seating plans."""

    _groups: Tuple[ParliamentaryGroup, ...]
    _seats: Tuple[ParliamentaryGroup, ...]
    _statuses: Tuple[SeatStatus, ...]
    _has_uncertain_seats: bool

    @property
    def number_of_seats(self) -> int:
        return len(self._seats)

    @property
    def parliamentary_groups(self) -> Tuple[ParliamentaryGroup, ...]:
        return self._groups

    def _check_seat_number(self, seat_number: int) -> None:
        if not 0 <= seat_number < len(self._seats):
            raise IndexError(f"seat number {seat_number} out of range [0, {len(self._seats)})")

    def group_at_seat(self, seat_number: int) -> ParliamentaryGroup:
        self._check_seat_number(seat_number)
        return self._seats[seat_number]

    def seat_status(self, seat_number: int) -> SeatStatus:
        self._check_seat_number(seat_number)
        return self._statuses[seat_number]

    def has_uncertain_seats(self) -> bool:
        return self._has_uncertain_seats

    @property
    def seats(self) -> Tuple[ParliamentaryGroup, ...]:
        return self._seats

    @property
    def seat_statuses(self) -> Tuple[SeatStatus, ...]:
        return self._statuses


class SeatingPlan(_AllocatedPlan):
    """Groups take contiguous blocks of seats in canonical seat order."""

    def __init__(self, parliamentary_groups: Sequence[ParliamentaryGroup]) -> None:
        self._groups = tuple(parliamentary_groups)
        number_of_seats = total_seats(self._groups)
        self._has_uncertain_seats = has_uncertain_seats(self._groups)

        seats: List[ParliamentaryGroup] = []
        statuses: List[SeatStatus] = []
        for group in self._groups:
            start_index = len(seats)
            for seat_index in range(group.full_size):
                seats.append(group)
                statuses.append(
                    seat_status_within_group(seat_index, start_index, group.size, number_of_seats)
                )
        self._seats = tuple(seats)
        self._statuses = tuple(statuses)

        logger.info(
            "Seating plan: %d group(s), %d seat(s), uncertain=%s",
            len(self._groups),
            number_of_seats,
            self._has_uncertain_seats,
        )


class RowConnectedSeatingPlan(_AllocatedPlan):
    """Groups keep their seats on connected rows where the remaining seats allow it.

    The last groups may end up on disconnected rows once earlier groups have
    fragmented the free seats. Seat statuses follow the order in which a
    group claimed its seats.
    """

    def __init__(
        self,
        seat_positions: Sequence[SeatPosition],
        parliamentary_groups: Sequence[ParliamentaryGroup],
    ) -> None:
        self._groups = tuple(parliamentary_groups)
        number_of_seats = total_seats(self._groups)
        self._seat_positions = tuple(seat_positions)
        if len(self._seat_positions) != number_of_seats:
            raise ValueError(
                f"got {len(self._seat_positions)} seat position(s) for {number_of_seats} seat(s)"
            )
        rows = [position.row for position in self._seat_positions]
        if any(row < 1 for row in rows):
            raise ValueError("seat positions must carry their 1-based row, as placed by HemicycleLayout")
        self._has_uncertain_seats = has_uncertain_seats(self._groups)

        seats: List[Optional[ParliamentaryGroup]] = [None] * number_of_seats
        statuses: List[Optional[SeatStatus]] = [None] * number_of_seats
        fallbacks = 0

        for group in self._groups:
            if group.full_size == 0:
                continue
            first_seat = _first_empty_seat(seats)
            seats[first_seat] = group
            statuses[first_seat] = seat_status_within_group(0, first_seat, group.size, number_of_seats)
            low_row = high_row = rows[first_seat]
            for seat_index in range(1, group.full_size):
                seat_number = _first_empty_seat_in_rows(seats, rows, low_row - 1, high_row + 1)
                if seat_number is None:
                    seat_number = _first_empty_seat(seats)
                    fallbacks += 1
                seats[seat_number] = group
                low_row = min(low_row, rows[seat_number])
                high_row = max(high_row, rows[seat_number])
                statuses[seat_number] = seat_status_within_group(
                    seat_index, first_seat, group.size, number_of_seats
                )
            logger.debug(
                "Group %r seated from seat %d over rows %d-%d",
                group.name,
                first_seat,
                low_row,
                high_row,
            )

        self._seats = tuple(seats)  # type: ignore[arg-type]
        self._statuses = tuple(statuses)  # type: ignore[arg-type]

        logger.info(
            "Row-connected seating plan: %d group(s), %d seat(s), %d disconnected seat(s)",
            len(self._groups),
            number_of_seats,
            fallbacks,
        )

    @property
    def seat_positions(self) -> Tuple[SeatPosition, ...]:
        return self._seat_positions


def _first_empty_seat(seats: Sequence[Optional[ParliamentaryGroup]]) -> int:
    for seat_number, group in enumerate(seats):
        if group is None:
            return seat_number
    raise RuntimeError("no empty seat left")


def _first_empty_seat_in_rows(
    seats: Sequence[Optional[ParliamentaryGroup]],
    rows: Sequence[int],
    low_row: int,
    high_row: int,
) -> Optional[int]:
    for seat_number, group in enumerate(seats):
        if group is None and low_row <= rows[seat_number] <= high_row:
            return seat_number
    return None


__all__ = [
    "SeatStatus",
    "SeatingPlan",
    "RowConnectedSeatingPlan",
    "seat_status_within_group",
    "has_uncertain_seats",
]

import math

import numpy as np
import pytest

from hemicycle.layout import (
    ConfigurationError,
    HemicycleLayout,
    SeatPosition,
    apportion_seats,
    compute_number_of_rows,
)
from hemicycle.ordering import sort_seat_positions


def _capacity(rows, angle=math.pi, radius_ratio=1.0 / 3.0):
    row_width = (1.0 - radius_ratio) / rows
    total = 0
    for r in range(1, rows + 1):
        row_radius = radius_ratio + (r - 0.5) * row_width
        total += math.ceil(angle * row_radius / row_width)
    return total


def test_defaults_are_half_circle_and_one_third():
    layout = HemicycleLayout(10)

    assert layout.angle == math.pi
    assert layout.radius_ratio == pytest.approx(1.0 / 3.0)


def test_one_seat_sits_on_the_bisector():
    layout = HemicycleLayout(1)

    assert layout.number_of_rows == 1
    seat = layout.seat_positions[0]
    assert seat.radius == pytest.approx(2.0 / 3.0)
    assert seat.angle == pytest.approx(math.pi / 2)


def test_two_seats_sit_at_both_ends():
    first, second = HemicycleLayout(2).seat_positions

    assert (first.radius, first.angle) == pytest.approx((2.0 / 3.0, math.pi))
    assert (second.radius, second.angle) == pytest.approx((2.0 / 3.0, 0.0))


def test_five_seats_need_two_rows():
    layout = HemicycleLayout(5)

    assert layout.number_of_rows == 2
    assert layout.row_width == pytest.approx(1.0 / 3.0)


def test_fourteen_seats_need_three_rows():
    layout = HemicycleLayout(14)

    assert layout.number_of_rows == 3
    assert layout.seats_per_row == (3, 5, 6)
    seat0 = layout.seat_positions[0]
    seat3 = layout.seat_positions[3]
    assert (seat0.radius, seat0.angle) == pytest.approx((4.0 / 9.0, math.pi))
    assert (seat3.radius, seat3.angle) == pytest.approx((8.0 / 9.0, 4.0 * math.pi / 5.0))


def test_fourteen_seats_alternate_rows_in_canonical_order():
    layout = HemicycleLayout(14)

    assert [p.row for p in layout.seat_positions] == [1, 2, 3, 3, 2, 3, 1, 2, 3, 2, 3, 1, 2, 3]


@pytest.mark.parametrize('seats', list(range(1, 60)) + [101, 150, 450, 751])
def test_rows_are_minimal_and_hold_every_seat(seats):
    layout = HemicycleLayout(seats)
    rows = layout.number_of_rows

    assert sum(layout.seats_per_row) == seats
    assert len(layout.seat_positions) == seats
    assert _capacity(rows) >= seats
    if rows > 1:
        assert _capacity(rows - 1) < seats


@pytest.mark.parametrize('angle', [math.pi / 2, 1.5 * math.pi, 2 * math.pi])
def test_row_count_follows_angle(angle):
    rows = compute_number_of_rows(40, angle, 0.25)

    assert _capacity(rows, angle, 0.25) >= 40
    if rows > 1:
        assert _capacity(rows - 1, angle, 0.25) < 40


def test_apportionment_prefers_lowest_row_on_ties():
    seats = apportion_seats(2, np.array([0.5, 0.5]))

    assert seats.tolist() == [1, 1]
    assert apportion_seats(1, np.array([0.5, 0.5])).tolist() == [1, 0]


def test_apportionment_follows_row_radius():
    seats = apportion_seats(30, np.array([0.25, 0.5, 0.75, 1.0]))

    assert seats.sum() == 30
    assert seats.tolist() == sorted(seats.tolist())


def test_seat_positions_are_canonically_sorted():
    layout = HemicycleLayout(75)
    angles = [p.angle for p in layout.seat_positions]

    for before, after in zip(layout.seat_positions, layout.seat_positions[1:]):
        if abs(before.angle - after.angle) < 1e-6:
            assert before.radius < after.radius
        else:
            assert before.angle > after.angle
    assert max(angles) == pytest.approx(math.pi)
    assert min(angles) == pytest.approx(0.0)


def test_angles_below_zero_wrap_around():
    layout = HemicycleLayout(30, angle=1.5 * math.pi)

    assert all(0.0 <= p.angle < 2 * math.pi for p in layout.seat_positions)
    assert any(p.angle > math.pi for p in layout.seat_positions)


@pytest.mark.parametrize(
    'seats, angle, radius_ratio, message',
    [
        (0, math.pi, 1 / 3, 'number of seats'),
        (-3, math.pi, 1 / 3, 'number of seats'),
        (5, 0.0, 1 / 3, 'angle'),
        (5, -1.0, 1 / 3, 'angle'),
        (5, 2 * math.pi + 0.01, 1 / 3, 'angle'),
        (5, math.pi, 0.0, 'radius ratio'),
        (5, math.pi, 1.0, 'radius ratio'),
        (5, math.pi, 1.5, 'radius ratio'),
    ],
)
def test_invalid_configuration_is_rejected(seats, angle, radius_ratio, message):
    with pytest.raises(ConfigurationError) as exc:
        HemicycleLayout(seats, angle, radius_ratio)

    assert message in str(exc.value)


def test_full_circle_is_accepted():
    layout = HemicycleLayout(12, angle=2 * math.pi)

    assert len(layout.seat_positions) == 12


def test_default_bounds():
    layout = HemicycleLayout(3)

    assert layout.width == pytest.approx(2.0)
    assert layout.height == pytest.approx(1.0 + layout.row_width / 2.0)


@pytest.mark.parametrize('angle', [math.pi / 2, 0.8 * math.pi, math.pi, 1.3 * math.pi, 2 * math.pi])
def test_bounds_contain_every_seat(angle):
    layout = HemicycleLayout(60, angle=angle, radius_ratio=0.3)
    top = layout.row_radii[-1] + layout.row_width / 2.0

    for p in layout.seat_positions:
        assert abs(p.x) <= layout.width / 2.0 + 1e-9
        assert top - layout.height - 1e-9 <= p.y <= top + 1e-9


def test_narrow_hemicycle_is_narrower_than_full_width():
    layout = HemicycleLayout(20, angle=math.pi / 2)

    assert layout.width < 2.0
    assert layout.height < 1.0


def test_layout_is_read_only():
    layout = HemicycleLayout(10)

    with pytest.raises(AttributeError):
        layout.number_of_rows = 4
    assert isinstance(layout.seat_positions, tuple)
    assert layout.seat_positions is layout.seat_positions


def test_seat_position_cartesian_coordinates():
    position = SeatPosition(2.0, math.pi / 3)

    assert position.x == pytest.approx(1.0)
    assert position.y == pytest.approx(math.sqrt(3))


def test_seat_position_equality_ignores_row():
    assert SeatPosition(0.5, 1.0, row=1) == SeatPosition(0.5, 1.0, row=2)
    assert SeatPosition(0.5, 1.0) != SeatPosition(0.5, 1.1)
    assert str(SeatPosition(0.5, 1.0)) == 'Seat position (0.5, 1.0 rad)'


def test_full_circle_puts_both_row_ends_at_south():
    layout = HemicycleLayout(3, angle=2 * math.pi)

    assert layout.number_of_rows == 1
    assert [p.angle for p in layout.seat_positions] == pytest.approx([1.5 * math.pi, 1.5 * math.pi, math.pi / 2])
    assert sort_seat_positions(reversed(layout.seat_positions)) == list(layout.seat_positions)

import pytest

from hemicycle.groups import GroupSize, GroupSizeKind, ParliamentaryGroup, total_seats


def test_simple_size_has_single_value():
    size = GroupSize.simple(7)

    assert size.kind is GroupSizeKind.SIMPLE
    assert size.size == 7
    assert size.full_size == 7
    assert not size.is_uncertain
    assert str(size) == '7'


def test_differentiated_total_defaults_to_median():
    size = GroupSize.differentiated(3, 5)

    assert size.kind is GroupSizeKind.DIFFERENTIATED
    assert (size.lower_bound, size.median, size.total) == (3, 5, 5)
    assert size.full_size == 5
    assert str(size) == '3-5-5'


def test_differentiated_size_has_no_single_size():
    with pytest.raises(AttributeError):
        GroupSize.differentiated(1, 2, 3).size


@pytest.mark.parametrize(
    'bounds, uncertain',
    [((1, 1, 1), False), ((1, 1, 2), True), ((0, 2, 2), True), ((0, 0, 0), False)],
)
def test_uncertainty_depends_on_total_above_lower_bound(bounds, uncertain):
    assert GroupSize.differentiated(*bounds).is_uncertain is uncertain


@pytest.mark.parametrize('bounds', [(2, 1, 3), (1, 3, 2), (-1, 0, 0)])
def test_differentiated_size_rejects_unordered_bounds(bounds):
    with pytest.raises(ValueError) as exc:
        GroupSize.differentiated(*bounds)

    assert 'lower bound <= median <= total' in str(exc.value)


def test_simple_size_rejects_negative_value():
    with pytest.raises(ValueError):
        GroupSize.simple(-1)


def test_group_keeps_colors_as_tuple():
    group = ParliamentaryGroup(GroupSize.simple(2), [0xFF0000, 0xFFFFFF], 'Red', 'R')

    assert group.colors == (0xFF0000, 0xFFFFFF)
    assert group.color == 0xFF0000
    assert group.full_size == 2
    assert hash(group) == hash(ParliamentaryGroup.of(GroupSize.simple(2), 0xFF0000, 0xFFFFFF, name='Red', character='R'))


def test_group_requires_a_color():
    with pytest.raises(ValueError) as exc:
        ParliamentaryGroup(GroupSize.simple(2), ())

    assert 'at least one color' in str(exc.value)


def test_group_rejects_color_outside_rgb_range():
    with pytest.raises(ValueError):
        ParliamentaryGroup.of(GroupSize.simple(2), 0x1000000)


def test_group_character_is_single_character():
    with pytest.raises(ValueError) as exc:
        ParliamentaryGroup.of(GroupSize.simple(2), 0xFF0000, character='RR')

    assert 'single character' in str(exc.value)


def test_group_is_immutable():
    group = ParliamentaryGroup.of(GroupSize.simple(2), 0xFF0000)

    with pytest.raises(AttributeError):
        group.name = 'Red'


def test_total_seats_uses_full_sizes():
    groups = [
        ParliamentaryGroup.of(GroupSize.simple(2), 0xFF0000),
        ParliamentaryGroup.of(GroupSize.differentiated(1, 2, 3), 0x00FF00),
        ParliamentaryGroup.of(GroupSize.simple(0), 0x0000FF),
    ]

    assert total_seats(groups) == 5

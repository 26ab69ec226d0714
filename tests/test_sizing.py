"""Test the track sizing algorithm."""

import pytest

from layoutgrid import (
    BoxConstraints, Fixed, Flexible, Fractional, GridArea, GridSizingInfo,
    GridTrack, IntrinsicContent, Item, size_tracks)
from layoutgrid.sizing import distribute_free_space, find_flex_factor_unit_size

from .testing_utils import assert_no_logs, capture_logs


def column_area(start, span=1, row=0):
    return GridArea(start, start + span, row, row + 1)


def size_columns(functions, item_areas=None, constraints=None):
    sizing_info = GridSizingInfo.from_track_size_functions(functions, [])
    tracks = size_tracks(
        'column', sizing_info, item_areas or {},
        constraints or BoxConstraints())
    return [track.base_size for track in tracks], sizing_info


def sized_track(index, base_size=0, growth_limit=0,
                function=IntrinsicContent()):
    track = GridTrack(index, function)
    track.base_size = base_size
    track.growth_limit = growth_limit
    return track


@assert_no_logs
@pytest.mark.parametrize('constraints', (
    BoxConstraints(), BoxConstraints(max_width=100),
    BoxConstraints.tight(100, 100)))
def test_fixed_tracks(constraints):
    sizes, sizing_info = size_columns(
        [Fixed(10), Fixed(20)], constraints=constraints)
    assert sizes == [10, 20]
    assert sizing_info.min_width == sizing_info.max_width == 30
    assert sizing_info.is_axis_sized('x')
    assert not sizing_info.is_axis_sized('y')


@assert_no_logs
def test_equal_flexible_tracks():
    sizes, sizing_info = size_columns(
        [Flexible(1)] * 4, constraints=BoxConstraints.tight(100, 100))
    assert sizes == [25, 25, 25, 25]
    assert sizing_info.width == 100


@assert_no_logs
def test_mixed_flexible_tracks():
    sizes, _ = size_columns(
        [Fixed(10), Flexible(1), Flexible(3)],
        constraints=BoxConstraints.tight(90, 100))
    assert sizes == [10, 20, 60]


@assert_no_logs
def test_flexible_tracks_loose_constraints():
    sizes, _ = size_columns(
        [Flexible(1), Flexible(1)], constraints=BoxConstraints(max_width=50))
    assert sizes == [25, 25]


@assert_no_logs
def test_flexible_tracks_unbounded():
    sizes, sizing_info = size_columns([Fixed(10), Flexible(1), Flexible(2)])
    assert sizes == [10, 0, 0]
    assert sizing_info.max_width == 10


@assert_no_logs
def test_flexible_tracks_no_leftover():
    sizes, _ = size_columns(
        [Fixed(40), Flexible(1)], constraints=BoxConstraints.tight(40, 40))
    assert sizes == [40, 0]


@assert_no_logs
def test_intrinsic_track_minimum():
    items = [Item(min_width=5), Item(min_width=8), Item(min_width=3)]
    item_areas = {
        item: column_area(0, row=row) for row, item in enumerate(items)}
    sizes, sizing_info = size_columns([IntrinsicContent()], item_areas)
    assert sizes == [8]
    assert sizing_info.min_width == sizing_info.max_width == 8


@assert_no_logs
def test_intrinsic_track_without_items():
    sizes, _ = size_columns(
        [IntrinsicContent(), Fixed(10)], {Item(5): column_area(1)})
    assert sizes == [0, 10]


@assert_no_logs
@pytest.mark.parametrize('constraints, size', (
    (BoxConstraints(), 50),
    (BoxConstraints(max_width=30), 50),
    (BoxConstraints.tight(100, 100), 50),
    (BoxConstraints.tight(30, 100), 30),
))
def test_intrinsic_track_maximum(constraints, size):
    item_areas = {
        Item(5, 50): column_area(0), Item(8, 20): column_area(0, row=1)}
    sizes, sizing_info = size_columns(
        [IntrinsicContent()], item_areas, constraints)
    assert sizes == [size]
    assert sizing_info.min_width == 8
    assert sizing_info.max_width == 50


@assert_no_logs
def test_maximize_up_to_growth_limits():
    item_areas = {Item(0, 30): column_area(0), Item(0, 10): column_area(1)}
    sizes, sizing_info = size_columns(
        [IntrinsicContent(), IntrinsicContent()], item_areas,
        BoxConstraints.tight(100, 100))
    assert sizes == [30, 10]
    assert sizing_info.min_width == 0
    assert sizing_info.max_width == 40


@assert_no_logs
def test_spanning_item():
    item_areas = {
        Item(50): column_area(0, span=3),
        Item(10): column_area(1, row=1),
    }
    sizes, _ = size_columns(
        [Fixed(10), IntrinsicContent(), IntrinsicContent()], item_areas)
    # The single-column item is sized first, the rest of the spanning item
    # goes to the unlimited track.
    assert sizes == [10, 10, 30]


@assert_no_logs
def test_spanning_item_large_enough_tracks():
    item_areas = {
        Item(15): column_area(0, span=2),
        Item(10): column_area(0, row=1),
        Item(10): column_area(1, row=2),
    }
    sizes, _ = size_columns(
        [IntrinsicContent(), IntrinsicContent()], item_areas)
    assert sizes == [10, 10]


@assert_no_logs
def test_spanning_item_with_flexible_track():
    item_areas = {
        Item(100): column_area(0, span=2),
        Item(20): column_area(0, row=1),
    }
    sizes, _ = size_columns(
        [IntrinsicContent(), Flexible(1)], item_areas,
        BoxConstraints.tight(200, 200))
    assert sizes == [20, 180]


@assert_no_logs
def test_fractional_tracks_tight():
    sizes, _ = size_columns(
        [Fractional(0.5), Flexible(1)],
        constraints=BoxConstraints.tight(200, 200))
    assert sizes == [100, 100]


@assert_no_logs
def test_fractional_tracks_loose():
    sizes, _ = size_columns(
        [Fractional(0.5), Flexible(1)], {Item(): column_area(0)},
        BoxConstraints(max_width=200))
    assert sizes == [100, 100]


@assert_no_logs
def test_rows_use_sized_columns():
    def measure(axis, cross_axis_size):
        size = 1000 / cross_axis_size
        return size, size

    item = Item(measure=measure)
    item_areas = {item: GridArea(0, 1, 0, 1)}
    sizing_info = GridSizingInfo.from_track_size_functions(
        [Fixed(50)], [IntrinsicContent()])
    constraints = BoxConstraints()
    size_tracks('column', sizing_info, item_areas, constraints)
    rows = size_tracks('row', sizing_info, item_areas, constraints)
    assert [row.base_size for row in rows] == [20]
    assert sizing_info.height == 20


def test_overflow():
    with capture_logs() as logs:
        sizes, sizing_info = size_columns(
            [Fixed(60), Fixed(60)], constraints=BoxConstraints.tight(100, 100))
    assert sizes == [60, 60]
    assert sizing_info.width == 120
    assert logs == [
        'WARNING: Grid columns overflow the available space by 20px']


def test_overflow_intrinsic():
    with capture_logs() as logs:
        sizes, _ = size_columns(
            [IntrinsicContent(), Flexible(1)], {Item(150): column_area(0)},
            BoxConstraints.tight(100, 100))
    assert sizes == [150, 0]
    assert len(logs) == 1
    assert 'overflow' in logs[0]


@assert_no_logs
def test_items_outside_tracks():
    with pytest.raises(AssertionError):
        size_columns([Fixed(10)], {Item(): column_area(1)})


@assert_no_logs
@pytest.mark.parametrize('constraints', (
    BoxConstraints(), BoxConstraints(max_width=120),
    BoxConstraints.tight(300, 100), BoxConstraints.tight(10, 100)))
def test_growth_limit_larger_than_base_size(constraints):
    functions = [
        Fixed(10), IntrinsicContent(), Flexible(2), Fractional(0.25),
        IntrinsicContent()]
    item_areas = {
        Item(5, 40): column_area(1),
        Item(20, 70): column_area(1, span=4, row=1),
        Item(3, 3): column_area(3, row=2),
        Item(0, 12): column_area(4, row=3),
    }
    sizing_info = GridSizingInfo.from_track_size_functions(functions, [])
    with capture_logs():
        tracks = size_tracks('column', sizing_info, item_areas, constraints)
    for track in tracks:
        assert track.base_size >= 0
        assert not track.is_unlimited
        assert track.base_size <= track.growth_limit


@assert_no_logs
def test_idempotence():
    functions = [
        Fixed(10), IntrinsicContent(), Flexible(1), IntrinsicContent()]
    item_areas = {
        Item(5, 40): column_area(1),
        Item(20, 70): column_area(1, span=3, row=1),
        Item(0, 12): column_area(3, row=2),
    }
    constraints = BoxConstraints.tight(150, 100)
    first, _ = size_columns(functions, item_areas, constraints)
    second, _ = size_columns(functions, item_areas, constraints)
    assert first == second


@assert_no_logs
def test_distribute_smallest_growth_potential_first():
    tracks = [sized_track(0, 0, 30), sized_track(1, 0, 10)]
    distribute_free_space(30, tracks, (), 'min')
    assert [track.base_size for track in tracks] == [20, 10]


@assert_no_logs
def test_distribute_above_limits():
    tracks = [sized_track(0, 0, 10), sized_track(1, 0, 10)]
    distribute_free_space(30, tracks, tracks, 'min')
    assert [track.base_size for track in tracks] == [15, 15]
    assert [track.growth_limit for track in tracks] == [15, 15]


@assert_no_logs
def test_distribute_leftover_without_growable_tracks():
    tracks = [sized_track(0, 0, 10), sized_track(1, 0, 10)]
    distribute_free_space(30, tracks, (), 'min')
    assert [track.base_size for track in tracks] == [10, 10]


@assert_no_logs
def test_distribute_unlimited_tracks_last():
    unlimited = sized_track(0, 5, None)
    limited = sized_track(1, 0, 4)
    distribute_free_space(10, [unlimited, limited], (), 'min')
    assert limited.base_size == 4
    assert unlimited.base_size == 11


@assert_no_logs
def test_distribute_growth_limits():
    unlimited = sized_track(0, 5, None)
    limited = sized_track(1, 2, 4)
    distribute_free_space(10, [unlimited, limited], [unlimited], 'max')
    assert unlimited.growth_limit == 15
    assert limited.growth_limit == 4
    assert unlimited.base_size == 5
    assert limited.base_size == 2


@assert_no_logs
def test_distribute_negative_space():
    with pytest.raises(AssertionError):
        distribute_free_space(-1, [sized_track(0)], (), 'min')


@assert_no_logs
def test_flex_factor_unit_size():
    tracks = [
        sized_track(0, 30, 30, Fixed(30)), sized_track(1, 0, 0, Flexible(2)),
        sized_track(2, 0, 0, Flexible(3))]
    assert find_flex_factor_unit_size(tracks, 80) == 10
    assert find_flex_factor_unit_size(tracks, 20) == 0


@assert_no_logs
def test_grid_track_growth_limit():
    grid_track = GridTrack(0, Fixed(1))
    grid_track.base_size = 10
    assert grid_track.growth_limit == 10
    grid_track.growth_limit = 5
    assert grid_track.growth_limit == 10
    grid_track.growth_limit = None
    assert grid_track.is_unlimited
    grid_track.base_size = 20
    assert grid_track.is_unlimited
    grid_track.growth_limit = 30
    assert (grid_track.base_size, grid_track.growth_limit) == (20, 30)


@assert_no_logs
def test_spanning_item_tiny_shortfall():
    item_areas = {
        Item(5): column_area(0),
        Item(5): column_area(1, row=1),
        Item(10.0005): column_area(0, span=2, row=2),
    }
    sizes, _ = size_columns(
        [IntrinsicContent(), IntrinsicContent()], item_areas)
    assert sizes[0] == sizes[1]
    assert sum(sizes) == pytest.approx(10.0005)
    assert sum(sizes) >= 10.0005 - 1e-9

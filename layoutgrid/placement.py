"""Placement of grid items into grid areas.

See https://drafts.csswg.org/css-grid/#auto-placement-algo for the algorithm
this module simplifies: items only give optional start indices and spans, and
the grid only grows along its auto-flow axis and beyond the explicit
positions of its items.

"""

import collections
from itertools import count

from .utils import AXES, TEXT_DIRECTIONS, InvalidGrid, flip_axis


class GridArea(collections.namedtuple(
        'GridArea', ['column_start', 'column_end', 'row_start', 'row_end'])):
    """Rectangle of grid cells, ends are excluded."""
    __slots__ = ()

    def start_for_axis(self, axis):
        assert axis in AXES
        return self.column_start if axis == 'x' else self.row_start

    def end_for_axis(self, axis):
        assert axis in AXES
        return self.column_end if axis == 'x' else self.row_end

    def span_for_axis(self, axis):
        return self.end_for_axis(axis) - self.start_for_axis(axis)

    def cells(self):
        """Yield the ``(column, row)`` coordinates of the area's cells."""
        for column in range(self.column_start, self.column_end):
            for row in range(self.row_start, self.row_end):
                yield column, row


class ItemPlacement(collections.namedtuple(
        'ItemPlacement', ['column_start', 'column_span', 'row_start',
                          'row_span'],
        defaults=(None, 1, None, 1))):
    """Placement hints of an item.

    A ``None`` start means that the item is auto-placed on this axis.

    """
    __slots__ = ()

    def start_for_axis(self, axis):
        assert axis in AXES
        return self.column_start if axis == 'x' else self.row_start

    def span_for_axis(self, axis):
        assert axis in AXES
        return self.column_span if axis == 'x' else self.row_span

    @property
    def is_definitely_placed(self):
        return self.column_start is not None and self.row_start is not None

    def is_definitely_placed_on_axis(self, axis):
        return self.start_for_axis(axis) is not None

    def area(self, column_start=None, row_start=None):
        """Return the item's area, using given starts for auto axes."""
        if self.column_start is not None:
            column_start = self.column_start
        if self.row_start is not None:
            row_start = self.row_start
        return GridArea(
            column_start, column_start + self.column_span,
            row_start, row_start + self.row_span)

    def area_at(self, axis, start, other_start=None):
        """Return the item's area starting at ``start`` on ``axis``."""
        if axis == 'x':
            return self.area(start, other_start)
        return self.area(other_start, start)


class OccupancyGrid:
    """Sparse set of occupied cells, only used while placing items."""

    def __init__(self, column_count=0, row_count=0):
        self.cells = {}
        self.column_count = column_count
        self.row_count = row_count

    def track_count(self, axis):
        assert axis in AXES
        return self.column_count if axis == 'x' else self.row_count

    def is_available(self, area):
        return not any(cell in self.cells for cell in area.cells())

    def occupy(self, item, area):
        assert self.is_available(area), f'{item!r} overlaps another item'
        for cell in area.cells():
            self.cells.setdefault(cell, []).append(item)
        self.column_count = max(self.column_count, area.column_end)
        self.row_count = max(self.row_count, area.row_end)

    def items_in_track(self, track_type, index):
        """Return the items of a track, in placement order, without duplicates.

        """
        if track_type == 'column':
            cells = ((index, row) for row in range(self.row_count))
        else:
            cells = ((column, index) for column in range(self.column_count))
        items = {}
        for cell in cells:
            for item in self.cells.get(cell, ()):
                items.setdefault(id(item), item)
        return list(items.values())


class PlacementGrid:
    """Result of the placement algorithm."""

    def __init__(self, item_areas, occupancy, auto_flow, text_direction):
        self.item_areas = item_areas
        self.occupancy = occupancy
        self.column_count = occupancy.column_count
        self.row_count = occupancy.row_count
        self.auto_flow = auto_flow
        self.text_direction = text_direction

    def track_count(self, track_type):
        return self.column_count if track_type == 'column' else self.row_count

    def items_in_track(self, track_type, index):
        return self.occupancy.items_in_track(track_type, index)


def normalize_auto_flow(auto_flow):
    """Return ``auto_flow`` as a ``(axis keyword, [dense])`` tuple.

    ``auto_flow`` is a list of keywords, or a string of space-separated
    keywords, as in ``grid-auto-flow``: ``'row'`` (default) or ``'column'``,
    optionally with ``'dense'``.

    """
    if isinstance(auto_flow, str):
        auto_flow = auto_flow.split()
    keywords = [keyword.lower() for keyword in auto_flow]
    flows = [keyword for keyword in keywords if keyword in ('row', 'column')]
    dense = [keyword for keyword in keywords if keyword == 'dense']
    if (len(flows) + len(dense) != len(keywords) or len(flows) > 1 or
            len(dense) > 1 or not keywords):
        raise InvalidGrid(f'Invalid auto flow: {auto_flow!r}')
    flow = flows[0] if flows else 'row'
    return (flow, 'dense') if dense else (flow,)


def _check_count(value, name, minimum):
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidGrid(f'{name} must be an integer, got {value!r}')
    if value < minimum:
        raise InvalidGrid(f'{name} must be at least {minimum}, got {value!r}')


def get_placement(item):
    """Return the checked placement hints of ``item``.

    Items without a ``placement`` attribute are auto-placed in a single cell.

    """
    placement = getattr(item, 'placement', None)
    if placement is None:
        return ItemPlacement()
    for name in ('column_start', 'row_start'):
        value = getattr(placement, name)
        if value is not None:
            _check_count(value, f'{name} of {item!r}', 0)
    for name in ('column_span', 'row_span'):
        _check_count(getattr(placement, name), f'{name} of {item!r}', 1)
    return placement


def compute_placement(items, column_count=0, row_count=0, auto_flow=('row',),
                      text_direction='ltr'):
    """Assign a :class:`GridArea` to each item.

    :param items: Ordered grid items, with optional ``placement`` hints.
    :param int column_count: Number of columns in the explicit grid.
    :param int row_count: Number of rows in the explicit grid.
    :param auto_flow: ``grid-auto-flow``-like keywords.
    :param str text_direction:
        ``'ltr'`` or ``'rtl'``. Areas are given in logical order, the direction
        is used when areas are converted into pixel offsets.
    :raises InvalidGrid: before placing anything if any hint is invalid.

    """
    items = list(items)
    auto_flow = normalize_auto_flow(auto_flow)
    dense = 'dense' in auto_flow
    if text_direction not in TEXT_DIRECTIONS:
        raise InvalidGrid(f'Invalid text direction: {text_direction!r}')
    _check_count(column_count, 'column_count', 0)
    _check_count(row_count, 'row_count', 0)
    placements = [get_placement(item) for item in items]

    # The grid grows along the flow axis, the cursor walks along the cross
    # axis inside each line of the flow axis.
    flow_axis = 'y' if auto_flow[0] == 'row' else 'x'
    cross_axis = flip_axis(flow_axis)
    occupancy = OccupancyGrid(column_count, row_count)
    item_areas = {}

    # 1. Position anything that’s not auto-positioned.
    for item, placement in zip(items, placements):
        if placement.is_definitely_placed:
            area = placement.area()
            occupancy.occupy(item, area)
            item_areas[item] = area

    # 2. Process the items locked to a given line on one axis.
    cursors = {}
    for item, placement in zip(items, placements):
        if item in item_areas:
            continue
        locked_axes = [
            axis for axis in AXES
            if placement.is_definitely_placed_on_axis(axis)]
        if not locked_axes:
            continue
        locked_axis, = locked_axes
        free_axis = flip_axis(locked_axis)
        line = (locked_axis, placement.start_for_axis(locked_axis))
        start = 0 if dense else cursors.get(line, 0)
        for free_start in count(start):
            area = placement.area_at(free_axis, free_start)
            if occupancy.is_available(area):
                break
        occupancy.occupy(item, area)
        item_areas[item] = area
        cursors[line] = area.end_for_axis(free_axis)

    # 3. Determine the tracks of the cross axis in the implicit grid.
    remaining = [
        (item, placement) for item, placement in zip(items, placements)
        if item not in item_areas]
    cross_count = max((
        placement.span_for_axis(cross_axis) for _, placement in remaining),
        default=0)
    cross_count = max(cross_count, occupancy.track_count(cross_axis))

    # 4. Position the remaining grid items.
    cursor_flow = cursor_cross = 0
    for item, placement in remaining:
        if dense:
            cursor_flow = cursor_cross = 0
        cross_span = placement.span_for_axis(cross_axis)
        while True:
            if cursor_cross + cross_span > cross_count:
                # No room found on this line, go to the next one.
                cursor_flow += 1
                cursor_cross = 0
                continue
            area = placement.area_at(cross_axis, cursor_cross, cursor_flow)
            if occupancy.is_available(area):
                break
            cursor_cross += 1
        occupancy.occupy(item, area)
        item_areas[item] = area
        cursor_cross = area.end_for_axis(cross_axis)

    if cross_axis == 'x':
        occupancy.column_count = max(occupancy.column_count, cross_count)
    else:
        occupancy.row_count = max(occupancy.row_count, cross_count)

    return PlacementGrid(item_areas, occupancy, auto_flow, text_direction)

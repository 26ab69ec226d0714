"""Layout of grid containers.

:class:`LayoutGrid` keeps the items and the configuration of a grid, caches
the placement of its items until it is invalidated, and runs the sizing
algorithms for each layout pass.

"""

import collections
from itertools import cycle
from math import inf, isfinite

from .constraints import GRID_FITS, BoxConstraints
from .logger import PROGRESS_LOGGER
from .placement import compute_placement, normalize_auto_flow
from .sizing import size_tracks
from .track_size import IntrinsicContent, check_track_size
from .tracks import GridSizingInfo
from .utils import TEXT_DIRECTIONS, InvalidGrid, Rect, measurement_axis

#: Result of a layout pass: pixel rectangles of the items, constrained size of
#: the grid, and sized tracks.
GridLayout = collections.namedtuple(
    'GridLayout', ['rects', 'size', 'sizing_info'])


def _check_sizes(sizes, name, allow_empty=True):
    sizes = tuple(check_track_size(size) for size in sizes)
    if not sizes and not allow_empty:
        raise InvalidGrid(f'{name} must not be empty')
    return sizes


def _sizing_functions(template_sizes, auto_sizes, count):
    """Return the template sizes followed by implicit tracks sizes."""
    auto_sizes = cycle(auto_sizes)
    functions = list(template_sizes)
    for _ in range(len(functions), count):
        functions.append(next(auto_sizes))
    return functions


class LayoutGrid:
    """Grid container.

    :param children: Ordered grid items.
    :param template_column_sizes: Sizing functions of the explicit columns.
    :param template_row_sizes: Sizing functions of the explicit rows.
    :param auto_column_sizes:
        Sizing functions of the implicit columns, repeated as needed.
    :param auto_row_sizes:
        Sizing functions of the implicit rows, repeated as needed.
    :param auto_flow:
        ``grid-auto-flow``-like keywords controlling the auto-placement.
    :param str grid_fit: ``'expand'``, ``'loose'`` or ``'passthrough'``.
    :param str text_direction:
        ``'ltr'`` or ``'rtl'``, the order of the columns on the page.

    """

    def __init__(self, children=(), template_column_sizes=(),
                 template_row_sizes=(),
                 auto_column_sizes=(IntrinsicContent(),),
                 auto_row_sizes=(IntrinsicContent(),), auto_flow=('row',),
                 grid_fit='expand', text_direction='ltr'):
        self._children = list(children)
        self._template_column_sizes = _check_sizes(
            template_column_sizes, 'template_column_sizes')
        self._template_row_sizes = _check_sizes(
            template_row_sizes, 'template_row_sizes')
        self.auto_column_sizes = _check_sizes(
            auto_column_sizes, 'auto_column_sizes', allow_empty=False)
        self.auto_row_sizes = _check_sizes(
            auto_row_sizes, 'auto_row_sizes', allow_empty=False)
        self._auto_flow = normalize_auto_flow(auto_flow)
        if grid_fit not in GRID_FITS:
            raise InvalidGrid(f'Unknown grid fit: {grid_fit!r}')
        self.grid_fit = grid_fit
        if text_direction not in TEXT_DIRECTIONS:
            raise InvalidGrid(f'Invalid text direction: {text_direction!r}')
        self.text_direction = text_direction
        self._needs_placement = True
        self.placement_grid = None
        self.sizing_info = None

    @property
    def children(self):
        return tuple(self._children)

    def add(self, item):
        self._children.append(item)
        self.mark_needs_placement()

    def remove(self, item):
        self._children.remove(item)
        self.mark_needs_placement()

    @property
    def template_column_sizes(self):
        return self._template_column_sizes

    @template_column_sizes.setter
    def template_column_sizes(self, value):
        self._template_column_sizes = _check_sizes(
            value, 'template_column_sizes')
        self.mark_needs_placement()

    @property
    def template_row_sizes(self):
        return self._template_row_sizes

    @template_row_sizes.setter
    def template_row_sizes(self, value):
        self._template_row_sizes = _check_sizes(value, 'template_row_sizes')
        self.mark_needs_placement()

    @property
    def auto_flow(self):
        return self._auto_flow

    @auto_flow.setter
    def auto_flow(self, value):
        self._auto_flow = normalize_auto_flow(value)
        self.mark_needs_placement()

    @property
    def needs_placement(self):
        return self._needs_placement

    def mark_needs_placement(self):
        """Place the items again during the next layout pass.

        Call this method when the placement hints of an item change.

        """
        self._needs_placement = True

    def perform_placement(self):
        """Place the items if needed, return the :class:`PlacementGrid`."""
        if self._needs_placement:
            PROGRESS_LOGGER.info('Step 1 - Placing grid items')
            self.placement_grid = compute_placement(
                self._children, len(self._template_column_sizes),
                len(self._template_row_sizes), self._auto_flow,
                self.text_direction)
            for item, area in self.placement_grid.item_areas.items():
                item.area = area
            self._needs_placement = False
        return self.placement_grid

    def _sizing_info(self, placement_grid):
        column_functions = _sizing_functions(
            self._template_column_sizes, self.auto_column_sizes,
            placement_grid.column_count)
        row_functions = _sizing_functions(
            self._template_row_sizes, self.auto_row_sizes,
            placement_grid.row_count)
        return GridSizingInfo.from_track_size_functions(
            column_functions, row_functions, self.text_direction)

    def layout(self, constraints=None):
        """Lay out the grid and return a :class:`GridLayout`.

        Tracks are sized again for each call, as constraints may differ.

        """
        if constraints is None:
            constraints = BoxConstraints()
        constraints = constraints.for_grid_fit(self.grid_fit)
        placement_grid = self.perform_placement()
        item_areas = placement_grid.item_areas
        sizing_info = self._sizing_info(placement_grid)

        PROGRESS_LOGGER.info('Step 2 - Sizing grid columns')
        size_tracks('column', sizing_info, item_areas, constraints)
        PROGRESS_LOGGER.info('Step 3 - Sizing grid rows')
        size_tracks('row', sizing_info, item_areas, constraints)

        PROGRESS_LOGGER.info('Step 4 - Positioning grid items')
        size = constraints.constrain(sizing_info.width, sizing_info.height)
        rects = {}
        for item in self._children:
            area = item_areas[item]
            x, y = sizing_info.offset_for_area(area, grid_width=size[0])
            rects[item] = Rect(
                x, y, sizing_info.size_for_area_on_axis(area, 'x'),
                sizing_info.size_for_area_on_axis(area, 'y'))

        self.sizing_info = sizing_info
        return GridLayout(rects, size, sizing_info)

    def _intrinsic_dimension(self, track_type, dimension, cross_axis_size):
        placement_grid = self.perform_placement()
        item_areas = placement_grid.item_areas
        sizing_info = self._sizing_info(placement_grid)
        # Tracks depend on the size given to their items on the other axis.
        if track_type == 'row':
            if isfinite(cross_axis_size):
                column_constraints = BoxConstraints(
                    cross_axis_size, cross_axis_size)
            else:
                column_constraints = BoxConstraints()
            size_tracks('column', sizing_info, item_areas, column_constraints)
        elif isfinite(cross_axis_size):
            row_constraints = BoxConstraints(
                min_height=cross_axis_size, max_height=cross_axis_size)
            size_tracks('row', sizing_info, item_areas, row_constraints)
        size_tracks(track_type, sizing_info, item_areas, BoxConstraints())
        if measurement_axis(track_type) == 'x':
            sizes = sizing_info.min_width, sizing_info.max_width
        else:
            sizes = sizing_info.min_height, sizing_info.max_height
        return sizes[0] if dimension == 'min' else sizes[1]

    def min_intrinsic_width(self, height=inf):
        """Return the smallest width the grid can have for ``height``."""
        return self._intrinsic_dimension('column', 'min', height)

    def max_intrinsic_width(self, height=inf):
        """Return the width the grid needs for ``height``."""
        return self._intrinsic_dimension('column', 'max', height)

    def min_intrinsic_height(self, width=inf):
        """Return the smallest height the grid can have for ``width``."""
        return self._intrinsic_dimension('row', 'min', width)

    def max_intrinsic_height(self, width=inf):
        """Return the height the grid needs for ``width``."""
        return self._intrinsic_dimension('row', 'max', width)

    def __repr__(self):
        return (
            f'<{type(self).__name__} {len(self._children)} children, '
            f'{len(self._template_column_sizes)}x'
            f'{len(self._template_row_sizes)} template>')

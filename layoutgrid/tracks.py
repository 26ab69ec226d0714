"""Grid tracks and the geometry of sized grids."""

from .track_size import check_track_size
from .utils import (
    AXES, TEXT_DIRECTIONS, TRACK_TYPES, InvalidGrid, cumulative_sum)


class GridTrack:
    """A row or a column, with its sizing function and its resolved sizes.

    ``growth_limit`` is ``None`` while it is unlimited, ie. before intrinsic
    sizing freezes it. Whatever the order of the assignments, the growth limit
    is never smaller than the base size.

    """

    def __init__(self, index, sizing_function):
        self.index = index
        self.sizing_function = check_track_size(sizing_function)
        self._base_size = 0
        self._growth_limit = 0
        self.size_during_distribution = 0

    @property
    def base_size(self):
        return self._base_size

    @base_size.setter
    def base_size(self, value):
        self._base_size = value
        self._increase_growth_limit_if_necessary()

    @property
    def growth_limit(self):
        return self._growth_limit

    @growth_limit.setter
    def growth_limit(self, value):
        self._growth_limit = value
        self._increase_growth_limit_if_necessary()

    @property
    def is_unlimited(self):
        return self._growth_limit is None

    def _increase_growth_limit_if_necessary(self):
        if self._growth_limit is not None:
            self._growth_limit = max(self._growth_limit, self._base_size)

    def __repr__(self):
        growth_limit = 'unlimited' if self.is_unlimited else self.growth_limit
        return (
            f'<{type(self).__name__} {self.index} {self.sizing_function!r} '
            f'base_size={self.base_size} growth_limit={growth_limit}>')


def _tracks(sizing_functions):
    return [
        GridTrack(index, function)
        for index, function in enumerate(sizing_functions)]


class GridSizingInfo:
    """Tracks of both axes and their cumulative offsets.

    Offsets are computed the first time they are read and kept for the rest of
    the layout pass: tracks must be sized before any offset is requested.

    """

    def __init__(self, column_tracks, row_tracks, text_direction='ltr'):
        if text_direction not in TEXT_DIRECTIONS:
            raise InvalidGrid(f'Invalid text direction: {text_direction!r}')
        self.column_tracks = column_tracks
        self.row_tracks = row_tracks
        self.text_direction = text_direction
        self._column_starts = None
        self._row_starts = None
        self.has_column_sizing = False
        self.has_row_sizing = False
        self.min_width = self.max_width = 0
        self.min_height = self.max_height = 0

    @classmethod
    def from_track_size_functions(cls, column_functions, row_functions,
                                  text_direction='ltr'):
        return cls(
            _tracks(column_functions), _tracks(row_functions), text_direction)

    @property
    def column_starts(self):
        if self._column_starts is None:
            self._column_starts = cumulative_sum(
                (track.base_size for track in self.column_tracks),
                include_last=False)
        return self._column_starts

    @property
    def row_starts(self):
        if self._row_starts is None:
            self._row_starts = cumulative_sum(
                (track.base_size for track in self.row_tracks),
                include_last=False)
        return self._row_starts

    @property
    def width(self):
        return sum(track.base_size for track in self.column_tracks)

    @property
    def height(self):
        return sum(track.base_size for track in self.row_tracks)

    def tracks_for_type(self, track_type):
        assert track_type in TRACK_TYPES
        if track_type == 'column':
            return self.column_tracks
        return self.row_tracks

    def tracks_along_axis(self, axis):
        assert axis in AXES
        return self.column_tracks if axis == 'x' else self.row_tracks

    def mark_track_type_sized(self, track_type):
        if track_type == 'column':
            self.has_column_sizing = True
        else:
            self.has_row_sizing = True

    def is_axis_sized(self, axis):
        assert axis in AXES
        return self.has_column_sizing if axis == 'x' else self.has_row_sizing

    def set_min_max_for_axis(self, min_size, max_size, axis):
        assert axis in AXES
        if axis == 'x':
            self.min_width, self.max_width = min_size, max_size
        else:
            self.min_height, self.max_height = min_size, max_size

    def size_for_area_on_axis(self, area, axis):
        """Return the sum of the base sizes of the tracks spanned by area."""
        assert self.is_axis_sized(axis), f'Tracks on {axis} are not sized'
        tracks = self.tracks_along_axis(axis)
        return sum(
            track.base_size for track in
            tracks[area.start_for_axis(axis):area.end_for_axis(axis)])

    def offset_for_area(self, area, grid_width=None):
        """Return the ``(x, y)`` offset of the top-left corner of ``area``.

        Right-to-left offsets are mirrored in ``grid_width``, the sum of the
        column sizes by default.

        """
        x = self.column_starts[area.column_start]
        if self.text_direction == 'rtl':
            if grid_width is None:
                grid_width = self.width
            x = grid_width - x - self.size_for_area_on_axis(area, 'x')
        return x, self.row_starts[area.row_start]

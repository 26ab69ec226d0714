"""Size constraints given by the host for a layout pass."""

from math import inf, isfinite

from .utils import AXES, InvalidGrid, check_size

#: How the grid uses the constraints given by its host.
#:
#: - ``'expand'``: the grid takes all the space allowed by finite maximums;
#: - ``'loose'``: the grid is as small as its tracks allow;
#: - ``'passthrough'``: the constraints are used as given.
GRID_FITS = ('expand', 'loose', 'passthrough')


class BoxConstraints:
    """Minimum and maximum width and height, any maximum may be unbounded."""

    def __init__(self, min_width=0, max_width=inf, min_height=0,
                 max_height=inf):
        check_size(min_width, 'min_width')
        check_size(max_width, 'max_width', allow_infinite=True)
        check_size(min_height, 'min_height')
        check_size(max_height, 'max_height', allow_infinite=True)
        if min_width > max_width:
            raise InvalidGrid(
                f'min_width {min_width} is larger than max_width {max_width}')
        if min_height > max_height:
            raise InvalidGrid(
                f'min_height {min_height} is larger than '
                f'max_height {max_height}')
        self.min_width = min_width
        self.max_width = max_width
        self.min_height = min_height
        self.max_height = max_height

    @classmethod
    def tight(cls, width, height):
        """Constraints only allowing the given size."""
        return cls(width, width, height, height)

    @property
    def has_tight_width(self):
        return self.min_width >= self.max_width

    @property
    def has_tight_height(self):
        return self.min_height >= self.max_height

    def is_tight_for_axis(self, axis):
        assert axis in AXES
        return self.has_tight_width if axis == 'x' else self.has_tight_height

    def min_for_axis(self, axis):
        assert axis in AXES
        return self.min_width if axis == 'x' else self.min_height

    def max_for_axis(self, axis):
        assert axis in AXES
        return self.max_width if axis == 'x' else self.max_height

    def loosen(self):
        """Remove the minimum sizes."""
        return type(self)(0, self.max_width, 0, self.max_height)

    def tighten_to_max(self):
        """Make finite maximums tight, keep unbounded axes as they are."""
        width = self.max_width if isfinite(self.max_width) else None
        height = self.max_height if isfinite(self.max_height) else None
        return type(self)(
            self.min_width if width is None else width, self.max_width,
            self.min_height if height is None else height, self.max_height)

    def for_grid_fit(self, grid_fit):
        """Return the constraints used by a grid with ``grid_fit``."""
        if grid_fit not in GRID_FITS:
            raise InvalidGrid(f'Unknown grid fit: {grid_fit!r}')
        if grid_fit == 'expand':
            return self.tighten_to_max()
        elif grid_fit == 'loose':
            return self.loosen()
        return self

    def constrain(self, width, height):
        """Return the size closest to ``(width, height)`` that is allowed."""
        return (
            min(max(width, self.min_width), self.max_width),
            min(max(height, self.min_height), self.max_height))

    def __eq__(self, other):
        if not isinstance(other, BoxConstraints):
            return NotImplemented
        return (
            (self.min_width, self.max_width, self.min_height, self.max_height)
            == (other.min_width, other.max_width, other.min_height,
                other.max_height))

    def __hash__(self):
        return hash((
            self.min_width, self.max_width, self.min_height, self.max_height))

    def __repr__(self):
        return (
            f'<{type(self).__name__} '
            f'{self.min_width}<=w<={self.max_width} '
            f'{self.min_height}<=h<={self.max_height}>')

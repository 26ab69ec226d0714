"""Sizing functions of grid tracks.

A track sizing function describes the width (for columns) or the height (for
rows) of a track. There are four kinds of functions:

- :class:`Fixed` sizes the track to a number of pixels, it is the cheapest
  way to size a track;
- :class:`Fractional` sizes the track to a fraction of the grid's maximum
  size on the track's axis;
- :class:`Flexible` takes a part of the space left once all the other tracks
  have been sized, in proportion of its flex factor;
- :class:`IntrinsicContent` sizes the track according to the content sizes of
  its items, it is the most expensive way to size a track.

The functions are plain immutable values. The queries below match them
exhaustively instead of relying on methods overridden by each kind.

"""

import collections
from math import inf, isfinite

from .utils import InvalidGrid, check_size, measurement_axis


class _TrackSize:
    """Equality and hashing of sizing functions take their kind into account.

    ``Fixed(1)`` and ``Flexible(1)`` are different functions even if they are
    equal tuples.

    """
    __slots__ = ()

    def __eq__(self, other):
        return type(self) is type(other) and tuple.__eq__(self, other)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self).__name__, *self))


class Fixed(_TrackSize, collections.namedtuple('Fixed', ['size'])):
    """Track of ``size`` pixels."""
    __slots__ = ()

    def __new__(cls, size):
        check_size(size, 'Fixed track size')
        return super().__new__(cls, size)


class Fractional(
        _TrackSize, collections.namedtuple('Fractional', ['fraction'])):
    """Track of a ``fraction`` of the grid's maximum size on its axis.

    The track is fixed when the grid's size is tight on the track's axis.
    Otherwise, the grid depends on the sizes of its tracks to find its own
    size, and the track is measured like an intrinsic track.

    """
    __slots__ = ()

    def __new__(cls, fraction):
        check_size(fraction, 'Fractional track size')
        if not 0 < fraction <= 1:
            raise InvalidGrid(
                f'Fractional track size must be in (0, 1], got {fraction!r}')
        return super().__new__(cls, fraction)


class Flexible(
        _TrackSize, collections.namedtuple('Flexible', ['flex_factor'])):
    """Track taking a part of the space left over by the other tracks."""
    __slots__ = ()

    def __new__(cls, flex_factor):
        check_size(flex_factor, 'Flex factor')
        if flex_factor <= 0:
            raise InvalidGrid(
                f'Flex factor must be positive, got {flex_factor!r}')
        return super().__new__(cls, flex_factor)


class IntrinsicContent(
        _TrackSize, collections.namedtuple('IntrinsicContent', [])):
    """Track sized by the content sizes of its items."""
    __slots__ = ()


TRACK_SIZES = (Fixed, Fractional, Flexible, IntrinsicContent)


def _unknown(function):
    return InvalidGrid(f'Unknown track sizing function: {function!r}')


def check_track_size(function):
    """Raise ``InvalidGrid`` if ``function`` is not a track sizing function."""
    if not isinstance(function, TRACK_SIZES):
        raise _unknown(function)
    return function


def is_fixed(function, track_type, constraints):
    """Whether ``function`` resolves to a fixed value with ``constraints``."""
    if isinstance(function, Fixed):
        return True
    elif isinstance(function, Fractional):
        return constraints.is_tight_for_axis(measurement_axis(track_type))
    elif isinstance(function, (Flexible, IntrinsicContent)):
        return False
    raise _unknown(function)


def is_intrinsic(function, track_type, constraints):
    """Whether ``function`` needs its items to be measured."""
    if isinstance(function, (Fixed, Flexible)):
        return False
    elif isinstance(function, Fractional):
        return not constraints.is_tight_for_axis(measurement_axis(track_type))
    elif isinstance(function, IntrinsicContent):
        return True
    raise _unknown(function)


def is_flexible(function):
    """Whether ``function`` consumes the space left over by other tracks."""
    if isinstance(function, Flexible):
        return True
    elif isinstance(function, (Fixed, Fractional, IntrinsicContent)):
        return False
    raise _unknown(function)


def flex_factor(function):
    """Return the flex factor of a flexible function, ``None`` otherwise."""
    return function.flex_factor if is_flexible(function) else None


def _content_sizes(item, axis, cross_axis_size):
    min_size = item.min_content_size(axis, cross_axis_size)
    max_size = item.max_content_size(axis, cross_axis_size)
    assert min_size >= 0, f'Negative minimum content size for {item!r}'
    assert max_size >= min_size, (
        f'Maximum content size smaller than minimum size for {item!r}')
    return min_size, max_size


def _contribution(function, track_type, items, axis_max_size,
                  cross_axis_size_for_item, index):
    if isinstance(function, Fixed):
        return function.size
    elif isinstance(function, Fractional):
        if not isfinite(axis_max_size):
            return 0
        return function.fraction * axis_max_size
    elif isinstance(function, Flexible):
        return 0
    elif isinstance(function, IntrinsicContent):
        if cross_axis_size_for_item is None:
            def cross_axis_size_for_item(item):
                return inf
        axis = measurement_axis(track_type)
        return max((
            _content_sizes(item, axis, cross_axis_size_for_item(item))[index]
            for item in items), default=0)
    raise _unknown(function)


def min_contribution(function, track_type, items, axis_max_size,
                     cross_axis_size_for_item=None):
    """Return the smallest size a track sized by ``function`` can have.

    :param str track_type: ``'column'`` or ``'row'``.
    :param items:
        The items of the track. Walking the items is by definition O(n), only
        :class:`IntrinsicContent` does it.
    :param float axis_max_size:
        The maximum size allowed to the grid on the track's axis, may be
        infinite.
    :param cross_axis_size_for_item:
        A function returning the size available to an item on the other axis,
        when it is known. Items are measured with an unbounded cross size
        otherwise.

    """
    return _contribution(
        function, track_type, items, axis_max_size, cross_axis_size_for_item,
        0)


def max_contribution(function, track_type, items, axis_max_size,
                     cross_axis_size_for_item=None):
    """Return the ideal size of a track sized by ``function``.

    The result is always larger than or equal to the result of
    :func:`min_contribution` with the same parameters.

    """
    return _contribution(
        function, track_type, items, axis_max_size, cross_axis_size_for_item,
        1)

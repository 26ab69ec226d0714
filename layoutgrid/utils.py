"""Helpers shared by the placement and sizing algorithms."""

import collections
from math import isfinite, isnan

#: Pixel rectangle given to the host for each laid out item.
Rect = collections.namedtuple('Rect', ['x', 'y', 'width', 'height'])

AXES = ('x', 'y')
TRACK_TYPES = ('column', 'row')
TEXT_DIRECTIONS = ('ltr', 'rtl')


class InvalidGrid(ValueError):  # noqa: N818
    """Invalid or unsupported grid configuration."""


def measurement_axis(track_type):
    """Return the axis measured by tracks of ``track_type``.

    Columns are measured along the horizontal ``'x'`` axis, rows along the
    vertical ``'y'`` axis.

    """
    assert track_type in TRACK_TYPES
    return 'x' if track_type == 'column' else 'y'


def flip_axis(axis):
    assert axis in AXES
    return 'y' if axis == 'x' else 'x'


def cumulative_sum(values, include_last=True):
    """Return the running totals of ``values``, starting from 0.

    With ``include_last`` set to ``False``, the total of all the values is not
    included, so that the result has the same length as ``values``.

    """
    totals = [0]
    for value in values:
        totals.append(totals[-1] + value)
    return totals if include_last else totals[:-1]


def check_size(value, name, allow_infinite=False):
    """Raise ``InvalidGrid`` if ``value`` is not a usable pixel size."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidGrid(f'{name} must be a number, got {value!r}')
    if isnan(value):
        raise InvalidGrid(f'{name} must not be NaN')
    if not allow_infinite and not isfinite(value):
        raise InvalidGrid(f'{name} must be finite, got {value!r}')
    if value < 0:
        raise InvalidGrid(f'{name} must not be negative, got {value!r}')
    return value

"""Grid items.

The layout algorithms don't know anything about what the items are. They only
need each item to:

- tell its minimum and maximum content sizes along an axis, given the size
  available on the other axis, with ``min_content_size(axis,
  cross_axis_size)`` and ``max_content_size(axis, cross_axis_size)``, where
  ``axis`` is ``'x'`` or ``'y'`` and ``cross_axis_size`` may be infinite;
- optionally give its placement hints in a ``placement`` attribute, an
  :class:`ItemPlacement`.

:class:`LayoutGrid` writes the resolved :class:`GridArea` in the ``area``
attribute of its children. Items are used as dictionary keys and must keep the
default identity-based hashing.

:class:`Item` is a simple implementation of this interface.

"""

from .utils import check_size


class Item:
    """Grid item with given content sizes.

    :param min_width: Minimum content width.
    :param max_width: Maximum content width, ``min_width`` by default.
    :param min_height: Minimum content height.
    :param max_height: Maximum content height, ``min_height`` by default.
    :param placement: Optional :class:`ItemPlacement`.
    :param label: Optional name used in representations.
    :param measure:
        Optional function called with ``(axis, cross_axis_size)`` and
        returning a ``(min_size, max_size)`` tuple, used instead of the fixed
        sizes when content sizes depend on the other axis.

    """

    def __init__(self, min_width=0, max_width=None, min_height=0,
                 max_height=None, placement=None, label=None, measure=None):
        self.min_width = check_size(min_width, 'min_width')
        self.max_width = check_size(
            min_width if max_width is None else max_width, 'max_width')
        self.min_height = check_size(min_height, 'min_height')
        self.max_height = check_size(
            min_height if max_height is None else max_height, 'max_height')
        self.placement = placement
        self.label = label
        self.measure = measure
        self.area = None

    def content_sizes(self, axis, cross_axis_size):
        if self.measure is not None:
            return self.measure(axis, cross_axis_size)
        if axis == 'x':
            return self.min_width, self.max_width
        return self.min_height, self.max_height

    def min_content_size(self, axis, cross_axis_size):
        return self.content_sizes(axis, cross_axis_size)[0]

    def max_content_size(self, axis, cross_axis_size):
        return self.content_sizes(axis, cross_axis_size)[1]

    def __repr__(self):
        if self.label is not None:
            return f'<{type(self).__name__} {self.label}>'
        return f'<{type(self).__name__} {id(self):#x}>'

"""Grid layout for user interfaces.

The public API is what is accessible from this "root" package without
importing sub-modules.

"""

from .constraints import BoxConstraints
from .grid import GridLayout, LayoutGrid
from .items import Item
from .logger import LOGGER, PROGRESS_LOGGER  # noqa: F401
from .placement import (
    GridArea, ItemPlacement, PlacementGrid, compute_placement)
from .sizing import size_tracks
from .track_size import Fixed, Flexible, Fractional, IntrinsicContent
from .tracks import GridSizingInfo, GridTrack
from .utils import InvalidGrid, Rect

VERSION = __version__ = '1.0.0'

__all__ = [
    'VERSION', '__version__', 'BoxConstraints', 'Fixed', 'Flexible',
    'Fractional', 'GridArea', 'GridLayout', 'GridSizingInfo', 'GridTrack',
    'IntrinsicContent', 'InvalidGrid', 'Item', 'ItemPlacement', 'LayoutGrid',
    'PlacementGrid', 'Rect', 'compute_placement', 'size_tracks']

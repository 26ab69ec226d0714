"""Track sizing algorithm.

A rough approximation of https://drafts.csswg.org/css-grid/#algo-track-sizing.
Tracks only have one sizing function instead of distinct minimum and maximum
functions, so many steps are left out:

1. initialize the base sizes and growth limits of the tracks;
2. resolve intrinsic tracks, by items span, smallest spans first;
3. maximize the tracks, growing them up to their growth limits;
4. expand flexible tracks into the space left over.

"""

from math import isfinite

from .logger import LOGGER
from .track_size import (
    flex_factor, is_fixed, is_flexible, is_intrinsic, max_contribution,
    min_contribution)
from .utils import flip_axis, measurement_axis


def size_tracks(track_type, sizing_info, item_areas, constraints):
    """Size the tracks of ``track_type`` in ``sizing_info``.

    :param str track_type: ``'column'`` or ``'row'``.
    :param sizing_info: The :class:`GridSizingInfo` holding the tracks.
    :param dict item_areas: Items mapped to their :class:`GridArea`.
    :param constraints: The :class:`BoxConstraints` of the grid.
    :returns: The sized tracks.

    """
    axis = measurement_axis(track_type)
    tracks = sizing_info.tracks_for_type(track_type)
    available_space = constraints.max_for_axis(axis)
    is_axis_definite = constraints.is_tight_for_axis(axis)
    for area in item_areas.values():
        assert area.end_for_axis(axis) <= len(tracks), (
            f'{area} is outside of the {len(tracks)} {track_type}s')

    # 1. Initialize track sizes.
    fixed_tracks, intrinsic_tracks, flexible_tracks = [], [], []
    for track in tracks:
        function = track.sizing_function
        if is_fixed(function, track_type, constraints):
            size = min_contribution(function, track_type, (), available_space)
            track.base_size = track.growth_limit = size
            fixed_tracks.append(track)
        elif is_flexible(function):
            track.base_size = track.growth_limit = 0
            flexible_tracks.append(track)
        else:
            assert is_intrinsic(function, track_type, constraints)
            track.base_size = 0
            track.growth_limit = None
            intrinsic_tracks.append(track)

    # 2. Resolve intrinsic track sizes.
    _resolve_intrinsic_track_sizes(
        track_type, tracks, intrinsic_tracks, sizing_info, item_areas,
        available_space)

    # 3. Maximize tracks.
    base_sizes = sum(track.base_size for track in tracks)
    growth_limits = sum(track.growth_limit for track in tracks)
    free_space = available_space - base_sizes
    if is_axis_definite and free_space < 0:
        LOGGER.warning(
            'Grid %ss overflow the available space by %gpx',
            track_type, -free_space)
        sizing_info.set_min_max_for_axis(base_sizes, growth_limits, axis)
        sizing_info.mark_track_type_sized(track_type)
        return tracks
    fixed_indexes = {track.index for track in fixed_tracks}
    non_fixed_tracks = [
        track for track in tracks if track.index not in fixed_indexes]
    if is_axis_definite:
        distribute_free_space(free_space, non_fixed_tracks, (), 'min')
    else:
        for track in non_fixed_tracks:
            track.base_size = track.growth_limit

    # 4. Expand flexible tracks.
    if flexible_tracks and isfinite(available_space):
        # TODO: Use the content minimum of flexible tracks as a lower bound
        # for their base size, as in css-grid's "find the size of an fr".
        flex_unit = find_flex_factor_unit_size(tracks, available_space)
        for track in flexible_tracks:
            track.base_size = flex_unit * flex_factor(track.sizing_function)
            base_sizes += track.base_size
            growth_limits += track.base_size

    sizing_info.set_min_max_for_axis(base_sizes, growth_limits, axis)
    sizing_info.mark_track_type_sized(track_type)
    return tracks


def _resolve_intrinsic_track_sizes(track_type, tracks, intrinsic_tracks,
                                   sizing_info, item_areas, available_space):
    axis = measurement_axis(track_type)
    intrinsic_indexes = {track.index for track in intrinsic_tracks}

    # Group the items spanning at least one intrinsic track by span, then by
    # start index.
    items_by_span = {}
    for item, area in item_areas.items():
        start, end = area.start_for_axis(axis), area.end_for_axis(axis)
        if intrinsic_indexes.intersection(range(start, end)):
            spans = items_by_span.setdefault(end - start, {})
            spans.setdefault(start, []).append(item)

    cross_axis = flip_axis(axis)
    if sizing_info.is_axis_sized(cross_axis):
        def cross_axis_size_for_item(item):
            return sizing_info.size_for_area_on_axis(
                item_areas[item], cross_axis)
    else:
        cross_axis_size_for_item = None

    # Smaller spans first, so that the spanned tracks already include the
    # contributions of single-track items.
    for span in sorted(items_by_span):
        items_by_start = items_by_span[span]
        for start in sorted(items_by_start):
            spanned_tracks = tracks[start:start + span]
            # Flexible tracks are sized later.
            if any(is_flexible(track.sizing_function)
                   for track in spanned_tracks):
                continue
            intrinsic_track = next(
                track for track in spanned_tracks
                if track.index in intrinsic_indexes)
            function = intrinsic_track.sizing_function
            items = items_by_start[start]

            # Distribute the minimum size of the items to the base sizes.
            min_size = min_contribution(
                function, track_type, items, available_space,
                cross_axis_size_for_item)
            _distribute_calculated_space(
                min_size, spanned_tracks, intrinsic_indexes, 'min')

            # Distribute the maximum size of the items to the growth limits.
            max_size = max_contribution(
                function, track_type, items, available_space,
                cross_axis_size_for_item)
            _distribute_calculated_space(
                max_size, spanned_tracks, intrinsic_indexes, 'max')

    # Fix unlimited growth limits.
    for track in intrinsic_tracks:
        if track.is_unlimited:
            track.growth_limit = track.base_size


def _distribute_calculated_space(calculated_space, spanned_tracks,
                                 intrinsic_indexes, dimension):
    free_space = calculated_space
    for track in spanned_tracks:
        if dimension == 'min' or track.is_unlimited:
            free_space -= track.base_size
        else:
            free_space -= track.growth_limit

    if free_space <= 0:
        # The tracks are large enough, freeze them.
        for track in spanned_tracks:
            if track.is_unlimited:
                track.growth_limit = track.base_size
        return

    growable_tracks = [
        track for track in spanned_tracks if track.index in intrinsic_indexes]
    distribute_free_space(
        free_space, growable_tracks, growable_tracks, dimension)


def _growth_potential(track):
    if track.is_unlimited:
        return (True, 0, track.index)
    return (
        False, track.growth_limit - track.size_during_distribution,
        track.index)


def _distribute(free_space, tracks, share_for_track):
    for i, track in enumerate(tracks):
        available_share = free_space / (len(tracks) - i)
        share = share_for_track(track, available_share)
        assert share >= 0, 'Never shrink a track'
        track.size_during_distribution += share
        free_space -= share
    return free_space


def _limited_share(track, available_share):
    if track.is_unlimited:
        return available_share
    return max(0, min(
        available_share,
        track.growth_limit - track.size_during_distribution))


def distribute_free_space(free_space, tracks, growable_above_limit,
                          dimension):
    """Distribute ``free_space`` between ``tracks``.

    Tracks with the smallest growth potential get their share first, tracks
    with an unlimited growth limit last, so that limited tracks absorb space
    first. Space that can't be given without exceeding growth limits is split
    between ``growable_above_limit`` tracks.

    :param str dimension:
        ``'min'`` to grow the base sizes, ``'max'`` to grow the growth limits.

    """
    assert free_space >= 0
    assert dimension in ('min', 'max')

    # Set up the sizes used during distribution, assigned back at the end.
    for track in tracks:
        if dimension == 'min' or track.is_unlimited:
            track.size_during_distribution = track.base_size
        else:
            track.size_during_distribution = track.growth_limit

    tracks = sorted(tracks, key=_growth_potential)
    free_space = _distribute(free_space, tracks, _limited_share)

    # Grow some more, ignoring limits.
    if free_space > 0 and growable_above_limit:
        _distribute(
            free_space, list(growable_above_limit),
            lambda track, available_share: available_share)

    for track in tracks:
        if dimension == 'min':
            track.base_size = max(
                track.base_size, track.size_during_distribution)
        elif track.is_unlimited:
            track.growth_limit = track.size_during_distribution
        else:
            track.growth_limit = max(
                track.growth_limit, track.size_during_distribution)


def find_flex_factor_unit_size(tracks, leftover_space):
    """Return the size of one flex unit.

    The space left over by the inflexible tracks is shared between flexible
    tracks in proportion of their flex factors.

    """
    flex_sum = 0
    for track in tracks:
        if is_flexible(track.sizing_function):
            flex_sum += flex_factor(track.sizing_function)
        else:
            leftover_space -= track.base_size
    assert flex_sum > 0
    return max(0, leftover_space) / flex_sum

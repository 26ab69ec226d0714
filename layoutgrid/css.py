"""Grid configuration given with CSS syntax.

Track lists, placements and auto flows can be given as strings using the
syntax of ``grid-template-columns``, ``grid-column`` and ``grid-auto-flow``,
restricted to what the layout algorithms support:

>>> parse_track_list('100px 1fr auto')
(Fixed(size=100), Flexible(flex_factor=1), IntrinsicContent())
>>> parse_placement('2 / span 3')
(1, 3)

Line numbers are 1-indexed in CSS, returned indexes are 0-indexed.

"""

import tinycss2

from .logger import LOGGER
from .placement import ItemPlacement, normalize_auto_flow
from .track_size import Fixed, Flexible, Fractional, IntrinsicContent
from .utils import InvalidGrid

# How many CSS pixels is one <unit>?
# https://www.w3.org/TR/CSS21/syndata.html#length-units
LENGTHS_TO_PIXELS = {
    'px': 1,
    'pt': 1. / 0.75,
    'pc': 16.,  # LENGTHS_TO_PIXELS['pt'] * 12
    'in': 96.,  # LENGTHS_TO_PIXELS['pt'] * 72
    'cm': 96. / 2.54,  # LENGTHS_TO_PIXELS['in'] / 2.54
    'mm': 96. / 25.4,  # LENGTHS_TO_PIXELS['in'] / 25.4
    'q': 96. / 25.4 / 4,  # LENGTHS_TO_PIXELS['mm'] / 4
}


def _tokenize(css):
    if isinstance(css, str):
        css = tinycss2.parse_component_value_list(css, skip_comments=True)
    return remove_whitespace(css)


def remove_whitespace(tokens):
    """Remove any top-level whitespace and comments in a token list."""
    return tuple(
        token for token in tokens
        if token.type not in ('whitespace', 'comment'))


def split_on_literal(tokens, literal):
    """Split a list of tokens on top-level ``LiteralToken(literal)``."""
    parts = [[]]
    for token in tokens:
        if token.type == 'literal' and token.value == literal:
            parts.append([])
        else:
            parts[-1].append(token)
    return [remove_whitespace(part) for part in parts]


def get_keyword(token):
    """If ``token`` is a keyword, return its lowercase name.

    Otherwise return ``None``.

    """
    if token.type == 'ident':
        return token.lower_value


def get_integer(token):
    """If ``token`` is an integer, return its value, otherwise ``None``."""
    if token.type == 'number' and token.is_integer:
        return token.int_value


def get_track_size(token):
    """Parse a single track size token."""
    keyword = get_keyword(token)
    if keyword == 'auto':
        return IntrinsicContent()
    elif keyword in ('min-content', 'max-content'):
        LOGGER.warning('"%s" track sizes are sized as "auto"', keyword)
        return IntrinsicContent()
    elif token.type == 'dimension':
        unit = token.lower_unit
        if unit == 'fr':
            return Flexible(token.value)
        elif unit in LENGTHS_TO_PIXELS:
            return Fixed(token.value * LENGTHS_TO_PIXELS[unit])
    elif token.type == 'percentage':
        return Fractional(token.value / 100)
    elif token.type == 'number' and token.value == 0:
        return Fixed(0)
    elif token.type == 'function' and token.lower_name in (
            'minmax', 'fit-content'):
        raise InvalidGrid(f'"{token.lower_name}()" is not supported')
    raise InvalidGrid(f'Invalid track size: {token.serialize()!r}')


def _repeat(token):
    arguments = split_on_literal(token.arguments, ',')
    if len(arguments) != 2 or len(arguments[0]) != 1 or not arguments[1]:
        raise InvalidGrid(f'Invalid repeat(): {token.serialize()!r}')
    (number,), tracks = arguments
    repeat_number = get_integer(number)
    if repeat_number is None:
        if get_keyword(number) in ('auto-fill', 'auto-fit'):
            # TODO: Respect auto-fit and auto-fill.
            LOGGER.warning(
                '"auto-fit" and "auto-fill" are unsupported in repeat()')
            repeat_number = 1
        else:
            raise InvalidGrid(f'Invalid repeat(): {token.serialize()!r}')
    if repeat_number < 1:
        raise InvalidGrid(f'Invalid repeat(): {token.serialize()!r}')
    sizes = tuple(get_track_size(track) for track in tracks)
    return sizes * repeat_number


def parse_track_list(css):
    """Parse a ``grid-template-*``-like track list.

    Supported values are ``none``, lengths, percentages, ``fr`` flex factors,
    ``auto`` and ``repeat(<integer>, <track list>)``. ``min-content`` and
    ``max-content`` are sized as ``auto``.

    """
    tokens = _tokenize(css)
    if not tokens:
        raise InvalidGrid('Empty track list')
    if len(tokens) == 1 and get_keyword(tokens[0]) == 'none':
        return ()
    sizes = []
    for token in tokens:
        if token.type == 'function' and token.lower_name == 'repeat':
            sizes.extend(_repeat(token))
        else:
            sizes.append(get_track_size(token))
    return tuple(sizes)


def _get_line(tokens):
    """Return ``(kind, number)`` for ``auto``, ``<n>`` or ``span <n>``."""
    if len(tokens) == 1:
        if get_keyword(tokens[0]) == 'auto':
            return 'auto', None
        number = get_integer(tokens[0])
        if number is not None and number >= 1:
            return 'line', number
    elif len(tokens) == 2:
        keywords = [get_keyword(token) for token in tokens]
        numbers = [get_integer(token) for token in tokens]
        if keywords[0] == 'span' and numbers[1] is not None:
            number = numbers[1]
        elif keywords[1] == 'span' and numbers[0] is not None:
            number = numbers[0]
        else:
            number = None
        if number is not None and number >= 1:
            return 'span', number
    serialized = ' '.join(token.serialize() for token in tokens)
    raise InvalidGrid(f'Invalid grid line: {serialized!r}')


def parse_placement(css):
    """Parse a ``grid-column``-like placement into ``(start, span)``.

    ``start`` is ``None`` for auto-placed items.

    """
    parts = split_on_literal(_tokenize(css), '/')
    if len(parts) > 2:
        raise InvalidGrid(f'Invalid placement: {css!r}')
    start_kind, start = _get_line(parts[0])
    if len(parts) == 1:
        end_kind, end = 'auto', None
    else:
        end_kind, end = _get_line(parts[1])

    if start_kind == 'line':
        if end_kind == 'line':
            if end <= start:
                raise InvalidGrid(f'Invalid placement: {css!r}')
            return start - 1, end - start
        elif end_kind == 'span':
            return start - 1, end
        return start - 1, 1
    elif start_kind == 'span':
        if end_kind == 'line':
            if end - start < 1:
                raise InvalidGrid(f'Invalid placement: {css!r}')
            return end - 1 - start, start
        # If the placement contains two spans, remove the one contributed by
        # the end grid-placement property.
        return None, start
    if end_kind == 'line':
        if end < 2:
            raise InvalidGrid(f'Invalid placement: {css!r}')
        return end - 2, 1
    elif end_kind == 'span':
        return None, end
    return None, 1


def parse_grid_placement(column='auto', row='auto'):
    """Return the placement given by ``grid-column`` and ``grid-row``."""
    column_start, column_span = parse_placement(column)
    row_start, row_span = parse_placement(row)
    return ItemPlacement(column_start, column_span, row_start, row_span)


def parse_auto_flow(css):
    """Parse a ``grid-auto-flow`` value into a tuple of keywords."""
    keywords = [get_keyword(token) for token in _tokenize(css)]
    if None in keywords:
        raise InvalidGrid(f'Invalid auto flow: {css!r}')
    return normalize_auto_flow(keywords)

"""
Shorthand expansion.

Every declaration that reaches a StyleProperties map goes through expand(),
which rewrites shorthands such as ``margin`` or ``border`` into their
longhands. Input that does not fit the shape a shorthand expects is dropped
without touching the map; each expander reports whether it wrote anything,
but callers are free to ignore that.
"""

import logging
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from .properties import (
    PSEUDO_PROPERTIES, SHORTHAND_PROPERTIES, PropertyID, StyleProperties, is_pseudo_property,
)
from .value_parser import (
    parse_color, parse_css_value, parse_line_style, parse_line_width, split_on_whitespace,
)
from .values import (
    ColorStyleValue, IdentifierStyleValue, ImageStyleValue, LengthStyleValue, StyleValue, ValueID,
)

logger = logging.getLogger(__name__)

TEXT_DECORATION_LINES = {
    ValueID.NONE, ValueID.UNDERLINE, ValueID.OVERLINE, ValueID.LINE_THROUGH, ValueID.BLINK,
}

BACKGROUND_REPEAT_VALUES = {
    ValueID.NO_REPEAT, ValueID.REPEAT, ValueID.REPEAT_X, ValueID.REPEAT_Y,
    ValueID.ROUND, ValueID.SPACE,
}

DEFAULT_BORDER_WIDTH = LengthStyleValue.px(3)


class Edge(Enum):
    TOP = 'top'
    RIGHT = 'right'
    BOTTOM = 'bottom'
    LEFT = 'left'
    ALL = 'all'


_EDGE_OF = {
    PropertyID.BORDER_TOP: Edge.TOP,
    PropertyID.BORDER_RIGHT: Edge.RIGHT,
    PropertyID.BORDER_BOTTOM: Edge.BOTTOM,
    PropertyID.BORDER_LEFT: Edge.LEFT,
}

# (top, right, bottom, left) longhands of each four-sided shorthand
_BOX_LONGHANDS = {
    PropertyID.BORDER_WIDTH: (PropertyID.BORDER_TOP_WIDTH, PropertyID.BORDER_RIGHT_WIDTH,
                              PropertyID.BORDER_BOTTOM_WIDTH, PropertyID.BORDER_LEFT_WIDTH),
    PropertyID.BORDER_STYLE: (PropertyID.BORDER_TOP_STYLE, PropertyID.BORDER_RIGHT_STYLE,
                              PropertyID.BORDER_BOTTOM_STYLE, PropertyID.BORDER_LEFT_STYLE),
    PropertyID.BORDER_COLOR: (PropertyID.BORDER_TOP_COLOR, PropertyID.BORDER_RIGHT_COLOR,
                              PropertyID.BORDER_BOTTOM_COLOR, PropertyID.BORDER_LEFT_COLOR),
    PropertyID.MARGIN: (PropertyID.MARGIN_TOP, PropertyID.MARGIN_RIGHT,
                        PropertyID.MARGIN_BOTTOM, PropertyID.MARGIN_LEFT),
    PropertyID.PADDING: (PropertyID.PADDING_TOP, PropertyID.PADDING_RIGHT,
                         PropertyID.PADDING_BOTTOM, PropertyID.PADDING_LEFT),
}

_EDGE_ORDER = (Edge.TOP, Edge.RIGHT, Edge.BOTTOM, Edge.LEFT)


def expand(style: StyleProperties, property_id: PropertyID, value: StyleValue,
           context=None, is_internal: bool = False) -> bool:
    """
    Write a declaration into a style map, expanding shorthands.

    Args:
        style: The map being built
        property_id: The declared property
        value: The declared value
        context: The document, used to resolve URLs; may be None
        is_internal: True when the write comes from another expansion, which
            is the only way to reach the internal pseudo-properties

    Returns:
        True if at least one property was written, False if the declaration
        was ignored
    """
    if is_pseudo_property(property_id) and not is_internal:
        logger.debug(f"Ignoring non-internally-generated pseudo property: {property_id.value}")
        return False

    if property_id is PropertyID.INVALID:
        logger.debug("Ignoring declaration with an invalid property id")
        return False

    expander = _EXPANDERS.get(property_id)
    if expander is None:
        style.set_property(property_id, value)
        return True
    return expander(style, property_id, value, context)


def _parse_parts(value: StyleValue, context) -> Optional[List[StyleValue]]:
    """
    Split a value into typed components.

    Only string values carry more than one component; anything else is
    already a single typed value. Returns None if any part fails to parse.
    """
    if not value.is_string():
        return [value]
    values = []
    for part in split_on_whitespace(value.to_string()):
        parsed = parse_css_value(part, context)
        if parsed is None:
            return None
        values.append(parsed)
    return values


def _box_edges(values: List[StyleValue]) -> Tuple[StyleValue, StyleValue, StyleValue, StyleValue]:
    """Map 2, 3 or 4 values onto (top, right, bottom, left)."""
    if len(values) == 2:
        vertical, horizontal = values
        return vertical, horizontal, vertical, horizontal
    if len(values) == 3:
        top, horizontal, bottom = values
        return top, horizontal, bottom, horizontal
    top, right, bottom, left = values
    return top, right, bottom, left


def _set_edges(style: StyleProperties, longhands, edge: Edge, value: StyleValue) -> None:
    for side, property_id in zip(_EDGE_ORDER, longhands):
        if edge is Edge.ALL or edge is side:
            style.set_property(property_id, value)


def _set_border_width(style: StyleProperties, value: StyleValue, edge: Edge) -> None:
    assert value.is_length(), f"border width must be a length, got {value!r}"
    _set_edges(style, _BOX_LONGHANDS[PropertyID.BORDER_WIDTH], edge, value)


def _set_border_color(style: StyleProperties, value: StyleValue, edge: Edge) -> None:
    assert value.is_color(), f"border color must be a color, got {value!r}"
    _set_edges(style, _BOX_LONGHANDS[PropertyID.BORDER_COLOR], edge, value)


def _set_border_style(style: StyleProperties, value: StyleValue, edge: Edge) -> None:
    assert value.is_identifier(), f"border style must be an identifier, got {value!r}"
    _set_edges(style, _BOX_LONGHANDS[PropertyID.BORDER_STYLE], edge, value)


def _is_background_repeat(value: StyleValue) -> bool:
    return value.is_identifier() and value.to_identifier() in BACKGROUND_REPEAT_VALUES


def _expand_text_decoration(style, property_id, value, context) -> bool:
    if value.to_identifier() in TEXT_DECORATION_LINES:
        return expand(style, PropertyID.TEXT_DECORATION_LINE, value, context)
    logger.debug(f"Unsupported text-decoration value '{value}'")
    return False


def _expand_overflow(style, property_id, value, context) -> bool:
    style.set_property(PropertyID.OVERFLOW_X, value)
    style.set_property(PropertyID.OVERFLOW_Y, value)
    return True


def _expand_border(style, property_id, value, context) -> bool:
    applied = False
    for edge_property in (PropertyID.BORDER_TOP, PropertyID.BORDER_RIGHT,
                          PropertyID.BORDER_BOTTOM, PropertyID.BORDER_LEFT):
        applied = expand(style, edge_property, value, context) or applied
    return applied


def _expand_border_edge(style, property_id, value, context) -> bool:
    edge = _EDGE_OF[property_id]

    if value.is_length():
        _set_border_width(style, value, edge)
        return True
    if value.is_color():
        _set_border_color(style, value, edge)
        return True
    if not (value.is_string() or value.is_identifier()):
        return False

    parts = split_on_whitespace(value.to_string())

    # A lone line style gets the initial width and color
    if len(parts) == 1:
        line_style = parse_line_style(parts[0])
        if line_style is not None:
            _set_border_style(style, line_style, edge)
            _set_border_color(style, ColorStyleValue.black(), edge)
            _set_border_width(style, DEFAULT_BORDER_WIDTH, edge)
            return True

    line_width = None
    color = None
    line_style = None

    for part in parts:
        parsed_width = parse_line_width(part)
        if parsed_width is not None:
            if line_width is not None:
                logger.debug(f"Duplicate border width in '{value}'")
                return False
            line_width = parsed_width
            continue
        parsed_color = parse_color(part)
        if parsed_color is not None:
            if color is not None:
                logger.debug(f"Duplicate border color in '{value}'")
                return False
            color = parsed_color
            continue
        parsed_style = parse_line_style(part)
        if parsed_style is not None:
            if line_style is not None:
                logger.debug(f"Duplicate border style in '{value}'")
                return False
            line_style = parsed_style
            continue

    if line_width is not None:
        _set_border_width(style, line_width, edge)
    if color is not None:
        _set_border_color(style, color, edge)
    if line_style is not None:
        _set_border_style(style, line_style, edge)
    return line_width is not None or color is not None or line_style is not None


def _expand_border_box(style, property_id, value, context) -> bool:
    longhands = _BOX_LONGHANDS[property_id]
    parts = split_on_whitespace(value.to_string()) if value.is_string() else []

    if len(parts) in (2, 3, 4):
        values = [parse_css_value(part, context) for part in parts]
        if any(parsed is None for parsed in values):
            logger.debug(f"Unparseable {property_id.value} value '{value}'")
            return False
        for longhand, edge_value in zip(longhands, _box_edges(values)):
            style.set_property(longhand, edge_value)
        return True

    for longhand in longhands:
        style.set_property(longhand, value)
    return True


def _expand_box_spacing(style, property_id, value, context) -> bool:
    # margin and padding
    longhands = _BOX_LONGHANDS[property_id]

    if value.is_length() or value.to_identifier() is ValueID.AUTO:
        for longhand in longhands:
            style.set_property(longhand, value)
        return True

    if not value.is_string():
        return False

    parts = split_on_whitespace(value.to_string())
    if len(parts) not in (2, 3, 4):
        logger.debug(f"Unsure what to do with CSS {property_id.value} value '{value}'")
        return False

    values = [parse_css_value(part, context) for part in parts]
    if any(parsed is None for parsed in values):
        logger.debug(f"Unparseable {property_id.value} value '{value}'")
        return False

    for longhand, edge_value in zip(longhands, _box_edges(values)):
        style.set_property(longhand, edge_value)
    return True


def _expand_background(style, property_id, value, context) -> bool:
    if value.to_identifier() is ValueID.NONE:
        style.set_property(PropertyID.BACKGROUND_COLOR, ColorStyleValue.transparent())
        return True

    values = _parse_parts(value, context)
    if not values:
        logger.debug(f"Unparseable background value '{value}'")
        return False

    applied = False

    colors = [component for component in values if component.is_color()]
    if len(colors) == 1:
        style.set_property(PropertyID.BACKGROUND_COLOR, colors[0])
        applied = True
    elif colors:
        logger.debug(f"Ignoring colors in background '{value}': more than one given")

    index = 0
    while index < len(values):
        component = values[index]
        if _is_background_repeat(component):
            following = values[index + 1] if index + 1 < len(values) else None
            if following is not None and _is_background_repeat(following):
                applied = expand(style, PropertyID.BACKGROUND_REPEAT_X, component, context, True) or applied
                applied = expand(style, PropertyID.BACKGROUND_REPEAT_Y, following, context, True) or applied
                index += 2
                continue
            applied = expand(style, PropertyID.BACKGROUND_REPEAT, component, context) or applied
        elif component.is_string():
            applied = expand(style, PropertyID.BACKGROUND_IMAGE, component, context) or applied
        index += 1

    return applied


def _expand_background_image(style, property_id, value, context) -> bool:
    if not value.is_string():
        return False

    text = value.to_string().strip()
    if not (text.lower().startswith('url(') and text.endswith(')')):
        logger.debug(f"Ignoring non-url background-image '{text}'")
        return False

    url = text[4:-1].strip()
    if len(url) >= 2 and url[0] == url[-1] and url[0] in ('"', "'"):
        url = url[1:-1]

    if context is not None:
        url = context.complete_url(url)

    style.set_property(PropertyID.BACKGROUND_IMAGE, ImageStyleValue(url))
    return True


def _expand_background_repeat(style, property_id, value, context) -> bool:
    values = _parse_parts(value, context)
    if not values or not all(_is_background_repeat(component) for component in values):
        logger.debug(f"Invalid background-repeat value '{value}'")
        return False

    if len(values) == 1:
        value_id = values[0].to_identifier()
        if value_id is ValueID.REPEAT_X:
            repeat_x = IdentifierStyleValue(ValueID.REPEAT)
            repeat_y = IdentifierStyleValue(ValueID.NO_REPEAT)
        elif value_id is ValueID.REPEAT_Y:
            repeat_x = IdentifierStyleValue(ValueID.NO_REPEAT)
            repeat_y = IdentifierStyleValue(ValueID.REPEAT)
        else:
            repeat_x = repeat_y = values[0]
    elif len(values) == 2:
        repeat_x, repeat_y = values
    else:
        return False

    applied_x = expand(style, PropertyID.BACKGROUND_REPEAT_X, repeat_x, context, True)
    applied_y = expand(style, PropertyID.BACKGROUND_REPEAT_Y, repeat_y, context, True)
    return applied_x or applied_y


def _expand_background_repeat_axis(style, property_id, value, context) -> bool:
    # repeat-x / repeat-y only make sense on the two-axis shorthand
    if value.to_identifier() in (ValueID.REPEAT_X, ValueID.REPEAT_Y):
        return False
    style.set_property(property_id, value)
    return True


def _expand_list_style(style, property_id, value, context) -> bool:
    parts = split_on_whitespace(value.to_string())
    if not parts:
        return False
    list_style_type = parse_css_value(parts[0], context)
    if list_style_type is None:
        return False
    style.set_property(PropertyID.LIST_STYLE_TYPE, list_style_type)
    return True


def _expand_font(style, property_id, value, context) -> bool:
    # TODO: pick up font-style, font-variant and font-weight ahead of the size
    parts = split_on_whitespace(value.to_string())
    if len(parts) < 2:
        return False

    size_parts = parts[0].split('/')
    line_height = None
    if len(size_parts) == 2:
        size = parse_css_value(size_parts[0], context)
        line_height = parse_css_value(size_parts[1], context)
        if size is None or line_height is None:
            return False
    elif len(size_parts) == 1:
        size = parse_css_value(parts[0], context)
        if size is None:
            return False
    else:
        return False

    family = parse_css_value(parts[1], context)
    if family is None:
        return False

    style.set_property(PropertyID.FONT_SIZE, size)
    if line_height is not None:
        style.set_property(PropertyID.LINE_HEIGHT, line_height)
    style.set_property(PropertyID.FONT_FAMILY, family)
    return True


Expander = Callable[[StyleProperties, PropertyID, StyleValue, object], bool]

_EXPANDERS: Dict[PropertyID, Expander] = {
    PropertyID.TEXT_DECORATION: _expand_text_decoration,
    PropertyID.OVERFLOW: _expand_overflow,
    PropertyID.BORDER: _expand_border,
    PropertyID.BORDER_TOP: _expand_border_edge,
    PropertyID.BORDER_RIGHT: _expand_border_edge,
    PropertyID.BORDER_BOTTOM: _expand_border_edge,
    PropertyID.BORDER_LEFT: _expand_border_edge,
    PropertyID.BORDER_STYLE: _expand_border_box,
    PropertyID.BORDER_WIDTH: _expand_border_box,
    PropertyID.BORDER_COLOR: _expand_border_box,
    PropertyID.BACKGROUND: _expand_background,
    PropertyID.BACKGROUND_IMAGE: _expand_background_image,
    PropertyID.BACKGROUND_REPEAT: _expand_background_repeat,
    PropertyID.BACKGROUND_REPEAT_X: _expand_background_repeat_axis,
    PropertyID.BACKGROUND_REPEAT_Y: _expand_background_repeat_axis,
    PropertyID.MARGIN: _expand_box_spacing,
    PropertyID.PADDING: _expand_box_spacing,
    PropertyID.LIST_STYLE: _expand_list_style,
    PropertyID.FONT: _expand_font,
}

_unhandled = (SHORTHAND_PROPERTIES | PSEUDO_PROPERTIES) - set(_EXPANDERS)
if _unhandled:
    raise RuntimeError(
        "Shorthand properties without an expander: "
        + ', '.join(sorted(property_id.value for property_id in _unhandled)))

"""
Single-value CSS parsing.

Turns the text of one declaration value (or one whitespace-separated part of a
shorthand) into a typed StyleValue. Built on tinycss2's tokenizer and its
CSS Color Level 3 parser.
"""

import logging
from typing import List, Optional

import tinycss2
import tinycss2.color3

from .values import (
    ColorStyleValue, IdentifierStyleValue, LengthStyleValue, StringStyleValue,
    StyleValue, ValueID,
)

logger = logging.getLogger(__name__)

LENGTH_UNITS = {
    'px', 'em', 'rem', 'ex', 'ch', 'vw', 'vh', 'vmin', 'vmax',
    'cm', 'mm', 'in', 'pt', 'pc', 'q',
}

LINE_STYLES = {
    ValueID.NONE, ValueID.HIDDEN, ValueID.DOTTED, ValueID.DASHED, ValueID.SOLID,
    ValueID.DOUBLE, ValueID.GROOVE, ValueID.RIDGE, ValueID.INSET, ValueID.OUTSET,
}

LINE_WIDTH_KEYWORDS = {
    ValueID.THIN: 1,
    ValueID.MEDIUM: 3,
    ValueID.THICK: 5,
}

_INSIGNIFICANT = ('whitespace', 'comment')


def split_on_whitespace(text: str) -> List[str]:
    """
    Split a value into its whitespace-separated parts, dropping empty ones.

    Only top-level whitespace separates parts, so function arguments such as
    ``rgb(255, 0, 0)`` stay in one part.
    """
    if not text:
        return []

    tokens = tinycss2.parse_component_value_list(text)
    # Error tokens cannot always be serialised; split the raw text and let
    # the value parser reject the broken part
    if any(token.type == 'error' for token in tokens):
        return text.split()

    parts = []
    current = []
    for token in tokens:
        if token.type in _INSIGNIFICANT:
            if current:
                parts.append(tinycss2.serialize(current))
                current = []
        else:
            current.append(token)
    if current:
        parts.append(tinycss2.serialize(current))
    return parts


def _components(text: str) -> Optional[list]:
    tokens = tinycss2.parse_component_value_list(text)
    significant = [token for token in tokens if token.type not in _INSIGNIFICANT]
    if any(token.type == 'error' for token in significant):
        return None
    return significant


def _color_from_token(token) -> Optional[ColorStyleValue]:
    rgba = tinycss2.color3.parse_color(token)
    # parse_color returns the string 'currentColor' for that keyword
    if rgba is None or isinstance(rgba, str):
        return None
    return ColorStyleValue(rgba.red * 255, rgba.green * 255, rgba.blue * 255, rgba.alpha)


def parse_css_value(text: str, context=None) -> Optional[StyleValue]:
    """
    Parse the text of a CSS value.

    Args:
        text: The value text, e.g. ``12px``, ``red`` or ``1px solid black``
        context: Unused; accepted so callers can pass their parsing context

    Returns:
        A typed value for a single component, a StringStyleValue for
        anything made of several components, or None if the text is empty
        or contains a token the tokenizer rejects
    """
    if text is None:
        return None
    text = text.strip()
    if not text:
        return None

    components = _components(text)
    if components is None:
        logger.debug(f"Rejecting unparseable CSS value '{text}'")
        return None
    if len(components) != 1:
        return StringStyleValue(text)

    token = components[0]

    if token.type == 'dimension':
        if token.lower_unit in LENGTH_UNITS:
            return LengthStyleValue(token.value, token.lower_unit)
        return StringStyleValue(text)

    if token.type == 'percentage':
        return LengthStyleValue(token.value, '%')

    if token.type == 'number':
        if token.value == 0:
            return LengthStyleValue.px(0)
        return StringStyleValue(text)

    color = _color_from_token(token)
    if color is not None:
        return color

    if token.type == 'ident':
        value_id = ValueID.from_keyword(token.lower_value)
        if value_id is not None:
            return IdentifierStyleValue(value_id)

    return StringStyleValue(text)


def parse_color(text: str) -> Optional[ColorStyleValue]:
    """Parse text as a colour, or return None."""
    value = parse_css_value(text)
    if value is not None and value.is_color():
        return value
    return None


def parse_line_style(text: str) -> Optional[IdentifierStyleValue]:
    """Parse text as a border line style keyword, or return None."""
    value = parse_css_value(text)
    if value is not None and value.is_identifier() and value.to_identifier() in LINE_STYLES:
        return value
    return None


def parse_line_width(text: str) -> Optional[LengthStyleValue]:
    """Parse text as a border width; thin/medium/thick become pixel lengths."""
    value = parse_css_value(text)
    if value is None:
        return None
    if value.is_length():
        return value
    if value.is_identifier() and value.to_identifier() in LINE_WIDTH_KEYWORDS:
        return LengthStyleValue.px(LINE_WIDTH_KEYWORDS[value.to_identifier()])
    return None

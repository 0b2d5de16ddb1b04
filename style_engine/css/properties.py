"""
CSS property identifiers and the StyleProperties map.
"""

from enum import Enum
from typing import Callable, Dict, Iterator, Optional

from .values import StyleValue


class PropertyID(Enum):
    """Every CSS property known to the style engine, keyed by its CSS name."""
    INVALID = ''

    # Background
    BACKGROUND = 'background'
    BACKGROUND_COLOR = 'background-color'
    BACKGROUND_IMAGE = 'background-image'
    BACKGROUND_REPEAT = 'background-repeat'
    BACKGROUND_REPEAT_X = 'background-repeat-x'
    BACKGROUND_REPEAT_Y = 'background-repeat-y'

    # Border
    BORDER = 'border'
    BORDER_TOP = 'border-top'
    BORDER_RIGHT = 'border-right'
    BORDER_BOTTOM = 'border-bottom'
    BORDER_LEFT = 'border-left'
    BORDER_COLOR = 'border-color'
    BORDER_STYLE = 'border-style'
    BORDER_WIDTH = 'border-width'
    BORDER_TOP_COLOR = 'border-top-color'
    BORDER_RIGHT_COLOR = 'border-right-color'
    BORDER_BOTTOM_COLOR = 'border-bottom-color'
    BORDER_LEFT_COLOR = 'border-left-color'
    BORDER_TOP_STYLE = 'border-top-style'
    BORDER_RIGHT_STYLE = 'border-right-style'
    BORDER_BOTTOM_STYLE = 'border-bottom-style'
    BORDER_LEFT_STYLE = 'border-left-style'
    BORDER_TOP_WIDTH = 'border-top-width'
    BORDER_RIGHT_WIDTH = 'border-right-width'
    BORDER_BOTTOM_WIDTH = 'border-bottom-width'
    BORDER_LEFT_WIDTH = 'border-left-width'
    BORDER_COLLAPSE = 'border-collapse'
    BORDER_SPACING = 'border-spacing'
    BORDER_RADIUS = 'border-radius'

    # Box model
    MARGIN = 'margin'
    MARGIN_TOP = 'margin-top'
    MARGIN_RIGHT = 'margin-right'
    MARGIN_BOTTOM = 'margin-bottom'
    MARGIN_LEFT = 'margin-left'
    PADDING = 'padding'
    PADDING_TOP = 'padding-top'
    PADDING_RIGHT = 'padding-right'
    PADDING_BOTTOM = 'padding-bottom'
    PADDING_LEFT = 'padding-left'
    WIDTH = 'width'
    HEIGHT = 'height'
    MIN_WIDTH = 'min-width'
    MIN_HEIGHT = 'min-height'
    MAX_WIDTH = 'max-width'
    MAX_HEIGHT = 'max-height'

    # Layout
    DISPLAY = 'display'
    POSITION = 'position'
    TOP = 'top'
    RIGHT = 'right'
    BOTTOM = 'bottom'
    LEFT = 'left'
    FLOAT = 'float'
    CLEAR = 'clear'
    Z_INDEX = 'z-index'
    OVERFLOW = 'overflow'
    OVERFLOW_X = 'overflow-x'
    OVERFLOW_Y = 'overflow-y'
    VISIBILITY = 'visibility'
    VERTICAL_ALIGN = 'vertical-align'
    OPACITY = 'opacity'
    CURSOR = 'cursor'

    # Text
    COLOR = 'color'
    TEXT_ALIGN = 'text-align'
    TEXT_DECORATION = 'text-decoration'
    TEXT_DECORATION_LINE = 'text-decoration-line'
    TEXT_INDENT = 'text-indent'
    TEXT_TRANSFORM = 'text-transform'
    LETTER_SPACING = 'letter-spacing'
    WORD_SPACING = 'word-spacing'
    LINE_HEIGHT = 'line-height'
    WHITE_SPACE = 'white-space'

    # Fonts
    FONT = 'font'
    FONT_FAMILY = 'font-family'
    FONT_SIZE = 'font-size'
    FONT_STYLE = 'font-style'
    FONT_VARIANT = 'font-variant'
    FONT_WEIGHT = 'font-weight'

    # Lists
    LIST_STYLE = 'list-style'
    LIST_STYLE_IMAGE = 'list-style-image'
    LIST_STYLE_POSITION = 'list-style-position'
    LIST_STYLE_TYPE = 'list-style-type'

    @classmethod
    def from_name(cls, name: str) -> 'PropertyID':
        """
        Look up a property by its CSS name.

        Args:
            name: Property name, any case

        Returns:
            The PropertyID, or PropertyID.INVALID for unknown names
        """
        if not name:
            return cls.INVALID
        return _PROPERTY_NAMES.get(name.strip().lower(), cls.INVALID)


_PROPERTY_NAMES = {pid.value: pid for pid in PropertyID if pid is not PropertyID.INVALID}

# Longhands that only exist as expansion targets of other properties
PSEUDO_PROPERTIES = frozenset({
    PropertyID.BACKGROUND_REPEAT_X,
    PropertyID.BACKGROUND_REPEAT_Y,
})

SHORTHAND_PROPERTIES = frozenset({
    PropertyID.TEXT_DECORATION,
    PropertyID.OVERFLOW,
    PropertyID.BORDER,
    PropertyID.BORDER_TOP,
    PropertyID.BORDER_RIGHT,
    PropertyID.BORDER_BOTTOM,
    PropertyID.BORDER_LEFT,
    PropertyID.BORDER_STYLE,
    PropertyID.BORDER_WIDTH,
    PropertyID.BORDER_COLOR,
    PropertyID.BACKGROUND,
    PropertyID.BACKGROUND_REPEAT,
    PropertyID.MARGIN,
    PropertyID.PADDING,
    PropertyID.LIST_STYLE,
    PropertyID.FONT,
})


def is_pseudo_property(property_id: PropertyID) -> bool:
    return property_id in PSEUDO_PROPERTIES


def is_shorthand_property(property_id: PropertyID) -> bool:
    return property_id in SHORTHAND_PROPERTIES


class StyleProperties:
    """
    The result of a style resolution: one value per property.

    Writing a property always replaces its previous value. Iteration order
    carries no meaning.
    """

    def __init__(self):
        self._properties: Dict[PropertyID, StyleValue] = {}

    def set_property(self, property_id: PropertyID, value: StyleValue) -> None:
        self._properties[property_id] = value

    def property(self, property_id: PropertyID) -> Optional[StyleValue]:
        """Return the value of a property, or None if it was never set."""
        return self._properties.get(property_id)

    def for_each_property(self, callback: Callable[[PropertyID, StyleValue], None]) -> None:
        for property_id, value in list(self._properties.items()):
            callback(property_id, value)

    def copy(self) -> 'StyleProperties':
        clone = StyleProperties()
        clone._properties = dict(self._properties)
        return clone

    def to_dict(self) -> Dict[str, str]:
        """Serialise to a ``{css-name: css-text}`` dictionary."""
        return {property_id.value: value.to_string()
                for property_id, value in self._properties.items()}

    def __contains__(self, property_id: PropertyID) -> bool:
        return property_id in self._properties

    def __iter__(self) -> Iterator[PropertyID]:
        return iter(list(self._properties))

    def __len__(self) -> int:
        return len(self._properties)

    def __repr__(self) -> str:
        return f"StyleProperties({len(self._properties)} properties)"

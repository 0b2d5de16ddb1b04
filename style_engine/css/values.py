"""
Computed style values.
This module defines the immutable value objects stored in a StyleProperties map.
"""

from enum import Enum
from typing import Optional


class ValueID(Enum):
    """CSS keywords understood by the style engine, keyed by their CSS spelling."""
    INVALID = ''

    # Generic
    NONE = 'none'
    AUTO = 'auto'
    NORMAL = 'normal'
    INHERIT = 'inherit'
    INITIAL = 'initial'
    CURRENTCOLOR = 'currentcolor'

    # Text decoration
    UNDERLINE = 'underline'
    OVERLINE = 'overline'
    LINE_THROUGH = 'line-through'
    BLINK = 'blink'

    # Background repeat
    REPEAT = 'repeat'
    NO_REPEAT = 'no-repeat'
    REPEAT_X = 'repeat-x'
    REPEAT_Y = 'repeat-y'
    ROUND = 'round'
    SPACE = 'space'

    # Line styles
    HIDDEN = 'hidden'
    DOTTED = 'dotted'
    DASHED = 'dashed'
    SOLID = 'solid'
    DOUBLE = 'double'
    GROOVE = 'groove'
    RIDGE = 'ridge'
    INSET = 'inset'
    OUTSET = 'outset'

    # Line widths
    THIN = 'thin'
    MEDIUM = 'medium'
    THICK = 'thick'

    # Display
    BLOCK = 'block'
    INLINE = 'inline'
    INLINE_BLOCK = 'inline-block'
    LIST_ITEM = 'list-item'
    TABLE = 'table'
    TABLE_ROW_GROUP = 'table-row-group'
    TABLE_HEADER_GROUP = 'table-header-group'
    TABLE_FOOTER_GROUP = 'table-footer-group'
    TABLE_ROW = 'table-row'
    TABLE_CELL = 'table-cell'
    TABLE_CAPTION = 'table-caption'
    TABLE_COLUMN = 'table-column'
    TABLE_COLUMN_GROUP = 'table-column-group'
    FLEX = 'flex'

    # Overflow / visibility
    VISIBLE = 'visible'
    SCROLL = 'scroll'
    COLLAPSE = 'collapse'
    SEPARATE = 'separate'

    # Position / float
    STATIC = 'static'
    RELATIVE = 'relative'
    ABSOLUTE = 'absolute'
    FIXED = 'fixed'
    LEFT = 'left'
    RIGHT = 'right'
    BOTH = 'both'

    # Text
    CENTER = 'center'
    JUSTIFY = 'justify'
    UPPERCASE = 'uppercase'
    LOWERCASE = 'lowercase'
    CAPITALIZE = 'capitalize'
    PRE = 'pre'
    NOWRAP = 'nowrap'
    PRE_WRAP = 'pre-wrap'
    PRE_LINE = 'pre-line'
    TOP = 'top'
    MIDDLE = 'middle'
    BOTTOM = 'bottom'
    BASELINE = 'baseline'
    SUB = 'sub'
    SUPER = 'super'

    # Fonts
    BOLD = 'bold'
    BOLDER = 'bolder'
    LIGHTER = 'lighter'
    ITALIC = 'italic'
    OBLIQUE = 'oblique'
    SMALL_CAPS = 'small-caps'
    XX_SMALL = 'xx-small'
    X_SMALL = 'x-small'
    SMALL = 'small'
    LARGE = 'large'
    X_LARGE = 'x-large'
    XX_LARGE = 'xx-large'
    SMALLER = 'smaller'
    LARGER = 'larger'
    SERIF = 'serif'
    SANS_SERIF = 'sans-serif'
    MONOSPACE = 'monospace'
    CURSIVE = 'cursive'
    FANTASY = 'fantasy'

    # Lists
    DISC = 'disc'
    CIRCLE = 'circle'
    SQUARE = 'square'
    DECIMAL = 'decimal'
    LOWER_ALPHA = 'lower-alpha'
    UPPER_ALPHA = 'upper-alpha'
    LOWER_ROMAN = 'lower-roman'
    UPPER_ROMAN = 'upper-roman'
    OUTSIDE = 'outside'
    INSIDE = 'inside'

    @classmethod
    def from_keyword(cls, keyword: str) -> Optional['ValueID']:
        """
        Look up a keyword.

        Args:
            keyword: CSS keyword text, any case

        Returns:
            The matching ValueID, or None if the keyword is unknown
        """
        if not keyword:
            return None
        return _KEYWORDS.get(keyword.lower())


_KEYWORDS = {value_id.value: value_id for value_id in ValueID if value_id is not ValueID.INVALID}


class StyleValueType(Enum):
    """Discriminant of a StyleValue."""
    LENGTH = 'length'
    COLOR = 'color'
    IDENTIFIER = 'identifier'
    STRING = 'string'
    IMAGE = 'image'


class StyleValue:
    """
    Base class for computed style values.

    Values are immutable once constructed and may be shared between any
    number of StyleProperties maps.
    """

    __slots__ = ()

    type: StyleValueType = None

    def is_length(self) -> bool:
        return self.type is StyleValueType.LENGTH

    def is_color(self) -> bool:
        return self.type is StyleValueType.COLOR

    def is_identifier(self) -> bool:
        return self.type is StyleValueType.IDENTIFIER

    def is_string(self) -> bool:
        return self.type is StyleValueType.STRING

    def is_image(self) -> bool:
        return self.type is StyleValueType.IMAGE

    def to_identifier(self) -> ValueID:
        """Return the keyword of an identifier value, ValueID.INVALID otherwise."""
        return ValueID.INVALID

    def to_string(self) -> str:
        raise NotImplementedError

    def _key(self) -> tuple:
        raise NotImplementedError

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other) -> bool:
        if not isinstance(other, StyleValue):
            return NotImplemented
        return self.type is other.type and self._key() == other._key()

    def __hash__(self) -> int:
        return hash((self.type, self._key()))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string()!r})"


def _init(instance: StyleValue, **fields) -> None:
    for name, value in fields.items():
        object.__setattr__(instance, name, value)


class LengthStyleValue(StyleValue):
    """A length or percentage, e.g. ``12px``, ``1.5em``, ``50%``."""

    __slots__ = ('_value', '_unit')

    type = StyleValueType.LENGTH

    def __init__(self, value: float, unit: str = 'px'):
        _init(self, _value=float(value), _unit=unit.lower())

    @classmethod
    def px(cls, value: float) -> 'LengthStyleValue':
        return cls(value, 'px')

    @property
    def value(self) -> float:
        return self._value

    @property
    def unit(self) -> str:
        return self._unit

    def to_string(self) -> str:
        number = int(self._value) if self._value.is_integer() else self._value
        return f"{number}{self._unit}"

    def _key(self) -> tuple:
        return (self._value, self._unit)


class ColorStyleValue(StyleValue):
    """An RGBA colour; channels are 0-255 integers, alpha is 0.0-1.0."""

    __slots__ = ('_red', '_green', '_blue', '_alpha')

    type = StyleValueType.COLOR

    def __init__(self, red: int, green: int, blue: int, alpha: float = 1.0):
        _init(self,
              _red=min(255, max(0, int(round(red)))),
              _green=min(255, max(0, int(round(green)))),
              _blue=min(255, max(0, int(round(blue)))),
              _alpha=min(1.0, max(0.0, float(alpha))))

    @classmethod
    def transparent(cls) -> 'ColorStyleValue':
        return cls(0, 0, 0, 0.0)

    @classmethod
    def black(cls) -> 'ColorStyleValue':
        return cls(0, 0, 0)

    @property
    def red(self) -> int:
        return self._red

    @property
    def green(self) -> int:
        return self._green

    @property
    def blue(self) -> int:
        return self._blue

    @property
    def alpha(self) -> float:
        return self._alpha

    def to_string(self) -> str:
        # Single token on purpose: shorthands split their input on whitespace
        if self._alpha == 0.0:
            return 'transparent'
        if self._alpha == 1.0:
            return f"#{self._red:02x}{self._green:02x}{self._blue:02x}"
        return f"rgba({self._red},{self._green},{self._blue},{self._alpha:g})"

    def _key(self) -> tuple:
        return (self._red, self._green, self._blue, self._alpha)


class IdentifierStyleValue(StyleValue):
    """A CSS keyword such as ``none`` or ``solid``."""

    __slots__ = ('_id',)

    type = StyleValueType.IDENTIFIER

    def __init__(self, value_id: ValueID):
        _init(self, _id=value_id)

    @property
    def id(self) -> ValueID:
        return self._id

    def to_identifier(self) -> ValueID:
        return self._id

    def to_string(self) -> str:
        return self._id.value

    def _key(self) -> tuple:
        return (self._id,)


class StringStyleValue(StyleValue):
    """Raw value text that did not parse as a single typed component."""

    __slots__ = ('_text',)

    type = StyleValueType.STRING

    def __init__(self, text: str):
        _init(self, _text=text)

    @property
    def text(self) -> str:
        return self._text

    def to_string(self) -> str:
        return self._text

    def _key(self) -> tuple:
        return (self._text,)


class ImageStyleValue(StyleValue):
    """An image reference whose URL has already been resolved by the document."""

    __slots__ = ('_url',)

    type = StyleValueType.IMAGE

    def __init__(self, url: str):
        _init(self, _url=url)

    @property
    def url(self) -> str:
        return self._url

    def to_string(self) -> str:
        return f"url({self._url})"

    def _key(self) -> tuple:
        return (self._url,)

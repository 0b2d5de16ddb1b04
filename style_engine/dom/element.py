"""
Element implementation for the DOM.
This module implements HTML elements as seen by the style engine.
"""

import re
from typing import Dict, Optional, Set

from ..css.parser import CSSParser
from ..css.properties import PropertyID, StyleProperties
from ..css.stylesheet import StyleDeclaration
from ..css.value_parser import parse_color, parse_css_value
from ..css.values import ColorStyleValue, IdentifierStyleValue, LengthStyleValue, ValueID
from .node import Node, NodeType

_LEGACY_HEX_COLOR = re.compile(r'^[0-9a-fA-F]{6}$')

_BGCOLOR_ELEMENTS = {'body', 'table', 'thead', 'tbody', 'tfoot', 'tr', 'td', 'th'}
_ALIGN_ELEMENTS = {'p', 'div', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'td', 'th', 'tr', 'caption'}
_DIMENSION_ELEMENTS = {'img', 'table', 'td', 'th', 'iframe', 'canvas', 'video'}
_ALIGN_VALUES = {ValueID.LEFT, ValueID.RIGHT, ValueID.CENTER, ValueID.JUSTIFY}


def parse_legacy_color(text: str) -> Optional[ColorStyleValue]:
    """
    Parse a color from an HTML attribute such as ``bgcolor``.

    Accepts anything CSS accepts, plus six hex digits without a leading ``#``.
    """
    if not text:
        return None
    text = text.strip()
    color = parse_color(text)
    if color is None and _LEGACY_HEX_COLOR.match(text):
        color = parse_color(f"#{text}")
    return color


def parse_dimension(text: str) -> Optional[LengthStyleValue]:
    """Parse an HTML ``width``/``height`` attribute; bare numbers are pixels."""
    if not text:
        return None
    text = text.strip()
    if text.isdigit():
        return LengthStyleValue.px(int(text))
    value = parse_css_value(text)
    if value is not None and value.is_length():
        return value
    return None


class Element(Node):
    """
    Element node implementation for the DOM.

    Besides the attribute API, an element exposes what the style resolver
    needs: its parent element, its inline style, its presentational hints
    and a slot for its resolved style.
    """

    def __init__(self, tag_name: str, owner_document: Optional['Document'] = None):
        """
        Initialize a new Element.

        Args:
            tag_name: Name of the element tag (e.g., "div", "span")
            owner_document: The document that owns this element
        """
        super().__init__(NodeType.ELEMENT_NODE, owner_document)

        self.tag_name = tag_name.lower()
        self.node_name = tag_name.upper()

        self.attributes: Dict[str, str] = {}

        # Style state
        self._inline_style: Optional[StyleDeclaration] = None
        self._inline_style_dirty = True
        self._specified_css_values: Optional[StyleProperties] = None

    @property
    def id(self) -> str:
        return self.get_attribute('id') or ""

    @property
    def class_list(self) -> Set[str]:
        """Get the set of classes applied to this element."""
        return {cls for cls in (self.get_attribute('class') or "").split() if cls}

    def has_attribute(self, name: str) -> bool:
        return name.lower() in self.attributes

    def get_attribute(self, name: str) -> Optional[str]:
        """
        Get the value of an attribute.

        Args:
            name: The attribute name

        Returns:
            The attribute value, or None if the attribute doesn't exist
        """
        return self.attributes.get(name.lower())

    def set_attribute(self, name: str, value: str) -> None:
        name = name.lower()
        self.attributes[name] = value
        if name == 'style':
            self._inline_style_dirty = True

    def remove_attribute(self, name: str) -> None:
        name = name.lower()
        self.attributes.pop(name, None)
        if name == 'style':
            self._inline_style_dirty = True

    def parent_element(self) -> Optional['Element']:
        parent = self.parent_node
        if parent is not None and parent.node_type == NodeType.ELEMENT_NODE:
            return parent
        return None

    @property
    def previous_element_sibling(self) -> Optional['Element']:
        sibling = self.previous_sibling
        while sibling is not None and sibling.node_type != NodeType.ELEMENT_NODE:
            sibling = sibling.previous_sibling
        return sibling

    @property
    def next_element_sibling(self) -> Optional['Element']:
        sibling = self.next_sibling
        while sibling is not None and sibling.node_type != NodeType.ELEMENT_NODE:
            sibling = sibling.next_sibling
        return sibling

    def specified_css_values(self) -> Optional[StyleProperties]:
        """The style last resolved for this element, or None."""
        return self._specified_css_values

    def set_specified_css_values(self, style: Optional[StyleProperties]) -> None:
        self._specified_css_values = style

    def inline_style(self) -> Optional[StyleDeclaration]:
        """
        Get the declarations of the ``style`` attribute.

        Returns:
            The parsed declaration block, or None if there is no usable
            style attribute
        """
        if self._inline_style_dirty:
            style_attr = self.get_attribute('style')
            declaration = CSSParser().parse_declaration(style_attr) if style_attr else None
            self._inline_style = declaration if declaration else None
            self._inline_style_dirty = False
        return self._inline_style

    def apply_presentational_hints(self, style: StyleProperties) -> None:
        """
        Map legacy presentational attributes onto style properties.

        Args:
            style: The style being resolved for this element
        """
        tag = self.tag_name

        if tag in _BGCOLOR_ELEMENTS:
            color = parse_legacy_color(self.get_attribute('bgcolor'))
            if color is not None:
                style.set_property(PropertyID.BACKGROUND_COLOR, color)

        if tag == 'body':
            color = parse_legacy_color(self.get_attribute('text'))
            if color is not None:
                style.set_property(PropertyID.COLOR, color)

        if tag == 'font':
            color = parse_legacy_color(self.get_attribute('color'))
            if color is not None:
                style.set_property(PropertyID.COLOR, color)

        if tag in _ALIGN_ELEMENTS:
            align = ValueID.from_keyword((self.get_attribute('align') or '').strip())
            if align in _ALIGN_VALUES:
                style.set_property(PropertyID.TEXT_ALIGN, IdentifierStyleValue(align))

        if tag in _DIMENSION_ELEMENTS:
            width = parse_dimension(self.get_attribute('width'))
            if width is not None:
                style.set_property(PropertyID.WIDTH, width)
            height = parse_dimension(self.get_attribute('height'))
            if height is not None:
                style.set_property(PropertyID.HEIGHT, height)

    @property
    def text_content(self) -> str:
        return ''.join(child.text_content for child in self.child_nodes)

    def __repr__(self):
        return f"<{self.tag_name}>"

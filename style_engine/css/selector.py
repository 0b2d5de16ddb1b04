"""
CSS Selector support.
This module parses selectors with cssselect and matches them against DOM elements.
"""

import logging
from typing import List, Optional, Tuple

import cssselect
from cssselect.parser import parse_series

from ..errors import SelectorParseError

logger = logging.getLogger(__name__)

# Dynamic pseudo-classes depend on user interaction, which a static style pass never sees
DYNAMIC_PSEUDO_CLASSES = {'hover', 'active', 'focus', 'focus-within', 'focus-visible', 'visited'}


class Selector:
    """
    A single complex selector, e.g. ``ul > li.item:first-child``.

    A rule carries one Selector per comma-separated entry of its selector list.
    """

    def __init__(self, parsed: cssselect.parser.Selector, text: Optional[str] = None):
        """
        Initialize a selector.

        Args:
            parsed: The selector as returned by cssselect.parse
            text: Source text of the selector, used for debugging output
        """
        self._parsed = parsed
        self._specificity: Tuple[int, int, int] = tuple(parsed.specificity())
        self.text = text if text is not None else parsed.canonical()

    @property
    def pseudo_element(self) -> Optional[str]:
        return self._parsed.pseudo_element

    def specificity(self) -> Tuple[int, int, int]:
        """Return the (ids, classes, types) weight of this selector."""
        return self._specificity

    def matches(self, element) -> bool:
        """
        Check whether an element matches this selector.

        Args:
            element: The element to check

        Returns:
            True if the element matches, False otherwise
        """
        # Styles for ::before and friends are not part of an element's own style
        if self._parsed.pseudo_element is not None:
            return False
        return _matches_tree(element, self._parsed.parsed_tree)

    def __repr__(self):
        return f"Selector({self.text!r}, specificity={self._specificity})"


def parse_selector_list(selector_text: str) -> List[Selector]:
    """
    Parse a comma-separated selector list.

    Args:
        selector_text: The selector text to parse

    Returns:
        One Selector per entry, in source order

    Raises:
        SelectorParseError: If cssselect rejects the text
    """
    try:
        parsed = cssselect.parse(selector_text)
    except cssselect.SelectorError as e:
        raise SelectorParseError(f"Invalid selector '{selector_text}': {e}") from e

    if not parsed:
        raise SelectorParseError(f"Empty selector '{selector_text}'")

    return [Selector(selector) for selector in parsed]


def _matches_tree(element, tree) -> bool:
    """
    Match an element against a cssselect parse tree.

    Each simple selector node wraps the rest of its compound selector in
    ``tree.selector``, so matching recurses inward until it reaches the
    type selector.
    """
    if isinstance(tree, cssselect.parser.Element):
        tag = tree.element
        return tag is None or tag == '*' or element.tag_name == tag.lower()

    if isinstance(tree, cssselect.parser.Hash):
        return element.get_attribute('id') == tree.id and _matches_tree(element, tree.selector)

    if isinstance(tree, cssselect.parser.Class):
        return tree.class_name in element.class_list and _matches_tree(element, tree.selector)

    if isinstance(tree, cssselect.parser.Attrib):
        return _matches_attribute(element, tree) and _matches_tree(element, tree.selector)

    if isinstance(tree, cssselect.parser.Pseudo):
        return _matches_pseudo_class(element, tree.ident.lower()) and _matches_tree(element, tree.selector)

    if isinstance(tree, cssselect.parser.Function):
        return _matches_function(element, tree) and _matches_tree(element, tree.selector)

    if isinstance(tree, cssselect.parser.Negation):
        return (_matches_tree(element, tree.selector)
                and not _matches_tree(element, tree.subselector))

    if isinstance(tree, (cssselect.parser.Matching, cssselect.parser.SpecificityAdjustment)):
        return (_matches_tree(element, tree.selector)
                and any(_matches_tree(element, sub) for sub in tree.selector_list))

    if isinstance(tree, cssselect.parser.CombinedSelector):
        return _matches_combinator(element, tree)

    logger.debug(f"Unsupported selector construct: {type(tree).__name__}")
    return False


def _matches_combinator(element, tree) -> bool:
    # tree.subselector describes the element itself, tree.selector its context
    if not _matches_tree(element, tree.subselector):
        return False

    combinator = tree.combinator

    if combinator == ' ':
        ancestor = element.parent_element()
        while ancestor is not None:
            if _matches_tree(ancestor, tree.selector):
                return True
            ancestor = ancestor.parent_element()
        return False

    if combinator == '>':
        parent = element.parent_element()
        return parent is not None and _matches_tree(parent, tree.selector)

    if combinator == '+':
        previous = element.previous_element_sibling
        return previous is not None and _matches_tree(previous, tree.selector)

    if combinator == '~':
        sibling = element.previous_element_sibling
        while sibling is not None:
            if _matches_tree(sibling, tree.selector):
                return True
            sibling = sibling.previous_element_sibling
        return False

    logger.debug(f"Unknown combinator: {combinator!r}")
    return False


def _matches_attribute(element, tree) -> bool:
    name = tree.attrib.lower()
    if not element.has_attribute(name):
        return False

    operator = tree.operator
    if operator == 'exists':
        return True

    # cssselect >= 1.2 wraps the value in a Token
    expected = getattr(tree.value, 'value', tree.value) or ''
    actual = element.get_attribute(name) or ''

    if operator == '=':
        return actual == expected
    if operator == '~=':
        return expected in actual.split()
    if operator == '|=':
        return actual == expected or actual.startswith(f"{expected}-")
    if operator == '^=':
        return bool(expected) and actual.startswith(expected)
    if operator == '$=':
        return bool(expected) and actual.endswith(expected)
    if operator == '*=':
        return bool(expected) and expected in actual

    logger.debug(f"Unsupported attribute operator: {operator}")
    return False


def _element_siblings(element) -> list:
    parent = element.parent_node
    if parent is None:
        return [element]
    return parent.children


def _matches_pseudo_class(element, name: str) -> bool:
    if name in DYNAMIC_PSEUDO_CLASSES:
        return False

    if name == 'first-child':
        return _element_siblings(element)[0] is element
    if name == 'last-child':
        return _element_siblings(element)[-1] is element
    if name == 'only-child':
        return len(_element_siblings(element)) == 1
    if name == 'empty':
        return not element.child_nodes
    if name == 'root':
        return element.parent_element() is None
    if name in ('link', 'any-link'):
        return element.tag_name in ('a', 'area', 'link') and element.has_attribute('href')

    logger.debug(f"Unsupported pseudo-class: {name}")
    return False


def _matches_function(element, tree) -> bool:
    name = tree.name.lower()
    if name not in ('nth-child', 'nth-last-child'):
        logger.debug(f"Unsupported functional pseudo-class: {name}")
        return False

    try:
        a, b = parse_series(tree.arguments)
    except (ValueError, TypeError):
        logger.debug(f"Invalid :{name}() arguments")
        return False

    siblings = _element_siblings(element)
    index = next(i for i, sibling in enumerate(siblings) if sibling is element)
    position = index + 1 if name == 'nth-child' else len(siblings) - index

    # position == a*n + b for some n >= 0
    if a == 0:
        return position == b
    return (position - b) % a == 0 and (position - b) // a >= 0

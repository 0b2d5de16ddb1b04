"""
Style resolution.

StyleResolver computes the style of one element at a time:

1. inherited properties from the parent's resolved style
2. presentational hints from the element's attributes
3. matching rules from every active stylesheet, lowest precedence first
4. the element's inline style

Each step writes through the shorthand expander, so later steps overwrite
earlier ones property by property.
"""

import logging
from typing import Iterator, List, Optional, Tuple

from .expander import expand
from .properties import PropertyID, StyleProperties
from .selector import Selector
from .stylesheet import CSSStyleSheet, StyleRule
from .user_agent import UserAgentStyleSheets, user_agent_stylesheets

logger = logging.getLogger(__name__)

INHERITED_PROPERTIES = frozenset({
    PropertyID.BORDER_COLLAPSE,
    PropertyID.BORDER_SPACING,
    PropertyID.COLOR,
    PropertyID.FONT_FAMILY,
    PropertyID.FONT_SIZE,
    PropertyID.FONT_STYLE,
    PropertyID.FONT_VARIANT,
    PropertyID.FONT_WEIGHT,
    PropertyID.LETTER_SPACING,
    PropertyID.LINE_HEIGHT,
    PropertyID.LIST_STYLE,
    PropertyID.LIST_STYLE_IMAGE,
    PropertyID.LIST_STYLE_POSITION,
    PropertyID.LIST_STYLE_TYPE,
    PropertyID.TEXT_ALIGN,
    PropertyID.TEXT_INDENT,
    PropertyID.TEXT_TRANSFORM,
    PropertyID.VISIBILITY,
    PropertyID.WHITE_SPACE,
    PropertyID.WORD_SPACING,
    # Not inherited in CSS, but line boxes pick their decorations up this way
    PropertyID.TEXT_DECORATION_LINE,
})


def is_inherited_property(property_id: PropertyID) -> bool:
    return property_id in INHERITED_PROPERTIES


class MatchingRule:
    """
    A rule that matched an element.

    The three indices record where the rule was found during the scan and
    are the tie-breakers of the cascade order.
    """

    def __init__(self, rule: StyleRule, style_sheet_index: int, rule_index: int, selector_index: int):
        self.rule = rule
        self.style_sheet_index = style_sheet_index
        self.rule_index = rule_index
        self.selector_index = selector_index

    @property
    def selector(self) -> Selector:
        """The selector that matched."""
        return self.rule.selectors[self.selector_index]

    def specificity(self) -> Tuple[int, int, int]:
        return self.selector.specificity()

    def __repr__(self):
        return (f"MatchingRule({self.selector.text!r}, sheet={self.style_sheet_index}, "
                f"rule={self.rule_index}, selector={self.selector_index})")


def cascade_priority(match: MatchingRule) -> Tuple[Tuple[int, int, int], int, int]:
    """Sort key: specificity, then stylesheet index, then rule index."""
    return (match.specificity(), match.style_sheet_index, match.rule_index)


def sort_matching_rules(matching_rules: List[MatchingRule]) -> None:
    """Sort matches in place into ascending cascade order."""
    matching_rules.sort(key=cascade_priority)


class StyleResolver:
    """
    Resolves the style of elements of one document.

    Args:
        document: The document whose stylesheets and quirks flag are used
        user_agent_sheets: Shared user-agent stylesheets; the process-wide
            instance when omitted
    """

    def __init__(self, document, user_agent_sheets: Optional[UserAgentStyleSheets] = None):
        self._document = document
        self._user_agent_sheets = user_agent_sheets or user_agent_stylesheets()

    @property
    def document(self):
        return self._document

    def style_sheets(self) -> Iterator[CSSStyleSheet]:
        """Yield active stylesheets in cascade order."""
        yield self._user_agent_sheets.default_stylesheet()
        if self._document.in_quirks_mode():
            yield self._user_agent_sheets.quirks_mode_stylesheet()
        yield from self._document.style_sheets()

    def collect_matching_rules(self, element) -> List[MatchingRule]:
        """
        Find every rule with a selector matching the element.

        Args:
            element: The element to match

        Returns:
            One MatchingRule per matching rule, in scan order
        """
        media_type = getattr(self._document, 'media_type', 'screen')
        matching_rules = []

        for style_sheet_index, sheet in enumerate(self.style_sheets()):
            for rule_index, rule in enumerate(sheet.effective_style_rules(media_type)):
                for selector_index, selector in enumerate(rule.selectors):
                    if selector.matches(element):
                        matching_rules.append(
                            MatchingRule(rule, style_sheet_index, rule_index, selector_index))
                        break

        return matching_rules

    def resolve_style(self, element) -> StyleProperties:
        """
        Compute the style of an element.

        The parent's style must already have been resolved and stored on the
        parent for inheritance to happen.

        Args:
            element: The element to style

        Returns:
            A new StyleProperties holding only longhand properties
        """
        style = StyleProperties()

        parent = element.parent_element()
        parent_style = parent.specified_css_values() if parent is not None else None
        if parent_style is not None:
            for property_id in parent_style:
                if is_inherited_property(property_id):
                    expand(style, property_id, parent_style.property(property_id), self._document)

        element.apply_presentational_hints(style)

        matching_rules = self.collect_matching_rules(element)
        sort_matching_rules(matching_rules)

        for match in matching_rules:
            for declared in match.rule.declaration.properties:
                expand(style, declared.property_id, declared.value, self._document)

        inline_style = element.inline_style()
        if inline_style is not None:
            for declared in inline_style.properties:
                expand(style, declared.property_id, declared.value, self._document)

        logger.debug(f"Resolved {len(style)} properties for <{element.tag_name}> "
                     f"from {len(matching_rules)} matching rules")
        return style

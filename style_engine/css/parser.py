"""
CSS Parser implementation.
This module parses stylesheets and inline style attributes into the style engine's rule model.
"""

import logging
from typing import List, Optional, Union

import cssutils
from cssutils import css

from ..errors import SelectorParseError
from .properties import PropertyID
from .selector import parse_selector_list
from .stylesheet import CSSStyleSheet, MediaRule, StyleDeclaration, StyleProperty, StyleRule
from .value_parser import parse_css_value

logger = logging.getLogger(__name__)

# Suppress cssutils warning logs
cssutils.log.setLevel(logging.CRITICAL)


class CSSParser:
    """
    CSS Parser built on cssutils.

    cssutils does the tokenizing and rule structure; selectors are handed to
    cssselect and values to the value parser.
    """

    def parse_stylesheet(self, css_content: str, href: Optional[str] = None) -> CSSStyleSheet:
        """
        Parse CSS content into a stylesheet.

        Args:
            css_content: CSS content to parse
            href: Optional location the CSS was loaded from

        Returns:
            Parsed stylesheet; rules that cannot be used are left out
        """
        sheet = cssutils.parseString(css_content or '', href=href)
        rules = self._convert_rules(sheet.cssRules)
        logger.debug(f"Parsed stylesheet {href or '<inline>'} with {len(rules)} rules")
        return CSSStyleSheet(rules, href=href)

    def parse_declaration(self, style_attr: str) -> StyleDeclaration:
        """
        Parse an inline style attribute.

        Args:
            style_attr: Inline style attribute value

        Returns:
            The declaration block, in source order
        """
        if not style_attr or not style_attr.strip():
            return StyleDeclaration()
        return self._convert_declaration(cssutils.parseStyle(style_attr))

    def _convert_rules(self, css_rules) -> List[Union[StyleRule, MediaRule]]:
        rules = []
        for rule in css_rules:
            if rule.type == css.CSSRule.STYLE_RULE:
                style_rule = self._convert_style_rule(rule)
                if style_rule is not None:
                    rules.append(style_rule)
            elif rule.type == css.CSSRule.MEDIA_RULE:
                media_types = self._media_types(rule.media.mediaText)
                rules.append(MediaRule(media_types, self._convert_rules(rule.cssRules)))
        return rules

    def _convert_style_rule(self, rule: css.CSSStyleRule) -> Optional[StyleRule]:
        try:
            selectors = parse_selector_list(rule.selectorText)
        except SelectorParseError as e:
            logger.debug(f"Dropping rule: {e}")
            return None
        return StyleRule(selectors, self._convert_declaration(rule.style))

    def _convert_declaration(self, style: css.CSSStyleDeclaration) -> StyleDeclaration:
        properties = []
        for prop in style.getProperties(all=True):
            property_id = PropertyID.from_name(prop.name)
            if property_id is PropertyID.INVALID:
                logger.debug(f"Ignoring unknown CSS property '{prop.name}'")
                continue

            value = parse_css_value(prop.value)
            if value is None:
                logger.debug(f"Ignoring unparseable value for '{prop.name}': {prop.value!r}")
                continue

            properties.append(StyleProperty(property_id, value))
        return StyleDeclaration(properties)

    @staticmethod
    def _media_types(media_text: str) -> List[str]:
        """
        Reduce a media query list to its media types.

        Media features are not evaluated; ``(min-width: 600px)`` counts as
        ``all`` and ``only screen and (...)`` as ``screen``. A negated query
        keeps its ``not`` prefix and is negated by MediaRule.
        """
        media_types = []
        for query in media_text.split(','):
            words = query.strip().lower().split()
            if not words:
                continue
            if words[0] == 'only':
                words = words[1:]
            if not words or words[0].startswith('('):
                media_types.append('all')
            elif words[0] == 'not' and len(words) > 1:
                media_types.append(f"not {words[1]}")
            else:
                media_types.append(words[0])
        return media_types

"""
CSS implementation for the style engine.
This package provides value parsing, stylesheets, selector matching and the cascade.
"""

from .expander import expand
from .parser import CSSParser
from .properties import PropertyID, StyleProperties, is_pseudo_property, is_shorthand_property
from .resolver import MatchingRule, StyleResolver, is_inherited_property, sort_matching_rules
from .selector import Selector, parse_selector_list
from .stylesheet import CSSStyleSheet, MediaRule, StyleDeclaration, StyleProperty, StyleRule
from .user_agent import UserAgentStyleSheets, user_agent_stylesheets
from .value_parser import parse_css_value
from .values import (ColorStyleValue, IdentifierStyleValue, ImageStyleValue, LengthStyleValue,
                     StringStyleValue, StyleValue, StyleValueType, ValueID)

__all__ = [
    'expand', 'CSSParser', 'PropertyID', 'StyleProperties', 'is_pseudo_property',
    'is_shorthand_property', 'MatchingRule', 'StyleResolver', 'is_inherited_property',
    'sort_matching_rules', 'Selector', 'parse_selector_list', 'CSSStyleSheet', 'MediaRule',
    'StyleDeclaration', 'StyleProperty', 'StyleRule', 'UserAgentStyleSheets',
    'user_agent_stylesheets', 'parse_css_value', 'ColorStyleValue', 'IdentifierStyleValue',
    'ImageStyleValue', 'LengthStyleValue', 'StringStyleValue', 'StyleValue', 'StyleValueType',
    'ValueID',
]

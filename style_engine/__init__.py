"""
Wink Style - CSS cascade resolution for HTML documents in Python.
"""

from style_engine.css import PropertyID, StyleProperties, StyleResolver, is_inherited_property
from style_engine.dom import Document, Element, parse_html
from style_engine.errors import ConfigError, SelectorParseError, StyleEngineError

# Package information
__version__ = "0.1.0"
__author__ = "Wink Browser Team"
__description__ = "CSS cascade resolution for HTML documents"

__all__ = [
    'PropertyID', 'StyleProperties', 'StyleResolver', 'is_inherited_property',
    'Document', 'Element', 'parse_html',
    'ConfigError', 'SelectorParseError', 'StyleEngineError',
]

"""
DOM implementation for the style engine.
This package provides the document tree that styles are resolved against.
"""

from .node import Node, NodeType
from .element import Element
from .text import Text
from .document import Document, parse_html

__all__ = ['Node', 'NodeType', 'Element', 'Text', 'Document', 'parse_html']

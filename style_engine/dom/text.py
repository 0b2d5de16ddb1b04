"""
Text node implementation for the DOM.
"""

from typing import Optional

from .node import Node, NodeType


class Text(Node):
    """A text node in the DOM tree."""

    def __init__(self, data: str, owner_document: Optional['Document'] = None):
        """
        Initialize a text node.

        Args:
            data: The text content
            owner_document: The document that owns this node
        """
        super().__init__(NodeType.TEXT_NODE, owner_document)
        self.node_name = "#text"
        self.data = data or ""

    @property
    def text_content(self) -> str:
        return self.data

    def __repr__(self):
        return f"Text({self.data[:20]!r})"

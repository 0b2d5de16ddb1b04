"""
Node implementation for the DOM.
This module implements the parts of the DOM Node interface the style engine reads.
"""

from enum import IntEnum
from typing import List, Optional


class NodeType(IntEnum):
    """Node types as defined by the DOM standard."""
    ELEMENT_NODE = 1
    TEXT_NODE = 3
    COMMENT_NODE = 8
    DOCUMENT_NODE = 9
    DOCUMENT_TYPE_NODE = 10


class Node:
    """
    Base Node implementation for the DOM.

    Keeps parent, child and sibling links up to date as nodes are added and
    removed.
    """

    def __init__(self, node_type: NodeType, owner_document: Optional['Document'] = None):
        """
        Initialize a new Node.

        Args:
            node_type: The type of this node
            owner_document: The document that owns this node
        """
        self.node_type = node_type
        self.owner_document = owner_document

        # Node relationships
        self.parent_node: Optional['Node'] = None
        self.child_nodes: List['Node'] = []
        self.previous_sibling: Optional['Node'] = None
        self.next_sibling: Optional['Node'] = None

        self.node_name: str = "#node"

    @property
    def first_child(self) -> Optional['Node']:
        return self.child_nodes[0] if self.child_nodes else None

    @property
    def last_child(self) -> Optional['Node']:
        return self.child_nodes[-1] if self.child_nodes else None

    @property
    def children(self) -> List['Element']:
        """Get a list of child elements."""
        return [child for child in self.child_nodes if child.node_type == NodeType.ELEMENT_NODE]

    def append_child(self, child: 'Node') -> 'Node':
        """
        Append a child node to this node.

        Args:
            child: The node to append

        Returns:
            The appended node
        """
        # If child already has a parent, remove it first
        if child.parent_node:
            child.parent_node.remove_child(child)

        child.parent_node = self

        if self.child_nodes:
            last_child = self.child_nodes[-1]
            last_child.next_sibling = child
            child.previous_sibling = last_child

        self.child_nodes.append(child)
        return child

    def remove_child(self, child: 'Node') -> 'Node':
        """
        Remove a child node.

        Args:
            child: The node to remove

        Returns:
            The removed node

        Raises:
            ValueError: If the node is not a child of this node
        """
        if child not in self.child_nodes:
            raise ValueError("Node is not a child of this node")

        if child.previous_sibling:
            child.previous_sibling.next_sibling = child.next_sibling
        if child.next_sibling:
            child.next_sibling.previous_sibling = child.previous_sibling

        self.child_nodes.remove(child)
        child.parent_node = None
        child.previous_sibling = None
        child.next_sibling = None
        return child

    def has_child_nodes(self) -> bool:
        return bool(self.child_nodes)

    @property
    def text_content(self) -> str:
        return ''.join(child.text_content for child in self.child_nodes
                       if child.node_type in (NodeType.ELEMENT_NODE, NodeType.TEXT_NODE))

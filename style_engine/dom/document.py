"""
Document implementation for the DOM.
This module implements the Document, the owner of stylesheets and the quirks flag.
"""

import logging
from typing import Iterator, List, Optional
from urllib.parse import urljoin

import html5lib

from ..css.parser import CSSParser
from ..css.resolver import StyleResolver
from ..css.stylesheet import CSSStyleSheet
from .element import Element
from .node import Node, NodeType
from .text import Text

logger = logging.getLogger(__name__)


class Document(Node):
    """
    Document node implementation.

    Holds the author stylesheets in document order together with the
    information style resolution needs about the document as a whole.
    """

    def __init__(self, url: Optional[str] = None, media_type: str = 'screen'):
        """
        Initialize a new Document.

        Args:
            url: Location of the document, used to complete relative URLs
            media_type: Media type stylesheets are filtered against
        """
        super().__init__(NodeType.DOCUMENT_NODE, self)
        self.node_name = "#document"

        self.url = url
        self.media_type = media_type
        self.doctype: Optional[str] = None
        self.document_element: Optional[Element] = None

        self._quirks_mode = False
        self._style_sheets: List[CSSStyleSheet] = []

    def in_quirks_mode(self) -> bool:
        return self._quirks_mode

    def set_quirks_mode(self, quirks_mode: bool) -> None:
        self._quirks_mode = quirks_mode

    def style_sheets(self) -> List[CSSStyleSheet]:
        """Author stylesheets, in document order."""
        return list(self._style_sheets)

    def add_style_sheet(self, sheet: CSSStyleSheet) -> None:
        self._style_sheets.append(sheet)

    def complete_url(self, url: str) -> str:
        """
        Resolve a possibly relative URL against the document URL.

        Args:
            url: URL as written in the document

        Returns:
            The absolute URL, or the URL unchanged when the document has none
        """
        if not self.url:
            return url
        return urljoin(self.url, url)

    def create_element(self, tag_name: str) -> Element:
        return Element(tag_name, self)

    def create_text_node(self, data: str) -> Text:
        return Text(data, self)

    def append_child(self, child: Node) -> Node:
        super().append_child(child)
        if child.node_type == NodeType.ELEMENT_NODE and self.document_element is None:
            self.document_element = child
        return child

    def remove_child(self, child: Node) -> Node:
        super().remove_child(child)
        if child is self.document_element:
            self.document_element = None
        return child

    def elements(self) -> Iterator[Element]:
        """Yield every element in tree order."""
        if self.document_element is None:
            return
        stack = [self.document_element]
        while stack:
            element = stack.pop()
            yield element
            stack.extend(reversed(element.children))

    def update_style(self, resolver: Optional[StyleResolver] = None) -> int:
        """
        Resolve the style of every element and store it on the element.

        Parents are resolved before their children so inheritance sees the
        parent's values.

        Args:
            resolver: Resolver to use; one bound to this document when omitted

        Returns:
            Number of elements styled
        """
        resolver = resolver or StyleResolver(self)
        count = 0
        for element in self.elements():
            element.set_specified_css_values(resolver.resolve_style(element))
            count += 1
        logger.debug(f"Updated style of {count} elements")
        return count

    def __repr__(self):
        return f"Document(url={self.url!r}, quirks={self._quirks_mode})"


def parse_html(html_content: str, url: Optional[str] = None, media_type: str = 'screen') -> Document:
    """
    Parse HTML content into a Document.

    Args:
        html_content: The HTML content to parse
        url: Optional document URL for resolving relative URLs
        media_type: Media type the document is styled for

    Returns:
        The parsed document, with each ``<style>`` element registered as a
        stylesheet
    """
    if isinstance(html_content, bytes):
        html_content = html_content.decode('utf-8', errors='replace')

    parser = html5lib.HTMLParser(tree=html5lib.treebuilders.getTreeBuilder("dom"))
    parsed = parser.parse(html_content or '')

    document = Document(url=url, media_type=media_type)
    _convert_parsed_document(document, parsed)
    _collect_style_sheets(document)

    logger.debug(f"Parsed document {url or '<string>'}: quirks={document.in_quirks_mode()}, "
                 f"{len(document.style_sheets())} stylesheets")
    return document


def _convert_parsed_document(document: Document, parsed_doc) -> None:
    # The minidom builder appends the doctype as a child without setting Document.doctype
    doctype_name = next((child.name for child in parsed_doc.childNodes
                         if child.nodeType == child.DOCUMENT_TYPE_NODE), None)
    document.doctype = doctype_name
    document.set_quirks_mode(doctype_name is None or doctype_name.lower() != 'html')

    root = getattr(parsed_doc, 'documentElement', None)
    if root is None:
        logger.warning("No document element found in parsed document")
        return

    html_element = _convert_element(document, root)
    document.append_child(html_element)
    for child in root.childNodes:
        _convert_parsed_node(document, child, html_element)


def _convert_parsed_node(document: Document, node, parent: Node) -> None:
    if node.nodeType == node.TEXT_NODE:
        parent.append_child(document.create_text_node(node.nodeValue))
    elif node.nodeType == node.ELEMENT_NODE:
        element = _convert_element(document, node)
        parent.append_child(element)
        for child in node.childNodes:
            _convert_parsed_node(document, child, element)


def _convert_element(document: Document, node) -> Element:
    element = document.create_element(node.tagName)
    for name, value in node.attributes.items():
        element.set_attribute(name, value)
    return element


def _collect_style_sheets(document: Document) -> None:
    parser = CSSParser()
    for element in document.elements():
        if element.tag_name == 'style':
            sheet = parser.parse_stylesheet(element.text_content, href=document.url)
            document.add_style_sheet(sheet)

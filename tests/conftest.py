import pytest

from style_engine.css.parser import CSSParser
from style_engine.css.user_agent import UserAgentStyleSheets
from style_engine.dom.document import Document


@pytest.fixture
def document():
    doc = Document(url="http://example.com/dir/page.html")
    html = doc.create_element("html")
    doc.append_child(html)
    return doc


@pytest.fixture
def empty_user_agent():
    return UserAgentStyleSheets(default_source="", quirks_source="")


@pytest.fixture
def parse_css():
    parser = CSSParser()
    return parser.parse_stylesheet


@pytest.fixture
def append():
    """Return a helper that creates an element under a parent and returns it."""
    def _append(parent, tag_name, **attributes):
        owner = parent.owner_document
        element = owner.create_element(tag_name)
        for name, value in attributes.items():
            element.set_attribute(name.rstrip('_'), value)
        parent.append_child(element)
        return element
    return _append

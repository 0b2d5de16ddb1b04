"""
User-agent stylesheets.

The default stylesheet and the quirks-mode stylesheet are built from the CSS
text below the first time they are needed and then shared, read-only, by
every resolver in the process.
"""

import logging
import threading
from typing import Optional

from .parser import CSSParser
from .stylesheet import CSSStyleSheet

logger = logging.getLogger(__name__)

DEFAULT_STYLESHEET_SOURCE = """
html, address, blockquote, body, dd, div, dl, dt, fieldset, form, frame,
frameset, h1, h2, h3, h4, h5, h6, noframes, ol, p, ul, center, dir, hr,
menu, pre, header, footer, nav, main, article, aside, section, figure,
figcaption, details, summary {
    display: block;
}

head, link, meta, script, style, title, template, noscript {
    display: none;
}

body {
    margin: 8px;
}

p, blockquote, ul, ol, dl, pre, figure {
    margin-top: 1em;
    margin-bottom: 1em;
}

h1 { font-size: 2em; margin-top: 0.67em; margin-bottom: 0.67em; }
h2 { font-size: 1.5em; margin-top: 0.83em; margin-bottom: 0.83em; }
h3 { font-size: 1.17em; margin-top: 1em; margin-bottom: 1em; }
h4 { margin-top: 1.33em; margin-bottom: 1.33em; }
h5 { font-size: 0.83em; margin-top: 1.67em; margin-bottom: 1.67em; }
h6 { font-size: 0.67em; margin-top: 2.33em; margin-bottom: 2.33em; }

h1, h2, h3, h4, h5, h6, b, strong, th {
    font-weight: bold;
}

i, cite, em, var, address, dfn {
    font-style: italic;
}

pre, tt, code, kbd, samp {
    font-family: monospace;
}

pre {
    white-space: pre;
}

u, ins {
    text-decoration: underline;
}

s, strike, del {
    text-decoration: line-through;
}

a:link {
    color: #0000ee;
    text-decoration: underline;
}

ul, ol {
    padding-left: 40px;
}

ul {
    list-style-type: disc;
}

ol {
    list-style-type: decimal;
}

li {
    display: list-item;
}

center {
    text-align: center;
}

hr {
    border: 1px inset #888888;
    margin-top: 0.5em;
    margin-bottom: 0.5em;
}

table {
    display: table;
    border-collapse: separate;
    border-spacing: 2px;
}

tr { display: table-row; }
thead { display: table-header-group; }
tbody { display: table-row-group; }
tfoot { display: table-footer-group; }
caption { display: table-caption; text-align: center; }

td, th {
    display: table-cell;
    padding: 1px;
}

th {
    text-align: center;
}
"""

QUIRKS_MODE_STYLESHEET_SOURCE = """
table {
    text-align: left;
    font-size: medium;
    font-weight: normal;
    font-style: normal;
    white-space: normal;
    line-height: normal;
}

body, td, th, p {
    margin-top: 0;
}

li {
    list-style-position: inside;
}
"""


class UserAgentStyleSheets:
    """
    Lazily built, shared user-agent stylesheets.

    Each sheet is parsed at most once, under a lock, on first access.
    """

    def __init__(self,
                 default_source: str = DEFAULT_STYLESHEET_SOURCE,
                 quirks_source: str = QUIRKS_MODE_STYLESHEET_SOURCE):
        self._default_source = default_source
        self._quirks_source = quirks_source
        self._default_sheet: Optional[CSSStyleSheet] = None
        self._quirks_sheet: Optional[CSSStyleSheet] = None
        self._lock = threading.Lock()

    def default_stylesheet(self) -> CSSStyleSheet:
        if self._default_sheet is None:
            with self._lock:
                if self._default_sheet is None:
                    self._default_sheet = self._build(self._default_source, 'ua:default.css')
        return self._default_sheet

    def quirks_mode_stylesheet(self) -> CSSStyleSheet:
        if self._quirks_sheet is None:
            with self._lock:
                if self._quirks_sheet is None:
                    self._quirks_sheet = self._build(self._quirks_source, 'ua:quirks.css')
        return self._quirks_sheet

    @staticmethod
    def _build(source: str, href: str) -> CSSStyleSheet:
        logger.debug(f"Building user-agent stylesheet {href}")
        return CSSParser().parse_stylesheet(source, href=href)


_instance: Optional[UserAgentStyleSheets] = None
_instance_lock = threading.Lock()


def user_agent_stylesheets() -> UserAgentStyleSheets:
    """Return the process-wide UserAgentStyleSheets, creating it on first use."""
    global _instance
    if _instance is None:
        with _instance_lock:
            if _instance is None:
                _instance = UserAgentStyleSheets()
    return _instance

"""
Stylesheet object model.

Rules and declarations here are already parsed: the cascade consumes them
without looking at CSS text again.
"""

from typing import Iterable, Iterator, List, Optional, Union

from .properties import PropertyID
from .selector import Selector
from .values import StyleValue


class StyleProperty:
    """One ``property: value`` entry of a declaration block."""

    def __init__(self, property_id: PropertyID, value: StyleValue):
        self.property_id = property_id
        self.value = value

    def __repr__(self):
        return f"StyleProperty({self.property_id.value}: {self.value.to_string()})"


class StyleDeclaration:
    """An ordered declaration block; duplicates are kept in source order."""

    def __init__(self, properties: Optional[Iterable[StyleProperty]] = None):
        self._properties: List[StyleProperty] = list(properties or [])

    @property
    def properties(self) -> List[StyleProperty]:
        return self._properties

    def __len__(self) -> int:
        return len(self._properties)

    def __repr__(self):
        return f"StyleDeclaration({self._properties})"


class StyleRule:
    """A selector list sharing one declaration block."""

    def __init__(self, selectors: List[Selector], declaration: StyleDeclaration):
        self.selectors = selectors
        self.declaration = declaration

    def __repr__(self):
        selector_text = ', '.join(selector.text for selector in self.selectors)
        return f"StyleRule({selector_text!r}, {len(self.declaration)} properties)"


class MediaRule:
    """
    An ``@media`` block.

    Args:
        media_types: Media types from the rule's media list; empty means all
        rules: Nested rules in source order
    """

    def __init__(self, media_types: List[str], rules: List[Union[StyleRule, 'MediaRule']]):
        self.media_types = [media_type.lower() for media_type in media_types]
        self.rules = rules

    def condition_matches(self, media_type: str) -> bool:
        if not self.media_types:
            return True
        media_type = media_type.lower()
        for entry in self.media_types:
            if entry.startswith('not '):
                if entry[4:] not in (media_type, 'all'):
                    return True
            elif entry in ('all', media_type):
                return True
        return False

    def __repr__(self):
        return f"MediaRule({self.media_types}, {len(self.rules)} rules)"


class CSSStyleSheet:
    """An ordered list of rules from one source."""

    def __init__(self, rules: Optional[List[Union[StyleRule, MediaRule]]] = None,
                 href: Optional[str] = None):
        self.rules: List[Union[StyleRule, MediaRule]] = list(rules or [])
        self.href = href

    def effective_style_rules(self, media_type: str = 'screen') -> Iterator[StyleRule]:
        """
        Yield the style rules that apply for a media type.

        Rules nested in ``@media`` blocks are yielded in place when the block
        matches and skipped otherwise.

        Args:
            media_type: The media type being styled for

        Yields:
            Style rules in source order
        """
        yield from _effective_rules(self.rules, media_type)

    def __len__(self) -> int:
        return len(self.rules)

    def __repr__(self):
        return f"CSSStyleSheet(href={self.href!r}, {len(self.rules)} rules)"


def _effective_rules(rules, media_type: str) -> Iterator[StyleRule]:
    for rule in rules:
        if isinstance(rule, StyleRule):
            yield rule
        elif isinstance(rule, MediaRule) and rule.condition_matches(media_type):
            yield from _effective_rules(rule.rules, media_type)

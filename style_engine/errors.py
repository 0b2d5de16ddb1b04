"""
Exceptions raised by the style engine.

The cascade itself never raises for malformed CSS; these cover the
collaborators around it.
"""


class StyleEngineError(Exception):
    """Base class for style engine errors."""


class SelectorParseError(StyleEngineError):
    """A selector could not be parsed."""


class ConfigError(StyleEngineError):
    """A configuration file could not be read."""

#!/usr/bin/env python3
"""
Wink Style - resolve and print the CSS cascade of an HTML document.

Main entry point for the wink-style command.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from style_engine.css.selector import parse_selector_list
from style_engine.dom.document import parse_html
from style_engine.errors import StyleEngineError
from style_engine.utils.config import Config
from style_engine.utils.logging import PerformanceLogger, log_exception, setup_logging

logger = logging.getLogger(__name__)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Wink Style - print the computed style of HTML elements")
    parser.add_argument('file', help='HTML file to style')
    parser.add_argument('--selector', type=str, default=None, help='Only print elements matching this selector')
    parser.add_argument('--media', type=str, default=None, help='Media type to style for (default: screen)')
    parser.add_argument('--url', type=str, default=None, help='Base URL of the document')
    parser.add_argument('--config', type=str, default=None, help='Configuration file to use')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--json', action='store_true', help='Print JSON instead of text')
    return parser.parse_args(argv)


def _element_label(element) -> str:
    label = element.tag_name
    if element.id:
        label += f"#{element.id}"
    for cls in sorted(element.class_list):
        label += f".{cls}"
    return label


def _format_text(results) -> str:
    lines = []
    for label, properties in results:
        lines.append(f"{label} {{")
        for name, value in properties.items():
            lines.append(f"  {name}: {value};")
        lines.append("}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command."""
    args = parse_arguments(argv)

    try:
        config = Config(args.config)
    except StyleEngineError as e:
        print(f"wink-style: {e}", file=sys.stderr)
        return 1

    if args.debug:
        config.set('logging.console_level', 'DEBUG')
    if args.media:
        config.set('style.media_type', args.media)

    setup_logging(log_file=config.get('logging.file'),
                  console_level=config.get('logging.console_level', 'WARNING'),
                  file_level=config.get('logging.file_level', 'DEBUG'))
    perf = PerformanceLogger(logger, "wink-style")

    try:
        with open(args.file, 'r', encoding='utf-8', errors='replace') as f:
            html_content = f.read()
    except OSError as e:
        log_exception(logger, e, f"cannot read {args.file}")
        return 1

    selectors = None
    if args.selector:
        try:
            selectors = parse_selector_list(args.selector)
        except StyleEngineError as e:
            print(f"wink-style: {e}", file=sys.stderr)
            return 1

    perf.start("parse")
    document = parse_html(html_content, url=args.url,
                          media_type=config.get('style.media_type', 'screen'))
    perf.end("parse")

    perf.start("style")
    count = document.update_style()
    perf.end("style")
    logger.info(f"Resolved styles for {count} elements")

    results = []
    for element in document.elements():
        if selectors is not None and not any(selector.matches(element) for selector in selectors):
            continue
        style = element.specified_css_values()
        properties = style.to_dict() if style is not None else {}
        results.append((_element_label(element), dict(sorted(properties.items()))))

    if args.json:
        print(json.dumps([{"element": label, "style": properties} for label, properties in results],
                         indent=2))
    else:
        print(_format_text(results))
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""md2html - CommonMark to HTML conversion with validated options and highlighted code.

md2html wraps the markdown-it-py CommonMark parser behind a small, forgiving
configuration surface and post-processes fenced code blocks with Pygments.

Configuration mistakes never abort a conversion: unknown option or extension
tokens are dropped and reported as warnings on the ``md2html`` logger, and
malformed configuration values are treated as empty.

Examples
--------
One-shot conversion:

    >>> from md2html import markdown_to_html
    >>> markdown_to_html("# Heading")
    '<h1>Heading</h1>\\n'

Reusable converter built from a site configuration:

    >>> from md2html import CommonMarkConverter
    >>> converter = CommonMarkConverter.from_site_config(
    ...     {"commonmark": {"options": ["SMART", "HARDBREAKS"], "extensions": ["autolink"]}}
    ... )
    >>> html = converter.convert(text)

Requirements
------------
- Python 3.10+
- markdown-it-py, Pygments
- Optional: linkify-it-py (``autolink``), mdit-py-plugins (``FOOTNOTES``, ``tasklist``)

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "md2html requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from md2html.api import markdown_to_html  # noqa: E402
from md2html.constants import VALID_EXTENSIONS, VALID_OPTIONS  # noqa: E402
from md2html.converter import CommonMarkConverter  # noqa: E402
from md2html.engine import CommonMarkEngine  # noqa: E402
from md2html.exceptions import DependencyError, Md2HtmlError, ParsingError  # noqa: E402
from md2html.highlighter import CodeBlockHighlighter, highlight_code_blocks  # noqa: E402
from md2html.options import CommonMarkOptions, HighlightOptions  # noqa: E402
from md2html.resolver import ResolvedFlags, resolve_flags  # noqa: E402

__all__ = [
    "__version__",
    "markdown_to_html",
    "CommonMarkConverter",
    "CommonMarkEngine",
    "CodeBlockHighlighter",
    "highlight_code_blocks",
    "CommonMarkOptions",
    "HighlightOptions",
    "ResolvedFlags",
    "resolve_flags",
    "VALID_OPTIONS",
    "VALID_EXTENSIONS",
    "Md2HtmlError",
    "ParsingError",
    "DependencyError",
]

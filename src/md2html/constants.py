#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for md2html.

This module centralizes the fixed allow-lists, default markup classes and
dependency specifications used across the md2html package.

Constants are organized by category:
1. Type Definitions - Literal types for option and extension tokens
2. Option and Extension Allow-lists - tokens accepted from configuration
3. Highlighting Defaults - wrapper classes for highlighted code blocks
4. Security Constants - validation of code fence language identifiers
5. Dependency Specifications - packages checked by requires_dependencies
"""

from __future__ import annotations

from typing import Literal, get_args

# =============================================================================
# Type Definitions
# =============================================================================

OptionToken = Literal[
    "DEFAULT",
    "SMART",
    "HARDBREAKS",
    "NOBREAKS",
    "UNSAFE",
    "FOOTNOTES",
    "GITHUB_PRE_LANG",
    "FULL_INFO_STRING",
]
ExtensionToken = Literal["table", "strikethrough", "autolink", "tagfilter", "tasklist"]

# =============================================================================
# Option and Extension Allow-lists
# =============================================================================

# Prefix used on every diagnostic line emitted for configuration problems
COMPONENT_NAME = "CommonMark"

# Rendering and parsing flags; tokens are compared in upper case
VALID_OPTIONS: frozenset[str] = frozenset(get_args(OptionToken))

# Structural extensions; tokens are compared exactly
VALID_EXTENSIONS: frozenset[str] = frozenset(get_args(ExtensionToken))

# Configuration keys read from a converter config entry
CONFIG_KEY = "commonmark"
OPTIONS_KEY = "options"
EXTENSIONS_KEY = "extensions"
MARKDOWN_EXT_KEY = "markdown_ext"
HIGHLIGHT_KEY = "highlight"

DEFAULT_MARKDOWN_EXT = "markdown,mkdown,mkdn,mkd,md"
OUTPUT_EXT = ".html"

# GFM "tagfilter" extension: raw HTML tags that are neutralized
TAGFILTER_TAGS = ("title", "textarea", "style", "xmp", "iframe", "noembed", "noframes", "script", "plaintext")

# =============================================================================
# Highlighting Defaults
# =============================================================================

DEFAULT_SYNTAX_HIGHLIGHTING = True
# Outer wrapper class understood by existing static-site themes
DEFAULT_HIGHLIGHT_WRAPPER_CLASS = "highlighter-rouge"
DEFAULT_HIGHLIGHT_CSS_CLASS = "highlight"
CODE_LANGUAGE_PREFIX = "language-"

# =============================================================================
# Security Constants
# =============================================================================

# Attribute-breaking characters (quotes, angle brackets, ampersand, whitespace) are excluded
SAFE_LANGUAGE_IDENTIFIER_PATTERN = r"^[a-zA-Z0-9_+#.\-]+$"
MAX_LANGUAGE_IDENTIFIER_LENGTH = 50

# =============================================================================
# Dependency Specifications for @requires_dependencies decorator
# =============================================================================
# Each spec is a list of tuples: (pip_package, import_name, version_constraint)

DEPS_COMMONMARK = [("markdown-it-py", "markdown_it", ">=3.0.0")]
DEPS_AUTOLINK = [("linkify-it-py", "linkify_it", ">=2.0.0")]
DEPS_PLUGINS = [("mdit-py-plugins", "mdit_py_plugins", ">=0.4.0")]
DEPS_HIGHLIGHT = [("pygments", "pygments", ">=2.12")]

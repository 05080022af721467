#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Security utilities for md2html.

Functions
---------
- sanitize_language_identifier: Sanitize code fence language identifiers
"""

import logging
import re

from md2html.constants import MAX_LANGUAGE_IDENTIFIER_LENGTH, SAFE_LANGUAGE_IDENTIFIER_PATTERN

logger = logging.getLogger(__name__)

_SAFE_LANGUAGE_RE = re.compile(SAFE_LANGUAGE_IDENTIFIER_PATTERN)


def sanitize_language_identifier(language: str) -> str:
    r"""Sanitize a code fence language identifier before it is placed in markup.

    The identifier ends up inside ``class`` and ``data-lang`` attributes of
    highlighted code blocks, so only alphanumeric characters, underscores,
    hyphens, plus signs, hash signs and dots are accepted.

    Parameters
    ----------
    language : str
        Raw language identifier string to sanitize

    Returns
    -------
    str
        Sanitized language identifier, or empty string if invalid

    Examples
    --------
    >>> sanitize_language_identifier("python")
    'python'
    >>> sanitize_language_identifier("c++")
    'c++'
    >>> sanitize_language_identifier("c#")
    'c#'
    >>> sanitize_language_identifier('x"onmouseover="alert(1)')
    ''
    >>> sanitize_language_identifier("x" * 100)
    ''

    """
    if not language:
        return ""

    language = language.strip()

    if len(language) > MAX_LANGUAGE_IDENTIFIER_LENGTH:
        logger.warning(
            f"Language identifier exceeds maximum length ({MAX_LANGUAGE_IDENTIFIER_LENGTH}): {language[:50]}..."
        )
        return ""

    if not _SAFE_LANGUAGE_RE.match(language):
        logger.warning(
            f"Blocked potentially dangerous language identifier containing invalid characters: {language[:50]}"
        )
        return ""

    return language

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/utils/__init__.py
"""Utility modules for md2html package.

This package contains dependency checking decorators, installed-version
lookups and code fence language sanitization.
"""

from md2html.utils.decorators import debug_timer, requires_dependencies
from md2html.utils.security import sanitize_language_identifier

__all__ = ["debug_timer", "requires_dependencies", "sanitize_language_identifier"]

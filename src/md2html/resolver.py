#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/resolver.py
"""Validation of option and extension tokens against fixed allow-lists.

The resolver is a total function: it never raises. Unknown tokens are
dropped and reported back as warning strings, leaving it to the caller to
decide where those warnings go.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from md2html.constants import COMPONENT_NAME, VALID_EXTENSIONS, VALID_OPTIONS


@dataclass(frozen=True)
class ResolvedFlags:
    """Validated rendering flags for a single conversion.

    Parameters
    ----------
    options : frozenset of str
        Upper-case option tokens, each a member of ``VALID_OPTIONS``
    extensions : frozenset of str
        Extension tokens, each a member of ``VALID_EXTENSIONS``

    """

    options: frozenset[str] = field(default_factory=frozenset)
    extensions: frozenset[str] = field(default_factory=frozenset)

    def has_option(self, name: str) -> bool:
        """Return True if the (case-insensitive) option is enabled."""
        return name.upper() in self.options

    def has_extension(self, name: str) -> bool:
        """Return True if the extension is enabled."""
        return name in self.extensions


def invalid_option_warning(token: str) -> str:
    """Format the diagnostic for a rejected option token."""
    return f"{COMPONENT_NAME}: {token} is not a valid option"


def invalid_extension_warning(token: str) -> str:
    """Format the diagnostic for a rejected extension token."""
    return f"{COMPONENT_NAME}: {token} is not a valid extension"


def resolve_flags(
    options: Iterable[str] = (),
    extensions: Iterable[str] = (),
) -> tuple[ResolvedFlags, list[str]]:
    """Filter option and extension tokens against the known enumerations.

    Parameters
    ----------
    options : iterable of str
        Option tokens in configuration order. Matching is case-insensitive.
    extensions : iterable of str
        Extension tokens in configuration order. Matching is exact.

    Returns
    -------
    tuple[ResolvedFlags, list[str]]
        The deduplicated valid flags, and one warning per rejected token in
        input order.

    Examples
    --------
        >>> flags, warnings = resolve_flags(["smart", "SOFTBREAKS"], ["autolink"])
        >>> sorted(flags.options), sorted(flags.extensions)
        (['SMART'], ['autolink'])
        >>> warnings
        ['CommonMark: SOFTBREAKS is not a valid option']

    """
    warnings: list[str] = []

    valid_options: set[str] = set()
    for token in options:
        normalized = str(token).strip().upper()
        if normalized in VALID_OPTIONS:
            valid_options.add(normalized)
        else:
            warnings.append(invalid_option_warning(str(token)))

    valid_extensions: set[str] = set()
    for token in extensions:
        normalized = str(token).strip()
        if normalized in VALID_EXTENSIONS:
            valid_extensions.add(normalized)
        else:
            warnings.append(invalid_extension_warning(str(token)))

    return ResolvedFlags(options=frozenset(valid_options), extensions=frozenset(valid_extensions)), warnings


__all__ = ["ResolvedFlags", "resolve_flags", "invalid_option_warning", "invalid_extension_warning"]

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for CommonMark conversion.

This module is the typed boundary between caller-supplied configuration
(usually a mapping loaded from a site configuration file) and the rest of the
package. Shape inspection of untrusted configuration happens here and only
here; everything downstream works with frozen dataclasses.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from md2html.constants import (
    CONFIG_KEY,
    DEFAULT_HIGHLIGHT_CSS_CLASS,
    DEFAULT_HIGHLIGHT_WRAPPER_CLASS,
    DEFAULT_MARKDOWN_EXT,
    DEFAULT_SYNTAX_HIGHLIGHTING,
    EXTENSIONS_KEY,
    HIGHLIGHT_KEY,
    MARKDOWN_EXT_KEY,
    OPTIONS_KEY,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


# src/md2html/options.py
@dataclass(frozen=True)
class HighlightOptions(CloneFrozenMixin):
    """Configuration for syntax highlighting of fenced code blocks.

    Parameters
    ----------
    syntax_highlighting : bool, default True
        Whether fenced code blocks tagged with a language are passed
        through Pygments. When False the engine output is returned as is.
    wrapper_class : str, default "highlighter-rouge"
        Class added to the outer ``<div>`` next to ``language-<id>``.
    css_class : str, default "highlight"
        Class used on the inner ``<div>`` and on ``<pre>``; Pygments
        stylesheets are generated against this selector.

    """

    syntax_highlighting: bool = field(
        default=DEFAULT_SYNTAX_HIGHLIGHTING,
        metadata={"help": "Highlight fenced code blocks that name a language", "importance": "core"},
    )
    wrapper_class: str = field(
        default=DEFAULT_HIGHLIGHT_WRAPPER_CLASS,
        metadata={"help": "Class of the outer container around highlighted code", "importance": "advanced"},
    )
    css_class: str = field(
        default=DEFAULT_HIGHLIGHT_CSS_CLASS,
        metadata={"help": "Class targeted by Pygments stylesheets", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate class names.

        Raises
        ------
        ValueError
            If a class name is empty or contains whitespace-only text.

        """
        if not self.wrapper_class.strip():
            raise ValueError("wrapper_class must be a non-empty class name")
        if not self.css_class.strip():
            raise ValueError("css_class must be a non-empty class name")

    @classmethod
    def from_config(cls, value: Any) -> HighlightOptions:
        """Build highlight options from an untrusted mapping.

        Unknown keys and values of the wrong type are ignored; a non-mapping
        value yields the defaults.
        """
        if not isinstance(value, Mapping):
            return cls()

        kwargs: dict[str, Any] = {}
        if isinstance(value.get("syntax_highlighting"), bool):
            kwargs["syntax_highlighting"] = value["syntax_highlighting"]
        for key in ("wrapper_class", "css_class"):
            candidate = value.get(key)
            if isinstance(candidate, str) and candidate.strip():
                kwargs[key] = candidate.strip()
        return cls(**kwargs)


@dataclass(frozen=True)
class CommonMarkOptions(CloneFrozenMixin):
    """Configuration for a CommonMark conversion.

    Parameters
    ----------
    options : tuple of str, default ()
        Rendering and parsing flags such as ``"SMART"`` or ``"HARDBREAKS"``.
        Tokens are validated at conversion time; unknown tokens are dropped
        with a warning.
    extensions : tuple of str, default ()
        Parser extensions such as ``"autolink"`` or ``"table"``.
    markdown_ext : str, default "markdown,mkdown,mkdn,mkd,md"
        Comma-separated file extensions handled by the converter.
    highlight : HighlightOptions
        Syntax highlighting configuration for fenced code blocks.

    Examples
    --------
    From a configuration mapping:

        >>> CommonMarkOptions.from_config({"options": ["SMART"], "extensions": ["autolink"]})
        CommonMarkOptions(options=('SMART',), extensions=('autolink',), ...)

    Malformed configuration falls back to defaults:

        >>> CommonMarkOptions.from_config("DEFAULT") == CommonMarkOptions()
        True

    """

    options: tuple[str, ...] = field(
        default=(),
        metadata={"help": "Rendering flags (SMART, HARDBREAKS, NOBREAKS, UNSAFE, ...)", "importance": "core"},
    )
    extensions: tuple[str, ...] = field(
        default=(),
        metadata={"help": "Parser extensions (autolink, table, strikethrough, ...)", "importance": "core"},
    )
    markdown_ext: str = field(
        default=DEFAULT_MARKDOWN_EXT,
        metadata={"help": "Comma-separated list of Markdown file extensions", "importance": "advanced"},
    )
    highlight: HighlightOptions = field(
        default_factory=HighlightOptions,
        metadata={"help": "Syntax highlighting configuration", "importance": "advanced"},
    )

    @classmethod
    def from_config(cls, value: Any) -> CommonMarkOptions:
        """Convert an arbitrary configuration value into options.

        Parameters
        ----------
        value : Any
            Usually a mapping with optional ``options``, ``extensions``,
            ``markdown_ext`` and ``highlight`` keys. Any other value,
            including None, is treated as an empty configuration.

        Returns
        -------
        CommonMarkOptions
            Options built from the recognized keys. Never raises.

        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, Mapping):
            if value is not None:
                logger.debug(f"Ignoring non-mapping CommonMark configuration of type {type(value).__name__}")
            return cls()

        markdown_ext = value.get(MARKDOWN_EXT_KEY)
        if not isinstance(markdown_ext, str) or not markdown_ext.strip():
            markdown_ext = DEFAULT_MARKDOWN_EXT

        return cls(
            options=_coerce_tokens(value.get(OPTIONS_KEY), OPTIONS_KEY),
            extensions=_coerce_tokens(value.get(EXTENSIONS_KEY), EXTENSIONS_KEY),
            markdown_ext=markdown_ext,
            highlight=HighlightOptions.from_config(value.get(HIGHLIGHT_KEY)),
        )

    @classmethod
    def from_site_config(cls, site_config: Any, key: str = CONFIG_KEY) -> CommonMarkOptions:
        """Read the converter entry stored under ``key`` in a site configuration.

        Parameters
        ----------
        site_config : Any
            Site-wide configuration mapping, e.g. ``{"commonmark": {...}}``.
        key : str, default "commonmark"
            Name of the entry holding CommonMark settings.

        Returns
        -------
        CommonMarkOptions
            Parsed options, or defaults when the entry is missing or malformed.

        """
        if not isinstance(site_config, Mapping):
            return cls()
        return cls.from_config(site_config.get(key))

    @property
    def markdown_extensions(self) -> tuple[str, ...]:
        """Normalized file extensions (lower case, no leading dot)."""
        return tuple(
            ext.strip().lstrip(".").lower() for ext in self.markdown_ext.split(",") if ext.strip().lstrip(".")
        )


def _coerce_tokens(value: Any, key: str) -> tuple[str, ...]:
    """Turn a configuration field into a tuple of string tokens.

    Only list, tuple and set values are accepted; a bare string is not split
    into characters. Non-string members keep their ``str()`` form so they are
    later reported as invalid rather than silently dropped.
    """
    if value is None:
        return ()
    if not isinstance(value, (list, tuple, set, frozenset)):
        logger.debug(f"Ignoring CommonMark '{key}' value of type {type(value).__name__}; expected a list")
        return ()
    if isinstance(value, (set, frozenset)):
        value = sorted(value, key=str)
    return tuple(token if isinstance(token, str) else str(token) for token in value)


__all__ = ["CloneFrozenMixin", "CommonMarkOptions", "HighlightOptions"]

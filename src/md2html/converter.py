#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/converter.py
"""Markdown to HTML converter facade.

:class:`CommonMarkConverter` ties the pieces together::

    configuration -> resolve_flags -> CommonMarkEngine -> CodeBlockHighlighter -> HTML

Flags are resolved on every call and nothing is cached between calls, so a
single converter instance may be shared between threads.

"""

from __future__ import annotations

import logging
from typing import Any

from md2html.constants import CONFIG_KEY, OUTPUT_EXT, VALID_EXTENSIONS, VALID_OPTIONS
from md2html.engine import CommonMarkEngine
from md2html.highlighter import CodeBlockHighlighter
from md2html.options import CommonMarkOptions
from md2html.resolver import ResolvedFlags, resolve_flags
from md2html.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


class CommonMarkConverter:
    """Convert CommonMark text to HTML with validated options and highlighted code.

    Parameters
    ----------
    config : CommonMarkOptions, mapping, or Any, default None
        Converter configuration. A mapping may hold ``options``,
        ``extensions``, ``markdown_ext`` and ``highlight`` keys. Any other
        value is treated as an empty configuration.

    Examples
    --------
    Default configuration:

        >>> CommonMarkConverter().convert("# Heading")
        '<h1>Heading</h1>\\n'

    With typographic quotes:

        >>> CommonMarkConverter({"options": ["SMART"]}).convert('"SmartyPants"')
        '<p>“SmartyPants”</p>\\n'

    Unknown tokens are logged and ignored:

        >>> CommonMarkConverter({"options": ["SOFTBREAKS"]}).convert("a\\nb")
        '<p>a\\nb</p>\\n'

    """

    def __init__(self, config: Any = None):
        """Initialize the converter from an options object or raw configuration."""
        self.options: CommonMarkOptions = CommonMarkOptions.from_config(config)

    @classmethod
    def from_site_config(cls, site_config: Any, key: str = CONFIG_KEY) -> CommonMarkConverter:
        """Create a converter from the ``key`` entry of a site configuration mapping."""
        return cls(CommonMarkOptions.from_site_config(site_config, key=key))

    def resolve(self) -> tuple[ResolvedFlags, list[str]]:
        """Validate the configured tokens.

        Returns
        -------
        tuple[ResolvedFlags, list[str]]
            Valid flags and the warnings for rejected tokens

        """
        return resolve_flags(self.options.options, self.options.extensions)

    def convert(self, content: str) -> str:
        """Convert Markdown text to HTML.

        Parameters
        ----------
        content : str
            Markdown source

        Returns
        -------
        str
            Rendered HTML

        Raises
        ------
        ParsingError
            If the engine cannot process the input
        DependencyError
            If an enabled extension needs a package that is not installed

        """
        flags, warnings = self.resolve()
        self._report(warnings)

        with debug_timer(logger, "CommonMark render"):
            html = CommonMarkEngine(flags).render(content)

        with debug_timer(logger, "Code block highlighting"):
            return CodeBlockHighlighter(self.options.highlight).highlight(html)

    def matches(self, ext: str) -> bool:
        """Return True if ``ext`` is one of the configured Markdown file extensions.

        The comparison ignores case and an optional leading dot.
        """
        return ext.strip().lstrip(".").lower() in self.options.markdown_extensions

    def output_ext(self, ext: str) -> str:
        """Return the extension of converted output files."""
        return OUTPUT_EXT

    @staticmethod
    def _report(warnings: list[str]) -> None:
        if not warnings:
            return
        for warning in warnings:
            logger.warning(warning)
        logger.info(f"Valid options: {', '.join(sorted(VALID_OPTIONS))}")
        logger.info(f"Valid extensions: {', '.join(sorted(VALID_EXTENSIONS))}")

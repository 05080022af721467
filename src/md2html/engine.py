#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/engine.py
"""CommonMark engine integration.

This module maps validated option and extension flags onto a markdown-it-py
parser configured with the ``commonmark`` preset, and renders Markdown text
to intermediate HTML. Highlighting of fenced code blocks happens afterwards
in :mod:`md2html.highlighter`.

Flag mapping
------------
- ``SMART``: typographer with the ``replacements`` and ``smartquotes`` rules
- ``HARDBREAKS``: the ``breaks`` option (soft breaks render as ``<br />``)
- ``NOBREAKS``: soft breaks render as a single space
- ``UNSAFE``: raw HTML passes through instead of being escaped
- ``FOOTNOTES``: ``mdit_py_plugins.footnote``
- ``GITHUB_PRE_LANG`` / ``FULL_INFO_STRING``: custom ``fence`` render rule
- ``table`` / ``strikethrough``: built-in markdown-it rules
- ``autolink``: ``linkify`` rules backed by linkify-it-py
- ``tagfilter``: GFM tag filtering of raw HTML
- ``tasklist``: ``mdit_py_plugins.tasklists``

"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any, Sequence

from md2html.constants import (
    CODE_LANGUAGE_PREFIX,
    DEPS_AUTOLINK,
    DEPS_COMMONMARK,
    DEPS_PLUGINS,
    TAGFILTER_TAGS,
)
from md2html.exceptions import Md2HtmlError, ParsingError
from md2html.resolver import ResolvedFlags
from md2html.utils.decorators import requires_dependencies

if TYPE_CHECKING:
    from markdown_it import MarkdownIt
    from markdown_it.token import Token

logger = logging.getLogger(__name__)

_TAGFILTER_RE = re.compile(r"<(/?(?:%s)(?=[\s/>]|$))" % "|".join(TAGFILTER_TAGS), re.IGNORECASE)


class CommonMarkEngine:
    """Render Markdown to HTML with a flag-driven markdown-it-py parser.

    A fresh parser is built for every engine instance, so engines never share
    mutable parser state. The converter creates one engine per conversion.

    Parameters
    ----------
    flags : ResolvedFlags or None, default None
        Validated flags. None renders with the CommonMark defaults.

    Examples
    --------
        >>> CommonMarkEngine().render("a\\nb")
        '<p>a\\nb</p>\\n'
        >>> CommonMarkEngine(ResolvedFlags(options=frozenset({"NOBREAKS"}))).render("a\\nb")
        '<p>a b</p>\\n'

    """

    def __init__(self, flags: ResolvedFlags | None = None):
        """Initialize the engine and build its parser."""
        self.flags = flags or ResolvedFlags()
        self._md = _create_parser(self.flags)

    def render(self, text: str) -> str:
        """Render Markdown text to HTML.

        Parameters
        ----------
        text : str
            Markdown source

        Returns
        -------
        str
            HTML produced by the engine, including its trailing newline

        Raises
        ------
        ParsingError
            If the parser fails on the input (e.g. stack exhaustion on
            pathological nesting)

        """
        try:
            return self._md.render(text)
        except Md2HtmlError:
            raise
        except Exception as e:
            raise ParsingError(
                f"CommonMark rendering failed: {e!r}", parsing_stage="render", original_error=e
            ) from e


@requires_dependencies("commonmark", DEPS_COMMONMARK)
def _create_parser(flags: ResolvedFlags) -> MarkdownIt:
    """Build a markdown-it parser for the given flags."""
    from markdown_it import MarkdownIt

    smart = flags.has_option("SMART")
    hardbreaks = flags.has_option("HARDBREAKS")
    autolink = flags.has_extension("autolink")

    md = MarkdownIt(
        "commonmark",
        {
            "html": flags.has_option("UNSAFE"),
            "breaks": hardbreaks,
            "typographer": smart,
            "linkify": autolink,
        },
    )

    if smart:
        md.enable(["replacements", "smartquotes"])
    if flags.has_option("NOBREAKS") and not hardbreaks:
        md.add_render_rule("softbreak", _render_softbreak_as_space)
    if flags.has_option("GITHUB_PRE_LANG") or flags.has_option("FULL_INFO_STRING"):
        md.add_render_rule(
            "fence",
            _make_fence_rule(
                pre_lang=flags.has_option("GITHUB_PRE_LANG"),
                full_info=flags.has_option("FULL_INFO_STRING"),
            ),
        )
    if flags.has_option("FOOTNOTES"):
        _enable_footnotes(md)

    if flags.has_extension("table"):
        md.enable("table")
    if flags.has_extension("strikethrough"):
        md.enable("strikethrough")
    if autolink:
        _enable_autolink(md)
    if flags.has_extension("tagfilter"):
        md.add_render_rule("html_block", _render_filtered_html)
        md.add_render_rule("html_inline", _render_filtered_html)
    if flags.has_extension("tasklist"):
        _enable_tasklists(md)

    logger.debug(
        f"Built CommonMark parser with options={sorted(flags.options)} extensions={sorted(flags.extensions)}"
    )
    return md


@requires_dependencies("autolink", DEPS_AUTOLINK)
def _enable_autolink(md: MarkdownIt) -> None:
    md.enable("linkify")


@requires_dependencies("footnotes", DEPS_PLUGINS)
def _enable_footnotes(md: MarkdownIt) -> None:
    from mdit_py_plugins.footnote import footnote_plugin

    md.use(footnote_plugin)


@requires_dependencies("tasklist", DEPS_PLUGINS)
def _enable_tasklists(md: MarkdownIt) -> None:
    from mdit_py_plugins.tasklists import tasklists_plugin

    md.use(tasklists_plugin)


def _render_softbreak_as_space(self: Any, tokens: Sequence[Token], idx: int, options: Any, env: Any) -> str:
    return " "


def _render_filtered_html(self: Any, tokens: Sequence[Token], idx: int, options: Any, env: Any) -> str:
    """Neutralize tags disallowed by the GFM tagfilter extension."""
    return _TAGFILTER_RE.sub(r"&lt;\1", tokens[idx].content)


def _make_fence_rule(*, pre_lang: bool, full_info: bool) -> Any:
    """Create a ``fence`` render rule honoring GITHUB_PRE_LANG and FULL_INFO_STRING.

    With ``pre_lang`` the language is emitted as ``<pre lang="...">`` rather
    than as a ``language-`` class on ``<code>``. With ``full_info`` the rest
    of the info string is kept in a ``data-meta`` attribute.
    """
    from markdown_it.common.utils import escapeHtml, unescapeAll

    def render_fence(self: Any, tokens: Sequence[Token], idx: int, options: Any, env: Any) -> str:
        token = tokens[idx]
        info = unescapeAll(token.info).strip() if token.info else ""
        parts = info.split(maxsplit=1)
        lang = parts[0] if parts else ""
        meta = parts[1] if len(parts) == 2 else ""

        pre_attrs = ""
        code_attrs = ""
        if lang:
            if pre_lang:
                pre_attrs = f' lang="{escapeHtml(lang)}"'
            else:
                code_attrs = f' class="{CODE_LANGUAGE_PREFIX}{escapeHtml(lang)}"'
        if full_info and meta:
            code_attrs += f' data-meta="{escapeHtml(meta)}"'

        return f"<pre{pre_attrs}><code{code_attrs}>{escapeHtml(token.content)}</code></pre>\n"

    return render_fence


__all__ = ["CommonMarkEngine"]

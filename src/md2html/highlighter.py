#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/highlighter.py
"""Syntax highlighting of fenced code blocks in rendered HTML.

The engine emits fenced code blocks as ``<pre><code class="language-X">``
(or ``<pre lang="X"><code>`` with ``GITHUB_PRE_LANG``). This module finds
those blocks in the intermediate HTML, runs their text through Pygments and
splices the result back in, wrapped in container markup that records the
language so stylesheets can target it::

    <div class="language-X highlighter-rouge">
      <div class="highlight">
        <pre class="highlight"><code data-lang="X">...spans...</code></pre>
      </div>
    </div>

Blocks without a language are passed through untouched. Languages Pygments
does not know are wrapped the same way, with escaped plain text inside.

"""

from __future__ import annotations

import logging
import re
from html import escape, unescape

from md2html.constants import DEPS_HIGHLIGHT
from md2html.options import HighlightOptions
from md2html.utils.decorators import requires_dependencies
from md2html.utils.security import sanitize_language_identifier

logger = logging.getLogger(__name__)

# Code content is escaped by the engine, so "</code></pre>" cannot occur inside a block.
_CODE_BLOCK_RE = re.compile(
    r'<pre(?: lang="(?P<pre_lang>[^"]*)")?>'
    r'<code(?: class="language-(?P<code_lang>[^"\s]*)")?(?: data-meta="(?P<meta>[^"]*)")?>'
    r"(?P<body>.*?)</code></pre>",
    re.DOTALL,
)


class CodeBlockHighlighter:
    """Replace language-tagged code blocks with Pygments-highlighted markup.

    Parameters
    ----------
    options : HighlightOptions or None, default None
        Highlighting configuration. None uses the defaults.

    Notes
    -----
    The adapter is meant to run exactly once, directly on engine output.
    Running it again over already highlighted HTML is not idempotent.

    """

    def __init__(self, options: HighlightOptions | None = None):
        """Initialize the highlighter with optional configuration."""
        self.options = options or HighlightOptions()

    def highlight(self, html: str) -> str:
        """Highlight every language-tagged code block in ``html``.

        Parameters
        ----------
        html : str
            Intermediate HTML produced by the CommonMark engine

        Returns
        -------
        str
            HTML with highlighted code blocks; all other markup unchanged

        """
        if not self.options.syntax_highlighting:
            return html
        return _CODE_BLOCK_RE.sub(self._replace_block, html)

    def highlight_code(self, language: str, code: str) -> str:
        """Return highlighted markup for ``code``, or escaped text if the language is unknown."""
        return _pygments_highlight(language, code)

    def stylesheet(self, style: str = "default") -> str:
        """Return Pygments CSS rules scoped to the configured ``css_class``."""
        return _pygments_stylesheet(style, f".{self.options.css_class}")

    def _replace_block(self, match: re.Match[str]) -> str:
        pre_lang = match.group("pre_lang")
        raw_language = pre_lang or match.group("code_lang")
        if not raw_language:
            return match.group(0)

        language = sanitize_language_identifier(unescape(raw_language))
        if not language:
            return match.group(0)

        code = unescape(match.group("body"))
        body = self.highlight_code(language, code)
        return self._wrap(language, body, meta=match.group("meta"), lang_on_pre=pre_lang is not None)

    def _wrap(self, language: str, body: str, *, meta: str | None, lang_on_pre: bool) -> str:
        css_class = self.options.css_class
        lang_attr = f' data-lang="{language}"'
        meta_attr = f' data-meta="{meta}"' if meta is not None else ""

        if lang_on_pre:
            pre = f'<pre class="{css_class}"{lang_attr}><code{meta_attr}>'
        else:
            pre = f'<pre class="{css_class}"><code{lang_attr}{meta_attr}>'

        return (
            f'<div class="language-{language} {self.options.wrapper_class}">'
            f'<div class="{css_class}">{pre}{body}</code></pre></div></div>'
        )


@requires_dependencies("highlight", DEPS_HIGHLIGHT)
def _pygments_highlight(language: str, code: str) -> str:
    from pygments import highlight
    from pygments.formatters import HtmlFormatter
    from pygments.lexers import get_lexer_by_name
    from pygments.util import ClassNotFound

    try:
        lexer = get_lexer_by_name(language)
    except ClassNotFound:
        logger.debug(f"No Pygments lexer for '{language}', emitting plain text")
        return escape(code)

    return highlight(code, lexer, HtmlFormatter(nowrap=True))


@requires_dependencies("highlight", DEPS_HIGHLIGHT)
def _pygments_stylesheet(style: str, selector: str) -> str:
    from pygments.formatters import HtmlFormatter

    return HtmlFormatter(style=style).get_style_defs(selector)


def highlight_code_blocks(html: str, options: HighlightOptions | None = None) -> str:
    """Highlight fenced code blocks in engine output (functional form of :class:`CodeBlockHighlighter`)."""
    return CodeBlockHighlighter(options).highlight(html)


__all__ = ["CodeBlockHighlighter", "highlight_code_blocks"]

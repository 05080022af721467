#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the fenced code block highlighter."""

import logging

import pytest

from md2html.highlighter import CodeBlockHighlighter, highlight_code_blocks
from md2html.options import HighlightOptions

PYTHON_BLOCK = '<pre><code class="language-python">def f():\n    return &quot;hi&quot;\n</code></pre>\n'


@pytest.mark.unit
class TestHighlighting:
    """Test replacement of language-tagged blocks."""

    def test_wrapper_structure(self):
        """Test the container markup around highlighted code."""
        html = CodeBlockHighlighter().highlight(PYTHON_BLOCK)
        assert html.startswith(
            '<div class="language-python highlighter-rouge"><div class="highlight">'
            '<pre class="highlight"><code data-lang="python">'
        )
        assert html.endswith("</code></pre></div></div>\n")

    def test_spans_replace_raw_text(self):
        """Test that code is tokenized into Pygments spans."""
        html = CodeBlockHighlighter().highlight(PYTHON_BLOCK)
        assert '<span class="k">def</span>' in html
        assert "def f():" not in html

    def test_code_is_unescaped_before_highlighting(self):
        """Test that entities in engine output are not double-escaped."""
        html = CodeBlockHighlighter().highlight(PYTHON_BLOCK)
        assert "&amp;quot;" not in html
        assert "hi" in html

    def test_unknown_language_falls_back_to_escaped_text(self):
        """Test that unrecognized languages keep the wrapper with plain text."""
        block = '<pre><code class="language-nosuchlang">&lt;b&gt;x&lt;/b&gt;\n</code></pre>\n'
        html = CodeBlockHighlighter().highlight(block)
        assert html == (
            '<div class="language-nosuchlang highlighter-rouge"><div class="highlight">'
            '<pre class="highlight"><code data-lang="nosuchlang">&lt;b&gt;x&lt;/b&gt;\n'
            "</code></pre></div></div>\n"
        )

    def test_block_without_language_untouched(self):
        """Test that untagged blocks pass through unmodified."""
        block = "<pre><code>plain text\n</code></pre>\n"
        assert CodeBlockHighlighter().highlight(block) == block

    def test_surrounding_markup_untouched(self):
        """Test that markup outside code blocks is preserved."""
        html = CodeBlockHighlighter().highlight("<p>before</p>\n" + PYTHON_BLOCK + "<p>after</p>\n")
        assert html.startswith("<p>before</p>\n<div")
        assert html.endswith("</div></div>\n<p>after</p>\n")

    def test_multiple_blocks(self):
        """Test that every tagged block is highlighted independently."""
        second = '<pre><code class="language-ruby">puts 1\n</code></pre>\n'
        html = CodeBlockHighlighter().highlight(PYTHON_BLOCK + "<p>x</p>\n" + second)
        assert 'class="language-python highlighter-rouge"' in html
        assert 'class="language-ruby highlighter-rouge"' in html
        assert "<p>x</p>" in html

    @pytest.mark.parametrize(
        "language,code",
        [("c#", "int x = 1;\n"), ("f#", "let x = 1\n")],
    )
    def test_hash_language_identifiers_highlighted(self, language, code, caplog):
        """Test that identifiers such as c# and f# get the wrapper and Pygments spans."""
        block = f'<pre><code class="language-{language}">{code}</code></pre>\n'
        with caplog.at_level(logging.WARNING, logger="md2html"):
            html = CodeBlockHighlighter().highlight(block)
        assert html.startswith(
            f'<div class="language-{language} highlighter-rouge"><div class="highlight">'
            f'<pre class="highlight"><code data-lang="{language}">'
        )
        assert "<span" in html
        assert "Blocked potentially dangerous language identifier" not in caplog.text

    def test_unsafe_language_identifier_untouched(self, caplog):
        """Test that identifiers with markup characters are not spliced into attributes."""
        block = '<pre><code class="language-x&quot;onclick=&quot;alert(1)">x\n</code></pre>\n'
        with caplog.at_level(logging.WARNING, logger="md2html"):
            html = CodeBlockHighlighter().highlight(block)
        assert html == block
        assert "Blocked potentially dangerous language identifier" in caplog.text

    def test_pre_lang_variant(self):
        """Test blocks whose language sits on the pre element."""
        html = CodeBlockHighlighter().highlight('<pre lang="python"><code>x = 1\n</code></pre>\n')
        assert '<pre class="highlight" data-lang="python"><code>' in html
        assert 'class="language-python highlighter-rouge"' in html

    def test_meta_preserved(self):
        """Test that the data-meta attribute survives highlighting."""
        block = '<pre><code class="language-python" data-meta="linenos">x = 1\n</code></pre>\n'
        html = CodeBlockHighlighter().highlight(block)
        assert '<code data-lang="python" data-meta="linenos">' in html

    def test_html_code_is_escaped(self):
        """Test that highlighted HTML source cannot inject markup."""
        block = '<pre><code class="language-html">&lt;script&gt;alert(1)&lt;/script&gt;\n</code></pre>\n'
        html = CodeBlockHighlighter().highlight(block)
        assert "<script>" not in html
        assert "&lt;" in html


@pytest.mark.unit
class TestHighlightOptions:
    """Test configuration of the highlighter."""

    def test_disabled_returns_input(self):
        """Test that disabling highlighting skips the adapter."""
        highlighter = CodeBlockHighlighter(HighlightOptions(syntax_highlighting=False))
        assert highlighter.highlight(PYTHON_BLOCK) == PYTHON_BLOCK

    def test_custom_classes(self):
        """Test custom wrapper and css classes."""
        highlighter = CodeBlockHighlighter(HighlightOptions(wrapper_class="hl", css_class="code"))
        html = highlighter.highlight(PYTHON_BLOCK)
        assert html.startswith('<div class="language-python hl"><div class="code"><pre class="code">')

    def test_stylesheet_uses_css_class(self):
        """Test generated Pygments CSS is scoped to the css class."""
        css = CodeBlockHighlighter(HighlightOptions(css_class="code")).stylesheet()
        assert ".code" in css

    def test_functional_form(self):
        """Test the module-level helper."""
        assert highlight_code_blocks(PYTHON_BLOCK) == CodeBlockHighlighter().highlight(PYTHON_BLOCK)

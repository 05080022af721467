"""The exported one-shot conversion function."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/md2html/api.py
import logging
from typing import Any

from md2html.constants import EXTENSIONS_KEY, OPTIONS_KEY
from md2html.converter import CommonMarkConverter
from md2html.options import CommonMarkOptions, _coerce_tokens

logger = logging.getLogger(__name__)


def markdown_to_html(content: str, config: Any = None, **kwargs: Any) -> str:
    """Convert Markdown text to HTML in a single call.

    Parameters
    ----------
    content : str
        Markdown source
    config : CommonMarkOptions, mapping, or Any, default None
        Converter configuration; anything that is not an options object or a
        mapping is treated as empty
    **kwargs : Any
        Individual ``CommonMarkOptions`` fields overriding ``config``
        (e.g. ``options=["SMART"]``, ``extensions=["autolink"]``)

    Returns
    -------
    str
        Rendered HTML

    Examples
    --------
        >>> markdown_to_html("https://example.com", extensions=["autolink"])
        '<p><a href="https://example.com">https://example.com</a></p>\\n'

    """
    options = CommonMarkOptions.from_config(config)
    if kwargs:
        overrides = {
            key: _coerce_tokens(value, key) if key in (OPTIONS_KEY, EXTENSIONS_KEY) else value
            for key, value in kwargs.items()
        }
        logger.debug(f"Overriding CommonMark options: {sorted(overrides)}")
        options = options.create_updated(**overrides)
    return CommonMarkConverter(options).convert(content)


__all__ = ["markdown_to_html"]

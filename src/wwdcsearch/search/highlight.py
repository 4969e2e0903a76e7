"""Highlight query matches in subtitle text."""

from __future__ import annotations

import html
import re

DEFAULT_HIGHLIGHT_CLASS = "highlight"


def highlight_text(
    text: str | None, query: str | None, css_class: str = DEFAULT_HIGHLIGHT_CLASS
) -> str | None:
    """Wrap every case-insensitive occurrence of ``query`` in a span.

    The query is matched literally and the matched text keeps its original
    casing, e.g. ``highlight_text("Hello World", "world")`` returns
    ``'Hello <span class="highlight">World</span>'``.

    Args:
        text: Text to annotate
        query: Text to look for
        css_class: Class attribute of the wrapping span

    Returns:
        Annotated text, or ``text`` unchanged when either argument is empty
    """
    if not query or not text:
        return text

    pattern = re.compile(f"({re.escape(query)})", re.IGNORECASE)
    class_attr = html.escape(css_class, quote=True)
    return pattern.sub(
        lambda match: f'<span class="{class_attr}">{match.group(1)}</span>', text
    )

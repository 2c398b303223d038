from __future__ import annotations

import html

from pygments import highlight as pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound


STYLE = "default"
CSS_CLASS = "highlight"

# nowrap: the markdown renderer supplies the surrounding <pre><code>.
_formatter = HtmlFormatter(nowrap=True)


def highlight(code: str, language_hint: str) -> str:
    """Return ``code`` as HTML safe to place inside a ``<code>`` element.

    Known languages are tokenised into ``<span class="...">`` runs; anything
    else comes back escaped but otherwise untouched.
    """
    if not language_hint:
        return html.escape(code, quote=False)

    try:
        lexer = get_lexer_by_name(language_hint, stripnl=False)
    except ClassNotFound:
        return html.escape(code, quote=False)

    return pygments_highlight(code, lexer, _formatter)


def stylesheet() -> str:
    """CSS rules for the token classes emitted by :func:`highlight`."""
    return HtmlFormatter(style=STYLE, cssclass=CSS_CLASS).get_style_defs(f".{CSS_CLASS}")

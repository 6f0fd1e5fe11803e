"""Markdown to HTML for chat display.

Uses markdown-it-py with GFM-like rules (tables, strikethrough, bare URL
linkify) and Pygments for fenced code blocks. Raw HTML in the source is
escaped. Links always open in a new tab without leaking the referrer.
"""

from collections.abc import Sequence
from functools import lru_cache

from markdown_it import MarkdownIt
from markdown_it.common.utils import escapeHtml
from markdown_it.renderer import RendererHTML
from markdown_it.token import Token
from markdown_it.utils import EnvType, OptionsDict
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import TextLexer, get_lexer_by_name
from pygments.util import ClassNotFound

CODE_CSS_CLASS = "highlight"
LINK_TARGET = "_blank"
LINK_REL = "noopener noreferrer"


def _highlight_code(code: str, lang: str, attrs: str) -> str:
    """Highlight a fenced block; unknown languages render as plain text."""
    try:
        lexer = get_lexer_by_name(lang) if lang else TextLexer()
    except ClassNotFound:
        lexer = TextLexer()

    body = highlight(code, lexer, HtmlFormatter(nowrap=True))
    lang_class = f' class="language-{escapeHtml(lang)}"' if lang else ""
    return f'<pre class="{CODE_CSS_CLASS}"><code{lang_class}>{body}</code></pre>'


def _render_link_open(
    self: RendererHTML,
    tokens: Sequence[Token],
    idx: int,
    options: OptionsDict,
    env: EnvType,
) -> str:
    """Render an opening link tag that targets a new tab."""
    token = tokens[idx]
    token.attrSet("target", LINK_TARGET)
    token.attrSet("rel", LINK_REL)
    return self.renderToken(tokens, idx, options, env)


def _build_parser() -> MarkdownIt:
    md = MarkdownIt(
        "gfm-like",
        {"html": False, "typographer": False, "highlight": _highlight_code},
    )
    md.add_render_rule("link_open", _render_link_open)
    return md


_parser = _build_parser()


def render_markdown(text: str) -> str:
    """Convert chat message markdown to HTML.

    Args:
        text: Markdown source, possibly partial (during a reveal).

    Returns:
        HTML fragment ready for display.
    """
    return _parser.render(text)


@lru_cache(maxsize=8)
def highlight_css(style: str) -> str:
    """Return the stylesheet for a Pygments style, scoped to code blocks."""
    return HtmlFormatter(style=style).get_style_defs(f".{CODE_CSS_CLASS}")

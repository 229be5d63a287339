from __future__ import annotations

import markdown
from pygments.formatters import HtmlFormatter

from .config import CODEHILITE_CLASS, HIGHLIGHT_STYLE, MARKDOWN_EXTENSIONS
from .gfm import GfmExtension
from .utils import _norm_text, slugify_heading


def _make_markdown() -> markdown.Markdown:
    return markdown.Markdown(
        extensions=[*MARKDOWN_EXTENSIONS, GfmExtension()],
        extension_configs={
            "codehilite": {
                "css_class": CODEHILITE_CLASS,
                "guess_lang": False,
            },
            "toc": {"slugify": slugify_heading},
        },
        output_format="html",
    )


def render_markdown(body: str) -> str:
    """
    Markdown body -> HTML fragment.

    Tables, strikethrough, autolinks and task lists follow GitHub; fenced
    code with a language tag is highlighted by Pygments. The result is
    injected into the page as-is, so only first-party content may go
    through here.
    """
    return _make_markdown().convert(_norm_text(body))


def highlight_css(style: str = HIGHLIGHT_STYLE) -> str:
    return HtmlFormatter(style=style).get_style_defs(f".{CODEHILITE_CLASS}")

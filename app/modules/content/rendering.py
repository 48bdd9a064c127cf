"""Markdown rendering, syntax highlighting and read time."""

import math
import re

import markdown
from bs4 import BeautifulSoup
from markdown.extensions.fenced_code import FencedCodeExtension
from markdown.extensions.tables import TableExtension
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from infrastructure.logging import get_module_logger

logger = get_module_logger()

LANGUAGE_CLASS_PREFIX = "language-"
TAG_PATTERN = re.compile(r"<[^>]*>")


def render_markdown(text: str) -> str:
    """Convert GitHub-flavoured markdown to HTML.

    Fenced code blocks keep their language as a ``language-<name>`` class.
    """
    return markdown.markdown(
        text or "",
        extensions=[FencedCodeExtension(), TableExtension()],
        output_format="html",
    )


def _code_language(classes) -> str:
    for css_class in classes or ():
        if css_class.startswith(LANGUAGE_CLASS_PREFIX):
            return css_class[len(LANGUAGE_CLASS_PREFIX):]
    return ""


def highlight_code_blocks(html: str) -> str:
    """Highlight every ``<pre><code class="language-x">`` block with Pygments.

    Blocks in a language Pygments does not know are left as they are.
    """
    soup = BeautifulSoup(html, "html.parser")
    formatter = HtmlFormatter(nowrap=True)

    for code in soup.select("pre > code"):
        language = _code_language(code.get("class"))
        if not language:
            continue
        try:
            lexer = get_lexer_by_name(language)
        except ClassNotFound:
            logger.warning("unknown_code_language", language=language)
            continue

        highlighted = highlight(code.get_text(), lexer, formatter)
        code.clear()
        for node in list(BeautifulSoup(highlighted, "html.parser").contents):
            code.append(node.extract())
        code.parent["class"] = [f"{LANGUAGE_CLASS_PREFIX}{language}"]

    return str(soup)


def count_words(text: str) -> int:
    plain = TAG_PATTERN.sub("", text or "")
    return len(plain.split())


def estimate_read_minutes(text: str, words_per_minute: int = 220) -> int:
    """Minutes needed to read text, markup ignored, rounded up."""
    return math.ceil(count_words(text) / words_per_minute)

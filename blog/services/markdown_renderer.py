"""Markdown to HTML rendering for post bodies.

Fenced code blocks are highlighted with Pygments when their language tag
resolves to a lexer, otherwise they are left as plain escaped code. Image
sources are prefixed with the static asset mount so authored paths like
``/posts/hero.png`` resolve to ``/assets/posts/hero.png``.
"""

import html
import logging
import re
from typing import Iterable, Optional

import markdown
from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor
from markdown.treeprocessors import Treeprocessor
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)

DEFAULT_ASSET_PREFIX = "/assets"

_CODE_BLOCK_RE = re.compile(
    r'<pre><code class="language-(?P<lang>[^"\s]+)">(?P<code>.*?)</code></pre>',
    re.DOTALL,
)


def find_lexer(lang: str, languages: Optional[Iterable[str]] = None) -> Optional[Lexer]:
    """Return a Pygments lexer for ``lang`` or None when none is registered."""
    if not lang:
        return None
    lang = lang.lower()
    if languages is not None and lang not in languages:
        return None
    try:
        return get_lexer_by_name(lang, stripnl=False)
    except ClassNotFound:
        return None


class AssetImageTreeprocessor(Treeprocessor):
    def __init__(self, md, asset_prefix: str):
        super().__init__(md)
        self.asset_prefix = asset_prefix

    def run(self, root):
        for img in root.iter("img"):
            src = img.get("src")
            if src is not None:
                img.set("src", f"{self.asset_prefix}{src}")


class FencedCodeHighlighter(Preprocessor):
    """Highlight the code blocks ``fenced_code`` has just stashed.

    Runs between fenced_code (25) and html_block (20), so the stash holds
    fenced blocks only and raw HTML written by the author is never touched.
    """

    def __init__(self, md, languages: Optional[Iterable[str]] = None):
        super().__init__(md)
        self.languages = (
            {lang.lower() for lang in languages} if languages is not None else None
        )
        self.formatter = HtmlFormatter(nowrap=True)

    def run(self, lines):
        blocks = self.md.htmlStash.rawHtmlBlocks
        for index, block in enumerate(blocks):
            match = _CODE_BLOCK_RE.fullmatch(block) if isinstance(block, str) else None
            if match:
                blocks[index] = self._highlight_block(match)
        return lines

    def _highlight_block(self, match: re.Match) -> str:
        lang = match.group("lang")
        lexer = find_lexer(lang, self.languages)
        if lexer is None:
            logger.debug(f"No highlighter registered for '{lang}', leaving code as-is")
            return match.group(0)

        code = html.unescape(match.group("code"))
        highlighted = highlight(code, lexer, self.formatter)
        return f'<pre><code class="language-{lang}">{highlighted}</code></pre>'


class BlogMarkdownExtension(Extension):
    def __init__(
        self,
        asset_prefix: str = DEFAULT_ASSET_PREFIX,
        languages: Optional[Iterable[str]] = None,
        **kwargs,
    ):
        # languages=None means any tag Pygments knows
        self.asset_prefix = asset_prefix
        self.languages = languages
        super().__init__(**kwargs)

    def extendMarkdown(self, md):
        # after inline patterns (20) so image elements exist
        md.treeprocessors.register(
            AssetImageTreeprocessor(md, self.asset_prefix), "asset_images", 15
        )
        md.preprocessors.register(
            FencedCodeHighlighter(md, self.languages), "fenced_code_highlight", 22
        )


class MarkdownRenderer:
    def __init__(
        self,
        asset_prefix: str = DEFAULT_ASSET_PREFIX,
        languages: Optional[Iterable[str]] = None,
    ):
        self.asset_prefix = asset_prefix
        self.languages = list(languages) if languages is not None else None

    def _build(self) -> markdown.Markdown:
        return markdown.Markdown(
            extensions=[
                "fenced_code",
                "tables",
                BlogMarkdownExtension(
                    asset_prefix=self.asset_prefix, languages=self.languages
                ),
            ],
            output_format="html",
        )

    def render(self, body: str) -> str:
        """Convert a Markdown body into HTML."""
        return self._build().convert(body or "")


def render_markdown(body: str, asset_prefix: str = DEFAULT_ASSET_PREFIX) -> str:
    return MarkdownRenderer(asset_prefix=asset_prefix).render(body)

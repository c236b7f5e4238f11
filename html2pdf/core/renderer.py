import logging

import markdown

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = [
    'extra',       # tables, fenced_code, footnotes, attr_list, def_list, abbr
    'toc',
    'sane_lists',
]


def render_markdown(text: str) -> str:
    """
    Renders Markdown to an HTML fragment.

    Fenced code comes out as <pre><code class="language-X">, raw HTML
    (iframes included) passes through untouched.
    """
    md = markdown.Markdown(extensions=MARKDOWN_EXTENSIONS)
    html = md.convert(text)
    logger.debug(f"Renderer: {len(text)} chars of Markdown -> {len(html)} chars of HTML")
    return html

import logging
from dataclasses import dataclass
from pathlib import Path

from html2pdf.core.code_blocks import transform_code_blocks
from html2pdf.core.config import Settings
from html2pdf.core.iframes import transform_iframes
from html2pdf.core.renderer import render_markdown
from html2pdf.core.styles import HEAD_TAG, STYLE_TAG, build_style_tag

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIXES = ('.md', '.markdown')


@dataclass
class Document:
    source_path: str
    raw_content: str
    is_markdown: bool


def load_document(path) -> Document:
    """Reads a source file. Read errors propagate to the caller."""
    source_path = str(path)
    raw_content = Path(source_path).read_text(encoding='utf-8')
    is_markdown = source_path.lower().endswith(MARKDOWN_SUFFIXES)
    return Document(source_path, raw_content, is_markdown)


def document_title(source_path) -> str:
    """File name without its directory and last extension."""
    name = str(source_path).replace('\\', '/').rsplit('/', 1)[-1]
    if '.' in name:
        name = name[:name.rfind('.')]
    return name


def assemble_document(body: str, title=None, head=HEAD_TAG, stylesheet=STYLE_TAG) -> str:
    title_block = f'<div class="title">{title}</div>' if title is not None else ''
    return '<html>' + head + '<body>' + title_block + body + '</body>' + stylesheet + '</html>'


def transform_body(html: str) -> str:
    """Runs the iframe pass, then the code block pass."""
    return transform_code_blocks(transform_iframes(html))


def build_final_html(document: Document, settings=None, title=None) -> str:
    """
    Produces the print-ready HTML for a document.

    Markdown sources are rendered first. `title` overrides the file-name
    title; `settings.show_title` False drops the title block.
    """
    settings = settings or Settings()

    content = document.raw_content
    if document.is_markdown:
        content = render_markdown(content)

    if not settings.show_title:
        title = None
    elif title is None:
        title = document_title(document.source_path)

    stylesheet = build_style_tag(settings.highlight_style)
    final_html = assemble_document(transform_body(content), title=title, stylesheet=stylesheet)
    logger.debug(f"Document: assembled {len(final_html)} chars from {document.source_path}")
    return final_html

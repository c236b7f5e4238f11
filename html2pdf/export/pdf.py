import base64
import io
import logging
import mimetypes
import os
import re
import urllib.parse

import requests
from bs4 import BeautifulSoup
from xhtml2pdf import pisa

from html2pdf.core.config import PageOptions, SandboxOptions
from html2pdf.core.styles import build_print_css

logger = logging.getLogger(__name__)

# Screen-only elements that have no meaning on paper
SCREEN_ONLY_TAGS = ['script', 'button']

CSS_VAR_PATTERN = re.compile(r'var\s*\(\s*(--[\w-]+)\s*(?:,[^)]*)?\)')
CSS_ROOT_PATTERN = re.compile(r':root\s*\{([^}]*)\}')
CSS_VAR_DECLARATION = re.compile(r'(--[\w-]+)\s*:\s*([^;]+);')
FALLBACK_COLOR = '#888888'

PX_TO_PT = 0.75

NO_BACKGROUND_SELECTORS = "body, div, pre, code, table, th, td, blockquote, span"


def collect_css_variables(css_text: str) -> dict:
    """Custom properties declared in :root blocks."""
    variables = {}
    for block in CSS_ROOT_PATTERN.findall(css_text):
        for name, value in CSS_VAR_DECLARATION.findall(block):
            variables[name] = value.strip()
    return variables


def sanitize_css(text: str, variables=None) -> str:
    """
    Replaces var(--x) references with literal values.

    xhtml2pdf does not understand var(); unresolved variables become a
    neutral grey. Without an explicit mapping, :root blocks in `text` are used.
    """
    if variables is None:
        variables = collect_css_variables(text)

    def replace(match):
        return variables.get(match.group(1), FALLBACK_COLOR)

    # Variables may refer to other variables
    for _ in range(5):
        if not CSS_VAR_PATTERN.search(text):
            break
        text = CSS_VAR_PATTERN.sub(replace, text)
    return text


def layout_code_blocks(soup, factory_soup):
    """
    Puts each line-numbered code block into a two column table.

    xhtml2pdf has no absolute positioning, so the gutter cannot float next
    to the code the way it does on screen.
    """
    blocks = soup.find_all('div', class_='line-numbers-mode')
    for block in blocks:
        gutter = block.find('div', class_='line-numbers-wrapper')
        pre = block.find('pre')
        if not gutter or not pre:
            continue

        table = factory_soup.new_tag('table', attrs={'class': 'code-table'})
        row = factory_soup.new_tag('tr')
        gutter_cell = factory_soup.new_tag('td', attrs={'class': 'code-gutter', 'width': '6%'})
        code_cell = factory_soup.new_tag('td', attrs={'class': 'code-body'})

        gutter_cell.append(gutter.extract())
        code_cell.append(pre.extract())
        row.append(gutter_cell)
        row.append(code_cell)
        table.append(row)
        block.append(table)

    if blocks:
        logger.debug(f"PDFExport: laid out {len(blocks)} code block(s) as tables")


def clean_for_print(html: str) -> BeautifulSoup:
    """
    Strips what xhtml2pdf cannot use: screen stylesheets, scripts, buttons.

    Custom properties from the removed stylesheets are still resolved in
    inline style attributes.
    """
    soup = BeautifulSoup(html, 'html.parser')
    factory_soup = BeautifulSoup("", 'html.parser')

    variables = {}
    for style in soup.find_all('style'):
        variables.update(collect_css_variables(style.string or ''))
        style.decompose()
    for link in soup.find_all('link', rel='stylesheet'):
        link.decompose()

    removed = 0
    for tag_name in SCREEN_ONLY_TAGS:
        for el in soup.find_all(tag_name):
            el.decompose()
            removed += 1
    if removed:
        logger.debug(f"PDFExport: removed {removed} screen-only element(s)")

    for el in soup.find_all(style=True):
        el['style'] = sanitize_css(el['style'], variables)

    layout_code_blocks(soup, factory_soup)
    return soup


def build_page_css(page: PageOptions) -> str:
    width = page.width * PX_TO_PT
    height = page.height * PX_TO_PT
    margin = page.margin * PX_TO_PT
    css = (
        "@page {\n"
        f"    size: {width:.2f}pt {height:.2f}pt;\n"
        f"    margin: {margin:.2f}pt;\n"
        "}\n"
    )
    if not page.print_background:
        css += f"{NO_BACKGROUND_SELECTORS} {{ background-color: transparent !important; }}\n"
    return css


def prepare_html(html: str, page: PageOptions, stylesheet: str) -> str:
    """Turns the assembled document into HTML xhtml2pdf can digest."""
    soup = clean_for_print(html)

    if soup.head is None:
        head = soup.new_tag('head')
        if soup.html is not None:
            soup.html.insert(0, head)
        else:
            soup.insert(0, head)
    style = soup.new_tag('style')
    style.string = build_page_css(page) + stylesheet
    soup.head.append(style)
    return str(soup)


class ResourceResolver:
    """
    link_callback for pisa: decides which external resources may be loaded.

    data: URIs pass through. Relative paths resolve against the sandbox base
    directory. Remote URLs are fetched with requests and inlined as data:
    URIs, or dropped when remote access is disabled.
    """

    def __init__(self, sandbox: SandboxOptions):
        self.sandbox = sandbox

    def __call__(self, uri, rel):
        if not uri:
            return uri
        if uri.startswith('data:'):
            return uri

        scheme = urllib.parse.urlparse(uri).scheme
        if scheme in ('http', 'https'):
            return self.fetch_remote(uri)
        if scheme == 'file':
            return urllib.parse.unquote(urllib.parse.urlparse(uri).path)
        if scheme:
            logger.warning(f"PDFExport: unsupported resource scheme '{scheme}': {uri}")
            return ''

        path = urllib.parse.unquote(uri)
        if not os.path.isabs(path):
            path = os.path.join(self.sandbox.base_dir, path)
        return os.path.normpath(path)

    def fetch_remote(self, url):
        if not self.sandbox.allow_remote:
            logger.warning(f"PDFExport: remote resource blocked: {url}")
            return ''

        try:
            response = requests.get(url, timeout=self.sandbox.remote_timeout)
        except requests.RequestException as e:
            logger.warning(f"PDFExport: failed to fetch {url}: {e}")
            return ''

        if response.status_code != 200:
            logger.warning(f"PDFExport: failed to fetch {url}: HTTP {response.status_code}")
            return ''

        content_type = response.headers.get('Content-Type', '').split(';')[0].strip()
        if not content_type:
            content_type = mimetypes.guess_type(url)[0] or 'application/octet-stream'
        payload = base64.b64encode(response.content).decode('ascii')
        return f"data:{content_type};base64,{payload}"


def export_pdf(html: str, page: PageOptions = None, sandbox: SandboxOptions = None, stylesheet: str = None) -> bytes:
    """
    Renders an HTML document to PDF bytes using xhtml2pdf.

    The document's own stylesheets are replaced by `stylesheet` (the print
    stylesheet for the default highlight style when omitted).
    Raises RuntimeError when the engine reports errors.
    """
    page = page or PageOptions()
    sandbox = sandbox or SandboxOptions()
    if stylesheet is None:
        stylesheet = build_print_css()

    source = prepare_html(html, page, stylesheet)

    result = io.BytesIO()
    pisa_status = pisa.CreatePDF(
        source,
        dest=result,
        encoding='utf-8',
        link_callback=ResourceResolver(sandbox),
    )

    if pisa_status.err:
        raise RuntimeError(f"PDF generation error: {pisa_status.err}")

    logger.info(f"PDFExport: Generated {result.getbuffer().nbytes} bytes.")
    return result.getvalue()

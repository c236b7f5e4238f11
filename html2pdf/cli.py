"""Command-line interface: html2pdf --input README.md --output README.pdf"""

import argparse
import logging
import os
import sys
from pathlib import Path

from html2pdf import __version__
from html2pdf.core.config import Settings
from html2pdf.core.document import build_final_html, load_document
from html2pdf.core.styles import build_print_css
from html2pdf.export.pdf import export_pdf

logger = logging.getLogger(__name__)

EXAMPLES = """
Example:
  html2pdf --input README.md --output README.pdf
  html2pdf -i page.html -o page.pdf --no-title
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="html2pdf",
        description="Convert an HTML or Markdown file into a print-styled PDF.",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--input", "-i", default="", help='The path of the source file "*.html, *.md".')
    parser.add_argument("--output", "-o", default="", help='The path of the target file "*.pdf".')
    parser.add_argument("--version", "-v", action="version", version=__version__, help="Show version number.")
    parser.add_argument("--config", type=Path, default=None, help="JSON settings file (defaults to ./html2pdf.json if present).")
    parser.add_argument("--title", default=None, help="Title shown on top of the document (defaults to the file name).")
    parser.add_argument("--no-title", action="store_true", help="Do not add a title block.")
    parser.add_argument("--html-only", action="store_true", help="Write the print-ready HTML instead of a PDF.")
    parser.add_argument("--verbose", action="store_true", help="Log progress to stderr.")
    return parser


def run(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(levelname)s: %(message)s',
    )

    if not args.input:
        print('Missing Parameter "input".')
        return 0
    if not args.output:
        print('Missing Parameter "output".')
        return 0

    settings = Settings.load(args.config)
    if args.no_title:
        settings.show_title = False
    settings.sandbox.base_dir = os.path.dirname(os.path.abspath(args.input))

    document = load_document(args.input)
    final_html = build_final_html(document, settings, title=args.title)
    logger.debug(final_html)

    if args.html_only:
        Path(args.output).write_text(final_html, encoding='utf-8')
    else:
        stylesheet = build_print_css(settings.highlight_style)
        pdf = export_pdf(final_html, settings.page, settings.sandbox, stylesheet)
        Path(args.output).write_bytes(pdf)

    print("success")
    return 0


def main():
    sys.exit(run())

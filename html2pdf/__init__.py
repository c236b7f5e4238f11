"""html2pdf: turn an HTML or Markdown document into a print-styled PDF."""

__version__ = "1.0.0"

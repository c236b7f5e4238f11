import logging
import re

from html2pdf.core.attributes import extract_attribute
from html2pdf.core.highlighter import highlight

logger = logging.getLogger(__name__)

CODE_OPEN = "<pre><code"
CODE_CLOSE = "</code></pre>"
DEFAULT_LANGUAGE = "plaintext"

LANGUAGE_CLASS_PATTERN = re.compile(r'(?:^|\s)language-([^\s"]+)')


def extract_language(start_fragment: str) -> str:
    """Reads `<tag>` from a `language-<tag>` class, defaulting to plaintext."""
    class_value = extract_attribute(start_fragment, 'class="')
    match = LANGUAGE_CLASS_PATTERN.search(class_value)
    if match:
        return match.group(1)
    return DEFAULT_LANGUAGE


def count_lines(code: str) -> int:
    # A trailing empty segment still counts as a line
    return len(code.split("\n"))


def build_line_numbers(line_count: int) -> str:
    markers = "".join(
        f'<span class="line-number">{number}</span><br>'
        for number in range(1, line_count + 1)
    )
    return f'<div class="line-numbers-wrapper" aria-hidden="true">{markers}</div>'


def unescape_code(code: str) -> str:
    """Undoes only the &lt; / &gt; escaping applied by the Markdown renderer."""
    return code.replace("&lt;", "<").replace("&gt;", ">")


def render_code_block(start_fragment: str, code: str, highlighter=highlight) -> str:
    """
    Re-wraps one code region into the print layout:

        <div class="language-X line-numbers-mode">
            <pre><code ...>HIGHLIGHTED</code></pre>
            <div class="line-numbers-wrapper">...</div>
            <button class="copy"></button>
            <span class="lang">X</span>
        </div>
    """
    language = extract_language(start_fragment)
    line_numbers = build_line_numbers(count_lines(code))
    highlighted = highlighter(unescape_code(code), language)

    return (
        f'<div class="language-{language} line-numbers-mode">'
        f'{start_fragment}{highlighted}{CODE_CLOSE}'
        f'{line_numbers}'
        f'<button title="Copy Code" class="copy"></button>'
        f'<span class="lang">{language}</span>'
        f'</div>'
    )


def transform_code_blocks(body: str, highlighter=highlight) -> str:
    """
    Finds <pre><code ...>...</code></pre> regions and replaces each with a
    highlighted, line-numbered block.

    Regions are matched left to right without overlap. An opening marker
    with no closing marker before the next opening marker is left as is.
    """
    output = []
    cursor = 0
    rendered = 0

    open_index = body.find(CODE_OPEN)
    while open_index != -1:
        after_open = open_index + len(CODE_OPEN)
        next_open = body.find(CODE_OPEN, after_open)
        close_index = body.find(CODE_CLOSE, after_open)

        if close_index == -1:
            break
        # The start tag must end before the closing marker
        tag_end = body.find(">", open_index + len("<pre>"), close_index)
        if (next_open != -1 and next_open < close_index) or tag_end == -1:
            open_index = next_open
            continue

        start_fragment = body[open_index:tag_end + 1]
        code = body[tag_end + 1:close_index]

        output.append(body[cursor:open_index])
        output.append(render_code_block(start_fragment, code, highlighter))
        cursor = close_index + len(CODE_CLOSE)
        rendered += 1

        open_index = body.find(CODE_OPEN, cursor)

    output.append(body[cursor:])

    if rendered:
        logger.debug(f"CodeBlocks: rendered {rendered} block(s)")
    return "".join(output)

import logging

from html2pdf.core.attributes import extract_attribute

logger = logging.getLogger(__name__)

IFRAME_OPEN = "<iframe "
IFRAME_CLOSE = "</iframe>"
DEFAULT_LABEL = "Video: "


def build_placeholder(src: str, label: str = DEFAULT_LABEL) -> str:
    """Paragraph with a link to the iframe source, opening in a new tab."""
    return f'<p>{label}<a href="{src}" target="_blank">{src}</a></p>'


def transform_iframes(body: str, label: str = DEFAULT_LABEL) -> str:
    """
    Replaces every closed <iframe ...>...</iframe> element with a link placeholder.

    Elements are matched left to right. An opening tag whose closing tag is
    missing (or only appears after the next opening tag) is kept verbatim.
    """
    output = []
    cursor = 0
    replaced = 0

    open_index = body.find(IFRAME_OPEN)
    while open_index != -1:
        content_start = open_index + len(IFRAME_OPEN)
        next_open = body.find(IFRAME_OPEN, content_start)
        close_index = body.find(IFRAME_CLOSE, content_start)

        if close_index == -1:
            break
        if next_open != -1 and next_open < close_index:
            # Unterminated, leave it and retry from the next opening tag
            open_index = next_open
            continue

        # Attributes live in the opening tag, i.e. up to the first '>'
        opening_tag = body[content_start:close_index].split(">", 1)[0]
        src = extract_attribute(opening_tag, 'src="')

        output.append(body[cursor:open_index])
        output.append(build_placeholder(src, label))
        cursor = close_index + len(IFRAME_CLOSE)
        replaced += 1

        open_index = body.find(IFRAME_OPEN, cursor)

    output.append(body[cursor:])

    if replaced:
        logger.debug(f"Iframes: replaced {replaced} element(s) with links")
    return "".join(output)

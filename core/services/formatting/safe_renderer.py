"""Markdown to HTML conversion with removal of active content."""
import re
from html import unescape
from typing import Optional

import markdown
from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from core.services.errors import ErrorHandler
from core.utils.logger import logger

MARKDOWN_EXTENSIONS = ["extra", "sane_lists", "nl2br"]
MAX_SANITIZE_PASSES = 5

# Pre-conversion cleanup of common model output quirks
_SPACING_CHARS = re.compile(r"&nbsp;|\u00a0|\t")
_GLUED_RULE = re.compile(r"^([^\n|]*[^\s|:\-])[ \t]*-{3,}[ \t]*$", re.MULTILINE)
_STAR_BULLET = re.compile(r"^([ \t]*)\*[ \t]+", re.MULTILINE)
_HEADING_NO_SPACE = re.compile(r"^(#{1,6})(?=[^\s#])", re.MULTILINE)
_QUOTE_NO_SPACE = re.compile(r"^([ \t]*>)(?=[^\s>])", re.MULTILINE)

_SCRIPT_BLOCK = re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE)
_SCRIPT_TAG = re.compile(r"</?script\b[^>]*>?", re.IGNORECASE)
_SCRIPT_SCHEME = re.compile(r"javascript:", re.IGNORECASE)
_TAG_TEXT = re.compile(r"<[a-zA-Z][^<]*")
_EVENT_HANDLER = re.compile(r"""(?<![\w-])on\w+\s*=\s*(?:"[^"]*"|'[^']*'|[^\s>]*)""", re.IGNORECASE)
_QUOTED_EVENT_HANDLER = re.compile(r"""(?<![\w-])on\w+\s*=\s*(?:"[^"]*"|'[^']*')""", re.IGNORECASE)
_TAG_NAME = re.compile(r"[a-z][a-z0-9-]*")
_ATTRIBUTE_NAME = re.compile(r"[a-z_:][-a-z0-9_:.]*")
_URL_NOISE = re.compile(r"[\s\x00-\x1f]+")

URL_ATTRIBUTES = {"href", "src", "action", "formaction", "xlink:href"}

_HEADING_MARKERS = re.compile(r"<(h[1-6])(\b[^>]*)>#{1,6}\s+", re.IGNORECASE)
_EMPTY_HEADING = re.compile(r"<(h[1-6])\b[^>]*>\s*</\1>", re.IGNORECASE)


def prepare_markdown(text: str) -> str:
    """Normalize spacing, glued rules, bullets, headings and quotes before conversion."""
    text = _SPACING_CHARS.sub(" ", text)
    text = _GLUED_RULE.sub(r"\1\n\n---\n", text)
    text = _STAR_BULLET.sub(r"\1* ", text)
    text = _HEADING_NO_SPACE.sub(r"\1 ", text)
    text = _QUOTE_NO_SPACE.sub(r"\1 ", text)
    return text.strip()


def strip_script_schemes(value: str) -> str:
    """Remove every javascript: scheme (any case), including ones revealed by a removal."""
    previous = None
    while previous != value:
        previous = value
        value = _SCRIPT_SCHEME.sub("", value)
    return value


def is_script_url(value: str) -> bool:
    """Check whether a URL attribute value resolves to the javascript: scheme.

    Entities are decoded and whitespace and control characters dropped first,
    the way a browser reads the value.
    """
    return _URL_NOISE.sub("", unescape(value)).lower().startswith("javascript:")


def safe_url(value: str) -> str:
    """Blank out a URL that would run script; otherwise drop any javascript: text."""
    if is_script_url(value):
        return ""
    return strip_script_schemes(value)


def _strip_text_handlers(match: "re.Match[str]") -> str:
    return _EVENT_HANDLER.sub("", match.group(0))


def _scrub_text(text: str) -> str:
    """Remove script constructs spelled out in text, such as escaped markup in code spans."""
    text = _SCRIPT_BLOCK.sub("", text)
    text = _SCRIPT_TAG.sub("", text)
    text = strip_script_schemes(text)
    text = _TAG_TEXT.sub(_strip_text_handlers, text)
    return _QUOTED_EVENT_HANDLER.sub("", text)


def _clean_attributes(element: Tag) -> None:
    for name, value in list(element.attrs.items()):
        text = " ".join(value) if isinstance(value, list) else value or ""
        lowered = name.lower()
        if (
            not _ATTRIBUTE_NAME.fullmatch(lowered)
            or lowered.startswith("on")
            or (lowered in URL_ATTRIBUTES and is_script_url(text))
        ):
            del element[name]
        elif isinstance(value, str):
            element[name] = strip_script_schemes(value)


def _clean_markup(html: str) -> str:
    soup = BeautifulSoup(html, "html.parser")

    for script in soup.find_all("script"):
        script.decompose()

    for element in soup.find_all(True):
        if not _TAG_NAME.fullmatch(element.name):
            # Malformed names such as "scr<script" are unwrapped, keeping their text
            element.unwrap()
            continue
        _clean_attributes(element)

    for node in soup.find_all(string=True):
        if isinstance(node, Comment):
            node.extract()
        elif type(node) is NavigableString:
            cleaned = _scrub_text(str(node))
            if cleaned != node:
                node.replace_with(cleaned)

    return str(soup)


def sanitize_html(html: str) -> str:
    """
    Remove script elements, javascript: URLs and inline event handlers.

    The markup is parsed into a tree, so attributes are read the way a
    browser reads them whatever their quoting. Cleaning repeats until the
    serialized markup stops changing, so fragments that reassemble into a
    dangerous construct after one pass are caught too.
    """
    for _ in range(MAX_SANITIZE_PASSES):
        cleaned = _clean_markup(html)
        if cleaned == html:
            break
        html = cleaned
    else:
        logger.warning(f"Sanitizer did not settle after {MAX_SANITIZE_PASSES} passes")
    return html


def tidy_headings(html: str) -> str:
    """Strip leftover leading # characters inside headings and drop empty headings."""
    html = _HEADING_MARKERS.sub(r"<\1\2>", html)
    return _EMPTY_HEADING.sub("", html)


def render_safe(markdown_text: Optional[str]) -> str:
    """
    Convert markdown to HTML that carries no scripts or event handlers.

    Args:
        markdown_text: Markdown, possibly containing inline HTML

    Returns:
        Sanitized HTML; the unconverted input when conversion fails
    """
    if not markdown_text:
        return ""

    try:
        html = markdown.markdown(
            prepare_markdown(markdown_text),
            extensions=MARKDOWN_EXTENSIONS,
            output_format="html5",
        )
        return tidy_headings(sanitize_html(html))
    except Exception as e:
        return ErrorHandler.handle_render_error(e, markdown_text)

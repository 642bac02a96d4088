"""Text repair rules for markdown-like answers with inconsistent formatting.

Each rule is a pure ``str -> str`` function over the whole text. ``repair_text``
applies them in the order of ``REPAIR_RULES``; the composition is idempotent,
so repaired text can safely be repaired again.
"""
import re
from typing import Callable, List, Optional, Tuple

HORIZONTAL_RULE = "---"

_UNDERSCORE_BOLD = re.compile(r"__(.*?)__")
_BLANK_RUN = re.compile(r"\n\s*\n\s*\n")
_GLYPH_BULLET = re.compile(r"^([^\S\n]*)[•–][^\S\n]+", re.MULTILINE)
_RULE_LINE = re.compile(r"^[-_*](?:\s*[-_*]){2,}$")
# "-item" is accepted as a bullet, "-5" and "+1 555" are not; "*" needs a space so emphasis survives
_BULLET_LINE = re.compile(r"^(\s*)(?:[-+](?:\s+|(?=[^\W\d_]))|\*\s+)(\S.*)$")
_NUMBERED_LINE = re.compile(r"^(\s*)(\d+)\.(?:\s+|(?=[^\W\d_]))(\S.*)$")
_HEADING_NO_SPACE = re.compile(r"^(#+)(?=[^\s#])", re.MULTILINE)
_HEADING_LINE = re.compile(r"^(#+)\s+(.*)$")


def _canonical_line(line: str) -> str:
    """Canonical form of a single line: rules, bullets and numbered items."""
    if _RULE_LINE.match(line.strip()):
        return HORIZONTAL_RULE

    bullet = _BULLET_LINE.match(line)
    if bullet:
        canonical = f"{bullet.group(1)}- {bullet.group(2)}"
        # "+ ---" only becomes recognisable as a rule once its marker is canonical
        return HORIZONTAL_RULE if _RULE_LINE.match(canonical.strip()) else canonical

    numbered = _NUMBERED_LINE.match(line)
    if numbered:
        return f"{numbered.group(1)}{numbered.group(2)}. {numbered.group(3)}"

    return line


def is_list_item(line: str) -> bool:
    """True when the line is (or canonicalizes to) a bulleted or numbered item."""
    canonical = _canonical_line(line)
    if canonical == HORIZONTAL_RULE:
        return False
    return bool(_BULLET_LINE.match(canonical) or _NUMBERED_LINE.match(canonical))


def normalize_emphasis(text: str) -> str:
    """Rewrite __bold__ as **bold**."""
    return _UNDERSCORE_BOLD.sub(r"**\1**", text)


def normalize_line_breaks(text: str) -> str:
    """Turn escaped newlines into real ones, collapse blank runs and trim."""
    text = text.replace("\\n", "\n")
    text = text.replace("\r\n", "\n")
    text = _BLANK_RUN.sub("\n\n", text)
    return text.strip()


def normalize_bullet_glyphs(text: str) -> str:
    """Replace • and – bullets at line start with "- ", keeping indentation."""
    return _GLYPH_BULLET.sub(r"\1- ", text)


def separate_list_blocks(text: str) -> str:
    """
    Insert a blank line between prose and the list that follows it.

    A list item gets a blank line above it only when the previous line is
    non-blank and is not itself a list item.
    """
    separated: List[str] = []
    for line in text.split("\n"):
        if separated and is_list_item(line):
            previous = separated[-1]
            if previous.strip() and not is_list_item(previous):
                separated.append("")
        separated.append(line)
    return "\n".join(separated)


def canonicalize_lines(text: str) -> str:
    """Canonicalize horizontal rules, bullet markers and numbered items line by line."""
    return "\n".join(_canonical_line(line) for line in text.split("\n"))


def space_heading_markers(text: str) -> str:
    """Ensure "#Title" reads "# Title"."""
    return _HEADING_NO_SPACE.sub(r"\1 ", text)


def collapse_duplicate_headings(text: str) -> str:
    """
    Drop a heading whose text repeats the heading immediately above it.

    Comparison is case-insensitive and ignores the heading level. Any
    non-heading line (blank lines included) ends the run.
    """
    kept: List[str] = []
    last_heading: Optional[str] = None
    for line in text.split("\n"):
        heading = _HEADING_LINE.match(line)
        if not heading:
            last_heading = None
            kept.append(line)
            continue

        current = heading.group(2).strip().lower()
        if current == last_heading:
            continue
        last_heading = current
        kept.append(line)
    return "\n".join(kept)


def trim(text: str) -> str:
    return text.strip()


RepairRule = Callable[[str], str]

REPAIR_RULES: Tuple[RepairRule, ...] = (
    normalize_emphasis,
    normalize_line_breaks,
    normalize_bullet_glyphs,
    separate_list_blocks,
    canonicalize_lines,
    space_heading_markers,
    collapse_duplicate_headings,
    trim,
)


def repair_text(raw: Optional[str]) -> str:
    """
    Repair markdown-like prose so it renders as well-formed markdown.

    Args:
        raw: Untrusted text; None is treated as empty

    Returns:
        Repaired text (possibly empty)
    """
    if raw is None:
        return ""
    text = raw if isinstance(raw, str) else str(raw)
    for rule in REPAIR_RULES:
        text = rule(text)
    return text

"""Expansion of [TABLE:title] and [ICON:name] tokens inside answer text."""
import re
from html import escape
from typing import Callable, List, Optional, Sequence

from core.models.answer import Table
from core.services.formatting.icon_registry import render_icon
from core.utils.logger import logger

ICON_TOKEN = re.compile(r"\[ICON:(.*?)\]")


def table_placeholder(title: str) -> str:
    return f"[TABLE:{title}]"


def render_table_html(table: Table) -> str:
    """
    Render a table as a single line of HTML.

    Titles and cells are escaped. The header section is emitted only when the
    table has headers; rows keep however many cells they have.
    """
    parts: List[str] = [
        '<div class="overflow-x-auto my-4">',
        '<table class="min-w-full border border-gray-300 rounded-lg overflow-hidden shadow-sm">',
        f'<caption class="p-2 text-sm text-gray-500 font-medium text-left">{escape(table.title)}</caption>',
    ]

    if table.headers:
        header_cells = "".join(
            '<th class="p-3 text-left text-xs font-semibold text-gray-600 uppercase tracking-wider">'
            f"{escape(header)}</th>"
            for header in table.headers
        )
        parts.append(f'<thead class="bg-gray-100"><tr>{header_cells}</tr></thead>')

    parts.append('<tbody class="divide-y divide-gray-200">')
    for row in table.rows:
        cells = "".join(f'<td class="p-3 text-sm text-gray-800">{escape(cell)}</td>' for cell in row)
        parts.append(f'<tr class="bg-white">{cells}</tr>')
    parts.append("</tbody></table></div>")

    return "".join(parts)


def _markdown_cell(value: str) -> str:
    return value.replace("|", "\\|").replace("\r", " ").replace("\n", " ").strip()


def render_table_markdown(table: Table) -> str:
    """
    Render a table as a GitHub-flavoured markdown grid.

    Tables without headers get an empty header row so the grid still renders.
    """
    width = max([len(table.headers)] + [len(row) for row in table.rows])
    if width == 0:
        return ""

    def line(cells: Sequence[str]) -> str:
        padded = [_markdown_cell(cell) for cell in cells] + [""] * (width - len(cells))
        return "| " + " | ".join(padded) + " |"

    lines = [line(table.headers), "|" + "|".join(["---"] * width) + "|"]
    lines.extend(line(row) for row in table.rows)
    return "\n".join(lines)


def expand_tables(
    markdown: str,
    tables: Optional[Sequence[Table]],
    render_table: Callable[[Table], str] = render_table_html
) -> str:
    """
    Replace the first [TABLE:title] token of each table with its rendering.

    Tables are processed in list order; a table whose token is absent is
    skipped, and tokens naming no table stay as literal text.
    """
    for table in tables or []:
        token = table_placeholder(table.title)
        if token not in markdown:
            logger.debug(f"No placeholder for table '{table.title}'; skipping")
            continue
        markdown = markdown.replace(token, render_table(table), 1)
    return markdown


def expand_icons(markdown: str, icon_renderer: Callable[[str], str] = render_icon) -> str:
    """Replace every [ICON:name] token; unknown names render as nothing."""
    return ICON_TOKEN.sub(lambda match: icon_renderer(match.group(1)), markdown)


def expand_placeholders(
    markdown: str,
    tables: Optional[Sequence[Table]] = None,
    render_table: Callable[[Table], str] = render_table_html,
    icon_renderer: Callable[[str], str] = render_icon
) -> str:
    """
    Expand table tokens, then icon tokens.

    Args:
        markdown: Answer text containing placeholder tokens
        tables: Tables referenced by [TABLE:title] tokens
        render_table: Renderer used for each matched table
        icon_renderer: Renderer used for each icon name

    Returns:
        Text with tokens replaced by their renderings
    """
    return expand_icons(expand_tables(markdown or "", tables, render_table), icon_renderer)

"""Text repair, placeholder expansion and safe HTML rendering."""
from core.services.formatting.text_repair import REPAIR_RULES, repair_text
from core.services.formatting.icon_registry import get_icon_svg, icon_names, render_icon
from core.services.formatting.placeholder_expander import (
    expand_placeholders,
    render_table_html,
    render_table_markdown,
    table_placeholder,
)
from core.services.formatting.safe_renderer import render_safe, safe_url, sanitize_html
from core.services.formatting.display import DisplayRenderer

__all__ = [
    "REPAIR_RULES",
    "repair_text",
    "get_icon_svg",
    "icon_names",
    "render_icon",
    "expand_placeholders",
    "render_table_html",
    "render_table_markdown",
    "table_placeholder",
    "render_safe",
    "safe_url",
    "sanitize_html",
    "DisplayRenderer",
]

"""Markdown export of a chat message."""
import re
from typing import List

from core.models.answer import Table
from core.models.message import ChatMessage
from core.services.export.base import BaseExporter
from core.services.formatting.placeholder_expander import (
    expand_placeholders,
    render_table_markdown,
    table_placeholder,
)

_EXTRA_BLANK_LINES = re.compile(r"\n{3,}")


def _inline_table(table: Table) -> str:
    grid = render_table_markdown(table)
    heading = f"**{table.title}**\n\n" if table.title else ""
    return f"\n\n{heading}{grid}\n\n"


class MarkdownExporter(BaseExporter):
    """Export the question, answer, tables and links as a markdown document."""

    name = "markdown"
    media_type = "text/markdown"
    file_extension = "md"

    def export(self, message: ChatMessage) -> bytes:
        return self.render(message).encode("utf-8")

    def render(self, message: ChatMessage) -> str:
        """
        Build the markdown document.

        Tables are inlined where their token appears; tables without a token
        are appended under their own heading. Icon tokens are dropped.
        """
        response = message.response
        tables = response.tables or []
        sections: List[str] = []

        if message.query:
            sections.append(f"# {message.query}")

        sections.append(
            expand_placeholders(message.text, tables, render_table=_inline_table, icon_renderer=lambda name: "")
        )

        for table in tables:
            if table_placeholder(table.title) not in message.text:
                sections.append(f"### {table.title}\n\n{render_table_markdown(table)}")

        images = [item for item in response.related_content or [] if item.image]
        if images:
            sections.append("## Related Images\n\n" + "\n\n".join(f"![{i.title}]({i.image})" for i in images))

        if response.file_links:
            sections.append("## Files\n\n" + "\n".join(f"- [{f.title}]({f.url})" for f in response.file_links))

        if response.related_content:
            sections.append(
                "## Related Pages\n\n" + "\n".join(f"- [{p.title}]({p.url})" for p in response.related_content)
            )

        document = "\n\n".join(section.strip() for section in sections if section.strip())
        return _EXTRA_BLANK_LINES.sub("\n\n", document) + "\n"

"""Word (.docx) export of a chat message."""
import re
from io import BytesIO

from docx import Document
from docx.shared import Pt

from core.models.answer import Table
from core.models.message import ChatMessage
from core.services.export.base import BaseExporter
from core.services.formatting.placeholder_expander import expand_placeholders

_TAG = re.compile(r"<[^>]*>")
# Control characters that are not allowed in XML text
_XML_INVALID = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")


def _xml_safe(text: str) -> str:
    return _XML_INVALID.sub("", text or "")


class DocxExporter(BaseExporter):
    """Export the question, answer, tables and links as a Word document."""

    name = "docx"
    media_type = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
    file_extension = "docx"

    def export(self, message: ChatMessage) -> bytes:
        document = self.build_document(message)
        bio = BytesIO()
        document.save(bio)
        return bio.getvalue()

    def build_document(self, message: ChatMessage):
        """
        Build the python-docx Document for a message.

        Args:
            message: Question plus canonical response

        Returns:
            docx Document ready to be saved
        """
        response = message.response
        doc = Document()

        if message.query:
            doc.add_heading(_xml_safe(message.query), level=1)

        # Tables get their own section below, so their tokens are dropped from the prose
        answer = expand_placeholders(
            message.text, response.tables, render_table=lambda table: "", icon_renderer=lambda name: ""
        )
        for line in _TAG.sub("", answer).strip().split("\n"):
            if line.strip():
                doc.add_paragraph(_xml_safe(line))

        for table in response.tables or []:
            doc.add_heading(_xml_safe(table.title), level=2)
            self._add_table(doc, table)

        images = [item for item in response.related_content or [] if item.image]
        if images:
            doc.add_heading("Related Images", level=2)
            for item in images:
                doc.add_paragraph(_xml_safe(f"{item.title}: {item.image}"))

        if response.file_links:
            doc.add_heading("Files", level=2)
            for link in response.file_links:
                doc.add_paragraph(_xml_safe(f"{link.title}: {link.url}"), style="List Bullet")

        if response.related_content:
            doc.add_heading("Related Pages", level=2)
            for page in response.related_content:
                doc.add_paragraph(_xml_safe(f"{page.title}: {page.url}"), style="List Bullet")

        return doc

    def _add_table(self, doc, table: Table) -> None:
        """Add a grid table; rows shorter than the widest row leave trailing cells empty."""
        width = max([len(table.headers)] + [len(row) for row in table.rows])
        if width == 0:
            return

        grid = doc.add_table(rows=0, cols=width)
        grid.style = "Table Grid"

        if table.headers:
            cells = grid.add_row().cells
            for cell, header in zip(cells, table.headers):
                run = cell.paragraphs[0].add_run(_xml_safe(header))
                run.bold = True

        for row in table.rows:
            cells = grid.add_row().cells
            for cell, value in zip(cells, row):
                run = cell.paragraphs[0].add_run(_xml_safe(value))
                run.font.size = Pt(10)

"""Standalone HTML export of a chat message."""
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from core.models.message import ChatMessage
from core.services.export.base import BaseExporter
from core.services.formatting.display import DisplayRenderer
from core.services.formatting.safe_renderer import safe_url

TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "export.html"


class HtmlExporter(BaseExporter):
    """Render a chat message into a self-contained HTML page."""

    name = "html"
    media_type = "text/html"
    file_extension = "html"

    def __init__(self, display: Optional[DisplayRenderer] = None):
        self.display = display or DisplayRenderer()
        self.env = Environment(
            loader=FileSystemLoader([str(TEMPLATE_DIR)]),
            autoescape=select_autoescape(["html"]),
        )
        self.env.filters["safe_url"] = safe_url
        self.template = self.env.get_template(TEMPLATE_NAME)

    def export(self, message: ChatMessage) -> bytes:
        return self.render(message).encode("utf-8")

    def render(self, message: ChatMessage) -> str:
        response = message.response
        related = response.related_content or []
        context = {
            "query": message.query,
            "answer_html": self.display.render_text(message.text, response.tables),
            "related_images": [item for item in related if item.image],
            "files": response.file_links or [],
            "pages": related,
        }
        return self.template.render(**context)

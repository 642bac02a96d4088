"""Exporter registry."""
from typing import List

from core.services.export.base import BaseExporter


def _normalized(name: str) -> str:
    return (name or "").strip().lower()


def get_exporter(name: str) -> BaseExporter:
    """Return a fresh exporter for a format name; raises ValueError for unknown names."""
    normalized = _normalized(name)
    if normalized in {"markdown", "md"}:
        from core.services.export.markdown_exporter import MarkdownExporter

        return MarkdownExporter()
    if normalized in {"docx", "word"}:
        from core.services.export.docx_exporter import DocxExporter

        return DocxExporter()
    if normalized in {"html", "htm"}:
        from core.services.export.html_exporter import HtmlExporter

        return HtmlExporter()
    raise ValueError(f"Unknown export format '{name}'")


def available_exporters() -> List[str]:
    return ["markdown", "docx", "html"]

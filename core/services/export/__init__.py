"""Download formats for a chat message."""
from core.services.export.base import BaseExporter
from core.services.export.registry import available_exporters, get_exporter

__all__ = ["BaseExporter", "available_exporters", "get_exporter"]

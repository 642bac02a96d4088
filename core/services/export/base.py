"""Base class for chat message exporters."""
from abc import ABC, abstractmethod
from typing import Optional

from app.config import settings
from core.models.message import ChatMessage


class BaseExporter(ABC):
    """Shared interface for any download format."""

    name: str = "base"
    media_type: str = "application/octet-stream"
    file_extension: str = "bin"

    @abstractmethod
    def export(self, message: ChatMessage) -> bytes:
        """Serialize a chat message into the bytes of a downloadable file."""

    def filename(self, stem: Optional[str] = None) -> str:
        return f"{stem or settings.EXPORT_FILENAME}.{self.file_extension}"

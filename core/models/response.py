"""HTTP envelope models."""
from pydantic import BaseModel
from typing import Optional, Any, List

from core.models.answer import AnswerResponse


class APIResponse(BaseModel):
    """Generic API response model."""
    success: bool
    message: str
    data: Optional[Any] = None


class NormalizedAnswer(BaseModel):
    """Canonical response plus the markup the chat view injects."""
    response: AnswerResponse
    html: str


class ExportFormats(BaseModel):
    """Export formats the service can produce."""
    formats: List[str]

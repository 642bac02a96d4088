"""Chat message models consumed by display and export collaborators."""
from datetime import datetime
from pydantic import BaseModel, Field
from typing import Optional

from core.models.answer import AnswerResponse
from core.services.errors.fallback_responses import FallbackResponses


class ChatMessage(BaseModel):
    """Bot turn: the user's question plus the canonical response to it."""
    query: Optional[str] = None  # Original user question
    response: AnswerResponse = Field(default_factory=AnswerResponse)
    timestamp: datetime = Field(default_factory=datetime.now)

    class Config:
        frozen = True

    @property
    def text(self) -> str:
        """Answer text shown to the user, or the empty-answer fallback."""
        return self.response.answer or FallbackResponses.get_response("empty_answer")


class ExportRequest(BaseModel):
    """Export request model."""
    query: Optional[str] = None
    response: AnswerResponse

    def to_message(self) -> ChatMessage:
        return ChatMessage(query=self.query, response=self.response)

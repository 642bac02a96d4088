"""Display rendering of a normalized answer."""
from typing import Optional, Sequence

from core.models.answer import AnswerResponse, Table
from core.services.formatting.placeholder_expander import expand_placeholders
from core.services.formatting.safe_renderer import render_safe


class DisplayRenderer:
    """Expand placeholders in an answer and convert it to safe HTML."""

    def render_text(self, text: str, tables: Optional[Sequence[Table]] = None) -> str:
        return render_safe(expand_placeholders(text, tables or []))

    def render(self, response: AnswerResponse) -> str:
        """
        Render a canonical response for display.

        Args:
            response: Validated answer with optional tables

        Returns:
            Sanitized HTML of the answer body
        """
        return self.render_text(response.answer, response.tables)

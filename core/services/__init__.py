"""Core services package - organized by pipeline stage.

Main Services:
- ResponseParser: Backend reply (JSON or text) to canonical AnswerResponse
- repair_text: Markdown repair for unstructured answers
- DisplayRenderer: Placeholder expansion and sanitized HTML for display
- Exporters (core.services.export): Markdown, Word and HTML downloads

Usage:
    from core.services import ResponseParser, DisplayRenderer

    # Normalize a reply body
    parser = ResponseParser()
    response = parser.parse_body(body, "application/json")

    # Render it for display
    html = DisplayRenderer().render(response)
"""
# Normalization services
from core.services.normalization import ResponseParser, ResponseValidator, ShapeReconciler

# Formatting services
from core.services.formatting import DisplayRenderer, repair_text, render_safe

__all__ = [
    # Main Services (Public API)
    "ResponseParser",
    "DisplayRenderer",
    # Pipeline Stages
    "ShapeReconciler",
    "ResponseValidator",
    "repair_text",
    "render_safe",
]

"""Fallback responses for error scenarios."""


class FallbackResponses:
    """Predefined fallback sentences shown when a reply cannot be displayed as-is."""

    RESPONSES = {
        "empty_answer": (
            "Sorry, I couldn't process your request."
        ),
        "unreadable_response": (
            "Failed to get response"
        ),
        "render_error": (
            "The answer could not be formatted for display."
        ),
        "export_error": (
            "Export failed. Please try again."
        ),
    }

    DEFAULT_RESPONSE = "An error occurred."

    @classmethod
    def get_response(cls, error_type: str) -> str:
        """
        Get fallback response for error type.

        Args:
            error_type: Type of error (empty_answer, unreadable_response, etc.)

        Returns:
            Fallback response text
        """
        return cls.RESPONSES.get(error_type, cls.DEFAULT_RESPONSE)

"""Error handling utilities."""
from typing import Callable, Any, Optional

from core.services.errors.fallback_responses import FallbackResponses
from core.utils.logger import logger


class ErrorHandler:
    """Centralized error handling with fallback responses.

    Every handler logs the anomaly and hands back a value the caller can
    display; none of them re-raise.
    """

    @staticmethod
    def handle_render_error(error: Exception, content: str) -> str:
        """Handle markdown conversion errors by returning the unconverted text."""
        logger.error(f"Render error: {str(error)} (content length {len(content)})", exc_info=True)
        return content

    @staticmethod
    def handle_decode_error(error: Exception, raw_text: str) -> str:
        """Handle a body that claimed to be JSON but could not be decoded."""
        logger.warning(f"Response body could not be decoded as JSON: {str(error)}")
        return raw_text or FallbackResponses.get_response("unreadable_response")

    @staticmethod
    def handle_export_error(error: Exception, export_format: str) -> str:
        """Handle export failures with a fallback message."""
        logger.error(f"Export error ({export_format}): {str(error)}", exc_info=True)
        return FallbackResponses.get_response("export_error")

    @staticmethod
    def safe_execute(
        func: Callable,
        default_return: Any = None,
        error_type: Optional[str] = None
    ) -> Any:
        """
        Safely execute a function with error handling.

        Args:
            func: Function to execute
            default_return: Default return value on error
            error_type: Fallback response key used instead of default_return when given

        Returns:
            Function result, the fallback sentence for error_type, or default_return
        """
        try:
            return func()
        except Exception as e:
            logger.error(f"Error in safe_execute: {str(e)}")
            if error_type:
                return FallbackResponses.get_response(error_type)
            return default_return

"""Error handling and fallback sentences for the answer pipeline."""
from core.services.errors.error_handler import ErrorHandler
from core.services.errors.fallback_responses import FallbackResponses

__all__ = ["ErrorHandler", "FallbackResponses"]

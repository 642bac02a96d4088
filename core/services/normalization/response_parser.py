"""Entry points that turn a backend reply body into an AnswerResponse."""
import json
from typing import Any, Optional, Union

from core.models.answer import AnswerResponse
from core.services.errors import ErrorHandler
from core.services.formatting.text_repair import repair_text
from core.services.normalization.response_validator import ResponseValidator
from core.services.normalization.shape_reconciler import ShapeReconciler
from core.utils.logger import logger


def _looks_like_json(text: str) -> bool:
    return (text.startswith("{") and text.endswith("}")) or (
        text.startswith("[") and text.endswith("]")
    )


class ResponseParser:
    """Decode, reconcile, validate and (for prose) repair a reply."""

    def __init__(
        self,
        reconciler: Optional[ShapeReconciler] = None,
        validator: Optional[ResponseValidator] = None
    ):
        self.reconciler = reconciler or ShapeReconciler()
        self.validator = validator or ResponseValidator()

    def parse_json(self, payload: Any) -> AnswerResponse:
        """
        Normalize an already-decoded JSON value.

        Args:
            payload: Decoded JSON of any shape

        Returns:
            Validated AnswerResponse
        """
        return self.validator.validate(self.reconciler.reconcile(payload))

    def parse_text(self, text: Optional[str]) -> AnswerResponse:
        """
        Normalize a plain-text reply.

        Text that is entirely a JSON object or array is decoded and treated as
        JSON; everything else is repaired and used as the answer.

        Args:
            text: Raw reply text

        Returns:
            Validated AnswerResponse
        """
        raw = text or ""
        trimmed = raw.strip()
        if _looks_like_json(trimmed):
            try:
                return self.parse_json(json.loads(trimmed))
            except (ValueError, RecursionError) as e:
                logger.warning(f"Text looked like JSON but did not decode ({str(e)}); repairing as prose")

        return AnswerResponse(answer=repair_text(raw))

    def parse_body(self, body: Union[bytes, str, None], content_type: Optional[str] = None) -> AnswerResponse:
        """
        Normalize a raw HTTP body using its declared content type.

        Args:
            body: Raw body bytes or already-decoded text
            content_type: Value of the Content-Type header, if any

        Returns:
            Validated AnswerResponse; an undecodable JSON body becomes its raw text
        """
        if isinstance(body, (bytes, bytearray)):
            text = bytes(body).decode("utf-8", errors="replace")
        else:
            text = body or ""

        if content_type and "application/json" in content_type.lower():
            try:
                payload = json.loads(text)
            except (ValueError, RecursionError) as e:
                return AnswerResponse(answer=ErrorHandler.handle_decode_error(e, text))
            return self.parse_json(payload)

        return self.parse_text(text)


response_parser = ResponseParser()

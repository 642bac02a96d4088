"""Shape reconciliation for backend replies of unknown layout."""
import json
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Sequence

from app.config import settings
from core.utils.logger import logger

RawCandidate = Dict[str, Any]
Recurse = Callable[[Any], RawCandidate]

# Synonym spellings accepted for each field, in priority order
ANSWER_KEYS = ("answer", "text", "message")
RELATED_CONTENT_KEYS = ("related_content", "relatedContent")
RECOMMENDATION_KEYS = ("recommendations", "suggestions")
FILE_LINK_KEYS = ("file_links", "fileLinks", "files")
TABLE_KEYS = ("tables",)


def _has_value(value: Any) -> bool:
    """
    Decide whether a synonym field counts as present.

    None, False, empty strings, zero and NaN are treated as absent so the next
    synonym gets a chance; empty lists and objects count as present.
    """
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == value and value != 0
    return True


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _pick(record: Mapping[str, Any], keys: Sequence[str]) -> Any:
    """Return the first present value among synonym keys."""
    for key in keys:
        value = record.get(key)
        if _has_value(value):
            return value
    return None


def _candidate_from(record: Mapping[str, Any]) -> RawCandidate:
    return {
        "answer": _pick(record, ANSWER_KEYS),
        "related_content": _pick(record, RELATED_CONTENT_KEYS),
        "recommendations": _pick(record, RECOMMENDATION_KEYS),
        "file_links": _pick(record, FILE_LINK_KEYS),
        "tables": _pick(record, TABLE_KEYS),
    }


def stringify_payload(payload: Any) -> str:
    """
    Render an arbitrary payload as readable text.

    Args:
        payload: Any decoded value

    Returns:
        Two-space indented JSON, or repr() for values JSON cannot encode
        (non-serializable or self-referential objects)
    """
    try:
        return json.dumps(payload, indent=2, ensure_ascii=False)
    except (TypeError, ValueError, RecursionError) as e:
        logger.debug(f"Payload is not JSON serializable ({str(e)}); using repr")
    try:
        return repr(payload)
    except RecursionError:
        return f"<{type(payload).__name__}>"


@dataclass(frozen=True)
class ResponseShape:
    """One recognised reply layout: a predicate plus the extractor for it."""
    name: str
    matches: Callable[[Any], bool]
    extract: Callable[[Any, Recurse], RawCandidate]


NESTED_RESPONSE = ResponseShape(
    name="nested_response",
    matches=lambda p: isinstance(p, Mapping) and isinstance(p.get("response"), Mapping),
    extract=lambda p, recurse: _candidate_from(p["response"]),
)

DIRECT_ANSWER = ResponseShape(
    name="direct_answer",
    matches=lambda p: isinstance(p, Mapping) and any(_has_value(p.get(k)) for k in ANSWER_KEYS),
    extract=lambda p, recurse: _candidate_from(p),
)

DATA_WRAPPER = ResponseShape(
    name="data_wrapper",
    matches=lambda p: isinstance(p, Mapping) and (
        isinstance(p.get("data"), Mapping) or _is_sequence(p.get("data"))
    ),
    extract=lambda p, recurse: recurse(p["data"]),
)

LIST_WRAPPER = ResponseShape(
    name="list_wrapper",
    matches=lambda p: _is_sequence(p) and len(p) > 0,
    extract=lambda p, recurse: recurse(p[0]),
)

PLAIN_TEXT = ResponseShape(
    name="plain_text",
    matches=lambda p: isinstance(p, str),
    extract=lambda p, recurse: {"answer": p},
)

# Precedence order matters: the first matching shape wins
DEFAULT_SHAPES = (NESTED_RESPONSE, DIRECT_ANSWER, DATA_WRAPPER, LIST_WRAPPER, PLAIN_TEXT)


class ShapeReconciler:
    """
    Detect which known layout a decoded payload uses and pull out a raw candidate.

    Shapes are tried in order; anything unrecognised is stringified into the
    answer instead of being reported as an error.
    """

    def __init__(
        self,
        shapes: Optional[Sequence[ResponseShape]] = None,
        max_depth: Optional[int] = None
    ):
        self.shapes = tuple(shapes) if shapes is not None else DEFAULT_SHAPES
        self.max_depth = settings.MAX_RECONCILE_DEPTH if max_depth is None else max_depth

    def reconcile(self, payload: Any) -> RawCandidate:
        """
        Extract a raw candidate record from any decoded payload.

        Args:
            payload: Decoded JSON value (object, array, string, number, bool, None)

        Returns:
            Untyped candidate mapping with answer and metadata fields
        """
        return self._reconcile(payload, 0)

    def _reconcile(self, payload: Any, depth: int) -> RawCandidate:
        if depth > self.max_depth:
            logger.warning(
                f"Reconciliation depth limit ({self.max_depth}) reached; stringifying nested payload"
            )
            return {"answer": stringify_payload(payload)}

        try:
            for shape in self.shapes:
                if shape.matches(payload):
                    logger.debug(f"Payload matched shape '{shape.name}' at depth {depth}")
                    return shape.extract(payload, lambda inner: self._reconcile(inner, depth + 1))
        except Exception as e:
            logger.warning(f"Shape detection failed ({str(e)}); stringifying payload")
            return {"answer": stringify_payload(payload)}

        logger.debug(f"No known shape matched {type(payload).__name__} payload; stringifying")
        return {"answer": stringify_payload(payload)}

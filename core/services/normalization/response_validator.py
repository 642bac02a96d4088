"""Validation of raw candidates into the canonical answer model."""
import json
from typing import Any, Callable, List, Mapping, Optional, TypeVar

from core.models.answer import AnswerResponse, FileLink, RelatedItem, Table
from core.services.normalization.shape_reconciler import RawCandidate
from core.utils.logger import logger

T = TypeVar("T")


def _is_text(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _cell_text(value: Any) -> str:
    """Coerce a table cell to text; JSON scalars keep their JSON spelling."""
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    try:
        return json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError):
        return str(value)


def _related_item(entry: Any) -> Optional[RelatedItem]:
    if not isinstance(entry, Mapping):
        return None
    title, url = entry.get("title"), entry.get("url")
    if not (_is_text(title) and _is_text(url)):
        return None
    image = entry.get("image")
    return RelatedItem(title=title, url=url, image=image if _is_text(image) else None)


def _file_link(entry: Any) -> Optional[FileLink]:
    if not isinstance(entry, Mapping):
        return None
    title, url = entry.get("title"), entry.get("url")
    if not (_is_text(title) and _is_text(url)):
        return None
    return FileLink(title=title, url=url)


def _table(entry: Any) -> Optional[Table]:
    if not isinstance(entry, Mapping):
        return None
    title, headers, rows = entry.get("title"), entry.get("headers"), entry.get("rows")
    if not isinstance(title, str) or not isinstance(headers, list) or not isinstance(rows, list):
        return None
    kept_rows = [[_cell_text(cell) for cell in row] for row in rows if isinstance(row, list)]
    if len(kept_rows) != len(rows):
        logger.warning(f"Table '{title}': dropped {len(rows) - len(kept_rows)} malformed row(s)")
    return Table(
        title=title,
        headers=[_cell_text(header) for header in headers],
        rows=kept_rows,
    )


def _recommendation(entry: Any) -> Optional[str]:
    return entry if isinstance(entry, str) else None


class ResponseValidator:
    """
    Turn a raw candidate into an AnswerResponse.

    Validation is a filter, not a gate: malformed entries are dropped, a field
    that is not a list is omitted, and nothing is ever raised to the caller.
    """

    def validate(self, candidate: RawCandidate) -> AnswerResponse:
        """
        Build the canonical response from a raw candidate.

        Args:
            candidate: Mapping produced by the shape reconciler

        Returns:
            AnswerResponse with answer always a string and optional lists filtered
        """
        if not isinstance(candidate, Mapping):
            logger.warning(f"Candidate is a {type(candidate).__name__}, not a mapping; using empty response")
            return AnswerResponse()

        answer = candidate.get("answer")
        if not isinstance(answer, str):
            if answer is not None:
                logger.warning(f"Answer field is a {type(answer).__name__}; replacing with empty string")
            answer = ""

        return AnswerResponse(
            answer=answer,
            related_content=self._filter_list(candidate, "related_content", _related_item),
            recommendations=self._filter_list(candidate, "recommendations", _recommendation),
            file_links=self._filter_list(candidate, "file_links", _file_link),
            tables=self._filter_list(candidate, "tables", _table),
        )

    def _filter_list(
        self,
        candidate: Mapping[str, Any],
        field: str,
        build: Callable[[Any], Optional[T]]
    ) -> Optional[List[T]]:
        """Keep a list field's valid entries in their original order."""
        value = candidate.get(field)
        if value is None:
            return None
        if not isinstance(value, list):
            logger.warning(f"Field '{field}' is a {type(value).__name__}, not a list; omitting it")
            return None

        kept: List[T] = []
        for entry in value:
            try:
                item = build(entry)
            except Exception as e:
                logger.warning(f"Field '{field}': entry rejected ({str(e)})")
                item = None
            if item is not None:
                kept.append(item)

        if len(kept) != len(value):
            logger.warning(f"Field '{field}': dropped {len(value) - len(kept)} invalid entr(y/ies)")
        return kept

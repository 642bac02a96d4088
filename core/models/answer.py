"""Canonical answer models shared by display and export."""
from pydantic import BaseModel
from typing import Optional, Tuple


class RelatedItem(BaseModel):
    """Related page suggested alongside an answer."""
    title: str
    url: str
    image: Optional[str] = None

    class Config:
        frozen = True


class FileLink(BaseModel):
    """Downloadable file referenced by an answer."""
    title: str
    url: str

    class Config:
        frozen = True


class Table(BaseModel):
    """Structured table referenced from the answer by a [TABLE:<title>] token.

    Rows are not required to match the header length. Lists given on
    construction are stored as tuples so the table cannot change afterwards.
    """
    title: str
    headers: Tuple[str, ...] = ()
    rows: Tuple[Tuple[str, ...], ...] = ()

    class Config:
        frozen = True


class AnswerResponse(BaseModel):
    """Canonical response built once per backend reply, whatever shape it arrived in."""
    answer: str = ""
    related_content: Optional[Tuple[RelatedItem, ...]] = None
    recommendations: Optional[Tuple[str, ...]] = None
    file_links: Optional[Tuple[FileLink, ...]] = None
    tables: Optional[Tuple[Table, ...]] = None

    class Config:
        frozen = True

"""Helpers for turning Google Docs URLs into document ids."""

from __future__ import annotations

import re

_DOCUMENT_URL_RE = re.compile(r"/document/d/([a-zA-Z0-9_-]+)", re.IGNORECASE)
_DOCUMENT_ID_RE = re.compile(r"^[a-zA-Z0-9_-]+$")


def parse_document_url(value: str) -> str | None:
    """Extract the document id from a ``.../document/d/<id>/...`` URL."""
    match = _DOCUMENT_URL_RE.search(value)
    if match is None:
        return None
    return match.group(1)


def document_ref(value: str) -> str:
    """Resolve a document URL or bare document id to the id.

    Raises ValueError if the value is neither.
    """
    value = value.strip()
    doc_id = parse_document_url(value)
    if doc_id is not None:
        return doc_id
    if _DOCUMENT_ID_RE.match(value):
        return value
    raise ValueError(f"Not a Google Docs URL or document id: {value!r}")

"""Pydantic models for the conversion subsystem."""

from __future__ import annotations

from pydantic import BaseModel


class ConversionResult(BaseModel):
    """Result of converting a Google Docs document to markdown."""

    document_id: str
    revision_id: str = ""
    title: str = ""
    markdown: str

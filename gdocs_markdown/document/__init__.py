"""Typed model of a Google Docs document and URL helpers."""

from gdocs_markdown.document.models import (
    Body,
    Bullet,
    Document,
    Link,
    ListDefinition,
    ListProperties,
    NamedStyleType,
    NestingLevel,
    Paragraph,
    ParagraphStyle,
    StructuralElement,
    Table,
    TableCell,
    TableRow,
    TextElement,
    TextRun,
    TextStyle,
)
from gdocs_markdown.document.urls import document_ref, parse_document_url

__all__ = [
    "Body",
    "Bullet",
    "Document",
    "Link",
    "ListDefinition",
    "ListProperties",
    "NamedStyleType",
    "NestingLevel",
    "Paragraph",
    "ParagraphStyle",
    "StructuralElement",
    "Table",
    "TableCell",
    "TableRow",
    "TextElement",
    "TextRun",
    "TextStyle",
    "document_ref",
    "parse_document_url",
]

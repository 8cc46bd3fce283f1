"""Document-to-markdown conversion entry points."""

from __future__ import annotations

import logging

from gdocs_markdown.converter.models import ConversionResult
from gdocs_markdown.converter.postprocess import normalize
from gdocs_markdown.converter.renderer import render_body
from gdocs_markdown.document.models import Document

logger = logging.getLogger(__name__)


def render_frontmatter(document: Document) -> str:
    """Leading metadata block. Values are written verbatim, not YAML-quoted."""
    return (
        "---\n"
        f"title: {document.title}\n"
        f"documentId: {document.document_id}\n"
        f"revisionId: {document.revision_id}\n"
        "---\n"
    )


def convert(document: Document) -> str | None:
    """Convert a document to markdown. Returns None when it has no body content."""
    body = render_body(document.body, document.lists)
    if body is None:
        return None
    return normalize(render_frontmatter(document) + body)


def convert_document(document: Document) -> ConversionResult | None:
    """Like convert(), but wraps the markdown with the document's identity."""
    markdown = convert(document)
    if markdown is None:
        logger.info("document %s has no body content", document.document_id or "<unknown>")
        return None
    return ConversionResult(
        document_id=document.document_id,
        revision_id=document.revision_id,
        title=document.display_name,
        markdown=markdown,
    )

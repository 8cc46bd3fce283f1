"""gdocs-markdown - convert Google Docs document trees to markdown."""

from gdocs_markdown.config import GdocsMarkdownConfig, load_config
from gdocs_markdown.converter import ConversionResult, convert, convert_document, normalize
from gdocs_markdown.document import Document, document_ref, parse_document_url
from gdocs_markdown.output import MarkdownWriter

__version__ = "0.1.0"

__all__ = [
    "ConversionResult",
    "Document",
    "GdocsMarkdownConfig",
    "MarkdownWriter",
    "convert",
    "convert_document",
    "document_ref",
    "load_config",
    "normalize",
    "parse_document_url",
]

"""Document conversion subsystem: Google Docs tree to markdown."""

from gdocs_markdown.converter.converter import convert, convert_document, render_frontmatter
from gdocs_markdown.converter.inline import render_run, run_content
from gdocs_markdown.converter.models import ConversionResult
from gdocs_markdown.converter.postprocess import normalize
from gdocs_markdown.converter.renderer import BodyRenderer, render_body

__all__ = [
    "BodyRenderer",
    "ConversionResult",
    "convert",
    "convert_document",
    "normalize",
    "render_body",
    "render_frontmatter",
    "render_run",
    "run_content",
]

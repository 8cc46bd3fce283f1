"""Output subsystem: writes and indexes converted markdown files."""

from gdocs_markdown.output.writer import INDEX_FILENAME, MarkdownWriter, sanitize_filename

__all__ = [
    "INDEX_FILENAME",
    "MarkdownWriter",
    "sanitize_filename",
]

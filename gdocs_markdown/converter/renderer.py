"""Structural element renderer: tables, paragraphs and list items."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

from gdocs_markdown.converter.inline import render_run, run_content
from gdocs_markdown.document.models import (
    Body,
    Bullet,
    ListDefinition,
    Paragraph,
    StructuralElement,
    Table,
)

logger = logging.getLogger(__name__)

# Glyph formats Google Docs uses for numbered lists.
ORDERED_GLYPH_FORMATS: frozenset[str] = frozenset({"[%0]", "%0."})

_NEWLINES_RE = re.compile(r"\n+")


class BodyRenderer:
    """Renders body content into a single Markdown buffer.

    One instance per conversion; the buffer is owned by that call.
    """

    def __init__(self, lists: Mapping[str, ListDefinition] | None = None) -> None:
        self._lists: Mapping[str, ListDefinition] = lists or {}
        self._parts: list[str] = []

    @property
    def text(self) -> str:
        return "".join(self._parts)

    def render(self, content: list[StructuralElement]) -> str:
        for element in content:
            self.render_element(element)
        return self.text

    def render_element(self, element: StructuralElement) -> None:
        if element.table is not None and element.table.table_rows is not None:
            self._render_table(element.table)
        if element.paragraph is not None and element.paragraph.elements is not None:
            self._render_paragraph(element.paragraph)

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def _render_table(self, table: Table) -> None:
        rows = table.table_rows or []
        # Only the first row sizes the header; later rows are not reconciled.
        width = len(rows[0].table_cells) if rows else 0
        self._parts.append("|" + "|".join([""] * width) + "|\n")
        self._parts.append("|" + "|".join(["-"] * width) + "|\n")

        for row in rows:
            cells = [self._cell_text(cell.content) for cell in row.table_cells]
            self._parts.append("| " + " | ".join(cells) + " |\n")

    @staticmethod
    def _cell_text(content: list[StructuralElement]) -> str:
        texts: list[str] = []
        for item in content:
            paragraph = item.paragraph
            if paragraph is None:
                continue
            style_type = _style_type(paragraph)
            fragments = [
                _NEWLINES_RE.sub("", render_run(el, style_type)).strip()
                for el in paragraph.elements or []
            ]
            texts.append("".join(fragments))
        return "".join(texts)

    # ------------------------------------------------------------------
    # Paragraphs and lists
    # ------------------------------------------------------------------

    def _render_paragraph(self, paragraph: Paragraph) -> None:
        style_type = _style_type(paragraph)
        bullet = paragraph.bullet
        is_list_item = bullet is not None and bool(bullet.list_id)

        if is_list_item:
            self._parts.append(self._list_marker(bullet))

        for element in paragraph.elements or []:
            if element.text_run is None:
                continue
            text = run_content(element)
            if text and text != "\n":
                self._parts.append(render_run(element, style_type))

        # Runs usually end in "\n" already, so list items can leave blank
        # lines between them; normalize() removes those.
        self._parts.append("\n" if is_list_item else "\n\n")

    def _list_marker(self, bullet: Bullet) -> str:
        definition = self._lists.get(bullet.list_id or "")
        glyph_format = definition.top_glyph_format if definition else ""
        padding = "  " * (bullet.nesting_level or 0)
        if glyph_format in ORDERED_GLYPH_FORMATS:
            return f"{padding}1. "
        return f"{padding}- "


def _style_type(paragraph: Paragraph) -> str | None:
    style = paragraph.paragraph_style
    if style is None:
        return None
    return style.named_style_type or None


def render_body(
    body: Body | None, lists: Mapping[str, ListDefinition] | None = None
) -> str | None:
    """Render body content to raw Markdown, or None if there is no content."""
    if body is None or not body.content:
        return None
    renderer = BodyRenderer(lists)
    text = renderer.render(body.content)
    logger.debug("rendered %d body elements (%d chars)", len(body.content), len(text))
    return text

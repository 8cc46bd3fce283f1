"""Pydantic models for the Google Docs document tree.

Mirrors the shape of a ``documents.get`` response. Fields are snake_case in
Python and accept the API's camelCase keys. Keys the converter never reads
(``sectionBreak``, ``startIndex``, ...) are ignored on validation.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class NamedStyleType(str, Enum):
    """Paragraph named styles the converter gives special treatment."""

    NORMAL_TEXT = "NORMAL_TEXT"
    TITLE = "TITLE"
    SUBTITLE = "SUBTITLE"
    HEADING_1 = "HEADING_1"
    HEADING_2 = "HEADING_2"
    HEADING_3 = "HEADING_3"
    HEADING_4 = "HEADING_4"
    HEADING_5 = "HEADING_5"
    HEADING_6 = "HEADING_6"


class _ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Link(_ApiModel):
    url: str | None = None


class TextStyle(_ApiModel):
    bold: bool | None = None
    italic: bool | None = None
    link: Link | None = None


class TextRun(_ApiModel):
    content: str | None = None
    text_style: TextStyle | None = None


class TextElement(_ApiModel):
    """One inline element of a paragraph. Only text runs carry text."""

    text_run: TextRun | None = None


class Bullet(_ApiModel):
    list_id: str | None = None
    nesting_level: int | None = Field(default=None, ge=0)


class ParagraphStyle(_ApiModel):
    # Kept as a plain string so unknown styles survive validation.
    named_style_type: str | None = None


class Paragraph(_ApiModel):
    paragraph_style: ParagraphStyle | None = None
    bullet: Bullet | None = None
    elements: list[TextElement] | None = None


class TableCell(_ApiModel):
    content: list[StructuralElement] = Field(default_factory=list)


class TableRow(_ApiModel):
    table_cells: list[TableCell] = Field(default_factory=list)


class Table(_ApiModel):
    table_rows: list[TableRow] | None = None


class StructuralElement(_ApiModel):
    """A body item. At most one of ``table``/``paragraph`` is set in practice."""

    table: Table | None = None
    paragraph: Paragraph | None = None


class NestingLevel(_ApiModel):
    glyph_format: str | None = None


class ListProperties(_ApiModel):
    nesting_levels: list[NestingLevel] = Field(default_factory=list)


class ListDefinition(_ApiModel):
    list_properties: ListProperties | None = None

    @property
    def top_glyph_format(self) -> str:
        """Glyph format of nesting level 0, or ``""`` when undefined."""
        if self.list_properties is None or not self.list_properties.nesting_levels:
            return ""
        return self.list_properties.nesting_levels[0].glyph_format or ""


class Body(_ApiModel):
    content: list[StructuralElement] | None = None


class Document(_ApiModel):
    """Root of a fetched Google Docs document."""

    title: str = ""
    # Drive file listings carry `name` instead of `title`.
    name: str | None = None
    document_id: str = ""
    revision_id: str = ""
    body: Body | None = None
    lists: dict[str, ListDefinition] = Field(default_factory=dict)

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> Document:
        """Validate a raw ``documents.get`` JSON payload."""
        return cls.model_validate(payload)

    @property
    def display_name(self) -> str:
        return self.title or self.name or ""


TableCell.model_rebuild()

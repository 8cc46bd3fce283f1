"""Tests for gdocs_markdown.document: models and URL helpers."""

import pytest
from pydantic import ValidationError

from factories import NUMBERED_LIST, paragraph, text_run
from gdocs_markdown.document import (
    Document,
    ListDefinition,
    NamedStyleType,
    document_ref,
    parse_document_url,
)


class TestDocumentFromApi:
    def test_camel_case_keys(self, sample_document):
        assert sample_document.document_id == "1AbC-dEf_123"
        assert sample_document.revision_id == "ALm37BW"
        assert sample_document.title == "Design Review"

    def test_unknown_body_elements_carry_no_tags(self, sample_document):
        section_break = sample_document.body.content[0]
        assert section_break.table is None
        assert section_break.paragraph is None

    def test_paragraph_fields(self, sample_document):
        para = sample_document.body.content[4].paragraph
        assert para.bullet.list_id == "kix.num"
        assert para.bullet.nesting_level == 0
        assert para.elements[0].text_run.content == "First\n"

    def test_absent_nesting_level_is_none(self, sample_document):
        para = sample_document.body.content[5].paragraph
        assert para.bullet.nesting_level is None

    def test_text_style(self):
        doc = Document.from_api(
            {"body": {"content": [paragraph(text_run("x", bold=True, link={"url": "u"}))]}}
        )
        style = doc.body.content[0].paragraph.elements[0].text_run.text_style
        assert style.bold is True
        assert style.italic is None
        assert style.link.url == "u"

    def test_populate_by_python_name(self):
        doc = Document(document_id="abc", revision_id="r1")
        assert doc.document_id == "abc"

    def test_empty_payload(self):
        doc = Document.from_api({})
        assert doc.body is None
        assert doc.lists == {}

    def test_models_are_frozen(self, sample_document):
        with pytest.raises(ValidationError):
            sample_document.title = "changed"

    def test_negative_nesting_level_rejected(self):
        with pytest.raises(ValidationError):
            Document.from_api(
                {"body": {"content": [paragraph(text_run("x"), list_id="l", nesting_level=-1)]}}
            )

    def test_unknown_named_style_kept(self):
        doc = Document.from_api({"body": {"content": [paragraph(text_run("x"), style="FOO")]}})
        assert doc.body.content[0].paragraph.paragraph_style.named_style_type == "FOO"


class TestDisplayName:
    def test_title(self):
        assert Document(title="Notes").display_name == "Notes"

    def test_falls_back_to_drive_name(self):
        assert Document.from_api({"name": "From Drive"}).display_name == "From Drive"

    def test_empty(self):
        assert Document().display_name == ""


class TestListDefinition:
    def test_top_glyph_format(self):
        assert ListDefinition.model_validate(NUMBERED_LIST).top_glyph_format == "%0."

    def test_missing_properties(self):
        assert ListDefinition().top_glyph_format == ""

    def test_empty_nesting_levels(self):
        definition = ListDefinition.model_validate({"listProperties": {"nestingLevels": []}})
        assert definition.top_glyph_format == ""

    def test_only_level_zero_is_consulted(self):
        definition = ListDefinition.model_validate(
            {"listProperties": {"nestingLevels": [{}, {"glyphFormat": "%1."}]}}
        )
        assert definition.top_glyph_format == ""


class TestNamedStyleType:
    def test_values_match_api_strings(self):
        assert NamedStyleType.HEADING_6.value == "HEADING_6"
        assert NamedStyleType("SUBTITLE") is NamedStyleType.SUBTITLE


class TestDocumentUrls:
    def test_parse_edit_url(self):
        url = "https://docs.google.com/document/d/1AbC-dEf_123/edit#heading=h.x"
        assert parse_document_url(url) == "1AbC-dEf_123"

    def test_parse_is_case_insensitive(self):
        assert parse_document_url("https://docs.google.com/DOCUMENT/D/abc") == "abc"

    def test_parse_non_document_url(self):
        assert parse_document_url("https://docs.google.com/spreadsheets/d/abc") is None

    def test_document_ref_accepts_url(self):
        assert document_ref("https://docs.google.com/document/d/abc/view") == "abc"

    def test_document_ref_accepts_bare_id(self):
        assert document_ref("  1AbC-dEf_123 ") == "1AbC-dEf_123"

    def test_document_ref_rejects_garbage(self):
        with pytest.raises(ValueError, match="Not a Google Docs URL"):
            document_ref("not a doc")

"""Shared test fixtures for gdocs-markdown."""

import pytest

from factories import BULLETED_LIST, NUMBERED_LIST, paragraph, table, text_run
from gdocs_markdown.config.models import GdocsMarkdownConfig
from gdocs_markdown.document.models import Document


@pytest.fixture
def sample_payload():
    """A trimmed documents.get response with headings, lists and a table."""
    return {
        "title": "Design Review",
        "documentId": "1AbC-dEf_123",
        "revisionId": "ALm37BW",
        "body": {
            "content": [
                {"sectionBreak": {"sectionStyle": {}}, "endIndex": 1},
                paragraph(text_run("Design Review\n"), style="TITLE"),
                paragraph(text_run("Goals\n"), style="HEADING_1"),
                paragraph(
                    text_run("Ship the "),
                    text_run("converter", bold=True),
                    text_run(" this week.\n"),
                ),
                paragraph(text_run("First\n"), list_id="kix.num", nesting_level=0),
                paragraph(text_run("Second\n"), list_id="kix.num"),
                paragraph(text_run("Nested\n"), list_id="kix.dot", nesting_level=1),
                paragraph(text_run("Closing words.\n")),
                table(["Owner", "Due"], ["Ana", "Friday"]),
            ]
        },
        "lists": {"kix.num": NUMBERED_LIST, "kix.dot": BULLETED_LIST},
    }


@pytest.fixture
def sample_document(sample_payload):
    return Document.from_api(sample_payload)


@pytest.fixture
def sample_config():
    return GdocsMarkdownConfig()


@pytest.fixture
def tmp_output_dir(tmp_path):
    """A temp output directory for writer tests."""
    out = tmp_path / ".gdocs-md"
    out.mkdir()
    return out

"""Inline rendering of a single text run."""

from __future__ import annotations

from gdocs_markdown.document.models import NamedStyleType, TextElement

# Heading markers by paragraph style. HEADING_n maps to n + 1 hashes, so
# HEADING_6 yields seven; downstream documents rely on that output.
_STYLE_PREFIXES: dict[str, str] = {
    NamedStyleType.TITLE.value: "# ",
    NamedStyleType.HEADING_1.value: "## ",
    NamedStyleType.HEADING_2.value: "### ",
    NamedStyleType.HEADING_3.value: "#### ",
    NamedStyleType.HEADING_4.value: "##### ",
    NamedStyleType.HEADING_5.value: "###### ",
    NamedStyleType.HEADING_6.value: "####### ",
}


def run_content(element: TextElement) -> str | None:
    """Return the run's text, with the link marker applied when it has a URL.

    Links render as ``[text]url``, not ``[text](url)``.
    """
    run = element.text_run
    if run is None:
        return None
    style = run.text_style
    if style is not None and style.link is not None and style.link.url:
        return f"[{run.content or ''}]{style.link.url}"
    return run.content or None


def render_run(element: TextElement, style_type: str | None = None) -> str:
    """Render one text element as a Markdown fragment.

    The paragraph style wins over run emphasis: a heading run is never
    wrapped in bold/italic markers.
    """
    text = run_content(element)
    if not text:
        return ""

    if style_type in _STYLE_PREFIXES:
        return f"{_STYLE_PREFIXES[style_type]}{text}"
    if style_type == NamedStyleType.SUBTITLE.value:
        return f" _{text}_ "

    style = element.text_run.text_style if element.text_run else None
    bold = bool(style and style.bold)
    italic = bool(style and style.italic)

    if bold and italic:
        return f" **_{text}_** "
    if italic:
        return f" _{text}_ "
    if bold:
        return f" **{text}** "
    return text

"""Whole-buffer cleanup of rendered Markdown."""

from __future__ import annotations

import re

LIST_MARKERS: tuple[str, ...] = ("1. ", "- ")

# Three or more newlines with only whitespace between them.
_BLANK_RUN_RE = re.compile(r"\n\s*\n\s*\n")


def _is_list_line(line: str) -> bool:
    return line.strip().startswith(LIST_MARKERS)


def _drop_blank_lines_between_list_items(text: str) -> str:
    # Neighbours are read from the original split, so removals never cascade.
    # The first three lines are left alone.
    lines = text.split("\n")
    kept: list[str] = []
    for index, line in enumerate(lines):
        if (
            index > 2
            and not line.strip()
            and _is_list_line(lines[index - 1])
            and index + 1 < len(lines)
            and _is_list_line(lines[index + 1])
        ):
            continue
        kept.append(line)
    return "\n".join(kept)


def _collapse_blank_runs(text: str) -> str:
    return _BLANK_RUN_RE.sub("\n\n", text)


def normalize(text: str) -> str:
    """Drop blank lines between list items and collapse blank-line runs.

    A run of blank lines between two list items is first collapsed to one
    blank line and then dropped, so normalizing twice changes nothing. The
    result ends with a newline and never with three.
    """
    text = _drop_blank_lines_between_list_items(text)
    text = _collapse_blank_runs(text)
    text = _drop_blank_lines_between_list_items(text)
    return _collapse_blank_runs(text + "\n")

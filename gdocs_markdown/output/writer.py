"""MarkdownWriter: writes converted documents to disk and indexes them."""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from pathlib import Path

import yaml

from gdocs_markdown.config.models import OutputConfig
from gdocs_markdown.converter.models import ConversionResult

logger = logging.getLogger(__name__)

INDEX_FILENAME = "_index.yaml"


def sanitize_filename(name: str) -> str:
    """Make a document title or id safe for use as a filename.

    Replaces `/` with `--`, strips `..` segments, and removes characters
    that are problematic on common filesystems.
    """
    name = name.strip().replace(" ", "-").replace("/", "--")
    name = name.replace("..", "")
    name = re.sub(r"[^\w\-\.@]", "", name)
    name = re.sub(r"-{3,}", "--", name)
    if not name or name.strip(".") == "":
        name = "_unnamed"
    return name


class MarkdownWriter:
    """Writes ConversionResults as .md files under ``config.base_dir``.

    Keeps ``_index.yaml`` with one entry per document id so unchanged
    revisions can be skipped on the next run.
    """

    def __init__(self, config: OutputConfig) -> None:
        self.config = config
        self.base_dir = Path(config.base_dir)

    @property
    def index_path(self) -> Path:
        return self.base_dir / INDEX_FILENAME

    def path_for(self, result: ConversionResult) -> Path:
        return self.base_dir / f"{sanitize_filename(result.title or result.document_id)}.md"

    def write(self, result: ConversionResult, *, dry_run: bool = False) -> Path:
        """Write one converted document. Returns the (would-be) path."""
        dest = self.path_for(result)

        if dry_run:
            logger.debug("dry-run: would write %s", dest)
            return dest

        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(result.markdown, encoding="utf-8")
        logger.info("wrote %s (%d bytes)", dest, len(result.markdown.encode()))

        if self.config.create_index:
            self._update_index(result, dest)

        return dest

    def is_current(self, result: ConversionResult) -> bool:
        """True if the index already holds this revision and its file exists."""
        if not result.document_id or not result.revision_id:
            return False
        for entry in self.load_index():
            if entry.get("document_id") != result.document_id:
                continue
            path = entry.get("path")
            return (
                entry.get("revision_id") == result.revision_id
                and bool(path)
                and Path(path).is_file()
            )
        return False

    # -- index management --------------------------------------------------

    def load_index(self) -> list[dict]:
        if not self.index_path.exists():
            return []
        loaded = yaml.safe_load(self.index_path.read_text(encoding="utf-8"))
        if not isinstance(loaded, list):
            logger.warning("ignoring malformed index %s", self.index_path)
            return []
        return [e for e in loaded if isinstance(e, dict)]

    def _update_index(self, result: ConversionResult, path: Path) -> None:
        """Upsert the index entry for result.document_id."""
        key = result.document_id or str(path)
        entries = [e for e in self.load_index() if e.get("document_id") != key]
        entries.append({
            "document_id": key,
            "revision_id": result.revision_id,
            "title": result.title,
            "path": str(path),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        })

        self.index_path.write_text(
            yaml.safe_dump(entries, default_flow_style=False, sort_keys=False),
            encoding="utf-8",
        )
        logger.debug("updated index %s (%d entries)", self.index_path, len(entries))

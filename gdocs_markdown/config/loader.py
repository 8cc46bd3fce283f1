"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import GdocsMarkdownConfig


CONFIG_ENV_VAR = "GDOCS_MD_CONFIG"


def _candidate_paths(cli_path: str | None) -> list[Path]:
    paths: list[Path] = []
    if cli_path:
        paths.append(Path(cli_path))
    if env_path := os.environ.get(CONFIG_ENV_VAR):
        paths.append(Path(env_path))
    paths.append(Path("./gdocs-md.yaml"))
    paths.append(Path.home() / ".gdocs-md" / "config.yaml")
    return paths


def load_config(cli_path: str | None = None) -> GdocsMarkdownConfig:
    """Load config with resolution order.

    --config path > $GDOCS_MD_CONFIG > ./gdocs-md.yaml > ~/.gdocs-md/config.yaml
    > defaults. An empty file falls through to the next candidate.
    """
    for path in _candidate_paths(cli_path):
        if not path.exists():
            continue
        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
        if raw is None:
            continue
        try:
            return GdocsMarkdownConfig.model_validate(_expand_env_vars(raw))
        except ValidationError as e:
            raise ValueError(f"Invalid config in {path}: {e}") from e

    return GdocsMarkdownConfig()


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return re.sub(r"\$\{(\w+)\}", lambda m: os.environ.get(m.group(1), ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `gdocs-md config init`
DEFAULT_CONFIG_TEMPLATE = """\
# gdocs-md.yaml

# Output
output:
  base_dir: ".gdocs-md"        # where `convert --save` writes markdown
  create_index: true           # keep _index.yaml with document/revision ids
  overwrite: false             # rewrite files even if the revision is unchanged

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""

from pydantic import BaseModel, Field
from typing import Literal


class OutputConfig(BaseModel):
    base_dir: str = ".gdocs-md"
    create_index: bool = True
    overwrite: bool = False


class GdocsMarkdownConfig(BaseModel):
    output: OutputConfig = Field(default_factory=OutputConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"

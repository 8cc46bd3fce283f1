from .loader import DEFAULT_CONFIG_TEMPLATE, load_config
from .models import GdocsMarkdownConfig, OutputConfig

__all__ = [
    "DEFAULT_CONFIG_TEMPLATE",
    "GdocsMarkdownConfig",
    "OutputConfig",
    "load_config",
]

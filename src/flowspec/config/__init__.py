"""Config module exports."""

from flowspec.config.loader import load_config
from flowspec.config.models import (
    EditorConfig,
    FlowSpecConfig,
    LoggingConfig,
    LogOutputConfig,
)

__all__ = [
    "load_config",
    "EditorConfig",
    "FlowSpecConfig",
    "LoggingConfig",
    "LogOutputConfig",
]

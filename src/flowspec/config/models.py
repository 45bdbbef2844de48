"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (FLOWSPEC__SECTION__KEY)
3. Repo YAML (.flowspec/config.yaml)
4. Global YAML (~/.config/flowspec/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    FLOWSPEC__<SECTION>__<KEY>=<VALUE>

Examples:
    FLOWSPEC__LOGGING__LEVEL=DEBUG
    FLOWSPEC__EDITOR__LANGUAGE=ruby
    FLOWSPEC__EDITOR__MODE=application
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from flowspec.models.mode import Mode

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        FLOWSPEC__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. Skipped rows are reported at WARNING.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class EditorConfig(BaseModel):
    """Model editor defaults.

    Env vars:
        FLOWSPEC__EDITOR__LANGUAGE: Default adapter when input does not name one
        FLOWSPEC__EDITOR__MODE: Grouping mode (framework or application)
        FLOWSPEC__EDITOR__HIDE_MODELED_METHODS: Omit methods that cannot be modeled
    """

    language: str | None = Field(
        default=None,
        description="Default language adapter (java, csharp, python, ruby).",
    )
    mode: Mode = Field(
        default=Mode.FRAMEWORK,
        description="Framework mode groups methods by package, application mode by library.",
    )
    hide_modeled_methods: bool = Field(
        default=False,
        description="Hide methods that are already supported and have no pending models.",
    )

    @field_validator("language")
    @classmethod
    def normalize_language(cls, v: str | None) -> str | None:
        return v.lower() if v else v


class FlowSpecConfig(BaseModel):
    """Root configuration model."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    editor: EditorConfig = Field(default_factory=EditorConfig)

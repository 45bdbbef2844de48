"""Core module exports."""

from flowspec.core.errors import (
    ConfigError,
    ErrorCode,
    FlowSpecError,
    ModelError,
)
from flowspec.core.logging import (
    clear_request_id,
    configure_logging,
    get_request_id,
    set_request_id,
)

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "FlowSpecError",
    "ModelError",
    # Logging
    "clear_request_id",
    "configure_logging",
    "get_request_id",
    "set_request_id",
]

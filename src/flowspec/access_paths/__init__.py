"""Access path tokenizing and validation."""

from flowspec.access_paths.tokens import (
    AccessPathToken,
    TextRange,
    join_access_path_tokens,
    join_access_paths,
    parse_access_path_tokens,
)
from flowspec.access_paths.validation import AccessPathDiagnostic, validate_access_path

__all__ = [
    "AccessPathDiagnostic",
    "AccessPathToken",
    "TextRange",
    "join_access_path_tokens",
    "join_access_paths",
    "parse_access_path_tokens",
    "validate_access_path",
]

"""Access path validation with positioned diagnostics."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

from flowspec.access_paths.tokens import TextRange, parse_access_path_tokens

INVALID_ACCESS_PATH: Final = "Invalid access path"
UNEXPECTED_EMPTY_TOKEN: Final = "Unexpected empty token"

# identifier, optionally followed by one bracketed argument list
_TOKEN_REGEX = re.compile(r"^(\w+)(?:\[([^\[\]]*)\])?$")


@dataclass(frozen=True, slots=True)
class AccessPathDiagnostic:
    range: TextRange
    message: str


def validate_access_path(path: str) -> list[AccessPathDiagnostic]:
    """Validate an access path.

    Returns diagnostics in token order; an empty list means the path is
    valid. The empty path is valid and means "no path set". Bracket
    contents are not validated recursively.
    """
    if path == "":
        return []

    diagnostics: list[AccessPathDiagnostic] = []
    for token in parse_access_path_tokens(path):
        if token.range.is_empty:
            diagnostics.append(AccessPathDiagnostic(range=token.range, message=UNEXPECTED_EMPTY_TOKEN))
        elif not _TOKEN_REGEX.match(token.text):
            diagnostics.append(AccessPathDiagnostic(range=token.range, message=INVALID_ACCESS_PATH))

    return diagnostics

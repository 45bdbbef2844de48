"""Build suggestion trees from flat suggestion rows."""

from __future__ import annotations

import re
from collections import defaultdict
from collections.abc import Iterable

from flowspec.access_paths.tokens import join_access_path_tokens, parse_access_path_tokens
from flowspec.core.collation import text_sort_key
from flowspec.suggestions.models import DEFINITION_TYPE_ICONS, AccessPathOption, AccessPathSuggestionRow

_POSITIONAL_ARGUMENT_REGEX = re.compile(r"^Argument\[(\d+)\]$")
_KEYWORD_ARGUMENT_REGEX = re.compile(r"^Argument\[[^\d:]+:\]$")
_PARAMETER_REGEX = re.compile(r"^Parameter\[(\d+)\]$")


def parse_access_path_suggestion_rows_to_options(
    rows: Iterable[AccessPathSuggestionRow],
) -> dict[str, list[AccessPathOption]]:
    """Group rows by method signature and build one option tree per method."""
    rows_by_signature: dict[str, list[AccessPathSuggestionRow]] = defaultdict(list)
    for row in rows:
        rows_by_signature[row.method_signature].append(row)

    return {signature: _build_options(method_rows) for signature, method_rows in rows_by_signature.items()}


def _build_options(rows: list[AccessPathSuggestionRow]) -> list[AccessPathOption]:
    options_by_parent_path: dict[str, list[AccessPathOption]] = defaultdict(list)

    for row in rows:
        tokens = parse_access_path_tokens(row.value)
        parent_path = join_access_path_tokens(tokens[:-1])
        options_by_parent_path[parent_path].append(
            AccessPathOption(
                label=tokens[-1].text,
                value=row.value,
                icon=DEFINITION_TYPE_ICONS[row.definition_type],
                details=row.details,
            )
        )

    for options in options_by_parent_path.values():
        options.sort(key=option_sort_key)

    # Buckets whose parent path is not itself an option are unreachable
    for options in options_by_parent_path.values():
        for option in options:
            followup = options_by_parent_path.get(option.value)
            if followup is not None:
                option.followup = followup

    return options_by_parent_path.get("", [])


def option_sort_key(option: AccessPathOption) -> tuple[int, int, tuple[str, str]]:
    """Order options within one level of the tree.

    - Argument[self] first
    - positional arguments by index
    - keyword arguments (Argument[key:]) by name
    - Argument[block], then Argument[hash-splat]
    - parameters (Parameter[0], ...) by index
    - everything else by name
    """
    label = option.label
    text = text_sort_key(label)

    if label == "Argument[self]":
        return (0, 0, text)
    if match := _POSITIONAL_ARGUMENT_REGEX.match(label):
        return (1, int(match.group(1)), text)
    if _KEYWORD_ARGUMENT_REGEX.match(label):
        return (2, 0, text)
    if label == "Argument[block]":
        return (3, 0, text)
    if label == "Argument[hash-splat]":
        return (4, 0, text)
    if match := _PARAMETER_REGEX.match(label):
        return (5, int(match.group(1)), text)
    return (6, 0, text)

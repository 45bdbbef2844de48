"""Decode raw access path suggestion query tuples."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import structlog

from flowspec.core.errors import ModelError
from flowspec.languages.base import LanguageAdapter
from flowspec.suggestions.models import (
    AccessPathSuggestionDefinitionType,
    AccessPathSuggestionRow,
    AccessPathSuggestionRows,
)

log = structlog.get_logger()

# type, path, value, details, defType
SUGGESTION_TUPLE_ARITY = 5


def parse_access_path_suggestions_results(
    tuples: Iterable[Any],
    adapter: LanguageAdapter,
) -> list[AccessPathSuggestionRow]:
    """Turn ``(type, path, value, details, defType)`` tuples into suggestion rows.

    Tuples with the wrong shape or an unknown definition type are dropped
    and logged.

    Raises:
        ModelError: If the language has no access path suggestions.
    """
    if adapter.parse_suggestion_method is None:
        raise ModelError.unsupported_feature(adapter.name, "access path suggestions")

    rows: list[AccessPathSuggestionRow] = []
    for index, row in enumerate(tuples):
        if (
            not isinstance(row, (list, tuple))
            or len(row) != SUGGESTION_TUPLE_ARITY
            or not all(isinstance(column, str) for column in row)
        ):
            log.warning("skipping_malformed_suggestion", language=adapter.name, row_index=index)
            continue

        type_, path, value, details, definition_type = row
        try:
            parsed_type = AccessPathSuggestionDefinitionType(definition_type)
        except ValueError:
            log.warning(
                "unknown_suggestion_definition_type",
                language=adapter.name,
                row_index=index,
                definition_type=definition_type,
            )
            continue

        rows.append(
            AccessPathSuggestionRow(
                method=adapter.parse_suggestion_method(type_, path),
                value=value,
                details=details,
                definition_type=parsed_type,
            )
        )
    return rows


def parse_access_path_suggestions(
    input_tuples: Iterable[Any],
    output_tuples: Iterable[Any],
    adapter: LanguageAdapter,
) -> AccessPathSuggestionRows:
    """Decode the input and output result sets of a suggestions query."""
    return AccessPathSuggestionRows(
        input=parse_access_path_suggestions_results(input_tuples, adapter),
        output=parse_access_path_suggestions_results(output_tuples, adapter),
    )

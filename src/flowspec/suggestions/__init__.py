"""Access path suggestions: tree building and matching."""

from flowspec.suggestions.matching import find_matching_options
from flowspec.suggestions.models import (
    DEFINITION_TYPE_ICONS,
    AccessPathOption,
    AccessPathSuggestionDefinitionType,
    AccessPathSuggestionRow,
    AccessPathSuggestionRows,
)
from flowspec.suggestions.rows import parse_access_path_suggestions, parse_access_path_suggestions_results
from flowspec.suggestions.tree import option_sort_key, parse_access_path_suggestion_rows_to_options

__all__ = [
    "DEFINITION_TYPE_ICONS",
    "AccessPathOption",
    "AccessPathSuggestionDefinitionType",
    "AccessPathSuggestionRow",
    "AccessPathSuggestionRows",
    "find_matching_options",
    "option_sort_key",
    "parse_access_path_suggestion_rows_to_options",
    "parse_access_path_suggestions",
    "parse_access_path_suggestions_results",
]

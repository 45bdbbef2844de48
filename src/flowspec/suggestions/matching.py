"""Find the suggestion options matching a partially typed access path."""

from __future__ import annotations

from collections.abc import Sequence

from flowspec.access_paths.tokens import parse_access_path_tokens
from flowspec.suggestions.models import AccessPathOption


def find_matching_options(
    options: Sequence[AccessPathOption],
    value: str,
) -> list[AccessPathOption]:
    """Options to offer while ``value`` is being typed.

    Every token but the last must name an option on the way down the tree;
    the last token is the fragment being typed and filters the options at
    that level by case-insensitive substring match on their label. An
    unknown prefix yields no options.
    """
    if value == "":
        return list(options)

    tokens = parse_access_path_tokens(value)

    current: Sequence[AccessPathOption] = options
    for token in tokens[:-1]:
        parent = next((option for option in current if option.label == token.text), None)
        if parent is None:
            return []
        current = parent.followup

    fragment = tokens[-1].text.casefold()
    return [option for option in current if fragment in option.label.casefold()]

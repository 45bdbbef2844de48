"""Access path tokenizer.

An access path is a dot-separated chain of tokens such as
``Argument[0].Field[foo.Bar.x].Element``. Dots inside square brackets do
not split tokens. The tokenizer is lenient: it accepts partial input typed
into the editor (``Argument[se``) and never raises.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TextRange:
    """Half-open character range ``[start, end)`` into the original path."""

    start: int
    end: int

    @property
    def is_empty(self) -> bool:
        return self.start == self.end


@dataclass(frozen=True, slots=True)
class AccessPathToken:
    """A single token of an access path and its position."""

    text: str
    range: TextRange


def parse_access_path_tokens(path: str) -> list[AccessPathToken]:
    """Split an access path into tokens.

    Bracket nesting is tracked with a plain depth counter, so unbalanced
    brackets are tolerated. The text after the last top-level dot is always
    emitted, even when empty: ``"Argument[foo]."`` yields two tokens, the
    second one empty.
    """
    tokens: list[AccessPathToken] = []
    current: list[str] = []
    start = 0
    depth = 0

    for i, char in enumerate(path):
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
        elif char == "." and depth == 0:
            tokens.append(AccessPathToken(text="".join(current), range=TextRange(start, i)))
            current = []
            start = i + 1
            continue
        current.append(char)

    tokens.append(AccessPathToken(text="".join(current), range=TextRange(start, len(path))))
    return tokens


def join_access_path_tokens(tokens: list[AccessPathToken]) -> str:
    return ".".join(token.text for token in tokens)


def join_access_paths(prefix: str, suffix: str) -> str:
    """Join two access paths, omitting the dot when either side is empty."""
    if prefix == "":
        return suffix
    if suffix == "":
        return prefix
    return f"{prefix}.{suffix}"

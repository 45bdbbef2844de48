"""Text ordering shared by the sorters."""


def text_sort_key(value: str) -> tuple[str, str]:
    """Case-insensitive ordering with a case-sensitive tiebreak.

    Approximates the en-US collation used by the editor front end, where
    "apple" sorts before "Banana" regardless of case.
    """
    return (value.casefold(), value)

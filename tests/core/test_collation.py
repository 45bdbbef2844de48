"""Tests for text ordering."""

from flowspec.core.collation import text_sort_key


def test_case_insensitive_order() -> None:
    """Lowercase and uppercase words interleave alphabetically."""
    assert sorted(["Banana", "apple", "cherry"], key=text_sort_key) == ["apple", "Banana", "cherry"]


def test_case_only_difference_is_stable() -> None:
    """Words differing only by case still have a fixed order."""
    assert sorted(["b", "B"], key=text_sort_key) == sorted(["B", "b"], key=text_sort_key)

"""Grouping and ordering of the method list.

All functions are pure: the result depends only on the content of the
arguments, never on their input order.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Mapping, Sequence

from flowspec.core.collation import text_sort_key
from flowspec.models.method import Method, can_method_be_modeled
from flowspec.models.mode import Mode
from flowspec.models.modeled import ModeledMethod, is_modeled


def group_methods(methods: Iterable[Method], mode: Mode) -> dict[str, list[Method]]:
    """Group methods by library (application mode) or by package (framework mode).

    Groups and the methods inside them keep first-seen order.
    """
    groups: dict[str, list[Method]] = {}
    for method in methods:
        key = method.library if mode == Mode.APPLICATION else method.package_name
        groups.setdefault(key, []).append(method)
    return groups


def _supported_percentage(methods: Sequence[Method]) -> float:
    if not methods:
        return 0.0
    return sum(1 for m in methods if m.supported) / len(methods)


def _group_sort_key(name: str, methods: Sequence[Method]) -> tuple[float, int, int, tuple[str, str]]:
    return (
        _supported_percentage(methods),
        -sum(m.usage_count for m in methods),
        -len(methods),
        text_sort_key(name),
    )


def sort_group_names(groups: Mapping[str, Sequence[Method]]) -> list[str]:
    """Order group names for display.

    Least supported groups come first, then more usages, then more
    methods, then name.
    """
    return sorted(groups, key=lambda name: _group_sort_key(name, groups[name]))


def get_method_primary_sort_ordinal(
    method: Method,
    modeled_methods: Sequence[ModeledMethod],
    is_unsaved: bool,
    is_processed_by_auto_model: bool,
) -> int:
    """Bucket a method for display.

    0: unsaved model suggested by automodel
    1: no model, processed by automodel without a suggestion
    2: unsaved model, or no model at all
    3: saved model
    4: cannot be modeled (already supported, nothing pending)
    """
    if not can_method_be_modeled(method, modeled_methods, is_unsaved):
        return 4

    is_modeled_method = any(is_modeled(m) for m in modeled_methods)
    if is_modeled_method and is_unsaved and is_processed_by_auto_model:
        return 0
    if not is_modeled_method and is_processed_by_auto_model:
        return 1
    if (is_modeled_method and is_unsaved) or not is_modeled_method:
        return 2
    return 3


def sort_methods(
    methods: Iterable[Method],
    modeled_methods_by_signature: Mapping[str, Sequence[ModeledMethod]],
    modified_signatures: Collection[str],
    processed_by_auto_model: Collection[str],
) -> list[Method]:
    """Order methods by bucket, then usages (descending), then signature."""

    def sort_key(method: Method) -> tuple[int, int, tuple[str, str]]:
        ordinal = get_method_primary_sort_ordinal(
            method,
            modeled_methods_by_signature.get(method.signature, ()),
            method.signature in modified_signatures,
            method.signature in processed_by_auto_model,
        )
        return (ordinal, -method.usage_count, text_sort_key(method.signature))

    return sorted(methods, key=sort_key)


def group_and_sort_methods(methods: Iterable[Method], mode: Mode) -> list[Method]:
    """Flatten the groups in display order."""
    groups = group_methods(methods, mode)
    return [method for name in sort_group_names(groups) for method in groups[name]]

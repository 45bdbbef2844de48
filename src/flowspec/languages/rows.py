"""Reading and writing batches of data tuples.

Adapters assume well-shaped rows. This module is the boundary that checks
row shapes first, logs and skips the rows that do not fit, and groups the
result by method signature.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

import structlog

from flowspec.core.errors import ModelError
from flowspec.languages.base import DataTuple, LanguageAdapter
from flowspec.models.modeled import ModeledMethod, PredicateType

log = structlog.get_logger()


def _log_skipped_row(adapter: LanguageAdapter, index: int, error: ModelError) -> None:
    log.warning(
        "skipping_malformed_row",
        language=adapter.name,
        row_index=index,
        code=error.error_name,
        reason=error.message,
    )


def read_modeled_methods(
    adapter: LanguageAdapter,
    predicate_type: PredicateType,
    rows: Iterable[Any],
) -> list[ModeledMethod]:
    """Decode rows of one predicate, skipping rows with an unexpected shape."""
    definition = adapter.predicate(predicate_type)
    modeled_methods: list[ModeledMethod] = []
    for index, row in enumerate(rows):
        reason = definition.shape_error(row)
        if reason is not None:
            _log_skipped_row(adapter, index, ModelError.malformed_row(definition.extensible_predicate, reason, row))
            continue
        try:
            modeled_methods.append(definition.read_modeled_method(row))
        except ModelError as e:
            _log_skipped_row(adapter, index, e)
    return modeled_methods


def read_modeled_methods_by_signature(
    adapter: LanguageAdapter,
    rows_by_extensible_predicate: Mapping[str, Iterable[Any]],
) -> dict[str, list[ModeledMethod]]:
    """Decode rows keyed by extensible predicate name and group them by signature.

    Predicates the adapter does not know are logged and ignored.
    """
    grouped: dict[str, list[ModeledMethod]] = defaultdict(list)
    for extensible_predicate, rows in rows_by_extensible_predicate.items():
        match = adapter.predicate_for_extensible(extensible_predicate)
        if match is None:
            log.warning(
                "skipping_unknown_predicate",
                language=adapter.name,
                predicate=extensible_predicate,
            )
            continue
        predicate_type, _ = match
        for modeled_method in read_modeled_methods(adapter, predicate_type, rows):
            grouped[modeled_method.signature].append(modeled_method)
    return dict(grouped)


def generate_rows(
    adapter: LanguageAdapter,
    modeled_methods: Sequence[ModeledMethod],
) -> dict[str, list[list[DataTuple]]]:
    """Encode modeled methods into rows keyed by extensible predicate name.

    Unmodeled placeholders produce no rows.
    """
    rows: dict[str, list[list[DataTuple]]] = defaultdict(list)
    for modeled_method in modeled_methods:
        if modeled_method.type == "none":
            continue
        definition = adapter.predicate(modeled_method.type)
        rows[definition.extensible_predicate].append(definition.generate_method_definition(modeled_method))
    return dict(rows)

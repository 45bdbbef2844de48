"""Check the engine's "supported" flag against the models on disk."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Protocol

import structlog

from flowspec.models.method import Method
from flowspec.models.modeled import ModeledMethod

log = structlog.get_logger()


class ConsistencyNotifier(Protocol):
    def missing_method(self, signature: str, modeled_methods: Sequence[ModeledMethod]) -> None: ...

    def inconsistent_supported(self, method: Method, expected_supported: bool) -> None: ...


class LoggingConsistencyNotifier:
    """Reports inconsistencies as warning log events."""

    def missing_method(self, signature: str, modeled_methods: Sequence[ModeledMethod]) -> None:
        log.warning(
            "consistency_missing_method",
            signature=signature,
            model_types=sorted({m.type for m in modeled_methods}),
        )

    def inconsistent_supported(self, method: Method, expected_supported: bool) -> None:
        log.warning(
            "consistency_inconsistent_supported",
            signature=method.signature,
            supported=method.supported,
            expected_supported=expected_supported,
        )


def expected_supported(modeled_methods: Sequence[ModeledMethod]) -> bool:
    # Type models do not make a method supported
    return any(m.type not in ("none", "type") for m in modeled_methods)


def check_consistency(
    methods: Iterable[Method],
    modeled_methods_by_signature: Mapping[str, Sequence[ModeledMethod]],
    notifier: ConsistencyNotifier,
) -> None:
    """Report methods whose models and supported flag disagree.

    Only reports; nothing is repaired.
    """
    methods_by_signature = {method.signature: method for method in methods}

    for signature, modeled_methods in modeled_methods_by_signature.items():
        method = methods_by_signature.get(signature)
        if method is None:
            notifier.missing_method(signature, modeled_methods)
            continue

        expected = expected_supported(modeled_methods)
        if method.supported != expected:
            notifier.inconsistent_supported(method, expected)

"""Detect duplicate, conflicting and unsupported models for one method."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from flowspec.languages.base import LanguageAdapter
from flowspec.models.method import Method
from flowspec.models.modeled import (
    ModeledMethod,
    NeutralModel,
    modeled_method_supports_input,
    modeled_method_supports_kind,
    modeled_method_supports_output,
    modeled_method_supports_path,
)

DUPLICATED_TITLE = "Duplicated classification"
CONFLICTING_TITLE = "Conflicting classification"
UNSUPPORTED_KIND_TITLE = "Unsupported kind"
UNSUPPORTED_ENDPOINT_TITLE = "Unsupported endpoint type"

ClassificationKey = tuple[str, str, str, str, str, str]


@dataclass(frozen=True, slots=True)
class ModelingValidationError:
    """A problem with the model at ``index`` of the validated list."""

    index: int
    title: str
    message: str
    action_text: str


def _classification_key(modeled_method: ModeledMethod) -> ClassificationKey:
    # Generated and manual copies of one classification share a key.
    return (
        modeled_method.type,
        modeled_method.kind if modeled_method_supports_kind(modeled_method) else "",
        modeled_method.input if modeled_method_supports_input(modeled_method) else "",
        modeled_method.output if modeled_method_supports_output(modeled_method) else "",
        modeled_method.related_type_name if modeled_method_supports_path(modeled_method) else "",
        modeled_method.path if modeled_method_supports_path(modeled_method) else "",
    )


def validate_modeled_methods(modeled_methods: Sequence[ModeledMethod]) -> list[ModelingValidationError]:
    """Find duplicated and conflicting classifications.

    Indices refer to positions in ``modeled_methods``, unmodeled entries
    included. Errors are sorted by index.
    """
    errors: list[ModelingValidationError] = []

    seen: set[ClassificationKey] = set()
    reported: set[ClassificationKey] = set()
    unique: list[tuple[int, ModeledMethod]] = []

    for index, modeled_method in enumerate(modeled_methods):
        if modeled_method.type == "none":
            continue
        key = _classification_key(modeled_method)
        if key not in seen:
            seen.add(key)
            unique.append((index, modeled_method))
        elif key not in reported:
            reported.add(key)
            errors.append(
                ModelingValidationError(
                    index=index,
                    title=DUPLICATED_TITLE,
                    message="This method has two identical or conflicting classifications.",
                    action_text="Modify or remove the duplicated classification.",
                )
            )

    first_neutral_by_kind: dict[str, int] = {}
    for index, modeled_method in unique:
        if isinstance(modeled_method, NeutralModel):
            first_neutral_by_kind.setdefault(modeled_method.kind, index)

    present_types = {modeled_method.type for _, modeled_method in unique}
    for kind, index in first_neutral_by_kind.items():
        if kind in present_types:
            errors.append(
                ModelingValidationError(
                    index=index,
                    title=CONFLICTING_TITLE,
                    message=(
                        f"This method has a neutral {kind} classification, "
                        f"which conflicts with other {kind} classifications."
                    ),
                    action_text="Modify or remove the neutral classification.",
                )
            )

    errors.sort(key=lambda error: error.index)
    return errors


def validate_supported_models(
    adapter: LanguageAdapter,
    method: Method,
    modeled_methods: Sequence[ModeledMethod],
) -> list[ModelingValidationError]:
    """Find models the language cannot express for ``method``.

    A model is rejected when its kind is not one the predicate offers, or
    when the predicate does not apply to the method's endpoint type.
    """
    errors: list[ModelingValidationError] = []
    for index, modeled_method in enumerate(modeled_methods):
        if modeled_method.type == "none" or modeled_method.type not in adapter.predicates:
            continue
        definition = adapter.predicate(modeled_method.type)
        if (
            modeled_method_supports_kind(modeled_method)
            and definition.supported_kinds
            and modeled_method.kind not in definition.supported_kinds
        ):
            errors.append(
                ModelingValidationError(
                    index=index,
                    title=UNSUPPORTED_KIND_TITLE,
                    message=f"{adapter.name} has no {modeled_method.type} kind '{modeled_method.kind}'.",
                    action_text=f"Use one of: {', '.join(definition.supported_kinds)}.",
                )
            )
        if not definition.supports_endpoint_type(method.endpoint_type):
            errors.append(
                ModelingValidationError(
                    index=index,
                    title=UNSUPPORTED_ENDPOINT_TITLE,
                    message=(
                        f"{adapter.name} cannot model a {method.endpoint_type.value} "
                        f"as a {modeled_method.type}."
                    ),
                    action_text="Remove the classification or model a different endpoint.",
                )
            )
    return errors

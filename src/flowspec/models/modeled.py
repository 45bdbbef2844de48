"""Modeled methods: the classification rows attached to an endpoint.

A modeled method is one of six variants. Each variant carries the endpoint
identity plus only the fields that make sense for it, so "does this
variant have an input?" is answered by the type, not by a missing key.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal, TypeAlias, TypeGuard

from flowspec.models.method import MethodSignature

ModeledMethodType = Literal["none", "source", "sink", "summary", "neutral", "type"]
PredicateType = Literal["source", "sink", "summary", "neutral", "type"]

# manual: written by hand; df-*: dataflow model generator; ai-*: automodel.
# The *-manual forms mark generated models a person has since reviewed.
Provenance = Literal["manual", "df-generated", "df-manual", "ai-generated", "ai-manual"]

PREDICATE_TYPES: tuple[PredicateType, ...] = ("source", "sink", "summary", "neutral", "type")


@dataclass(frozen=True, slots=True)
class NoneModel(MethodSignature):
    """Placeholder for an endpoint that has not been modeled."""

    type: ClassVar[Literal["none"]] = "none"


@dataclass(frozen=True, slots=True)
class SourceModel(MethodSignature):
    output: str
    kind: str
    provenance: Provenance
    type: ClassVar[Literal["source"]] = "source"


@dataclass(frozen=True, slots=True)
class SinkModel(MethodSignature):
    input: str
    kind: str
    provenance: Provenance
    type: ClassVar[Literal["sink"]] = "sink"


@dataclass(frozen=True, slots=True)
class SummaryModel(MethodSignature):
    input: str
    output: str
    kind: str
    provenance: Provenance
    type: ClassVar[Literal["summary"]] = "summary"


@dataclass(frozen=True, slots=True)
class NeutralModel(MethodSignature):
    """Declares that the endpoint is neither a source, sink nor summary of ``kind``."""

    kind: str
    provenance: Provenance
    type: ClassVar[Literal["neutral"]] = "neutral"


@dataclass(frozen=True, slots=True)
class TypeModel(MethodSignature):
    """Relates ``related_type_name`` to the value found at ``path``."""

    related_type_name: str
    path: str
    type: ClassVar[Literal["type"]] = "type"


ModeledMethod: TypeAlias = NoneModel | SourceModel | SinkModel | SummaryModel | NeutralModel | TypeModel
KindModeledMethod: TypeAlias = SourceModel | SinkModel | SummaryModel | NeutralModel


def modeled_method_supports_kind(modeled_method: ModeledMethod) -> TypeGuard[KindModeledMethod]:
    return isinstance(modeled_method, SourceModel | SinkModel | SummaryModel | NeutralModel)


def modeled_method_supports_input(
    modeled_method: ModeledMethod,
) -> TypeGuard[SinkModel | SummaryModel]:
    return isinstance(modeled_method, SinkModel | SummaryModel)


def modeled_method_supports_output(
    modeled_method: ModeledMethod,
) -> TypeGuard[SourceModel | SummaryModel]:
    return isinstance(modeled_method, SourceModel | SummaryModel)


def modeled_method_supports_provenance(
    modeled_method: ModeledMethod,
) -> TypeGuard[KindModeledMethod]:
    return isinstance(modeled_method, SourceModel | SinkModel | SummaryModel | NeutralModel)


def modeled_method_supports_path(modeled_method: ModeledMethod) -> TypeGuard[TypeModel]:
    return isinstance(modeled_method, TypeModel)


def is_modeled(modeled_method: ModeledMethod) -> bool:
    return modeled_method.type != "none"

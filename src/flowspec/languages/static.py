"""Flat-column adapter shared by Java and C#.

Methods are identified by separate package, type, name and signature
columns; only argument addressing uses access path syntax. The
``subtypes`` column is always written as true and the ``ext`` column is
always empty, so neither survives a read.
"""

from __future__ import annotations

from typing import Any, cast

from flowspec.languages.base import DataRow, DataTuple, LanguageAdapter, PredicateDefinition
from flowspec.languages.shared import SHARED_EXTENSIBLE_PREDICATES, SHARED_KINDS
from flowspec.models.method import (
    ArgumentOptions,
    EndpointType,
    MethodArgument,
    MethodSignature,
    get_arguments_list,
)
from flowspec.models.mode import Mode
from flowspec.models.modeled import (
    NeutralModel,
    Provenance,
    SinkModel,
    SourceModel,
    SummaryModel,
)


def static_method_signature(
    *,
    package_name: str,
    type_name: str,
    method_name: str,
    method_parameters: str,
) -> str:
    return f"{package_name}.{type_name}#{method_name}{method_parameters}"


def _method_columns(method: MethodSignature) -> list[DataTuple]:
    return [method.package_name, method.type_name, True, method.method_name, method.method_parameters, ""]


def _identity(row: DataRow, name_column: int) -> dict[str, Any]:
    package_name = cast(str, row[0])
    type_name = cast(str, row[1])
    method_name = cast(str, row[name_column])
    method_parameters = cast(str, row[name_column + 1])
    return {
        "signature": static_method_signature(
            package_name=package_name,
            type_name=type_name,
            method_name=method_name,
            method_parameters=method_parameters,
        ),
        "endpoint_type": EndpointType.METHOD,
        "package_name": package_name,
        "type_name": type_name,
        "method_name": method_name,
        "method_parameters": method_parameters,
    }


# extensible predicate sourceModel(
#   string package, string type, boolean subtypes, string name, string signature, string ext,
#   string output, string kind, string provenance
# );
def _generate_source(method: SourceModel) -> list[DataTuple]:
    return [*_method_columns(method), method.output, method.kind, method.provenance]


def _read_source(row: DataRow) -> SourceModel:
    return SourceModel(
        **_identity(row, 3),
        output=cast(str, row[6]),
        kind=cast(str, row[7]),
        provenance=cast(Provenance, row[8]),
    )


# extensible predicate sinkModel(
#   string package, string type, boolean subtypes, string name, string signature, string ext,
#   string input, string kind, string provenance
# );
def _generate_sink(method: SinkModel) -> list[DataTuple]:
    return [*_method_columns(method), method.input, method.kind, method.provenance]


def _read_sink(row: DataRow) -> SinkModel:
    return SinkModel(
        **_identity(row, 3),
        input=cast(str, row[6]),
        kind=cast(str, row[7]),
        provenance=cast(Provenance, row[8]),
    )


# extensible predicate summaryModel(
#   string package, string type, boolean subtypes, string name, string signature, string ext,
#   string input, string output, string kind, string provenance
# );
def _generate_summary(method: SummaryModel) -> list[DataTuple]:
    return [*_method_columns(method), method.input, method.output, method.kind, method.provenance]


def _read_summary(row: DataRow) -> SummaryModel:
    return SummaryModel(
        **_identity(row, 3),
        input=cast(str, row[6]),
        output=cast(str, row[7]),
        kind=cast(str, row[8]),
        provenance=cast(Provenance, row[9]),
    )


# extensible predicate neutralModel(
#   string package, string type, string name, string signature, string kind, string provenance
# );
def _generate_neutral(method: NeutralModel) -> list[DataTuple]:
    return [
        method.package_name,
        method.type_name,
        method.method_name,
        method.method_parameters,
        method.kind,
        method.provenance,
    ]


def _read_neutral(row: DataRow) -> NeutralModel:
    return NeutralModel(
        **_identity(row, 2),
        kind=cast(str, row[4]),
        provenance=cast(Provenance, row[5]),
    )


def _get_argument_options(method: MethodSignature) -> ArgumentOptions:
    arguments = [
        MethodArgument(path=f"Argument[{index}]", label=f"Argument[{index}]: {argument}")
        for index, argument in enumerate(get_arguments_list(method.method_parameters))
    ]
    return ArgumentOptions(
        options=[MethodArgument(path="Argument[this]", label="Argument[this]"), *arguments],
        # Without arguments, the receiver is the only thing to address
        default_argument_path=arguments[0].path if arguments else "Argument[this]",
    )


def create_static_adapter(name: str) -> LanguageAdapter:
    return LanguageAdapter(
        name=name,
        available_modes=(Mode.APPLICATION, Mode.FRAMEWORK),
        create_method_signature=static_method_signature,
        predicates={
            "source": PredicateDefinition(
                extensible_predicate=SHARED_EXTENSIBLE_PREDICATES["source"],
                arity=9,
                generate_method_definition=_generate_source,
                read_modeled_method=_read_source,
                supported_kinds=SHARED_KINDS["source"],
                boolean_columns=frozenset({2}),
            ),
            "sink": PredicateDefinition(
                extensible_predicate=SHARED_EXTENSIBLE_PREDICATES["sink"],
                arity=9,
                generate_method_definition=_generate_sink,
                read_modeled_method=_read_sink,
                supported_kinds=SHARED_KINDS["sink"],
                boolean_columns=frozenset({2}),
            ),
            "summary": PredicateDefinition(
                extensible_predicate=SHARED_EXTENSIBLE_PREDICATES["summary"],
                arity=10,
                generate_method_definition=_generate_summary,
                read_modeled_method=_read_summary,
                supported_kinds=SHARED_KINDS["summary"],
                boolean_columns=frozenset({2}),
            ),
            "neutral": PredicateDefinition(
                extensible_predicate=SHARED_EXTENSIBLE_PREDICATES["neutral"],
                arity=6,
                generate_method_definition=_generate_neutral,
                read_modeled_method=_read_neutral,
                supported_kinds=SHARED_KINDS["neutral"],
            ),
        },
        get_argument_options=_get_argument_options,
    )

"""Ruby adapter: type column plus a ``Method[...]`` access path chain."""

from __future__ import annotations

from typing import Any, cast

from flowspec.languages.base import DataRow, DataTuple, LanguageAdapter, PredicateDefinition
from flowspec.languages.ruby_access_paths import (
    parse_ruby_access_path,
    parse_ruby_method_from_path,
    ruby_endpoint_type,
    ruby_method_path,
    ruby_method_signature,
    ruby_path,
)
from flowspec.languages.shared import (
    SHARED_EXTENSIBLE_PREDICATES,
    SHARED_KINDS,
    TYPE_EXTENSIBLE_PREDICATE,
)
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
    SinkModel,
    SourceModel,
    SummaryModel,
    TypeModel,
)


def _identity_fields(type_name: str, method_name: str) -> dict[str, Any]:
    return {
        "signature": ruby_method_signature(
            package_name="",
            type_name=type_name,
            method_name=method_name,
            method_parameters="",
        ),
        "endpoint_type": ruby_endpoint_type(type_name, method_name),
        "package_name": "",
        "type_name": type_name,
        "method_name": method_name,
        "method_parameters": "",
    }


# extensible predicate sourceModel(string type, string path, string kind);
def _generate_source(method: SourceModel) -> list[DataTuple]:
    return [method.type_name, ruby_path(method.method_name, method.output), method.kind]


def _read_source(row: DataRow) -> SourceModel:
    type_name = cast(str, row[0])
    method_name, output = parse_ruby_access_path(cast(str, row[1]))
    return SourceModel(
        **_identity_fields(type_name, method_name),
        output=output,
        kind=cast(str, row[2]),
        provenance="manual",
    )


# extensible predicate sinkModel(string type, string path, string kind);
def _generate_sink(method: SinkModel) -> list[DataTuple]:
    return [method.type_name, ruby_path(method.method_name, method.input), method.kind]


def _read_sink(row: DataRow) -> SinkModel:
    type_name = cast(str, row[0])
    method_name, input_ = parse_ruby_access_path(cast(str, row[1]))
    return SinkModel(
        **_identity_fields(type_name, method_name),
        input=input_,
        kind=cast(str, row[2]),
        provenance="manual",
    )


# extensible predicate summaryModel(
#   string type, string path, string input, string output, string kind
# );
def _generate_summary(method: SummaryModel) -> list[DataTuple]:
    return [
        method.type_name,
        ruby_method_path(method.method_name),
        method.input,
        method.output,
        method.kind,
    ]


def _read_summary(row: DataRow) -> SummaryModel:
    type_name = cast(str, row[0])
    method_name = parse_ruby_method_from_path(cast(str, row[1]))
    return SummaryModel(
        **_identity_fields(type_name, method_name),
        input=cast(str, row[2]),
        output=cast(str, row[3]),
        kind=cast(str, row[4]),
        provenance="manual",
    )


# extensible predicate neutralModel(string type, string path, string kind);
def _generate_neutral(method: NeutralModel) -> list[DataTuple]:
    return [method.type_name, ruby_method_path(method.method_name), method.kind]


def _read_neutral(row: DataRow) -> NeutralModel:
    type_name = cast(str, row[0])
    method_name = parse_ruby_method_from_path(cast(str, row[1]))
    return NeutralModel(
        **_identity_fields(type_name, method_name),
        kind=cast(str, row[2]),
        provenance="manual",
    )


# extensible predicate typeModel(string type1, string type2, string path);
def _generate_type(method: TypeModel) -> list[DataTuple]:
    return [method.related_type_name, method.type_name, ruby_path(method.method_name, method.path)]


def _read_type(row: DataRow) -> TypeModel:
    type_name = cast(str, row[1])
    method_name, path = parse_ruby_access_path(cast(str, row[2]))
    return TypeModel(
        **_identity_fields(type_name, method_name),
        related_type_name=cast(str, row[0]),
        path=path,
    )


def _get_argument_options(method: MethodSignature) -> ArgumentOptions:
    arguments: list[MethodArgument] = []
    for index, argument in enumerate(get_arguments_list(method.method_parameters)):
        if argument.endswith(":"):
            arguments.append(MethodArgument(path=f"Argument[{argument}]", label=f"Argument[{argument}]"))
        else:
            arguments.append(MethodArgument(path=f"Argument[{index}]", label=f"Argument[{index}]: {argument}"))

    return ArgumentOptions(
        options=[MethodArgument(path="Argument[self]", label="Argument[self]"), *arguments],
        default_argument_path=arguments[0].path if arguments else "Argument[self]",
    )


def _endpoint_type_for_endpoint(method: MethodSignature, endpoint_kind: str | None) -> EndpointType:  # noqa: ARG001
    return ruby_endpoint_type(method.type_name, method.method_name)


def _parse_suggestion_method(type_: str, path: str) -> MethodSignature:
    return MethodSignature(**_identity_fields(type_, parse_ruby_method_from_path(path)))


def create_ruby_adapter() -> LanguageAdapter:
    return LanguageAdapter(
        name="ruby",
        available_modes=(Mode.FRAMEWORK,),
        create_method_signature=ruby_method_signature,
        predicates={
            "source": PredicateDefinition(
                extensible_predicate=SHARED_EXTENSIBLE_PREDICATES["source"],
                arity=3,
                generate_method_definition=_generate_source,
                read_modeled_method=_read_source,
                supported_kinds=SHARED_KINDS["source"],
                supported_endpoint_types=frozenset({EndpointType.METHOD, EndpointType.CLASS}),
            ),
            "sink": PredicateDefinition(
                extensible_predicate=SHARED_EXTENSIBLE_PREDICATES["sink"],
                arity=3,
                generate_method_definition=_generate_sink,
                read_modeled_method=_read_sink,
                supported_kinds=SHARED_KINDS["sink"],
                supported_endpoint_types=frozenset({EndpointType.METHOD, EndpointType.CONSTRUCTOR}),
            ),
            "summary": PredicateDefinition(
                extensible_predicate=SHARED_EXTENSIBLE_PREDICATES["summary"],
                arity=5,
                generate_method_definition=_generate_summary,
                read_modeled_method=_read_summary,
                supported_kinds=SHARED_KINDS["summary"],
                supported_endpoint_types=frozenset({EndpointType.METHOD, EndpointType.CONSTRUCTOR}),
            ),
            "neutral": PredicateDefinition(
                extensible_predicate=SHARED_EXTENSIBLE_PREDICATES["neutral"],
                arity=3,
                generate_method_definition=_generate_neutral,
                read_modeled_method=_read_neutral,
                supported_kinds=SHARED_KINDS["neutral"],
            ),
            "type": PredicateDefinition(
                extensible_predicate=TYPE_EXTENSIBLE_PREDICATE,
                arity=3,
                generate_method_definition=_generate_type,
                read_modeled_method=_read_type,
            ),
        },
        get_argument_options=_get_argument_options,
        endpoint_type_for_endpoint=_endpoint_type_for_endpoint,
        parse_suggestion_method=_parse_suggestion_method,
    )

"""Python adapter: type column plus ``Member[...]`` access path chains."""

from __future__ import annotations

from typing import Any, cast

from flowspec.core.errors import ModelError
from flowspec.languages.base import DataRow, DataTuple, LanguageAdapter, PredicateDefinition
from flowspec.languages.python_access_paths import (
    ParsedPythonPath,
    has_python_self_argument,
    parse_python_type_and_path,
    python_endpoint_type,
    python_method_path,
    python_method_signature,
    python_path,
    python_type,
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
    ModeledMethod,
    NeutralModel,
    SinkModel,
    SourceModel,
    SummaryModel,
    TypeModel,
)

_CALLABLE_ENDPOINT_TYPES = frozenset(
    {
        EndpointType.METHOD,
        EndpointType.FUNCTION,
        EndpointType.CONSTRUCTOR,
        EndpointType.CLASS_METHOD,
        EndpointType.STATIC_METHOD,
    }
)


def _type_column(method: ModeledMethod) -> str:
    return python_type(method.package_name, method.type_name, method.endpoint_type)


def _parse(row: DataRow, type_column: int = 0) -> ParsedPythonPath:
    return parse_python_type_and_path(cast(str, row[type_column]), cast(str, row[type_column + 1]))


def _identity_fields(parsed: ParsedPythonPath) -> dict[str, Any]:
    return {
        "signature": python_method_signature(
            package_name=parsed.package_name,
            type_name=parsed.type_name,
            method_name=parsed.method_name,
            method_parameters="",
        ),
        "endpoint_type": parsed.endpoint_type,
        "package_name": parsed.package_name,
        "type_name": parsed.type_name,
        "method_name": parsed.method_name,
        "method_parameters": "",
    }


def _require_method_path(model_type: str, parsed: ParsedPythonPath) -> None:
    if parsed.path != "":
        raise ModelError.method_path_expected(model_type, parsed.path)


# extensible predicate sourceModel(string type, string path, string kind);
def _generate_source(method: SourceModel) -> list[DataTuple]:
    return [_type_column(method), python_path(method.method_name, method.output), method.kind]


def _read_source(row: DataRow) -> SourceModel:
    parsed = _parse(row)
    return SourceModel(
        **_identity_fields(parsed),
        output=parsed.path,
        kind=cast(str, row[2]),
        provenance="manual",
    )


# extensible predicate sinkModel(string type, string path, string kind);
def _generate_sink(method: SinkModel) -> list[DataTuple]:
    return [_type_column(method), python_path(method.method_name, method.input), method.kind]


def _read_sink(row: DataRow) -> SinkModel:
    parsed = _parse(row)
    return SinkModel(
        **_identity_fields(parsed),
        input=parsed.path,
        kind=cast(str, row[2]),
        provenance="manual",
    )


# extensible predicate summaryModel(
#   string type, string path, string input, string output, string kind
# );
def _generate_summary(method: SummaryModel) -> list[DataTuple]:
    return [
        _type_column(method),
        python_method_path(method.method_name),
        method.input,
        method.output,
        method.kind,
    ]


def _read_summary(row: DataRow) -> SummaryModel:
    parsed = _parse(row)
    _require_method_path("summary", parsed)
    return SummaryModel(
        **_identity_fields(parsed),
        input=cast(str, row[2]),
        output=cast(str, row[3]),
        kind=cast(str, row[4]),
        provenance="manual",
    )


# extensible predicate neutralModel(string type, string path, string kind);
def _generate_neutral(method: NeutralModel) -> list[DataTuple]:
    return [_type_column(method), python_method_path(method.method_name), method.kind]


def _read_neutral(row: DataRow) -> NeutralModel:
    parsed = _parse(row)
    _require_method_path("neutral", parsed)
    return NeutralModel(
        **_identity_fields(parsed),
        kind=cast(str, row[2]),
        provenance="manual",
    )


# extensible predicate typeModel(string type1, string type2, string path);
def _generate_type(method: TypeModel) -> list[DataTuple]:
    return [method.related_type_name, _type_column(method), python_path(method.method_name, method.path)]


def _read_type(row: DataRow) -> TypeModel:
    parsed = _parse(row, type_column=1)
    return TypeModel(
        **_identity_fields(parsed),
        related_type_name=cast(str, row[0]),
        path=parsed.path,
    )


def _get_argument_options(method: MethodSignature) -> ArgumentOptions:
    # Argument and Parameter are equivalent in Python; the editor offers Argument
    has_self = has_python_self_argument(method.endpoint_type)
    arguments: list[MethodArgument] = []
    for index, argument in enumerate(get_arguments_list(method.method_parameters)):
        if has_self and index == 0:
            arguments.append(MethodArgument(path="Argument[self]", label=f"Argument[self]: {argument}"))
            continue

        # self does not count towards the positional index
        position = index - 1 if has_self else index

        if argument.endswith(":"):
            # keyword-only
            arguments.append(
                MethodArgument(path=f"Argument[{argument}]", label=f"Argument[{argument}]: {argument[:-1]}")
            )
        elif argument.endswith("/"):
            # positional-only
            arguments.append(
                MethodArgument(path=f"Argument[{position}]", label=f"Argument[{position}]: {argument[:-1]}")
            )
        else:
            arguments.append(
                MethodArgument(
                    path=f"Argument[{position},{argument}:]",
                    label=f"Argument[{position},{argument}:]: {argument}",
                )
            )

    return ArgumentOptions(
        options=arguments,
        default_argument_path=arguments[0].path if arguments else "Argument[self]",
    )


def _parse_suggestion_method(type_: str, path: str) -> MethodSignature:
    return MethodSignature(**_identity_fields(parse_python_type_and_path(type_, path)))


def create_python_adapter() -> LanguageAdapter:
    return LanguageAdapter(
        name="python",
        available_modes=(Mode.FRAMEWORK,),
        create_method_signature=python_method_signature,
        predicates={
            "source": PredicateDefinition(
                extensible_predicate=SHARED_EXTENSIBLE_PREDICATES["source"],
                arity=3,
                generate_method_definition=_generate_source,
                read_modeled_method=_read_source,
                supported_kinds=SHARED_KINDS["source"],
                supported_endpoint_types=_CALLABLE_ENDPOINT_TYPES,
            ),
            "sink": PredicateDefinition(
                extensible_predicate=SHARED_EXTENSIBLE_PREDICATES["sink"],
                arity=3,
                generate_method_definition=_generate_sink,
                read_modeled_method=_read_sink,
                supported_kinds=SHARED_KINDS["sink"],
                supported_endpoint_types=_CALLABLE_ENDPOINT_TYPES,
            ),
            "summary": PredicateDefinition(
                extensible_predicate=SHARED_EXTENSIBLE_PREDICATES["summary"],
                arity=5,
                generate_method_definition=_generate_summary,
                read_modeled_method=_read_summary,
                supported_kinds=SHARED_KINDS["summary"],
                supported_endpoint_types=_CALLABLE_ENDPOINT_TYPES,
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
        endpoint_type_for_endpoint=python_endpoint_type,
        parse_suggestion_method=_parse_suggestion_method,
    )

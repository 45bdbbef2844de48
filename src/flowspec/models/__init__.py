"""Endpoint identities and modeled methods."""

from flowspec.models.method import (
    ArgumentOptions,
    CallClassification,
    EndpointType,
    Method,
    MethodArgument,
    MethodSignature,
    Usage,
    can_method_be_modeled,
    get_arguments_list,
)
from flowspec.models.mode import Mode
from flowspec.models.modeled import (
    PREDICATE_TYPES,
    ModeledMethod,
    ModeledMethodType,
    NeutralModel,
    NoneModel,
    PredicateType,
    Provenance,
    SinkModel,
    SourceModel,
    SummaryModel,
    TypeModel,
    is_modeled,
    modeled_method_supports_input,
    modeled_method_supports_kind,
    modeled_method_supports_output,
    modeled_method_supports_path,
    modeled_method_supports_provenance,
)

__all__ = [
    "PREDICATE_TYPES",
    "ArgumentOptions",
    "CallClassification",
    "EndpointType",
    "Method",
    "MethodArgument",
    "MethodSignature",
    "Mode",
    "ModeledMethod",
    "ModeledMethodType",
    "NeutralModel",
    "NoneModel",
    "PredicateType",
    "Provenance",
    "SinkModel",
    "SourceModel",
    "SummaryModel",
    "TypeModel",
    "Usage",
    "can_method_be_modeled",
    "get_arguments_list",
    "is_modeled",
    "modeled_method_supports_input",
    "modeled_method_supports_kind",
    "modeled_method_supports_output",
    "modeled_method_supports_path",
    "modeled_method_supports_provenance",
]

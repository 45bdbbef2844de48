"""Endpoint identities and the methods listed by the analysis engine."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from flowspec.models.modeled import ModeledMethod


class EndpointType(str, Enum):
    """What kind of callable (or container) an endpoint is."""

    METHOD = "method"
    CONSTRUCTOR = "constructor"
    FUNCTION = "function"
    STATIC_METHOD = "staticMethod"
    CLASS_METHOD = "classMethod"
    CLASS = "class"
    MODULE = "module"


class CallClassification(str, Enum):
    UNKNOWN = "unknown"
    SOURCE = "source"
    TEST = "test"
    GENERATED = "generated"


@dataclass(frozen=True, slots=True)
class MethodSignature:
    """Identity of a single endpoint.

    ``signature`` is derived by the language adapter and is unique per
    language for the remaining fields.
    """

    signature: str
    endpoint_type: EndpointType
    package_name: str
    type_name: str
    method_name: str
    method_parameters: str


@dataclass(frozen=True, slots=True)
class Usage:
    """A call site of an external method."""

    label: str
    url: str = ""
    classification: CallClassification = CallClassification.UNKNOWN


@dataclass(frozen=True, slots=True)
class Method(MethodSignature):
    """An endpoint as reported by the analysis engine."""

    library: str = ""
    library_version: str | None = None
    supported: bool = False
    supported_type: str = "none"
    usages: tuple[Usage, ...] = ()

    @property
    def usage_count(self) -> int:
        return len(self.usages)


@dataclass(frozen=True, slots=True)
class MethodArgument:
    """An addressable argument position offered in the editor."""

    path: str
    label: str


@dataclass(frozen=True, slots=True)
class ArgumentOptions:
    options: list[MethodArgument]
    default_argument_path: str


def get_arguments_list(method_parameters: str) -> list[str]:
    """Split a parenthesized parameter list such as ``(a,b:)``."""
    if method_parameters in ("", "()"):
        return []
    return method_parameters[1:-1].split(",")


def can_method_be_modeled(
    method: Method,
    modeled_methods: Sequence[ModeledMethod],
    method_is_unsaved: bool,
) -> bool:
    """Unsupported methods, and methods with pending or existing models, can be modeled."""
    return (
        not method.supported
        or any(m.type != "none" for m in modeled_methods)
        or method_is_unsaved
    )

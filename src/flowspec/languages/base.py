"""Language adapter definitions.

A language adapter translates between modeled methods and the flat data
tuples consumed by the analysis engine's extensible predicates. Each
language registers one adapter; the Java and C# adapters share the same
flat column layout.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Protocol, TypeAlias, TypeVar

from flowspec.core.errors import ModelError
from flowspec.models.method import ArgumentOptions, EndpointType, MethodSignature
from flowspec.models.mode import Mode
from flowspec.models.modeled import ModeledMethod, PredicateType

DataTuple: TypeAlias = bool | int | float | str
DataRow: TypeAlias = Sequence[DataTuple]

M = TypeVar("M", bound=ModeledMethod)


class Language(str, Enum):
    """Languages with a registered adapter."""

    JAVA = "java"
    CSHARP = "csharp"
    PYTHON = "python"
    RUBY = "ruby"


class CreateMethodSignature(Protocol):
    def __call__(
        self,
        *,
        package_name: str,
        type_name: str,
        method_name: str,
        method_parameters: str,
    ) -> str: ...


@dataclass
class PredicateDefinition(Generic[M]):
    """One extensible predicate and its row layout.

    ``arity`` and ``boolean_columns`` describe the expected row shape;
    every other column is a string.
    """

    extensible_predicate: str
    arity: int
    generate_method_definition: Callable[[M], list[DataTuple]]
    read_modeled_method: Callable[[DataRow], M]
    supported_kinds: tuple[str, ...] = ()
    supported_endpoint_types: frozenset[EndpointType] | None = None
    boolean_columns: frozenset[int] = field(default_factory=frozenset)

    def shape_error(self, row: Any) -> str | None:
        """Describe why ``row`` cannot be decoded, or None if it is well-shaped."""
        if not isinstance(row, (list, tuple)):
            return f"expected a list of columns, got {type(row).__name__}"
        if len(row) != self.arity:
            return f"expected {self.arity} columns, got {len(row)}"
        for index, value in enumerate(row):
            expected: type = bool if index in self.boolean_columns else str
            if not isinstance(value, expected):
                return f"column {index} should be {expected.__name__}, got {type(value).__name__}"
        return None

    def supports_endpoint_type(self, endpoint_type: EndpointType) -> bool:
        if self.supported_endpoint_types is None:
            return True
        return endpoint_type in self.supported_endpoint_types


@dataclass
class LanguageAdapter:
    """Definition of a language's models-as-data format."""

    name: str
    available_modes: tuple[Mode, ...]
    create_method_signature: CreateMethodSignature
    predicates: dict[PredicateType, PredicateDefinition[Any]]
    get_argument_options: Callable[[MethodSignature], ArgumentOptions]

    # Only set for languages whose query output does not say what kind of
    # endpoint a method is.
    endpoint_type_for_endpoint: Callable[[MethodSignature, str | None], EndpointType] | None = None

    # Resolves a (type, path) pair from an access path suggestions query
    # into the method it belongs to.
    parse_suggestion_method: Callable[[str, str], MethodSignature] | None = None

    def predicate(self, predicate_type: PredicateType) -> PredicateDefinition[Any]:
        definition = self.predicates.get(predicate_type)
        if definition is None:
            raise ModelError.unsupported_predicate(self.name, predicate_type)
        return definition

    def predicate_for_extensible(
        self, extensible_predicate: str
    ) -> tuple[PredicateType, PredicateDefinition[Any]] | None:
        for predicate_type, definition in self.predicates.items():
            if definition.extensible_predicate == extensible_predicate:
                return predicate_type, definition
        return None

    def encode(self, modeled_method: ModeledMethod) -> list[DataTuple]:
        """Generate the data tuple for a modeled method.

        Raises:
            ModelError: If the method is unmodeled or the language has no
                predicate for its type.
        """
        if modeled_method.type == "none":
            raise ModelError.unsupported_predicate(self.name, "none")
        return self.predicate(modeled_method.type).generate_method_definition(modeled_method)

    def decode(self, predicate_type: PredicateType, row: DataRow) -> ModeledMethod:
        """Read a well-shaped row of ``predicate_type`` into a modeled method."""
        return self.predicate(predicate_type).read_modeled_method(row)

    def signature_for(self, package_name: str, type_name: str, method_name: str, method_parameters: str) -> str:
        return self.create_method_signature(
            package_name=package_name,
            type_name=type_name,
            method_name=method_name,
            method_parameters=method_parameters,
        )

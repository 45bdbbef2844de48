"""Access path suggestion models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from flowspec.models.method import MethodSignature


class AccessPathSuggestionDefinitionType(str, Enum):
    """What the suggested path points at, as reported by the suggestions query."""

    ARRAY = "array"
    CLASS = "class"
    ENUM = "enum"
    ENUM_MEMBER = "enum-member"
    FIELD = "field"
    INTERFACE = "interface"
    KEY = "key"
    METHOD = "method"
    MISC = "misc"
    NAMESPACE = "namespace"
    PARAMETER = "parameter"
    PROPERTY = "property"
    STRUCTURE = "structure"
    RETURN = "return"
    VARIABLE = "variable"


DEFINITION_TYPE_ICONS: dict[AccessPathSuggestionDefinitionType, str] = {
    AccessPathSuggestionDefinitionType.ARRAY: "symbol-array",
    AccessPathSuggestionDefinitionType.CLASS: "symbol-class",
    AccessPathSuggestionDefinitionType.ENUM: "symbol-enum",
    AccessPathSuggestionDefinitionType.ENUM_MEMBER: "symbol-enum-member",
    AccessPathSuggestionDefinitionType.FIELD: "symbol-field",
    AccessPathSuggestionDefinitionType.INTERFACE: "symbol-interface",
    AccessPathSuggestionDefinitionType.KEY: "symbol-key",
    AccessPathSuggestionDefinitionType.METHOD: "symbol-method",
    AccessPathSuggestionDefinitionType.MISC: "symbol-misc",
    AccessPathSuggestionDefinitionType.NAMESPACE: "symbol-namespace",
    AccessPathSuggestionDefinitionType.PARAMETER: "symbol-parameter",
    AccessPathSuggestionDefinitionType.PROPERTY: "symbol-property",
    AccessPathSuggestionDefinitionType.STRUCTURE: "symbol-structure",
    AccessPathSuggestionDefinitionType.RETURN: "symbol-method",
    AccessPathSuggestionDefinitionType.VARIABLE: "symbol-variable",
}


@dataclass(frozen=True, slots=True)
class AccessPathSuggestionRow:
    """A single suggested access path for a method."""

    method: MethodSignature
    value: str
    details: str
    definition_type: AccessPathSuggestionDefinitionType

    @property
    def method_signature(self) -> str:
        return self.method.signature


@dataclass(frozen=True, slots=True)
class AccessPathSuggestionRows:
    input: list[AccessPathSuggestionRow] = field(default_factory=list)
    output: list[AccessPathSuggestionRow] = field(default_factory=list)


@dataclass
class AccessPathOption:
    """A node of the suggestion tree.

    ``label`` is the last token of ``value``; ``followup`` holds the options
    that extend ``value`` by one more token.
    """

    label: str
    value: str
    icon: str
    details: str | None = None
    followup: list[AccessPathOption] = field(default_factory=list)

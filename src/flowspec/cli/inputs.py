"""JSON input documents accepted by the CLI."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, TypeVar

import click
from pydantic import BaseModel, Field, ValidationError

from flowspec.languages.base import LanguageAdapter
from flowspec.models.method import CallClassification, EndpointType, Method, MethodSignature, Usage

T = TypeVar("T", bound=BaseModel)


class UsageInput(BaseModel):
    label: str
    url: str = ""
    classification: CallClassification = CallClassification.UNKNOWN


class MethodInput(BaseModel):
    """A method as listed by the analysis engine."""

    package_name: str = ""
    type_name: str = ""
    method_name: str = ""
    method_parameters: str = ""
    endpoint_type: EndpointType | None = None
    # Raw kind column from the query, used when endpoint_type is not given
    endpoint_kind: str | None = None
    library: str = ""
    library_version: str | None = None
    supported: bool = False
    supported_type: str = "none"
    usages: list[UsageInput] = Field(default_factory=list)

    def to_method(self, adapter: LanguageAdapter) -> Method:
        signature = adapter.signature_for(
            self.package_name, self.type_name, self.method_name, self.method_parameters
        )
        endpoint_type = self.endpoint_type
        if endpoint_type is None:
            endpoint_type = EndpointType.METHOD
            if adapter.endpoint_type_for_endpoint is not None:
                provisional = MethodSignature(
                    signature=signature,
                    endpoint_type=endpoint_type,
                    package_name=self.package_name,
                    type_name=self.type_name,
                    method_name=self.method_name,
                    method_parameters=self.method_parameters,
                )
                endpoint_type = adapter.endpoint_type_for_endpoint(provisional, self.endpoint_kind)

        return Method(
            signature=signature,
            endpoint_type=endpoint_type,
            package_name=self.package_name,
            type_name=self.type_name,
            method_name=self.method_name,
            method_parameters=self.method_parameters,
            library=self.library,
            library_version=self.library_version,
            supported=self.supported,
            supported_type=self.supported_type,
            usages=tuple(Usage(label=u.label, url=u.url, classification=u.classification) for u in self.usages),
        )


class CheckInput(BaseModel):
    """Input of ``flowspec check``."""

    language: str | None = None
    methods: list[MethodInput] = Field(default_factory=list)
    # Rows are shape-checked by the row reader, not here
    rows: dict[str, list[Any]] = Field(default_factory=dict)
    modified: list[str] = Field(default_factory=list)
    auto_modeled: list[str] = Field(default_factory=list)


class SuggestInput(BaseModel):
    """Input of ``flowspec suggest``: raw suggestion query tuples."""

    language: str | None = None
    input: list[Any] = Field(default_factory=list)
    output: list[Any] = Field(default_factory=list)


def load_input(path: Path, model: type[T]) -> T:
    """Read and validate a JSON input document."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise click.ClickException(f"Cannot read {path}: {e}") from e
    try:
        return model.model_validate(data)
    except ValidationError as e:
        err = e.errors()[0]
        location = ".".join(str(loc) for loc in err["loc"])
        raise click.ClickException(f"Invalid input at '{location}': {err['msg']}") from e

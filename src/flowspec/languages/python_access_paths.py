"""Python type and access path encoding.

A Python endpoint is written as a type column plus a path whose leading
``Member[...]`` tokens spell out the rest of the qualified name, e.g. type
``requests`` with path ``Member[Session].Instance.Member[get].Argument[0]``.
An ``Instance`` token, or a type that does not end in ``!``, marks the last
member as a method rather than a plain function.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from flowspec.access_paths.tokens import join_access_path_tokens, join_access_paths, parse_access_path_tokens
from flowspec.models.method import EndpointType, MethodSignature

_MEMBER_TOKEN_REGEX = re.compile(r"^Member\[(.+)\]$")


@dataclass(frozen=True, slots=True)
class ParsedPythonPath:
    package_name: str
    type_name: str
    method_name: str
    endpoint_type: EndpointType
    path: str


def parse_python_type(type_: str) -> tuple[str, str]:
    """Split a type column into package name and (short) type name.

    The first dotted component is always the package.
    """
    package_name, _, type_name = type_.partition(".")
    return package_name, type_name


def parse_python_access_path(path: str, short_type_name: str) -> ParsedPythonPath:
    """Split ``path`` into the method it names and the remaining path.

    ``short_type_name`` is the type part of the type column; it is
    prefixed to any type components spelled out in the path.
    """
    tokens = parse_access_path_tokens(path)

    endpoint_type = EndpointType.FUNCTION
    # A type without a trailing `!` refers to instances of that type
    if short_type_name != "" and not short_type_name.endswith("!"):
        endpoint_type = EndpointType.METHOD

    type_parts: list[str] = []
    remaining = []
    for index, token in enumerate(tokens):
        member_match = _MEMBER_TOKEN_REGEX.match(token.text)
        if member_match:
            type_parts.append(member_match.group(1))
        elif token.text == "Instance":
            endpoint_type = EndpointType.METHOD
        else:
            remaining = tokens[index:]
            break

    method_name = type_parts.pop() if type_parts else ""
    type_name = ".".join(type_parts)

    short_type_name = short_type_name.removesuffix("!")
    if short_type_name != "":
        type_name = f"{short_type_name}.{type_name}" if type_name else short_type_name

    return ParsedPythonPath(
        package_name="",
        type_name=type_name,
        method_name=method_name,
        endpoint_type=endpoint_type,
        path=join_access_path_tokens(remaining),
    )


def parse_python_type_and_path(type_: str, path: str) -> ParsedPythonPath:
    package_name, short_type_name = parse_python_type(type_)
    parsed = parse_python_access_path(path, short_type_name)
    return ParsedPythonPath(
        package_name=package_name,
        type_name=parsed.type_name,
        method_name=parsed.method_name,
        endpoint_type=parsed.endpoint_type,
        path=parsed.path,
    )


def python_method_signature(
    *,
    package_name: str,  # noqa: ARG001
    type_name: str,
    method_name: str,
    method_parameters: str,  # noqa: ARG001
) -> str:
    return f"{type_name}#{method_name}"


def python_type(package_name: str, type_name: str, endpoint_type: EndpointType) -> str:
    if type_name != "" and package_name != "":
        suffix = "!" if endpoint_type == EndpointType.FUNCTION else ""
        return f"{package_name}.{type_name}{suffix}"
    return f"{package_name}{type_name}"


def python_method_path(method_name: str) -> str:
    if method_name == "":
        return ""
    return f"Member[{method_name}]"


def python_path(method_name: str, path: str) -> str:
    return join_access_paths(python_method_path(method_name), path)


_ENDPOINT_KINDS: dict[str, EndpointType] = {
    "Function": EndpointType.FUNCTION,
    "InstanceMethod": EndpointType.METHOD,
    "ClassMethod": EndpointType.CLASS_METHOD,
    "StaticMethod": EndpointType.STATIC_METHOD,
    "InitMethod": EndpointType.CONSTRUCTOR,
    "Class": EndpointType.CLASS,
}


def python_endpoint_type(method: MethodSignature, endpoint_kind: str | None) -> EndpointType:
    """Endpoint type from the query's kind column.

    Older queries have no kind column; those fall back to treating a
    leading ``self`` parameter as a method.
    """
    if endpoint_kind is not None and endpoint_kind in _ENDPOINT_KINDS:
        return _ENDPOINT_KINDS[endpoint_kind]

    if method.method_parameters.startswith("(self,") or method.method_parameters == "(self)":
        return EndpointType.METHOD
    return EndpointType.FUNCTION


def has_python_self_argument(endpoint_type: EndpointType) -> bool:
    # Instance methods and class methods address their first parameter as `Argument[self]`
    return endpoint_type in (EndpointType.METHOD, EndpointType.CLASS_METHOD)

"""Ruby access path encoding.

A Ruby endpoint is a type column plus a path starting with a single
``Method[name]`` token. Singleton (class-level) types carry a trailing
``!``, so ``Foo!`` with ``Method[new]`` is the constructor of ``Foo``.
"""

from __future__ import annotations

import re

from flowspec.access_paths.tokens import join_access_path_tokens, join_access_paths, parse_access_path_tokens
from flowspec.models.method import EndpointType

_METHOD_TOKEN_REGEX = re.compile(r"^Method\[(.+)\]$")


def parse_ruby_method_from_path(path: str) -> str:
    """Method name of a path that is exactly ``Method[name]``, else empty."""
    match = _METHOD_TOKEN_REGEX.match(path)
    return match.group(1) if match else ""


def parse_ruby_access_path(path: str) -> tuple[str, str]:
    """Split a path into its method name and the remaining path."""
    tokens = parse_access_path_tokens(path)
    match = _METHOD_TOKEN_REGEX.match(tokens[0].text)
    if match is None:
        return "", join_access_path_tokens(tokens)
    return match.group(1), join_access_path_tokens(tokens[1:])


def ruby_method_signature(
    *,
    package_name: str,  # noqa: ARG001
    type_name: str,
    method_name: str,
    method_parameters: str,  # noqa: ARG001
) -> str:
    return f"{type_name}#{method_name}"


def ruby_method_path(method_name: str) -> str:
    if method_name == "":
        return ""
    return f"Method[{method_name}]"


def ruby_path(method_name: str, path: str) -> str:
    return join_access_paths(ruby_method_path(method_name), path)


def ruby_endpoint_type(type_name: str, method_name: str) -> EndpointType:
    if method_name == "":
        return EndpointType.CLASS
    if type_name.endswith("!") and method_name == "new":
        return EndpointType.CONSTRUCTOR
    return EndpointType.METHOD

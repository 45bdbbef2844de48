"""Language adapters between modeled methods and data tuples."""

from flowspec.languages.base import (
    DataRow,
    DataTuple,
    Language,
    LanguageAdapter,
    PredicateDefinition,
)
from flowspec.languages.registry import LanguageRegistry, create_default_registry
from flowspec.languages.rows import (
    generate_rows,
    read_modeled_methods,
    read_modeled_methods_by_signature,
)

__all__ = [
    "DataRow",
    "DataTuple",
    "Language",
    "LanguageAdapter",
    "LanguageRegistry",
    "PredicateDefinition",
    "create_default_registry",
    "generate_rows",
    "read_modeled_methods",
    "read_modeled_methods_by_signature",
]

"""Sorting, validation and consistency checks over modeled methods."""

from flowspec.analysis.consistency import (
    ConsistencyNotifier,
    LoggingConsistencyNotifier,
    check_consistency,
    expected_supported,
)
from flowspec.analysis.sorting import (
    get_method_primary_sort_ordinal,
    group_and_sort_methods,
    group_methods,
    sort_group_names,
    sort_methods,
)
from flowspec.analysis.validation import ModelingValidationError, validate_modeled_methods, validate_supported_models

__all__ = [
    "ConsistencyNotifier",
    "LoggingConsistencyNotifier",
    "ModelingValidationError",
    "check_consistency",
    "expected_supported",
    "get_method_primary_sort_ordinal",
    "group_and_sort_methods",
    "group_methods",
    "sort_group_names",
    "sort_methods",
    "validate_modeled_methods",
    "validate_supported_models",
]

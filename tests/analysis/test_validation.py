"""Tests for duplicate and conflict detection."""

import re

import pytest

from flowspec.analysis.validation import validate_modeled_methods, validate_supported_models
from flowspec.languages.registry import create_default_registry
from flowspec.models.method import EndpointType
from tests.factories import make_method, make_neutral, make_none, make_sink, make_source, make_summary, make_type


def _summary(errors) -> list[tuple[int, str]]:
    return [(e.index, e.title) for e in errors]


class TestValidModels:
    """Model sets without problems."""

    def test_distinct_models(self) -> None:
        """Different classifications do not clash."""
        assert validate_modeled_methods([make_source(), make_sink(), make_summary()]) == []

    def test_unmodeled_entries_are_ignored(self) -> None:
        """Placeholders never count as duplicates."""
        assert validate_modeled_methods([make_none(), make_sink(), make_none()]) == []

    def test_single_neutral(self) -> None:
        """A neutral model alone is fine."""
        assert validate_modeled_methods([make_neutral(kind="sink"), make_none()]) == []

    def test_neutral_of_other_kind(self) -> None:
        """A neutral only conflicts with models of its own kind."""
        assert validate_modeled_methods([make_sink(), make_neutral(kind="summary")]) == []

    def test_type_models_do_not_clash_with_kinds(self) -> None:
        """Type models have no kind, input or output to compare."""
        assert validate_modeled_methods([make_type(), make_neutral(kind="source")]) == []

    def test_type_models_with_different_relations(self) -> None:
        """Type models relating different types or paths are distinct."""
        modeled = [
            make_type(related_type_name="a.A", path="ReturnValue"),
            make_type(related_type_name="b.B", path="Argument[0]"),
            make_type(related_type_name="a.A", path="Argument[0]"),
        ]

        assert validate_modeled_methods(modeled) == []


class TestDuplicates:
    """Repeated classifications."""

    def test_exact_duplicate(self) -> None:
        """Two identical models give one error at the second."""
        errors = validate_modeled_methods([make_sink(), make_sink()])

        assert len(errors) == 1
        assert errors[0].index == 1
        assert re.search("duplicate", errors[0].title, re.IGNORECASE)
        assert re.search("identical", errors[0].message, re.IGNORECASE)
        assert re.search("remove", errors[0].action_text, re.IGNORECASE)

    def test_provenance_is_not_part_of_the_key(self) -> None:
        """Models that differ only by provenance are duplicates."""
        errors = validate_modeled_methods([make_sink(provenance="manual"), make_sink(provenance="df-generated")])

        assert _summary(errors) == [(1, "Duplicated classification")]

    def test_one_error_per_key(self) -> None:
        """Further repeats of the same key are not reported again."""
        errors = validate_modeled_methods([make_sink(), make_sink(), make_sink()])

        assert _summary(errors) == [(1, "Duplicated classification")]

    def test_different_kind_is_not_a_duplicate(self) -> None:
        """Kind is part of the key."""
        assert validate_modeled_methods([make_sink(), make_sink(kind="log-injection")]) == []

    def test_repeated_type_model(self) -> None:
        """The same type relation twice is a duplicate."""
        errors = validate_modeled_methods([make_type(), make_sink(), make_type()])

        assert _summary(errors) == [(2, "Duplicated classification")]


class TestConflicts:
    """Neutral models contradicting real ones."""

    def test_neutral_conflicts_with_same_kind(self) -> None:
        """A neutral sink conflicts with a sink."""
        errors = validate_modeled_methods([make_sink(), make_neutral(kind="sink")])

        assert len(errors) == 1
        assert errors[0].index == 1
        assert errors[0].title == "Conflicting classification"
        assert "neutral sink" in errors[0].message
        assert re.search("remove", errors[0].action_text, re.IGNORECASE)

    def test_duplicate_neutral_combined_with_other_models(self) -> None:
        """Conflict at the first neutral, duplicate at the repeat."""
        errors = validate_modeled_methods(
            [make_neutral(kind="summary"), make_summary(), make_neutral(kind="summary")]
        )

        assert _summary(errors) == [(0, "Conflicting classification"), (2, "Duplicated classification")]

    def test_indices_include_unmodeled_entries(self) -> None:
        """Indices refer to the original list."""
        errors = validate_modeled_methods(
            [make_none(), make_neutral(kind="sink"), make_sink(), make_neutral(kind="sink")]
        )

        assert _summary(errors) == [(1, "Conflicting classification"), (3, "Duplicated classification")]

    def test_errors_are_sorted_by_index(self) -> None:
        """Duplicates found first still come after earlier conflicts."""
        errors = validate_modeled_methods(
            [make_source(), make_source(), make_neutral(kind="source"), make_sink(), make_neutral(kind="sink")]
        )

        assert [e.index for e in errors] == [1, 2, 4]


@pytest.fixture
def registry():
    return create_default_registry()


class TestSupportedModels:
    """Kinds and endpoint types a language accepts."""

    def test_known_kinds_are_accepted(self, registry) -> None:
        """Shared kinds pass for every predicate."""
        modeled = [make_source(), make_sink(), make_summary(), make_neutral(kind="sink"), make_none()]

        assert validate_supported_models(registry.require("java"), make_method(), modeled) == []

    def test_unknown_kind(self, registry) -> None:
        """A kind the predicate does not offer is reported at its index."""
        modeled = [make_sink(), make_sink(kind="xss")]

        errors = validate_supported_models(registry.require("java"), make_method(), modeled)

        assert _summary(errors) == [(1, "Unsupported kind")]
        assert "'xss'" in errors[0].message
        assert "sql-injection" in errors[0].action_text

    def test_static_languages_accept_any_endpoint_type(self, registry) -> None:
        """Java predicates are not limited by endpoint type."""
        method = make_method(endpoint_type=EndpointType.CONSTRUCTOR)

        assert validate_supported_models(registry.require("java"), method, [make_source()]) == []

    @pytest.mark.parametrize(
        ("endpoint_type", "model", "expected"),
        [
            (EndpointType.CLASS, make_source(), []),
            (EndpointType.CLASS, make_sink(), [(0, "Unsupported endpoint type")]),
            (EndpointType.CONSTRUCTOR, make_source(), [(0, "Unsupported endpoint type")]),
            (EndpointType.CONSTRUCTOR, make_summary(), []),
        ],
        ids=["class-source", "class-sink", "constructor-source", "constructor-summary"],
    )
    def test_ruby_endpoint_types(self, registry, endpoint_type, model, expected) -> None:
        """Ruby limits each predicate to some endpoint types."""
        method = make_method(endpoint_type=endpoint_type)

        errors = validate_supported_models(registry.require("ruby"), method, [model])

        assert _summary(errors) == expected

    def test_python_class_cannot_be_a_sink(self, registry) -> None:
        """Python sinks apply to callables only."""
        method = make_method(endpoint_type=EndpointType.CLASS)

        errors = validate_supported_models(registry.require("python"), method, [make_none(), make_sink()])

        assert _summary(errors) == [(1, "Unsupported endpoint type")]
        assert "class" in errors[0].message

    def test_type_models_on_languages_without_them_are_skipped(self, registry) -> None:
        """Models the language has no predicate for are left to decoding."""
        assert validate_supported_models(registry.require("java"), make_method(), [make_type()]) == []

"""Predicate names and kinds shared by all languages."""

from flowspec.models.modeled import PredicateType

SHARED_EXTENSIBLE_PREDICATES: dict[PredicateType, str] = {
    "source": "sourceModel",
    "sink": "sinkModel",
    "summary": "summaryModel",
    "neutral": "neutralModel",
}

TYPE_EXTENSIBLE_PREDICATE = "typeModel"

SHARED_KINDS: dict[PredicateType, tuple[str, ...]] = {
    "source": ("local", "remote", "file", "commandargs", "database", "environment"),
    "sink": (
        "code-injection",
        "command-injection",
        "environment-injection",
        "file-content-store",
        "html-injection",
        "js-injection",
        "ldap-injection",
        "log-injection",
        "path-injection",
        "request-forgery",
        "sql-injection",
        "url-redirection",
    ),
    "summary": ("taint", "value"),
    "neutral": ("summary", "source", "sink"),
}

"""flowspec check command - validate a method list and its models."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import click
import structlog

from flowspec.analysis.consistency import LoggingConsistencyNotifier, check_consistency
from flowspec.analysis.sorting import get_method_primary_sort_ordinal, group_methods, sort_group_names, sort_methods
from flowspec.analysis.validation import validate_modeled_methods, validate_supported_models
from flowspec.cli.inputs import CheckInput, load_input
from flowspec.cli.utils import resolve_adapter
from flowspec.config.models import FlowSpecConfig
from flowspec.languages.rows import read_modeled_methods_by_signature
from flowspec.models.method import Method, can_method_be_modeled
from flowspec.models.mode import Mode
from flowspec.models.modeled import ModeledMethod

log = structlog.get_logger()


class _ReportingNotifier(LoggingConsistencyNotifier):
    """Logs inconsistencies and keeps them for the report."""

    def __init__(self) -> None:
        self.findings: list[dict[str, Any]] = []

    def missing_method(self, signature: str, modeled_methods: Sequence[ModeledMethod]) -> None:
        super().missing_method(signature, modeled_methods)
        self.findings.append({"signature": signature, "problem": "missing method"})

    def inconsistent_supported(self, method: Method, expected_supported: bool) -> None:
        super().inconsistent_supported(method, expected_supported)
        self.findings.append(
            {
                "signature": method.signature,
                "problem": "inconsistent supported flag",
                "expected_supported": expected_supported,
            }
        )


@click.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--language", "-l", default=None, help="Language adapter (java, csharp, python, ruby)")
@click.option(
    "--mode",
    type=click.Choice([m.value for m in Mode]),
    default=None,
    help="Group by package (framework) or library (application)",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def check_command(
    ctx: click.Context,
    input_file: Path,
    language: str | None,
    mode: str | None,
    as_json: bool,
) -> None:
    """Decode, validate and order the methods and models in INPUT_FILE.

    INPUT_FILE is a JSON document with "methods" and "rows" (data tuples
    keyed by extensible predicate name). Exits with status 1 when any
    problem is found.
    """
    config: FlowSpecConfig = ctx.obj["config"]
    document = load_input(input_file, CheckInput)
    adapter = resolve_adapter(ctx, language, document.language)
    resolved_mode = Mode(mode) if mode else config.editor.mode

    methods = [m.to_method(adapter) for m in document.methods]
    modeled_by_signature = read_modeled_methods_by_signature(adapter, document.rows)
    modified = set(document.modified)
    auto_modeled = set(document.auto_modeled)
    log.info(
        "check_started",
        language=adapter.name,
        methods=len(methods),
        modeled_signatures=len(modeled_by_signature),
    )

    notifier = _ReportingNotifier()
    check_consistency(methods, modeled_by_signature, notifier)

    problems = list(notifier.findings)
    report: list[dict[str, Any]] = []
    groups = group_methods(methods, resolved_mode)
    for group_name in sort_group_names(groups):
        for method in sort_methods(groups[group_name], modeled_by_signature, modified, auto_modeled):
            modeled = modeled_by_signature.get(method.signature, [])
            is_unsaved = method.signature in modified
            if config.editor.hide_modeled_methods and not can_method_be_modeled(method, modeled, is_unsaved):
                continue
            errors = validate_modeled_methods(modeled) + validate_supported_models(adapter, method, modeled)
            errors.sort(key=lambda error: error.index)
            for error in errors:
                problems.append({"signature": method.signature, "problem": error.title, "index": error.index})
            report.append(
                {
                    "group": group_name,
                    "signature": method.signature,
                    "ordinal": get_method_primary_sort_ordinal(
                        method, modeled, is_unsaved, method.signature in auto_modeled
                    ),
                    "usages": method.usage_count,
                    "models": [m.type for m in modeled],
                }
            )

    if as_json:
        click.echo(json.dumps({"methods": report, "problems": problems}, indent=2))
    else:
        current_group: str | None = None
        for entry in report:
            if entry["group"] != current_group:
                current_group = entry["group"]
                click.echo(f"{current_group or '(no group)'}:")
            models = ", ".join(entry["models"]) or "unmodeled"
            click.echo(f"  {entry['signature']}  [{models}]  usages={entry['usages']}")
        if problems:
            click.echo("")
            click.echo(f"{len(problems)} problem(s):")
            for problem in problems:
                click.echo(f"  {problem['signature']}: {problem['problem']}")

    if problems:
        raise SystemExit(1)

"""flowspec suggest command - complete a partially typed access path."""

from __future__ import annotations

import json
from pathlib import Path

import click

from flowspec.cli.inputs import SuggestInput, load_input
from flowspec.cli.utils import resolve_adapter
from flowspec.core.errors import FlowSpecError
from flowspec.suggestions.matching import find_matching_options
from flowspec.suggestions.rows import parse_access_path_suggestions
from flowspec.suggestions.tree import parse_access_path_suggestion_rows_to_options


@click.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("signature")
@click.argument("value", default="")
@click.option("--language", "-l", default=None, help="Language adapter (python, ruby)")
@click.option("--output", "use_output", is_flag=True, help="Complete output paths instead of input paths")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def suggest_command(
    ctx: click.Context,
    input_file: Path,
    signature: str,
    value: str,
    language: str | None,
    use_output: bool,
    as_json: bool,
) -> None:
    """List completions of VALUE for the method SIGNATURE.

    INPUT_FILE holds the raw "input" and "output" tuples of an access path
    suggestions query.
    """
    document = load_input(input_file, SuggestInput)
    adapter = resolve_adapter(ctx, language, document.language)
    try:
        suggestions = parse_access_path_suggestions(document.input, document.output, adapter)
    except FlowSpecError as e:
        raise click.ClickException(e.message) from e

    rows = suggestions.output if use_output else suggestions.input
    options = parse_access_path_suggestion_rows_to_options(rows).get(signature, [])
    matches = find_matching_options(options, value)

    if as_json:
        click.echo(
            json.dumps(
                [
                    {"label": o.label, "value": o.value, "icon": o.icon, "details": o.details}
                    for o in matches
                ]
            )
        )
        return

    for option in matches:
        suffix = f"  ({option.details})" if option.details else ""
        click.echo(f"{option.value}{suffix}")

"""flowspec validate-path command - check an access path."""

import json

import click

from flowspec.access_paths.tokens import parse_access_path_tokens
from flowspec.access_paths.validation import validate_access_path


@click.command()
@click.argument("access_path")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def validate_path_command(access_path: str, as_json: bool) -> None:
    """Validate ACCESS_PATH and report problems by character range.

    Exits with status 1 when the path is invalid.
    """
    diagnostics = validate_access_path(access_path)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "path": access_path,
                    "tokens": [
                        {"text": t.text, "start": t.range.start, "end": t.range.end}
                        for t in parse_access_path_tokens(access_path)
                    ],
                    "diagnostics": [
                        {"message": d.message, "start": d.range.start, "end": d.range.end}
                        for d in diagnostics
                    ],
                }
            )
        )
    elif not diagnostics:
        click.echo("Valid access path")
    else:
        click.echo(access_path)
        for diagnostic in diagnostics:
            width = max(diagnostic.range.end - diagnostic.range.start, 1)
            click.echo(" " * diagnostic.range.start + "^" * width + f" {diagnostic.message}")

    if diagnostics:
        raise SystemExit(1)

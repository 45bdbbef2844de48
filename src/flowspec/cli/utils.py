"""CLI utilities."""

from __future__ import annotations

import click

from flowspec.config.models import FlowSpecConfig
from flowspec.core.errors import FlowSpecError
from flowspec.languages.base import LanguageAdapter
from flowspec.languages.registry import LanguageRegistry


def resolve_adapter(
    ctx: click.Context,
    option_language: str | None,
    input_language: str | None,
) -> LanguageAdapter:
    """Pick the adapter from --language, then the input document, then config.

    Raises:
        click.ClickException: If no language is given or it is unknown
    """
    config: FlowSpecConfig = ctx.obj["config"]
    registry: LanguageRegistry = ctx.obj["registry"]

    language = option_language or input_language or config.editor.language
    if language is None:
        raise click.ClickException(
            "No language given. Pass --language, set it in the input file, "
            "or configure editor.language."
        )
    try:
        return registry.require(language.lower())
    except FlowSpecError as e:
        raise click.ClickException(e.message) from e

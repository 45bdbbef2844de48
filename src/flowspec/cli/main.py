"""flowspec CLI - flowspec command."""

import click

from flowspec import __version__
from flowspec.cli.check import check_command
from flowspec.cli.suggest import suggest_command
from flowspec.cli.validate_path import validate_path_command
from flowspec.config.loader import load_config
from flowspec.core.errors import FlowSpecError
from flowspec.core.logging import configure_logging, set_request_id
from flowspec.languages.registry import create_default_registry


@click.group()
@click.version_option(version=__version__, prog_name="flowspec")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """flowspec - Model data-flow endpoints for static analysis."""
    ctx.ensure_object(dict)
    try:
        config = load_config()
    except FlowSpecError as e:
        raise click.ClickException(str(e)) from e

    logging_config = config.logging
    if verbose:
        logging_config = logging_config.model_copy(update={"level": "DEBUG"})
    configure_logging(config=logging_config)
    set_request_id()

    ctx.obj["verbose"] = verbose
    ctx.obj["config"] = config
    ctx.obj["registry"] = create_default_registry()


cli.add_command(validate_path_command, name="validate-path")
cli.add_command(check_command, name="check")
cli.add_command(suggest_command, name="suggest")


if __name__ == "__main__":
    cli()

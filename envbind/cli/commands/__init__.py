"""CLI commands package."""

from dataclasses import dataclass

import click

from ...config import Settings, load_settings
from ...errors import EnvBindError
from ...logging import init_logging
from ...options import Options
from .check import check
from .usage import usage


@dataclass
class CliContext:
    """Settings shared by all commands."""

    settings: Settings
    options: Options


@click.group()
@click.option(
    "--split-words/--no-split-words",
    default=None,
    help="Split camel-cased field names into words",
)
@click.option(
    "--required/--no-required",
    default=None,
    help="Treat every variable as required",
)
@click.option(
    "--parallel/--no-parallel",
    default=None,
    help="Resolve variables concurrently",
)
@click.option("--log-level", default=None, help="Logging level")
@click.pass_context
def cli(ctx, split_words, required, parallel, log_level):
    """envbind: bind environment variables to dataclasses."""
    try:
        settings = load_settings()
    except EnvBindError as e:
        raise click.ClickException(f"invalid ENVBIND settings: {e}") from e

    init_logging(log_level or settings.log_level)

    overrides = {
        "split_words": split_words,
        "required": required,
        "parallel": parallel,
    }
    options = settings.options().model_copy(
        update={name: flag for name, flag in overrides.items() if flag is not None}
    )
    ctx.obj = CliContext(settings=settings, options=options)


cli.add_command(check)
cli.add_command(usage)

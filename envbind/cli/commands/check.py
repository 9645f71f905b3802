"""Check command binding a dataclass against the current environment."""

import logging
import sys
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from ...discovery import discover
from ...errors import EnvBindError
from ...processor import check_disallowed_with_options, process_with_options
from ...sources import default_source
from ..target import load_target

logger = logging.getLogger(__name__)
console = Console()


@click.command()
@click.argument("target")
@click.option("--prefix", default="", help="Variable prefix")
@click.option(
    "--strict",
    is_flag=True,
    help="Fail on prefixed variables the dataclass does not read",
)
@click.option(
    "--env-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Env file layered under the process environment",
)
@click.pass_obj
def check(obj, target: str, prefix: str, strict: bool, env_file: Optional[str]) -> None:
    """Bind TARGET (module:ClassName) from the environment and show the result."""
    spec = load_target(target)
    source = default_source(env_file or obj.settings.env_file)

    try:
        process_with_options(prefix, spec, obj.options, source=source)
        if strict:
            check_disallowed_with_options(prefix, spec, obj.options, source=source)
    except EnvBindError as e:
        logger.error(f"Check failed: {e}")
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    table = Table(
        title=f"Bound values for {target}",
        show_header=True,
        header_style="bold magenta",
    )
    table.add_column("Key", justify="left", style="cyan", no_wrap=True)
    table.add_column("Field", justify="left", style="green")
    table.add_column("Value", justify="left")

    for info in discover(prefix, spec, obj.options):
        table.add_row(info.key, info.name, repr(info.field.get()))

    console.print(table)

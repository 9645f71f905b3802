"""Usage command listing the variables a dataclass reads."""

import click
from rich.console import Console

from ...errors import EnvBindError
from ...usage import describe, render_json, render_table, render_yaml
from ..target import load_target

console = Console()


@click.command()
@click.argument("target")
@click.option("--prefix", default="", help="Variable prefix")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json", "yaml"]),
    default="table",
    help="Output format",
)
@click.pass_obj
def usage(obj, target: str, prefix: str, output_format: str) -> None:
    """Show the environment variables TARGET (module:ClassName) reads."""
    spec = load_target(target)
    try:
        docs = describe(prefix, spec, obj.options)
    except EnvBindError as e:
        raise click.ClickException(str(e)) from e

    if output_format == "json":
        click.echo(render_json(docs))
    elif output_format == "yaml":
        click.echo(render_yaml(docs), nl=False)
    else:
        render_table(docs, console)

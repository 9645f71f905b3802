"""
Main Entry Point for envbind

Example Usage:
    $ python -m envbind usage myapp.settings:Settings --prefix APP
    $ python -m envbind check myapp.settings:Settings --prefix APP --strict
"""

import sys
from typing import Optional, Sequence

import click

from .cli import cli


def main(args: Optional[Sequence[str]] = None) -> int:
    """Main entry point.

    Args:
        args: Command line arguments.
            Defaults to sys.argv[1:].

    Returns:
        Exit code.
    """
    try:
        # --help and other early exits return their exit code
        result = cli.main(args=args, prog_name="envbind", standalone_mode=False)
        return result if isinstance(result, int) else 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return 1
    except click.ClickException as e:
        e.show()
        return e.exit_code


if __name__ == "__main__":
    sys.exit(main())

"""
themeconv CLI.

- convert: convert a Bootstrap theme to XAML design tokens
- info: summarize a Bootstrap theme's variables
"""

from __future__ import annotations

import platform
import sys

import typer

from themeconv._version import get_version
from themeconv.cli.convert import convert_command, info_command


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"themeconv version {get_version()}")
        typer.echo(
            f"Python {platform.python_implementation()} {platform.python_version()} "
            f"on {platform.system()}"
        )
        raise typer.Exit()


app = typer.Typer(
    help="Convert Bootstrap themes (CSS or SCSS variables) to XAML design tokens",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """themeconv CLI main callback for global options."""
    pass


app.command(name="convert")(convert_command)
app.command(name="info")(info_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])

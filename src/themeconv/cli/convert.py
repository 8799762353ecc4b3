"""
Theme conversion commands for the themeconv CLI.

- convert: Bootstrap CSS/SCSS -> Tokens.xaml + Theme.xaml (+ tokens.json)
- info: summarize the variables found in a theme without converting
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from themeconv.core.dtcg_export import export_dtcg_file
from themeconv.core.emitter import write_theme_files
from themeconv.core.errors import ThemeConvError
from themeconv.core.extractor import coerce_format, parse_files, parse_source
from themeconv.core.ir import ConversionOptions, DarkModeStrategy, RawVariableSet
from themeconv.core.mapper import map_tokens
from themeconv.core.options_loader import (
    get_options_path,
    load_options,
    options_file_exists,
    save_options,
)
from themeconv.core.sources import is_url

DEFAULT_THEME_NAME = "Bootstrap"
DTCG_FILE_NAME = "tokens.json"
INFO_ROWS_PER_CATEGORY = 10


def configure_logging(verbose: bool) -> None:
    """Send library log records to stderr.

    Only errors by default: conversion warnings are reported by the command
    itself. Everything from DEBUG up when verbose.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="[%(levelname)s] %(message)s",
        force=True,
    )


def _fail(message: str) -> typer.Exit:
    typer.secho(f"Error: {message}", fg=typer.colors.RED, err=True)
    return typer.Exit(code=1)


def theme_name_for(source: str) -> str:
    """Theme name from the first input: file stem, or the default for URLs."""
    if is_url(source):
        return DEFAULT_THEME_NAME
    return Path(source).stem or DEFAULT_THEME_NAME


def _resolve_options(
    config_dir: Path | None,
    dark_mode: str | None,
    namespace: str | None,
    comments: bool | None,
) -> ConversionOptions:
    base = load_options(config_dir) if config_dir else ConversionOptions()
    updates: dict[str, object] = {}
    if dark_mode is not None:
        try:
            updates["dark_mode_strategy"] = DarkModeStrategy(dark_mode.lower())
        except ValueError:
            raise _fail(
                f"Unknown dark mode strategy: {dark_mode} (use auto, manual or none)"
            ) from None
    if namespace is not None:
        updates["namespace"] = namespace
    if comments is not None:
        updates["include_comments"] = comments
    return base.model_copy(update=updates)


def convert_command(
    inputs: list[str] = typer.Argument(  # noqa: B008
        ...,
        help="Bootstrap CSS/SCSS files or URLs, merged in order (later wins)",
    ),
    output: Path = typer.Option(  # noqa: B008
        Path("."),
        "--output",
        "-o",
        help="Output directory for generated XAML files",
    ),
    format: str = typer.Option(
        "auto",
        "--format",
        "-f",
        help="Input format: css, scss, or auto",
    ),
    dark_mode: str | None = typer.Option(
        None,
        "--dark-mode",
        "-d",
        help="Dark mode generation: auto, manual, or none (default: auto)",
    ),
    namespace: str | None = typer.Option(
        None,
        "--namespace",
        "-n",
        help="Label for the generated resources",
    ),
    comments: bool | None = typer.Option(
        None,
        "--comments/--no-comments",
        help="Include purpose comments in generated XAML (default: on)",
    ),
    dtcg: bool = typer.Option(
        False,
        "--dtcg",
        help="Also write a W3C DTCG tokens.json",
    ),
    config_dir: Path | None = typer.Option(  # noqa: B008
        None,
        "--config",
        help="Directory containing themeconv.yaml",
    ),
    save_config: bool = typer.Option(
        False,
        "--save-config",
        help="Write the resolved options to themeconv.yaml (in --config, else the output dir)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
) -> None:
    """
    Convert a Bootstrap theme to XAML design tokens.

    Examples:
        themeconv convert bootstrap.css -o Themes/Default
        themeconv convert _variables.scss _bootswatch.scss -d none
        themeconv convert https://example.com/theme.css --dtcg
        themeconv convert brand.scss -o Themes/Brand -n Brand.Resources --save-config
    """
    configure_logging(verbose)

    try:
        fmt = coerce_format(format)
        options = _resolve_options(config_dir, dark_mode, namespace, comments)

        if verbose:
            typer.echo(f"Inputs: {', '.join(inputs)}")
            typer.echo(f"Output: {output}")
            typer.echo(f"Format: {fmt.value}")
            typer.echo(f"Dark Mode: {options.dark_mode_strategy.value}")
            typer.echo(f"Namespace: {options.namespace}")
            typer.echo(f"Comments: {options.include_comments}")
            if config_dir:
                found = "found" if options_file_exists(config_dir) else "not found, using defaults"
                typer.echo(f"Config: {get_options_path(config_dir)} ({found})")
            typer.echo("")

        variables = parse_files(inputs, fmt)
        typer.echo("Parsed Bootstrap theme")
        if verbose:
            for category, count in variables.summary().items():
                typer.echo(f"  {category.capitalize()}: {count}")

        tokens = map_tokens(variables, options)
        typer.echo("Mapped design tokens")
        if verbose:
            for category, count in tokens.counts().items():
                typer.echo(f"  {category.replace('_', ' ').capitalize()} tokens: {count}")

        files = write_theme_files(tokens, theme_name_for(inputs[0]), output, options)
        dtcg_path = export_dtcg_file(tokens, output / DTCG_FILE_NAME) if dtcg else None
        options_path = save_options(config_dir or output, options) if save_config else None
    except ThemeConvError as e:
        raise _fail(str(e)) from None

    # verbose runs already logged these at WARNING
    if not verbose:
        for warning in variables.warnings:
            typer.secho(f"Warning: {warning}", fg=typer.colors.YELLOW, err=True)

    typer.echo("")
    typer.secho("Conversion complete!", fg=typer.colors.CYAN)
    typer.echo(f"  Tokens.xaml: {files.tokens_path}")
    typer.echo(f"  Theme.xaml:  {files.theme_path}")
    if dtcg_path:
        typer.echo(f"  tokens.json: {dtcg_path}")
    if options_path:
        typer.echo(f"  Options:     {options_path}")


def _print_category(name: str, items: dict[str, str]) -> None:
    typer.secho(f"{name} ({len(items)}):", fg=typer.colors.YELLOW)
    if not items:
        typer.echo("  (none)")
    else:
        for key in sorted(items)[:INFO_ROWS_PER_CATEGORY]:
            value = items[key]
            display = value if len(value) <= 50 else value[:47] + "..."
            typer.echo(f"  {key:<30} = {display}")
        if len(items) > INFO_ROWS_PER_CATEGORY:
            typer.echo(f"  ... and {len(items) - INFO_ROWS_PER_CATEGORY} more")
    typer.echo("")


def print_summary(variables: RawVariableSet) -> None:
    typer.secho("Bootstrap Variables Summary", fg=typer.colors.CYAN)
    typer.echo("=" * 40)
    typer.echo("")

    _print_category("Colors", variables.colors)
    _print_category("Typography", variables.typography)
    _print_category("Spacing", variables.spacing)
    _print_category("Borders", variables.borders)
    _print_category("Other", variables.other)

    typer.echo(f"Total variables: {variables.total}")


def info_command(
    input: str = typer.Argument(..., help="Bootstrap CSS/SCSS file or URL"),
    format: str = typer.Option(
        "auto",
        "--format",
        "-f",
        help="Input format: css, scss, or auto",
    ),
) -> None:
    """
    Display information about a Bootstrap theme without converting it.
    """
    configure_logging(False)
    typer.echo(f"Analyzing Bootstrap theme: {input}")
    typer.echo("")

    try:
        variables = parse_source(input, coerce_format(format))
    except ThemeConvError as e:
        raise _fail(str(e)) from None

    print_summary(variables)

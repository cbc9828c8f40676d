"""Command-line interface for cgfconverter."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from cgfconverter.core import CgfConverterError, ExitCode, load_settings, print_summary
from cgfconverter.core.args import parse_args
from cgfconverter.utils import StructuredLogger, setup_logging

app = typer.Typer(
    name="cgf-converter",
    help="Convert CryEngine .cgf/.cga/.chr/.skin files to other 3D formats",
    add_completion=False,
)
console = Console(soft_wrap=True, emoji=False)


@app.command(
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
    },
)
def convert(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log debug output and print the parsed arguments",
    ),
    settings_file: Optional[Path] = typer.Option(
        None,
        "--settings",
        help="TOML settings file",
    ),
) -> None:
    """Parse converter arguments such as `-obj -group Objects/*.cgf`."""
    try:
        settings = load_settings(settings_file)
        if verbose:
            settings = settings.with_verbose()
        logger = setup_logging(settings.logging)

        with StructuredLogger(logger, "convert", arguments=len(ctx.args)):
            config, exit_code = parse_args(ctx.args, verbose=verbose, console=console)

    except (CgfConverterError, FileNotFoundError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]", highlight=False, emoji=False)
        raise typer.Exit(int(ExitCode.FAILURE))

    if exit_code is ExitCode.SUCCESS and verbose:
        print_summary(config, console)

    raise typer.Exit(int(exit_code))

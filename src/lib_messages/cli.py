"""Click command group exposing metadata and a rendering demo.

Contents
--------
* :func:`cli` – root group with the ``--use-dotenv`` toggle.
* :func:`cli_info` – metadata banner (also the default action).
* :func:`cli_demo` – render a sample collection as text or JSON.
* :func:`main` – test-friendly runner returning an exit code.
"""

from __future__ import annotations

from typing import Sequence

import click

from . import __init__conf__
from . import config as messages_config
from .adapters.console.rich_console import RichConsoleAdapter
from .domain.dump import DumpFormat
from .lib_messages import build_demo_collection, render, summary_info

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(version=__init__conf__.version, prog_name=__init__conf__.shell_command, message="%(version)s")
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help="Load the nearest .env before reading LIB_MESSAGES_* settings (overrides LIB_MESSAGES_USE_DOTENV).",
)
@click.pass_context
def cli(ctx: click.Context, use_dotenv: bool | None) -> None:
    """Inspect lib_messages and preview collection rendering."""

    try:
        ctx.obj = messages_config.load_settings(use_dotenv=use_dotenv)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint=messages_config.ENV_DUMP_FORMAT) from exc
    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print the package metadata banner."""

    click.echo(summary_info(), nl=False)


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "dump_format",
    type=click.Choice([member.value for member in DumpFormat], case_sensitive=False),
    default=None,
    help="Render as text or JSON (defaults to LIB_MESSAGES_DUMP_FORMAT, then text).",
)
@click.option("--no-color", is_flag=True, default=False, help="Disable colour in text output.")
@click.pass_obj
def cli_demo(settings: messages_config.Settings, dump_format: str | None, no_color: bool) -> None:
    """Build a collection with one message per verbosity and render it."""

    resolved = DumpFormat.from_name(dump_format) if dump_format else settings.dump_format
    disable_color = no_color or settings.no_color
    adapter = RichConsoleAdapter(no_color=disable_color)
    payload = render(build_demo_collection(), dump_format=resolved, console=adapter, colorize=not disable_color)
    if payload is not None:
        click.echo(payload)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command group and return an exit code instead of exiting.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    0.1...
    0
    """

    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    except click.exceptions.Exit as exit_request:
        return exit_request.exit_code
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return 0


__all__ = ["cli", "main"]

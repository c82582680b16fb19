"""Root CLI group for clientbook with global flags and command registration."""

from __future__ import annotations

import click

from clientbook import __version__
from clientbook.commands import register_commands
from clientbook.commands._context import AppContext
from clientbook.config.settings import ClientbookSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="clientbook")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the parsed value.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """clientbook — validate client and transaction field values."""
    flags = {
        "json_output": json_output,
        "quiet": quiet,
        "verbose": verbose,
        "log_json": log_json,
    }
    # Unset flags fall through to env vars and clientbook.toml.
    settings = ClientbookSettings.from_cli(
        config_path=config_path,
        **{name: True for name, value in flags.items() if value},
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)

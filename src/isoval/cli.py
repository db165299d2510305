"""Root CLI group for isoval with global flags and command registration."""

from __future__ import annotations

import click

from isoval import __version__
from isoval.commands import register_commands
from isoval.commands._base import IsovalGroup
from isoval.commands._context import AppContext
from isoval.config.settings import IsovalSettings


@click.group(
    cls=IsovalGroup,
    invoke_without_command=True,
    examples="""\
  isoval messages
  isoval validate notification.xml
  isoval --json -c isoval.toml validate keys.xml""",
)
@click.version_option(version=__version__, prog_name="isoval")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
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
    """isoval: validate ISO 20022 and FedNow messages."""
    settings = IsovalSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)

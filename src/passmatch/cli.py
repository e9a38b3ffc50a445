"""Root CLI group for passmatch with global flags and command registration."""

from __future__ import annotations

import click

from passmatch import __version__
from passmatch.commands import register_commands
from passmatch.commands._context import AppContext
from passmatch.config.settings import PassSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="passmatch")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Entries only, one per line.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and timing.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-s",
    "--store",
    "store_dir",
    type=click.Path(file_okay=False, path_type=str),
    default=None,
    help="Password store directory (default: $PASSWORD_STORE_DIR or ~/.password-store).",
)
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    store_dir: str | None,
    config_path: str | None,
) -> None:
    """passmatch: find password store entries for a domain."""
    ctx.ensure_object(dict)
    settings = PassSettings.from_cli(
        config_path=config_path,
        store_dir=store_dir,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)

"""Subcommand modules for passmatch.

Provides register_commands() which uses deferred imports to keep
``passmatch --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from passmatch.commands.lookup import lookup
    from passmatch.commands.open_cmd import open_cmd
    from passmatch.commands.search import search
    from passmatch.commands.sites import sites

    cli.add_command(lookup)
    cli.add_command(search)
    cli.add_command(sites)
    cli.add_command(open_cmd)

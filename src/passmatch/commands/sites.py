"""Command: list every domain directory and its users."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from passmatch.commands._base import PassCommand

if TYPE_CHECKING:
    from passmatch.commands._context import AppContext


@click.command(
    cls=PassCommand,
    examples="""\
  passmatch sites
  passmatch -q sites""",
)
@click.pass_obj
def sites(app: AppContext) -> None:
    """List all sites in the store."""
    app.emit(app.service().sites())

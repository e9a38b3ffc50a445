"""Command: free-text search over entry paths."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from passmatch.commands._base import PassCommand

if TYPE_CHECKING:
    from passmatch.commands._context import AppContext


@click.command(
    cls=PassCommand,
    examples="""\
  passmatch search git
  passmatch search work/
  passmatch --json search bank""",
)
@click.argument("query")
@click.pass_obj
def search(app: AppContext, query: str) -> None:
    """Find entries whose domain or name starts with QUERY."""
    app.emit(app.service().search(query))

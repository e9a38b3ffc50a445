"""Command: entries matching a visited domain."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from passmatch.commands._base import PassCommand

if TYPE_CHECKING:
    from passmatch.commands._context import AppContext


@click.command(
    cls=PassCommand,
    examples="""\
  passmatch lookup github.com
  passmatch lookup login.example.org
  passmatch -q lookup mail.example.org | head -n1
  passmatch --json lookup example.org""",
)
@click.argument("domain")
@click.pass_obj
def lookup(app: AppContext, domain: str) -> None:
    """List entries stored for DOMAIN, most specific domain first."""
    app.emit(app.service().lookup(domain))

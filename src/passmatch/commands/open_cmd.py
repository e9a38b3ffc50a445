"""Command: write the raw bytes of one entry to stdout.

The bytes are still encrypted; pipe them to a decryption tool.
"""

from __future__ import annotations

import shutil
import sys
from typing import TYPE_CHECKING

import click

from passmatch.commands._base import PassCommand

if TYPE_CHECKING:
    from passmatch.commands._context import AppContext


@click.command(
    "open",
    cls=PassCommand,
    examples="""\
  passmatch open example.org/alice | gpg --decrypt
  passmatch open "$(passmatch -q lookup example.org | head -n1)" > entry.gpg""",
)
@click.argument("item")
@click.pass_obj
def open_cmd(app: AppContext, item: str) -> None:
    """Write the raw contents of ITEM to stdout."""
    stream, result = app.service().open(item)
    if stream is None:
        app.emit(result)
        return

    # Bypass the text layer so bytes pass through untranslated.
    out = sys.stdout.buffer
    with stream:
        shutil.copyfileobj(stream, out)
    out.flush()

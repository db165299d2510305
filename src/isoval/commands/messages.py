"""Command: list catalogued messages."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from isoval.commands._base import IsovalCommand

if TYPE_CHECKING:
    from isoval.commands._context import AppContext


@click.command(
    cls=IsovalCommand,
    examples="""\
  isoval messages
  isoval --json messages""",
)
@click.pass_obj
def messages(app: AppContext) -> None:
    """List the message types isoval can decode and validate."""
    app.emit(app.service.list_messages())

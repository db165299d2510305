"""Command: validate a message document."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from isoval.commands._base import IsovalCommand

if TYPE_CHECKING:
    from isoval.commands._context import AppContext


@click.command(
    cls=IsovalCommand,
    examples="""\
  isoval validate notification.xml
  isoval validate keys.xml --message fednow.publickeys
  isoval --json validate query.xml""",
)
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@click.option("-m", "--message", "message_id", default=None, help="Message identifier.")
@click.pass_obj
def validate(app: AppContext, file: Path, message_id: str | None) -> None:
    """Decode FILE and report the first constraint it violates."""
    app.emit(app.service.validate_file(file, message_id=message_id))

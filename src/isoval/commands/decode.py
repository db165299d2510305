"""Command: decode a message document to JSON."""

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
  isoval decode notification.xml
  isoval --json decode keys.xml --message fednow.publickeys""",
)
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-m", "--message", "message_id", default=None, help="Message identifier.")
@click.pass_obj
def decode(app: AppContext, file: Path, message_id: str | None) -> None:
    """Decode FILE into a record tree keyed by tag names."""
    app.emit(app.service.decode_document(file.read_bytes(), message_id=message_id))

"""Command: encode a JSON record as a message document."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import click

from isoval.commands._base import IsovalCommand
from isoval.services.result import ServiceResult

if TYPE_CHECKING:
    from isoval.commands._context import AppContext


@click.command(
    cls=IsovalCommand,
    examples="""\
  isoval encode event.json --message admi.004.001.02
  isoval -q encode keys.json --message fednow.publickeys > keys.xml""",
)
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "-m", "--message", "message_id", required=True, help="Message identifier to encode as."
)
@click.pass_obj
def encode(app: AppContext, file: Path, message_id: str) -> None:
    """Encode the JSON object in FILE (keyed by tag names) as markup."""
    try:
        data = json.loads(file.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        app.emit(ServiceResult.failure("encode", "INVALID_INPUT", f"Invalid JSON in {file}: {exc}"))
        return
    if not isinstance(data, dict):
        app.emit(
            ServiceResult.failure("encode", "INVALID_INPUT", f"Expected a JSON object in {file}")
        )
        return
    app.emit(app.service.encode_record(data, message_id))

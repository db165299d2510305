"""Subcommand modules for isoval.

Provides register_commands() which imports each command on registration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from isoval.commands.decode import decode
    from isoval.commands.encode import encode
    from isoval.commands.messages import messages
    from isoval.commands.validate import validate

    cli.add_command(validate)
    cli.add_command(decode)
    cli.add_command(encode)
    cli.add_command(messages)

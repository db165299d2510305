"""Click base classes carrying usage examples.

Commands declare ``examples="..."``; ``--examples`` prints them and exits
before any argument validation, so ``isoval encode --examples`` works
without a FILE.
"""

from __future__ import annotations

from typing import Any

import click


class ExamplesMixin:
    """Adds an eager ``--examples`` option when examples text is given."""

    examples: str | None = None
    params: list[click.Parameter]

    def _install_examples(self, examples: str | None) -> None:
        self.examples = examples
        if not examples:
            return
        self.params.append(
            click.Option(
                ["--examples"],
                is_flag=True,
                expose_value=False,
                is_eager=True,
                callback=self._print_examples,
                help="Show usage examples.",
            )
        )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value:
            click.echo(f"Examples for '{ctx.command_path}':\n\n{self.examples}")
            ctx.exit(0)


class IsovalCommand(ExamplesMixin, click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._install_examples(examples)


class IsovalGroup(ExamplesMixin, click.Group):
    """Root group; commands it creates default to :class:`IsovalCommand`."""

    command_class = IsovalCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._install_examples(examples)

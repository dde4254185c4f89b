"""Click building blocks shared by every formgrid command.

Commands carry usage examples that ``--examples`` prints, so ``--help``
stays short. Commands reading a form take the same ``DEFINITION``
argument.
"""

from __future__ import annotations

from typing import Any

import click


class ExamplesMixin:
    """Adds an eager ``--examples`` flag when *examples* text is given."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
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
        if value and self.examples:
            click.echo(f"Examples for '{ctx.command_path}':\n\n{self.examples}")
            ctx.exit(0)


class FgCommand(ExamplesMixin, click.Command):
    """A formgrid subcommand."""


class FgGroup(ExamplesMixin, click.Group):
    """The formgrid root group; subcommands default to :class:`FgCommand`."""

    command_class = FgCommand


DEFINITION_ARGUMENT = click.argument(
    "definition", type=click.Path(exists=True, dir_okay=False, path_type=str)
)

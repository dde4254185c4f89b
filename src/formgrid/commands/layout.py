"""Command: group a form's containers into a layout tree."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from formgrid.commands._base import DEFINITION_ARGUMENT, FgCommand

if TYPE_CHECKING:
    from formgrid.commands._context import AppContext


@click.command(
    cls=FgCommand,
    examples="""\
  formgrid layout signup.yml
  formgrid layout signup.yml --group-level 2
  formgrid layout signup.yml --container address""",
)
@DEFINITION_ARGUMENT
@click.option(
    "--group-level",
    type=click.IntRange(min=0),
    default=None,
    help="Container depth turned into groups. Overrides [renderer] group_level.",
)
@click.option("--container", default=None, help="Start from this container path.")
@click.pass_obj
def layout(
    app: AppContext,
    definition: str,
    group_level: int | None,
    container: str | None,
) -> None:
    """Build the render-group tree from nested containers."""
    from formgrid.services.layout import LayoutService

    form = app.load_form(definition)
    app.emit(
        LayoutService(app.settings).group_tree(form, container, group_level=group_level)
    )

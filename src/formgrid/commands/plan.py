"""Command: run a full render pass and show what each step consumes."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from formgrid.commands._base import DEFINITION_ARGUMENT, FgCommand

if TYPE_CHECKING:
    from formgrid.commands._context import AppContext


@click.command(
    cls=FgCommand,
    examples="""\
  formgrid plan signup.yml
  formgrid plan signup.yml --prior contact""",
)
@DEFINITION_ARGUMENT
@click.option("--prior", "prior_groups", multiple=True, help="Group to render first.")
@click.pass_obj
def plan(app: AppContext, definition: str, prior_groups: tuple[str, ...]) -> None:
    """Plan a whole-form render: groups, remaining fields, then buttons."""
    from formgrid.services.layout import LayoutService

    form = app.load_form(definition)
    app.emit(LayoutService(app.settings).plan(form, list(prior_groups)))

"""Command: resolve a form's named groups."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from formgrid.commands._base import DEFINITION_ARGUMENT, FgCommand

if TYPE_CHECKING:
    from formgrid.commands._context import AppContext


@click.command(
    cls=FgCommand,
    examples="""\
  formgrid groups signup.yml
  formgrid groups signup.yml --prior contact --prior personal
  formgrid --json groups signup.yml""",
)
@DEFINITION_ARGUMENT
@click.option(
    "--prior",
    "prior_groups",
    multiple=True,
    help="Group to render first (repeatable, in order). Overrides [renderer] prior_groups.",
)
@click.pass_obj
def groups(app: AppContext, definition: str, prior_groups: tuple[str, ...]) -> None:
    """Resolve named groups in render order, skipping empty ones."""
    from formgrid.services.layout import LayoutService

    form = app.load_form(definition)
    app.emit(LayoutService(app.settings).resolve_groups(form, list(prior_groups)))

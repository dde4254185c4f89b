"""Command: list form-level errors."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from formgrid.commands._base import DEFINITION_ARGUMENT, FgCommand

if TYPE_CHECKING:
    from formgrid.commands._context import AppContext


@click.command(
    cls=FgCommand,
    examples="""\
  formgrid errors signup.yml
  FORMGRID_RENDERER__ERRORS_AT_INPUTS=false formgrid errors signup.yml""",
)
@DEFINITION_ARGUMENT
@click.pass_obj
def errors(app: AppContext, definition: str) -> None:
    """List errors shown at form level (translated)."""
    from formgrid.services.layout import LayoutService

    form = app.load_form(definition)
    app.emit(LayoutService(app.settings).find_errors(form))

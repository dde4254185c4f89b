"""Command: list controls still eligible for rendering."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from formgrid.commands._base import DEFINITION_ARGUMENT, FgCommand
from formgrid.domain.filtering import ButtonMode

if TYPE_CHECKING:
    from formgrid.commands._context import AppContext


@click.command(
    cls=FgCommand,
    examples="""\
  formgrid controls signup.yml
  formgrid controls signup.yml --mode buttons
  formgrid controls signup.yml --container address --mode fields""",
)
@DEFINITION_ARGUMENT
@click.option(
    "--mode",
    type=click.Choice([m.value for m in ButtonMode], case_sensitive=False),
    default=ButtonMode.ANY.value,
    show_default=True,
    help="Restrict to buttons, to non-button fields, or allow any.",
)
@click.option("--container", default=None, help="Container path (default: form root).")
@click.pass_obj
def controls(app: AppContext, definition: str, mode: str, container: str | None) -> None:
    """List a container's direct controls that are neither hidden nor rendered."""
    from formgrid.services.layout import LayoutService

    form = app.load_form(definition)
    app.emit(
        LayoutService(app.settings).filter_controls(form, container, ButtonMode(mode.lower()))
    )

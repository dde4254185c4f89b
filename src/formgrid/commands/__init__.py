"""Subcommand modules for formgrid.

register_commands() uses deferred imports to keep ``formgrid --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every standalone command on the root CLI group."""
    from formgrid.commands.controls import controls
    from formgrid.commands.errors import errors
    from formgrid.commands.grid import grid
    from formgrid.commands.groups import groups
    from formgrid.commands.layout import layout
    from formgrid.commands.plan import plan

    cli.add_command(groups)
    cli.add_command(layout)
    cli.add_command(controls)
    cli.add_command(grid)
    cli.add_command(errors)
    cli.add_command(plan)

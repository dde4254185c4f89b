"""Exception hierarchy for layout resolution.

Only two conditions are fatal during resolution: an unknown priority group
and an invalid grid. "Nothing to show" outcomes are omissions, not errors.
"""

from __future__ import annotations


class FormgridError(Exception):
    """Base class for all formgrid errors."""

    code = "FORMGRID_ERROR"


class GroupNotFoundError(FormgridError):
    """A priority group name matches no group declared on the form."""

    code = "GROUP_NOT_FOUND"

    def __init__(self, group_name: str) -> None:
        super().__init__(f"Form has no group {group_name}.")
        self.group_name = group_name


class InvalidConfigurationError(FormgridError):
    """Grid widths violate the 12-unit layout constraints."""

    code = "INVALID_CONFIGURATION"


class DefinitionError(FormgridError):
    """A form definition document could not be turned into a Form."""

    code = "INVALID_DEFINITION"

"""Column arithmetic for nested sub-layouts on a 12-unit grid.

Pure functions, no side effects. A sub-layout (a nested fieldset) is
``sub_width`` units wide and re-divides its own width into 12 units, so its
label/input split has to be rescaled to keep the inputs aligned with the
parent layout's right column.
"""

from __future__ import annotations

from dataclasses import dataclass

from formgrid.domain.errors import InvalidConfigurationError

GRID_UNITS = 12


@dataclass(frozen=True)
class SubColumns:
    """Column spans of a nested sub-layout."""

    sub_left: int
    sub_right: int
    offset: int  # non-positive means no offset is needed

    @property
    def offset_class(self) -> str:
        """CSS offset class, empty when no offset applies."""
        return f"col-lg-offset-{self.offset}" if self.offset > 0 else ""


@dataclass(frozen=True)
class GridLayout:
    """Grid parameters handed to templates for one render pass."""

    col_left: int
    col_right: int
    sub_width: int
    sub: SubColumns

    def as_params(self) -> dict[str, int]:
        return {
            "col_left": self.col_left,
            "col_right": self.col_right,
            "sub_width": self.sub_width,
            "sub_col_left": self.sub.sub_left,
            "sub_col_right": self.sub.sub_right,
            "sub_offset": self.sub.offset,
        }


def validate_grid(col_left: int, col_right: int, sub_width: int) -> None:
    """Raise InvalidConfigurationError when widths cannot form a layout."""
    if col_left < 0 or col_right < 0:
        msg = f"Column widths must be non-negative (got {col_left}, {col_right})."
        raise InvalidConfigurationError(msg)
    if col_left + col_right > GRID_UNITS:
        msg = (
            f"col_left + col_right must not exceed {GRID_UNITS} "
            f"(got {col_left} + {col_right} = {col_left + col_right})."
        )
        raise InvalidConfigurationError(msg)
    if sub_width <= 0:
        msg = f"sub_width must be positive (got {sub_width})."
        raise InvalidConfigurationError(msg)


def compute_sub_columns(col_left: int, col_right: int, sub_width: int) -> SubColumns:
    """Compute sub-layout spans and offset.

    Examples:
        >>> compute_sub_columns(3, 6, 8)
        SubColumns(sub_left=3, sub_right=9, offset=1)
        >>> compute_sub_columns(2, 10, 12)
        SubColumns(sub_left=2, sub_right=10, offset=0)
    """
    validate_grid(col_left, col_right, sub_width)
    # integer ceiling division
    sub_left = -(-GRID_UNITS * (sub_width - col_right) // sub_width)
    return SubColumns(
        sub_left=sub_left,
        sub_right=GRID_UNITS - sub_left,
        offset=col_left + col_right - sub_width,
    )


def grid_layout(col_left: int, col_right: int, sub_width: int) -> GridLayout:
    return GridLayout(
        col_left=col_left,
        col_right=col_right,
        sub_width=sub_width,
        sub=compute_sub_columns(col_left, col_right, sub_width),
    )

"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, formgrid.toml only contains
overrides. An empty file (or none at all) yields the classic 3/6/8 layout.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from formgrid.domain.grid import GridLayout, grid_layout


class GridConfig(BaseModel):
    """[grid] section — widths in grid units out of 12."""

    model_config = {"frozen": True}

    col_left: int = 3
    col_right: int = 6
    sub_width: int = 8

    def layout(self) -> GridLayout:
        """Validated layout; raises InvalidConfigurationError."""
        return grid_layout(self.col_left, self.col_right, self.sub_width)


class RendererConfig(BaseModel):
    """[renderer] section."""

    model_config = {"frozen": True}

    group_level: int = 0
    prior_groups: list[str] = Field(default_factory=list)
    errors_at_inputs: bool = True


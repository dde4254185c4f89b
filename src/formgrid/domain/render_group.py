"""RenderGroup — the single output shape of layout resolution.

Both the container grouper and the group resolver produce RenderGroups, so
templates handle one type regardless of where a group came from. The
``source`` tag records the origin.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from formgrid.domain.forms import Control


class GroupSource(StrEnum):
    """Where a RenderGroup was derived from."""

    CONTAINER = "container"
    GROUP = "group"


@dataclass
class RenderGroup:
    """One visual grouping ready for template consumption."""

    controls: list[Control | RenderGroup] = field(default_factory=list)
    label: Any = None
    description: Any = None
    attrs: dict[str, Any] = field(default_factory=dict)
    level: int = 0
    root: bool = False
    source: GroupSource = GroupSource.CONTAINER
    name: str | None = None
    options: dict[str, Any] = field(default_factory=dict)

    def iter_controls(self) -> Iterator[Control]:
        """Every control in this group and its sub-groups, in order."""
        for item in self.controls:
            if isinstance(item, RenderGroup):
                yield from item.iter_controls()
            else:
                yield item

    @property
    def subgroups(self) -> list[RenderGroup]:
        return [item for item in self.controls if isinstance(item, RenderGroup)]

    @property
    def depth(self) -> int:
        """Number of RenderGroup levels, counting this one."""
        return 1 + max((g.depth for g in self.subgroups), default=0)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "label": _plain(self.label),
            "description": _plain(self.description),
            "level": self.level,
            "root": self.root,
            "source": str(self.source),
            "attrs": {k: _plain(v) for k, v in self.attrs.items()},
            "options": {k: _plain(v) for k, v in self.options.items()},
            "controls": [
                item.to_dict() if isinstance(item, RenderGroup) else item.path
                for item in self.controls
            ],
        }


def _plain(value: Any) -> Any:
    if value is None or isinstance(value, (bool, int, float)):
        return value
    return str(value)

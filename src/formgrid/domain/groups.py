"""Resolve a form's named groups into an ordered list of RenderGroups.

Priority groups come first, in the order the caller lists them; every
other declared group follows in declaration order. Groups that are
non-visual or have nothing left to show are omitted, not returned empty.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable

from formgrid.domain.errors import GroupNotFoundError
from formgrid.domain.filtering import is_eligible
from formgrid.domain.forms import Form, Group
from formgrid.domain.render_group import GroupSource, RenderGroup
from formgrid.domain.translation import Translator, translate

GroupRef = Group | str


def lookup_groups(form: Form, refs: Iterable[GroupRef]) -> list[Group]:
    """Resolve group references, raising GroupNotFoundError on unknown names."""
    groups: list[Group] = []
    for ref in refs:
        if isinstance(ref, Group):
            groups.append(ref)
            continue
        group = form.get_group(ref)
        if group is None:
            raise GroupNotFoundError(str(ref))
        groups.append(group)
    return groups


def process_group(
    group: Group,
    translator: Translator | None = None,
    *,
    claimed: Collection[int] = (),
) -> RenderGroup | None:
    """Build the RenderGroup for *group*, or None when it should not show.

    Controls whose ``id()`` is in *claimed* already belong to an earlier
    group of the same resolution and are left out.
    """
    options = group.options
    if not options.visual or not group.controls:
        return None

    controls = [c for c in group.controls if is_eligible(c) and id(c) not in claimed]
    if not controls:
        return None

    attrs = dict(options.container.attrs) if options.container is not None else {}
    for key, value in options.extra.items():
        attrs.setdefault(key, value)

    return RenderGroup(
        controls=list(controls),
        label=translate(options.label, translator),
        description=translate(options.description, translator),
        attrs=attrs,
        level=0,
        root=False,
        source=GroupSource.GROUP,
        name=group.name,
        options=dict(options.extra),
    )


def resolve_groups(
    form: Form,
    prior_groups: Iterable[GroupRef] = (),
    translator: Translator | None = None,
) -> list[RenderGroup]:
    """Resolve every group of *form*, priority groups first.

    All priority references are looked up before any group is processed,
    so an unknown name fails the call without partial work. A control that
    belongs to several groups is placed only in the first one resolved.
    """
    priority = lookup_groups(form, prior_groups)

    resolved: list[RenderGroup] = []
    visited: list[Group] = []
    claimed: set[int] = set()
    for group in [*priority, *form.groups]:
        if any(group is seen for seen in visited):
            continue
        visited.append(group)
        render_group = process_group(group, translator, claimed=claimed)
        if render_group is not None:
            claimed.update(id(c) for c in render_group.controls)
            resolved.append(render_group)
    return resolved

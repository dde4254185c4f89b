"""Turn nested containers into a tree of RenderGroups.

Recursion stops once ``group_level`` is reached; deeper containers are
flattened into the current group. The resulting tree is at most
``group_level + 1`` RenderGroups deep.
"""

from __future__ import annotations

from formgrid.domain.filtering import ButtonMode, filter_controls
from formgrid.domain.forms import Container, Control, Form
from formgrid.domain.render_group import GroupSource, RenderGroup


def build_group_tree(
    form: Form,
    container: Container | None = None,
    level: int = 0,
    *,
    group_level: int = 0,
) -> RenderGroup:
    """Build the RenderGroup for *container* (the form root when omitted).

    Containers with nothing left to show still produce a group; dropping
    empty groups is left to the consumer.
    """
    root = container is None
    node: Container = form if container is None else container

    items: list[Control | RenderGroup] = []
    for component in node.components:
        if isinstance(component, Container):
            if level < group_level:
                items.append(build_group_tree(form, component, level + 1, group_level=group_level))
            else:
                items.extend(filter_controls(component, ButtonMode.ANY, deep=True))
        else:
            items.append(component)

    label = None
    if not root:
        label = node.name if node.options.label is None else node.options.label

    return RenderGroup(
        controls=items,
        label=label,
        description=node.options.description,
        attrs=dict(node.options.extra),
        level=level,
        root=root,
        source=GroupSource.CONTAINER,
        name=None if root else node.path,
    )

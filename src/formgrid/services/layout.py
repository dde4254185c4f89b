"""LayoutService — ServiceResult-returning layout operations for the CLI.

Each operation runs one render pass with a fresh :class:`FormRenderer`
built from settings, and converts formgrid errors into failed results.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from formgrid.config.settings import FormgridSettings
from formgrid.domain.errors import DefinitionError, FormgridError
from formgrid.domain.filtering import ButtonMode
from formgrid.domain.forms import Container, Form
from formgrid.services.renderer import FormRenderer
from formgrid.services.result import ServiceResult
from formgrid.services.telemetry import traced

logger = logging.getLogger(__name__)


def find_container(form: Form, path: str | None) -> Container:
    """Container at *path* inside *form*; the form itself for None."""
    if not path:
        return form
    stack: list[Container] = [form]
    while stack:
        node = stack.pop()
        for component in node.components:
            if isinstance(component, Container):
                if component.path == path:
                    return component
                stack.append(component)
    msg = f"Form has no container {path}."
    raise DefinitionError(msg)


class LayoutService:
    """Layout operations over a single form definition."""

    def __init__(self, settings: FormgridSettings) -> None:
        self._settings = settings

    def _renderer(self, *, group_level: int | None = None) -> FormRenderer:
        config = self._settings.renderer
        if group_level is not None:
            config = config.model_copy(update={"group_level": group_level})
        return FormRenderer(config, self._settings.grid)

    @traced
    def grid(self) -> ServiceResult:
        op = "grid"
        try:
            layout = self._renderer().grid
        except FormgridError as exc:
            return ServiceResult.failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={**layout.as_params(), "offset_class": layout.sub.offset_class},
        )

    @traced
    def resolve_groups(
        self, form: Form, prior_groups: Sequence[str] | None = None
    ) -> ServiceResult:
        op = "resolve_groups"
        try:
            renderer = self._renderer()
            renderer.prepare(form)
            groups = renderer.find_groups(prior_groups or None)
        except FormgridError as exc:
            return ServiceResult.failure(op, exc, form=form.name)

        declared = {g.name for g in form.groups}
        shown = {g.name for g in groups}
        warnings = [f"Group '{name}' has nothing to show" for name in sorted(declared - shown)]
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "form": form.name,
                "count": len(groups),
                "groups": [g.to_dict() for g in groups],
            },
            warnings=warnings,
        )

    @traced
    def group_tree(
        self,
        form: Form,
        container: str | None = None,
        *,
        group_level: int | None = None,
    ) -> ServiceResult:
        op = "group_tree"
        try:
            renderer = self._renderer(group_level=group_level)
            renderer.prepare(form)
            node = find_container(form, container)
            tree = renderer.groups_from_containers(None if node is form else node)
        except FormgridError as exc:
            return ServiceResult.failure(op, exc, form=form.name)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "form": form.name,
                "group_level": renderer.config.group_level,
                "depth": tree.depth,
                "tree": tree.to_dict(),
            },
        )

    @traced
    def filter_controls(
        self,
        form: Form,
        container: str | None = None,
        buttons: ButtonMode = ButtonMode.ANY,
    ) -> ServiceResult:
        op = "filter_controls"
        try:
            renderer = self._renderer()
            renderer.prepare(form)
            controls = list(renderer.find_controls(find_container(form, container), buttons))
        except FormgridError as exc:
            return ServiceResult.failure(op, exc, form=form.name)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "form": form.name,
                "mode": str(buttons),
                "count": len(controls),
                "controls": [c.path for c in controls],
            },
        )

    @traced
    def find_errors(self, form: Form) -> ServiceResult:
        op = "find_errors"
        try:
            renderer = self._renderer()
            renderer.prepare(form)
            errors = renderer.find_errors()
        except FormgridError as exc:
            return ServiceResult.failure(op, exc, form=form.name)
        return ServiceResult(
            ok=True,
            op=op,
            data={"form": form.name, "count": len(errors), "errors": [str(e) for e in errors]},
        )

    @traced
    def plan(self, form: Form, prior_groups: Sequence[str] | None = None) -> ServiceResult:
        op = "render_plan"
        try:
            renderer = self._renderer()
            renderer.prepare(form, reset=True)
            plan = renderer.plan(prior_groups or None)
        except FormgridError as exc:
            return ServiceResult.failure(op, exc, form=form.name)
        logger.debug(
            "Planned form '%s': %d groups, %d fields, %d buttons",
            form.name,
            len(plan.groups),
            len(plan.controls),
            len(plan.buttons),
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={"form": form.name, **plan.to_dict(), "grid": renderer.grid.as_params()},
        )

"""FormRenderer — owns the render-pass scope around layout resolution.

A render pass starts with :meth:`FormRenderer.prepare`. The first pass over
a Form annotates every control; later passes over the same Form only clear
``rendered`` flags when asked to. Between prepare and the end of the pass
the renderer answers the queries a template makes: resolved groups,
container trees, remaining controls, form-level errors.

Concurrency contract: one Form, one in-flight pass. Two passes against the
same Form must be serialized by the caller; nothing here locks.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from formgrid.config.models import GridConfig, RendererConfig
from formgrid.domain.annotate import annotate_control
from formgrid.domain.filtering import ButtonMode, filter_controls
from formgrid.domain.forms import Container, Control, Form
from formgrid.domain.grid import GridLayout
from formgrid.domain.grouping import build_group_tree
from formgrid.domain.groups import GroupRef, resolve_groups
from formgrid.domain.helpers import find_errors
from formgrid.domain.render_group import RenderGroup
from formgrid.domain.translation import Translator

logger = logging.getLogger(__name__)

DEFAULT_FORM_CLASS = "form-horizontal"


@dataclass
class RenderPlan:
    """What a full-form template consumes, in order: groups, fields, buttons."""

    groups: list[RenderGroup] = field(default_factory=list)
    controls: list[Control] = field(default_factory=list)
    buttons: list[Control] = field(default_factory=list)
    errors: list[Any] = field(default_factory=list)

    def iter_controls(self) -> Iterator[Control]:
        for group in self.groups:
            yield from group.iter_controls()
        yield from self.controls
        yield from self.buttons

    def to_dict(self) -> dict[str, Any]:
        return {
            "groups": [g.to_dict() for g in self.groups],
            "controls": [c.path for c in self.controls],
            "buttons": [c.path for c in self.buttons],
            "errors": [str(e) for e in self.errors],
        }


class FormRenderer:
    """Resolve a form's layout for templates, one render pass at a time.

    Grid widths are validated on construction, so a bad configuration
    raises InvalidConfigurationError before any form is touched.
    """

    def __init__(
        self,
        config: RendererConfig | None = None,
        grid: GridConfig | None = None,
        *,
        translator: Translator | None = None,
    ) -> None:
        self.config = config or RendererConfig()
        self.grid: GridLayout = (grid or GridConfig()).layout()
        self._translator = translator
        self._form: Form | None = None

    @property
    def form(self) -> Form:
        if self._form is None:
            msg = "No form prepared; call prepare() first."
            raise RuntimeError(msg)
        return self._form

    @property
    def translator(self) -> Translator | None:
        if self._translator is not None:
            return self._translator
        return self._form.translator if self._form is not None else None

    # --- pass scope ---

    def prepare(self, form: Form, *, reset: bool = False) -> None:
        """Start a render pass over *form*.

        A new Form is annotated in full. For the Form already prepared,
        ``rendered`` flags are cleared only when *reset* is set.
        """
        if form is not self._form:
            self._form = form
            count = 0
            for control in form.iter_controls():
                annotate_control(control, self.translator)
                count += 1
            if not any(c.startswith("form-") for c in form.element.classes):
                form.element.add_class(DEFAULT_FORM_CLASS)
            logger.debug("Prepared form '%s': %d controls annotated", form.name, count)
        elif reset:
            for control in form.iter_controls():
                control.options.rendered = False
            logger.debug("Reset rendered flags on form '%s'", form.name)

    def mark_rendered(self, *items: Control | RenderGroup) -> None:
        """Record that *items* were emitted in the current pass."""
        for item in items:
            controls = item.iter_controls() if isinstance(item, RenderGroup) else [item]
            for control in controls:
                control.options.rendered = True

    # --- queries ---

    def find_groups(self, prior_groups: Iterable[GroupRef] | None = None) -> list[RenderGroup]:
        """Resolved named groups, priority groups first."""
        prior = self.config.prior_groups if prior_groups is None else prior_groups
        groups = resolve_groups(self.form, prior, self.translator)
        logger.debug("Resolved %d of %d groups", len(groups), len(self.form.groups))
        return groups

    def find_controls(
        self,
        container: Container | None = None,
        buttons: ButtonMode = ButtonMode.ANY,
        *,
        deep: bool = False,
    ) -> Iterator[Control]:
        return filter_controls(container or self.form, buttons, deep=deep)

    def groups_from_containers(
        self,
        container: Container | None = None,
        level: int = 0,
    ) -> RenderGroup:
        return build_group_tree(
            self.form, container, level, group_level=self.config.group_level
        )

    def find_errors(self) -> list[Any]:
        return find_errors(
            self.form, self.translator, errors_at_inputs=self.config.errors_at_inputs
        )

    # --- driver ---

    def plan(self, prior_groups: Iterable[GroupRef] | None = None) -> RenderPlan:
        """Consume the whole form: groups, then remaining fields, then buttons.

        Every control is consumed at most once; what a step takes is marked
        rendered before the next step looks.
        """
        plan = RenderPlan(errors=self.find_errors())

        plan.groups = self.find_groups(prior_groups)
        self.mark_rendered(*plan.groups)

        plan.controls = list(self.find_controls(buttons=ButtonMode.NON_BUTTONS_ONLY, deep=True))
        self.mark_rendered(*plan.controls)

        plan.buttons = list(self.find_controls(buttons=ButtonMode.BUTTONS_ONLY, deep=True))
        self.mark_rendered(*plan.buttons)
        return plan

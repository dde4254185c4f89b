"""Form model consumed by layout resolution.

Forms own a tree of containers and controls plus a flat list of named
groups. Control classification is an explicit :class:`ControlTrait` flag
set populated at construction; resolution dispatches on traits, never on
control types.

Option bags are typed: the keys the layout code reads are fields, and each
options structure has one ``extra`` mapping for caller-defined entries.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Flag, auto
from typing import Any

from formgrid.domain.markup import Element
from formgrid.domain.translation import Translator

PATH_SEPARATOR = "-"


class ControlTrait(Flag):
    """Capability tags of a control."""

    NONE = 0
    BUTTON = auto()
    SUBMITTER = auto()
    CHECKBOX = auto()
    RADIO_LIST = auto()
    CHECKBOX_LIST = auto()
    HIDDEN = auto()


# --- Option bags ---


@dataclass
class ControlOptions:
    """Render metadata attached to a control."""

    rendered: bool = False
    required: bool = False
    placeholder: Any = None
    prepend: Any = None
    append: Any = None
    description: Any = None
    template: str | None = None
    pair: Element | None = None
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass
class ContainerOptions:
    """Grouping metadata for a container used as an implicit group."""

    label: Any = None
    description: Any = None
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass
class GroupOptions:
    """Options of a named group.

    ``container`` is an element prototype whose attributes seed the group's
    attribute bag; ``extra`` entries become attributes too and are carried
    through to the resolved group verbatim.
    """

    visual: bool = True
    label: Any = None
    description: Any = None
    container: Element | None = None
    extra: dict[str, Any] = field(default_factory=dict)


# --- Components ---


@dataclass(eq=False)
class Control:
    """A single form field or button."""

    name: str
    input_type: str = "text"
    traits: ControlTrait = ControlTrait.NONE
    required: bool = False
    caption: str | None = None
    errors: list[Any] = field(default_factory=list)
    options: ControlOptions = field(default_factory=ControlOptions)
    parent: Container | None = field(default=None, repr=False)
    label: Element = field(init=False, repr=False)
    prototype: Element = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.label = Element("label")
        if self.caption is not None:
            self.label.set_text(self.caption)
        self.prototype = Element("input", {"type": self.input_type})

    @classmethod
    def submit(cls, name: str, caption: str | None = None) -> Control:
        return cls(name, input_type="submit", traits=ControlTrait.SUBMITTER, caption=caption)

    @classmethod
    def button(cls, name: str, caption: str | None = None) -> Control:
        return cls(name, input_type="button", traits=ControlTrait.BUTTON, caption=caption)

    @classmethod
    def hidden(cls, name: str) -> Control:
        return cls(name, input_type="hidden", traits=ControlTrait.HIDDEN)

    @classmethod
    def checkbox(cls, name: str, caption: str | None = None) -> Control:
        return cls(name, input_type="checkbox", traits=ControlTrait.CHECKBOX, caption=caption)

    # --- capability queries ---

    @property
    def is_button(self) -> bool:
        """Button-like: plain buttons and submitters."""
        return bool(self.traits & (ControlTrait.BUTTON | ControlTrait.SUBMITTER))

    @property
    def is_submitter(self) -> bool:
        return ControlTrait.SUBMITTER in self.traits

    @property
    def is_checkbox(self) -> bool:
        return ControlTrait.CHECKBOX in self.traits

    @property
    def is_radio_list(self) -> bool:
        return ControlTrait.RADIO_LIST in self.traits

    @property
    def is_checkbox_list(self) -> bool:
        return ControlTrait.CHECKBOX_LIST in self.traits

    @property
    def is_hidden(self) -> bool:
        return ControlTrait.HIDDEN in self.traits

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    # --- naming ---

    @property
    def path(self) -> str:
        """Name path relative to the form, e.g. ``address-street``."""
        return _lookup_path(self)

    @property
    def html_id(self) -> str:
        return f"frm-{self.path}"


@dataclass(eq=False)
class Container:
    """A named node owning ordered child controls and containers."""

    name: str
    options: ContainerOptions = field(default_factory=ContainerOptions)
    components: list[Control | Container] = field(default_factory=list, repr=False)
    parent: Container | None = field(default=None, repr=False)

    def add(self, component: Control | Container) -> Control | Container:
        if any(c.name == component.name for c in self.components):
            msg = f"Component '{component.name}' already exists in '{self.name}'."
            raise ValueError(msg)
        component.parent = self
        self.components.append(component)
        return component

    def add_control(self, name: str, **kwargs: Any) -> Control:
        control = Control(name, **kwargs)
        self.add(control)
        return control

    def add_container(self, name: str, **kwargs: Any) -> Container:
        container = Container(name, **kwargs)
        self.add(container)
        return container

    def iter_controls(self) -> Iterator[Control]:
        """Every control below this container, depth-first in native order."""
        for component in self.components:
            if isinstance(component, Container):
                yield from component.iter_controls()
            else:
                yield component

    @property
    def path(self) -> str:
        return _lookup_path(self)


@dataclass(eq=False)
class Group:
    """A flat, named collection of control references."""

    name: str
    controls: list[Control] = field(default_factory=list, repr=False)
    options: GroupOptions = field(default_factory=GroupOptions)

    def add(self, *controls: Control) -> Group:
        for control in controls:
            if not any(c is control for c in self.controls):
                self.controls.append(control)
        return self


@dataclass(eq=False)
class Form(Container):
    """Root aggregate: component tree, named groups, form-level errors."""

    groups: list[Group] = field(default_factory=list, repr=False)
    errors: list[Any] = field(default_factory=list)
    translator: Translator | None = field(default=None, repr=False)
    element: Element = field(default_factory=lambda: Element("form"), repr=False)

    def add_group(
        self,
        name: str,
        *,
        label: Any = None,
        description: Any = None,
        visual: bool = True,
    ) -> Group:
        if self.get_group(name) is not None:
            msg = f"Group '{name}' already exists."
            raise ValueError(msg)
        options = GroupOptions(
            visual=visual,
            label=name if label is None else label,
            description=description,
        )
        group = Group(name, options=options)
        self.groups.append(group)
        return group

    def get_group(self, name: str) -> Group | None:
        for group in self.groups:
            if group.name == name:
                return group
        return None

    def get_control(self, path: str) -> Control:
        """Look up a control by its form-relative path."""
        for control in self.iter_controls():
            if control.path == path:
                return control
        raise KeyError(path)

    def all_errors(self) -> list[Any]:
        """Form-level errors followed by every control error, de-duplicated."""
        errors: list[Any] = []
        for error in [*self.errors, *(e for c in self.iter_controls() for e in c.errors)]:
            if error not in errors:
                errors.append(error)
        return errors


def _lookup_path(component: Control | Container) -> str:
    names: list[str] = []
    node: Control | Container | None = component
    while node is not None and not isinstance(node, Form):
        names.append(node.name)
        node = node.parent
    return PATH_SEPARATOR.join(reversed(names))

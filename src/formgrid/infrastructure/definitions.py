"""Form definition documents — YAML or JSON files describing a Form.

A definition lists components (controls and nested containers), named
groups referencing controls by path, form-level errors and an optional
translation catalog::

    name: signup
    components:
      - name: email
        type: email
        required: true
      - container: address
        label: Address
        components:
          - name: street
      - name: send
        kind: submit
    groups:
      - name: contact
        controls: [email, address-street]
    translations:
      Address: Adresa
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from formgrid.domain.errors import DefinitionError
from formgrid.domain.forms import (
    Container,
    ContainerOptions,
    Control,
    ControlOptions,
    ControlTrait,
    Form,
)
from formgrid.domain.markup import Element
from formgrid.domain.translation import CatalogTranslator

logger = logging.getLogger(__name__)

ControlKind = Literal[
    "input", "submit", "button", "hidden", "checkbox", "radio_list", "checkbox_list"
]

_KIND_TRAITS: dict[str, ControlTrait] = {
    "input": ControlTrait.NONE,
    "submit": ControlTrait.SUBMITTER,
    "button": ControlTrait.BUTTON,
    "hidden": ControlTrait.HIDDEN,
    "checkbox": ControlTrait.CHECKBOX,
    "radio_list": ControlTrait.RADIO_LIST,
    "checkbox_list": ControlTrait.CHECKBOX_LIST,
}

_KIND_INPUT_TYPES: dict[str, str] = {
    "input": "text",
    "submit": "submit",
    "button": "button",
    "hidden": "hidden",
    "checkbox": "checkbox",
    "radio_list": "radio",
    "checkbox_list": "checkbox",
}


# --- Schema ---


class ControlDef(BaseModel):
    model_config = {"extra": "forbid"}

    name: str
    kind: ControlKind = "input"
    type: str | None = None
    label: str | None = None
    required: bool = False
    placeholder: str | None = None
    prepend: str | None = None
    append: str | None = None
    description: str | None = None
    errors: list[str] = Field(default_factory=list)
    options: dict[str, Any] = Field(default_factory=dict)


class ContainerDef(BaseModel):
    model_config = {"extra": "forbid"}

    container: str
    label: str | None = None
    description: str | None = None
    attrs: dict[str, Any] = Field(default_factory=dict)
    components: list[ControlDef | ContainerDef] = Field(default_factory=list)


class GroupDef(BaseModel):
    model_config = {"extra": "forbid"}

    name: str
    label: str | None = None
    description: str | None = None
    visual: bool = True
    controls: list[str] = Field(default_factory=list)
    container_attrs: dict[str, Any] | None = None
    options: dict[str, Any] = Field(default_factory=dict)


class FormDef(BaseModel):
    model_config = {"extra": "forbid"}

    name: str = "form"
    element_class: str | None = None
    components: list[ControlDef | ContainerDef] = Field(default_factory=list)
    groups: list[GroupDef] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)
    translations: dict[str, str] = Field(default_factory=dict)


# --- Building ---


def _build_control(definition: ControlDef) -> Control:
    return Control(
        definition.name,
        input_type=definition.type or _KIND_INPUT_TYPES[definition.kind],
        traits=_KIND_TRAITS[definition.kind],
        required=definition.required,
        caption=definition.label,
        errors=list(definition.errors),
        options=ControlOptions(
            placeholder=definition.placeholder,
            prepend=definition.prepend,
            append=definition.append,
            description=definition.description,
            extra=dict(definition.options),
        ),
    )


def _add_components(parent: Container, components: list[ControlDef | ContainerDef]) -> None:
    for definition in components:
        if isinstance(definition, ContainerDef):
            container = parent.add_container(
                definition.container,
                options=ContainerOptions(
                    label=definition.label,
                    description=definition.description,
                    extra=dict(definition.attrs),
                ),
            )
            _add_components(container, definition.components)
        else:
            parent.add(_build_control(definition))


def build_form(data: Any) -> Form:
    """Validate a parsed definition document and build the Form."""
    try:
        definition = FormDef.model_validate(data or {})
    except ValidationError as exc:
        msg = f"Invalid form definition: {exc}"
        raise DefinitionError(msg) from exc

    form = Form(definition.name, errors=list(definition.errors))
    if definition.translations:
        form.translator = CatalogTranslator(definition.translations)
    if definition.element_class:
        form.element.add_class(*definition.element_class.split())

    try:
        _add_components(form, definition.components)
        for group_def in definition.groups:
            group = form.add_group(
                group_def.name,
                label=group_def.label,
                description=group_def.description,
                visual=group_def.visual,
            )
            if group_def.container_attrs is not None:
                group.options.container = Element(None, group_def.container_attrs)
            group.options.extra.update(group_def.options)
            for path in group_def.controls:
                group.add(form.get_control(path))
    except KeyError as exc:
        msg = f"Group references unknown control {exc.args[0]!r}"
        raise DefinitionError(msg) from exc
    except ValueError as exc:
        raise DefinitionError(str(exc)) from exc

    logger.debug("Built form '%s' with %d groups", form.name, len(form.groups))
    return form


def load_definition(path: Path) -> Form:
    """Read a YAML (or JSON) definition file into a Form."""
    try:
        data = YAML(typ="safe").load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeError, YAMLError) as exc:
        msg = f"Cannot read form definition {path}: {exc}"
        raise DefinitionError(msg) from exc
    return build_form(data)

"""Template-facing helpers for descriptions, errors and part attributes."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from formgrid.domain.forms import Control, Form
from formgrid.domain.markup import Element, is_fragment
from formgrid.domain.translation import Translator, translate

_PART_PREFIXES = ("input-", "label-")


def _paragraph(css_class: str, content: Any) -> Element:
    el = Element("p").add_class(css_class)
    return el.add(content) if is_fragment(content) else el.set_text(content)


def control_description(control: Control, translator: Translator | None = None) -> Element:
    """``p.help-block`` with the control's description, or an empty fragment."""
    desc = control.options.description
    if not desc:
        return Element(None)
    return _paragraph("help-block", translate(desc, translator))


def control_error(
    control: Control,
    translator: Translator | None = None,
    *,
    errors_at_inputs: bool = True,
) -> Element:
    """``p.help-inline`` with the first error of the control.

    Empty when the control has no errors or errors are shown at form level.
    """
    if not control.errors or not errors_at_inputs:
        return Element(None)
    return _paragraph("help-inline", translate(control.errors[0], translator))


def find_errors(
    form: Form,
    translator: Translator | None = None,
    *,
    errors_at_inputs: bool = True,
) -> list[Any]:
    """Errors to display at form level.

    With ``errors_at_inputs`` only the form's own errors are listed since
    control errors appear beside their inputs; otherwise every error is.
    """
    errors = list(form.errors) if errors_at_inputs else form.all_errors()
    return [translate(error, translator) for error in errors]


def split_part_attrs(args: Mapping[str, Any] | None) -> dict[str, dict[str, Any]]:
    """Split ``input-*`` / ``label-*`` keyword attributes by target part.

    Examples:
        >>> split_part_attrs({"input-class": "wide", "label-for": "x", "other": 1})
        {'input': {'class': 'wide'}, 'label': {'for': 'x'}}
    """
    attrs: dict[str, dict[str, Any]] = {"input": {}, "label": {}}
    for key, value in (args or {}).items():
        lowered = key.lower()
        for prefix in _PART_PREFIXES:
            if lowered.startswith(prefix):
                attrs[prefix[:-1]][key[len(prefix) :]] = value
                break
    return attrs

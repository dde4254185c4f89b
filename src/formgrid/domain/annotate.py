"""Per-form preparation of controls before a render pass.

``annotate_control`` derives the render metadata templates rely on:
required markers, translated placeholders, input decorations and the
"pair" wrapper element. Running it twice on the same control leaves the
control unchanged.
"""

from __future__ import annotations

from typing import Any

from formgrid.domain.forms import Control
from formgrid.domain.markup import Element, is_fragment
from formgrid.domain.translation import Translator, translate

PAIR_ID_SUFFIX = "-pair"
PAIR_CLASS = "control-group"
DECORATION_CLASS = "add-on"
BUTTON_CLASS = "btn"
EMAIL_PREPEND = "@"


def annotate_control(control: Control, translator: Translator | None = None) -> None:
    """Tag *control* with derived render metadata."""
    options = control.options
    options.rendered = False

    if control.required:
        control.label.add_class("required")
        options.required = True

    if options.placeholder and not control.is_button:
        control.prototype.attrs["placeholder"] = translate(options.placeholder, translator)

    if control.input_type == "email" and options.prepend is None:
        options.prepend = EMAIL_PREPEND

    if control.is_submitter:
        control.prototype.add_class(BUTTON_CLASS)
        return

    if control.is_checkbox:
        control.label.add_class("checkbox")
    elif not control.is_radio_list:
        control.label.add_class("control-label")

    options.pair = build_pair(control)
    if options.prepend:
        options.prepend = decoration(options.prepend)
    if options.append:
        options.append = decoration(options.append)


def build_pair(control: Control) -> Element:
    """Wrapper element around a label/input pair."""
    pair = Element("div", {"id": control.html_id + PAIR_ID_SUFFIX})
    pair.add_class(PAIR_CLASS)
    if control.options.required:
        pair.add_class("required")
    if control.has_errors:
        pair.add_class("error")
    return pair


def decoration(value: Any) -> Element:
    """Wrap a prepend/append value in an ``add-on`` span.

    Plain values become escaped text; fragments are nested unchanged.
    Values that are already decorations are returned as-is.
    """
    if isinstance(value, Element) and value.name == "span" and value.has_class(DECORATION_CLASS):
        return value
    span = Element("span").add_class(DECORATION_CLASS)
    return span.add(value) if is_fragment(value) else span.set_text(value)

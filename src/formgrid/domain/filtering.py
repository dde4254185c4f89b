"""Lazy control filtering over a container's children."""

from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum

from formgrid.domain.forms import Container, Control


class ButtonMode(StrEnum):
    """Which controls a filter lets through."""

    BUTTONS_ONLY = "buttons"
    NON_BUTTONS_ONLY = "fields"
    ANY = "any"


def is_eligible(control: Control) -> bool:
    """Not yet rendered and not intrinsically hidden."""
    return not control.options.rendered and not control.is_hidden


def _mode_accepts(mode: ButtonMode, control: Control) -> bool:
    if mode is ButtonMode.BUTTONS_ONLY:
        return control.is_button
    if mode is ButtonMode.NON_BUTTONS_ONLY:
        return not control.is_button
    return True


def filter_controls(
    container: Container,
    buttons: ButtonMode = ButtonMode.ANY,
    *,
    deep: bool = False,
) -> Iterator[Control]:
    """Yield the eligible controls of *container* in native order.

    Only direct children are considered unless *deep* is set, in which case
    nested containers are walked depth-first. Reads ``rendered``, never
    writes it; every call starts a fresh iteration.
    """
    controls = (
        container.iter_controls()
        if deep
        else (c for c in container.components if isinstance(c, Control))
    )
    for control in controls:
        if is_eligible(control) and _mode_accepts(buttons, control):
            yield control

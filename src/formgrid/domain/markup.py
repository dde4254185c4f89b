"""Minimal HTML element builder used to decorate controls and groups.

Elements only carry a tag name, attributes and children. Anything that
implements ``__html__`` (an :class:`Element`, a :class:`markupsafe.Markup`)
is a pre-built fragment and is never escaped or translated again.
"""

from __future__ import annotations

from typing import Any

from markupsafe import Markup, escape

_VOID_TAGS = frozenset({"input", "br", "hr", "img", "meta", "link"})


def is_fragment(value: object) -> bool:
    """Return True for values that are already renderable markup."""
    return hasattr(value, "__html__")


class Element:
    """An HTML element prototype with class helpers.

    A ``name`` of None renders only the children, which is how group
    attribute bags are represented.
    """

    def __init__(self, name: str | None = "div", attrs: dict[str, Any] | None = None) -> None:
        self.name = name
        self.attrs: dict[str, Any] = dict(attrs or {})
        self.children: list[Any] = []

    # ── classes ──────────────────────────────────────────────────────

    @property
    def classes(self) -> list[str]:
        raw = self.attrs.get("class")
        if not raw:
            return []
        if isinstance(raw, str):
            return raw.split()
        return [str(c) for c in raw]

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def add_class(self, *names: str) -> Element:
        classes = self.classes
        for name in names:
            if name and name not in classes:
                classes.append(name)
        self.attrs["class"] = " ".join(classes)
        return self

    # ── content ──────────────────────────────────────────────────────

    def set_text(self, text: object) -> Element:
        self.children = [escape(str(text))]
        return self

    def add(self, child: object) -> Element:
        self.children.append(child)
        return self

    def copy(self) -> Element:
        clone = Element(self.name, self.attrs)
        clone.children = list(self.children)
        return clone

    # ── rendering ────────────────────────────────────────────────────

    def render_attrs(self) -> str:
        parts: list[str] = []
        for key, value in self.attrs.items():
            if value is None or value is False or value == "":
                continue
            if value is True:
                parts.append(f" {key}")
            else:
                parts.append(f' {key}="{escape(value)}"')
        return "".join(parts)

    def __html__(self) -> str:
        inner = "".join(str(escape(child)) for child in self.children)
        if self.name is None:
            return inner
        if self.name in _VOID_TAGS:
            return f"<{self.name}{self.render_attrs()}>"
        return f"<{self.name}{self.render_attrs()}>{inner}</{self.name}>"

    def __str__(self) -> str:
        return self.__html__()

    def __repr__(self) -> str:
        return f"Element({self.name!r}, {self.attrs!r})"

    def text(self) -> str:
        """Plain text content, for summaries and tests."""
        return Markup(self.__html__()).striptags()

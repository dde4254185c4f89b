"""Tests for the element builder."""

from __future__ import annotations

from markupsafe import Markup

from formgrid.domain.markup import Element, is_fragment


class TestElement:
    def test_render_with_attrs(self) -> None:
        el = Element("div", {"id": "x"}).add_class("a", "b")
        assert str(el) == '<div id="x" class="a b"></div>'

    def test_add_class_is_set_like(self) -> None:
        el = Element("div").add_class("a").add_class("a", "b")
        assert el.classes == ["a", "b"]

    def test_text_escaped(self) -> None:
        assert str(Element("p").set_text("a < b")) == "<p>a &lt; b</p>"

    def test_attr_values_escaped(self) -> None:
        assert str(Element("input", {"value": '"q"'})) == '<input value="&#34;q&#34;">'

    def test_boolean_and_empty_attrs(self) -> None:
        el = Element("input", {"required": True, "disabled": False, "placeholder": None})
        assert str(el) == "<input required>"

    def test_nameless_element_renders_children(self) -> None:
        el = Element(None).add(Markup("<b>x</b>")).add("&")
        assert str(el) == "<b>x</b>&amp;"

    def test_copy_is_independent(self) -> None:
        el = Element("div").add_class("a")
        clone = el.copy()
        clone.add_class("b")
        assert el.classes == ["a"]


class TestIsFragment:
    def test_fragments(self) -> None:
        assert is_fragment(Markup("x"))
        assert is_fragment(Element("b"))

    def test_plain_values(self) -> None:
        assert not is_fragment("x")
        assert not is_fragment(None)

"""Translation collaborator — a plain ``str -> str`` callable."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from formgrid.domain.markup import is_fragment

Translator = Callable[[str], str]


def translate(value: Any, translator: Translator | None) -> Any:
    """Translate *value* unless it is missing or already a markup fragment."""
    if translator is None or value is None or is_fragment(value):
        return value
    return translator(str(value))


class CatalogTranslator:
    """Translator backed by a message catalog; unknown messages pass through."""

    def __init__(self, catalog: Mapping[str, str]) -> None:
        self._catalog = dict(catalog)

    def __call__(self, message: str) -> str:
        return self._catalog.get(message, message)

    def __len__(self) -> int:
        return len(self._catalog)

"""Fragment categories and combinators for CSS selectors."""
from __future__ import annotations

from enum import StrEnum


class FragmentKind(StrEnum):
    """Category of a selector fragment, declared in canonical CSS order.

    A compound selector lists its fragments in this order:

        element#id.class[attr]:pseudo-class::pseudo-element
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attr"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def position(self) -> int:
        """Position of this category in canonical order (0..5)."""
        return _ORDER.index(self)

    @property
    def max_occurrences(self) -> int | None:
        """How many times the category may appear in one compound selector."""
        if self in (FragmentKind.ELEMENT, FragmentKind.PSEUDO_ELEMENT):
            return 1
        return None

    def render(self, value: str) -> str:
        prefix, suffix = _PUNCTUATION[self]
        return f"{prefix}{value}{suffix}"


_ORDER: tuple[FragmentKind, ...] = tuple(FragmentKind)

_PUNCTUATION: dict[FragmentKind, tuple[str, str]] = {
    FragmentKind.ELEMENT: ("", ""),
    FragmentKind.ID: ("#", ""),
    FragmentKind.CLASS: (".", ""),
    FragmentKind.ATTRIBUTE: ("[", "]"),
    FragmentKind.PSEUDO_CLASS: (":", ""),
    FragmentKind.PSEUDO_ELEMENT: ("::", ""),
}


class Combinator(StrEnum):
    """Token joining two compound selectors."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"

    @classmethod
    def parse(cls, token: str) -> Combinator:
        """Resolve a symbol (``+``) or a name (``adjacent-sibling``)."""
        for member in cls:
            if token == member.value:
                return member
        name = token.strip().upper().replace("-", "_")
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"Unknown combinator: {token!r}") from None

"""Error hierarchy for the selector builder."""
from __future__ import annotations

from typing import Any

from cssbuilder.model import FragmentKind

COUNT_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: element, id, "
    "class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(Exception):
    """Base error for all cssbuilder errors."""

    def __init__(self, message: str, *, kind: FragmentKind | None = None) -> None:
        super().__init__(message)
        self.kind = kind


class CountViolation(SelectorError):
    """A single-occurrence fragment was appended twice."""

    def __init__(self, message: str = COUNT_MESSAGE, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class OrderViolation(SelectorError):
    """A fragment was appended after a later category was already used."""

    def __init__(self, message: str = ORDER_MESSAGE, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)

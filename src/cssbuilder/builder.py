"""Fluent accumulator for compound CSS selectors."""
from __future__ import annotations

import logging

from cssbuilder.config import BuilderConfig
from cssbuilder.errors import CountViolation, OrderViolation
from cssbuilder.model import FragmentKind

__all__ = ["SelectorBuilder"]


class SelectorBuilder:
    """Builds one compound selector, fragment by fragment.

    Every append returns the builder itself so calls can be chained:

        >>> SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus").stringify()
        'a[href$=".png"]:focus'

    Fragments must follow canonical order (element, id, class, attribute,
    pseudo-class, pseudo-element); element and pseudo-element may appear only
    once. A rejected append raises before touching the builder, so the text
    and counters stay as they were.
    """

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self._config = config or BuilderConfig()
        self._log = logging.getLogger(self._config.logger_name)
        self._parts: list[str] = []
        self._counts: dict[FragmentKind, int] = {kind: 0 for kind in FragmentKind}
        self._last_kind: FragmentKind | None = None

    # --- state ---------------------------------------------------------------

    @property
    def config(self) -> BuilderConfig:
        return self._config

    @property
    def counts(self) -> dict[FragmentKind, int]:
        """Per-category usage counters (a copy)."""
        return dict(self._counts)

    @property
    def last_kind(self) -> FragmentKind | None:
        """The latest category in canonical order used so far."""
        return self._last_kind

    # --- appending -----------------------------------------------------------

    def append(self, kind: FragmentKind, value: str) -> SelectorBuilder:
        """Append *value* as a fragment of category *kind*."""
        limit = self._limit(kind)
        if limit is not None and self._counts[kind] >= limit:
            self._log.debug("Rejected repeated %s fragment %r", kind, value)
            raise CountViolation(kind=kind)
        if self._last_kind is not None and self._last_kind.position > kind.position:
            self._log.debug(
                "Rejected %s fragment %r after %s", kind, value, self._last_kind
            )
            raise OrderViolation(kind=kind)

        self._parts.append(kind.render(value))
        self._counts[kind] += 1
        self._last_kind = kind
        self._log.debug("Appended %s fragment %r", kind, value)
        return self

    def append_element(self, value: str) -> SelectorBuilder:
        return self.append(FragmentKind.ELEMENT, value)

    def append_id(self, value: str) -> SelectorBuilder:
        return self.append(FragmentKind.ID, value)

    def append_class(self, value: str) -> SelectorBuilder:
        return self.append(FragmentKind.CLASS, value)

    def append_attribute(self, value: str) -> SelectorBuilder:
        return self.append(FragmentKind.ATTRIBUTE, value)

    def append_pseudo_class(self, value: str) -> SelectorBuilder:
        return self.append(FragmentKind.PSEUDO_CLASS, value)

    def append_pseudo_element(self, value: str) -> SelectorBuilder:
        return self.append(FragmentKind.PSEUDO_ELEMENT, value)

    # Short names matching the facade entry points.
    element = append_element
    id = append_id
    class_ = append_class
    attr = append_attribute
    pseudo_class = append_pseudo_class
    pseudo_element = append_pseudo_element

    # --- output --------------------------------------------------------------

    def stringify(self) -> str:
        return "".join(self._parts)

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.stringify()!r})"

    def _limit(self, kind: FragmentKind) -> int | None:
        if kind is FragmentKind.ID and self._config.unique_id:
            return 1
        return kind.max_occurrences

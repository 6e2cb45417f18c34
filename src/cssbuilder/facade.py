"""Facade with one entry point per fragment category plus ``combine``."""
from __future__ import annotations

import logging
from typing import Protocol

from cssbuilder.builder import SelectorBuilder
from cssbuilder.config import BuilderConfig

__all__ = ["BuilderFacade", "Stringifiable", "css_selector_builder"]


class Stringifiable(Protocol):
    def stringify(self) -> str: ...


class BuilderFacade:
    """Starts a fresh SelectorBuilder for every call.

    The facade keeps no state between calls apart from the config it hands
    to each builder.
    """

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self.config = config or BuilderConfig()
        self._log = logging.getLogger(self.config.logger_name)

    def _new(self) -> SelectorBuilder:
        return SelectorBuilder(self.config)

    def element(self, value: str) -> SelectorBuilder:
        return self._new().append_element(value)

    def id(self, value: str) -> SelectorBuilder:
        return self._new().append_id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._new().append_class(value)

    def attr(self, value: str) -> SelectorBuilder:
        return self._new().append_attribute(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._new().append_pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._new().append_pseudo_element(value)

    def combine(
        self, left: Stringifiable, combinator: str, right: Stringifiable
    ) -> SelectorBuilder:
        """Join two selectors with *combinator* into a new builder.

        The joined text becomes the element fragment of the new builder, so
        the result can be combined again. The combinator is used verbatim and
        is always surrounded by single spaces, which means the descendant
        combinator yields three spaces (``"tr   td"``).
        """
        text = f"{left.stringify()} {combinator} {right.stringify()}"
        self._log.debug("Combined selector %r", text)
        return self._new().append_element(text)


css_selector_builder = BuilderFacade()

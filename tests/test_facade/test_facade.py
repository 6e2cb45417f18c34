"""Tests for the BuilderFacade entry points and combine."""

import logging

import pytest

from cssbuilder import (
    BuilderConfig,
    BuilderFacade,
    CountViolation,
    OrderViolation,
    SelectorBuilder,
    css_selector_builder,
)


@pytest.fixture
def builder() -> BuilderFacade:
    return css_selector_builder


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


class TestEntryPoints:
    def test_each_entry_point_returns_fresh_builder(self, builder):
        first = builder.element("div")
        second = builder.element("span")
        assert isinstance(first, SelectorBuilder)
        assert first is not second
        assert first.stringify() == "div"
        assert second.stringify() == "span"

    def test_entry_points(self, builder):
        assert builder.element("a").stringify() == "a"
        assert builder.id("main").stringify() == "#main"
        assert builder.class_("x").stringify() == ".x"
        assert builder.attr("disabled").stringify() == "[disabled]"
        assert builder.pseudo_class("hover").stringify() == ":hover"
        assert builder.pseudo_element("before").stringify() == "::before"

    def test_link_to_png(self, builder):
        sb = builder.element("a").attr('href$=".png"').pseudo_class("focus")
        assert sb.stringify() == 'a[href$=".png"]:focus'

    def test_id_with_classes(self, builder):
        sb = builder.id("main").class_("container").class_("editable")
        assert sb.stringify() == "#main.container.editable"

    def test_element_twice(self, builder):
        with pytest.raises(CountViolation):
            builder.element("table").element("div")

    def test_class_then_id(self, builder):
        with pytest.raises(OrderViolation):
            builder.class_("container").id("main")

    def test_config_is_shared_with_builders(self):
        facade = BuilderFacade(BuilderConfig(unique_id=True))
        sb = facade.id("a")
        assert sb.config.unique_id is True
        with pytest.raises(CountViolation):
            sb.id("b")


# ---------------------------------------------------------------------------
# combine
# ---------------------------------------------------------------------------


class TestCombine:
    def test_adjacent_sibling(self, builder):
        sb = builder.combine(builder.element("div"), "+", builder.element("span"))
        assert sb.stringify() == "div + span"

    def test_child(self, builder):
        sb = builder.combine(builder.element("ul"), ">", builder.element("li"))
        assert sb.stringify() == "ul > li"

    def test_descendant_spacing(self, builder):
        sb = builder.combine(builder.element("tr"), " ", builder.element("td"))
        assert sb.stringify() == "tr   td"

    def test_nested(self, builder):
        x = builder.element("p")
        y = builder.element("tr").pseudo_class("nth-of-type(even)")
        z = builder.element("td").pseudo_class("nth-of-type(even)")
        sb = builder.combine(x, "~", builder.combine(y, " ", z))
        expected = x.stringify() + " ~ " + y.stringify() + "   " + z.stringify()
        assert sb.stringify() == expected

    def test_deeply_nested(self, builder):
        sb = builder.combine(
            builder.element("div").id("main").class_("container").class_("draggable"),
            "+",
            builder.combine(
                builder.element("table").id("data"),
                "~",
                builder.combine(
                    builder.element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    builder.element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert sb.stringify() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_combinator_used_verbatim(self, builder):
        sb = builder.combine(builder.id("a"), "||", builder.id("b"))
        assert sb.stringify() == "#a || #b"

    def test_result_counts_as_element(self, builder):
        sb = builder.combine(builder.element("a"), ">", builder.element("b"))
        with pytest.raises(CountViolation):
            sb.element("c")

    def test_result_can_be_decorated(self, builder):
        sb = builder.combine(builder.element("a"), ">", builder.element("b"))
        assert sb.class_("x").stringify() == "a > b.x"

    def test_operands_unchanged(self, builder):
        left = builder.element("a")
        right = builder.element("b")
        builder.combine(left, "+", right)
        assert left.stringify() == "a"
        assert right.stringify() == "b"

    def test_accepts_any_stringifiable(self, builder):
        class Raw:
            def stringify(self) -> str:
                return "*"

        sb = builder.combine(Raw(), ">", builder.element("p"))
        assert sb.stringify() == "* > p"

    def test_logs_combined_text(self, builder, caplog):
        with caplog.at_level(logging.DEBUG, logger="cssbuilder"):
            builder.combine(builder.element("a"), "+", builder.element("b"))
        assert "a + b" in caplog.text

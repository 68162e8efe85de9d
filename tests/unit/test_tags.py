"""Unit tests for elmdoc.formatter.tags — grouping and packing of @docs blocks."""
from __future__ import annotations

import pytest

from elmdoc.ast.nodes import Code, DocTags, Markdown
from elmdoc.formatter.tags import (
    TagBlock,
    group_tags,
    layout_tags,
    pack_tag_lines,
)


# ---------------------------------------------------------------------------
# Grouping
# ---------------------------------------------------------------------------


class TestGrouping:
    def test_adjacent_tags_merge_and_prose_separates(self) -> None:
        parts = [DocTags(("a", "b")), DocTags(("c",)), Markdown("x"), DocTags(("d",))]
        assert group_tags(parts) == [["a", "b", "c"], ["d"]]

    def test_merged_group_replaces_run_in_place(self) -> None:
        parts = [DocTags(("a", "b")), DocTags(("c",)), Markdown("x"), DocTags(("d",))]
        layout = layout_tags(parts)
        assert layout.parts == [
            TagBlock(("a", "b", "c")),
            Markdown("x"),
            TagBlock(("d",)),
        ]

    def test_code_also_separates_groups(self) -> None:
        parts = [DocTags(("a",)), Code("x"), DocTags(("b",))]
        assert group_tags(parts) == [["a"], ["b"]]

    def test_no_tags(self) -> None:
        parts = [Markdown("x"), Code("y")]
        layout = layout_tags(parts)
        assert layout.groups == []
        assert layout.parts == parts

    def test_empty_input(self) -> None:
        layout = layout_tags([])
        assert layout.parts == []
        assert layout.groups == []

    def test_empty_tag_block_merges_with_neighbour(self) -> None:
        assert group_tags([DocTags(()), DocTags(("a",))]) == [["a"]]

    def test_lone_empty_tag_block_is_an_empty_group(self) -> None:
        assert group_tags([Markdown("x"), DocTags(())]) == [[]]

    def test_groups_are_independent_lists(self) -> None:
        layout = layout_tags([DocTags(("a",))])
        layout.groups[0].append("mutated")
        assert layout.parts[0] == TagBlock(("a",))


# ---------------------------------------------------------------------------
# Packing
# ---------------------------------------------------------------------------


class TestPacking:
    def test_narrow_width_example(self) -> None:
        lines = pack_tag_lines(["alpha", "beta", "gamma"], 12)
        assert lines == ["@docs alpha", "@docs beta", "@docs gamma"]
        assert all(len(row) <= 12 for row in lines)

    def test_everything_on_one_line_when_wide(self) -> None:
        assert pack_tag_lines(["alpha", "beta", "gamma"], 80) == ["@docs alpha, beta, gamma"]

    def test_exact_fit_stays_on_line(self) -> None:
        # "@docs alpha, beta" is exactly 17 columns
        assert pack_tag_lines(["alpha", "beta", "gamma"], 17) == [
            "@docs alpha, beta",
            "@docs gamma",
        ]

    def test_one_column_short_wraps(self) -> None:
        assert pack_tag_lines(["alpha", "beta", "gamma"], 16) == [
            "@docs alpha",
            "@docs beta",
            "@docs gamma",
        ]

    def test_oversize_name_sits_alone(self) -> None:
        assert pack_tag_lines(["averyveryverylongname", "b"], 10) == [
            "@docs averyveryverylongname",
            "@docs b",
        ]

    def test_empty_group_renders_bare_marker(self) -> None:
        assert pack_tag_lines([], 10) == ["@docs"]

    def test_starting_column_is_respected(self) -> None:
        assert pack_tag_lines(["alpha", "beta"], 17) == ["@docs alpha, beta"]
        assert pack_tag_lines(["alpha", "beta"], 17, column=4) == ["@docs alpha", "@docs beta"]

    @pytest.mark.parametrize("width", [12, 20, 31, 50])
    def test_order_is_preserved_across_wraps(self, width: int) -> None:
        names = [f"name{i}" for i in range(12)]
        lines = pack_tag_lines(names, width)
        assert all(row.startswith("@docs ") for row in lines)
        recovered = [n.strip() for row in lines for n in row[len("@docs "):].split(",")]
        assert recovered == names
        assert all(len(row) <= width for row in lines)

    def test_grouping_does_not_depend_on_width(self) -> None:
        parts = [DocTags(tuple(f"n{i}" for i in range(20)))]
        assert group_tags(parts) == [[f"n{i}" for i in range(20)]]

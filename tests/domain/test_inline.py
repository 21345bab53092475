"""Tests for the inline format resolver."""

from __future__ import annotations

import pytest

from sflang.domain.errors import TooManyFragmentsError
from sflang.domain.inline import (
    FormatGroup,
    FormatRun,
    find_markers,
    flatten_runs,
    resolve_format,
    unescape_text,
)
from sflang.domain.types import FormatFlag

B, I, U, NONE = FormatFlag.BOLD, FormatFlag.ITALIC, FormatFlag.UNDERLINE, FormatFlag.NONE


def _runs(text: str) -> list[tuple[str, FormatFlag]]:
    return [(run.text, run.flags) for run in flatten_runs(resolve_format(text))]


class TestFindMarkers:
    def test_marker_parity(self) -> None:
        markers = find_markers(r"\B \\B \\\B")
        assert markers[B] == [0, 9]

    def test_all_types(self) -> None:
        markers = find_markers(r"\B\I\U")
        assert markers == {B: [0], I: [2], U: [4]}

    def test_other_escapes_ignored(self) -> None:
        assert find_markers(r"\x \n \b") == {B: [], I: [], U: []}


class TestResolveFormat:
    def test_plain_text(self) -> None:
        assert resolve_format("hello") == FormatGroup(NONE, (FormatRun("hello", NONE),))

    def test_empty_text(self) -> None:
        assert resolve_format("") == FormatGroup(NONE, ())

    def test_sequential_regions(self) -> None:
        # Whitespace around markers is kept as written (see DESIGN.md, "Whitespace in runs").
        assert _runs(r"plain \B bold \B plain \I it \I end") == [
            ("plain ", NONE),
            (" bold ", B),
            (" plain ", NONE),
            (" it ", I),
            (" end", NONE),
        ]

    def test_sequential_regions_tree(self) -> None:
        tree = resolve_format(r"a\Bb\Bc\Id\Ie")
        assert tree.children == (
            FormatRun("a", NONE),
            FormatGroup(B, (FormatRun("b", B),)),
            FormatRun("c", NONE),
            FormatGroup(I, (FormatRun("d", I),)),
            FormatRun("e", NONE),
        )

    def test_nested_regions(self) -> None:
        tree = resolve_format(r"\B outer \I inner \I still-bold \B")
        assert tree.children == (
            FormatGroup(
                B,
                (
                    FormatRun(" outer ", B),
                    FormatGroup(B | I, (FormatRun(" inner ", B | I),)),
                    FormatRun(" still-bold ", B),
                ),
            ),
        )

    def test_three_levels(self) -> None:
        assert _runs(r"\Ba\Ib\Uc\U\I\B") == [("a", B), ("b", B | I), ("c", B | I | U)]

    def test_underline(self) -> None:
        assert _runs(r"x \U y \U") == [("x ", NONE), (" y ", U)]

    def test_escaped_marker_is_literal(self) -> None:
        assert _runs(r"\\B not bold \\B") == [(r"\B not bold \B", NONE)]

    def test_odd_backslashes_keep_marker(self) -> None:
        assert _runs(r"\\\Bbold\\\B") == [("\\", NONE), ("bold\\", B)]

    def test_unpaired_marker_left_in_text(self) -> None:
        assert _runs(r"a \B b") == [(r"a \B b", NONE)]

    def test_crossing_markers(self) -> None:
        tree = resolve_format(r"\B a \I b \B c \I")
        assert tree.children == (
            FormatGroup(B, (FormatRun(r" a \I b ", B),)),
            FormatRun(r" c \I", NONE),
        )

    def test_empty_region_not_emitted(self) -> None:
        assert resolve_format(r"\B\B x").children == (FormatRun(" x", NONE),)

    def test_earliest_region_wins(self) -> None:
        assert _runs(r"\Ii\I\Bb\B") == [("i", I), ("b", B)]

    def test_delimiters_never_emitted(self) -> None:
        for run in flatten_runs(resolve_format(r"\B1\B\I2\I\U3\U")):
            assert "\\" not in run.text

    def test_marker_across_newline(self) -> None:
        assert _runs("\\Bline\nnext\\B") == [("line\nnext", B)]


class TestFragmentLimit:
    def test_at_limit(self) -> None:
        # 33 regions: 33 groups + 33 inner runs + 32 separators = 98
        resolve_format(" ".join([r"\Bx\B"] * 33))

    def test_exactly_default_limit(self) -> None:
        # 33 groups + 33 inner runs + 32 separators + leading and trailing runs = 100
        tree = resolve_format("a " + " ".join([r"\Bx\B"] * 33) + " b")
        assert len(tree.children) == 67

    def test_over_limit_raises(self) -> None:
        # 34 regions: 34 groups + 34 inner runs + 33 separators = 101
        with pytest.raises(TooManyFragmentsError) as excinfo:
            resolve_format(" ".join([r"\Bx\B"] * 34))
        assert excinfo.value.limit == 100

    def test_custom_limit_exceeded(self) -> None:
        with pytest.raises(TooManyFragmentsError) as excinfo:
            resolve_format(r"\Bx\B y", max_fragments=2)
        assert excinfo.value.limit == 2

    def test_exactly_custom_limit(self) -> None:
        # group, its run, and the trailing run
        tree = resolve_format(r"\Bx\B y", max_fragments=3)
        assert tree.children == (FormatGroup(B, (FormatRun("x", B),)), FormatRun(" y", NONE))


class TestHelpers:
    def test_unescape_text(self) -> None:
        assert unescape_text(r"a\\b\\\\c") == r"a\b\\c"

    def test_flatten_runs_order(self) -> None:
        tree = resolve_format(r"1\B2\I3\I4\B5")
        assert [run.text for run in flatten_runs(tree)] == ["1", "2", "3", "4", "5"]

    def test_to_dict(self) -> None:
        assert resolve_format(r"a\Bb\B").to_dict() == {
            "flags": [],
            "children": [
                {"text": "a", "flags": []},
                {"flags": ["bold"], "children": [{"text": "b", "flags": ["bold"]}]},
            ],
        }

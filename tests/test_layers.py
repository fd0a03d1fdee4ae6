"""Tests for layer grouping, reordering, cell filtering and expansion."""

from __future__ import annotations

import csv
import unittest
from unittest import mock

from quickfort.parser import (
    CellError,
    adjust_layer_order, expand_areas, group_lines_by_layer, parse_line, process_lines,
    split_cells,
)


class TestGrouping(unittest.TestCase):

    def test_single_group(self):
        lines = ["d,d", "~,d", "#,#"]
        self.assertEqual(group_lines_by_layer(lines), [lines])

    def test_navigation_line_opens_group(self):
        """The navigation line is the first line of its new group."""
        lines = ["d,d", "#>,#", "u,u", "#<,#", "j,j"]
        self.assertEqual(
            group_lines_by_layer(lines),
            [["d,d"], ["#>,#", "u,u"], ["#<,#", "j,j"]],
        )

    def test_leading_navigation_leaves_empty_group(self):
        self.assertEqual(group_lines_by_layer(["#>", "d"]), [[], ["#>", "d"]])


class TestReordering(unittest.TestCase):

    def test_down_groups_keep_order(self):
        groups = [["a"], ["#>", "b"], ["#>", "c"]]
        self.assertEqual(adjust_layer_order(groups), groups)

    def test_up_group_inserted_before_last(self):
        """Down then up: the up group lands second-to-last, not at the end."""
        first, down, up = ["a"], ["#>,#", "b"], ["#<,#", "c"]
        self.assertEqual(adjust_layer_order([first, down, up]), [first, up, down])

    def test_consecutive_up_groups(self):
        """Each #< group goes behind the group placed just before it."""
        first, up1, up2 = ["a"], ["#<", "b"], ["#<", "c"]
        # up1 -> [up1, first]; up2 -> [up1, up2, first]
        self.assertEqual(adjust_layer_order([first, up1, up2]), [up1, up2, first])

    def test_first_up_group_appended(self):
        """With nothing placed yet a #< group is appended normally."""
        up, down = ["#<", "a"], ["#>", "b"]
        self.assertEqual(adjust_layer_order([up, down]), [up, down])

    def test_empty_group(self):
        self.assertEqual(adjust_layer_order([[], ["#<", "a"]]), [["#<", "a"], []])


class TestParseLine(unittest.TestCase):

    def test_sparse_row(self):
        """Filtered cells leave gaps in the column indices."""
        self.assertEqual(parse_line("d,~,i,#"), {0: "d", 2: "i"})
        self.assertEqual(parse_line("j,`,d,#"), {0: "j", 2: "d"})

    def test_all_filtered(self):
        self.assertEqual(parse_line("#,#,#,#"), {})
        self.assertEqual(parse_line("#>,#,#,#"), {})
        self.assertEqual(parse_line(""), {})

    def test_unknown_symbols_dropped(self):
        self.assertEqual(parse_line("m,d,zz, D "), {1: "d", 3: "d"})

    def test_expansion_kept_formatted(self):
        self.assertEqual(parse_line(" d(3x3,# "), {0: "d(3x3)"})

    def test_unsplittable_line(self):
        """CSV failures surface as a blueprint error."""
        with mock.patch("quickfort.parser.layers.csv.reader", side_effect=csv.Error("bad")):
            with self.assertRaises(CellError):
                parse_line("d,d")

    def test_stray_carriage_return(self):
        """A bare \\r inside a line does not break CSV splitting."""
        self.assertEqual(parse_line("d,d\rd,d"), {0: "d", 2: "d"})
        self.assertEqual(split_cells("d,d\rd,d"), ["d", "d d", "d"])


class TestExpandAreas(unittest.TestCase):

    def test_block_fills_rows_and_columns(self):
        layers = [[{0: "d(2x2)"}, {}]]
        self.assertEqual(expand_areas(layers), [[{0: "d", 1: "d"}, {0: "d", 1: "d"}]])

    def test_block_past_last_row(self):
        """Rectangles running past the layer append new rows."""
        layers = [[{1: "h(1x3)"}]]
        self.assertEqual(expand_areas(layers), [[{1: "h"}, {1: "h"}, {1: "h"}]])

    def test_later_expansion_overwrites(self):
        """Rectangles are applied in row-major order, last write wins."""
        layers = [[{0: "d(3x2)", 2: "r(1x2)"}, {}]]
        self.assertEqual(
            expand_areas(layers),
            [[{0: "d", 1: "d", 2: "r"}, {0: "d", 1: "d", 2: "r"}]],
        )

    def test_plain_cells_not_rewritten(self):
        """A plain cell covered by an earlier rectangle stays overwritten."""
        layers = [[{0: "d(2x2)"}, {0: "i"}]]
        self.assertEqual(expand_areas(layers), [[{0: "d", 1: "d"}, {0: "d", 1: "d"}]])

    def test_covered_expansion_still_expands(self):
        """An expansion cell hidden by an earlier rectangle is still applied."""
        layers = [[{0: "d(2x2)"}, {1: "u(2x1)"}]]
        self.assertEqual(
            expand_areas(layers),
            [[{0: "d", 1: "d"}, {0: "d", 1: "u", 2: "u"}]],
        )


class TestProcessLines(unittest.TestCase):

    def test_no_lines(self):
        self.assertEqual(process_lines([]), [])

    def test_full_pipeline(self):
        lines = ["d(2x1),#", "#>,#", "j,#"]
        self.assertEqual(process_lines(lines), [[{0: "d", 1: "d"}], [{}, {0: "j"}]])


if __name__ == "__main__":
    unittest.main()

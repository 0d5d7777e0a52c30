"""
Unit Tests for Result Rendering.

Tables are rendered into a StringIO and parsed back into cells.
"""

import io

from gabi_cli.render import build_table, render_result


def _render(rows: list[list[str]]) -> str:
    out = io.StringIO()
    render_result(rows, out)
    return out.getvalue()


def _cells(output: str) -> list[list[str]]:
    """Split rendered table lines into stripped cells, skipping rule lines."""
    return [
        [cell.strip() for cell in line.split("│")]
        for line in output.splitlines()
        if "│" in line
    ]


class TestRenderResult:
    """Tests for render_result."""

    def test_first_row_is_header_then_body_rows_in_order(self):
        """Header a,b followed by body rows 1,2 and 3,4."""
        output = _render([["a", "b"], ["1", "2"], ["3", "4"]])

        assert _cells(output) == [["a", "b"], ["1", "2"], ["3", "4"]]

    def test_header_rule_separates_header_from_body(self):
        """A horizontal rule follows the header line."""
        lines = _render([["a", "b"], ["1", "2"]]).splitlines()

        assert "┼" in lines[1]
        assert "│" not in lines[1]

    def test_no_outer_border(self):
        """No corners and no edge separators around the table."""
        output = _render([["a", "b"], ["1", "2"], ["3", "4"]])

        for corner in ("┌", "┐", "└", "┘"):
            assert corner not in output
        for line in output.splitlines():
            assert not line.startswith("│")
            assert not line.rstrip().endswith("│")

    def test_empty_result_prints_nothing(self):
        """An empty result set writes nothing and does not raise."""
        assert _render([]) == ""

    def test_header_only_result(self):
        """A single row renders as a header with no body."""
        output = _render([["id", "name"]])

        assert _cells(output) == [["id", "name"]]

    def test_short_rows_are_padded(self):
        """A data row with fewer cells than the header gets empty cells."""
        output = _render([["a", "b", "c"], ["1"]])

        assert _cells(output) == [["a", "b", "c"], ["1", "", ""]]

    def test_wide_rows_extend_the_header(self):
        """A data row wider than the header adds untitled columns."""
        output = _render([["a"], ["1", "2"]])

        assert _cells(output) == [["a", ""], ["1", "2"]]

    def test_cells_are_rendered_verbatim(self):
        """Rich markup inside cells is not interpreted."""
        output = _render([["col"], ["[bold]x[/bold]"]])

        assert "[bold]x[/bold]" in output

    def test_long_cells_are_not_wrapped(self):
        """A cell wider than a terminal stays on one line, untruncated."""
        payload = "x" * 120
        output = _render([["id", "payload"], ["1", payload]])

        assert payload in output
        assert len(output.splitlines()) == 3
        assert _cells(output) == [["id", "payload"], ["1", payload]]

    def test_long_cells_keep_columns_aligned(self):
        output = _render([["id", "payload"], ["1", "y" * 150], ["2", "short"]])

        lines = output.splitlines()
        assert len(lines) == 4
        assert len({line.index("│") for line in lines if "│" in line}) == 1


class TestBuildTable:
    """Tests for build_table."""

    def test_empty_rows_give_no_table(self):
        assert build_table([]) is None

    def test_columns_and_rows(self):
        table = build_table([["a", "b"], ["1", "2"], ["3", "4"]])

        assert [column.header for column in table.columns] == ["a", "b"]
        assert table.row_count == 2
        assert table.show_edge is False

"""Tests for the side-by-side layout transformer."""

from rich.cells import cell_len

from diffpane.diff.models import ClassifiedLine, ColumnKind, LineKind
from diffpane.diff.parser import parse_diff
from diffpane.render.layout import SEPARATOR, column_width_for, to_side_by_side


def _rows(diff: str, width: int = 43):
    lines, _ = parse_diff(diff)
    return to_side_by_side(lines, width)


class TestPairing:
    def test_deleted_then_added_paired(self):
        rows = _rows("@@ -1 +1 @@\n-old\n+new")
        assert len(rows) == 2
        row = rows[1]
        assert row.kind == LineKind.SIDE_BY_SIDE
        assert row.left_kind == ColumnKind.DELETED
        assert row.right_kind == ColumnKind.ADDED
        assert row.text == "old".ljust(20) + SEPARATOR + "new".ljust(20)

    def test_unpaired_deleted(self):
        rows = _rows("-gone\n context")
        assert rows[0].left_kind == ColumnKind.DELETED
        assert rows[0].right_kind == ColumnKind.EMPTY
        assert rows[1].left_kind == ColumnKind.CONTEXT

    def test_unpaired_added(self):
        rows = _rows("+fresh")
        assert rows[0].left_kind == ColumnKind.EMPTY
        assert rows[0].right_kind == ColumnKind.ADDED
        assert rows[0].text.startswith(" " * 20 + SEPARATOR + "fresh")

    def test_pairing_is_positional(self):
        rows = _rows("-a\n-b\n+c\n+d")
        assert [(r.left_kind, r.right_kind) for r in rows] == [
            (ColumnKind.DELETED, ColumnKind.EMPTY),
            (ColumnKind.DELETED, ColumnKind.ADDED),
            (ColumnKind.EMPTY, ColumnKind.ADDED),
        ]

    def test_context_mirrored(self):
        row = _rows(" same")[0]
        left, right = row.text.split(SEPARATOR)
        assert left == right == "same".ljust(20)

    def test_headers_and_markers_pass_through(self, sample_diff):
        lines, _ = parse_diff(sample_diff)
        rows = to_side_by_side(lines, 43)
        assert rows[0] == lines[0]
        assert rows[4] == lines[4]
        assert rows[-1].kind == LineKind.NO_NEWLINE


class TestWidths:
    def test_column_width(self):
        assert column_width_for(83) == 40
        assert column_width_for(84) == 40
        assert column_width_for(4) is None
        assert column_width_for(None) is None

    def test_truncated_to_column(self):
        row = _rows("+" + "x" * 100, width=23)[0]
        assert row.column_width == 10
        assert row.text == " " * 10 + SEPARATOR + "x" * 10

    def test_wide_characters_measured_in_cells(self):
        row = _rows("-日本語テキスト\n+abc", width=13)[0]
        left = row.text[: row.separator_offset]
        assert cell_len(left) == 5
        assert cell_len(row.text) == 5 + len(SEPARATOR) + 5

    def test_separator_offset(self):
        row = _rows("-a\n+b", width=23)[0]
        assert row.text[row.separator_offset:row.separator_offset + len(SEPARATOR)] == SEPARATOR

    def test_too_narrow_returns_inline(self):
        lines = [ClassifiedLine(LineKind.ADDED, "x")]
        assert to_side_by_side(lines, 3) == lines

import curses
import unittest

from launcher_pane import LauncherPane
from workspace_model import CellContainer, Item


class LauncherPaneLabelTests(unittest.TestCase):
    def test_fit_label_centers_short_titles(self):
        self.assertEqual(LauncherPane.fit_label("Mail", 8), "  Mail  ")

    def test_fit_label_truncates_with_ellipsis(self):
        label = LauncherPane.fit_label("Calculator", 5)
        self.assertEqual(label, "Calc…")

    def test_fit_label_handles_degenerate_widths(self):
        self.assertEqual(LauncherPane.fit_label("Mail", 0), "")
        self.assertEqual(LauncherPane.fit_label("Mail", 1), "M")
        self.assertEqual(LauncherPane.fit_label(None, 3), "   ")


class LauncherPaneGeometryTests(unittest.TestCase):
    def test_cell_geometry_divides_window(self):
        self.assertEqual(LauncherPane.cell_geometry(12, 80, 4, 3), (20, 4))

    def test_cell_geometry_never_collapses_to_zero(self):
        self.assertEqual(LauncherPane.cell_geometry(2, 3, 5, 4), (1, 1))

    def test_page_indicator_marks_current_page(self):
        self.assertEqual(LauncherPane.page_indicator(1, 3), "○ ● ○")

    def test_page_indicator_mirrors_for_rtl(self):
        self.assertEqual(LauncherPane.page_indicator(0, 3, rtl=True), "○ ○ ●")

    def test_column_origin_mirrors_for_rtl(self):
        self.assertEqual(LauncherPane.column_origin(0, 4, 20), 0)
        self.assertEqual(LauncherPane.column_origin(0, 4, 20, rtl=True), 60)
        self.assertEqual(LauncherPane.column_origin(3, 4, 20, rtl=True), 0)


class DummyWin:
    def __init__(self, h, w):
        self.h, self.w = h, w
        self.calls = []

    def getmaxyx(self):
        return self.h, self.w

    def addnstr(self, y, x, text, n, attr=0):
        self.calls.append((y, x, text.strip()))


def test_draw_cells_puts_first_column_on_the_right_in_rtl(monkeypatch):
    monkeypatch.setattr(curses, "color_pair", lambda n: 0)
    page = CellContainer(2, 1, [Item("first", 0, 0), Item("second", 1, 0)])
    pane = LauncherPane.__new__(LauncherPane)

    ltr, rtl = DummyWin(2, 40), DummyWin(2, 40)
    pane.draw_cells(ltr, page, None)
    pane.draw_cells(rtl, page, None, rtl=True)
    assert [text for _, _, text in sorted(ltr.calls, key=lambda c: c[1])] == ["first", "second"]
    assert [text for _, _, text in sorted(rtl.calls, key=lambda c: c[1])] == ["second", "first"]


if __name__ == "__main__":
    unittest.main()

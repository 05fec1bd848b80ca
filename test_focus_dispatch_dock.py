import unittest

from focus_dispatch_dock import DockDispatcher
from focus_keys import KEY_LEFT, KEY_RIGHT, KEY_UP
from navigation_host import KeyPhase, LayoutOrientation
from pagination import Paginator
from workspace_model import CellContainer, Dock, FocusTracker, Item, WorkspaceHost

SIDE = LayoutOrientation(vertical_bar=True)
SIDE_RTL = LayoutOrientation(vertical_bar=True, rtl=True)


class DockDispatcherTests(unittest.TestCase):
    def setUp(self):
        self.tracker = FocusTracker()
        t = self.tracker
        self.grid = CellContainer(4, 3, [Item(f"g{x}{y}", x, y, tracker=t) for y in range(3) for x in range(4)])
        self.next_page = CellContainer(4, 3, [Item("n00", 0, 0, tracker=t)])
        self.all_apps = Item("All apps", 2, 0, kind="all_items", tracker=t)
        self.dock = Dock(
            4,
            2,
            [
                Item("d0", 0, 0, tracker=t),
                Item("d1", 1, 0, tracker=t),
                self.all_apps,
                Item("d3", 3, 0, tracker=t),
            ],
        )
        self.pager = Paginator([self.grid, self.next_page])
        self.dispatcher = DockDispatcher(WorkspaceHost(self.pager, self.dock))

    def test_up_from_all_items_reaches_bottom_row(self):
        self.assertTrue(self.dispatcher.on_key(self.all_apps, KEY_UP))
        self.assertIs(self.tracker.focused, self.grid.item_at(2, 2))

    def test_up_from_other_rank_reaches_matching_column(self):
        self.dispatcher.on_key(self.dock.child_at(3), KEY_UP)
        self.assertIs(self.tracker.focused, self.grid.item_at(3, 2))

    def test_left_moves_along_dock(self):
        self.dispatcher.on_key(self.dock.child_at(1), KEY_LEFT)
        self.assertIs(self.tracker.focused, self.dock.child_at(0))

    def test_dock_edge_does_not_change_page(self):
        self.pager.page_index = 1
        self.assertTrue(self.dispatcher.on_key(self.dock.child_at(0), KEY_LEFT))
        self.assertIsNone(self.tracker.focused)
        self.assertEqual(self.pager.current_page_index(), 1)

    def test_side_dock_left_enters_grid(self):
        self.dock.set_vertical(True)
        self.dispatcher.on_key(self.dock.child_at(1), KEY_LEFT, orientation=SIDE)
        self.assertIs(self.tracker.focused, self.grid.item_at(3, 1))

    def test_side_dock_right_pages_forward(self):
        self.dock.set_vertical(True)
        self.assertTrue(self.dispatcher.on_key(self.dock.child_at(0), KEY_RIGHT, orientation=SIDE))
        self.assertEqual(self.pager.current_page_index(), 1)
        self.assertIs(self.tracker.focused, self.next_page.child_at(0))

    def test_side_dock_right_on_last_page_is_absorbed(self):
        self.dock.set_vertical(True)
        self.pager.page_index = 1
        self.assertTrue(self.dispatcher.on_key(self.dock.child_at(0), KEY_RIGHT, orientation=SIDE))
        self.assertIsNone(self.tracker.focused)

    def test_rtl_side_dock_right_enters_grid(self):
        self.dock.set_vertical(True)
        self.dispatcher.on_key(self.dock.child_at(1), KEY_RIGHT, orientation=SIDE_RTL)
        self.assertIs(self.tracker.focused, self.grid.item_at(3, 1))

    def test_rtl_side_dock_left_pages_forward(self):
        self.dock.set_vertical(True)
        self.assertTrue(self.dispatcher.on_key(self.dock.child_at(0), KEY_LEFT, orientation=SIDE_RTL))
        self.assertEqual(self.pager.current_page_index(), 1)
        self.assertIs(self.tracker.focused, self.next_page.child_at(0))

    def test_missing_workspace_page_is_absorbed(self):
        dispatcher = DockDispatcher(WorkspaceHost(Paginator([]), self.dock))
        self.assertTrue(dispatcher.on_key(self.dock.child_at(0), KEY_UP))
        self.assertIsNone(self.tracker.focused)

    def test_release_is_reported_but_ignored(self):
        self.assertTrue(self.dispatcher.on_key(self.all_apps, KEY_UP, KeyPhase.RELEASE))
        self.assertIsNone(self.tracker.focused)


if __name__ == "__main__":
    unittest.main()

from pagination import Paginator
from workspace_model import (
    CellContainer,
    Dock,
    FocusTracker,
    Folder,
    Item,
    LauncherModel,
    TextField,
    WorkspaceRemoval,
    paginate,
)
from navigation_host import LayoutOrientation


def test_paginate_fills_reading_order_across_pages():
    items = [Item(str(i)) for i in range(7)]
    pages = paginate(items, 3, 2)
    assert [p.child_count() for p in pages] == [6, 1]
    assert (items[4].cell_x, items[4].cell_y) == (1, 1)
    assert (items[6].cell_x, items[6].cell_y) == (0, 0)
    assert paginate([], 3, 2)[0].child_count() == 0


def test_cell_container_lookup_and_removal():
    page = CellContainer(2, 2, [Item("a", 0, 0), Item("b", 1, 0)])
    assert page.item_at(1, 0).title == "b"
    assert page.remove(page.child_at(0)) is True
    assert page.remove(Item("zz")) is False
    assert page.index_of(page.item_at(1, 0)) == 0


def test_dock_rotates_between_row_and_column():
    dock = Dock(4, 1, [Item("a", 0, 0), Item("b", 3, 0)])
    dock.set_vertical(True)
    assert (dock.count_x, dock.count_y) == (1, 4)
    assert dock.position_of(dock.child_at(1)) == (0, 3)
    assert dock.rank_of(dock.child_at(1)) == 3
    dock.set_vertical(False)
    assert dock.position_of(dock.child_at(1)) == (3, 0)


def test_paginator_clamps_and_keeps_last_snap():
    pager = Paginator([CellContainer(1, 1), CellContainer(1, 1)])
    pager.snap_to_page(5)
    assert pager.current_page_index() == 1
    assert pager.last_snap == 5
    pager.remove_page(1)
    assert pager.current_page_index() == 0
    assert pager.page_at(1) is None
    pager.remove_page(3)
    assert pager.page_count() == 1


def test_removal_reports_page():
    removed = []
    item = Item("x", 0, 0)
    pager = Paginator([CellContainer(2, 2), CellContainer(2, 2, [item])])
    WorkspaceRemoval(pager, on_removed=lambda el, page: removed.append((el, page))).remove(item)
    assert removed == [(item, 1)]
    assert pager.page_at(1).child_count() == 0
    # unknown elements are left alone
    WorkspaceRemoval(pager, on_removed=lambda *a: removed.append(a)).remove(item)
    assert len(removed) == 1


def test_model_locates_every_kind_of_element():
    tracker = FocusTracker()
    ws_item = Item("w", 0, 0, tracker=tracker)
    dock_item = Item("d", 0, 0, tracker=tracker)
    app = Item("app", tracker=tracker)
    folder = Folder("F", [Item("f1", tracker=tracker)], 2, 2, tracker)
    model = LauncherModel(
        Paginator([CellContainer(2, 2), CellContainer(2, 2, [ws_item])]),
        Dock(3, 1, [dock_item]),
        Paginator(paginate([app], 2, 2)),
        TextField("Search", tracker),
        tracker,
        folders={"F": folder},
    )
    assert model.locate(ws_item) == ("workspace", 1)
    assert model.locate(dock_item) == ("dock", -1)
    assert model.locate(app) == ("all_apps", 0)
    assert model.locate(model.search_bar) == ("search", -1)
    assert model.locate(folder.name_field) == ("folder_name", -1)
    assert model.locate(folder.pager.page_at(0).child_at(0)) == ("folder", 0)
    assert model.locate(Item("nowhere")) == (None, -1)

    model.set_orientation(LayoutOrientation(vertical_bar=True))
    assert model.dock.vertical is True
    ws_item.request_focus()
    assert tracker.focused is ws_item

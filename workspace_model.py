import logging

from navigation_host import LayoutOrientation
from pagination import Paginator

logger = logging.getLogger(__name__)


class FocusTracker:
    def __init__(self):
        self.focused = None

    def focus(self, target):
        self.focused = target


class Item:
    def __init__(self, title, cell_x=0, cell_y=0, kind="app", folder=None, tracker=None):
        self.title = title
        self.cell_x = cell_x
        self.cell_y = cell_y
        self.kind = kind  # app | folder | all_items
        self.folder = folder
        self.tracker = tracker

    def request_focus(self):
        if self.tracker is not None:
            self.tracker.focus(self)

    def __repr__(self):
        return f"Item({self.title!r}, {self.cell_x}, {self.cell_y})"


class TextField:
    """A focusable single-line widget: the search bar or a folder name."""

    def __init__(self, text="", tracker=None):
        self.text = text
        self.tracker = tracker

    @property
    def title(self):
        return self.text

    def request_focus(self):
        if self.tracker is not None:
            self.tracker.focus(self)


class CellContainer:
    def __init__(self, count_x, count_y, items=None):
        self.count_x = count_x
        self.count_y = count_y
        self._items: list[Item] = list(items or [])

    def children(self):
        return list(self._items)

    def child_at(self, i):
        if 0 <= i < len(self._items):
            return self._items[i]
        return None

    def child_count(self):
        return len(self._items)

    def index_of(self, child):
        for i, item in enumerate(self._items):
            if item is child:
                return i
        return -1

    def position_of(self, child):
        return child.cell_x, child.cell_y

    def item_at(self, x, y):
        for item in self._items:
            if item.cell_x == x and item.cell_y == y:
                return item
        return None

    def add(self, item):
        self._items.append(item)
        return item

    def remove(self, item):
        i = self.index_of(item)
        if i >= 0:
            del self._items[i]
            return True
        return False


class Dock(CellContainer):
    """Single strip of items; the all-items button sits at all_items_rank."""

    def __init__(self, count, all_items_rank, items=None, vertical=False):
        super().__init__(count, 1, items)
        self.all_items_rank = all_items_rank
        self.vertical = False
        if vertical:
            self.set_vertical(True)

    def set_vertical(self, vertical: bool):
        if vertical == self.vertical:
            return
        self.vertical = vertical
        self.count_x, self.count_y = self.count_y, self.count_x
        for item in self._items:
            item.cell_x, item.cell_y = item.cell_y, item.cell_x

    def rank_of(self, item) -> int:
        return item.cell_y if self.vertical else item.cell_x


def paginate(items, count_x, count_y):
    """Lay items out in reading order over as many pages as needed."""
    per_page = count_x * count_y
    pages = []
    for start in range(0, len(items), per_page):
        chunk = items[start : start + per_page]
        for i, item in enumerate(chunk):
            item.cell_x = i % count_x
            item.cell_y = i // count_x
        pages.append(CellContainer(count_x, count_y, chunk))
    if not pages:
        pages.append(CellContainer(count_x, count_y))
    return pages


class Folder:
    def __init__(self, title, items, count_x, count_y, tracker=None):
        self.title = title
        self.pager = Paginator(paginate(list(items), count_x, count_y))
        self.name_field = TextField(title, tracker)


class WorkspaceHost:
    def __init__(self, workspace: Paginator, dock=None):
        self.workspace = workspace
        self.dock = dock

    def current_container(self):
        return self.workspace.current_page()

    def dock_container(self):
        return self.dock

    def pager(self):
        return self.workspace


class PagedHost:
    def __init__(self, pages: Paginator):
        self.pages = pages

    def current_container(self):
        return self.pages.current_page()

    def dock_container(self):
        return None

    def pager(self):
        return self.pages


class WorkspaceRemoval:
    def __init__(self, workspace: Paginator, on_removed=None):
        self.workspace = workspace
        self.on_removed = on_removed

    def remove(self, element):
        page_index = self.workspace.page_of(element)
        if page_index < 0:
            logger.warning("cannot remove %r: not on any workspace page", element)
            return
        self.workspace.page_at(page_index).remove(element)
        logger.info("removed %r from page %d", element, page_index)
        if self.on_removed is not None:
            self.on_removed(element, page_index)


class LauncherModel:
    def __init__(self, workspace, dock, all_apps, search_bar, tracker, folders=None):
        self.workspace = workspace
        self.dock = dock
        self.all_apps = all_apps
        self.search_bar = search_bar
        self.tracker = tracker
        self.folders = dict(folders or {})
        self.orientation = LayoutOrientation()

    def set_orientation(self, orientation: LayoutOrientation):
        self.orientation = orientation
        self.dock.set_vertical(orientation.vertical_bar)

    def locate(self, element):
        """Where an element lives: ('workspace', page), ('dock', -1), ..."""
        if element is None:
            return None, -1
        if element is self.search_bar:
            return "search", -1
        if self.dock.index_of(element) >= 0:
            return "dock", -1
        page = self.workspace.page_of(element)
        if page >= 0:
            return "workspace", page
        page = self.all_apps.page_of(element)
        if page >= 0:
            return "all_apps", page
        for folder in self.folders.values():
            if element is folder.name_field:
                return "folder_name", -1
            page = folder.pager.page_of(element)
            if page >= 0:
                return "folder", page
        return None, -1

    def first_workspace_item(self):
        page = self.workspace.current_page()
        if page is not None and page.child_count() > 0:
            return page.child_at(0)
        return None

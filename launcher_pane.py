import curses


class LauncherPane:
    PAIR_ITEM = 1
    PAIR_ITEM_FOCUSED = 2
    PAIR_DOCK = 3
    PAIR_FOLDER = 4
    EMPTY_GLYPH = "·"

    def __init__(self):
        try:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(self.PAIR_ITEM, curses.COLOR_WHITE, -1)
            curses.init_pair(self.PAIR_ITEM_FOCUSED, curses.COLOR_BLACK, curses.COLOR_WHITE)
            curses.init_pair(self.PAIR_DOCK, curses.COLOR_CYAN, -1)
            curses.init_pair(self.PAIR_FOLDER, curses.COLOR_YELLOW, -1)
        except curses.error:
            pass

    @staticmethod
    def fit_label(text: str, width: int) -> str:
        if width <= 0:
            return ""
        text = text or ""
        if len(text) > width:
            text = text[: max(1, width - 1)] + "…" if width > 1 else text[:width]
        return text.center(width)

    @staticmethod
    def cell_geometry(h, w, count_x, count_y):
        cell_w = max(1, w // max(1, count_x))
        cell_h = max(1, h // max(1, count_y))
        return cell_w, cell_h

    @staticmethod
    def page_indicator(page_index, page_count, rtl=False) -> str:
        dots = ["●" if i == page_index else "○" for i in range(page_count)]
        if rtl:
            dots.reverse()
        return " ".join(dots)

    def _attr(self, item, focused):
        if item is not None and item is focused:
            return curses.color_pair(self.PAIR_ITEM_FOCUSED) | curses.A_BOLD
        if item is not None and getattr(item, "kind", "app") == "folder":
            return curses.color_pair(self.PAIR_FOLDER)
        if item is not None and getattr(item, "kind", "app") == "all_items":
            return curses.color_pair(self.PAIR_DOCK) | curses.A_BOLD
        return curses.color_pair(self.PAIR_ITEM)

    def _put(self, win, y, x, text, attr=0):
        h, w = win.getmaxyx()
        if y < 0 or y >= h or x < 0 or x >= w:
            return
        try:
            win.addnstr(y, x, text, max(0, w - x - (1 if y == h - 1 else 0)), attr)
        except curses.error:
            pass

    @staticmethod
    def column_origin(x, count_x, cell_w, rtl=False):
        # logical column 0 is drawn on the right in RTL layouts
        if rtl:
            x = count_x - 1 - x
        return x * cell_w

    def draw_cells(self, win, container, focused, top=0, bottom_pad=0, rtl=False):
        h, w = win.getmaxyx()
        grid_h = max(1, h - top - bottom_pad)
        cell_w, cell_h = self.cell_geometry(grid_h, w, container.count_x, container.count_y)
        for y in range(container.count_y):
            for x in range(container.count_x):
                item = container.item_at(x, y) if hasattr(container, "item_at") else None
                label = item.title if item is not None else self.EMPTY_GLYPH
                attr = self._attr(item, focused)
                row = top + y * cell_h + cell_h // 2
                if getattr(item, "kind", "app") == "folder":
                    label = f"[{label}]"
                self._put(win, row, self.column_origin(x, container.count_x, cell_w, rtl), self.fit_label(label, cell_w - 1), attr)

    def draw_search_bar(self, win, search_bar, focused):
        win.erase()
        _, w = win.getmaxyx()
        attr = self._attr(search_bar, focused) if search_bar is focused else curses.A_DIM
        self._put(win, 0, 0, f" {search_bar.text} ".ljust(w), attr)
        win.refresh()

    def draw_page(self, win, pager, focused, title="", rtl=False):
        win.erase()
        h, w = win.getmaxyx()
        page = pager.current_page()
        if title:
            self._put(win, 0, 0, title[:w], curses.A_BOLD)
        if page is not None:
            self.draw_cells(win, page, focused, top=1 if title else 0, bottom_pad=1, rtl=rtl)
        indicator = self.page_indicator(pager.current_page_index(), pager.page_count(), rtl)
        self._put(win, h - 1, max(0, (w - len(indicator)) // 2), indicator)
        win.refresh()

    def draw_dock(self, win, dock, focused, rtl=False):
        win.erase()
        h, w = win.getmaxyx()
        if dock.vertical:
            cell_h = max(1, h // max(1, dock.count_y))
            for rank in range(dock.count_y):
                item = dock.item_at(0, rank)
                label = item.title if item is not None else self.EMPTY_GLYPH
                self._put(win, rank * cell_h + cell_h // 2, 0, self.fit_label(label, w - 1), self._attr(item, focused))
        else:
            try:
                win.hline(0, 0, curses.ACS_HLINE, w)
            except curses.error:
                pass
            cell_w = max(1, w // max(1, dock.count_x))
            for rank in range(dock.count_x):
                item = dock.item_at(rank, 0)
                label = item.title if item is not None else self.EMPTY_GLYPH
                self._put(win, min(1, h - 1), self.column_origin(rank, dock.count_x, cell_w, rtl), self.fit_label(label, cell_w - 1), self._attr(item, focused))
        win.refresh()

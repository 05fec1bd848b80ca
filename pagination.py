class Paginator:
    """Horizontally scrolling strip of page containers."""

    def __init__(self, pages=None):
        self.pages = list(pages or [])
        self.page_index = 0
        self.last_snap: int | None = None
        self._clamp()

    def _clamp(self):
        max_page = max(0, len(self.pages) - 1)
        self.page_index = max(0, min(self.page_index, max_page))

    def current_page_index(self) -> int:
        return self.page_index

    def page_count(self) -> int:
        return len(self.pages)

    def page_at(self, i: int):
        if 0 <= i < len(self.pages):
            return self.pages[i]
        return None

    def current_page(self):
        return self.page_at(self.page_index)

    def snap_to_page(self, i: int):
        # no animation here; the target page becomes current immediately
        self.last_snap = i
        self.page_index = i
        self._clamp()

    def remove_page(self, i: int):
        if 0 <= i < len(self.pages):
            del self.pages[i]
            self._clamp()

    def page_of(self, item) -> int:
        for i, page in enumerate(self.pages):
            if page.index_of(item) >= 0:
                return i
        return -1

import logging

from focus_dispatch import FocusDispatcher
from focus_keys import KEY_DOWN
from occupancy_matrix import build_full
from resolution import NOOP

logger = logging.getLogger(__name__)


class FullPageDispatcher(FocusDispatcher):
    """Horizontally paged grids filled in reading order (all apps, folders)."""

    topology = "full_page"
    full_pages = True

    def _dispatch(self, element, key, orientation):
        page = self.host.current_container()
        icon_index = self.index_in(page, element)
        pager = self.host.pager()
        page_index = pager.current_page_index()
        page_count = pager.page_count()

        matrix = build_full(page)
        resolver = self.resolver_for(orientation)
        outcome = resolver.resolve(
            key,
            page.count_x,
            page.count_y,
            matrix,
            icon_index,
            page_index,
            page_count,
        )
        logger.debug("page %d slot %d -> %s", page_index, icon_index, outcome)
        if outcome == NOOP:
            self.handle_noop_key(key, element)
            return

        coordinator = self.coordinator_for(orientation, pager)
        landing = coordinator.land(
            outcome, key, matrix, icon_index, page, page_index, page_count
        )
        if not self.apply(landing, key):
            self.handle_noop_key(key, element)

    def handle_noop_key(self, key, element):
        """Hook for subclasses; a no-op key leaves focus where it is."""


class PagedFolderDispatcher(FullPageDispatcher):
    topology = "folder"

    def __init__(self, host, name_field, resolver=None, sound=None, strict: bool = False):
        super().__init__(host, resolver=resolver, sound=sound, strict=strict)
        self.name_field = name_field

    def handle_noop_key(self, key, element):
        if key == KEY_DOWN:
            self.focus(self.name_field, key)

import logging

from focus_dispatch import FocusDispatcher, dock_all_items_rank, side_dock_keys
from focus_keys import KEY_DOWN, KEY_UP, is_delete_key
from occupancy_matrix import (
    DockMergePolicy,
    MergeOrientation,
    build_merged,
    build_sparse,
)
from resolution import NOOP

logger = logging.getLogger(__name__)


class GridDispatcher(FocusDispatcher):
    """Icons on a workspace page, with the dock reachable from the grid's edge."""

    topology = "grid"

    def __init__(
        self,
        host,
        resolver=None,
        sound=None,
        removal=None,
        top_bar=None,
        strict: bool = False,
    ):
        super().__init__(host, resolver=resolver, sound=sound, strict=strict)
        self.removal = removal
        self.top_bar = top_bar

    def _merge_orientation(self, key, orientation):
        # only the key pointing at the dock pulls it into the matrix
        if key == KEY_DOWN and not orientation.vertical_bar:
            return MergeOrientation.HORIZONTAL
        if orientation.vertical_bar and key == side_dock_keys(orientation)[0]:
            return MergeOrientation.VERTICAL
        return None

    def _dispatch(self, element, key, orientation):
        grid = self.host.current_container()
        icon_index = self.index_in(grid, element)

        if is_delete_key(key):
            if self.removal is not None:
                self.removal.remove(element)
            return

        pager = self.host.pager()
        page_index = pager.current_page_index()
        page_count = pager.page_count()
        dock = self.host.dock_container()

        merge = self._merge_orientation(key, orientation) if dock is not None else None
        if merge is not None:
            policy = DockMergePolicy(merge, dock_all_items_rank(dock), include_all_items=False)
            matrix = build_merged(grid, dock, policy)
        else:
            matrix = build_sparse(grid)
            dock = None

        resolver = self.resolver_for(orientation)
        outcome = resolver.resolve(
            key,
            matrix.count_x,
            matrix.count_y,
            matrix,
            icon_index,
            page_index,
            page_count,
        )
        logger.debug("grid page %d slot %d -> %s", page_index, icon_index, outcome)

        if outcome == NOOP:
            if key == KEY_UP:
                self.focus(self.top_bar, key)
            return

        coordinator = self.coordinator_for(orientation, pager)
        landing = coordinator.land(
            outcome,
            key,
            matrix,
            icon_index,
            grid,
            page_index,
            page_count,
            dock=dock,
        )
        self.apply(landing, key)

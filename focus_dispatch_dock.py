import logging

from focus_dispatch import FocusDispatcher, dock_all_items_rank, side_dock_keys
from focus_keys import KEY_PAGE_DOWN, KEY_UP
from occupancy_matrix import DockMergePolicy, MergeOrientation, build_merged, build_sparse
from resolution import COLUMN_CROSSINGS, Sentinel, SentinelKind

logger = logging.getLogger(__name__)


class DockDispatcher(FocusDispatcher):
    """Items in the dock strip.

    The same handling applies whichever side of the screen the dock sits on
    so that navigation feels identical across rotations.
    """

    topology = "dock"

    def _dispatch(self, element, key, orientation):
        dock = self.host.dock_container()
        icon_index = self.index_in(dock, element)

        pager = self.host.pager()
        page_index = pager.current_page_index()
        page_count = pager.page_count()
        grid = pager.page_at(page_index)
        if grid is None:
            # pages can be mid creation/removal during drops and flings
            logger.debug("workspace page %d not available yet", page_index)
            return

        cell_x, cell_y = dock.position_of(element)
        all_items_rank = dock_all_items_rank(dock)
        into_dock, towards_grid = side_dock_keys(orientation)
        merged = False
        remapped = False

        if key == KEY_UP and not orientation.vertical_bar:
            policy = DockMergePolicy(
                MergeOrientation.HORIZONTAL,
                all_items_rank,
                include_all_items=cell_x == all_items_rank,
            )
            matrix = build_merged(grid, dock, policy)
            merged = True
        elif key == towards_grid and orientation.vertical_bar:
            policy = DockMergePolicy(
                MergeOrientation.VERTICAL,
                all_items_rank,
                include_all_items=cell_y == all_items_rank,
            )
            matrix = build_merged(grid, dock, policy)
            merged = True
        elif key == into_dock and orientation.vertical_bar:
            # TODO: confirm with product whether pressing outwards from a side dock should page or stay in the dock
            key = KEY_PAGE_DOWN
            remapped = True
            matrix = build_sparse(dock)
        else:
            matrix = build_sparse(dock)

        parent = dock
        merged_dock = None
        if merged:
            icon_index += grid.child_count()
            parent = grid
            merged_dock = dock

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
        logger.debug("dock slot %d on page %d -> %s", icon_index, page_index, outcome)

        if remapped and outcome != Sentinel(SentinelKind.NEXT_PAGE_FIRST):
            return
        if isinstance(outcome, Sentinel) and outcome.kind in COLUMN_CROSSINGS:
            return

        coordinator = self.coordinator_for(orientation, pager)
        landing = coordinator.land(
            outcome,
            key,
            matrix,
            icon_index,
            parent,
            page_index,
            page_count,
            dock=merged_dock,
        )
        self.apply(landing, key)

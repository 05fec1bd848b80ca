import logging
from dataclasses import dataclass
from typing import Any

from focus_keys import key_name
from occupancy_matrix import PIVOT, build_with_pivot_column, find_row
from resolution import COLUMN_CROSSINGS, Concrete, Sentinel, SentinelKind

logger = logging.getLogger(__name__)


@dataclass
class Landing:
    container: Any
    index: int
    page_index: int | None = None

    @property
    def element(self):
        return self.container.child_at(self.index)


def rebase(index, primary, dock=None):
    """Map an index from a merged matrix back onto the container that owns it."""
    primary_count = primary.child_count()
    if 0 <= index < primary_count:
        return Landing(primary, index)
    if dock is not None and primary_count <= index < primary_count + dock.child_count():
        return Landing(dock, index - primary_count)
    return None


def _last_landing(container, page_index=None):
    count = container.child_count()
    if count == 0:
        return None
    return Landing(container, count - 1, page_index)


def _first_landing(container, page_index=None):
    if container.child_count() == 0:
        return None
    return Landing(container, 0, page_index)


class PageBoundaryCoordinator:
    """Turns one resolution outcome into a landing slot, crossing pages if needed.

    Column crossings keep the current row: the neighbour page is rebuilt with
    a pivot column on the edge focus enters from and resolved a second time
    with the same key.
    """

    def __init__(self, resolver, pager, rtl: bool = False, full_pages: bool = False):
        self.resolver = resolver
        self.pager = pager
        self.rtl = rtl
        self.full_pages = full_pages

    def land(
        self,
        outcome,
        key,
        matrix,
        current_index,
        current_container,
        page_index,
        page_count,
        dock=None,
    ):
        if isinstance(outcome, Concrete):
            return rebase(outcome.index, current_container, dock)

        kind = outcome.kind
        if kind is SentinelKind.NO_OP:
            return None
        if kind is SentinelKind.CURRENT_PAGE_FIRST:
            return _first_landing(current_container)
        if kind is SentinelKind.CURRENT_PAGE_LAST:
            return _last_landing(current_container)

        target = page_index + outcome.page_delta
        neighbour = self._neighbour(target, page_count)
        if neighbour is None:
            logger.debug("%s: page %d does not exist, ignoring", outcome, target)
            return None

        if kind in COLUMN_CROSSINGS:
            row = find_row(matrix, current_index)
            if row < 0:
                logger.debug("slot %s has no row in the current matrix", current_index)
                return None
            # a broken neighbour layout raises before the pager moves
            landing = self._land_in_row(outcome, key, neighbour, row, target, page_count)
            self.pager.snap_to_page(target)
            return landing

        self.pager.snap_to_page(target)
        if kind is SentinelKind.PREVIOUS_PAGE_LAST:
            return _last_landing(neighbour, target)
        return _first_landing(neighbour, target)

    def _neighbour(self, target, page_count):
        if not 0 <= target < page_count:
            return None
        return self.pager.page_at(target)

    def _pivot_column(self, kind, neighbour):
        entering_right = kind in (
            SentinelKind.PREVIOUS_PAGE_RIGHT_COLUMN,
            SentinelKind.NEXT_PAGE_RIGHT_COLUMN,
        )
        # logical column 0 is the visual left edge unless the layout is RTL
        if entering_right != self.rtl:
            return neighbour.count_x
        return -1

    def _land_in_row(self, outcome: Sentinel, key, neighbour, row, target, page_count):
        row = min(row, neighbour.count_y - 1)
        pivot_x = self._pivot_column(outcome.kind, neighbour)
        matrix = build_with_pivot_column(neighbour, pivot_x, row, full=self.full_pages)
        pivot = (max(pivot_x, 0), row)
        second = self.resolver.resolve(
            key,
            neighbour.count_x + 1,
            neighbour.count_y,
            matrix,
            PIVOT,
            target,
            page_count,
            pivot=pivot,
        )
        logger.debug(
            "%s on page %d row %d re-resolved %s -> %s",
            outcome,
            target,
            row,
            key_name(key),
            second,
        )
        if isinstance(second, Concrete) and 0 <= second.index < neighbour.child_count():
            return Landing(neighbour, second.index, target)
        return None

import logging

from focus_keys import (
    KEY_DOWN,
    KEY_END,
    KEY_HOME,
    KEY_LEFT,
    KEY_PAGE_DOWN,
    KEY_PAGE_UP,
    KEY_RIGHT,
    KEY_UP,
    key_name,
)
from occupancy_matrix import PIVOT, OccupancyMatrix
from resolution import NOOP, Concrete, Sentinel, SentinelKind

logger = logging.getLogger(__name__)


def _spread(origin: int, limit: int):
    """origin, origin-1, origin+1, origin-2, ... clipped to [0, limit)."""
    if 0 <= origin < limit:
        yield origin
    for d in range(1, limit + 1):
        lo, hi = origin - d, origin + d
        if lo < 0 and hi >= limit:
            return
        if 0 <= lo < limit:
            yield lo
        if 0 <= hi < limit:
            yield hi


class DirectionalResolver:
    """Deterministic nearest-cell search over an occupancy matrix."""

    def __init__(self, rtl: bool = False):
        self.rtl = rtl

    def resolve(
        self,
        key,
        count_x,
        count_y,
        matrix: OccupancyMatrix,
        current_index,
        page_index,
        page_count,
        pivot=None,
    ):
        if key == KEY_HOME:
            return Sentinel(SentinelKind.CURRENT_PAGE_FIRST)
        if key == KEY_END:
            return Sentinel(SentinelKind.CURRENT_PAGE_LAST)
        if key == KEY_PAGE_UP:
            if page_index > 0:
                return Sentinel(SentinelKind.PREVIOUS_PAGE_FIRST)
            return Sentinel(SentinelKind.CURRENT_PAGE_FIRST)
        if key == KEY_PAGE_DOWN:
            if page_index < page_count - 1:
                return Sentinel(SentinelKind.NEXT_PAGE_FIRST)
            return Sentinel(SentinelKind.CURRENT_PAGE_LAST)
        if key not in (KEY_LEFT, KEY_RIGHT, KEY_UP, KEY_DOWN):
            return NOOP

        origin = None
        if current_index != PIVOT:
            origin = matrix.find_cell(current_index)
        if origin is None:
            origin = pivot
        if origin is None:
            logger.debug("slot %s not in matrix and no pivot given", current_index)
            return NOOP

        cnt_x = min(count_x, matrix.count_x)
        cnt_y = min(count_y, matrix.count_y)

        if key in (KEY_LEFT, KEY_RIGHT):
            step = -1 if key == KEY_LEFT else 1
            if self.rtl:
                step = -step
            found = self._search_horizontal(matrix, origin, step, cnt_x, cnt_y)
            if found is not None:
                return Concrete(found)
            return self._horizontal_edge(key, page_index, page_count)

        step = -1 if key == KEY_UP else 1
        found = self._search_vertical(matrix, origin, step, cnt_x, cnt_y)
        if found is not None:
            return Concrete(found)
        logger.debug("%s ran off the matrix edge", key_name(key))
        return NOOP

    def _horizontal_edge(self, key, page_index, page_count):
        has_prev = page_index > 0
        has_next = page_index < page_count - 1
        if key == KEY_LEFT:
            if not self.rtl and has_prev:
                return Sentinel(SentinelKind.PREVIOUS_PAGE_RIGHT_COLUMN)
            if self.rtl and has_next:
                return Sentinel(SentinelKind.NEXT_PAGE_RIGHT_COLUMN)
        else:
            if not self.rtl and has_next:
                return Sentinel(SentinelKind.NEXT_PAGE_LEFT_COLUMN)
            if self.rtl and has_prev:
                return Sentinel(SentinelKind.PREVIOUS_PAGE_LEFT_COLUMN)
        return NOOP

    @staticmethod
    def _search_horizontal(matrix, origin, step, cnt_x, cnt_y):
        x0, y0 = origin
        x = x0 + step
        while 0 <= x < cnt_x:
            if matrix.is_occupied(x, y0):
                return matrix[x, y0]
            x += step
        x = x0 + step
        while 0 <= x < cnt_x:
            for y in _spread(y0, cnt_y):
                if y != y0 and matrix.is_occupied(x, y):
                    return matrix[x, y]
            x += step
        return None

    @staticmethod
    def _search_vertical(matrix, origin, step, cnt_x, cnt_y):
        x0, y0 = origin
        y = y0 + step
        while 0 <= y < cnt_y:
            if matrix.is_occupied(x0, y):
                return matrix[x0, y]
            y += step
        y = y0 + step
        while 0 <= y < cnt_y:
            for x in _spread(x0, cnt_x):
                if x != x0 and matrix.is_occupied(x, y):
                    return matrix[x, y]
            y += step
        return None

from dataclasses import dataclass
from enum import Enum


class SentinelKind(Enum):
    NO_OP = "noop"
    CURRENT_PAGE_FIRST = "current_page_first"
    CURRENT_PAGE_LAST = "current_page_last"
    PREVIOUS_PAGE_FIRST = "previous_page_first"
    PREVIOUS_PAGE_LAST = "previous_page_last"
    NEXT_PAGE_FIRST = "next_page_first"
    PREVIOUS_PAGE_LEFT_COLUMN = "previous_page_left_column"
    PREVIOUS_PAGE_RIGHT_COLUMN = "previous_page_right_column"
    NEXT_PAGE_LEFT_COLUMN = "next_page_left_column"
    NEXT_PAGE_RIGHT_COLUMN = "next_page_right_column"


COLUMN_CROSSINGS = frozenset(
    {
        SentinelKind.PREVIOUS_PAGE_LEFT_COLUMN,
        SentinelKind.PREVIOUS_PAGE_RIGHT_COLUMN,
        SentinelKind.NEXT_PAGE_LEFT_COLUMN,
        SentinelKind.NEXT_PAGE_RIGHT_COLUMN,
    }
)

PAGE_JUMPS = frozenset(
    {
        SentinelKind.PREVIOUS_PAGE_FIRST,
        SentinelKind.PREVIOUS_PAGE_LAST,
        SentinelKind.NEXT_PAGE_FIRST,
    }
)


@dataclass(frozen=True)
class Concrete:
    index: int

    def __str__(self):
        return f"Concrete({self.index})"


@dataclass(frozen=True)
class Sentinel:
    kind: SentinelKind

    def __str__(self):
        return f"Sentinel({self.kind.value})"

    @property
    def is_noop(self) -> bool:
        return self.kind is SentinelKind.NO_OP

    @property
    def page_delta(self) -> int:
        """-1, 0 or +1: which page the sentinel points at."""
        if self.kind in (
            SentinelKind.PREVIOUS_PAGE_FIRST,
            SentinelKind.PREVIOUS_PAGE_LAST,
            SentinelKind.PREVIOUS_PAGE_LEFT_COLUMN,
            SentinelKind.PREVIOUS_PAGE_RIGHT_COLUMN,
        ):
            return -1
        if self.kind in (
            SentinelKind.NEXT_PAGE_FIRST,
            SentinelKind.NEXT_PAGE_LEFT_COLUMN,
            SentinelKind.NEXT_PAGE_RIGHT_COLUMN,
        ):
            return 1
        return 0


ResolutionOutcome = Concrete | Sentinel

NOOP = Sentinel(SentinelKind.NO_OP)

"""Collaborator interfaces the focus dispatchers are written against.

The embedding UI hands a NavigationHost to a dispatcher instead of the
dispatcher walking a widget tree to discover pages, dock and pager.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Protocol, Sequence, Tuple

from focus_keys import SoundCue


class KeyPhase(Enum):
    PRESS = "press"
    RELEASE = "release"


@dataclass(frozen=True)
class LayoutOrientation:
    vertical_bar: bool = False
    rtl: bool = False


class FocusTarget(Protocol):
    def request_focus(self) -> None: ...


class Container(Protocol):
    count_x: int
    count_y: int

    def children(self) -> Sequence[Any]: ...

    def child_at(self, i: int) -> Any: ...

    def child_count(self) -> int: ...

    def index_of(self, child: Any) -> int: ...

    def position_of(self, child: Any) -> Tuple[int, int]: ...


class Pager(Protocol):
    def current_page_index(self) -> int: ...

    def page_count(self) -> int: ...

    def page_at(self, i: int) -> Optional[Container]: ...

    def snap_to_page(self, i: int) -> None: ...


class SoundFeedback(Protocol):
    def play_directional(self, cue: SoundCue) -> None: ...


class ItemRemoval(Protocol):
    def remove(self, element: Any) -> None: ...


class NavigationHost(Protocol):
    def current_container(self) -> Optional[Container]: ...

    def dock_container(self) -> Optional[Container]: ...

    def pager(self) -> Pager: ...

import logging

from directional_resolver import DirectionalResolver
from focus_keys import KEY_LEFT, KEY_RIGHT, key_name, should_consume, sound_cue_for
from navigation_host import KeyPhase, LayoutOrientation
from occupancy_matrix import InvalidLayout
from page_coordinator import PageBoundaryCoordinator

logger = logging.getLogger(__name__)


def dock_all_items_rank(dock) -> int:
    return getattr(dock, "all_items_rank", -1)


def side_dock_keys(orientation):
    """(into the side dock, out of it towards the grid) for a vertical-bar layout.

    The side dock sits after the grid's last logical column, which is the
    visual right edge in LTR and the visual left edge in RTL.
    """
    if orientation.rtl:
        return KEY_LEFT, KEY_RIGHT
    return KEY_RIGHT, KEY_LEFT


class FocusDispatcher:
    """Shared key handling for every container topology.

    Subclasses implement _dispatch(); this class owns the press/release
    contract, absorbs InvalidLayout and applies the landing (focus + cue).
    """

    topology = "base"
    full_pages = False

    def __init__(self, host, resolver=None, sound=None, strict: bool = False):
        self.host = host
        self.resolver = resolver
        self.sound = sound
        self.strict = strict

    def on_key(self, element, key, phase=KeyPhase.PRESS, orientation=None) -> bool:
        consume = should_consume(key)
        if phase is KeyPhase.RELEASE or not consume:
            return consume
        orientation = orientation or LayoutOrientation()
        logger.debug(
            "%s key=%s vertical_bar=%s rtl=%s",
            self.topology,
            key_name(key),
            orientation.vertical_bar,
            orientation.rtl,
        )
        try:
            self._dispatch(element, key, orientation)
        except InvalidLayout as exc:
            if self.strict:
                raise
            logger.warning("%s: ignoring %s: %s", self.topology, key_name(key), exc)
            return False
        return consume

    def _dispatch(self, element, key, orientation):
        raise NotImplementedError

    # ---- helpers ----

    def resolver_for(self, orientation):
        if self.resolver is not None:
            return self.resolver
        return DirectionalResolver(rtl=orientation.rtl)

    def coordinator_for(self, orientation, pager):
        return PageBoundaryCoordinator(
            self.resolver_for(orientation),
            pager,
            rtl=orientation.rtl,
            full_pages=self.full_pages,
        )

    @staticmethod
    def index_in(container, element) -> int:
        if container is None:
            raise InvalidLayout("focused element has no container")
        index = container.index_of(element)
        if index < 0:
            raise InvalidLayout("focused element is not a child of its container")
        return index

    def play_cue(self, key):
        cue = sound_cue_for(key)
        if cue is not None and self.sound is not None:
            self.sound.play_directional(cue)

    def focus(self, target, key) -> bool:
        if target is None:
            return False
        target.request_focus()
        self.play_cue(key)
        return True

    def apply(self, landing, key) -> bool:
        if landing is None:
            return False
        return self.focus(landing.element, key)

import curses
import logging
import time

from focus_dispatch_dock import DockDispatcher
from focus_dispatch_grid import GridDispatcher
from focus_dispatch_pages import FullPageDispatcher, PagedFolderDispatcher
from focus_keys import KEY_DOWN, KEY_UP, key_name, translate_vi_key
from launcher_pane import LauncherPane
from layout_loader import layout_to_frame
from navigation_host import KeyPhase, LayoutOrientation
from screen_layout import ScreenLayout
from sound_feedback import TerminalSound
from status_bar import render_status
from workspace_model import PagedHost, WorkspaceHost, WorkspaceRemoval

logger = logging.getLogger(__name__)

ENTER_KEYS = (10, 13, curses.KEY_ENTER)
ESC = 27


class Orchestrator:
    def __init__(self, stdscr, model, cfg, handler=None):
        self.stdscr = stdscr
        curses.curs_set(0)
        curses.raw()
        self.stdscr.nodelay(False)
        self.stdscr.timeout(100)
        self.stdscr.keypad(True)

        self.model = model
        self.cfg = cfg
        self.handler = handler
        self.strict = bool(cfg.get("STRICT_LAYOUT"))
        self.model.set_orientation(
            LayoutOrientation(vertical_bar=bool(cfg.get("VERTICAL_BAR")), rtl=bool(cfg.get("RTL")))
        )

        self.layout = ScreenLayout(
            stdscr,
            vertical_bar=self.model.orientation.vertical_bar,
            rtl=self.model.orientation.rtl,
        )
        self.pane = LauncherPane()
        self.sound = TerminalSound(enabled=cfg.get("SOUND") == "bell")

        workspace_host = WorkspaceHost(model.workspace, model.dock)
        self.grid_dispatcher = GridDispatcher(
            workspace_host,
            sound=self.sound,
            removal=WorkspaceRemoval(model.workspace, on_removed=self._after_removal),
            top_bar=model.search_bar,
            strict=self.strict,
        )
        self.dock_dispatcher = DockDispatcher(workspace_host, sound=self.sound, strict=self.strict)
        self.all_apps_dispatcher = FullPageDispatcher(
            PagedHost(model.all_apps), sound=self.sound, strict=self.strict
        )

        self.view = "workspace"  # workspace | all_apps | folder
        self.open_folder = None
        self.folder_dispatcher = None
        self.exit_requested = False

        # ---- status ----
        self.status_msg = None
        self.status_msg_until = 0

        first = model.first_workspace_item()
        (first or model.search_bar).request_focus()

    # ---------------- helpers ----------------

    def _set_status(self, msg, seconds=3):
        self.status_msg = msg
        self.status_msg_until = time.time() + seconds

    def _after_removal(self, element, page_index):
        self._set_status(f"Removed {element.title}", 3)
        workspace = self.model.workspace
        page = workspace.page_at(page_index)
        if page is not None and page.child_count() == 0 and workspace.page_count() > 1:
            workspace.remove_page(page_index)
            logger.info("dropped empty workspace page %d", page_index)
            page = workspace.current_page()
        if page is not None and page.child_count() > 0:
            page.child_at(0).request_focus()
        else:
            self.model.search_bar.request_focus()

    def _rebuild_layout(self):
        self.layout = ScreenLayout(
            self.stdscr,
            vertical_bar=self.model.orientation.vertical_bar,
            rtl=self.model.orientation.rtl,
        )
        self.stdscr.clear()
        self.stdscr.refresh()

    def _toggle_vertical_bar(self):
        current = self.model.orientation
        self.model.set_orientation(
            LayoutOrientation(vertical_bar=not current.vertical_bar, rtl=current.rtl)
        )
        self._rebuild_layout()
        self._set_status("Side dock" if self.model.orientation.vertical_bar else "Bottom dock", 2)

    def _open_all_apps(self):
        self.view = "all_apps"
        self.model.all_apps.snap_to_page(0)
        page = self.model.all_apps.current_page()
        if page is not None and page.child_count() > 0:
            page.child_at(0).request_focus()

    def _open_folder(self, folder):
        self.view = "folder"
        self.open_folder = folder
        self.folder_dispatcher = PagedFolderDispatcher(
            PagedHost(folder.pager),
            folder.name_field,
            sound=self.sound,
            strict=self.strict,
        )
        folder.pager.snap_to_page(0)
        page = folder.pager.current_page()
        if page is not None and page.child_count() > 0:
            page.child_at(0).request_focus()
        else:
            folder.name_field.request_focus()

    def _close_sheet(self):
        self.view = "workspace"
        self.open_folder = None
        self.folder_dispatcher = None
        first = self.model.first_workspace_item()
        (first or self.model.search_bar).request_focus()

    def _save_layout(self):
        if self.handler is None:
            self._set_status("No layout file to save to", 3)
            return
        try:
            self.handler.save(layout_to_frame(self.model))
            self._set_status(f"Saved {self.handler.path}", 3)
        except Exception as e:
            logger.exception("saving layout failed")
            self._set_status(f"Save failed: {e}"[: self.layout.W - 2], 4)

    # ---------------- key routing ----------------

    def dispatch_key(self, key) -> bool:
        focused = self.model.tracker.focused
        where, page_index = self.model.locate(focused)
        orientation = self.model.orientation

        if where == "workspace" and self.view == "workspace":
            self.model.workspace.page_index = page_index
            return self.grid_dispatcher.on_key(focused, key, KeyPhase.PRESS, orientation)
        if where == "dock" and self.view == "workspace":
            return self.dock_dispatcher.on_key(focused, key, KeyPhase.PRESS, orientation)
        if where == "all_apps" and self.view == "all_apps":
            self.model.all_apps.page_index = page_index
            return self.all_apps_dispatcher.on_key(focused, key, KeyPhase.PRESS, orientation)
        if where == "folder" and self.folder_dispatcher is not None:
            self.open_folder.pager.page_index = page_index
            return self.folder_dispatcher.on_key(focused, key, KeyPhase.PRESS, orientation)
        if where == "search" and key == KEY_DOWN:
            first = self.model.first_workspace_item()
            if first is not None:
                first.request_focus()
            return True
        if where == "folder_name" and key == KEY_UP and self.open_folder is not None:
            page = self.open_folder.pager.current_page()
            if page is not None and page.child_count() > 0:
                page.child_at(page.child_count() - 1).request_focus()
            return True
        return False

    def handle_key(self, ch):
        key = translate_vi_key(ch)
        if self.dispatch_key(key):
            logger.debug("%s consumed", key_name(key))
            return

        focused = self.model.tracker.focused
        if ch == ord("a") and self.view == "workspace":
            self._open_all_apps()
        elif ch == ord("a") and self.view == "all_apps":
            self._close_sheet()
        elif ch in ENTER_KEYS:
            kind = getattr(focused, "kind", None)
            if kind == "folder" and focused.folder is not None:
                self._open_folder(focused.folder)
            elif kind == "all_items":
                self._open_all_apps()
            elif focused is not None:
                self._set_status(f"Launch {focused.title}", 2)
        elif ch == ESC and self.view != "workspace":
            self._close_sheet()
        elif ch == ord("v"):
            self._toggle_vertical_bar()
        elif ch == ord("q"):
            self.exit_requested = True

    # ---------------- UI ----------------

    def redraw(self):
        focused = self.model.tracker.focused
        rtl = self.model.orientation.rtl
        self.pane.draw_search_bar(self.layout.search_win, self.model.search_bar, focused)

        if self.view == "workspace":
            pager = self.model.workspace
            self.pane.draw_page(self.layout.workspace_win, pager, focused, rtl=rtl)
            self.pane.draw_dock(self.layout.dock_win, self.model.dock, focused, rtl=rtl)
        elif self.view == "all_apps":
            pager = self.model.all_apps
            self.pane.draw_page(self.layout.sheet_win, pager, focused, title=" All apps", rtl=rtl)
        else:
            pager = self.open_folder.pager
            name = self.open_folder.name_field
            marker = "▸ " if focused is name else "  "
            self.pane.draw_page(self.layout.sheet_win, pager, focused, title=f"{marker}{name.text}", rtl=rtl)

        sw = self.layout.status_win
        sw.erase()
        _, w = sw.getmaxyx()
        context = {
            "status_msg": self.status_msg,
            "status_until": self.status_msg_until,
            "view": self.view,
            "page_index": pager.current_page_index(),
            "page_count": pager.page_count(),
            "focused_title": getattr(focused, "title", None),
            "last_cue": self.sound.last_cue,
            "vertical_bar": self.model.orientation.vertical_bar,
        }
        try:
            sw.addnstr(0, 0, render_status(context, w), max(0, w - 1))
        except curses.error:
            pass
        sw.refresh()

    # ---------------- main loop ----------------

    def run(self):
        self.stdscr.clear()
        self.stdscr.refresh()
        self.redraw()

        while True:
            ch = self.stdscr.getch()

            if ch in (3, 24):
                break

            if ch == -1:
                self.redraw()
                continue

            if ch == curses.KEY_RESIZE:
                self._rebuild_layout()
                self.redraw()
                continue

            if ch == 19:  # Ctrl+S
                self._save_layout()
                self.redraw()
                continue

            self.handle_key(ch)
            self.redraw()

            if self.exit_requested:
                break

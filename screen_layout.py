import curses


class ScreenLayout:
    DOCK_H = 2
    DOCK_W = 14

    def __init__(self, stdscr, vertical_bar=False, rtl=False):
        self.stdscr = stdscr
        self.vertical_bar = vertical_bar
        self.rtl = rtl
        self.H, self.W = stdscr.getmaxyx()

        # layout: search bar (1 line), workspace, dock (bottom strip or side column), status bar (1 line)
        self.search_h = 1
        self.status_h = 1

        body_h = max(1, self.H - self.search_h - self.status_h)
        self.search_win = curses.newwin(self.search_h, self.W, 0, 0)
        self.search_win.leaveok(True)

        if vertical_bar:
            dock_w = min(self.DOCK_W, max(1, self.W // 4))
            grid_w = max(1, self.W - dock_w)
            self.workspace_h = body_h
            # the side dock follows the grid's last column: right in LTR, left in RTL
            dock_x, grid_x = (0, dock_w) if rtl else (grid_w, 0)
            self.workspace_win = curses.newwin(body_h, grid_w, self.search_h, grid_x)
            self.dock_win = curses.newwin(body_h, dock_w, self.search_h, dock_x)
        else:
            dock_h = min(self.DOCK_H, max(1, body_h - 1))
            self.workspace_h = max(1, body_h - dock_h)
            self.workspace_win = curses.newwin(self.workspace_h, self.W, self.search_h, 0)
            self.dock_win = curses.newwin(dock_h, self.W, self.search_h + self.workspace_h, 0)
        self.workspace_win.leaveok(True)
        self.dock_win.leaveok(True)

        # all-apps and folders cover the workspace and dock area
        self.sheet_win = curses.newwin(body_h, self.W, self.search_h, 0)
        self.sheet_win.leaveok(True)

        self.status_win = curses.newwin(self.status_h, self.W, self.search_h + body_h, 0)
        self.status_win.leaveok(True)

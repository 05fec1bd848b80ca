import curses


class TerminalSound:
    """Directional cues for a terminal: a bell, plus the last cue for the status bar."""

    def __init__(self, enabled=True):
        self.enabled = enabled
        self.last_cue = None

    def play_directional(self, cue):
        self.last_cue = cue
        if not self.enabled:
            return
        try:
            curses.beep()
        except curses.error:
            pass

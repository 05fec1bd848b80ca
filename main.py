import sys
import os
import curses
import logging

from config_paths import LOG_PATH, ensure_config_dirs, load_config
from default_layout import DefaultLayoutInitializer
from layout_loader import LayoutFileHandler, build_launcher_model
from logging_setup import configure_logging

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")
from orchestrator import Orchestrator

try:
    from _version import __version__
except Exception:
    __version__ = "0.0.0"

logger = logging.getLogger(__name__)

USAGE = (
    "gridfocus - keyboard focus navigation for a launcher home screen\n\n"
    "Usage:\n  gridfocus [layout.csv|layout.parquet|layout.xlsx]\n  gridfocus -v\n\n"
    "Keys:\n  arrows / hjkl  move focus\n  PgUp/PgDn      change page\n"
    "  Home/End       first/last item on the page\n  Del            remove a workspace item\n"
    "  Enter          open folder or all apps\n  a              all apps\n"
    "  Esc            close sheet\n  v              toggle side dock\n"
    "  Ctrl+S         save layout\n  q / Ctrl+X     quit\n"
)


def parse_args(args):
    """Return (action, path) where action is 'version', 'help' or 'run'."""
    if "-v" in args or "-V" in args:
        return "version", None
    if "-h" in args or "--help" in args:
        return "help", None
    paths = [a for a in args if not a.startswith("-")]
    if len(paths) > 1:
        return "help", None
    return "run", paths[0] if paths else None


def main():
    action, path = parse_args(sys.argv[1:])

    if action == "version":
        print(__version__)
        return

    if action == "help":
        print(USAGE)
        return

    ensure_config_dirs()
    cfg = load_config()
    configure_logging(LOG_PATH, cfg["LOG_LEVEL"])

    handler = LayoutFileHandler(path) if path else None
    df = handler.load_or_create() if handler else DefaultLayoutInitializer().create()
    model = build_launcher_model(df, cfg)
    logger.info(
        "loaded %d workspace pages, %d dock items, %d all-apps pages",
        model.workspace.page_count(),
        model.dock.child_count(),
        model.all_apps.page_count(),
    )

    def curses_main(stdscr):
        Orchestrator(stdscr, model, cfg, handler).run()

    curses.wrapper(curses_main)


if __name__ == "__main__":
    main()

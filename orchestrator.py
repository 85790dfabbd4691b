import curses
import logging

import presenter
from list_editor import ListEditor, QUIT
from screen_painter import ScreenPainter


logger = logging.getLogger(__name__)


class Orchestrator:
    """Owns the main loop: one key in, one state change, one frame out."""

    def __init__(self, stdscr, app_state, theme, editor=None, painter=None):
        self.stdscr = stdscr
        self.state = app_state
        self.theme = theme
        self.editor = editor or ListEditor(app_state)
        self.painter = painter or ScreenPainter(stdscr)

        try:
            curses.curs_set(0)
            curses.raw()
        except curses.error:
            pass
        self.stdscr.keypad(True)

        h, w = self.stdscr.getmaxyx()
        self.editor.handle_resize(h, w)

    def read_key(self):
        """Next key as an int code, or a str for a character outside ASCII."""
        try:
            key = self.stdscr.get_wch()
        except curses.error:
            return -1
        if isinstance(key, str) and ord(key) < 128:
            return ord(key)
        return key

    def redraw(self):
        self.painter.paint(presenter.render(self.state, self.theme))

    def run(self):
        self.stdscr.clear()
        self.stdscr.refresh()
        self.redraw()

        while True:
            ch = self.read_key()

            if ch == -1:
                continue

            if ch == curses.KEY_RESIZE:
                h, w = self.stdscr.getmaxyx()
                self.editor.handle_resize(h, w)
                self.redraw()
                continue

            if self.editor.handle_key(ch) == QUIT:
                logger.info("Quit requested")
                break

            self.redraw()

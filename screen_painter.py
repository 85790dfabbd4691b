import curses

import presenter


class ScreenPainter:
    PAIR_IMPORTANT = 1
    PAIR_ERROR = 2

    def __init__(self, win):
        self.win = win
        self.attrs = {
            presenter.STYLE_NORMAL: curses.A_NORMAL,
            presenter.STYLE_CURSOR: curses.A_BOLD,
            presenter.STYLE_CHECKED: curses.A_DIM,
            presenter.STYLE_IMPORTANT: curses.A_BOLD,
            presenter.STYLE_TITLE: curses.A_BOLD | curses.A_UNDERLINE,
            presenter.STYLE_HELP: curses.A_DIM,
            presenter.STYLE_BORDER: curses.A_NORMAL,
            presenter.STYLE_CARET: curses.A_REVERSE,
            presenter.STYLE_STATUS: curses.A_BOLD,
            presenter.STYLE_ERROR: curses.A_BOLD | curses.A_STANDOUT,
        }
        try:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(self.PAIR_IMPORTANT, curses.COLOR_YELLOW, -1)
            curses.init_pair(self.PAIR_ERROR, curses.COLOR_RED, -1)
            self.attrs[presenter.STYLE_IMPORTANT] = (
                curses.color_pair(self.PAIR_IMPORTANT) | curses.A_BOLD
            )
            self.attrs[presenter.STYLE_ERROR] = (
                curses.color_pair(self.PAIR_ERROR) | curses.A_BOLD
            )
        except curses.error:
            pass

    def attr_for(self, style):
        return self.attrs.get(style, curses.A_NORMAL)

    def paint(self, frame):
        win = self.win
        win.erase()
        h, w = win.getmaxyx()

        for y, line in enumerate(frame[:h]):
            x = 0
            for text, style in line:
                # last column is left empty so addnstr never scrolls the window
                room = w - 1 - x
                if room <= 0:
                    break
                if text:
                    try:
                        win.addnstr(y, x, text, room, self.attr_for(style))
                    except curses.error:
                        pass
                x += len(text)

        win.refresh()

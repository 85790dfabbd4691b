import curses
import unicodedata


def is_single_cell(ch):
    """True for a printable character that occupies exactly one terminal column."""
    return (
        ch.isprintable()
        and not unicodedata.combining(ch)
        and unicodedata.east_asian_width(ch) not in ("W", "F")
    )


class TextPrompt:
    """Single-line draft buffer with a caret. Enter/Esc belong to the caller."""

    def __init__(self, text=""):
        self.buffer = ""
        self.cursor = 0
        self.set_buffer(text)

    # ---------- state helpers ----------
    def reset(self):
        self.buffer = ""
        self.cursor = 0

    def get_buffer(self):
        return self.buffer

    def set_buffer(self, text):
        self.buffer = text or ""
        self.cursor = len(self.buffer)

    def window(self, width):
        """Return (visible_text, caret_col) for a field ``width`` columns wide."""
        width = max(1, width)
        start = max(0, self.cursor - (width - 1))
        return self.buffer[start : start + width], self.cursor - start

    # ---------- word helpers ----------
    def _word_boundary_left(self):
        i = self.cursor
        while i > 0 and self.buffer[i - 1].isspace():
            i -= 1
        while i > 0 and not self.buffer[i - 1].isspace():
            i -= 1
        return i

    # ---------- input handling ----------
    def handle_key(self, ch):
        if ch == 23:  # Ctrl+W, delete word backward
            start = self._word_boundary_left()
            self.buffer = self.buffer[:start] + self.buffer[self.cursor :]
            self.cursor = start
            return

        if ch == 21:  # Ctrl+U, kill to line start
            self.buffer = self.buffer[self.cursor :]
            self.cursor = 0
            return

        if ch in (curses.KEY_BACKSPACE, 127, 8):
            if self.cursor > 0:
                self.buffer = self.buffer[: self.cursor - 1] + self.buffer[self.cursor :]
                self.cursor -= 1
            return

        if ch in (curses.KEY_DC, 4):  # Delete or Ctrl+D
            self.buffer = self.buffer[: self.cursor] + self.buffer[self.cursor + 1 :]
            return

        if ch == curses.KEY_LEFT:
            self.cursor = max(0, self.cursor - 1)
            return

        if ch == curses.KEY_RIGHT:
            self.cursor = min(len(self.buffer), self.cursor + 1)
            return

        if ch in (curses.KEY_HOME, 1):  # Home or Ctrl+A
            self.cursor = 0
            return

        if ch in (curses.KEY_END, 5):  # End or Ctrl+E
            self.cursor = len(self.buffer)
            return

        # get_wch hands non-ASCII characters over as str
        if isinstance(ch, str):
            if is_single_cell(ch):
                self._insert(ch)
            return

        if 32 <= ch <= 126:
            self._insert(chr(ch))

    def _insert(self, text):
        self.buffer = self.buffer[: self.cursor] + text + self.buffer[self.cursor :]
        self.cursor += len(text)

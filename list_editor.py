import curses
import logging

from app_state import Mode
from item_store import CreateFileIOError, ItemStore, SaveIOError


logger = logging.getLogger(__name__)

KEY_CTRL_C = 3
KEY_TAB = 9
KEY_ESC = 27
KEYS_ENTER = (10, 13, curses.KEY_ENTER)

QUIT = "quit"


class ListEditor:
    """Maps key events to list mutations for the active mode; saves after each one."""

    def __init__(self, state, store_factory=ItemStore):
        self.state = state
        self.store_factory = store_factory
        self._handlers = {
            Mode.BROWSING: self._handle_browsing,
            Mode.CREATING_ITEM: self._handle_creating_item,
            Mode.CREATING_FILE: self._handle_creating_file,
        }

    # ---------- helpers ----------
    def _save(self):
        state = self.state
        try:
            state.store.save(state.model.items)
        except SaveIOError as e:
            logger.error("Save failed: %s", e)
            state.set_status(f"Save failed: {e}", error=True)
            return False
        return True

    def _enter_browsing(self):
        self.state.mode = Mode.BROWSING
        self.state.item_draft.reset()
        self.state.file_draft.reset()
        self.state.draft_important = False

    # ---------- public API ----------
    def handle_resize(self, height, width):
        self.state.height = max(0, height)
        self.state.width = max(0, width)

    def handle_key(self, ch):
        if ch == -1:
            return None
        if ch == curses.KEY_RESIZE:
            return None

        self.state.clear_status()

        if ch == KEY_CTRL_C:
            return QUIT

        return self._handlers[self.state.mode](ch)

    # ---------- browsing ----------
    def _handle_browsing(self, ch):
        state = self.state
        model = state.model

        if ch == ord("q"):
            return QUIT

        if ch in (ord("k"), curses.KEY_UP):
            model.move_cursor(-1)
        elif ch in (ord("j"), curses.KEY_DOWN):
            model.move_cursor(1)
        elif ch in (ord("g"), curses.KEY_HOME):
            model.move_to(0)
        elif ch in (ord("G"), curses.KEY_END):
            model.move_to(len(model) - 1)
        elif ch == ord(" "):
            if model.toggle_checked(model.cursor):
                self._save()
        elif ch == ord("i"):
            if model.toggle_important(model.cursor):
                self._save()
        elif ch in (ord("d"), curses.KEY_DC):
            name = model.current_name()
            if model.remove(model.cursor):
                if self._save():
                    state.set_status(f"Removed '{name}'")
        elif ch == ord("a"):
            state.item_draft.reset()
            state.draft_important = False
            state.mode = Mode.CREATING_ITEM
        elif ch == ord("n"):
            state.file_draft.reset()
            state.mode = Mode.CREATING_FILE
        return None

    # ---------- creating an item ----------
    def _handle_creating_item(self, ch):
        state = self.state

        if ch in KEYS_ENTER:
            name = state.item_draft.get_buffer().strip()
            if name and state.model.insert(name, state.draft_important):
                if self._save():
                    state.set_status(f"Added '{name}'")
            self._enter_browsing()
            return None

        if ch == KEY_ESC:
            self._enter_browsing()
            return None

        if ch == KEY_TAB:
            state.draft_important = not state.draft_important
            return None

        state.item_draft.handle_key(ch)
        return None

    # ---------- creating a file ----------
    def _handle_creating_file(self, ch):
        state = self.state

        if ch in KEYS_ENTER:
            path = state.file_draft.get_buffer().strip()
            if not path:
                self._enter_browsing()
                return None
            store = self.store_factory(path)
            try:
                items = store.create(state.seed_item)
            except CreateFileIOError as e:
                logger.error("Could not create %s: %s", path, e)
                state.set_status(f"Create failed: {e}", error=True)
                return None
            state.switch_file(store, items)
            logger.info("Switched to %s", path)
            state.set_status(f"Now editing {path}")
            self._enter_browsing()
            return None

        if ch == KEY_ESC:
            self._enter_browsing()
            return None

        state.file_draft.handle_key(ch)
        return None

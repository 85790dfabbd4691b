from enum import Enum

from list_model import ListModel
from text_prompt import TextPrompt


class Mode(Enum):
    BROWSING = "browsing"
    CREATING_ITEM = "creating_item"
    CREATING_FILE = "creating_file"


class AppState:
    def __init__(self, items, file_path, store, seed_item="New item", height=0, width=0):
        self.file_path = file_path
        self.store = store
        self.seed_item = seed_item

        self.model = ListModel(items)
        self.mode = Mode.BROWSING

        # drafts for the creation overlays
        self.item_draft = TextPrompt()
        self.draft_important = False
        self.file_draft = TextPrompt()

        # terminal size, 0 until the first measurement
        self.height = height
        self.width = width

        self.status_msg: str | None = None
        self.status_is_error = False

    def set_status(self, msg, error=False):
        self.status_msg = msg
        self.status_is_error = error

    def clear_status(self):
        self.status_msg = None
        self.status_is_error = False

    def switch_file(self, store, items):
        self.store = store
        self.file_path = store.path
        self.model.replace(items)

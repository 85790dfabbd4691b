from dataclasses import dataclass


@dataclass
class Item:
    checked: bool = False
    important: bool = False


class ListModel:
    """
    Items keyed by name, the sorted name index used for display, and the cursor.
    names is always sorted(items); cursor is 0 when the list is empty.
    """

    def __init__(self, items: dict[str, Item] | None = None):
        self.items: dict[str, Item] = {}
        self.names: list[str] = []
        self.cursor = 0
        self.replace(items or {})

    def __len__(self):
        return len(self.names)

    def replace(self, items: dict[str, Item]):
        self.items = dict(items)
        self.names = sorted(self.items)
        self.cursor = 0

    def current_name(self) -> str | None:
        if not self.names:
            return None
        return self.names[self.cursor]

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self.names)

    def _clamp_cursor(self):
        if not self.names:
            self.cursor = 0
        else:
            self.cursor = max(0, min(self.cursor, len(self.names) - 1))

    def move_cursor(self, delta: int):
        if not self.names:
            return
        self.cursor += delta
        self._clamp_cursor()

    def move_to(self, index: int):
        if not self.names:
            return
        self.cursor = index
        self._clamp_cursor()

    def toggle_checked(self, index: int) -> bool:
        if not self._in_range(index):
            return False
        item = self.items[self.names[index]]
        item.checked = not item.checked
        return True

    def toggle_important(self, index: int) -> bool:
        if not self._in_range(index):
            return False
        item = self.items[self.names[index]]
        item.important = not item.important
        return True

    def insert(self, name: str, important: bool = False) -> bool:
        if not name:
            return False
        self.items[name] = Item(checked=False, important=important)
        self.names = sorted(self.items)
        self.cursor = self.names.index(name)
        return True

    def remove(self, index: int) -> bool:
        if not self._in_range(index):
            return False
        name = self.names.pop(index)
        del self.items[name]
        self._clamp_cursor()
        return True

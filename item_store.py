import json
import logging
import os

from list_model import Item


logger = logging.getLogger(__name__)

FIELD_CHECK = "check"
FIELD_IMPORTANT = "important"


class StoreError(Exception):
    def __init__(self, path: str, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path


class LoadIOError(StoreError):
    pass


class LoadFormatError(StoreError):
    pass


class SaveIOError(StoreError):
    pass


class CreateFileIOError(StoreError):
    pass


def _decode_item(path: str, name, raw) -> Item:
    if not isinstance(raw, dict):
        raise LoadFormatError(path, f"entry {name!r} must be an object")
    flags = {}
    for field in (FIELD_CHECK, FIELD_IMPORTANT):
        value = raw.get(field, False)
        if not isinstance(value, bool):
            raise LoadFormatError(path, f"entry {name!r}: '{field}' must be true or false")
        flags[field] = value
    return Item(checked=flags[FIELD_CHECK], important=flags[FIELD_IMPORTANT])


def _encodable(name: str) -> bool:
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def encode_items(items: dict[str, Item]) -> dict[str, dict[str, bool]]:
    return {
        name: {FIELD_CHECK: item.checked, FIELD_IMPORTANT: item.important}
        for name, item in items.items()
    }


def decode_items(path: str, payload) -> dict[str, Item]:
    """Validate a parsed JSON document and turn it into a collection.

    A ``null`` document is an empty list. Entries with an empty name are
    dropped because they can never be shown or addressed by the cursor.
    """
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise LoadFormatError(path, "top level must be an object of items")

    items: dict[str, Item] = {}
    for name, raw in payload.items():
        item = _decode_item(path, name, raw)
        if not name:
            logger.warning("Dropping item with empty name in %s", path)
            continue
        if not _encodable(name):
            raise LoadFormatError(path, f"entry {name!r} is not valid UTF-8 text")
        items[name] = item
    return items


class ItemStore:
    def __init__(self, path: str):
        self.path = path

    def load(self) -> dict[str, Item]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise LoadIOError(self.path, f"cannot read file ({exc})") from exc

        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise LoadFormatError(self.path, f"invalid JSON ({exc})") from exc

        items = decode_items(self.path, payload)
        logger.info("Loaded %d items from %s", len(items), self.path)
        return items

    def save(self, items: dict[str, Item]) -> None:
        try:
            self._write(self.path, items)
        except (OSError, ValueError) as exc:
            raise SaveIOError(self.path, f"cannot write file ({exc})") from exc
        logger.debug("Saved %d items to %s", len(items), self.path)

    def create(self, seed_name: str) -> dict[str, Item]:
        """Write a fresh one-item list to this path, replacing any existing file."""
        items = {seed_name: Item()}
        try:
            parent = os.path.dirname(os.path.abspath(self.path))
            os.makedirs(parent, exist_ok=True)
            self._write(self.path, items)
        except (OSError, ValueError) as exc:
            raise CreateFileIOError(self.path, f"cannot create file ({exc})") from exc
        logger.info("Created new list %s", self.path)
        return items

    @staticmethod
    def _write(path: str, items: dict[str, Item]) -> None:
        # encode first so a bad name never leaves a truncated file behind
        text = json.dumps(encode_items(items), indent=2, sort_keys=True, ensure_ascii=False)
        data = (text + "\n").encode("utf-8")
        with open(path, "wb") as f:
            f.write(data)

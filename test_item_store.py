import json

import pytest

from item_store import (
    CreateFileIOError,
    ItemStore,
    LoadFormatError,
    LoadIOError,
    SaveIOError,
    StoreError,
)
from list_model import Item


def _write(path, payload):
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_load_reads_check_and_important(tmp_path):
    path = _write(
        tmp_path / "todo.json",
        {
            "Buy milk": {"check": False, "important": True},
            "Walk dog": {"check": True, "important": False},
        },
    )
    items = ItemStore(path).load()
    assert items == {
        "Buy milk": Item(checked=False, important=True),
        "Walk dog": Item(checked=True, important=False),
    }


def test_load_empty_object_is_empty_list(tmp_path):
    path = _write(tmp_path / "todo.json", {})
    assert ItemStore(path).load() == {}


def test_load_missing_fields_default_to_false(tmp_path):
    path = _write(tmp_path / "todo.json", {"a": {}, "b": {"important": True, "note": "x"}})
    items = ItemStore(path).load()
    assert items["a"] == Item()
    assert items["b"] == Item(important=True)


def test_load_drops_empty_name(tmp_path):
    path = _write(tmp_path / "todo.json", {"": {"check": True}, "a": {}})
    assert list(ItemStore(path).load()) == ["a"]


def test_load_missing_file_is_io_error(tmp_path):
    with pytest.raises(LoadIOError) as exc_info:
        ItemStore(str(tmp_path / "nope.json")).load()
    assert isinstance(exc_info.value, StoreError)
    assert exc_info.value.path.endswith("nope.json")


def test_load_invalid_json_is_format_error(tmp_path):
    path = tmp_path / "todo.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(LoadFormatError):
        ItemStore(str(path)).load()


@pytest.mark.parametrize(
    "payload",
    [
        [],
        ["a", "b"],
        "text",
        3,
        {"a": True},
        {"a": {"check": "yes"}},
        {"a": {"important": 1}},
    ],
)
def test_load_wrong_shape_is_format_error(tmp_path, payload):
    path = _write(tmp_path / "todo.json", payload)
    with pytest.raises(LoadFormatError):
        ItemStore(path).load()


def test_save_round_trip(tmp_path):
    src = {
        "b": {"check": True, "important": False},
        "a": {"check": False, "important": True},
        "ünïcode": {"check": True, "important": True},
    }
    path = _write(tmp_path / "todo.json", src)
    store = ItemStore(path)
    items = store.load()
    store.save(items)
    assert store.load() == items
    assert json.loads((tmp_path / "todo.json").read_text(encoding="utf-8")) == src


def test_save_is_pretty_printed_with_sorted_keys(tmp_path):
    path = str(tmp_path / "todo.json")
    ItemStore(path).save({"b": Item(), "a": Item(checked=True)})
    text = (tmp_path / "todo.json").read_text(encoding="utf-8")
    assert text == (
        "{\n"
        '  "a": {\n'
        '    "check": true,\n'
        '    "important": false\n'
        "  },\n"
        '  "b": {\n'
        '    "check": false,\n'
        '    "important": false\n'
        "  }\n"
        "}\n"
    )


def test_save_into_missing_directory_raises_save_error(tmp_path):
    store = ItemStore(str(tmp_path / "missing" / "todo.json"))
    with pytest.raises(SaveIOError):
        store.save({"a": Item()})


def test_create_writes_single_seed_entry(tmp_path):
    path = tmp_path / "sub" / "newlist.json"
    items = ItemStore(str(path)).create("First thing")
    assert items == {"First thing": Item()}
    assert json.loads(path.read_text(encoding="utf-8")) == {
        "First thing": {"check": False, "important": False}
    }


def test_create_replaces_existing_file(tmp_path):
    path = _write(tmp_path / "todo.json", {"old": {"check": True}})
    ItemStore(path).create("fresh")
    assert list(ItemStore(path).load()) == ["fresh"]


def test_create_on_directory_path_raises(tmp_path):
    with pytest.raises(CreateFileIOError):
        ItemStore(str(tmp_path)).create("x")


def test_load_rejects_name_that_cannot_be_written_back(tmp_path):
    path = tmp_path / "todo.json"
    path.write_text('{"\\ud800": {"check": false}, "b": {}}', encoding="utf-8")
    with pytest.raises(LoadFormatError):
        ItemStore(str(path)).load()


def test_save_unencodable_name_keeps_previous_file(tmp_path):
    path = _write(tmp_path / "todo.json", {"b": {"check": False, "important": False}})
    before = (tmp_path / "todo.json").read_text(encoding="utf-8")
    with pytest.raises(SaveIOError):
        ItemStore(path).save({"\ud800": Item(), "b": Item(checked=True)})
    assert (tmp_path / "todo.json").read_text(encoding="utf-8") == before


def test_create_with_unencodable_seed_raises_create_error(tmp_path):
    path = tmp_path / "new.json"
    with pytest.raises(CreateFileIOError):
        ItemStore(str(path)).create("\udcff")
    assert not path.exists()

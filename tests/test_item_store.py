from __future__ import annotations

from docstore import ItemStore


def test_set_and_get_item():
    items = ItemStore()
    assert items.get_item("key1") is None
    items.set_item("key1", {"foo": "bar", "baz": 42})
    assert items.get_item("key1") == {"foo": "bar", "baz": 42}


def test_set_item_overwrites():
    items = ItemStore()
    items.set_item("k", 1)
    items.set_item("k", 2)
    assert items.get_item("k") == 2


def test_items_are_copied():
    items = ItemStore()
    value = {"list": [1]}
    items.set_item("k", value)
    value["list"].append(2)
    assert items.get_item("k") == {"list": [1]}

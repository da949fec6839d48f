import pytest

from bloomstyle.menu import Menu, MenuItem, Separator


def test_item_ids_are_unique_and_increasing():
    first = MenuItem("Open")
    second = MenuItem("Save")
    assert second.id > first.id
    assert Menu("File").item.id > second.id


def test_item_defaults():
    item = MenuItem("Copy")
    assert item.title == "Copy"
    assert item.enabled is True
    assert item.selected is None
    assert item.action is None


def test_with_action_stores_and_runs_callback():
    calls = []
    item = MenuItem("Paste").with_action(lambda: calls.append("paste"))
    item.action()
    assert calls == ["paste"]


def test_with_action_rejects_non_callable():
    with pytest.raises(TypeError):
        MenuItem("Cut").with_action("cut")


def test_with_enabled_returns_same_item():
    item = MenuItem("Undo")
    result = item.with_enabled(False)
    assert result is item
    assert item.enabled is False


def test_entries_keep_order():
    open_item = MenuItem("Open")
    recent = Menu("Recent")
    quit_item = MenuItem("Quit")
    menu = Menu("File").entry(open_item).entry(recent).separator().entry(quit_item)
    entries = list(menu)
    assert entries[:2] == [open_item, recent]
    assert entries[2] == Separator()
    assert entries[3] is quit_item
    assert len(menu) == 4


def test_entry_rejects_other_values():
    with pytest.raises(TypeError):
        Menu("Edit").entry("Copy")


def test_popup_flag():
    menu = Menu("Context")
    assert menu.popup is False
    assert menu.as_popup() is menu
    assert menu.popup is True


def test_submenu_title_and_enabled_come_from_item():
    sub = Menu("View")
    sub.item.with_enabled(False)
    assert sub.title == "View"
    assert sub.enabled is False
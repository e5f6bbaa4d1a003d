import pytest

from todolist import layout
from todolist.controller import DELETE_PROMPT, TodoController
from todolist.layout import Target
from todolist.settings import load_dark_mode
from todolist.store import TodoStore
from todolist.theme import palette


@pytest.fixture
def store(tmp_path):
    path = tmp_path / "todos.txt"
    return TodoStore(path, path)


@pytest.fixture
def settings(tmp_path):
    return tmp_path / "config.txt"


def _checkbox(index):
    return layout.CHECKBOX_X + 1, layout.item_top(index) + 1


def _delete(index):
    return layout.DELETE_X + 1, layout.item_top(index) + 1


def test_theme_loaded_from_settings(store, settings):
    settings.write_text("DarkMode=1", encoding="utf-8")
    controller = TodoController(store, settings)
    assert controller.dark is True
    assert controller.palette == palette(True)


def test_missing_settings_means_light(store, settings):
    assert TodoController(store, settings).dark is False


def test_toggle_theme_persists(store, settings):
    controller = TodoController(store, settings)
    assert controller.toggle_theme() is True
    assert load_dark_mode(settings) is True
    assert controller.toggle_theme() is False
    assert load_dark_mode(settings) is False


def test_submit_without_selection_adds(store, settings):
    controller = TodoController(store, settings)
    item = controller.submit("a", "b")
    assert (item.text1, item.text2, item.completed) == ("a", "b", False)
    assert len(store) == 1
    assert store.path.read_text(encoding="utf-8") == "a|b\n"


def test_submit_with_selection_updates(store, settings):
    controller = TodoController(store, settings)
    controller.submit("a", "b")
    controller.submit("c", "d")
    controller.select(0)
    controller.submit("x", "y")
    assert len(store) == 2
    assert (store[0].text1, store[0].text2) == ("x", "y")
    assert controller.selected is None


def test_select_out_of_range(store, settings):
    controller = TodoController(store, settings)
    with pytest.raises(IndexError):
        controller.select(0)


def test_select_none_clears(store, settings):
    controller = TodoController(store, settings)
    controller.submit("a", "b")
    controller.select(0)
    controller.select(None)
    assert controller.delete_selected() is None
    assert len(store) == 1


def test_delete_selected(store, settings):
    controller = TodoController(store, settings)
    controller.submit("a", "b")
    controller.submit("c", "d")
    controller.select(0)
    removed = controller.delete_selected()
    assert removed.text1 == "a"
    assert [item.text1 for item in store] == ["c"]
    assert controller.selected is None


def test_handle_char_shortcuts(store, settings):
    controller = TodoController(store, settings)
    assert controller.handle_char("N", "a", "b") is True
    assert controller.handle_char("N", "c", "d") is True
    assert len(store) == 2
    assert controller.handle_char("T", "", "") is True
    assert store[0].completed is True
    assert controller.handle_char("D", "", "") is True
    assert [item.text1 for item in store] == ["c"]


def test_handle_char_on_empty_list(store, settings):
    controller = TodoController(store, settings)
    assert controller.handle_char("D", "", "") is False
    assert controller.handle_char("T", "", "") is False
    assert controller.handle_char("q", "a", "b") is False
    assert len(store) == 0


def test_click_checkbox_toggles(store, settings):
    controller = TodoController(store, settings)
    controller.submit("a", "b")
    controller.submit("c", "d")
    assert controller.click(*_checkbox(1)) == (Target.CHECKBOX, 1)
    assert [item.completed for item in store] == [False, True]


def test_click_delete_declined(store, settings):
    prompts = []

    def confirm(message):
        prompts.append(message)
        return False

    controller = TodoController(store, settings, confirm)
    controller.submit("a", "b")
    assert controller.click(*_delete(0)) == (Target.DELETE, 0)
    assert len(store) == 1
    assert prompts == [DELETE_PROMPT]


def test_click_delete_confirmed(store, settings):
    controller = TodoController(store, settings, lambda message: True)
    controller.submit("a", "b")
    controller.submit("c", "d")
    controller.click(*_delete(0))
    assert [item.text1 for item in store] == ["c"]


def test_click_elsewhere(store, settings):
    controller = TodoController(store, settings)
    controller.submit("a", "b")
    assert controller.click(0, 0) is None
    assert store[0].completed is False


@pytest.mark.parametrize("focus", [0, 1])
def test_next_focus_round_trip(store, settings, focus):
    controller = TodoController(store, settings)
    forward = controller.next_focus(focus, False)
    assert forward != focus
    assert controller.next_focus(forward, True) == focus


def test_next_focus_wraps(store, settings):
    controller = TodoController(store, settings)
    assert controller.next_focus(controller.next_focus(0, False), False) == 0
import pytest

from nexui.core import DrawContext, Key, Vec
from nexui.listbox import ListBox


class RecordingListBox(ListBox):
    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.clicks = []

    def click_list_box_item(self, index, where, double_click):
        self.clicks.append((index, double_click))


@pytest.fixture
def lb():
    box = RecordingListBox(context=DrawContext())
    box.configure_list_box(20, 0.25)
    box.n_items = 10
    box.resize_notify(Vec(), Vec(), Vec(), Vec(200, 100, 0))
    return box


def test_configure_and_resize(lb):
    assert lb.scrollbar_width == 20
    assert lb.item_height == 0.25
    assert lb.control_width == pytest.approx(20 / 200)


def test_set_selected_clamps(lb):
    lb.set_selected(-5)
    assert lb.selected_item == 0
    lb.set_selected(100)
    assert lb.selected_item == lb.n_items - 1
    lb.set_selected(3.4)
    assert lb.selected_item == 3


def test_arrow_keys(lb):
    assert lb.key_down(Key.DOWNARROW, 0, 0) is True
    assert lb.selected_item == 1
    lb.key_down(Key.UPARROW, 0, 0)
    lb.key_down(Key.UPARROW, 0, 0)
    assert lb.selected_item == 0


def test_home_end(lb):
    lb.key_down(Key.END, 0, 0)
    assert lb.selected_item == lb.n_items - 1
    assert lb.scroll_pos == pytest.approx(lb.n_items * lb.item_height - 1)
    lb.key_down(Key.HOME, 0, 0)
    assert lb.selected_item == 0
    assert lb.scroll_pos == 0


def test_unknown_key(lb):
    assert lb.key_down(Key.TAB, 9, 0) is False


def test_mouse_press_outside(lb):
    assert lb.mouse_press(Vec(1.5, 0.5, 0)) is False
    assert lb.pressed == 0


def test_press_release_clicks_item(lb):
    assert lb.mouse_press(Vec(0.5, 0.3, 0)) is True
    assert lb.pressed == 2
    assert lb.selected_item == 1
    lb.mouse_release(Vec(0.5, 0.3, 0))
    assert lb.pressed == 0
    assert lb.clicks == [(1, False)]


def test_double_click_only_while_dragging(lb):
    assert lb.mouse_double_click(Vec(0.5, 0.3, 0)) is False
    lb.mouse_press(Vec(0.5, 0.3, 0))
    assert lb.mouse_double_click(Vec(0.5, 0.3, 0)) is True
    assert lb.clicks == [(1, True)]


def test_short_list_needs_no_scrollbar(lb):
    lb.n_items = 2
    lb.scroll_pos = 0.7
    lb.update_control_top_bottom()
    assert (lb.control_top, lb.control_bottom, lb.scroll_pos) == (0, 1, 0)


def test_control_within_unit_interval(lb):
    lb.scroll_pos = 0.5
    lb.update_control_top_bottom()
    assert 0 <= lb.control_top < lb.control_bottom <= 1


def test_draw_visible_items(lb):
    lb.draw()
    drawn = [args[1] for name, args in lb.ctx.operations if name == "text"]
    assert drawn == [f"Item {i}" for i in range(4)]
    pics = [args[1] for name, args in lb.ctx.operations if name == "button_picture_vertical"]
    assert pics[0] == "_s"
    assert lb.ctx.clip is None


def test_draw_restores_context(lb):
    ctx = lb.ctx
    shift, scale = ctx.shift, ctx.scale
    lb.draw()
    assert (ctx.shift, ctx.scale) == (shift, scale)


def test_selected_item_drawn_green(lb):
    lb.set_selected(2)
    lb.draw()
    colors = {args[1]: args[3] for name, args in lb.ctx.operations if name == "text"}
    assert colors["Item 2"] == Vec(0, 1, 0)
    assert colors["Item 0"] == Vec(1, 1, 1)
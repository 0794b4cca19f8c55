import pytest

from nexui.container import Container, InputContainer
from nexui.core import DrawContext, Item, Key, KeyState, Vec, box_to_global, box_to_global_size


class Recorder(Item):
    def __init__(self, focusable=1):
        super().__init__()
        self.focusable = focusable
        self.events = []
        self.seen = None

    def focus_enter(self):
        self.events.append("enter")

    def focus_leave(self):
        self.events.append("leave")

    def show_notify(self):
        self.events.append("show")

    def hide_notify(self):
        self.events.append("hide")

    def draw(self):
        self.seen = (self.ctx.shift, self.ctx.scale)


def test_add_item_order_and_parent():
    c = Container()
    a, b = Recorder(), Recorder()
    c.add_item(a, Vec(), Vec(0.5, 0.5), 1)
    c.add_item(b, Vec(), Vec(0.5, 0.5), 1)
    assert c.children() == [a, b]
    assert a.parent is c
    assert c.focusable == 2


def test_add_twice_raises():
    c = Container()
    a = Recorder()
    c.add_item(a, Vec(), Vec(1, 1), 1)
    with pytest.raises(ValueError):
        c.add_item(a, Vec(), Vec(1, 1), 1)


def test_remove_from_wrong_container_raises():
    with pytest.raises(ValueError):
        Container().remove_item(Recorder())


def test_add_bounds_origin_into_box():
    c = Container()
    a = Recorder()
    c.add_item(a, Vec(0.9, -0.2), Vec(0.5, 0.5), 1)
    o, s = a.container_origin, a.container_size
    assert 0 <= o.x and o.x + s.x <= 1
    assert 0 <= o.y and o.y + s.y <= 1


def test_alpha_triggers_show_and_hide():
    c = Container()
    a = Recorder()
    c.add_item(a, Vec(), Vec(1, 1), 1)
    c.set_alpha_of(a, 0)
    assert a.events == ["show", "hide"]


def test_move_item_after():
    c = Container()
    a, b, d = Recorder(), Recorder(), Recorder()
    for e in (a, b, d):
        c.add_item(e, Vec(), Vec(1, 1), 1)
    c.move_item_after(a, d)
    assert c.children() == [b, d, a]
    c.move_item_after(a, None)
    assert c.children() == [a, b, d]


def test_item_from_point_prefers_topmost():
    c = Container()
    a, b = Recorder(), Recorder()
    c.add_item(a, Vec(), Vec(1, 1), 1)
    c.add_item(b, Vec(), Vec(0.5, 0.5), 1)
    assert c.item_from_point(Vec(0.1, 0.1)) is b
    assert c.item_from_point(Vec(0.9, 0.9)) is a


def test_set_focus_requires_focused():
    c = Container()
    a = Recorder()
    c.add_item(a, Vec(), Vec(1, 1), 1)
    with pytest.raises(RuntimeError):
        c.set_focus(a)


def test_set_focus_switches():
    c = Container()
    c.focused = True
    a, b = Recorder(), Recorder()
    c.add_item(a, Vec(), Vec(1, 1), 1)
    c.add_item(b, Vec(), Vec(1, 1), 1)
    c.set_focus(a)
    c.set_focus(b)
    assert a.events[-2:] == ["enter", "leave"]
    assert b.focused and not a.focused
    assert c.focused_child is b


def test_draw_sets_child_frame_and_restores():
    ctx = DrawContext(shift=Vec(0, 0), scale=Vec(100, 100))
    c = Container(context=ctx)
    a = Recorder()
    c.add_item(a, Vec(0.5, 0), Vec(0.5, 1), 1)
    c.draw()
    assert a.seen == (box_to_global(Vec(0.5, 0), Vec(0, 0), Vec(100, 100)),
                      box_to_global_size(Vec(0.5, 1), Vec(100, 100)))
    assert ctx.shift == Vec(0, 0)
    assert ctx.scale == Vec(100, 100)


def test_preferred_focused_grand_child():
    outer = Container()
    inner = Container()
    a, b = Recorder(), Recorder()
    b.preferred_focus_priority = 5
    inner.add_item(b, Vec(), Vec(1, 1), 1)
    outer.add_item(a, Vec(), Vec(1, 1), 1)
    outer.add_item(inner, Vec(), Vec(1, 1), 1)
    assert outer.preferred_focused_grand_child() is b


def test_resize_propagates_to_children():
    c = Container()
    a = Recorder()
    c.add_item(a, Vec(0.5, 0.5), Vec(0.5, 0.5), 1)
    c.resize_notify(Vec(), Vec(1, 1), Vec(0, 0), Vec(200, 100))
    assert a.size == box_to_global_size(Vec(0.5, 0.5), Vec(200, 100))
    assert c.size == Vec(200, 100)


def _tab_root(is_tab_root):
    c = InputContainer()
    c.focused = True
    c.is_tab_root = is_tab_root
    items = [Recorder(), Recorder(0), Recorder()]
    for e in items:
        c.add_item(e, Vec(), Vec(1, 1), 1)
    return c, items


def test_tab_skips_unfocusable():
    c, (a, b, d) = _tab_root(False)
    assert c.key_down(Key.TAB, 0, 0)
    assert c.focused_child is a
    assert c.key_down(Key.TAB, 0, 0)
    assert c.focused_child is d
    assert c.key_down(Key.TAB, 0, 0) is False


def test_tab_wraps_in_tab_root_and_shift_goes_back():
    c, (a, b, d) = _tab_root(True)
    c.key_down(Key.TAB, 0, 0)
    c.key_down(Key.TAB, 0, 0)
    assert c.key_down(Key.TAB, 0, 0)
    assert c.focused_child is a
    c.key_down(Key.TAB, 0, KeyState.SHIFT)
    assert c.focused_child is d


def test_escape_clears_focus():
    c, (a, _, _) = _tab_root(False)
    c.set_focus(a)
    assert c.key_down(Key.ESCAPE, 0, 0)
    assert c.focused_child is None
    assert c.key_down(Key.ESCAPE, 0, 0) is False


def test_mouse_move_focuses_item_under_pointer():
    c = InputContainer()
    c.focused = True
    a, b = Recorder(), Recorder()
    c.add_item(a, Vec(0, 0), Vec(0.5, 1), 1)
    c.add_item(b, Vec(0.5, 0), Vec(0.5, 1), 1)
    assert c.mouse_move(Vec(0.75, 0.5))
    assert c.focused_child is b
    assert c.mouse_move(Vec(2, 2)) is False
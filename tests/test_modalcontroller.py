import pytest

from nexui.button import Button
from nexui.core import DrawContext, Item, Vec, box_to_global, global_to_box
from nexui.modalcontroller import (
    ModalController,
    dialog_close_button_click,
    dialog_open_button_click,
    dialog_open_button_click_with_coords,
    tab_button_click,
)


def make(n=2, frametime=0.1):
    ctx = DrawContext(frametime=frametime)
    mc = ModalController(context=ctx)
    kids = [Item() for _ in range(n)]
    for kid in kids:
        mc.add_item(kid, Vec(0, 0, 0), Vec(1, 1, 0), 1)
    return mc, kids


def settle(mc, frames=20):
    for _ in range(frames):
        mc.draw()


def test_add_item_starts_hidden():
    mc, kids = make()
    for kid in kids:
        assert kid.container_alpha == 0
        assert kid.modal_initial_alpha == 1
        assert kid.modal_state == 0


def test_initialize_dialog_shows_root():
    mc, (a, b) = make()
    mc.initialize_dialog(a)
    mc.draw()
    assert a.container_alpha == 1
    assert b.container_alpha == 0
    assert a.modal_state == 1
    assert mc.modal_initial_alpha == 1


def test_front_gets_focus_when_idle():
    mc, (a, b) = make()
    mc.focused = True
    mc.initialize_dialog(a)
    mc.draw()
    assert mc.focused_child is a
    assert a.focused


def test_unfocused_controller_gives_no_focus():
    mc, (a, b) = make()
    mc.initialize_dialog(a)
    mc.draw()
    assert mc.focused_child is None


def test_show_child_animates_and_greys_previous():
    mc, (a, b) = make()
    mc.focused = True
    mc.initialize_dialog(a)
    mc.draw()
    mc.show_child(b, Vec(), Vec(), False)
    mc.draw()
    assert mc.focused_child is None
    assert 0 < b.container_alpha < 1
    settle(mc)
    assert a.modal_state == 2
    assert a.container_alpha == pytest.approx(mc.faded_alpha)
    assert b.container_alpha == pytest.approx(1)
    assert mc.focused_child is b


def test_hide_child_restores_previous():
    mc, (a, b) = make()
    mc.focused = True
    mc.initialize_dialog(a)
    mc.show_child(b, Vec(), Vec(), False)
    settle(mc)
    mc.hide_child(b, False)
    settle(mc)
    assert b.container_alpha == 0
    assert a.container_alpha == pytest.approx(1)
    assert a.modal_state == 1
    assert mc.focused_child is a


def test_hide_all_skipping_animation():
    mc, kids = make(3)
    mc.initialize_dialog(kids[0])
    mc.hide_all(True)
    for kid in kids:
        assert kid.modal_state == 0
        assert kid.modal_factor == 1


def test_switch_state_greyed_factor_is_bounded():
    mc, (a, b) = make()
    a.container_alpha = 0.9
    mc.switch_state(a, 2, False)
    assert a.modal_state == 2
    assert 0 <= a.modal_factor <= 1


def test_add_tab_selects_first_tab():
    ctx = DrawContext()
    mc = ModalController(context=ctx)
    t1, t2 = Item(), Item()
    b1, b2 = Button(), Button()
    mc.add_tab(t1, b1)
    mc.add_tab(t2, b2)
    assert b1.force_pressed
    assert not b2.force_pressed
    assert t1.modal_state == 1
    assert t2.modal_state == 0
    assert t2.tab_selecting_button is b2
    assert b2.on_click is tab_button_click
    assert b2.on_click_entity is t2


def test_tab_button_switches_tabs():
    mc = ModalController(context=DrawContext())
    t1, t2 = Item(), Item()
    b1, b2 = Button(), Button()
    mc.add_tab(t1, b1)
    mc.add_tab(t2, b2)
    b2.on_click(b2, b2.on_click_entity)
    assert not b1.force_pressed
    assert b2.force_pressed
    assert t1.modal_state == 0
    assert t2.modal_state == 1
    assert t2.modal_controlling_button is b2
    assert t1.modal_controlling_button is None


def test_tab_click_on_active_tab_is_ignored():
    mc = ModalController(context=DrawContext())
    t1, t2 = Item(), Item()
    b1, b2 = Button(), Button()
    mc.add_tab(t1, b1)
    mc.add_tab(t2, b2)
    tab_button_click(b2, t1)
    assert not b2.force_pressed
    assert t1.modal_controlling_button is b1


def test_open_with_coords_maps_into_controller_box():
    mc, (a, b) = make()
    mc.resize_notify(Vec(), Vec(1, 1, 0), Vec(0, 0, 0), Vec(800, 600, 0))
    dialog_open_button_click_with_coords(None, b, Vec(400, 300, 0), Vec(80, 60, 0))
    assert b.modal_state == 1
    assert b.modal_controlling_button is None
    assert b.modal_button_origin.x == pytest.approx(0.5)
    assert b.modal_button_origin.y == pytest.approx(0.5)
    assert b.container_origin == b.modal_button_origin
    assert b.container_size == b.modal_button_size
    before = b.modal_button_origin
    dialog_open_button_click_with_coords(None, b, Vec(0, 0, 0), Vec(10, 10, 0))
    assert b.modal_button_origin == before


def test_open_and_close_with_button():
    mc, (a, b) = make()
    mc.resize_notify(Vec(), Vec(1, 1, 0), Vec(0, 0, 0), Vec(800, 600, 0))
    btn = Button()
    btn.origin = Vec(80, 60, 0)
    btn.size = Vec(160, 120, 0)
    dialog_open_button_click(btn, b)
    assert btn.force_pressed
    assert b.modal_controlling_button is btn
    assert b.modal_button_origin == global_to_box(btn.origin, mc.origin, mc.size)
    dialog_close_button_click(btn, b)
    assert b.modal_state == 0
    assert not btn.force_pressed
    assert b.modal_controlling_button is None


def test_resize_notify_uses_initial_geometry():
    mc = ModalController(context=DrawContext())
    child = Item()
    mc.add_item(child, Vec(0.25, 0.25, 0), Vec(0.5, 0.5, 0), 1)
    child.container_origin = Vec(0.9, 0.9, 0)
    abs_origin, abs_size = Vec(10, 20, 0), Vec(800, 600, 0)
    mc.resize_notify(Vec(), Vec(1, 1, 0), abs_origin, abs_size)
    assert child.origin == box_to_global(child.modal_initial_origin, abs_origin, abs_size)
    assert mc.size == abs_size


def test_adding_item_twice_raises():
    mc, (a, b) = make()
    with pytest.raises(ValueError):
        mc.add_item(a, Vec(), Vec(1, 1, 0), 1)
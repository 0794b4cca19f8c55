import pytest

from nexui.core import DrawContext, Key, KeyState, Vec
from nexui.inputbox import InputBox, input_box_clear_click


@pytest.fixture
def box():
    b = InputBox(context=DrawContext())
    b.configure_input_box("hello", 5, 8, "gfx/input")
    return b


def texts(ctx):
    return [args for name, args in ctx.operations if name == "text"]


def test_configure_sets_fields(box):
    assert box.text == "hello"
    assert box.cursor_pos == 5
    assert box.src == "gfx/input"
    assert box.font_size == 8


def test_enter_text_inserts_at_cursor(box):
    box.cursor_pos = 2
    box.enter_text("XY")
    assert box.text == "heXYllo"
    assert box.cursor_pos == 4


def test_enter_text_respects_max_length(box):
    box.max_length = 6
    box.enter_text("ab")
    assert box.text == "hello"
    box.enter_text("a")
    assert box.text == "helloa"


def test_enter_text_rejects_forbidden(box):
    box.forbidden_characters = ";"
    box.enter_text("a;")
    assert box.text == "hello"


def test_key_down_printable(box):
    assert box.key_down(0, ord("!"), 0) is True
    assert box.text == "hello!"


def test_backspace_and_delete(box):
    assert box.key_down(Key.BACKSPACE, 0, 0) is True
    assert box.text == "hell"
    assert box.cursor_pos == 4
    box.key_down(Key.HOME, 0, 0)
    assert box.cursor_pos == 0
    box.key_down(Key.DEL, 0, 0)
    assert box.text == "ell"
    box.key_down(Key.DEL, 0, KeyState.CTRL)
    assert box.text == ""


def test_backspace_at_start_keeps_text(box):
    box.cursor_pos = 0
    box.key_down(Key.BACKSPACE, 0, 0)
    assert box.text == "hello"


def test_arrows_and_end(box):
    box.key_down(Key.LEFTARROW, 0, 0)
    assert box.cursor_pos == 4
    box.key_down(Key.RIGHTARROW, 0, 0)
    assert box.cursor_pos == 5
    box.cursor_pos = 0
    box.key_down(Key.END, 0, 0)
    assert box.cursor_pos == len("hello")


def test_unknown_key_unhandled(box):
    assert box.key_down(Key.TAB, 9, 0) is False


def test_clear_click(box):
    input_box_clear_click(None, box)
    assert box.text == ""


def test_mouse_press_places_cursor(box):
    box.real_font_size = Vec(0.1, 1, 0)
    assert box.mouse_press(Vec(0.35, 0.5, 0)) is True
    assert box.pressed is True
    assert box.cursor_pos == 3
    box.mouse_release(Vec(0.0, 0.5, 0))
    assert box.pressed is False
    assert box.cursor_pos == 0


def test_draw_clamps_cursor_and_clears_clip(box):
    box.cursor_pos = 99
    box.draw()
    assert box.cursor_pos == len(box.text)
    assert box.ctx.clip is None


def test_draw_shows_cursor_when_unfocused(box):
    box.draw()
    assert any(args[1] == "_" for args in texts(box.ctx))


def test_draw_colour_code(box):
    box.set_text("^1a")
    box.draw()
    drawn = texts(box.ctx)
    assert any(a[1] == "^1" and a[3] == Vec(1, 0, 0) for a in drawn)
    assert any(a[1] == "a" and a[3] == Vec(1, 0, 0) for a in drawn)


def test_draw_hex_colour_code(box):
    box.set_text("^xf00b")
    box.draw()
    drawn = texts(box.ctx)
    assert any(a[1] == "^xf00" and a[3] == Vec(1, 0, 0) for a in drawn)


def test_draw_plain_text_when_codes_off(box):
    box.edit_color_codes = False
    box.set_text("^1a")
    box.draw()
    assert any(a[1] == "^1a" for a in texts(box.ctx))


def test_show_notify_follows_disabled(box):
    box.disabled = True
    box.show_notify()
    assert not box.focusable
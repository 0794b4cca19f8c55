"""A single-line text entry field."""

from __future__ import annotations

import math

from .core import Key, KeyState, Vec, length_up_to_width, text_width
from .label import Label

CURSOR = "_"

_WHITE = Vec(1, 1, 1)

_DIGIT_COLORS = {
    0: (Vec(0, 0, 0), 1.0),
    1: (Vec(1, 0, 0), 1.0),
    2: (Vec(0, 1, 0), 1.0),
    3: (Vec(1, 1, 0), 1.0),
    4: (Vec(0, 0, 1), 1.0),
    5: (Vec(0, 1, 1), 1.0),
    6: (Vec(1, 0, 1), 1.0),
    7: (Vec(1, 1, 1), 1.0),
    8: (Vec(1, 1, 1), 0.5),
    9: (Vec(0.5, 0.5, 0.5), 1.0),
}


def _bound(lo, value, hi):
    """Clamp like the engine does: the lower limit wins when limits cross."""
    if value < lo:
        return lo
    return min(value, hi)


def _hex_digit(ch):
    """Value of a hexadecimal digit, or -1 if ch is not one."""
    if len(ch) != 1:
        return -1
    try:
        return int(ch, 16)
    except ValueError:
        return -1


def input_box_clear_click(button, box):
    """Click handler that empties the input box."""
    box.set_text("")


class InputBox(Label):
    """An editable line of text with a cursor and horizontal scrolling."""

    focusable = 1
    edit_color_codes = True
    forbidden_characters = ""
    color = Vec(1, 1, 1)
    color_f = Vec(1, 1, 1)
    max_length = 255

    def __init__(self, *, context=None) -> None:
        super().__init__(context=context)
        self.text = ""
        self.src = None
        self.cursor_pos = 0
        self.scroll_pos = 0.0
        self.last_change_time = 0.0
        self.drag_scroll_timer = 0.0
        self.drag_scroll_pos = Vec()
        self.pressed = False

    def _cursor(self):
        return int(_bound(0, self.cursor_pos, len(self.text)))

    def configure_input_box(self, text, cursor_pos, font_size, gfx):
        Label.configure_label(self, text, font_size, 0.0)
        self.src = gfx
        self.cursor_pos = cursor_pos

    def set_text(self, text):
        Label.set_text(self, text or "")

    def mouse_drag(self, pos):
        self.drag_scroll_pos = pos
        p = self.scroll_pos + pos.x - self.keepspace_left
        rfx = self.real_font_size.x
        self.cursor_pos = length_up_to_width(self.text, p / rfx if rfx else 0.0, False)
        self.last_change_time = self.ctx.time
        return True

    def mouse_press(self, pos):
        self.drag_scroll_timer = self.ctx.time
        self.pressed = True
        return InputBox.mouse_drag(self, pos)

    def mouse_release(self, pos):
        self.pressed = False
        return InputBox.mouse_drag(self, pos)

    def enter_text(self, chars):
        if any(ch in self.forbidden_characters for ch in chars):
            return
        if len(chars) + len(self.text) > self.max_length:
            return
        c = self._cursor()
        self.set_text(self.text[:c] + chars + self.text[c:])
        self.cursor_pos = c + len(chars)

    def _delete_at_cursor(self):
        c = self._cursor()
        self.set_text(self.text[:c] + self.text[c + 1:])

    def key_down(self, key, ascii, shift):
        now = self.ctx.time
        self.last_change_time = now
        self.drag_scroll_timer = now
        if ascii >= 32 and ascii != 127:
            self.enter_text(chr(ascii))
            return True
        if key == Key.LEFTARROW:
            self.cursor_pos -= 1
        elif key == Key.RIGHTARROW:
            self.cursor_pos += 1
        elif key == Key.HOME:
            self.cursor_pos = 0
        elif key == Key.END:
            self.cursor_pos = len(self.text)
        elif key == Key.BACKSPACE:
            if self.cursor_pos > 0:
                self.cursor_pos = self._cursor() - 1
                self._delete_at_cursor()
        elif key == Key.DEL:
            if shift & KeyState.CTRL:
                self.set_text("")
            else:
                self._delete_at_cursor()
        else:
            return False
        return True

    def _draw_colored(self, ctx):
        text = self.text
        rfs = self.real_font_size
        width = lambda s: text_width(s, False) * rfs.x  # noqa: E731
        p = self.real_origin - Vec(self.scroll_pos, 0, 0)
        color, alpha = _WHITE, 1.0
        i, n = 0, len(text)
        while i < n:
            ch = text[i]
            if ch != "^":
                ctx.draw_text(p, ch, rfs, color, alpha, False)
                p = p + Vec(width(ch), 0, 0)
                i += 1
                continue
            ch2 = text[i + 1:i + 2]
            w = width(ch + ch2)
            if ch2 == "^":
                ctx.draw_fill(p, Vec(w, rfs.y, 0), _WHITE, 0.5)
                ctx.draw_text(p + Vec(0.25 * w, 0, 0), "^", rfs, color, alpha, False)
            elif ch2 and ch2 in "0123456789":
                color, alpha = _DIGIT_COLORS[int(ch2)]
                ctx.draw_fill(p, Vec(w, rfs.y, 0), _WHITE, 0.5)
                ctx.draw_text(p, ch + ch2, rfs, color, alpha, False)
            elif ch2 == "x":
                color = _WHITE
                components = []
                for ofs in (2, 3, 4):
                    value = _hex_digit(text[i + ofs:i + ofs + 1])
                    if value < 0:
                        break
                    components.append(value)
                found = len(components)
                if found == 3:
                    color = Vec(*(c / 15 for c in components))
                    piece = text[i:i + 5]
                    w = width(piece)
                    ctx.draw_fill(p, Vec(w, rfs.y, 0), _WHITE, 0.5)
                    ctx.draw_text(p, piece, rfs, color, 1, False)
                    i += 3
                else:
                    marks = {0: Vec(1, 0, 0), 1: Vec(0, 1, 0), 2: Vec(0, 0, 1)}
                    piece = text[i:i + 2 + found]
                    if found:
                        w = width(piece)
                    ctx.draw_fill(p, Vec(w, rfs.y, 0), marks[found], 0.5)
                    ctx.draw_text(p, piece, rfs, _WHITE, alpha, False)
                    i += found
            else:
                ctx.draw_fill(p, Vec(w, rfs.y, 0), _WHITE, 0.5)
                ctx.draw_text(p, ch + ch2, rfs, color, alpha, False)
            p = p + Vec(w, 0, 0)
            i += 2

    def draw(self):
        ctx = self.ctx
        if self.pressed:
            self.mouse_drag(self.drag_scroll_pos)
        self.focusable = not self.disabled
        if self.disabled:
            ctx.alpha *= self.disabled_alpha

        if self.src:
            if self.focused and not self.disabled:
                ctx.draw_button_picture(Vec(), f"{self.src}_f", Vec(1, 1, 0), self.color_f, 1)
            else:
                ctx.draw_button_picture(Vec(), f"{self.src}_n", Vec(1, 1, 0), self.color, 1)

        self.cursor_pos = self._cursor()
        rfx = self.real_font_size.x
        cursor_w = text_width(self.text[:self.cursor_pos], False) * rfx
        total_w = text_width(self.text + CURSOR, False) * rfx
        ksl, ksr = self.keepspace_left, self.keepspace_right

        now = ctx.time
        if self.drag_scroll_timer < now:
            save = self.scroll_pos
            self.scroll_pos = _bound(cursor_w - (0.875 - ksl - ksr), self.scroll_pos, cursor_w - 0.125)
            if self.scroll_pos != save:
                self.drag_scroll_timer = now + 0.2
        self.scroll_pos = min(self.scroll_pos, total_w - (1 - ksr - ksl))
        self.scroll_pos = max(0, self.scroll_pos)

        ctx.set_clip_rect(Vec(ksl, 0, 0), Vec(1 - ksl - ksr, 1, 0))
        if self.edit_color_codes:
            self._draw_colored(ctx)
        else:
            ctx.draw_text(self.real_origin - Vec(self.scroll_pos, 0, 0), self.text,
                          self.real_font_size, _WHITE, 1, False)
        since = now - self.last_change_time
        if not self.focused or since < math.floor(since) + 0.5:
            ctx.draw_text(self.real_origin + Vec(cursor_w - self.scroll_pos, 0, 0), CURSOR,
                          self.real_font_size, _WHITE, 1, False)
        ctx.clear_clip()

    def show_notify(self):
        self.focusable = not self.disabled
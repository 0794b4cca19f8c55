"""A clickable button with an optional picture and a text label."""

from __future__ import annotations

from .core import Key, Vec
from .label import Label


class Button(Label):
    """A label that can be pressed with the mouse or the keyboard."""

    src_suffix = None
    src2 = None
    src2scale: float = 1
    src_multi = True
    button_left_of_text = False
    focusable = 1
    disabled_alpha: float = 0.3
    color = Vec(1, 1, 1)
    color_c = Vec(1, 1, 1)
    color_f = Vec(1, 1, 1)
    color_d = Vec(1, 1, 1)
    color2 = Vec(1, 1, 1)
    alpha2: float = 1

    def __init__(self, *, context=None) -> None:
        super().__init__(context=context)
        self.on_click = None
        self.on_click_entity = None
        self.src = None
        self.pressed = False
        self.click_time = 0.0
        self.force_pressed = False

    def _fire(self):
        if self.on_click is not None:
            self.on_click(self, self.on_click_entity)

    def resize_notify(self, rel_origin, rel_size, abs_origin, abs_size):
        if self.src_multi:
            self.keepspace_left = 0
        else:
            self.keepspace_left = min(0.8, abs_size.y / abs_size.x)
        Label.resize_notify(self, rel_origin, rel_size, abs_origin, abs_size)

    def configure_button(self, text, font_size, gfx):
        Label.configure_label(self, text, font_size, 0.5 if self.src_multi else 0)
        self.src = gfx

    def key_down(self, key, ascii, shift):
        if key in (Key.ENTER, Key.SPACE):
            self.click_time = 0.1  # delayed for effect
            return True
        return False

    def mouse_drag(self, pos):
        self.pressed = 0 <= pos.x < 1 and 0 <= pos.y < 1
        return True

    def mouse_press(self, pos):
        self.mouse_drag(pos)
        return True

    def mouse_release(self, pos):
        self.mouse_drag(pos)
        if self.pressed:
            if not self.disabled:
                self._fire()
            self.pressed = False
        return True

    def show_notify(self):
        self.focusable = not self.disabled

    def _state(self):
        if self.disabled:
            return "_d", self.color_d
        if self.force_pressed or self.pressed or self.click_time > 0:
            return "_c", self.color_c
        if self.focused:
            return "_f", self.color_f
        return "_n", self.color

    def draw(self):
        ctx = self.ctx
        self.focusable = not self.disabled
        save = ctx.alpha
        if self.disabled:
            ctx.alpha *= self.disabled_alpha

        if self.src:
            state, color = self._state()
            pic = f"{self.src}{state}{self.src_suffix or ''}"
            if self.src_multi:
                ctx.draw_button_picture(Vec(), pic, Vec(1, 1, 0), color, 1)
            else:
                rfs = self.real_font_size
                if rfs.y == 0:
                    origin, size = Vec(), Vec(1, 1, 0)
                else:
                    origin = Vec(0.5 * (self.keepspace_left - rfs.x), 0.5 * (1 - rfs.y), 0)
                    size = rfs
                ctx.draw_picture(origin, pic, size, color, 1)

        if self.src2:
            origin = Vec(self.keepspace_left, 0, 0)
            size = Vec(1 - self.keepspace_left, 1, 0)
            origin = origin + size * (0.5 - 0.5 * self.src2scale)
            size = size * self.src2scale
            ctx.draw_picture(origin, self.src2, size, self.color2, self.alpha2)

        ctx.alpha = save
        Label.draw(self)

        frametime = ctx.frametime
        if 0 < self.click_time <= frametime and not self.disabled:
            self._fire()
        self.click_time -= frametime
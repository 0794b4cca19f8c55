"""A horizontal slider for numeric values."""

from __future__ import annotations

import math

from .core import Key, Vec
from .label import Label


def median(a, b, c):
    """Clamp b into the interval spanned by a and c."""
    if a < c:
        return min(max(a, b), c)
    return min(max(c, b), a)


def almost_in_bound(a, b, c):
    """Whether b lies within [a, c] up to a small relative tolerance."""
    eps = (abs(a) + abs(c)) * 0.001
    return b == median(a - eps, b, c + eps)


def format_decimals(value, digits):
    """Format value with a fixed number of decimals."""
    return f"{value:.{int(digits)}f}"


def _ftos(value):
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return f"{value:g}"


class Slider(Label):
    """A draggable knob on a track; configure visuals first, then values."""

    focusable = 1
    value_display_multiplier: float = 1.0
    tolerance = Vec()
    color = Vec(1, 1, 1)
    color2 = Vec(1, 1, 1)
    color_d = Vec(1, 1, 1)
    color_c = Vec(1, 1, 1)
    color_f = Vec(1, 1, 1)
    disabled_alpha: float = 0.3

    def __init__(self, *, context=None) -> None:
        super().__init__(context=context)
        self.src = None
        self.value = 0.0
        self.value_min = 0.0
        self.value_max = 0.0
        self.value_step = 0.0
        self.value_digits = 0
        self.value_key_step = 0.0
        self.value_page_step = 0.0
        self.text_space = 0.0
        self.control_width = 0.0
        self.pressed = False
        self.press_offset = 0.0
        self.previous_value = 0.0

    def set_value(self, value):
        self.value = value

    def to_string(self):
        return f"{_ftos(self.value)} ({self.value_to_text(self.value)})"

    def resize_notify(self, rel_origin, rel_size, abs_origin, abs_size):
        Label.resize_notify(self, rel_origin, rel_size, abs_origin, abs_size)
        self.control_width = abs_size.y / abs_size.x

    def value_to_text(self, value):
        if almost_in_bound(self.value_min, value, self.value_max):
            return format_decimals(value * self.value_display_multiplier, self.value_digits)
        return ""

    def configure_slider_visuals(self, font_size, align, text_space, gfx):
        Label.configure_label(self, None, font_size, align)
        self.text_space = text_space
        self.keepspace_left = 0 if text_space == 0 else 1 - text_space
        self.src = gfx

    def configure_slider_values(self, value_min, value, value_max, step, key_step, page_step):
        self.value = value
        self.value_step = step
        self.value_min = value_min
        self.value_max = value_max
        self.value_key_step = key_step
        self.value_page_step = page_step
        if step >= 1:
            self.value_digits = 0
        elif step >= 0.1:
            self.value_digits = 1
        elif step >= 0.01:
            self.value_digits = 2
        else:
            self.value_digits = 3

    def _in_range(self):
        return almost_in_bound(self.value_min, self.value, self.value_max)

    def _step_value(self, delta, fallback):
        if self._in_range():
            self.set_value(median(self.value_min, self.value + delta, self.value_max))
        else:
            self.set_value(fallback)

    def key_down(self, key, ascii, shift):
        if self.disabled:
            return False
        if key == Key.LEFTARROW:
            self._step_value(-self.value_key_step, self.value_max)
        elif key == Key.RIGHTARROW:
            self._step_value(self.value_key_step, self.value_min)
        elif key == Key.PGUP:
            self._step_value(-self.value_page_step, self.value_max)
        elif key == Key.PGDN:
            self._step_value(self.value_page_step, self.value_min)
        elif key == Key.HOME:
            self.set_value(self.value_min)
        elif key == Key.END:
            self.set_value(self.value_max)
        else:
            return False
        return True

    def _track(self):
        return 1 - self.text_space - self.control_width

    def _fraction(self):
        span = self.value_max - self.value_min
        return (self.value - self.value_min) / span if span else 0.0

    def _control_center(self):
        return self._fraction() * self._track() + 0.5 * self.control_width

    def _value_at(self, x):
        track = self._track()
        t = (x - self.press_offset - 0.5 * self.control_width) / track if track else 0.0
        return median(0, t, 1) * (self.value_max - self.value_min) + self.value_min

    def _grab(self, x, center):
        self.pressed = True
        self.press_offset = x - center
        self.previous_value = self.value

    def mouse_drag(self, pos):
        if self.disabled:
            return False
        if self.pressed:
            tol = self.tolerance
            hit = (-tol.x <= pos.x < 1 - self.text_space + tol.x
                   and -tol.y <= pos.y < 1 + tol.y)
            if hit:
                v = self._value_at(pos.x)
                if self.value_step:
                    v = math.floor(0.5 + v / self.value_step) * self.value_step
                self.set_value(v)
            else:
                self.set_value(self.previous_value)
        return True

    def mouse_press(self, pos):
        if self.disabled:
            return False
        if not (0 <= pos.x < 1 - self.text_space and 0 <= pos.y < 1):
            return False
        center = self._control_center()
        if abs(pos.x - center) <= 0.5 * self.control_width:
            self._grab(pos.x, center)
            return True
        click_value = self._value_at(pos.x)
        in_range = self._in_range()
        step = self.value_step
        if pos.x < center:
            page_value = self.value - self.value_page_step
            if step:
                click_value = math.floor(click_value / step) * step
            page_value = max(page_value, click_value)
        else:
            page_value = self.value + self.value_page_step
            if step:
                click_value = math.ceil(click_value / step) * step
            page_value = min(page_value, click_value)
        if in_range:
            self.set_value(median(self.value_min, page_value, self.value_max))
        else:
            self.set_value(self.value_max)
        if page_value == click_value:
            self._grab(pos.x, self._control_center())
        return True

    def mouse_release(self, pos):
        self.pressed = False
        return not self.disabled

    def show_notify(self):
        self.focusable = not self.disabled

    def draw(self):
        ctx = self.ctx
        self.focusable = not self.disabled
        save = ctx.alpha
        if self.disabled:
            ctx.alpha *= self.disabled_alpha
        src = self.src or ""
        ctx.draw_button_picture(Vec(), f"{src}_s", Vec(1 - self.text_space, 1, 0), self.color2, 1)
        if self._in_range():
            left = self._fraction() * self._track()
            if self.disabled:
                state, color = "_d", self.color_d
            elif self.pressed:
                state, color = "_c", self.color_c
            elif self.focused:
                state, color = "_f", self.color_f
            else:
                state, color = "_n", self.color
            ctx.draw_picture(Vec(left, 0, 0), f"{src}{state}", Vec(self.control_width, 1, 0), color, 1)
        self.set_text(self.value_to_text(self.value))
        ctx.alpha = save
        Label.draw(self)
        self.text = None
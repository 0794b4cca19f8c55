"""A scrollable list of items with a scrollbar."""

from __future__ import annotations

import math

from .core import (FONT_USER, Item, Key, Vec, box_to_global, box_to_global_size,
                   global_to_box, global_to_box_size)


def _bound(lo, value, hi):
    """Clamp like the engine does: the lower limit wins when limits cross."""
    if value < lo:
        return lo
    return min(value, hi)


class ListBox(Item):
    """A vertical list; scroll position is measured in window heights."""

    focusable = 1
    color = Vec(1, 1, 1)
    color2 = Vec(1, 1, 1)
    color_c = Vec(1, 1, 1)
    color_f = Vec(1, 1, 1)
    tolerance = Vec()

    def __init__(self, *, context=None) -> None:
        super().__init__(context=context)
        self.selected_item = 0
        self.scroll_pos = 0.0
        self.previous_value = 0.0
        self.pressed = 0  # 0 normal, 1 scrollbar drag, 2 item drag, 3 released
        self.press_offset = 0.0
        self.control_top = 0.0
        self.control_bottom = 0.0
        self.control_width = 0.0
        self.drag_scroll_timer = 0.0
        self.drag_scroll_pos = Vec()
        self.src = None
        self.scrollbar_width = 0.0
        self.n_items = 42
        self.item_height = 0.0

    def _total(self):
        return self.n_items * self.item_height

    def set_selected(self, index):
        self.selected_item = math.floor(0.5 + _bound(0, index, self.n_items - 1))

    def resize_notify(self, rel_origin, rel_size, abs_origin, abs_size):
        Item.resize_notify(self, rel_origin, rel_size, abs_origin, abs_size)
        self.control_width = self.scrollbar_width / abs_size.x

    def configure_list_box(self, scrollbar_width, item_height):
        self.scrollbar_width = scrollbar_width
        self.item_height = item_height

    def _select_upwards(self):
        self.set_selected(min(self.selected_item,
                              math.floor((self.scroll_pos + 1) / self.item_height - 1)))

    def _select_downwards(self):
        self.set_selected(max(self.selected_item, math.ceil(self.scroll_pos / self.item_height)))

    def key_down(self, key, ascii, shift):
        self.drag_scroll_timer = self.ctx.time
        if key == Key.MWHEELUP:
            self.scroll_pos = max(self.scroll_pos - 0.5, 0)
            self._select_upwards()
        elif key == Key.MWHEELDOWN:
            self.scroll_pos = min(self.scroll_pos + 0.5, self._total() - 1)
            self._select_downwards()
        elif key == Key.PGUP:
            self.set_selected(self.selected_item - 1 / self.item_height)
        elif key == Key.PGDN:
            self.set_selected(self.selected_item + 1 / self.item_height)
        elif key == Key.UPARROW:
            self.set_selected(self.selected_item - 1)
        elif key == Key.DOWNARROW:
            self.set_selected(self.selected_item + 1)
        elif key == Key.HOME:
            self.scroll_pos = 0
            self.set_selected(0)
        elif key == Key.END:
            self.scroll_pos = max(0, self._total() - 1)
            self.set_selected(self.n_items - 1)
        else:
            return False
        return True

    def _item_at(self, y):
        return math.floor((self.scroll_pos + y) / self.item_height)

    def mouse_drag(self, pos):
        self.update_control_top_bottom()
        self.drag_scroll_pos = pos
        if self.pressed == 1:
            tol, cw = self.tolerance, self.control_width
            hit = (1 - cw - tol.y * cw <= pos.x < 1 + tol.y * cw
                   and -tol.x <= pos.y < 1 + tol.x)
            if hit:
                room = 1 - (self.control_bottom - self.control_top)
                delta = (pos.y - self.press_offset) / room * (self._total() - 1) if room else 0.0
                self.scroll_pos = self.previous_value + delta
            else:
                self.scroll_pos = self.previous_value
            self.scroll_pos = max(min(self.scroll_pos, self._total() - 1), 0)
            i = min(self.selected_item, math.floor((self.scroll_pos + 1) / self.item_height - 1))
            i = max(i, math.ceil(self.scroll_pos / self.item_height))
            self.set_selected(i)
        elif self.pressed == 2:
            self.set_selected(self._item_at(pos.y))
        return True

    def mouse_press(self, pos):
        if not (0 <= pos.x < 1 and 0 <= pos.y < 1):
            return False
        self.drag_scroll_pos = pos
        self.update_control_top_bottom()
        self.drag_scroll_timer = self.ctx.time
        if pos.x >= 1 - self.control_width:
            if pos.y < self.control_top:
                self.scroll_pos = max(self.scroll_pos - 1, 0)
                self._select_upwards()
            elif pos.y > self.control_bottom:
                self.scroll_pos = min(self.scroll_pos + 1, self._total() - 1)
                self._select_downwards()
            else:
                self.pressed = 1
                self.press_offset = pos.y
                self.previous_value = self.scroll_pos
        else:
            self.pressed = 2
            self.set_selected(self._item_at(pos.y))
        return True

    def _item_box_pos(self, pos):
        shift = Vec(0, self.selected_item * self.item_height - self.scroll_pos, 0)
        scale = Vec(1 - self.control_width, self.item_height, 0)
        return global_to_box(pos, shift, scale)

    def mouse_release(self, pos):
        if self.pressed == 2:
            self.pressed = 3  # lets set_selected know the mouse was released
            self.set_selected(self._item_at(pos.y))
            if self.n_items > 0:
                self.click_list_box_item(self.selected_item, self._item_box_pos(pos), False)
        self.pressed = 0
        return True

    def mouse_double_click(self, pos):
        if self.pressed == 2:
            self.click_list_box_item(self.selected_item, self._item_box_pos(pos), True)
            return True
        return False

    def update_control_top_bottom(self):
        total = self._total()
        if total <= 1:
            self.control_top = 0
            self.control_bottom = 1
            self.scroll_pos = 0
            return
        ctx = self.ctx
        if ctx.frametime and self.drag_scroll_timer < ctx.time:
            save = self.scroll_pos
            self.scroll_pos = max(self.scroll_pos,
                                  self.selected_item * self.item_height - 1 + self.item_height)
            self.scroll_pos = min(self.scroll_pos, self.selected_item * self.item_height)
            if self.scroll_pos != save:
                self.drag_scroll_timer = ctx.time + 0.2
        self.scroll_pos = max(min(self.scroll_pos, total - 1), 0)
        self.control_top = max(0, self.scroll_pos / total)
        self.control_bottom = min((self.scroll_pos + 1) / total, 1)

        fmin = self.control_width * self.size.x / self.size.y if self.size.y else 0.0
        f = self.control_bottom - self.control_top
        if f < fmin:
            f = (fmin - 1) / (f - 1)
            self.control_top = self.control_top * f
            self.control_bottom = self.control_bottom * f + (1 - f)

    def draw(self):
        ctx = self.ctx
        if self.pressed == 2:
            self.mouse_drag(self.drag_scroll_pos)
        self.update_control_top_bottom()
        cw = self.control_width
        src = self.src or ""
        if cw:
            ctx.draw_button_picture_vertical(Vec(1 - cw, 0, 0), f"{src}_s", Vec(cw, 1, 0), self.color2, 1)
            if self._total() > 1:
                o = Vec(1 - cw, self.control_top, 0)
                s = Vec(cw, self.control_bottom - self.control_top, 0)
                if self.pressed == 1:
                    state, color = "_c", self.color_c
                elif self.focused:
                    state, color = "_f", self.color_f
                else:
                    state, color = "_n", self.color
                ctx.draw_button_picture_vertical(o, f"{src}{state}", s, color, 1)
        ctx.set_clip_rect(Vec(), Vec(1, 1, 0))
        old_shift, old_scale, old_font = ctx.shift, ctx.scale, ctx.font
        abs_size = box_to_global_size(self.size, Vec(1 - cw, self.item_height, 0))
        if (self.nexuiz_font and ctx.cvar("utf8_oldfont_for_oldchars")
                and ctx.cvar("font3_is_unicode_compat")):
            ctx.font = FONT_USER
        try:
            i = math.floor(self.scroll_pos / self.item_height)
            while i < self.n_items:
                y = i * self.item_height - self.scroll_pos
                if y >= 1:
                    break
                ctx.shift = box_to_global(Vec(0, y, 0), old_shift, old_scale)
                ctx.scale = box_to_global_size(Vec(1 - cw, self.item_height, 0), old_scale)
                self.draw_list_box_item(i, abs_size, self.selected_item == i)
                i += 1
        finally:
            ctx.shift, ctx.scale, ctx.font = old_shift, old_scale, old_font
        ctx.clear_clip()

    def click_list_box_item(self, index, where, double_click):
        """Hook for subclasses: an item was clicked at a position in its box."""

    def draw_list_box_item(self, index, abs_size, selected):
        font = global_to_box_size(Vec(8, 8, 0), abs_size)
        color = Vec(0, 1, 0) if selected else Vec(1, 1, 1)
        self.ctx.draw_text(Vec(), f"Item {index}", font, color, 1, False)
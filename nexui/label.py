"""A widget that shows a line of text."""

from __future__ import annotations

from .core import Item, Vec, shorten_to_width, text_width, wrap_lines


class Label(Item):
    """Text placed in its box by an alignment factor."""

    font_size: float = 8
    align: float = 0.5
    allow_cut = False
    allow_colors = False
    allow_wrap = False
    margin_left: float = 0
    margin_right: float = 0
    alpha: float = 0.7
    color_l = Vec(1, 1, 1)
    disabled = False
    disabled_alpha: float = 0.3

    def __init__(self, *, context=None) -> None:
        super().__init__(context=context)
        self.text = None
        self.keepspace_left = 0.0
        self.keepspace_right = 0.0
        self.real_font_size = Vec()
        self.real_origin = Vec()
        self.text_entity = None

    def _aligned_x(self, text, allow_colors):
        room = 1 - self.keepspace_left - self.keepspace_right
        used = min(self.real_font_size.x * text_width(text, allow_colors), room)
        return self.align * (room - used) + self.keepspace_left

    def to_string(self):
        return self.text

    def set_text(self, text):
        self.text = text
        self.real_origin = self.real_origin.with_(x=self._aligned_x(text, self.allow_colors))

    def resize_notify(self, rel_origin, rel_size, abs_origin, abs_size):
        Item.resize_notify(self, rel_origin, rel_size, abs_origin, abs_size)
        fx = self.font_size / abs_size.x
        fy = self.font_size / abs_size.y
        scale = self.ctx.scale
        if scale.y and scale.x / scale.y < 1.5:
            fx *= 0.666
        self.real_font_size = Vec(fx, fy, 0)
        if self.margin_left:
            self.keepspace_left = self.margin_left * fx
        if self.margin_right:
            self.keepspace_right = self.margin_right * fx
        self.real_origin = Vec(self._aligned_x(self.text, self.allow_colors), 0.5 * (1 - fy), 0)

    def configure_label(self, text, font_size, align):
        self.font_size = font_size
        self.align = align
        self.set_text(text)

    def draw(self):
        ctx = self.ctx
        if self.disabled:
            ctx.alpha *= self.disabled_alpha
        if self.text_entity is not None:
            t = self.text_entity.to_string()
            self.real_origin = self.real_origin.with_(x=self._aligned_x(t, False))
        else:
            t = self.text
        if not self.font_size or not t:
            return
        room = (1 - self.keepspace_left - self.keepspace_right) / self.real_font_size.x
        if self.allow_cut:
            ctx.draw_text(self.real_origin, shorten_to_width(t, room, self.allow_colors),
                          self.real_font_size, self.color_l, self.alpha, self.allow_colors)
        elif self.allow_wrap:
            o = self.real_origin
            for line in wrap_lines(t, room, self.allow_colors):
                ctx.draw_text(o, line, self.real_font_size, self.color_l, self.alpha, self.allow_colors)
                o = o.with_(y=o.y + self.real_font_size.y)
        else:
            ctx.draw_text(self.real_origin, t, self.real_font_size, self.color_l,
                          self.alpha, self.allow_colors)
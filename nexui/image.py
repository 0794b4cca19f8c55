"""Picture widgets: a plain image and a bordered frame with a title."""

from __future__ import annotations

from .core import Item, Vec, box_to_global, box_to_global_size
from .label import Label


class Image(Item):
    """A picture, optionally kept at a fixed aspect ratio."""

    color = Vec(1, 1, 1)
    forced_aspect: float = 0

    def __init__(self, *, context=None) -> None:
        super().__init__(context=context)
        self.src = None
        self.img_origin = Vec()
        self.img_size = Vec()

    def to_string(self):
        return self.src

    def configure_image(self, path):
        self.src = path

    def draw(self):
        self.ctx.draw_picture(self.img_origin, self.src, self.img_size, self.color, 1)

    def resize_notify(self, rel_origin, rel_size, abs_origin, abs_size):
        Item.resize_notify(self, rel_origin, rel_size, abs_origin, abs_size)
        if self.forced_aspect == 0:
            self.img_origin = Vec()
            self.img_size = Vec(1, 1, 0)
            return
        if abs_size.x > self.forced_aspect * abs_size.y:
            self.img_size = Vec(abs_size.y * self.forced_aspect / abs_size.x, 1, 0)
        else:
            self.img_size = Vec(1, abs_size.x / (self.forced_aspect * abs_size.y), 0)
        self.img_origin = Vec(0.5, 0.5, 0) - self.img_size * 0.5


class BorderImage(Label):
    """A framed background with a title bar and an optional close button."""

    border_height: float = 0
    color = Vec(1, 1, 1)
    zoomed_out_title_bar_position: float = 0
    zoomed_out_title_bar = False
    border_lines: float = 1

    def __init__(self, *, context=None) -> None:
        super().__init__(context=context)
        self.src = None
        self.border_vec = Vec()
        self.close_button = None
        self.real_font_size_nexposeed = Vec()
        self.real_origin_nexposeed = Vec()
        self.is_nexposee_title_bar = False

    def _in_nexposee_dialog(self):
        parent = self.parent
        if not self.zoomed_out_title_bar or parent is None:
            return False
        grand = parent.parent
        return (getattr(grand, "instance_of_nexposee", False)
                and getattr(parent, "instance_of_dialog", False)
                and getattr(parent, "frame", None) is self)

    def resize_notify(self, rel_origin, rel_size, abs_origin, abs_size):
        self.is_nexposee_title_bar = self._in_nexposee_dialog()
        if self.is_nexposee_title_bar:
            ctx = self.ctx
            screen = Vec(ctx.conwidth, ctx.conheight, 0)
            parent = self.parent
            Label.resize_notify(self, rel_origin, rel_size,
                                box_to_global(parent.nexposee_small_origin, Vec(), screen),
                                box_to_global_size(parent.nexposee_small_size, screen))
            self.real_origin = self.real_origin.with_(
                y=self.real_font_size.y * self.zoomed_out_title_bar_position)
            self.real_origin_nexposeed = self.real_origin
            self.real_font_size_nexposeed = self.real_font_size
        Label.resize_notify(self, rel_origin, rel_size, abs_origin, abs_size)
        self.border_vec = Vec(self.border_height / abs_size.x, self.border_height / abs_size.y, 0)
        self.real_origin = self.real_origin.with_(y=0.5 * (self.border_vec.y - self.real_font_size.y))
        button = self.close_button
        if button is not None:
            button.container_origin = Vec(1 - self.border_vec.x, 0, 0)
            button.container_size = self.border_vec
            button.color = self.color
            button.color_c = self.color
            button.color_f = self.color

    def configure_border_image(self, title, font_size, color, path, border_height):
        self.configure_label(title, font_size, 0.5)
        self.src = path
        self.color = color
        self.border_height = border_height

    def draw(self):
        ctx = self.ctx
        if self.src:
            ctx.draw_picture_border(Vec(), self.src, Vec(1, 1, 0), self.color, 1,
                                    self.border_vec * self.border_lines)
        if self.font_size > 0:
            if not self.is_nexposee_title_bar:
                Label.draw(self)
                return
            ro, rf = self.real_origin, self.real_font_size
            factor = self.parent.nexposee_animation_factor
            self.real_origin = ro * factor + self.real_origin_nexposeed * (1 - factor)
            self.real_font_size = rf * factor + self.real_font_size_nexposeed * (1 - factor)
            try:
                Label.draw(self)
            finally:
                self.real_origin = ro
                self.real_font_size = rf
"""A container that shows its children as thumbnails and zooms one in."""

from __future__ import annotations

from itertools import combinations

from .container import Container
from .core import Key, KeyState, Vec

# Animation states.
THUMBNAILS = 0
ZOOMING_IN = 1
ZOOMED_IN = 2
ZOOMING_OUT = 3

_NEXPOSEE_DEFAULTS = {
    "nexposee_initial_size": Vec(),
    "nexposee_initial_origin": Vec(),
    "nexposee_initial_alpha": 0.0,
    "nexposee_small_size": Vec(),
    "nexposee_small_origin": Vec(),
    "nexposee_small_alpha": 0.0,
    "nexposee_medium_alpha": 0.0,
    "nexposee_scale_center": Vec(),
    "nexposee_align": Vec(),
    "nexposee_animation_factor": 0.0,
}


def _ensure_nexposee_fields(item):
    for name, value in _NEXPOSEE_DEFAULTS.items():
        if not hasattr(item, name):
            setattr(item, name, value)


def exposee_close_button_click(button, other):
    """Zoom the currently shown child of the nexposee back out."""
    other.selected_child = other.focused_child
    other.set_focus(None)
    other.animation_state = ZOOMING_OUT


def _overlap(a, b):
    amin, amax = a.nexposee_small_origin, a.nexposee_small_origin + a.nexposee_small_size
    bmin, bmax = b.nexposee_small_origin, b.nexposee_small_origin + b.nexposee_small_size
    return ((bmin.x - amax.x) * (amin.x - bmax.x) > 0
            and (bmin.y - amax.y) * (amin.y - bmax.y) > 0)


class Nexposee(Container):
    """Shows children scaled down side by side; a selected one zooms to full size.

    The animation factor runs from 0 (thumbnails) to 1 (full size).
    """

    instance_of_nexposee = True

    def __init__(self, *, context=None) -> None:
        super().__init__(context=context)
        self.animation_state = -1
        self.animation_factor = 0.0
        self.selected_child = None
        self.mouse_focused_child = None
        self.mouse_position = Vec()

    def close(self):
        """Hook for subclasses: the user dismissed the overview."""

    def resize_notify(self, rel_origin, rel_size, abs_origin, abs_size):
        self.calc()
        self.resize_notify_lie(rel_origin, rel_size, abs_origin, abs_size,
                               "nexposee_initial_origin", "nexposee_initial_size")

    def _calc_scale(self, scale):
        for e in self.children():
            _ensure_nexposee_fields(e)
            center = e.nexposee_scale_center
            small_origin = (e.nexposee_initial_origin - center) * scale + center
            small_size = e.nexposee_initial_size * scale
            align = e.nexposee_align
            x, y = small_origin.x, small_origin.y
            if align.x > 0:
                x = 1 - align.x * scale
            if align.x < 0:
                x = -small_size.x + align.x * scale
            if align.y > 0:
                y = 1 - align.y * scale
            if align.y < 0:
                y = -small_size.y + align.y * scale
            e.nexposee_small_origin = Vec(x, y, small_origin.z)
            e.nexposee_small_size = small_size

    def _overlapping_at(self, scale):
        self._calc_scale(scale)
        return any(_overlap(a, b) for a, b in combinations(self.children(), 2))

    def calc(self):
        """Find a thumbnail scale at which no two children overlap."""
        scale = 0.7
        while self._overlapping_at(scale):
            scale *= 0.99
        scale *= 0.95
        self._calc_scale(scale)

    def set_nexposee(self, other, scale_center, small_alpha, medium_alpha):
        _ensure_nexposee_fields(other)
        other.nexposee_scale_center = scale_center
        other.nexposee_small_alpha = small_alpha
        self.set_alpha_of(other, small_alpha)
        other.nexposee_medium_alpha = medium_alpha

    def pull_nexposee(self, other, align):
        _ensure_nexposee_fields(other)
        other.nexposee_align = align

    def draw(self):
        if self.animation_state == -1:
            self.animation_state = THUMBNAILS
        frametime = self.ctx.frametime
        f = min(1, frametime * 5)
        state = self.animation_state
        if state == THUMBNAILS:
            self.animation_factor = 0
        elif state == ZOOMING_IN:
            self.animation_factor += f
            if self.animation_factor >= 1:
                self.animation_factor = 1
                self.animation_state = ZOOMED_IN
                Container.set_focus(self, self.selected_child)
        elif state == ZOOMED_IN:
            self.animation_factor = 1
        elif state == ZOOMING_OUT:
            self.animation_factor -= f
            self.mouse_focused_child = self.item_from_point(self.mouse_position)
            if self.animation_factor <= 0:
                self.animation_factor = 0
                self.animation_state = THUMBNAILS
                self.selected_child = self.mouse_focused_child

        f = min(1, frametime * 10)
        factor = self.animation_factor
        for e in self.children():
            if e is self.selected_child:
                e.container_origin = e.nexposee_small_origin * (1 - factor) + e.nexposee_initial_origin * factor
                e.container_size = e.nexposee_small_size * (1 - factor) + e.nexposee_initial_size * factor
                e.nexposee_animation_factor = factor
                a0 = e.nexposee_medium_alpha
                if self.animation_state == ZOOMING_OUT and e is not self.mouse_focused_child:
                    a0 = e.nexposee_small_alpha
                a = a0 * (1 - factor) + factor
            else:
                e.container_origin = e.nexposee_small_origin
                e.container_size = e.nexposee_small_size
                e.nexposee_animation_factor = 0
                a = e.nexposee_small_alpha * (1 - factor)
            self.set_alpha_of(e, e.container_alpha * (1 - f) + a * f)

        Container.draw(self)

    def mouse_press(self, pos):
        if self.animation_state == THUMBNAILS:
            self.mouse_focused_child = None
            Nexposee.mouse_move(self, pos)
            if self.mouse_focused_child is not None:
                self.animation_state = ZOOMING_IN
                Container.set_focus(self, None)
            else:
                self.close()
            return True
        if self.animation_state == ZOOMED_IN:
            if not Container.mouse_press(self, pos):
                self.animation_state = ZOOMING_OUT
                Container.set_focus(self, None)
            return True
        return False

    def mouse_release(self, pos):
        if self.animation_state == ZOOMED_IN:
            return Container.mouse_release(self, pos)
        return False

    def mouse_drag(self, pos):
        if self.animation_state == ZOOMED_IN:
            return Container.mouse_drag(self, pos)
        return False

    def mouse_move(self, pos):
        self.mouse_position = pos
        previous = self.mouse_focused_child
        self.mouse_focused_child = self.item_from_point(pos)
        if self.animation_state == ZOOMED_IN:
            return Container.mouse_move(self, pos)
        if self.animation_state == THUMBNAILS:
            current = self.mouse_focused_child
            if current is not None and current is not previous:
                self.selected_child = current
            return True
        return False

    def key_up(self, key, ascii, shift):
        if self.animation_state == ZOOMED_IN:
            return Container.key_up(self, key, ascii, shift)
        return False

    def _cycle_selection(self, backwards):
        children = self.children()
        selected = self.selected_child
        if selected in children:
            index = children.index(selected) + (-1 if backwards else 1)
            selected = children[index] if 0 <= index < len(children) else None
        else:
            selected = None
        if selected is None:
            selected = self.last_child if backwards else self.first_child
        self.selected_child = selected

    def key_down(self, key, ascii, shift):
        if self.animation_state == ZOOMED_IN and Container.key_down(self, key, ascii, shift):
            return True
        if key == Key.TAB and self.animation_state == THUMBNAILS:
            self._cycle_selection(bool(shift & KeyState.SHIFT))
        state = self.animation_state
        if state in (THUMBNAILS, ZOOMING_OUT):
            nexposee_key = key in (Key.SPACE, Key.ENTER)
        elif state in (ZOOMING_IN, ZOOMED_IN):
            nexposee_key = key == Key.ESCAPE
        else:
            nexposee_key = False
        if not nexposee_key:
            return False
        self.animation_state = ZOOMING_IN if state in (THUMBNAILS, ZOOMING_OUT) else ZOOMING_OUT
        if self.focused_child is not None:
            self.selected_child = self.focused_child
        if self.selected_child is None:
            self.animation_state = THUMBNAILS
        Container.set_focus(self, None)
        return True

    def add_item(self, other, origin, size, alpha):
        Container.add_item(self, other, origin, size, alpha)
        _ensure_nexposee_fields(other)
        other.nexposee_initial_size = other.container_size
        other.nexposee_initial_origin = other.container_origin
        other.nexposee_initial_alpha = other.container_alpha

    def focus_enter(self):
        if self.animation_state == ZOOMED_IN:
            Container.set_focus(self, self.selected_child)
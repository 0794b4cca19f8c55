"""Widgets that hold and lay out child widgets."""

from __future__ import annotations

from typing import Optional

from .core import FONT_USER, Item, Key, KeyState, Vec, box_to_global, box_to_global_size, global_to_box


def _inside(pos: Vec) -> bool:
    return 0 <= pos.x < 1 and 0 <= pos.y < 1


class Container(Item):
    """An item holding an ordered list of children in box coordinates."""

    def __init__(self, *, context=None) -> None:
        super().__init__(context=context)
        self.focusable = 0
        self._children: list[Item] = []
        self.focused_child: Optional[Item] = None
        self.shown = False

    def children(self):
        return list(self._children)

    @property
    def first_child(self) -> Optional[Item]:
        return self._children[0] if self._children else None

    @property
    def last_child(self) -> Optional[Item]:
        return self._children[-1] if self._children else None

    def _siblings_after(self, item: Item):
        return self._children[self._children.index(item) + 1:]

    def _siblings_before(self, item: Item):
        return reversed(self._children[:self._children.index(item)])

    def show_notify(self):
        if self.shown:
            return
        self.shown = True
        for e in self._children:
            if e.container_alpha > 0:
                e.show_notify()

    def hide_notify(self):
        if not self.shown:
            return
        self.shown = False
        for e in self._children:
            if e.container_alpha > 0:
                e.hide_notify()

    def set_alpha_of(self, other, alpha):
        if alpha <= 0:
            if other.container_alpha > 0:
                other.hide_notify()
        elif other.container_alpha <= 0:
            other.show_notify()
        other.container_alpha = alpha

    def _notify_child(self, e, origin_field, size_field, abs_origin, abs_size):
        o = getattr(e, origin_field)
        s = getattr(e, size_field)
        e.resize_notify(o, s, box_to_global(o, abs_origin, abs_size), box_to_global_size(s, abs_size))

    def resize_notify_lie(self, rel_origin, rel_size, abs_origin, abs_size, origin_field, size_field):
        for e in self._children:
            self._notify_child(e, origin_field, size_field, abs_origin, abs_size)
        again = True
        while again:
            again = False
            for e in self._children:
                if e.resized:
                    e.resized = False
                    again = True
                    self._notify_child(e, origin_field, size_field, abs_origin, abs_size)
        Item.resize_notify(self, rel_origin, rel_size, abs_origin, abs_size)

    def resize_notify(self, rel_origin, rel_size, abs_origin, abs_size):
        self.resize_notify_lie(rel_origin, rel_size, abs_origin, abs_size,
                               "container_origin", "container_size")

    def item_from_point(self, pos):
        for e in reversed(self._children):
            o, s = e.container_origin, e.container_size
            if o.x <= pos.x < o.x + s.x and o.y <= pos.y < o.y + s.y:
                return e
        return None

    def draw(self):
        ctx = self.ctx
        old_font = ctx.font
        old_shift, old_scale, old_alpha = ctx.shift, ctx.scale, ctx.alpha
        self.focusable = 0
        for e in list(self._children):
            if e.focusable:
                self.focusable += 1
            if e.container_alpha < 0.003:
                continue
            ctx.shift = box_to_global(e.container_origin, old_shift, old_scale)
            ctx.scale = box_to_global_size(e.container_size, old_scale)
            ctx.alpha *= e.container_alpha
            if (e.nexuiz_font and ctx.cvar("utf8_oldfont_for_oldchars")
                    and ctx.cvar("font3_is_unicode_compat")):
                ctx.font = FONT_USER
            try:
                e.draw()
            finally:
                ctx.font = old_font
                ctx.shift, ctx.scale, ctx.alpha = old_shift, old_scale, old_alpha

    def focus_leave(self):
        self.set_focus(None)

    def key_up(self, key, ascii, shift):
        f = self.focused_child
        return f.key_up(key, ascii, shift) if f else False

    def key_down(self, key, ascii, shift):
        f = self.focused_child
        return f.key_down(key, ascii, shift) if f else False

    def _to_child(self, f, pos):
        return global_to_box(pos, f.container_origin, f.container_size)

    def mouse_move(self, pos):
        f = self.focused_child
        return f.mouse_move(self._to_child(f, pos)) if f else False

    def mouse_press(self, pos):
        f = self.focused_child
        return f.mouse_press(self._to_child(f, pos)) if f else False

    def mouse_double_click(self, pos):
        f = self.focused_child
        return f.mouse_double_click(self._to_child(f, pos)) if f else False

    def mouse_drag(self, pos):
        f = self.focused_child
        return f.mouse_drag(self._to_child(f, pos)) if f else False

    def mouse_release(self, pos):
        f = self.focused_child
        return f.mouse_release(self._to_child(f, pos)) if f else False

    def add_item_centered(self, other, size, alpha):
        self.add_item(other, Vec(0.5, 0.5, 0) - size * 0.5, size, alpha)

    def add_item(self, other, origin, size, alpha):
        if other.parent is not None:
            raise ValueError("Can't add already added item!")
        if other.focusable:
            self.focusable += 1
        ox, oy, sx, sy = origin.x, origin.y, size.x, size.y
        if sx > 1:
            ox -= 0.5 * (sx - 1)
            sx = 1
        if sy > 1:
            oy -= 0.5 * (sy - 1)
            sy = 1
        ox = min(max(0, ox), 1 - sx)
        oy = min(max(0, oy), 1 - sy)
        other.parent = self
        other.container_origin = Vec(ox, oy, origin.z)
        other.container_size = Vec(sx, sy, size.z)
        self.set_alpha_of(other, alpha)
        self._children.append(other)

    def remove_item(self, other):
        if other.parent is not self:
            raise ValueError("Can't remove from wrong container!")
        if other.focusable:
            self.focusable -= 1
        other.parent = None
        self._children.remove(other)

    def set_focus(self, other):
        if other is not None and not self.focused:
            raise RuntimeError("Trying to set focus in a non-focused control!")
        if self.focused_child is other:
            return
        if self.focused_child is not None:
            self.focused_child.focused = False
            self.focused_child.focus_leave()
        if other is not None:
            other.focused = True
            other.focus_enter()
        self.focused_child = other

    def move_item_after(self, other, dest):
        if other.parent is not self:
            raise ValueError("Can't move in wrong container!")
        self._children.remove(other)
        index = self._children.index(dest) + 1 if dest is not None else 0
        self._children.insert(index, other)

    def preferred_focused_grand_child(self):
        best = None
        for e in self._children:
            if isinstance(e, Container):
                e2 = e.preferred_focused_grand_child()
                if e2 is not None and (best is None or best.preferred_focus_priority < e2.preferred_focus_priority):
                    best = e2
            if best is None or best.preferred_focus_priority < e.preferred_focus_priority:
                best = e
        return best


class InputContainer(Container):
    """A container that moves focus by mouse position and the Tab key."""

    is_tab_root = False

    def __init__(self, *, context=None) -> None:
        super().__init__(context=context)
        self.mouse_focused_child: Optional[Item] = None

    def focus_leave(self):
        Container.focus_leave(self)
        self.mouse_focused_child = None

    def _focus_first(self, candidates):
        for ff in candidates:
            if ff.focusable:
                self.set_focus(ff)
                return True
        return False

    def key_down(self, key, ascii, shift):
        if Container.key_down(self, key, ascii, shift):
            return True
        if key == Key.ESCAPE:
            if self.focused_child is not None:
                self.set_focus(None)
                return True
            return False
        if key == Key.TAB:
            f = self.focused_child
            backwards = bool(shift & KeyState.SHIFT)
            if f is not None:
                rest = self._siblings_before(f) if backwards else self._siblings_after(f)
                if self._focus_first(rest):
                    return True
            if f is None or self.is_tab_root:
                everything = reversed(self._children) if backwards else self._children
                return self._focus_first(everything)
        return False

    def change_focus_xy(self, pos):
        e = self.mouse_focused_child
        ne = self.item_from_point(pos)
        if ne is not None and not ne.focusable:
            ne = None
        self.mouse_focused_child = ne
        if ne is not None and ne is not e:
            self.set_focus(ne)
            if isinstance(ne, InputContainer):
                ne.focused_child = None
                ne.change_focus_xy(global_to_box(pos, ne.container_origin, ne.container_size))
        return ne is not None

    def mouse_drag(self, pos):
        if Container.mouse_drag(self, pos):
            return True
        return _inside(pos)

    def mouse_move(self, pos):
        if self.change_focus_xy(pos) and Container.mouse_move(self, pos):
            return True
        return _inside(pos)

    def mouse_press(self, pos):
        self.mouse_focused_child = None
        if self.change_focus_xy(pos) and Container.mouse_press(self, pos):
            return True
        return _inside(pos)

    def mouse_release(self, pos):
        Container.mouse_release(self, pos)
        if self.focused and self.change_focus_xy(pos):
            return True
        return _inside(pos)
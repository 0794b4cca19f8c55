"""A controller that stacks dialogs and tabs, animating between them."""

from __future__ import annotations

from .container import Container
from .core import Vec, global_to_box, global_to_box_size

# Child states: hidden (fading out), visible (zooming in), greyed out (inactive).
HIDDEN = 0
VISIBLE = 1
GREYED = 2

_MODAL_DEFAULTS = {
    "modal_initial_size": Vec(),
    "modal_initial_origin": Vec(),
    "modal_initial_alpha": 0.0,
    "modal_button_size": Vec(),
    "modal_button_origin": Vec(),
    "modal_state": HIDDEN,
    "modal_factor": 0.0,
    "modal_controlling_button": None,
}


def _ensure_modal_fields(item):
    for name, value in _MODAL_DEFAULTS.items():
        if not hasattr(item, name):
            setattr(item, name, value)


def _ratio(a, b):
    return a / b if b else 0.0


def tab_button_click(button, tab):
    """Switch the tab's controller to show this tab, pressing its button."""
    if getattr(tab, "modal_state", HIDDEN) == VISIBLE:
        return
    tab.parent.hide_all(False)
    button.force_pressed = True
    tab.modal_controlling_button = button
    tab.parent.show_child(tab, button.origin, button.size, False)


def dialog_open_button_click(button, tab):
    """Open a dialog zooming out of the clicked button."""
    dialog_open_button_click_with_coords(button, tab, button.origin, button.size)


def dialog_open_button_click_with_coords(button, tab, origin, size):
    """Open a dialog zooming out of the given absolute rectangle."""
    if getattr(tab, "modal_state", HIDDEN):
        return
    if button is not None:
        button.force_pressed = True
    tab.modal_controlling_button = button
    tab.parent.show_child(tab, origin, size, False)


def dialog_close_button_click(button, tab):
    """Close the given dialog."""
    tab.parent.hide_child(tab, False)


class ModalController(Container):
    """Keeps a stack of children of which only the topmost is active.

    Children are expected to be added in stacking order, lowest first.
    While an animation runs no child has focus; afterwards the topmost does.
    """

    faded_alpha: float = 0.3
    instance_of_modal_controller = True

    def resize_notify(self, rel_origin, rel_size, abs_origin, abs_size):
        self.resize_notify_lie(rel_origin, rel_size, abs_origin, abs_size,
                               "modal_initial_origin", "modal_initial_size")

    def initialize_dialog(self, root):
        self.modal_initial_alpha = 1
        self.hide_all(True)
        self.show_child(root, Vec(), Vec(), True)

    def switch_state(self, other, state, skip_animation):
        _ensure_modal_fields(other)
        previous = other.modal_state
        if state == previous and not skip_animation:
            return
        other.modal_state = state
        ratio = _ratio(other.container_alpha, other.modal_initial_alpha)
        factor = other.modal_factor
        if state == HIDDEN:
            factor = 1 - ratio
        elif state == VISIBLE:
            factor = ratio
            if previous == HIDDEN and not skip_animation:
                other.container_origin = other.modal_button_origin
                other.container_size = other.modal_button_size
        elif state == GREYED:
            factor = min(max(0.0, _ratio(1 - ratio, self.faded_alpha)), 1.0)
        if skip_animation:
            factor = 1
        other.modal_factor = factor

    def draw(self):
        children = self.children()
        front = None
        for e in children:
            if e.modal_state:
                if front is not None:
                    self.switch_state(front, GREYED, False)
                front = e
        if front is not None:
            self.switch_state(front, VISIBLE, False)

        df = self.ctx.frametime * 3  # animation speed
        animating = False
        for e in children:
            f = e.modal_factor = min(1, e.modal_factor + df)
            if e.modal_state and f < 1:
                animating = True
            if f < 1:
                prev_factor = (1 - f) / (1 - f + df)
                target_factor = df / (1 - f + df)
            else:
                prev_factor, target_factor = 0, 1

            if e.modal_state == GREYED:
                target_origin, target_size = e.container_origin, e.container_size
                target_alpha = self.faded_alpha * e.modal_initial_alpha
            elif e.modal_state == VISIBLE:
                target_origin, target_size = e.modal_initial_origin, e.modal_initial_size
                target_alpha = e.modal_initial_alpha
            else:
                if f < 1:
                    animating = True
                target_origin, target_size = e.container_origin, e.container_size
                target_alpha = 0

            if f == 1:
                e.container_origin = target_origin
                e.container_size = target_size
                self.set_alpha_of(e, target_alpha)
            else:
                e.container_origin = e.container_origin * prev_factor + target_origin * target_factor
                e.container_size = e.container_size * prev_factor + target_size * target_factor
                self.set_alpha_of(e, e.container_alpha * prev_factor + target_alpha * target_factor)

        if animating or not self.focused:
            self.set_focus(None)
        else:
            self.set_focus(front)
        Container.draw(self)

    def add_tab(self, other, tab_button):
        self.add_item(other, Vec(0, 0, 0), Vec(1, 1, 1), 1)
        tab_button.on_click = tab_button_click
        tab_button.on_click_entity = other
        other.tab_selecting_button = tab_button
        if other is self.first_child:
            tab_button.force_pressed = True
            other.modal_controlling_button = tab_button
            self.show_child(other, Vec(), Vec(), True)

    def add_item(self, other, origin, size, alpha):
        # Children start invisible; show_child fades them in.
        Container.add_item(self, other, origin, size, 0)
        _ensure_modal_fields(other)
        other.modal_initial_size = other.container_size
        other.modal_initial_origin = other.container_origin
        other.modal_initial_alpha = alpha

    def show_child(self, other, origin, size, skip_animation):
        _ensure_modal_fields(other)
        if other.modal_state == HIDDEN or skip_animation:
            self.set_focus(None)
            if not skip_animation:
                other.modal_button_origin = global_to_box(origin, self.origin, self.size)
                other.modal_button_size = global_to_box_size(size, self.size)
            self.switch_state(other, VISIBLE, skip_animation)

    def hide_all(self, skip_animation):
        for e in self.children():
            self.hide_child(e, skip_animation)

    def hide_child(self, other, skip_animation):
        _ensure_modal_fields(other)
        if other.modal_state or skip_animation:
            self.set_focus(None)
            self.switch_state(other, HIDDEN, skip_animation)
            button = other.modal_controlling_button
            if button is not None:
                button.force_pressed = False
                other.modal_controlling_button = None
"""Check boxes and radio buttons."""

from __future__ import annotations

from .button import Button
from .label import Label


def checkbox_click(box, other):
    """Toggle the check box."""
    box.set_checked(not box.checked)


def radiobutton_click(button, other):
    """Select the radio button and clear the others of its group."""
    if button.checked:
        if button.allow_deselect:
            button.set_checked(False)
        return
    parent = button.parent
    if parent is not None:
        for e in parent.children():
            if e is not button and isinstance(e, CheckBox) and getattr(e, "group", 0) == button.group:
                e.set_checked(False)
    button.set_checked(True)


class CheckBox(Button):
    """A button that keeps an on/off state."""

    use_down_as_checked = False
    src_multi = False

    def __init__(self, *, context=None) -> None:
        super().__init__(context=context)
        self.checked = False
        self.on_click = checkbox_click

    def set_checked(self, value):
        self.checked = value

    def to_string(self):
        text = Label.to_string(self) or ""
        return f"{text}, {'checked' if self.checked else 'unchecked'}"

    def configure_check_box(self, text, font_size, gfx):
        self.configure_button(text, font_size, gfx)
        self.align = 0

    def draw(self):
        saved = self.pressed
        if self.use_down_as_checked:
            self.src_suffix = None
            self.force_pressed = self.checked
        else:
            self.src_suffix = "1" if self.checked else "0"
        Button.draw(self)
        self.pressed = saved


class RadioButton(CheckBox):
    """A check box of which only one per group is checked."""

    def __init__(self, *, context=None) -> None:
        super().__init__(context=context)
        self.group = 0
        self.allow_deselect = False
        self.on_click = radiobutton_click

    def configure_radio_button(self, text, font_size, gfx, group, allow_deselect):
        self.configure_check_box(text, font_size, gfx)
        self.align = 0
        self.group = group
        self.allow_deselect = allow_deselect
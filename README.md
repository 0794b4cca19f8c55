# nexui

A small retained-mode widget toolkit for in-game menus. Widgets live in a
tree of containers and lay themselves out in relative box coordinates
(0..1 inside their parent). Keyboard and mouse events are routed to them
through focus. All drawing goes through a `DrawContext`, which also holds
console variables ("cvars") and collects local commands.

## Installation

```
pip install nexui
```

To run the tests:

```
pip install "nexui[test]"
pytest
```

## Modules

- `nexui.core` has `Vec` (a three-component vector), `Key` and `KeyState`
  (key codes and modifier flags), `DrawContext`, the base widget `Item`,
  the coordinate helpers `box_to_global`, `box_to_global_size`,
  `global_to_box` and `global_to_box_size`, and the text helpers
  `strip_colors`, `text_width`, `length_up_to_width`, `shorten_to_width`
  and `wrap_lines`. The text helpers understand `^0`..`^9` and `^xRGB`
  colour codes and treat `^^` as an escaped caret.
- `nexui.container` has `Container`, which keeps an ordered list of
  children (`add_item`, `add_item_centered`, `remove_item`,
  `move_item_after`, `set_focus`, `item_from_point`, `children`), and
  `InputContainer`, which moves focus with the mouse and with Tab and
  Shift+Tab.
- `nexui.label` has `Label`, which shows aligned text that can be cut to
  width or wrapped.
- `nexui.button` has `Button`. It fires `on_click(button, on_click_entity)`
  on mouse release, or shortly after Enter or Space is pressed.
- `nexui.checkbox` has `CheckBox` and `RadioButton`, and the click handlers
  `checkbox_click` and `radiobutton_click`.
- `nexui.image` has `Image`, which can keep a forced aspect ratio, and
  `BorderImage`, the framed title bar that dialogs use.
- `nexui.slider` has `Slider` and the helpers `median`, `almost_in_bound`
  and `format_decimals`.
- `nexui.textslider` has `TextSlider`, a slider over named choices.
- `nexui.inputbox` has `InputBox`, a one-line text field with a cursor,
  scrolling, forbidden characters, a length limit and optional display of
  colour codes. It also has `input_box_clear_click`.
- `nexui.listbox` has `ListBox`, a scrolling list with a scrollbar. Override
  `draw_list_box_item` and `click_list_box_item` to make it show and react
  to your own items.
- `nexui.modalcontroller` has `ModalController`, which keeps a stack of
  dialogs. A dialog zooms in from the button that opened it and fades out
  when closed. The controller also works as a tab control (`add_tab`). The
  module has the click handlers `tab_button_click`,
  `dialog_open_button_click`, `dialog_open_button_click_with_coords` and
  `dialog_close_button_click`.
- `nexui.nexposee` has `Nexposee`, which shows its children as thumbnails
  that do not overlap and zooms into the one that is picked. It also has
  `exposee_close_button_click`.
- `nexui.dialog` has `Dialog` and `Tab`. They lay out their children on a
  table grid with `tr`, `td`, `td_no_margin`, `td_empty`,
  `set_first_column` and `goto_rc`. Subclasses fill the grid by overriding
  `fill`, and `configure_dialog` builds the frame and the close button.
  The module also has the click handler `dialog_close`.

## Example

```python
from nexui.checkbox import CheckBox
from nexui.container import InputContainer
from nexui.core import DrawContext, Key, KeyState, Vec
from nexui.slider import Slider

ctx = DrawContext()
root = InputContainer(context=ctx)

volume = Slider()
volume.configure_slider_visuals(12, 0.5, 0.3, "gfx/slider")
volume.configure_slider_values(0, 0.5, 1, 0.1, 0.1, 0.5)

fullscreen = CheckBox()
fullscreen.configure_check_box("Fullscreen", 12, "gfx/checkbox")

root.add_item(volume, Vec(0, 0), Vec(1, 0.5), 1)
root.add_item(fullscreen, Vec(0, 0.5), Vec(1, 0.5), 1)
root.resize_notify(Vec(0, 0), Vec(1, 1), Vec(0, 0), Vec(800, 600))

root.focused = True
root.key_down(Key.TAB, 0, KeyState(0))       # focus the slider
root.key_down(Key.RIGHTARROW, 0, KeyState(0))
print(volume.to_string())

root.draw()
for name, args in ctx.operations:
    print(name, args)
```

## Rendering

`DrawContext` draws nothing by itself. Its drawing methods
(`draw_picture`, `draw_button_picture`, `draw_button_picture_vertical`,
`draw_picture_border`, `draw_fill`, `draw_text`) append a
`(name, arguments)` entry to `operations`, with the alpha already
multiplied by the context's current alpha. To render to a real backend,
subclass `DrawContext` and override these methods. Containers set `shift`,
`scale` and `alpha` on the context before drawing each child.
`set_clip_rect` and `clear_clip` keep the current clip rectangle in `clip`.

`cvar`, `cvar_string` and `cvar_set` read and write the `cvars`
dictionary. `local_command` appends to `commands`.

## What this package does not do

- It has no renderer, window or input loop. You must feed events to the
  root widget and call `draw` each frame, after setting `time` and
  `frametime` on the context.
- It has no skinned widget set and no ready-made dialogs. The `nexui.nexuiz`
  sub-package is empty. No widget here reads or writes cvars on its own.
- It does not load pictures or fonts. Text width is counted in characters,
  in units of the font size.
"""Dialogs laid out on a grid of rows and columns, and tabs built on them."""

from __future__ import annotations

from .button import Button
from .container import InputContainer
from .core import Key, Vec
from .image import BorderImage
from .modalcontroller import dialog_close_button_click
from .nexposee import exposee_close_button_click


def dialog_close(button, dialog):
    """Click handler that closes the dialog."""
    dialog.close()


class Dialog(InputContainer):
    """A framed container whose children are placed on a table grid.

    All layout parameters are given as attributes before configure_dialog
    is called; sizes marked as pixels are in console pixels.
    """

    is_tab_root = True
    instance_of_dialog = True

    closable = True
    title = "Form1"
    color = Vec(1, 0.5, 1)
    alpha: float = 0.0
    intended_width: float = 0
    rows: float = 3
    columns: float = 2

    margin_top: float = 0
    margin_bottom: float = 0
    margin_left: float = 0
    margin_right: float = 0
    column_spacing: float = 0
    row_spacing: float = 0
    row_height: float = 0
    title_height: float = 0
    title_font_size: float = 0  # if 0, the title takes no room
    zoomed_out_title_bar_position: float = 0
    zoomed_out_title_bar = False

    background_image = None
    close_button_image = None

    def __init__(self, *, context=None) -> None:
        super().__init__(context=context)
        self.close_button = None
        self.frame = None
        self.intended_height = 0.0
        self.item_origin = Vec(0, 0, 0)
        self.item_size = Vec(0, 0, 0)
        self.item_spacing = Vec(0, 0, 0)
        self.current_row = 0
        self.current_column = 0
        self.first_column = 0

    def fill(self):
        """Hook for subclasses: add the dialog's controls."""

    def add_item_simple(self, row, col, rowspan, colspan, item, margin):
        sp, sz = self.item_spacing, self.item_size
        gap_x = sp.x - sz.x
        gap_y = sp.y - sz.y
        origin = self.item_origin + Vec(col * sp.x, row * sp.y, 0)
        size = sz + Vec((colspan - 1) * sp.x, (rowspan - 1) * sp.y, 0)
        origin = Vec(origin.x - 0.5 * gap_x * margin.x, origin.y - 0.5 * gap_y * margin.y, origin.z)
        size = Vec(size.x + gap_x * margin.x, size.y + gap_y * margin.y, size.z)
        self.add_item(item, origin, size, 1)

    def goto_rc(self, row, col):
        self.current_row = row
        self.current_column = col

    def tr(self):
        self.current_row += 1
        self.current_column = self.first_column

    def td(self, rowspan, colspan, item):
        self.add_item_simple(self.current_row, self.current_column, rowspan, colspan, item, Vec(0, 0, 0))
        self.current_column += colspan

    def td_no_margin(self, rowspan, colspan, item, margin):
        self.add_item_simple(self.current_row, self.current_column, rowspan, colspan, item, margin)
        self.current_column += colspan

    def set_first_column(self, col):
        self.first_column = col

    def td_empty(self, colspan):
        self.current_column += colspan

    def configure_dialog(self):
        ctx = self.ctx
        title_height = self.title_height if self.title_font_size else 0
        abs_width = self.intended_width * ctx.conwidth
        abs_height = (title_height + self.margin_top + self.rows * self.row_height
                      + (self.rows - 1) * self.row_spacing + self.margin_bottom)
        if not abs_width or not abs_height:
            raise ValueError("dialog has no width or no height")

        frame = BorderImage(context=ctx)
        frame.configure_border_image(self.title, self.title_font_size, self.color,
                                     self.background_image, self.title_height)
        frame.zoomed_out_title_bar_position = self.zoomed_out_title_bar_position
        frame.zoomed_out_title_bar = self.zoomed_out_title_bar
        frame.alpha = self.alpha
        self.frame = frame
        self.add_item(frame, Vec(0, 0, 0), Vec(1, 1, 0), 1)

        self.title_height = title_height
        self.item_origin = Vec(self.margin_left / abs_width,
                               (title_height + self.margin_top) / abs_height, 0)
        inner = 1 - (self.margin_left + self.margin_right
                     + self.column_spacing * (self.columns - 1)) / abs_width
        self.item_size = Vec(inner / self.columns, self.row_height / abs_height, 0)
        self.item_spacing = self.item_size + Vec(self.column_spacing / abs_width,
                                                 self.row_spacing / abs_height, 0)
        self.intended_height = abs_height / ctx.conheight
        self.current_row = -1
        self.current_column = -1

        self.fill()

        close_button = None
        if self.closable:
            close_button = Button(context=ctx)
            close_button.configure_button("Close", 0, self.close_button_image)
            close_button.on_click = dialog_close
            close_button.on_click_entity = self
            close_button.src_multi = False
            self.close_button = close_button
            self.add_item(close_button, Vec(0, 0, 0), Vec(1, 1, 0), 1)  # added last
        frame.close_button = close_button

    def close(self):
        parent = self.parent
        if getattr(parent, "instance_of_nexposee", False):
            exposee_close_button_click(self, parent)
        elif getattr(parent, "instance_of_modal_controller", False):
            dialog_close_button_click(self, self)

    def key_down(self, key, ascii, shift):
        if self.closable and key == Key.ESCAPE:
            self.close()
            return True
        return InputContainer.key_down(self, key, ascii, shift)


class Tab(Dialog):
    """A dialog used as one page of a tabbed control: no frame title, not closable."""

    is_tab_root = False
    closable = False
    root_dialog = False
    title = None
    title_font_size: float = 0
    background_image = None
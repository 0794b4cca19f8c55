"""A slider that steps through a list of named choices."""

from __future__ import annotations

from .slider import Slider

CUSTOM = "custom"
MAX_VALUES = 256


class TextSlider(Slider):
    """A slider over named values; call add_value, then configure_text_slider_values."""

    def __init__(self, *, context=None) -> None:
        super().__init__(context=context)
        self.value_strings = []
        self.value_identifiers = []

    @property
    def n_values(self):
        return len(self.value_strings)

    def _index(self, value):
        if value >= self.n_values or value < 0:
            return None
        return int(value)

    def value_to_identifier(self, value):
        index = self._index(value)
        return CUSTOM if index is None else self.value_identifiers[index]

    def value_to_text(self, value):
        index = self._index(value)
        return CUSTOM if index is None else self.value_strings[index]

    def set_value_from_identifier(self, identifier):
        for index, known in enumerate(self.value_identifiers):
            if known == identifier:
                self.value = index
                return
        self.value = -1

    def get_identifier(self):
        return self.value_to_identifier(self.value)

    def add_value(self, text, identifier):
        if self.n_values >= MAX_VALUES:
            raise IndexError(f"a text slider holds at most {MAX_VALUES} values")
        self.value_strings.append(text)
        self.value_identifiers.append(identifier)

    def configure_text_slider_values(self, default):
        self.configure_slider_values(0, 0, self.n_values - 1, 1, 1, 1)
        self.set_value_from_identifier(default)
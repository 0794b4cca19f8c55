"""Geometry, text measurement, drawing context and the base widget."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import IntEnum, IntFlag
from typing import Any, Iterator, Optional

FONT_USER = 8


@dataclass(frozen=True)
class Vec:
    """A three-component vector as used for positions, sizes and colours."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: "Vec") -> "Vec":
        return Vec(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vec") -> "Vec":
        return Vec(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> "Vec":
        return Vec(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> "Vec":
        return Vec(self.x / divisor, self.y / divisor, self.z / divisor)

    def __neg__(self) -> "Vec":
        return Vec(-self.x, -self.y, -self.z)

    def mul(self, other: "Vec") -> "Vec":
        """Component-wise product."""
        return Vec(self.x * other.x, self.y * other.y, self.z * other.z)

    def with_(self, **components: float) -> "Vec":
        return replace(self, **components)


class Key(IntEnum):
    TAB = 9
    ENTER = 13
    ESCAPE = 27
    SPACE = 32
    BACKSPACE = 127
    UPARROW = 128
    DOWNARROW = 129
    LEFTARROW = 130
    RIGHTARROW = 131
    DEL = 140
    PGDN = 141
    PGUP = 142
    HOME = 143
    END = 144
    MWHEELDOWN = 515
    MWHEELUP = 516


class KeyState(IntFlag):
    SHIFT = 1
    ALT = 2
    CTRL = 4


def _div(a: float, b: float) -> float:
    return a / b if b else 0.0


def box_to_global(point: Vec, shift: Vec, scale: Vec) -> Vec:
    """Map a point from box coordinates into the enclosing space."""
    return shift + point.mul(scale)


def box_to_global_size(size: Vec, scale: Vec) -> Vec:
    return size.mul(scale)


def global_to_box(point: Vec, shift: Vec, scale: Vec) -> Vec:
    """Map a point from the enclosing space into box coordinates."""
    d = point - shift
    return Vec(_div(d.x, scale.x), _div(d.y, scale.y), _div(d.z, scale.z))


def global_to_box_size(size: Vec, scale: Vec) -> Vec:
    return Vec(_div(size.x, scale.x), _div(size.y, scale.y), _div(size.z, scale.z))


_HEX = "0123456789abcdefABCDEF"


def _color_code_length(text: str, i: int) -> int:
    """Length of the colour code starting at text[i] (0 if none)."""
    if text[i] != "^" or i + 1 >= len(text):
        return 0
    nxt = text[i + 1]
    if nxt.isdigit():
        return 2
    if nxt == "x" and i + 4 < len(text) and all(c in _HEX for c in text[i + 2:i + 5]):
        return 5
    return 0


def _visible_chars(text: str) -> Iterator[tuple[int, int]]:
    """Yield (end index, visible width) after each unit of colour-aware text."""
    i = 0
    while i < len(text):
        code = _color_code_length(text, i)
        if code:
            i += code
            yield i, 0
        elif text.startswith("^^", i):
            i += 2
            yield i, 1
        else:
            i += 1
            yield i, 1


def strip_colors(text: str) -> str:
    """Remove colour codes, turning an escaped caret into a single caret."""
    out = []
    i = 0
    while i < len(text):
        code = _color_code_length(text, i)
        if code:
            i += code
        elif text.startswith("^^", i):
            out.append("^")
            i += 2
        else:
            out.append(text[i])
            i += 1
    return "".join(out)


def text_width(text: Optional[str], allow_colors: bool) -> float:
    """Width of text in units of the font size."""
    if not text:
        return 0.0
    return float(len(strip_colors(text)) if allow_colors else len(text))


def length_up_to_width(text: Optional[str], width: float, allow_colors: bool) -> int:
    """Number of characters of the longest prefix that fits into width."""
    if not text:
        return 0
    if not allow_colors:
        return max(0, min(len(text), int(width))) if width > 0 else 0
    used = 0
    fits = 0
    for end, w in _visible_chars(text):
        if used + w > width:
            break
        used += w
        fits = end
    return fits


def shorten_to_width(text: Optional[str], width: float, allow_colors: bool) -> str:
    """The longest prefix of text that fits into width."""
    if not text:
        return ""
    return text[:length_up_to_width(text, width, allow_colors)]


def wrap_lines(text: Optional[str], width: float, allow_colors: bool) -> Iterator[str]:
    """Greedily wrap text into lines no wider than width."""
    if not text:
        return
    for paragraph in text.split("\n"):
        line = ""
        for word in paragraph.split(" "):
            candidate = f"{line} {word}" if line else word
            if text_width(candidate, allow_colors) <= width:
                line = candidate
                continue
            if line:
                yield line
            while text_width(word, allow_colors) > width:
                n = max(1, length_up_to_width(word, width, allow_colors))
                yield word[:n]
                word = word[n:]
            line = word
        yield line


@dataclass
class DrawContext:
    """Drawing state, console variables and a record of issued draw calls."""

    shift: Vec = Vec(0, 0, 0)
    scale: Vec = Vec(800, 600, 0)
    alpha: float = 1.0
    time: float = 0.0
    frametime: float = 0.0
    conwidth: float = 800.0
    conheight: float = 600.0
    font: int = 0
    clip: Optional[tuple[Vec, Vec]] = None
    cvars: dict[str, str] = field(default_factory=dict)
    commands: list[str] = field(default_factory=list)
    operations: list[tuple[str, tuple[Any, ...]]] = field(default_factory=list)

    def _record(self, name: str, *args: Any) -> None:
        self.operations.append((name, args))

    def draw_picture(self, origin, pic, size, color, alpha):
        self._record("picture", origin, pic, size, color, alpha * self.alpha)

    def draw_button_picture(self, origin, pic, size, color, alpha):
        self._record("button_picture", origin, pic, size, color, alpha * self.alpha)

    def draw_button_picture_vertical(self, origin, pic, size, color, alpha):
        self._record("button_picture_vertical", origin, pic, size, color, alpha * self.alpha)

    def draw_picture_border(self, origin, pic, size, color, alpha, border):
        self._record("picture_border", origin, pic, size, color, alpha * self.alpha, border)

    def draw_fill(self, origin, size, color, alpha):
        self._record("fill", origin, size, color, alpha * self.alpha)

    def draw_text(self, origin, text, font_size, color, alpha, allow_colors):
        self._record("text", origin, text, font_size, color, alpha * self.alpha, allow_colors)

    def set_clip_rect(self, origin, size):
        self.clip = (box_to_global(origin, self.shift, self.scale),
                     box_to_global_size(size, self.scale))

    def clear_clip(self):
        self.clip = None

    def cvar(self, name: str) -> float:
        try:
            return float(self.cvars.get(name, "0"))
        except ValueError:
            return 0.0

    def cvar_string(self, name: str) -> str:
        return self.cvars.get(name, "")

    def cvar_set(self, name: str, value: Any) -> None:
        self.cvars[name] = str(value)

    def local_command(self, command: str) -> None:
        self.commands.append(command)


_DEFAULT_CONTEXT = DrawContext()


class Item:
    """Base widget: does nothing and handles no input."""

    focusable: int = 0
    preferred_focus_priority: float = 0
    nexuiz_font: bool = False

    def __init__(self, *, context: Optional[DrawContext] = None) -> None:
        self.context = context
        self.focused = False
        self.parent: Optional[Any] = None
        self.origin = Vec()
        self.size = Vec()
        self.container_origin = Vec()
        self.container_size = Vec()
        self.container_alpha = 0.0
        self.resized = False

    @property
    def ctx(self) -> DrawContext:
        item: Optional[Item] = self
        while item is not None:
            if item.context is not None:
                return item.context
            item = item.parent
        return _DEFAULT_CONTEXT

    def draw(self):
        pass

    def key_down(self, key, ascii, shift):
        return False

    def key_up(self, key, ascii, shift):
        return False

    def mouse_move(self, pos):
        return False

    def mouse_press(self, pos):
        return False

    def mouse_drag(self, pos):
        return False

    def mouse_release(self, pos):
        return False

    def mouse_double_click(self, pos):
        return False

    def focus_enter(self):
        pass

    def focus_leave(self):
        pass

    def resize_notify(self, rel_origin, rel_size, abs_origin, abs_size):
        self.origin = abs_origin
        self.size = abs_size

    def relinquish_focus(self):
        parent = self.parent
        if parent is not None and hasattr(parent, "set_focus"):
            parent.set_focus(None)

    def show_notify(self):
        pass

    def hide_notify(self):
        pass

    def to_string(self):
        return None
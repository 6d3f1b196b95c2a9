"""Cell screen model and line and border drawing helpers."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional

from wcwidth import wcwidth

UNBOUNDED_WIDTH = 1 << 30
VERTICAL = "\u2502"
HORIZONTAL = "\u2500"
BORDER_COLOR = "white"


class Align(enum.IntEnum):
    """Horizontal text alignment."""

    LEFT = 0
    CENTER = 1
    RIGHT = 2


@dataclass(frozen=True)
class Style:
    """Visual attributes of a screen cell."""

    foreground: Optional[str] = None
    background: Optional[str] = None
    bold: bool = False
    italic: bool = False
    underline: bool = False


DEFAULT_STYLE = Style()


class CellScreen:
    """A fixed-size grid of cells, each holding a character and a style."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("screen dimensions must not be negative")
        self.width = width
        self.height = height
        self._cells: dict[tuple[int, int], tuple[str, Style]] = {}

    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_content(self, x: int, y: int, ch: str, style: Style = DEFAULT_STYLE) -> None:
        """Set a cell; writes outside the screen are ignored."""
        if self._inside(x, y):
            self._cells[(x, y)] = (ch, style)

    def get_content(self, x: int, y: int) -> tuple[str, Style]:
        """Return the character and style of a cell (blank if never set)."""
        if not self._inside(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the screen")
        return self._cells.get((x, y), (" ", DEFAULT_STYLE))

    def row_text(self, y: int) -> str:
        """Return the characters of one row joined together."""
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} is outside the screen")
        return "".join(self.get_content(x, y)[0] for x in range(self.width))


def _char_width(ch: str) -> int:
    return max(wcwidth(ch), 0)


def _string_width(text: str) -> int:
    return sum(_char_width(ch) for ch in text)


def write_line(
    screen: CellScreen,
    align: Align,
    line: str,
    x: int,
    y: int,
    max_width: int,
    style: Style,
) -> None:
    """Write ``line`` at (x, y), clipped to ``max_width`` columns."""
    offset = max_width - _string_width(line) if align == Align.RIGHT else 0
    offset = max(offset, 0)
    for ch in line:
        width = _char_width(ch)
        if width == 0:
            continue
        for local in range(width):
            screen.set_content(x + offset + local, y, ch, style)
        offset += width
        if offset >= max_width:
            break


def write_line_padded(
    screen: CellScreen,
    align: Align,
    line: str,
    x: int,
    y: int,
    max_width: int,
    style: Style,
) -> None:
    """Pad ``line`` to ``max_width`` characters and write it left-aligned."""
    pad = max(max_width, 0)
    line = line.rjust(pad) if align == Align.RIGHT else line.ljust(pad)
    write_line(screen, Align.LEFT, line, x, y, max_width, style)


def write_line_simple(screen: CellScreen, line: str, x: int, y: int) -> None:
    write_line(screen, Align.LEFT, line, x, y, UNBOUNDED_WIDTH, DEFAULT_STYLE)


def write_line_simple_color(
    screen: CellScreen, line: str, x: int, y: int, color: str
) -> None:
    write_line(screen, Align.LEFT, line, x, y, UNBOUNDED_WIDTH, Style(foreground=color))


def write_line_color(
    screen: CellScreen,
    align: Align,
    line: str,
    x: int,
    y: int,
    max_width: int,
    color: str,
) -> None:
    write_line(screen, align, line, x, y, max_width, Style(foreground=color))


@dataclass
class Border:
    """A one-cell-thick bar: vertical if the area is 1 wide, horizontal if 1 high.

    A border is decoration: unless made ``interactive`` it consumes no events,
    so they fall through to the components around it.
    """

    style: Style = field(default_factory=lambda: Style(foreground=BORDER_COLOR))
    interactive: bool = False

    def draw(self, screen: CellScreen) -> None:
        width, height = screen.size()
        if width == 1:
            for row in range(height):
                screen.set_content(0, row, VERTICAL, self.style)
        elif height == 1:
            for col in range(width):
                screen.set_content(col, 0, HORIZONTAL, self.style)

    def _consumes(self, event: object) -> bool:
        return self.interactive and event is not None

    def on_key_event(self, event: object) -> bool:
        """Return whether the key event was consumed."""
        return self._consumes(event)

    def on_paste_event(self, event: object) -> bool:
        """Return whether the paste event was consumed."""
        return self._consumes(event)

    def on_mouse_event(self, event: object) -> bool:
        """Return whether the mouse event was consumed."""
        return self._consumes(event)
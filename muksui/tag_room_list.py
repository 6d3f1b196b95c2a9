"""Ordered room lists grouped under a tag, with collapse and paging support."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Optional, Union

from muksui.drawing import (
    DEFAULT_STYLE,
    Align,
    CellScreen,
    Style,
    write_line,
    write_line_padded,
)

log = logging.getLogger(__name__)

DEFAULT_ORDER = 0.5
DEFAULT_MAX_SHOWN = 10
EQUALITY_THRESHOLD = 1e-6

MAIN_TEXT_COLOR: Optional[str] = None
SELECTED_TEXT_COLOR = "white"
SELECTED_BACKGROUND_COLOR = "darkgreen"

TAG_DISPLAY_NAME_STYLE = Style(underline=True, bold=True)
TAG_ROOM_COUNT_STYLE = Style(italic=True)

COLLAPSED_MARKER = "\u25b6"
EXPANDED_MARKER = "\u25bc"
MORE_LABEL = "More \u2193"
LESS_LABEL = "\u2191 Less"


@dataclass(eq=False)
class ListedRoom:
    """The parts of a room that the room list shows and sorts by."""

    room_id: str
    title: str = ""
    unread_count: int = 0
    highlighted: bool = False
    has_new_messages: bool = False
    last_received_message: float = 0.0


@dataclass(eq=False)
class OrderedRoom:
    """A room together with its manual order value within a tag."""

    room: ListedRoom
    order: float = DEFAULT_ORDER

    def draw(
        self, screen: CellScreen, x: int, y: int, line_width: int, is_selected: bool
    ) -> None:
        """Draw the room title and its unread counter on one line."""
        style = Style(foreground=MAIN_TEXT_COLOR, bold=self.room.has_new_messages)
        if is_selected:
            style = Style(
                foreground=SELECTED_TEXT_COLOR,
                background=SELECTED_BACKGROUND_COLOR,
                bold=style.bold,
            )
        write_line_padded(screen, Align.LEFT, self.room.title, x, y, line_width, style)

        unread = self.room.unread_count
        if unread > 0:
            counter = str(unread) if unread < 100 else "99+"
            if self.room.highlighted:
                counter += "!"
            write_line(
                screen, Align.RIGHT, f"({counter})", x + line_width - 7, y, 7, style
            )


def parse_order(order: Union[str, int, float, None]) -> float:
    """Parse a tag order value, falling back to 0.5 when it is not a number."""
    if isinstance(order, bool) or order is None:
        return DEFAULT_ORDER
    if isinstance(order, (int, float)):
        return float(order)
    if not isinstance(order, str) or order != order.strip() or "_" in order:
        return DEFAULT_ORDER
    try:
        return float(order)
    except ValueError:
        return DEFAULT_ORDER


def new_ordered_room(order: Union[str, int, float, None], room: ListedRoom) -> OrderedRoom:
    return OrderedRoom(room=room, order=parse_order(order))


def almost_equal(a: float, b: float) -> bool:
    return math.fabs(a - b) <= EQUALITY_THRESHOLD


@dataclass
class TagRoomList:
    """Rooms of one tag, stored in reverse display order (last item shown first)."""

    name: str
    displayname: str
    rooms: list[OrderedRoom] = field(default_factory=list)
    max_shown: int = DEFAULT_MAX_SHOWN

    def visible(self) -> list[OrderedRoom]:
        return self.rooms[len(self.rooms) - self.length():]

    def first_visible(self) -> Optional[ListedRoom]:
        visible = self.visible()
        return visible[-1].room if visible else None

    def last_visible(self) -> Optional[ListedRoom]:
        visible = self.visible()
        return visible[0].room if visible else None

    def all(self) -> list[OrderedRoom]:
        return self.rooms

    def length(self) -> int:
        return min(len(self.rooms), self.max_shown)

    def total_length(self) -> int:
        return len(self.rooms)

    def is_empty(self) -> bool:
        return not self.rooms

    def is_collapsed(self) -> bool:
        return self.max_shown == 0

    def toggle_collapse(self) -> None:
        self.max_shown = DEFAULT_MAX_SHOWN if self.is_collapsed() else 0

    def has_invisible_rooms(self) -> bool:
        return self.max_shown < self.total_length()

    def has_visible_rooms(self) -> bool:
        return not self.is_empty() and self.max_shown > 0

    def should_be_after(self, room1: OrderedRoom, room2: OrderedRoom) -> bool:
        """Whether ``room1`` should be shown after ``room2``.

        A lower order value comes first; with equal order, the room with the
        more recent message comes first.
        """
        return room1.order > room2.order or (
            almost_equal(room1.order, room2.order)
            and room2.room.last_received_message > room1.room.last_received_message
        )

    def insert(self, order: Union[str, int, float, None], room: ListedRoom) -> None:
        new = new_ordered_room(order, room)
        insert_at = len(self.rooms)
        for i, existing in enumerate(self.rooms):
            if existing.room is room:
                log.warning(
                    "tried to re-insert room %s into tag %s", room.room_id, self.name
                )
                return
            if self.should_be_after(new, existing):
                insert_at = i
                break
        self.rooms.insert(insert_at, new)

    def bump(self, room: ListedRoom) -> None:
        """Move a room to its correct place after its last message changed."""
        index = self.index(room)
        if index < 0:
            log.warning(
                "couldn't find room %s (%s) to bump in tag %s",
                room.room_id,
                room.title,
                self.name,
            )
            return
        bumped = self.rooms.pop(index)
        target = next(
            (
                k
                for k in range(index, len(self.rooms))
                if self.should_be_after(bumped, self.rooms[k])
            ),
            len(self.rooms),
        )
        self.rooms.insert(target, bumped)

    def remove(self, room: ListedRoom) -> None:
        self.remove_index(self.index(room))

    def remove_index(self, index: int) -> None:
        if 0 <= index < len(self.rooms):
            del self.rooms[index]

    def index(self, room: ListedRoom) -> int:
        return self._index_in(self.all(), room)

    def index_visible(self, room: ListedRoom) -> int:
        return self._index_in(self.visible(), room)

    @staticmethod
    def _index_in(entries: list[OrderedRoom], room: ListedRoom) -> int:
        return next((i for i, entry in enumerate(entries) if entry.room is room), -1)

    def render_height(self) -> int:
        if not self.displayname:
            return 0
        if self.is_collapsed():
            return 1
        height = 2 + self.length()
        if self.has_invisible_rooms() or self.max_shown > DEFAULT_MAX_SHOWN:
            height += 1
        return height

    def draw_header(self, screen: CellScreen) -> None:
        width, _ = screen.size()
        room_count = str(self.total_length())
        write_line(
            screen,
            Align.LEFT,
            self.displayname,
            0,
            0,
            width - 1 - len(room_count),
            TAG_DISPLAY_NAME_STYLE,
        )
        write_line(
            screen,
            Align.LEFT,
            room_count,
            len(self.displayname) + 1,
            0,
            width - 2 - len(self.displayname),
            TAG_ROOM_COUNT_STYLE,
        )

    def draw(
        self,
        screen: CellScreen,
        selected_tag: Optional[str],
        selected_room: Optional[ListedRoom],
    ) -> None:
        if not self.displayname:
            return
        self.draw_header(screen)
        width, height = screen.size()

        if self.is_collapsed():
            screen.set_content(width - 1, 0, COLLAPSED_MARKER, DEFAULT_STYLE)
            return
        screen.set_content(width - 1, 0, EXPANDED_MARKER, DEFAULT_STYLE)

        y = 1
        for item in reversed(self.visible()):
            if y >= height:
                return
            is_selected = self.name == selected_tag and item.room is selected_room
            item.draw(screen, 0, y, width, is_selected)
            y += 1

        has_less = self.max_shown > DEFAULT_MAX_SHOWN
        has_more = self.has_invisible_rooms()
        if (has_less or has_more) and y < height:
            if has_more:
                write_line(screen, Align.RIGHT, MORE_LABEL, 0, y, width, DEFAULT_STYLE)
            if has_less:
                write_line(screen, Align.LEFT, LESS_LABEL, 0, y, width, DEFAULT_STYLE)
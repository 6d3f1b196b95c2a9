"""Room view state: selection, editing, typing and completion status, and layout."""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence

USER_LIST_BORDER_WIDTH = 1
USER_LIST_WIDTH = 20
STATIC_HORIZONTAL_SPACE = USER_LIST_BORDER_WIDTH + USER_LIST_WIDTH
TOPIC_BAR_HEIGHT = 1
STATUS_BAR_HEIGHT = 1
MAX_INPUT_HEIGHT = 5

COMPLETION_LIFETIME = 10.0
STATUS_SEPARATOR = " - "

Rect = tuple[int, int, int, int]


class SelectReason(str, enum.Enum):
    """Why a message is being selected; the value reads as a verb phrase."""

    REPLY = "reply to"
    REACT = "react to"
    REDACT = "redact"
    EDIT = "edit"
    DOWNLOAD = "download"
    OPEN = "open"
    COPY = "copy"


@dataclass(frozen=True)
class Layout:
    """Screen areas of a room view, each as (x, y, width, height).

    The user list areas are None when the user list is hidden.
    """

    topic: Rect
    content: Rect
    status: Rect
    input: Rect
    user_list_border: Optional[Rect]
    user_list: Optional[Rect]


def compute_layout(
    width: int, height: int, input_height: int, hide_user_list: bool
) -> Layout:
    """Split a ``width`` x ``height`` area into the parts of a room view."""
    if width <= 0 or height <= 0:
        raise ValueError("room view area must have a positive size")
    input_height = min(max(input_height, 1), MAX_INPUT_HEIGHT)
    content_height = height - input_height - TOPIC_BAR_HEIGHT - STATUS_BAR_HEIGHT
    content_width = width if hide_user_list else width - STATIC_HORIZONTAL_SPACE

    content_y = STATUS_BAR_HEIGHT
    status_y = content_y + content_height
    input_y = status_y + STATUS_BAR_HEIGHT

    border: Optional[Rect] = None
    user_list: Optional[Rect] = None
    if not hide_user_list:
        border = (content_width, content_y, USER_LIST_BORDER_WIDTH, content_height)
        user_list = (
            content_width + USER_LIST_BORDER_WIDTH,
            content_y,
            USER_LIST_WIDTH,
            content_height,
        )

    return Layout(
        topic=(0, 0, width, TOPIC_BAR_HEIGHT),
        content=(0, content_y, content_width, content_height),
        status=(0, status_y, width, STATUS_BAR_HEIGHT),
        input=(0, input_y, width, input_height),
        user_list_border=border,
        user_list=user_list,
    )


@dataclass
class RoomContext:
    """Transient per-room input state shown in the status bar."""

    editing: Optional[str] = None
    replying_to: Optional[str] = None
    selecting: bool = False
    select_reason: Optional[SelectReason] = None
    select_content: str = ""
    edit_move_text: str = ""
    typing: list[str] = field(default_factory=list)
    completions: list[str] = field(default_factory=list)
    completion_text: str = ""
    completion_time: float = 0.0

    def set_completions(
        self, completions: Sequence[str], input_text: str, now: Optional[float] = None
    ) -> None:
        """Remember completions offered for ``input_text`` at time ``now``."""
        self.completions = list(completions)
        self.completion_text = input_text
        self.completion_time = time.time() if now is None else now

    def set_typing(
        self, users: Sequence[str], displaynames: Optional[Mapping[str, str]] = None
    ) -> None:
        """Set the typing users, showing display names where they are known."""
        names = displaynames or {}
        self.typing = [names.get(user, user) for user in users]

    def get_status(self, input_text: str, now: Optional[float] = None) -> str:
        """Build the status bar text; stale completions are dropped."""
        now = time.time() if now is None else now
        parts: list[str] = []

        if self.editing is not None:
            parts.append("Editing message")
        elif self.replying_to is not None:
            parts.append(f"Replying to {self.replying_to}")
        elif self.selecting and self.select_reason is not None:
            parts.append(f"Selecting message to {self.select_reason.value}")

        if self.completions:
            expired = self.completion_time + COMPLETION_LIFETIME < now
            if self.completion_text != input_text or expired:
                self.completions = []
            else:
                parts.append(", ".join(self.completions))

        if len(self.typing) == 1:
            parts.append(f"Typing: {self.typing[0]}")
        elif len(self.typing) > 1:
            *rest, last = self.typing
            parts.append(f"Typing: {', '.join(rest)} and {last}")

        return STATUS_SEPARATOR.join(parts)

    def clear(self) -> str:
        """Drop editing, replying and selection; return the text to restore."""
        restore = self.edit_move_text
        self.editing = None
        self.edit_move_text = ""
        self.replying_to = None
        self.selecting = False
        self.select_content = ""
        return restore
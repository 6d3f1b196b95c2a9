"""Room lists, tab completion, status lines and cell drawing for a terminal chat client."""

__version__ = "0.1.0"
__all__ = ["colors", "drawing", "tag_room_list", "room_context", "completion"]
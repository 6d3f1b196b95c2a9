# muksui

The logic behind the screens of a terminal chat client, kept apart from any
terminal toolkit so that it can be driven and tested directly: room lists
under tags, tab completion, the room status line, layout of a room view and
a small in-memory cell screen to draw on.

## Modules

### `muksui.colors`

- `get_hash_color_name(s)` picks a colour name for a string from a fixed
  list of colour names by its 32-bit FNV-1a hash. The strings `-->`, `<--`
  and `---` always give `green`, `red` and `yellow`.
- `get_hash_color(val)` returns the same name for a string and `red` for
  any other value.
- `add_color(s, color)` wraps text in colour tags: `[color]text[white]`.

### `muksui.drawing`

- `CellScreen(width, height)` is a grid of cells. `set_content` ignores
  writes outside the screen, `get_content` returns a cell's character and
  `Style` (a blank for cells never set) and raises `IndexError` outside the
  screen, `row_text` joins one row's characters, and `size()` gives the
  dimensions.
- `Style` is a frozen dataclass of foreground, background, bold, italic and
  underline; `Align` is `LEFT`, `CENTER` or `RIGHT`.
- `write_line` writes text clipped to a maximum width, taking the display
  width of wide characters into account and skipping zero-width ones;
  right alignment shifts the text to end at the maximum width.
  `write_line_padded` pads the text to the width first.
  `write_line_simple`, `write_line_simple_color` and `write_line_color`
  are shorthands with default style or a foreground colour.
- `Border` draws a vertical bar when the area is one column wide and a
  horizontal bar when it is one row high, nothing otherwise. Its
  `on_key_event`, `on_paste_event` and `on_mouse_event` return `False`
  unless it was created with `interactive=True`.

### `muksui.tag_room_list`

- `ListedRoom` holds what the list shows and sorts by: ID, title, unread
  count, highlight and new-message flags, and the time of the last message.
- `OrderedRoom` pairs a room with its order value and draws the title with
  an unread counter such as `(3)`, `(99+)` or `(5!)`.
- `parse_order` reads an order value and falls back to `0.5` for anything
  that is not a number; `new_ordered_room` builds an `OrderedRoom` with it;
  `almost_equal` compares two orders within `1e-6`.
- `TagRoomList(name, displayname)` keeps rooms in reverse display order
  (the last item is shown first). Lower order values come first, and among
  equal orders the room with the more recent message. It offers `insert`
  (a room already present is left alone), `bump`, `remove`,
  `remove_index`, `index`, `index_visible`, `visible`, `first_visible`,
  `last_visible`, `all`, `length`, `total_length`, `is_empty`,
  collapsing (`is_collapsed`, `toggle_collapse`, showing at most 10 rooms
  when expanded), `has_invisible_rooms`, `has_visible_rooms`,
  `render_height`, `draw_header` and `draw(screen, selected_tag,
  selected_room)`, which adds `▶`/`▼` markers and a `More ↓` line.

### `muksui.room_context`

- `RoomContext` holds the state behind a room's status line: the message
  being edited or replied to, message selection with a `SelectReason`,
  typing users and recent completions. `get_status(input_text, now)`
  builds text such as `Replying to @alice:example.com - Typing: A, B and C`
  and drops completions older than ten seconds or made for different
  input. `set_completions`, `set_typing` (with optional display names) and
  `clear` (which returns the input text to restore after editing) update it.
- `compute_layout(width, height, input_height, hide_user_list)` splits a
  room view into topic, content, status, input and member-list areas as
  `(x, y, width, height)` tuples in a `Layout`. The input is kept between 1
  and 5 rows, the member list takes 21 columns unless hidden, and a
  non-positive area raises `ValueError`.

### `muksui.completion`

- `find_word_to_tab_complete` returns the non-whitespace run at the end of
  the text; `longest_common_prefix` the prefix shared by all candidates.
- `autocomplete_user` (user ID to display name), `autocomplete_room`
  (room ID to alias) and `autocomplete_emoji` (shortcode to emoji) return
  matches; an exact match is returned alone.
- `format_mention` writes a mention as Markdown, HTML or plain text.
- `default_autocomplete` combines users, rooms, commands and emoji; a
  single user or room match becomes a mention, with `:` appended when a
  user is mentioned at the start of the line.
- `complete_input(text, cursor_offset, completer)` applies a completer to
  the word before the cursor and returns the new text and the sorted
  candidates still to show.
- `find_message` steps forwards or backwards through `MessageRef` items,
  skipping those that are not `selectable` (no event ID, a local echo, or a
  service message), with an optional filter.

## Example

```python
from muksui.drawing import Align, CellScreen, Style, write_line
from muksui.completion import find_word_to_tab_complete, longest_common_prefix
from muksui.tag_room_list import ListedRoom, TagRoomList

screen = CellScreen(20, 1)
write_line(screen, Align.RIGHT, "(3)", 0, 0, 20, Style())
print(screen.row_text(0))

print(find_word_to_tab_complete("hello @ali"))      # "@ali"
print(longest_common_prefix(["@alice", "@alina"]))  # "@ali"

favourites = TagRoomList("m.favourite", "Favourites")
favourites.insert("0.2", ListedRoom("!a:example.com", title="Alpha"))
favourites.insert("0.1", ListedRoom("!b:example.com", title="Beta"))
print(favourites.first_visible().title)             # "Beta"
```

## What it does not do

There is no terminal application here: nothing opens a terminal, reads
keys or runs an event loop, and there is no command to start. The package
does not connect to a chat server, log in, send or receive messages, store
history or use the clipboard. It provides the pieces such a program would
call.

## Installation

```
pip install muksui
```

## Running the tests

```
pip install "muksui[test]"
pytest
```
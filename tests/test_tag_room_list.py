import pytest

from muksui.drawing import CellScreen
from muksui.tag_room_list import (
    COLLAPSED_MARKER,
    DEFAULT_ORDER,
    EXPANDED_MARKER,
    LESS_LABEL,
    MORE_LABEL,
    SELECTED_BACKGROUND_COLOR,
    ListedRoom,
    OrderedRoom,
    TagRoomList,
    almost_equal,
    new_ordered_room,
    parse_order,
)


def make_list(displayname="Favourites"):
    return TagRoomList(name="m.favourite", displayname=displayname)


@pytest.mark.parametrize(
    "order, expected",
    [("1.5", 1.5), ("0.25", 0.25), (2, 2.0), ("abc", DEFAULT_ORDER), ("", DEFAULT_ORDER), (None, DEFAULT_ORDER)],
)
def test_parse_order(order, expected):
    assert parse_order(order) == expected


def test_new_ordered_room_keeps_room_identity():
    room = ListedRoom("!a:example.com", "A")
    ordered = new_ordered_room("0.1", room)
    assert ordered.room is room
    assert ordered.order == 0.1


def test_almost_equal():
    assert almost_equal(0.5, 0.5 + 1e-7)
    assert not almost_equal(0.5, 0.6)


def test_insert_lower_order_is_shown_first():
    trl = make_list()
    a = ListedRoom("!a:example.com", "A")
    b = ListedRoom("!b:example.com", "B")
    trl.insert("0.5", a)
    trl.insert("0.2", b)
    assert trl.first_visible() is b
    assert trl.last_visible() is a


def test_insert_more_recent_is_shown_first():
    trl = make_list()
    old = ListedRoom("!o:example.com", "Old", last_received_message=1.0)
    new = ListedRoom("!n:example.com", "New", last_received_message=2.0)
    trl.insert("0.5", new)
    trl.insert("0.5", old)
    assert trl.first_visible() is new
    assert trl.total_length() == 2


def test_insert_duplicate_is_ignored():
    trl = make_list()
    a = ListedRoom("!a:example.com", "A")
    trl.insert("0.5", a)
    trl.insert("0.1", a)
    assert trl.total_length() == 1


def test_bump_moves_room_to_front():
    trl = make_list()
    a = ListedRoom("!a:example.com", "A", last_received_message=1.0)
    b = ListedRoom("!b:example.com", "B", last_received_message=2.0)
    c = ListedRoom("!c:example.com", "C", last_received_message=3.0)
    for room in (a, b, c):
        trl.insert("0.5", room)
    assert trl.first_visible() is c
    a.last_received_message = 4.0
    trl.bump(a)
    assert trl.first_visible() is a
    assert [o.room for o in trl.all()] == [b, c, a]


def test_bump_respects_order_value():
    trl = make_list()
    pinned = ListedRoom("!p:example.com", "P", last_received_message=1.0)
    other = ListedRoom("!o:example.com", "O", last_received_message=2.0)
    trl.insert("0.1", pinned)
    trl.insert("0.5", other)
    other.last_received_message = 10.0
    trl.bump(other)
    assert trl.first_visible() is pinned


def test_bump_missing_room_is_noop():
    trl = make_list()
    a = ListedRoom("!a:example.com", "A")
    trl.insert("0.5", a)
    trl.bump(ListedRoom("!x:example.com", "X"))
    assert [o.room for o in trl.all()] == [a]


def test_index_and_remove():
    trl = make_list()
    a = ListedRoom("!a:example.com", "A")
    b = ListedRoom("!b:example.com", "B")
    trl.insert("0.5", a)
    trl.insert("0.2", b)
    assert trl.index(a) == 0
    assert trl.index(b) == 1
    trl.remove(a)
    assert trl.index(a) == -1
    assert trl.index(b) == 0
    trl.remove(a)
    assert trl.total_length() == 1


def test_remove_index_out_of_range_is_noop():
    trl = make_list()
    trl.insert("0.5", ListedRoom("!a:example.com", "A"))
    trl.remove_index(-1)
    trl.remove_index(5)
    assert trl.total_length() == 1


def test_visibility_limits_and_collapse():
    trl = make_list()
    rooms = [ListedRoom(f"!r{i}:example.com", f"R{i}", last_received_message=float(i)) for i in range(12)]
    for room in rooms:
        trl.insert("0.5", room)
    assert trl.length() == 10
    assert len(trl.visible()) == trl.length()
    assert trl.has_invisible_rooms()
    assert trl.index_visible(rooms[0]) == -1
    assert trl.index_visible(rooms[11]) == trl.length() - 1
    assert trl.render_height() == 2 + trl.length() + 1
    trl.toggle_collapse()
    assert trl.is_collapsed()
    assert not trl.has_visible_rooms()
    assert trl.visible() == []
    assert trl.first_visible() is None
    assert trl.render_height() == 1
    trl.toggle_collapse()
    assert trl.has_visible_rooms()


def test_empty_list():
    trl = make_list()
    assert trl.is_empty()
    assert trl.first_visible() is None
    assert not trl.has_visible_rooms()
    assert trl.render_height() == 2


def test_no_displayname_renders_nothing():
    trl = make_list(displayname="")
    trl.insert("0.5", ListedRoom("!a:example.com", "A"))
    screen = CellScreen(20, 4)
    trl.draw(screen, None, None)
    assert trl.render_height() == 0
    assert all(screen.row_text(y).strip() == "" for y in range(4))


def test_draw_header_and_rooms():
    trl = make_list()
    a = ListedRoom("!a:example.com", "Alpha", last_received_message=1.0)
    b = ListedRoom("!b:example.com", "Beta", last_received_message=2.0)
    trl.insert("0.5", a)
    trl.insert("0.5", b)
    screen = CellScreen(20, 5)
    trl.draw(screen, "m.favourite", a)
    header = screen.row_text(0)
    assert header.startswith("Favourites 2")
    assert header[-1] == EXPANDED_MARKER
    assert screen.row_text(1).startswith("Beta")
    assert screen.row_text(2).startswith("Alpha")
    assert screen.get_content(0, 2)[1].background == SELECTED_BACKGROUND_COLOR
    assert screen.get_content(0, 1)[1].background is None


def test_draw_collapsed_marker():
    trl = make_list()
    trl.insert("0.5", ListedRoom("!a:example.com", "Alpha"))
    trl.toggle_collapse()
    screen = CellScreen(20, 3)
    trl.draw(screen, None, None)
    assert screen.row_text(0)[-1] == COLLAPSED_MARKER
    assert screen.row_text(1).strip() == ""


def test_draw_more_label():
    trl = make_list()
    for i in range(11):
        trl.insert("0.5", ListedRoom(f"!r{i}:example.com", f"R{i}", last_received_message=float(i)))
    screen = CellScreen(20, trl.render_height())
    trl.draw(screen, None, None)
    assert screen.row_text(11).endswith(MORE_LABEL)


def test_draw_less_label_when_expanded_past_default():
    trl = make_list()
    for i in range(3):
        trl.insert("0.5", ListedRoom(f"!r{i}:example.com", f"R{i}"))
    trl.max_shown = 20
    screen = CellScreen(20, trl.render_height())
    trl.draw(screen, None, None)
    assert screen.row_text(4).startswith(LESS_LABEL)


@pytest.mark.parametrize(
    "unread, highlighted, expected",
    [(5, False, "(5)"), (5, True, "(5!)"), (150, False, "(99+)")],
)
def test_ordered_room_unread_counter(unread, highlighted, expected):
    room = ListedRoom("!a:example.com", "Alpha", unread_count=unread, highlighted=highlighted)
    screen = CellScreen(20, 1)
    OrderedRoom(room).draw(screen, 0, 0, 20, False)
    row = screen.row_text(0)
    assert row.startswith("Alpha")
    assert row.endswith(expected)


def test_ordered_room_bold_when_new_messages():
    room = ListedRoom("!a:example.com", "Alpha", has_new_messages=True)
    screen = CellScreen(10, 1)
    OrderedRoom(room).draw(screen, 0, 0, 10, True)
    style = screen.get_content(0, 0)[1]
    assert style.bold
    assert style.background == SELECTED_BACKGROUND_COLOR
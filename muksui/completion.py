"""Tab completion of users, rooms and emoji, and message navigation."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence

from wcwidth import wcwidth

MATRIX_TO_PREFIX = "https://matrix.to/#/"
MENTION_MARKDOWN = "[{name}](" + MATRIX_TO_PREFIX + "{target})"
MENTION_HTML = '<a href="' + MATRIX_TO_PREFIX + '{target}">{name}</a>'
MENTION_PLAINTEXT = "{name}"


@dataclass(frozen=True)
class Completion:
    """A completion candidate: the text shown and the identifier it stands for."""

    display_name: str
    id: str


@dataclass
class MessageRef:
    """A message in the view, as far as navigation between messages needs it."""

    event_id: str
    txn_id: str = ""
    is_service: bool = False
    event: Any = field(default=None, compare=False)

    @property
    def selectable(self) -> bool:
        """Whether this message has a real server-side event to act on."""
        return bool(self.event_id) and self.event_id != self.txn_id and not self.is_service


def find_word_to_tab_complete(text: str) -> str:
    """Return the run of non-whitespace characters at the end of ``text``."""
    stripped = text.rstrip()
    if len(stripped) != len(text):
        return ""
    start = len(text)
    while start > 0 and not text[start - 1].isspace():
        start -= 1
    return text[start:]


def longest_common_prefix(strings: Sequence[str]) -> str:
    """Return the longest prefix shared by every string (empty for no strings)."""
    if not strings:
        return ""
    return os.path.commonprefix(list(strings))


def format_mention(
    display_name: str, target_id: str, disable_markdown: bool, disable_html: bool
) -> str:
    """Format a mention of ``target_id`` in the markup the preferences allow."""
    if not disable_markdown:
        template = MENTION_MARKDOWN
    elif disable_html:
        template = MENTION_PLAINTEXT
    else:
        template = MENTION_HTML
    return template.format(name=display_name, target=target_id)


def autocomplete_user(members: Mapping[str, str], existing_text: str) -> list[Completion]:
    """Complete a user from ``members`` (user ID to display name).

    An exact match on display name or user ID is returned alone.
    """
    without_prefix = existing_text[1:] if existing_text.startswith("@") else existing_text
    found: list[Completion] = []
    for user_id, displayname in members.items():
        if displayname == without_prefix or user_id == existing_text:
            return [Completion(displayname, user_id)]
        if displayname.startswith(without_prefix) or user_id.startswith(existing_text):
            found.append(Completion(displayname, user_id))
    return found


def autocomplete_room(aliases: Mapping[str, str], existing_text: str) -> list[Completion]:
    """Complete a room alias from ``aliases`` (room ID to canonical alias)."""
    found: list[Completion] = []
    for room_id, alias in aliases.items():
        if alias == existing_text:
            return [Completion(alias, room_id)]
        if alias.startswith(existing_text):
            found.append(Completion(alias, room_id))
    return found


def autocomplete_emoji(code_map: Mapping[str, str], word: str) -> list[str]:
    """Complete an emoji shortcode starting with ``:``.

    An exact match, or prefix matches that all name the same emoji, yield the
    emoji itself; otherwise the matching shortcodes are returned.
    """
    if not word.startswith(":"):
        return []
    names: list[str] = []
    first_value = ""
    many_values = False
    for name, value in code_map.items():
        if name == word:
            return [value]
        if name.startswith(word):
            names.append(name)
            if not first_value:
                first_value = value
            elif first_value != value:
                many_values = True
    if names and not many_values:
        return [code_map[names[0]]]
    return names


def default_autocomplete(
    word: str,
    start_index: int,
    members: Mapping[str, str],
    aliases: Mapping[str, str],
    commands: Iterable[str],
    code_map: Mapping[str, str],
    disable_markdown: bool,
    disable_html: bool,
) -> tuple[list[str], str]:
    """Complete ``word`` against users, rooms, commands and emoji.

    Returns the list of candidates and, for a single user or room match,
    the mention text that replaces the word.
    """
    if not word:
        return [], ""
    matches = autocomplete_user(members, word) + autocomplete_room(aliases, word)

    candidates: list[str] = []
    replacement = ""
    if len(matches) == 1:
        match = matches[0]
        replacement = format_mention(
            match.display_name, match.id, disable_markdown, disable_html
        )
        if start_index == 0 and match.id.startswith("@"):
            replacement += ":"
    elif matches:
        candidates.extend(match.display_name for match in matches)

    candidates.extend(commands)
    candidates.extend(autocomplete_emoji(code_map, word))
    return candidates, replacement


def _truncate_to_width(text: str, width: int) -> str:
    widths = [max(wcwidth(ch), 0) for ch in text]
    if sum(widths) <= width:
        return text
    used = 0
    for count, ch_width in enumerate(widths):
        if used + ch_width > width:
            return text[:count]
        used += ch_width
    return text


Completer = Callable[[str, int], "tuple[list[str], str]"]


def complete_input(
    text: str, cursor_offset: int, completer: Completer
) -> tuple[str, list[str]]:
    """Tab-complete the word before the cursor.

    ``completer`` is called with the word and its start index and returns
    candidates and a replacement. The result is the new input text and the
    candidates left to show, sorted.
    """
    if not text:
        return text, []
    before = _truncate_to_width(text, cursor_offset)
    word = find_word_to_tab_complete(before)
    start_index = len(before) - len(word)

    candidates, replacement = completer(word, start_index)
    candidates = list(candidates)
    if candidates:
        replacement = longest_common_prefix(candidates)
        candidates.sort()
    if replacement and len(candidates) < 2:
        replacement += " "
        candidates = []

    new_text = text
    if replacement:
        new_text = before[:start_index] + replacement + text[len(before):]
    return new_text, candidates


def find_message(
    messages: Sequence[MessageRef],
    current_id: Optional[str],
    forward: bool,
    allow: Optional[Callable[[MessageRef], bool]] = None,
) -> Optional[MessageRef]:
    """Find the next selectable message after ``current_id`` in a direction.

    With ``current_id`` None the search starts at the first (or, going
    backwards, the last) message. ``allow`` filters candidates.
    """
    found_current = current_id is None
    ordered = messages if forward else reversed(messages)
    for message in ordered:
        if not message.selectable:
            continue
        if found_current:
            if allow is None or allow(message):
                return message
        elif message.event_id == current_id:
            found_current = True
    return None
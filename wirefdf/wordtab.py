"""Small string helpers used when reading XPM text."""

from __future__ import annotations

import re

_BLANKS = re.compile(r"[ \t]+")


def str_to_wordtab(text: str) -> list[str]:
    """Split ``text`` into words separated by runs of spaces and tabs."""
    return [word for word in _BLANKS.split(text) if word]


def _check_find(find: str) -> None:
    if not find:
        raise ValueError("search string must not be empty")


def str_str(text: str, find: str, length: int) -> int:
    """Return the position of the first ``find`` in ``text``, or -1.

    If ``find`` is longer than ``length`` the search is not attempted and
    -1 is returned.
    """
    _check_find(find)
    if len(find) > length:
        return -1
    return text.find(find)


def str_str_quoted(text: str, find: str, length: int) -> int:
    """Like :func:`str_str`, but ignore matches inside double quotes.

    A double quote toggles the quoted state at its own position, so a match
    may start at a closing quote but never at an opening one.
    """
    _check_find(find)
    if len(find) > length:
        return -1
    quoted = False
    for pos in range(len(text) - len(find) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(find, pos):
            return pos
    return -1
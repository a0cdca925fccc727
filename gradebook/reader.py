"""A whitespace-delimited token reader over text, and homework reading."""

import re

_SPACE = re.compile(r"\s*")
_WORD = re.compile(r"\S+")
_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class InputReader:
    """Reads characters, words and numbers from text, skipping whitespace.

    A read that finds nothing suitable returns None and puts the reader
    into a failed state; further reads then return None until ``clear``
    is called.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._failed = False

    def __bool__(self) -> bool:
        return not self._failed

    @property
    def good(self) -> bool:
        """True while no read has failed since the last ``clear``."""
        return not self._failed

    def clear(self) -> None:
        """Reset the failed state."""
        self._failed = False

    def _skip_space(self) -> None:
        self._pos = _SPACE.match(self._text, self._pos).end()

    def _read_pattern(self, pattern: re.Pattern) -> "str | None":
        if self._failed:
            return None
        self._skip_space()
        match = pattern.match(self._text, self._pos)
        if match is None:
            self._failed = True
            return None
        self._pos = match.end()
        return match.group()

    def read_char(self) -> "str | None":
        """Return the next non-whitespace character."""
        if self._failed:
            return None
        self._skip_space()
        if self._pos >= len(self._text):
            self._failed = True
            return None
        char = self._text[self._pos]
        self._pos += 1
        return char

    def read_word(self) -> "str | None":
        """Return the next run of non-whitespace characters."""
        return self._read_pattern(_WORD)

    def read_number(self) -> "float | None":
        """Return the next number; nothing but whitespace is consumed on failure."""
        token = self._read_pattern(_NUMBER)
        return None if token is None else float(token)

    def ignore_line(self) -> None:
        """Discard everything up to and including the next newline."""
        if self._failed:
            return
        newline = self._text.find("\n", self._pos)
        self._pos = len(self._text) if newline < 0 else newline + 1


def read_hw(reader: InputReader) -> list[float]:
    """Read numbers until one cannot be read, then clear the reader for the next record."""
    if not reader:
        return []
    homework = []
    while (value := reader.read_number()) is not None:
        homework.append(value)
    reader.clear()
    return homework
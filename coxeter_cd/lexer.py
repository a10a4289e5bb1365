from typing import List, Optional, Tuple

from .errors import UnexpectedEnding

IndexedChar = Tuple[int, str]  # (offset, char)

NODE_START = ('(', '*')


def index_chars(s: str) -> List[IndexedChar]:
    return list(enumerate(s))


def is_node_start(ch: str) -> bool:
    return ch in NODE_START or ch.isalpha()


class Cursor:
    """One-character lookahead over a diagram, each character paired with its offset."""

    def __init__(self, text: str):
        self.chars = index_chars(text)
        self.length = len(text)
        self.i = 0

    def peek(self) -> Optional[IndexedChar]:
        return self.chars[self.i] if self.i < len(self.chars) else None

    def next(self) -> Optional[IndexedChar]:
        t = self.peek()
        if t is not None:
            self.i += 1
        return t

    def expect(self) -> IndexedChar:
        t = self.next()
        if t is None:
            raise UnexpectedEnding(self.length)
        return t

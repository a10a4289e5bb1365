"""Parse errors raised while reading a Coxeter diagram.

Every error records the zero-based offset of the character at which the
problem was detected, so front ends can point at it.
"""

from __future__ import annotations

import re
from typing import Optional

_ERROR_LOC_RE = re.compile(r"^\[index (\d+)\] ")


class CDError(ValueError):
    kind = "error"
    default_message = "invalid diagram"

    def __init__(self, index: int, message: Optional[str] = None):
        self.index = index
        self.detail = message or self.default_message
        super().__init__(f"[index {index}] {self.detail}")

    def with_context(self, text: str) -> "CDError":
        """Return a copy whose message shows ``text`` with a caret under ``index``."""

        message = str(self)
        if "\n" in message or "\n" in text or not _ERROR_LOC_RE.match(message):
            return self
        caret_line = " " * max(self.index, 0) + "^"
        augmented = type(self)(self.index, self.detail)
        augmented.args = (f"{message}\n    {text}\n    {caret_line}",)
        return augmented


class MismatchedParenthesis(CDError):
    kind = "mismatched_parenthesis"
    default_message = "mismatched parenthesis"


class UnexpectedEnding(CDError):
    kind = "unexpected_ending"
    default_message = "diagram ended unexpectedly"


class ParseError(CDError):
    kind = "parse_error"
    default_message = "could not parse number"


class InvalidSymbol(CDError):
    kind = "invalid_symbol"
    default_message = "invalid symbol"

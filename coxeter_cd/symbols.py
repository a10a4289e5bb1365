"""Decoding of node shorthands, node literals and branch marks."""

from __future__ import annotations

import math
import re
from typing import Dict, List, Optional, Sequence

from .ast import Edge, Node
from .errors import InvalidSymbol, ParseError
from .lexer import IndexedChar
from .numbers import SQRT2, SQRT3, SQRT5, SymbolicNumber

# Edge lengths of common polygon chords, keyed by node letter.
SHORTCHORDS: Dict[str, SymbolicNumber] = {
    'v': SymbolicNumber('(sqrt(5)-1)/2', (SQRT5 - 1) / 2),
    'x': SymbolicNumber('1', 1.0),
    'q': SymbolicNumber('sqrt(2)', SQRT2),
    'f': SymbolicNumber('(sqrt(5)+1)/2', (SQRT5 + 1) / 2),
    'h': SymbolicNumber('sqrt(3)', SQRT3),
    'k': SymbolicNumber('sqrt(sqrt(2)+2)', math.sqrt(SQRT2 + 2)),
    'u': SymbolicNumber('2', 2.0),
    'w': SymbolicNumber('sqrt(2)+1', SQRT2 + 1),
    'F': SymbolicNumber('(sqrt(5)+3)/2', (SQRT5 + 3) / 2),
    'e': SymbolicNumber('sqrt(3)+1', SQRT3 + 1),
    'Q': SymbolicNumber('2*sqrt(2)', 2 * SQRT2),
    'd': SymbolicNumber('3', 3.0),
    'V': SymbolicNumber('sqrt(5)+1', SQRT5 + 1),
    'U': SymbolicNumber('sqrt(2)+2', SQRT2 + 2),
    'A': SymbolicNumber('(sqrt(5)+5)/4', (SQRT5 + 5) / 4),
    'X': SymbolicNumber('2*sqrt(2)+1', 2 * SQRT2 + 1),
    'B': SymbolicNumber('sqrt(5)+2', SQRT5 + 2),
}

UNRINGED_SYMBOL = 'o'
SNUB_SYMBOL = 's'

_decimal_re = re.compile(r'(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?', re.ASCII)
_int_re = re.compile(r'\d+', re.ASCII)

MAX_BRANCH = 2 ** 31 - 1


def decode_node_symbol(ch: str, index: int) -> Node:
    if ch == UNRINGED_SYMBOL:
        return Node.unringed()
    if ch == SNUB_SYMBOL:
        return Node.snub(1.0)
    chord = SHORTCHORDS.get(ch)
    if chord is None:
        raise InvalidSymbol(index, f'unknown node symbol {ch!r}')
    return Node.ringed(chord.value)


def decode_node_literal(chars: Sequence[IndexedChar]) -> Node:
    """Decode ``(±decimal)``; ``chars`` runs from the opening to the closing parenthesis."""

    close_idx = chars[-1][0]
    body = list(chars[1:-1])
    sign = 1.0
    if body and body[0][1] in '+-':
        sign = -1.0 if body[0][1] == '-' else 1.0
        body = body[1:]
    if not body:
        raise InvalidSymbol(close_idx, 'empty node literal')
    first_idx, first = body[0]
    if not (first.isdigit() or first == '.'):
        raise InvalidSymbol(first_idx, f'node literal cannot start with {first!r}')
    text = ''.join(c for _, c in body)
    if not _decimal_re.fullmatch(text):
        raise ParseError(close_idx, f'malformed node literal {text!r}')
    value = float(text)
    if not math.isfinite(value):
        raise InvalidSymbol(close_idx, f'node literal {text!r} is not a finite number')
    return Node.ringed(sign * value)


def _parse_int(run: List[IndexedChar], end_idx: int) -> int:
    text = ''.join(c for _, c in run)
    if _int_re.fullmatch(text):
        value = int(text)
        if value > MAX_BRANCH:
            raise ParseError(run[0][0], 'branch mark is too large')
        return value
    for idx, c in run:
        if not ('0' <= c <= '9'):
            raise ParseError(idx, f'unexpected {c!r} in branch mark')
    raise ParseError(end_idx, 'missing number in branch mark')


def decode_edge(chars: Sequence[IndexedChar], end_idx: int) -> Optional[Edge]:
    """Decode a branch mark run; ``end_idx`` is the offset right after it.

    Surrounding whitespace is ignored and a blank run means there is no edge.
    Numerator and denominator must fit in a signed 32-bit integer, and a zero
    numerator is rejected with :class:`ParseError` since ``pi / 0`` is undefined.
    A zero denominator is allowed and gives an infinite branch.
    """

    run = list(chars)
    while run and run[0][1].isspace():
        run.pop(0)
    while run and run[-1][1].isspace():
        run.pop()
    if not run:
        return None

    first_idx, first = run[0]
    if not ('0' <= first <= '9'):
        raise InvalidSymbol(first_idx, f'branch mark cannot start with {first!r}')

    slash = next((pos for pos, (_, c) in enumerate(run) if c == '/'), None)
    if slash is None:
        num, den = _parse_int(run, end_idx), 1
    else:
        num = _parse_int(run[:slash], run[slash][0])
        den = _parse_int(run[slash + 1:], end_idx)
    if num == 0:
        raise ParseError(first_idx, 'branch mark must be non-zero')
    return Edge(num, den)

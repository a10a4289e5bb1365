"""Scanner/builder turning Coxeter diagram notation into a :class:`Diagram`.

The scan alternates between reading a node token and reading the branch mark
that follows it.  A branch mark is held in a :class:`PendingEdge` until the
next node token resolves its second endpoint.  Virtual nodes (``*a``, ``*b``,
...) resolve to an existing node instead of creating one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Tuple, Union

from .ast import Diagram, DiagramEdge, Edge, Node
from .errors import CDError, InvalidSymbol, MismatchedParenthesis
from .lexer import Cursor, IndexedChar, is_node_start
from .logging_utils import apply_debug_logging
from .symbols import decode_edge, decode_node_literal, decode_node_symbol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PendingEdge:
    """First endpoint and branch mark of an edge still waiting for its second node."""

    node: Optional[int] = None
    edge: Optional[Edge] = None

    @property
    def ready(self) -> bool:
        return self.node is not None and self.edge is not None

    def with_edge(self, edge: Optional[Edge]) -> "PendingEdge":
        return replace(self, edge=edge)


def read_virtual_index(cur: Cursor, node_count: int) -> int:
    idx, ch = cur.expect()
    if not (ch.isascii() and ch.isalnum()):
        raise InvalidSymbol(idx, f'invalid virtual node {ch!r}')
    digit = int(ch, 36)
    if digit < 10:
        raise InvalidSymbol(idx, f'virtual node must be a letter, got {ch!r}')
    target = digit - 10
    if target >= node_count:
        raise InvalidSymbol(idx, f'virtual node *{ch} refers to a node not yet declared')
    return target


def read_literal(cur: Cursor, first: IndexedChar) -> Node:
    chars = [first]
    while True:
        t = cur.next()
        if t is None:
            raise MismatchedParenthesis(cur.length, 'unclosed parenthesis')
        chars.append(t)
        if t[1] == ')':
            return decode_node_literal(chars)


class DiagramBuilder:
    """Owns the in-progress graph; nodes and edges are append-only until :meth:`build`."""

    def __init__(self, text: str):
        self.cur = Cursor(text)
        self.nodes: List[Node] = []
        self.edges: List[DiagramEdge] = []

    def add_edge(self, a: int, b: int, edge: Edge, index: int) -> None:
        assert 0 <= a < len(self.nodes) and 0 <= b < len(self.nodes), 'edge endpoint was never resolved'
        if a == b:
            raise InvalidSymbol(index, 'a node cannot be joined to itself')
        if any(e.joins(a, b) for e in self.edges):
            raise InvalidSymbol(index, f'nodes {a} and {b} are already joined')
        self.edges.append(DiagramEdge(a, b, edge))

    def create_node(self, pending: PendingEdge) -> PendingEdge:
        """Read one node token, close ``pending`` onto it and return the new pending edge."""

        idx, ch = self.cur.expect()
        if ch == '(':
            self.nodes.append(read_literal(self.cur, (idx, ch)))
            node = len(self.nodes) - 1
        elif ch == '*':
            node = read_virtual_index(self.cur, len(self.nodes))
        else:
            self.nodes.append(decode_node_symbol(ch, idx))
            node = len(self.nodes) - 1

        if pending.ready:
            self.add_edge(pending.node, node, pending.edge, idx)
        return PendingEdge(node=node)

    def create_edge(self, pending: PendingEdge) -> Optional[PendingEdge]:
        """Read the branch mark after a node, or return ``None`` at the end of the input."""

        run: List[IndexedChar] = []
        while True:
            t = self.cur.peek()
            if t is None:
                if any(not c.isspace() for _, c in run):
                    logger.debug("Dropping trailing branch mark at index %d", run[0][0])
                return None
            if is_node_start(t[1]):
                return pending.with_edge(decode_edge(run, t[0]))
            run.append(t)
            self.cur.next()

    def build(self) -> Diagram:
        pending = PendingEdge()
        while True:
            pending = self.create_node(pending)
            nxt = self.create_edge(pending)
            if nxt is None:
                break
            pending = nxt
        return Diagram(tuple(self.nodes), tuple(self.edges))


def parse_diagram(text: str) -> Diagram:
    diagram = DiagramBuilder(text).build()
    logger.info(
        "Parsed diagram %r: %d node(s), %d edge(s)", text, diagram.dim, diagram.edge_count
    )
    return diagram


ParseResult = Union[Diagram, CDError]


def parse_many(texts: Iterable[str]) -> List[Tuple[str, ParseResult]]:
    """Parse every diagram independently; failures are returned, not raised."""

    results: List[Tuple[str, ParseResult]] = []
    for text in texts:
        try:
            results.append((text, parse_diagram(text)))
        except CDError as exc:
            logger.warning("Could not parse %r: %s", text, exc)
            results.append((text, exc.with_context(text)))
    return results


apply_debug_logging(globals(), logger=logger, skip={'parse_many'})

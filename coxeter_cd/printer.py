from typing import Iterable, List, Optional

import numpy as np

from .ast import Diagram, DiagramEdge, Edge, Node, NodeKind
from .symbols import SHORTCHORDS, SNUB_SYMBOL, UNRINGED_SYMBOL

_CHORD_BY_VALUE = {chord.value: symbol for symbol, chord in SHORTCHORDS.items()}


def format_node(node: Node) -> str:
    if node.kind == NodeKind.UNRINGED:
        return UNRINGED_SYMBOL
    if node.kind == NodeKind.SNUB:
        if node.value != 1.0:
            raise ValueError(f"snub node with value {node.value!r} has no notation")
        return SNUB_SYMBOL
    symbol = _CHORD_BY_VALUE.get(node.value)
    if symbol is not None:
        return symbol
    return f"({node.value!r})"


def format_edge(edge: Edge) -> str:
    if edge.den == 1:
        return str(edge.num)
    return f"{edge.num}/{edge.den}"


def _virtual(index: int) -> str:
    if index >= 26:
        raise ValueError(f"node {index} cannot be referenced as a virtual node")
    return "*" + chr(ord("a") + index)


def _back_edge(diagram: Diagram, i: int) -> Optional[DiagramEdge]:
    for diagram_edge in diagram.edges:
        if max(diagram_edge.a, diagram_edge.b) == i and min(diagram_edge.a, diagram_edge.b) < i - 1:
            return diagram_edge
    return None


def format_diagram(diagram: Diagram) -> str:
    """Write ``diagram`` back in CD notation.

    Nodes are written in order, joined by their branch mark when consecutive
    nodes share an edge.  A node not joined to its predecessor is attached to
    an earlier node through a virtual reference (``*c3o``) when it has such an
    edge, and separated by a space otherwise.  Remaining edges are appended as
    virtual node pairs such as ``*a3*c``.
    """

    parts: List[str] = []
    written = set()
    for i, node in enumerate(diagram.nodes):
        if i > 0:
            edge = diagram.find_edge(i - 1, i)
            back = _back_edge(diagram, i)
            if edge is not None:
                parts.append(format_edge(edge))
                written.add((i - 1, i))
            elif back is not None:
                a = min(back.a, back.b)
                parts.append(f" {_virtual(a)}{format_edge(back.edge)}")
                written.add((a, i))
            else:
                parts.append(" ")
        parts.append(format_node(node))

    for diagram_edge in diagram.edges:
        a, b = sorted((diagram_edge.a, diagram_edge.b))
        if (a, b) in written:
            continue
        parts.append(f" {_virtual(a)}{format_edge(diagram_edge.edge)}{_virtual(b)}")
    return "".join(parts)


def describe_diagram(diagram: Diagram) -> str:
    lines = [f"{diagram.dim} Nodes", f"{diagram.edge_count} Edges"]
    for i, node in enumerate(diagram.nodes):
        lines.append(f"Node {i}: {node.kind.name.lower()} {node.value!r}")
    for i, e in enumerate(diagram.edges):
        lines.append(f"Edge {i}: {e.a}-{e.b} {format_edge(e.edge)}")
    return "\n".join(lines) + "\n"


def format_vector(values: Iterable[float], precision: int = 6) -> str:
    return "[" + ", ".join(f"{float(v):.{precision}g}" for v in values) + "]"


def format_matrix(matrix: Optional[np.ndarray], precision: int = 6) -> str:
    if matrix is None:
        return "none"
    return "\n".join(format_vector(row, precision) for row in np.asarray(matrix))

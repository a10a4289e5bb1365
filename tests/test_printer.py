import numpy as np
import pytest

from coxeter_cd import Node, describe_diagram, format_diagram, format_edge, format_matrix, format_node, parse_diagram
from coxeter_cd.ast import Edge


@pytest.mark.parametrize(
    'node, text',
    [
        (Node.unringed(), 'o'),
        (Node.snub(1.0), 's'),
        (Node.ringed(1.0), 'x'),
        (Node.ringed(2.0), 'u'),
        (Node.ringed(2.2), '(2.2)'),
        (Node.ringed(-3.0), '(-3.0)'),
    ],
)
def test_format_node(node, text):
    assert format_node(node) == text


def test_format_node_rejects_scaled_snub():
    with pytest.raises(ValueError):
        format_node(Node.snub(2.0))


def test_format_edge():
    assert format_edge(Edge(3)) == '3'
    assert format_edge(Edge(5, 2)) == '5/2'


def test_linear_diagram_is_reproduced():
    assert format_diagram(parse_diagram('x3o4o')) == 'x3o4o'
    assert format_diagram(parse_diagram('(1.0)4(2.2)3(-3.0)')) == 'x4(2.2)3(-3.0)'


def test_branching_diagram_uses_virtual_nodes():
    diagram = parse_diagram('x3o3o3o3o *c3o')
    text = format_diagram(diagram)
    assert text == 'x3o3o3o3o *c3o'
    assert parse_diagram(text).cox() == diagram.cox()


def test_describe_diagram():
    assert describe_diagram(parse_diagram('x3o')) == (
        '2 Nodes\n'
        '1 Edges\n'
        'Node 0: ringed 1.0\n'
        'Node 1: unringed 0.0\n'
        'Edge 0: 0-1 3\n'
    )


def test_format_matrix():
    assert format_matrix(np.array([[1.0, 0.5], [0.0, 2.0]]), 3) == '[1, 0.5]\n[0, 2]'
    assert format_matrix(None) == 'none'


def test_long_branch_only_names_the_earlier_node():
    text = 'x' + '3o' * 30 + ' *c3o'
    diagram = parse_diagram(text)
    assert format_diagram(diagram) == text


def test_extra_edges_are_appended_as_virtual_pairs():
    diagram = parse_diagram('x3o3o3o *a4*c')
    text = format_diagram(diagram)
    assert text == 'x3o3o3o *a4*c'
    assert parse_diagram(text).cox() == diagram.cox()


def test_unnameable_node_is_rejected():
    diagram = parse_diagram('x' + '3o' * 30 + ' *c3o3*d')
    with pytest.raises(ValueError):
        format_diagram(diagram)

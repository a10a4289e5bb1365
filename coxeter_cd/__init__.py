from .ast import Diagram, DiagramEdge, Edge, Node, NodeKind
from .config import GeometryConfig, get_geometry_config, set_geometry_config
from .errors import CDError, InvalidSymbol, MismatchedParenthesis, ParseError, UnexpectedEnding
from .geometry import circumradius, generator, normals, schlafli_matrix
from .matrix import CoxeterMatrix, derive_coxeter_matrix
from .parser import DiagramBuilder, PendingEdge, parse_diagram, parse_many
from .printer import describe_diagram, format_diagram, format_edge, format_matrix, format_node
from .symbols import SHORTCHORDS

__all__ = [
    'parse_diagram',
    'parse_many',
    'DiagramBuilder',
    'PendingEdge',
    'Diagram',
    'DiagramEdge',
    'Edge',
    'Node',
    'NodeKind',
    'CoxeterMatrix',
    'derive_coxeter_matrix',
    'normals',
    'schlafli_matrix',
    'circumradius',
    'generator',
    'GeometryConfig',
    'get_geometry_config',
    'set_geometry_config',
    'CDError',
    'MismatchedParenthesis',
    'UnexpectedEnding',
    'ParseError',
    'InvalidSymbol',
    'SHORTCHORDS',
    'describe_diagram',
    'format_diagram',
    'format_edge',
    'format_matrix',
    'format_node',
]

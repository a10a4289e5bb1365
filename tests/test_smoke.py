import math

from coxeter_cd import CoxeterMatrix, circumradius, generator, normals, parse_diagram


def test_cube_end_to_end():
    diagram = parse_diagram('x4o3o')
    cox = diagram.cox()
    assert cox == CoxeterMatrix.b(3)
    mirrors = normals(cox)
    assert mirrors is not None
    assert math.isclose(circumradius(cox, diagram.node_vector()), math.sqrt(3) / 2)
    point = generator(cox, diagram.node_vector())
    assert point is not None and point.shape == (3,)

import math

import numpy as np
import pytest

from coxeter_cd import (
    CoxeterMatrix,
    GeometryConfig,
    circumradius,
    generator,
    get_geometry_config,
    normals,
    parse_diagram,
    schlafli_matrix,
    set_geometry_config,
)


def test_normals_a2():
    mat = normals(CoxeterMatrix.parse('x3o'))
    assert mat == pytest.approx(np.array([[1.0, 0.5], [0.0, math.sqrt(0.75)]]))


@pytest.mark.parametrize('text', ['x3o3o', 'x4o3o', 'x5o3o3o', 'x3o3o3o3o *c3o', 'x5/2o'])
def test_normals_are_unit_with_expected_angles(text):
    cox = CoxeterMatrix.parse(text)
    mat = normals(cox)
    assert mat is not None
    assert np.allclose(mat, np.triu(mat))
    gram = mat.T @ mat
    assert np.allclose(gram, np.cos(np.pi / cox.as_array()) + 2 * np.eye(cox.dim))


@pytest.mark.parametrize('text', ['x7o3o', 'x6o3o', 'x4o4o', 'x3o3o3o3o3o *c3o3o3o'])
def test_normals_none_outside_spherical_space(text):
    assert normals(CoxeterMatrix.parse(text)) is None


def test_normals_boundary():
    eps = get_geometry_config().eps
    # A 2x2 matrix puts cos(pi/p)**2 into the squared norm of the second column.
    assert normals(CoxeterMatrix.i2(1.0)) is None
    below = math.sqrt(1.0 - 10 * eps)
    p = math.pi / math.acos(below)
    assert normals(CoxeterMatrix.i2(p)) is not None


@pytest.mark.parametrize(
    'text, radius',
    [
        ('x', 0.5),
        ('x3o', 1 / math.sqrt(3)),
        ('x4o', math.sqrt(2) / 2),
        ('x3o3o', math.sqrt(3 / 8)),
        ('x4o3o', math.sqrt(3) / 2),
        ('u4o3o', math.sqrt(3)),
    ],
)
def test_circumradius(text, radius):
    assert parse_diagram(text).circumradius() == pytest.approx(radius)


def test_circumradius_singular_schlafli():
    cox = CoxeterMatrix.i2(1.0)
    assert np.array_equal(schlafli_matrix(cox), -np.ones((2, 2)))
    assert circumradius(cox, [1.0, 1.0]) is None


def test_circumradius_zero_is_exact():
    assert parse_diagram('o3o').circumradius() == 0.0
    radius = circumradius(CoxeterMatrix.trivial(), [1e-6])
    assert radius == 0.0
    assert math.copysign(1.0, radius) == 1.0


def test_circumradius_negative_square_is_none():
    assert parse_diagram('x7o3o').circumradius() is None


def test_generator_solves_triangular_system():
    diagram = parse_diagram('x3x4o')
    point = diagram.generator()
    mirrors = normals(diagram.cox())
    assert point is not None
    assert np.allclose(mirrors @ point, diagram.node_vector())


def test_generator_a2():
    point = parse_diagram('x3o').generator()
    assert point == pytest.approx(np.array([1.0, 0.0]))


def test_generator_none_when_normals_fail():
    assert parse_diagram('x7o3o').generator() is None


def test_eps_override_and_config():
    cox = CoxeterMatrix.i2(math.pi / math.acos(math.sqrt(1.0 - 1e-6)))
    assert normals(cox) is not None
    assert normals(cox, eps=1e-3) is None

    original = get_geometry_config()
    try:
        set_geometry_config(GeometryConfig(eps=1e-3))
        assert normals(cox) is None
        assert generator(cox, [1.0, 0.0]) is None
    finally:
        set_geometry_config(original)
    assert normals(cox) is not None


def test_non_finite_node_vector_has_no_geometry():
    cox = CoxeterMatrix.a(2)
    assert circumradius(cox, [math.inf, 0.0]) is None
    assert generator(cox, [math.inf, 0.0]) is None

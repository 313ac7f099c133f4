import math

import numpy as np
import pytest

from auxiliar import (Identity, RotateX, RotateY, RotateZ, Scale, Shear, Transformation,
                      Translate, transform, view_transform)
from basic_ops import identity, meq, point, veq, vector
from errors import NonInvertibleTransformError
from geometry import Ray

S2 = math.sqrt(2) / 2

UNITS = [
    Identity(),
    Translate(5, -3, 2),
    Scale(2, 3, 4),
    Scale(-1, 1, 1),
    RotateX(math.pi / 4),
    RotateY(math.pi / 3),
    RotateZ(-math.pi / 6),
    Shear(1, 0, 0, 0, 0, 0),
    Shear(0.5, -0.2, 0.3, 0.1, 0.4, -0.6),
]


def test_translation():
    t = Transformation(Translate(5, -3, 2))
    assert veq(t.apply(point(-3, 4, 5)), point(2, 1, 7))
    assert veq(t.inverse() @ point(-3, 4, 5), point(-8, 7, 3))
    # los vectores no se trasladan
    assert veq(t.apply(vector(-3, 4, 5)), vector(-3, 4, 5))


def test_scaling():
    t = Transformation(Scale(2, 3, 4))
    assert veq(t.apply(point(-4, 6, 8)), point(-8, 18, 32))
    assert veq(t.apply(vector(-4, 6, 8)), vector(-8, 18, 32))
    assert veq(t.inverse() @ vector(-4, 6, 8), vector(-2, 2, 2))
    assert veq(Transformation(Scale(-1, 1, 1)).apply(point(2, 3, 4)), point(-2, 3, 4))


def test_rotations():
    p = point(0, 1, 0)
    assert veq(RotateX(math.pi / 4).matrix() @ p, point(0, S2, S2))
    assert veq(RotateX(math.pi / 2).matrix() @ p, point(0, 0, 1))
    assert veq(Transformation(RotateX(math.pi / 4)).inverse() @ p, point(0, S2, -S2))

    p = point(0, 0, 1)
    assert veq(RotateY(math.pi / 4).matrix() @ p, point(S2, 0, S2))
    assert veq(RotateY(math.pi / 2).matrix() @ p, point(1, 0, 0))

    p = point(0, 1, 0)
    assert veq(RotateZ(math.pi / 4).matrix() @ p, point(-S2, S2, 0))
    assert veq(RotateZ(math.pi / 2).matrix() @ p, point(-1, 0, 0))


@pytest.mark.parametrize("kwargs, expected", [
    ({'xy': 1}, point(5, 3, 4)),
    ({'xz': 1}, point(6, 3, 4)),
    ({'yx': 1}, point(2, 5, 4)),
    ({'yz': 1}, point(2, 7, 4)),
    ({'zx': 1}, point(2, 3, 6)),
    ({'zy': 1}, point(2, 3, 7)),
])
def test_shearing(kwargs, expected):
    assert veq(Shear(**kwargs).matrix() @ point(2, 3, 4), expected)


@pytest.mark.parametrize("unit", UNITS, ids=repr)
def test_every_unit_round_trips(unit):
    t = Transformation(unit)
    for v in (point(1.5, -2, 3), vector(-0.5, 4, 2)):
        assert veq(t.inverse() @ (t.matrix() @ v), v)


def test_units_apply_in_insertion_order():
    a, b, c = RotateX(math.pi / 2), Scale(5, 5, 5), Translate(10, 5, 7)
    t = Transformation(a, b, c)
    p = point(1, 0, 1)

    assert veq(t.apply(p), point(15, 0, 7))
    assert veq(t.apply(p), c.matrix() @ (b.matrix() @ (a.matrix() @ p)))
    assert not veq(t.apply(p), a.matrix() @ (b.matrix() @ (c.matrix() @ p)))


def test_cached_matrix_tracks_every_add():
    t = Transformation()
    assert meq(t.matrix(), identity())

    expected = identity()
    for unit in UNITS:
        t.add(unit)
        expected = unit.matrix() @ expected
        assert meq(t.matrix(), expected)
    assert len(t) == len(UNITS)
    assert list(t) == UNITS


def test_cached_matrix_is_read_only():
    t = transform(Translate(1, 2, 3))
    with pytest.raises(ValueError):
        t.matrix()[0, 0] = 5.0


def test_inverse_is_refreshed_after_add():
    t = Transformation(Translate(1, 0, 0))
    assert veq(t.inverse() @ point(1, 0, 0), point(0, 0, 0))
    t.add(Scale(2, 2, 2))
    assert veq(t.inverse() @ point(2, 0, 0), point(0, 0, 0))
    assert meq(t.inverse_transpose(), t.inverse().T)


def test_zero_scale_is_not_invertible():
    t = Transformation(Scale(0, 1, 1))
    with pytest.raises(NonInvertibleTransformError):
        t.inverse()


def test_small_scale_stays_invertible():
    t = Transformation(Scale(0.01, 0.01, 0.01))
    assert veq(t.inverse() @ point(0.01, 0.02, 0.03), point(1, 2, 3))


def test_transforming_a_ray():
    r = Ray(point(1, 2, 3), vector(0, 1, 0))

    moved = Transformation(Translate(3, 4, 5)).apply(r)
    assert veq(moved.origin, point(4, 6, 8))
    assert veq(moved.direction, vector(0, 1, 0))

    scaled = Transformation(Scale(2, 3, 4)).apply(r)
    assert veq(scaled.origin, point(2, 6, 12))
    assert veq(scaled.direction, vector(0, 3, 0))
    # el rayo original no cambia
    assert veq(r.origin, point(1, 2, 3))


def test_unit_equality():
    assert Translate(1, 2, 3) == Translate(1, 2, 3)
    assert Translate(1, 2, 3) != Scale(1, 2, 3)
    assert repr(Scale(2, 3, 4)) == "Scale(2, 3, 4)"


def test_view_transform_default_orientation():
    m = view_transform(point(0, 0, 0), point(0, 0, -1), vector(0, 1, 0))
    assert meq(m, identity())


def test_view_transform_looking_in_positive_z():
    m = view_transform(point(0, 0, 0), point(0, 0, 1), vector(0, 1, 0))
    assert meq(m, Scale(-1, 1, -1).matrix())


def test_view_transform_moves_the_world():
    m = view_transform(point(0, 0, 8), point(0, 0, 0), vector(0, 1, 0))
    assert meq(m, Translate(0, 0, -8).matrix())


def test_arbitrary_view_transform():
    m = view_transform(point(1, 3, 2), point(4, -2, 8), vector(1, 1, 0))
    expected = np.array([
        [-0.50709, 0.50709, 0.67612, -2.36643],
        [0.76772, 0.60609, 0.12122, -2.82843],
        [-0.35857, 0.59761, -0.71714, 0.00000],
        [0.00000, 0.00000, 0.00000, 1.00000],
    ])
    assert np.allclose(m, expected, atol=1e-4)

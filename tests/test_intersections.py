import math

from auxiliar import Translate
from basic_ops import EPSILON, point, veq, vector
from collisions import Computations, Intersection, Intersections
from geometry import Plane, Ray, Sphere


def test_intersection_keeps_shape_reference():
    s = Sphere()
    i = Intersection(3.5, s)
    assert i.t == 3.5
    assert i.obj is s


def test_create_pairs_every_value_with_the_same_shape():
    s = Sphere()
    xs = Intersections.create([2.0, 1.0], s)
    assert len(xs) == 2
    assert all(i.obj is s for i in xs)
    assert xs.t_values() == [2.0, 1.0]
    assert Intersections.create_sorted([2.0, 1.0], s).t_values() == [1.0, 2.0]


def test_combine_sorts():
    s = Sphere()
    xs = Intersections.combine(Intersection(5, s), Intersection(-3, s), Intersection(2, s))
    assert xs.t_values() == [-3.0, 2.0, 5.0]


def test_contains_uses_epsilon():
    xs = Intersections.create([4.0, 6.0], Sphere())
    assert xs.contains(4.0)
    assert xs.contains(6.0 + EPSILON / 10)
    assert not xs.contains(5.0)


def test_hit_all_positive():
    s = Sphere()
    i1, i2 = Intersection(1, s), Intersection(2, s)
    assert Intersections.combine(i2, i1).hit() is i1


def test_hit_some_negative():
    s = Sphere()
    i1, i2 = Intersection(-1, s), Intersection(1, s)
    assert Intersections.combine(i2, i1).hit() is i2


def test_hit_all_negative():
    s = Sphere()
    assert Intersections.combine(Intersection(-2, s), Intersection(-1, s)).hit() is None
    assert Intersections().hit() is None


def test_hit_is_lowest_non_negative():
    s = Sphere()
    i1, i2, i3, i4 = (Intersection(t, s) for t in (5, 7, -3, 2))
    assert Intersections.combine(i1, i2, i3, i4).hit() is i4


def test_zero_t_is_a_hit():
    s = Sphere()
    i = Intersection(0.0, s)
    assert Intersections.combine(Intersection(-1, s), i).hit() is i


def test_equal_t_keeps_first_encountered():
    a, b = Sphere(), Plane()
    first = Intersection(1.0, a)
    second = Intersection(1.0, b)
    xs = Intersections.combine(Intersection(3.0, a), first, second)
    assert xs.hit() is first


def test_sort_tolerates_nan():
    s = Sphere()
    xs = Intersections.create([3.0, float('nan'), 1.0], s)
    xs.sort()
    assert len(xs) == 3
    assert any(math.isnan(t) for t in xs.t_values())


def test_precomputing_outside_hit():
    r = Ray(point(0, 0, -5), vector(0, 0, 1))
    s = Sphere()
    comps = Computations.prepare(Intersection(4, s), r)
    assert comps.t == 4
    assert comps.obj is s
    assert veq(comps.p, point(0, 0, -1))
    assert veq(comps.eye, vector(0, 0, -1))
    assert veq(comps.normal, vector(0, 0, -1))
    assert comps.inside is False


def test_precomputing_inside_hit_flips_normal():
    r = Ray(point(0, 0, 0), vector(0, 0, 1))
    comps = Computations.prepare(Intersection(1, Sphere()), r)
    assert veq(comps.p, point(0, 0, 1))
    assert veq(comps.eye, vector(0, 0, -1))
    assert veq(comps.normal, vector(0, 0, -1))
    assert comps.inside is True


def test_over_point_is_nudged_along_normal():
    r = Ray(point(0, 0, -5), vector(0, 0, 1))
    s = Sphere()
    s.set_tunit(Translate(0, 0, 1))
    comps = Computations.prepare(Intersection(5, s), r)
    assert comps.over_p[2] < -EPSILON / 2
    assert comps.p[2] > comps.over_p[2]


def test_sort_accepts_key_and_reverse():
    s = Sphere()
    xs = Intersections.create([2.0, -1.0, 3.0], s)
    xs.sort(reverse=True)
    assert xs.t_values() == [3.0, 2.0, -1.0]
    xs.sort(key=lambda i: abs(i.t))
    assert xs.t_values() == [-1.0, 2.0, 3.0]

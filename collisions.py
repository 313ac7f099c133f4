"""
collisions.py - Intersecciones rayo-figura y selección del impacto visible
"""

from functools import cmp_to_key

from basic_ops import EPSILON, dot, feq


class Intersection:
    """Valor t de una intersección y la figura intersecada."""
    __slots__ = ('t', 'obj')

    def __init__(self, t, obj):
        self.t = float(t)
        self.obj = obj

    def __eq__(self, other):
        if not isinstance(other, Intersection):
            return NotImplemented
        return self.t == other.t and self.obj is other.obj

    __hash__ = None

    def __repr__(self):
        return f"Intersection(t={self.t:.5f}, obj={self.obj!r})"


def _compare_t(a, b):
    # NaN no es comparable: se trata como igual
    if a.t < b.t:
        return -1
    if a.t > b.t:
        return 1
    return 0


class Intersections(list):
    """Lista de Intersection ordenada de menor a mayor t."""

    def sort(self, key=None, reverse=False):
        # list.sort es estable: a igual t se conserva el orden de llegada
        if key is None:
            key = cmp_to_key(_compare_t)
        super().sort(key=key, reverse=reverse)

    def contains(self, value):
        return any(feq(i.t, value) for i in self)

    def hit(self):
        """La intersección con menor t no negativo, o None."""
        for i in self:
            if i.t < 0.0:
                continue
            return i
        return None

    def t_values(self):
        return [i.t for i in self]

    @classmethod
    def create(cls, ts, obj):
        return cls(Intersection(t, obj) for t in ts)

    @classmethod
    def create_sorted(cls, ts, obj):
        res = cls.create(ts, obj)
        res.sort()
        return res

    @classmethod
    def combine(cls, *intersections):
        res = cls(intersections)
        res.sort()
        return res


class Computations:
    """Datos del punto de impacto necesarios para sombrear."""
    __slots__ = ('t', 'obj', 'p', 'over_p', 'eye', 'normal', 'inside')

    def __init__(self, t, obj, p, over_p, eye, normal, inside):
        self.t = t
        self.obj = obj
        self.p = p
        self.over_p = over_p
        self.eye = eye
        self.normal = normal
        self.inside = inside

    @classmethod
    def prepare(cls, hit, ray):
        p = ray.pos(hit.t)
        eye = -ray.direction
        normal = hit.obj.normal(p)

        inside = dot(normal, eye) < 0.0
        if inside:
            normal = -normal

        # punto desplazado sobre la normal para evitar el acné de sombras
        over_p = p + normal * EPSILON
        return cls(hit.t, hit.obj, p, over_p, eye, normal, inside)

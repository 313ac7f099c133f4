"""
auxiliar.py - Transformaciones afines: unidades (TUnit) y su composición

Las unidades se aplican en el orden en que se añaden: la primera añadida
es la primera que actúa sobre el punto.
"""

from math import cos, sin

import numpy as np

from basic_ops import DET_EPSILON, cross, identity, normalize
from errors import NonInvertibleTransformError


class TUnit:
    """Transformación afín elemental."""
    __slots__ = ()

    def matrix(self):
        raise NotImplementedError

    def __eq__(self, other):
        return type(self) is type(other) and self._params() == other._params()

    def __hash__(self):
        return hash((type(self).__name__, self._params()))

    def __repr__(self):
        args = ", ".join(f"{p:g}" for p in self._params())
        return f"{type(self).__name__}({args})"

    def _params(self):
        return tuple(getattr(self, name) for name in self.__slots__)


class Identity(TUnit):
    __slots__ = ()

    def matrix(self):
        return identity()


class Translate(TUnit):
    __slots__ = ('dx', 'dy', 'dz')

    def __init__(self, dx=0.0, dy=0.0, dz=0.0):
        self.dx, self.dy, self.dz = float(dx), float(dy), float(dz)

    def matrix(self):
        m = identity()
        m[0:3, 3] = (self.dx, self.dy, self.dz)
        return m


class Scale(TUnit):
    __slots__ = ('fx', 'fy', 'fz')

    def __init__(self, fx=1.0, fy=1.0, fz=1.0):
        self.fx, self.fy, self.fz = float(fx), float(fy), float(fz)

    def matrix(self):
        return np.diag([self.fx, self.fy, self.fz, 1.0])


class RotateX(TUnit):
    __slots__ = ('angle',)

    def __init__(self, angle):
        self.angle = float(angle)

    def matrix(self):
        c, s = cos(self.angle), sin(self.angle)
        m = identity()
        m[1, 1], m[1, 2] = c, -s
        m[2, 1], m[2, 2] = s, c
        return m


class RotateY(TUnit):
    __slots__ = ('angle',)

    def __init__(self, angle):
        self.angle = float(angle)

    def matrix(self):
        c, s = cos(self.angle), sin(self.angle)
        m = identity()
        m[0, 0], m[0, 2] = c, s
        m[2, 0], m[2, 2] = -s, c
        return m


class RotateZ(TUnit):
    __slots__ = ('angle',)

    def __init__(self, angle):
        self.angle = float(angle)

    def matrix(self):
        c, s = cos(self.angle), sin(self.angle)
        m = identity()
        m[0, 0], m[0, 1] = c, -s
        m[1, 0], m[1, 1] = s, c
        return m


class Shear(TUnit):
    """Cada componente se desplaza en proporción a las otras dos (xy: x respecto a y...)."""
    __slots__ = ('xy', 'xz', 'yx', 'yz', 'zx', 'zy')

    def __init__(self, xy=0.0, xz=0.0, yx=0.0, yz=0.0, zx=0.0, zy=0.0):
        self.xy, self.xz = float(xy), float(xz)
        self.yx, self.yz = float(yx), float(yz)
        self.zx, self.zy = float(zx), float(zy)

    def matrix(self):
        m = identity()
        m[0, 1], m[0, 2] = self.xy, self.xz
        m[1, 0], m[1, 2] = self.yx, self.yz
        m[2, 0], m[2, 1] = self.zx, self.zy
        return m


def invert(m):
    """Inversa de una matriz 4x4; NonInvertibleTransformError si es singular."""
    det = np.linalg.det(m)
    if not np.isfinite(det) or abs(det) < DET_EPSILON:
        raise NonInvertibleTransformError(m)
    inv = np.linalg.inv(m)
    inv.setflags(write=False)
    return inv


class Transformation:
    """Secuencia ordenada de TUnit con la matriz compuesta en caché.

    Al añadir una unidad: cache = unidad.matrix() @ cache.
    """

    def __init__(self, *units):
        self.units = []
        self._matrix = identity()
        self._matrix.setflags(write=False)
        self._inverse = None
        self._inverse_t = None
        for unit in units:
            self.add(unit)

    def add(self, unit):
        composed = unit.matrix() @ self._matrix
        composed.setflags(write=False)
        self.units.append(unit)
        self._matrix = composed
        self._inverse = None
        self._inverse_t = None
        return self

    def matrix(self):
        return self._matrix

    def inverse(self):
        if self._inverse is None:
            self._inverse = invert(self._matrix)
        return self._inverse

    def inverse_transpose(self):
        if self._inverse_t is None:
            inv_t = self.inverse().T.copy()
            inv_t.setflags(write=False)
            self._inverse_t = inv_t
        return self._inverse_t

    def apply(self, target):
        """Aplica la matriz compuesta a una tupla o a un rayo."""
        if hasattr(target, 'transform'):
            return target.transform(self._matrix)
        return self._matrix @ target

    def copy(self):
        return Transformation(*self.units)

    def __len__(self):
        return len(self.units)

    def __iter__(self):
        return iter(self.units)

    def __repr__(self):
        return f"Transformation({', '.join(repr(u) for u in self.units)})"


def transform(*units):
    return Transformation(*units)


def view_transform(look_from, look_to, up):
    """Matriz que lleva el mundo al espacio de la cámara."""
    forward = normalize(look_to - look_from)
    left = cross(normalize(forward), normalize(up))
    true_up = cross(left, forward)

    orientation = np.array([
        [left[0], left[1], left[2], 0.0],
        [true_up[0], true_up[1], true_up[2], 0.0],
        [-forward[0], -forward[1], -forward[2], 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])
    return orientation @ Translate(-look_from[0], -look_from[1], -look_from[2]).matrix()

"""
color.py - Color RGB sin acotar y conversión de canales a 0..255
"""

import math
from numbers import Real

import numpy as np

from basic_ops import EPSILON, feq
from errors import NearZeroDivisionError


def to_byte(value):
    """Convierte un canal real a entero: >1 -> 255, <0 o NaN -> 0, si no round(v * 255)."""
    if math.isnan(value):
        return 0
    if value > 1.0:
        return 255
    if value < 0.0:
        return 0
    return int(math.floor(value * 255.0 + 0.5))


def to_bytes(rgbs):
    """Versión vectorizada de to_byte para un array (..., 3)."""
    rgbs = np.nan_to_num(np.asarray(rgbs, dtype=np.float64), nan=0.0)
    out = np.floor(np.clip(rgbs, 0.0, 1.0) * 255.0 + 0.5)
    return out.astype(np.uint8)


class Color:
    __slots__ = ('r', 'g', 'b')

    def __init__(self, r=0.0, g=0.0, b=0.0):
        self.r = float(r)
        self.g = float(g)
        self.b = float(b)

    @classmethod
    def black(cls):
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def white(cls):
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def from_array(cls, rgb):
        return cls(rgb[0], rgb[1], rgb[2])

    def to_array(self):
        return np.array([self.r, self.g, self.b], dtype=np.float64)

    def __repr__(self):
        return f"Color({self.r:.4f}, {self.g:.4f}, {self.b:.4f})"

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return feq(self.r, other.r) and feq(self.g, other.g) and feq(self.b, other.b)

    __hash__ = None

    # numpy debe delegar en __rmul__ (np.float64 * Color)
    __array_ufunc__ = None

    def __add__(self, other):
        if isinstance(other, Color):
            return Color(self.r + other.r, self.g + other.g, self.b + other.b)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Color):
            return Color(self.r - other.r, self.g - other.g, self.b - other.b)
        return NotImplemented

    def __neg__(self):
        return Color(-self.r, -self.g, -self.b)

    def __mul__(self, other):
        # producto de Schur (componente a componente)
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        if isinstance(other, Real):
            return Color(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def __truediv__(self, scalar):
        if abs(scalar) < EPSILON:
            raise NearZeroDivisionError(f"Color division by near-zero value {scalar}")
        return self * (1.0 / scalar)

    def fmt(self):
        return f"{to_byte(self.r)} {to_byte(self.g)} {to_byte(self.b)}"


def color(r, g, b):
    return Color(r, g, b)

"""
basic_ops.py - Operaciones básicas sobre tuplas homogéneas (x, y, z, w) y matrices 4x4

Un punto tiene w = 1 y un vector w = 0. Todas las comparaciones de
números reales usan EPSILON.
"""

import math

import numpy as np
from numba import jit

from errors import NearZeroDivisionError

EPSILON = 1e-4

# |det| por debajo de este valor se considera singular
DET_EPSILON = 1e-12


@jit(nopython=True)
def dot_cpu(a, b):
    return a[0]*b[0] + a[1]*b[1] + a[2]*b[2] + a[3]*b[3]


@jit(nopython=True)
def cross_cpu(a, b):
    return np.array((
        a[1]*b[2] - a[2]*b[1],
        a[2]*b[0] - a[0]*b[2],
        a[0]*b[1] - a[1]*b[0],
        0.0
    ))


@jit(nopython=True)
def reflect_cpu(v, n):
    return v - n * (2.0 * dot_cpu(n, v))


@jit(nopython=True)
def hit_sphere_cpu(origin, direction, center, radius):
    """Raíces de la ecuación rayo-esfera: (número de raíces, t1, t2)."""
    delta = origin - center
    a = dot_cpu(delta, delta) - radius * radius
    b = dot_cpu(direction, delta)
    c = dot_cpu(direction, direction)

    # rayo degenerado (dirección nula)
    if c == 0.0:
        return 0, 0.0, 0.0

    discriminant = b * b - a * c
    if discriminant < 0.0:
        return 0, 0.0, 0.0

    sqrt_disc = math.sqrt(discriminant)
    return 2, (-b - sqrt_disc) / c, (-b + sqrt_disc) / c


@jit(nopython=True)
def hit_plane_cpu(origin_y, direction_y, eps):
    # paralelo o contenido en el plano
    if abs(direction_y) < eps:
        return False, 0.0
    return True, -origin_y / direction_y


@jit(nopython=True)
def specular_cpu(reflect_dot_eye, shininess):
    if reflect_dot_eye <= 0.0:
        return 0.0
    return math.pow(reflect_dot_eye, shininess)


def tuple4(x, y, z, w):
    return np.array([x, y, z, w], dtype=np.float64)


def point(x, y, z):
    return tuple4(x, y, z, 1.0)


def vector(x, y, z):
    return tuple4(x, y, z, 0.0)


def is_point(v):
    return feq(v[3], 1.0)


def is_vector(v):
    return feq(v[3], 0.0)


def matrix(*values):
    """Matriz 4x4 a partir de 16 valores (por filas) o de 4 filas."""
    if len(values) == 4:
        m = np.array(values, dtype=np.float64)
    else:
        m = np.array(values, dtype=np.float64).reshape(4, 4)
    if m.shape != (4, 4):
        raise ValueError(f"matrix() expects 16 values or 4 rows, got shape {m.shape}")
    return m


def identity():
    return np.identity(4, dtype=np.float64)


def feq(a, b):
    return abs(a - b) < EPSILON


def veq(a, b):
    return float(np.linalg.norm(np.asarray(a) - np.asarray(b))) < EPSILON


def meq(a, b):
    return float(np.linalg.norm(np.asarray(a) - np.asarray(b))) < EPSILON


def dot(a, b):
    return float(dot_cpu(a, b))


def cross(a, b):
    """Producto vectorial, sólo para las tres primeras componentes."""
    return cross_cpu(a, b)


def magnitude(v):
    return math.sqrt(dot_cpu(v, v))


def normalize(v):
    norm = magnitude(v)
    if norm < EPSILON:
        raise NearZeroDivisionError(f"Cannot normalize a near-zero tuple {v}")
    return v / norm


def reflect(v, n):
    """Refleja v respecto a la normal n: v - 2·n·(n·v)."""
    return reflect_cpu(v, n)

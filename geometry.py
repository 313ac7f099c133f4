"""
geometry.py - Rayos, materiales, figuras, luz puntual y cámara
"""

import math

import numpy as np

from auxiliar import Transformation, invert, view_transform
from basic_ops import (EPSILON, dot, hit_plane_cpu, hit_sphere_cpu, meq, normalize,
                       point, reflect, specular_cpu, vector)
from color import Color


class Ray:
    """Rayo con origen (punto) y dirección (vector)."""
    __slots__ = ('origin', 'direction')

    def __init__(self, origin, direction):
        self.origin = np.asarray(origin, dtype=np.float64)
        self.direction = np.asarray(direction, dtype=np.float64)

    def pos(self, t):
        """Posición a lo largo del rayo para el valor t."""
        return self.origin + self.direction * t

    def transform(self, m):
        return Ray(m @ self.origin, m @ self.direction)

    def __repr__(self):
        return f"Ray(origin={self.origin}, direction={self.direction})"


class Pattern:
    """Patrón de color en el espacio del objeto (franjas o degradado)."""

    STRIPE = 'stripe'
    GRADIENT = 'gradient'
    KINDS = (STRIPE, GRADIENT)

    def __init__(self, kind=STRIPE, a=None, b=None, transform=None):
        if kind not in self.KINDS:
            raise ValueError(f"Unknown pattern kind {kind!r}, expected one of {self.KINDS}")
        self.kind = kind
        self.a = a if a is not None else Color.white()
        self.b = b if b is not None else Color.black()
        self.transform = transform if transform is not None else Transformation()

    @classmethod
    def default(cls, kind):
        return cls(kind)

    def set_colors(self, a, b):
        self.a = a
        self.b = b

    def add_tunit(self, unit):
        self.transform.add(unit)

    def color_at(self, pattern_p):
        x = pattern_p[0]
        if self.kind == self.STRIPE:
            return self.a if math.floor(x) % 2 == 0 else self.b
        fraction = x - math.floor(x)
        return self.a + (self.b - self.a) * fraction

    def color_at_object(self, obj, world_p):
        obj_p = obj.transform.inverse() @ world_p
        pattern_p = self.transform.inverse() @ obj_p
        return self.color_at(pattern_p)

    def copy(self):
        return Pattern(self.kind, self.a, self.b, self.transform.copy())

    def __eq__(self, other):
        if not isinstance(other, Pattern):
            return NotImplemented
        return (self.kind == other.kind and self.a == other.a and self.b == other.b
                and meq(self.transform.matrix(), other.transform.matrix()))

    __hash__ = None


class Material:
    """Material del modelo de reflexión de Phong."""

    def __init__(self, color=None, ambient=0.1, diffuse=0.9, specular=0.9, shininess=200.0,
                 pattern=None):
        self.color = color if color is not None else Color.white()
        self.ambient = ambient
        self.diffuse = diffuse
        self.specular = specular
        self.shininess = shininess
        self.pattern = pattern

    def change_color(self, col):
        self.color = col

    def copy(self):
        return Material(self.color, self.ambient, self.diffuse, self.specular, self.shininess,
                        self.pattern.copy() if self.pattern is not None else None)

    def __eq__(self, other):
        if not isinstance(other, Material):
            return NotImplemented
        return (self.color == other.color
                and self.ambient == other.ambient
                and self.diffuse == other.diffuse
                and self.specular == other.specular
                and self.shininess == other.shininess
                and self.pattern == other.pattern)

    __hash__ = None

    def __repr__(self):
        return (f"Material(color={self.color}, ambient={self.ambient}, diffuse={self.diffuse}, "
                f"specular={self.specular}, shininess={self.shininess})")


class PointLight:
    """Fuente de luz puntual."""

    def __init__(self, position=None, intensity=None):
        self.position = position if position is not None else point(0.0, 0.0, 0.0)
        self.intensity = intensity if intensity is not None else Color.white()

    def shade(self, material, p, eye, normal, in_shadow=False, obj=None):
        """Color en el punto p según Phong (ambiente + difusa + especular).

        Si el material tiene patrón se necesita la figura (obj) para pasar
        el punto a su espacio local.
        """
        if material.pattern is not None and obj is not None:
            surface = material.pattern.color_at_object(obj, p)
        else:
            surface = material.color

        effective_color = self.intensity * surface
        light_v = normalize(self.position - p)
        ambient = effective_color * material.ambient

        # en sombra sólo queda la componente ambiente
        if in_shadow:
            return ambient

        light_dot_normal = dot(light_v, normal)
        if light_dot_normal < 0.0:
            # la luz está al otro lado de la superficie
            return ambient

        diffuse = effective_color * (material.diffuse * light_dot_normal)

        reflect_v = reflect(-light_v, normal)
        factor = specular_cpu(dot(reflect_v, eye), material.shininess)
        if factor == 0.0:
            return ambient + diffuse

        specular = self.intensity * (material.specular * factor)
        return ambient + diffuse + specular


class Shape:
    """Figura dibujable: transformación + material.

    Las subclases implementan local_intersect y local_normal en el espacio
    del objeto; intersect y normal trabajan en el espacio del mundo.
    """

    def __init__(self, transform=None, material=None):
        self.transform = transform if transform is not None else Transformation()
        self.material = material if material is not None else Material()

    def get_transform(self):
        return self.transform

    def get_material(self):
        return self.material

    def set_transform(self, t):
        self.transform = t

    def set_tunit(self, unit):
        self.transform = Transformation(unit)

    def add_tunit(self, unit):
        self.transform.add(unit)

    def set_material(self, m):
        self.material = m

    def set_pattern(self, pattern):
        self.material.pattern = pattern

    def intersect(self, world_r):
        """Valores t donde el rayo (en coordenadas del mundo) corta la figura."""
        obj_r = world_r.transform(self.transform.inverse())
        return self.local_intersect(obj_r)

    def normal(self, world_p):
        obj_p = self.transform.inverse() @ world_p
        obj_n = self.local_normal(obj_p)
        world_n = self.transform.inverse_transpose() @ obj_n
        world_n[3] = 0.0
        return normalize(world_n)

    def local_intersect(self, obj_r):
        raise NotImplementedError(f"{type(self).__name__} does not implement local_intersect()")

    def local_normal(self, obj_p):
        raise NotImplementedError(f"{type(self).__name__} does not implement local_normal()")


class Sphere(Shape):
    """Esfera en la escena."""

    def __init__(self, center=None, radius=1.0, transform=None, material=None):
        super().__init__(transform, material)
        self.center = center if center is not None else point(0.0, 0.0, 0.0)
        self.radius = float(radius)

    def local_intersect(self, obj_r):
        count, t1, t2 = hit_sphere_cpu(obj_r.origin, obj_r.direction, self.center, self.radius)
        if count == 0:
            return []
        return [t1, t2]

    def local_normal(self, obj_p):
        return obj_p - self.center

    def __repr__(self):
        return f"Sphere(center={self.center[:3]}, radius={self.radius})"


class Plane(Shape):
    """Plano infinito xz que pasa por el origen local, normal (0, 1, 0)."""

    def local_intersect(self, obj_r):
        hit, t = hit_plane_cpu(obj_r.origin[1], obj_r.direction[1], EPSILON)
        if not hit:
            return []
        return [t]

    def local_normal(self, obj_p):
        return vector(0.0, 1.0, 0.0)

    def __repr__(self):
        return "Plane()"


class Point(Shape):
    """Marcador que se escribe directamente en el lienzo, no se traza con rayos."""

    def __init__(self, x, y, z, col=None):
        super().__init__()
        self.pos = point(x, y, z)
        if col is not None:
            self.material.change_color(col)

    def draw(self, canvas):
        trp = self.transform.matrix() @ self.pos
        x = int(round(trp[0]))
        y = int(round(trp[1]))
        canvas.write(x, y, self.material.color)

    def __repr__(self):
        return f"Point({self.pos[0]:g}, {self.pos[1]:g}, {self.pos[2]:g})"


class Camera:
    """Cámara con perspectiva configurable."""

    def __init__(self, hsize, vsize, fov, transform=None):
        self.hsize = hsize
        self.vsize = vsize
        self.fov = fov

        half_view = math.tan(fov / 2.0)
        aspect = hsize / vsize
        if aspect >= 1.0:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = (self.half_width * 2.0) / hsize

        self._transform = None
        self._inverse = None
        self.transform = transform if transform is not None else np.identity(4)

    @property
    def transform(self):
        return self._transform

    @transform.setter
    def transform(self, m):
        if isinstance(m, Transformation):
            m = m.matrix()
        m = np.array(m, dtype=np.float64)
        self._inverse = invert(m)
        self._transform = m

    def set_view(self, look_from, look_to, up):
        self.transform = view_transform(look_from, look_to, up)

    def ray_for_pixel(self, px, py):
        # desplazamiento desde el borde del lienzo hasta el centro del píxel
        xoffset = (px + 0.5) * self.pixel_size
        yoffset = (py + 0.5) * self.pixel_size

        # la cámara mira hacia -z, así que +x queda a la izquierda
        world_x = self.half_width - xoffset
        world_y = self.half_height - yoffset

        pixel = self._inverse @ point(world_x, world_y, -1.0)
        origin = self._inverse @ point(0.0, 0.0, 0.0)
        direction = normalize(pixel - origin)
        return Ray(origin, direction)

"""
world.py - Mundo: figuras, fuente de luz y trazado de un rayo
"""

from auxiliar import Scale, Transformation
from basic_ops import EPSILON, magnitude, normalize, point
from collisions import Computations, Intersections
from color import Color
from errors import UnsupportedLightCountError
from geometry import Material, PointLight, Ray, Sphere


class World:
    """Contenedor de figuras y luces de la escena.

    Las figuras se guardan en una lista y se identifican por su índice
    (handle), que no cambia mientras vive el mundo.
    """

    def __init__(self):
        self.objects = []
        self.sources = []
        self.points = []

    @classmethod
    def default(cls):
        """Dos esferas concéntricas y una luz blanca en (-10, 10, -10)."""
        world = cls()
        outer = Sphere(material=Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
        inner = Sphere(transform=Transformation(Scale(0.5, 0.5, 0.5)))
        world.add_objs([outer, inner])
        world.add_src(PointLight(point(-10.0, 10.0, -10.0), Color(1.0, 1.0, 1.0)))
        return world

    def __getitem__(self, handle):
        return self.objects[handle]

    def __len__(self):
        return len(self.objects)

    def add(self, obj):
        self.objects.append(obj)
        return len(self.objects) - 1

    def add_objs(self, objs):
        return [self.add(obj) for obj in objs]

    def add_src(self, light):
        if self.sources:
            raise UnsupportedLightCountError(len(self.sources) + 1)
        self.sources.append(light)

    def add_point(self, p):
        self.points.append(p)

    @property
    def light(self):
        if len(self.sources) != 1:
            raise UnsupportedLightCountError(len(self.sources))
        return self.sources[0]

    def intersect(self, ray):
        xs = Intersections()
        for obj in self.objects:
            xs.extend(Intersections.create(obj.intersect(ray), obj))
        xs.sort()
        return xs

    def calc(self, ray, background):
        """Color visto a lo largo del rayo (fondo si no hay impacto)."""
        hit = self.intersect(ray).hit()
        if hit is None:
            return background
        return self.shade_hit(Computations.prepare(hit, ray))

    def is_shadowed(self, p):
        light = self.light
        v = light.position - p
        distance = magnitude(v)
        shadow_ray = Ray(p, normalize(v))

        hit = self.intersect(shadow_ray).hit()
        return hit is not None and hit.t < distance - EPSILON

    def shade_hit(self, comps):
        shadowed = self.is_shadowed(comps.over_p)
        return self.light.shade(comps.obj.material, comps.p, comps.eye, comps.normal,
                                shadowed, obj=comps.obj)

"""
raytracer.py - Clase principal del Ray Tracer
"""

import traceback

from canvas import Canvas
from cpu_renderer import CPURenderer
from geometry import Camera
from world import World


class RayTracer:
    """Ray tracer: mundo + cámara + lienzo."""

    def __init__(self, width, height, fov, look_from, look_at, up, background,
                 progress=False, verbose=False):
        self.width = width
        self.height = height
        self.background = background
        self.verbose = verbose

        self.world = World()
        self.canvas = Canvas(width, height, background)
        self.cpu_renderer = CPURenderer(progress=progress)

        self.camera = Camera(width, height, fov)
        self.camera.set_view(look_from, look_at, up)

    @classmethod
    def from_config(cls, config, verbose=False):
        return cls(config.width, config.height, config.fov, config.look_from, config.look_at,
                   config.up, config.background, progress=config.progress, verbose=verbose)

    def set_camera(self, camera):
        self.camera = camera

    def reset(self, bg):
        self.background = bg
        self.canvas.reset(bg)

    def render(self):
        if self.verbose:
            print(f"Ray Tracer: {self.width}x{self.height}, {len(self.world)} objetos")
        try:
            return self.cpu_renderer.render(self.world, self.camera, self.canvas, self.background)
        except Exception as e:
            if self.verbose:
                print(f"Error en renderizado: {e}")
                traceback.print_exc()
            raise

    def generate_ppm(self, filename):
        self.canvas.save_ppm(filename)

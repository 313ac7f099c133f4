"""
canvas.py - Lienzo de píxeles y exportación a PPM (P3) / PNG
"""

import os

import numpy as np
from PIL import Image

from color import Color, to_bytes
from errors import CanvasBoundsError


class Canvas:
    """Buffer de colores por filas: grid[y, x] = (r, g, b)."""

    def __init__(self, width, height, bg=None):
        self.width = width
        self.height = height
        self.grid = np.zeros((height, width, 3), dtype=np.float64)
        if bg is not None:
            self.reset(bg)

    def _check(self, x, y):
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            raise CanvasBoundsError(x, y, self.width, self.height)

    def write(self, x, y, val):
        self._check(x, y)
        self.grid[y, x] = (val.r, val.g, val.b)

    def at(self, x, y):
        self._check(x, y)
        return Color.from_array(self.grid[y, x])

    def reset(self, bg):
        self.grid[:, :] = (bg.r, bg.g, bg.b)

    def to_bytes(self):
        return to_bytes(self.grid)

    def to_ppm(self):
        """Texto PPM P3: cabecera y una línea por fila."""
        pixels = self.to_bytes()
        lines = [f"P3\n{self.width} {self.height}\n255"]
        for row in pixels:
            lines.append(" ".join(f"{r} {g} {b}" for r, g, b in row).strip())
        return "\n".join(lines).strip()

    def save_ppm(self, path):
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, 'w') as f:
            f.write(self.to_ppm())

    def to_image(self):
        return Image.fromarray(self.to_bytes())

    def save(self, path):
        """Guarda en PPM si la extensión es .ppm; si no, con PIL según la extensión."""
        if path.lower().endswith('.ppm'):
            self.save_ppm(path)
            return
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        self.to_image().save(path)

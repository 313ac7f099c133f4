"""
render_config.py - Parámetros de renderizado
"""

from dataclasses import dataclass, field
from math import pi

import numpy as np

from basic_ops import point, vector
from color import Color


@dataclass
class RenderConfig:
    """Tamaño de imagen, cámara y color de fondo."""
    width: int = 400
    height: int = 225
    fov: float = pi / 3.0
    look_from: np.ndarray = field(default_factory=lambda: point(0.0, 1.5, -5.0))
    look_at: np.ndarray = field(default_factory=lambda: point(0.0, 1.0, 0.0))
    up: np.ndarray = field(default_factory=lambda: vector(0.0, 1.0, 0.0))
    background: Color = field(default_factory=Color.black)
    progress: bool = False

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image size must be positive, got {self.width}x{self.height}")
        if not 0.0 < self.fov < pi:
            raise ValueError(f"Field of view must be in (0, pi), got {self.fov}")

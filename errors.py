"""
errors.py - Errores del Ray Tracer
"""


class RayTracerError(Exception):
    """Error base de todo el renderizador."""


class NonInvertibleTransformError(RayTracerError):
    """La matriz de transformación compuesta no tiene inversa."""

    def __init__(self, matrix=None, message="Could not invert transformation matrix"):
        super().__init__(message)
        self.matrix = matrix


class UnsupportedLightCountError(RayTracerError):
    """El mundo necesita exactamente una fuente de luz."""

    def __init__(self, count):
        super().__init__(f"World supports exactly one light source, found {count}")
        self.count = count


class CanvasBoundsError(RayTracerError, IndexError):
    def __init__(self, x, y, width, height):
        super().__init__(f"Canvas.write(): pixel ({x}, {y}) out of bounds {width}x{height}")
        self.x = x
        self.y = y


class NearZeroDivisionError(RayTracerError, ZeroDivisionError):
    """División por una cantidad casi nula (normalización, color / escalar)."""

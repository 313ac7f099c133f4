"""
cpu_renderer.py - Renderizado en CPU: un rayo primario por píxel
"""

from tqdm import tqdm


class CPURenderer:
    def __init__(self, progress=False):
        self.progress = progress

    def render(self, world, camera, canvas, background):
        """Recorre los píxeles por filas y escribe el color de cada uno en el lienzo."""
        rows = range(camera.vsize)
        if self.progress:
            rows = tqdm(rows, total=camera.vsize, unit="fila")

        for y in rows:
            for x in range(camera.hsize):
                ray = camera.ray_for_pixel(x, y)
                canvas.write(x, y, world.calc(ray, background))

        # marcadores que no se trazan con rayos
        for p in world.points:
            p.draw(canvas)
        return canvas

"""
main.py - Script principal para ejecutar el Ray Tracer
"""

import argparse
import sys
import time
from math import pi

import matplotlib.pyplot as plt

from auxiliar import RotateX, RotateY, RotateZ, Scale, Translate, Transformation
from basic_ops import point, vector
from color import Color
from errors import RayTracerError
from geometry import Pattern, Plane, Point, PointLight, Sphere
from raytracer import RayTracer
from render_config import RenderConfig
from world import World


def _spheres():
    """Las tres esferas de las escenas de demostración."""
    middle = Sphere()
    middle.set_tunit(Translate(-0.5, 1.0, 0.5))
    middle.material.color = Color(0.1, 1.0, 0.5)
    middle.material.diffuse = 0.7
    middle.material.specular = 0.3

    right = Sphere(transform=Transformation(Scale(0.5, 0.5, 0.5), Translate(1.5, 0.5, -0.5)))
    right.material.color = Color(0.5, 1.0, 0.1)
    right.material.diffuse = 0.7
    right.material.specular = 0.3

    left = Sphere(transform=Transformation(Scale(0.33, 0.33, 0.33), Translate(-1.5, 0.33, -0.75)))
    left.material.color = Color(1.0, 0.8, 0.1)
    left.material.diffuse = 0.7
    left.material.specular = 0.3
    return middle, right, left


def _light():
    return PointLight(point(-10.0, 10.0, -10.0), Color(1.0, 1.0, 1.0))


def create_clock(tracer):
    """Doce marcas de un reloj dibujadas directamente en el lienzo."""
    for i in range(12):
        p = Point(0.0, 0.0, 0.0, Color(0.5, 0.5, 0.5))
        p.set_transform(Transformation(
            Translate(50.0, 0.0, 0.0),
            RotateZ(i * pi / 6.0),
            Translate(tracer.width / 2.0, tracer.height / 2.0, 0.0)
        ))
        tracer.world.add_point(p)


def create_spheres(tracer):
    """Suelo y paredes hechos con esferas aplanadas, tres esferas y sombras."""
    floor = Sphere()
    floor.set_tunit(Scale(10.0, 0.01, 10.0))
    floor.material.change_color(Color(1.0, 0.9, 0.9))
    floor.material.specular = 0.0

    left_wall = Sphere(transform=Transformation(
        Scale(10.0, 0.01, 10.0),
        RotateX(pi / 2.0),
        RotateY(-pi / 4.0),
        Translate(0.0, 0.0, 5.0)
    ))
    left_wall.set_material(floor.material.copy())

    right_wall = Sphere(transform=Transformation(
        Scale(10.0, 0.01, 10.0),
        RotateX(pi / 2.0),
        RotateY(pi / 4.0),
        Translate(0.0, 0.0, 5.0)
    ))
    right_wall.set_material(floor.material.copy())

    tracer.world.add_objs([floor, left_wall, right_wall, *_spheres()])
    tracer.world.add_src(_light())


def create_planes(tracer):
    """Plano de suelo y esferas con franjas."""
    pattern = Pattern.default(Pattern.STRIPE)

    floor = Plane()
    floor.material.change_color(Color(1.0, 0.9, 0.9))
    floor.material.specular = 0.0
    floor.set_pattern(pattern.copy())

    objects = [floor]
    for sphere in _spheres():
        sphere.set_pattern(pattern.copy())
        objects.append(sphere)

    tracer.world.add_objs(objects)
    tracer.world.add_src(_light())


def create_patterns(tracer):
    """Suelo con franjas y esferas con degradados."""
    floor = Plane()
    floor.material.change_color(Color(1.0, 0.9, 0.9))
    floor.material.specular = 0.0
    floor_pattern = Pattern.default(Pattern.STRIPE)
    floor_pattern.set_colors(Color(0.83, 0.83, 0.83), Color(0.9, 1.0, 1.0))
    floor.set_pattern(floor_pattern)

    gradients = [
        (Color(0.0, 0.0, 1.0), Color(0.5, 0.0, 0.5)),
        (Color(1.0, 0.0, 0.0), Color(1.0, 0.65, 0.0)),
        (Color(0.0, 0.5, 0.0), Color(1.0, 1.0, 0.0)),
    ]
    objects = [floor]
    for sphere, (a, b) in zip(_spheres(), gradients):
        gradient = Pattern.default(Pattern.GRADIENT)
        gradient.set_colors(a, b)
        gradient.add_tunit(Scale(2.0, 1.0, 1.0))
        sphere.set_pattern(gradient)
        objects.append(sphere)

    tracer.world.add_objs(objects)
    tracer.world.add_src(_light())


def create_default(tracer):
    """El mundo de prueba: dos esferas concéntricas."""
    default = World.default()
    tracer.world.add_objs(default.objects)
    tracer.world.add_src(default.light)


SCENES = {
    'clock': create_clock,
    'spheres': create_spheres,
    'planes': create_planes,
    'patterns': create_patterns,
    'default': create_default,
}


def build_config(args):
    if args.scene == 'clock':
        return RenderConfig(
            width=args.width, height=args.height, fov=pi / 2.0,
            look_from=point(0.0, 0.0, 0.0), look_at=point(0.0, 0.0, -1.0),
            up=vector(0.0, 1.0, 0.0), background=Color(0.2, 0.2, 0.2),
            progress=not args.quiet,
        )
    if args.scene == 'default':
        return RenderConfig(
            width=args.width, height=args.height, fov=args.fov,
            look_from=point(0.0, 0.0, -5.0), look_at=point(0.0, 0.0, 0.0),
            progress=not args.quiet,
        )
    return RenderConfig(width=args.width, height=args.height, fov=args.fov,
                        progress=not args.quiet)


def display_image(canvas, title="Ray Tracing"):
    """Mostrar imagen renderizada."""
    plt.figure(figsize=(12, 8))
    plt.imshow(canvas.to_bytes())
    plt.axis('off')
    plt.title(title, fontsize=16, pad=20)
    plt.tight_layout()
    plt.show()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Ray Tracer con modelo de Phong')
    parser.add_argument('--scene', choices=sorted(SCENES), default='spheres',
                        help='Escena a renderizar')
    parser.add_argument('--width', type=int, default=400, help='Ancho de la imagen')
    parser.add_argument('--height', type=int, default=200, help='Alto de la imagen')
    parser.add_argument('--fov', type=float, default=pi / 3.0,
                        help='Campo de visión en radianes')
    parser.add_argument('--output', type=str, default=None,
                        help='Ruta de salida (.ppm o cualquier formato de PIL, ej: imagen.png)')
    parser.add_argument('--show', action='store_true', help='Mostrar la imagen con matplotlib')
    parser.add_argument('--quiet', action='store_true', help='Sin mensajes ni barra de progreso')
    return parser.parse_args(argv)


def main(argv=None):
    """Función principal."""
    args = parse_args(argv)
    output = args.output or f"{args.scene}.ppm"

    try:
        config = build_config(args)
        tracer = RayTracer.from_config(config, verbose=not args.quiet)
        SCENES[args.scene](tracer)

        start_time = time.time()
        tracer.render()
        elapsed = time.time() - start_time

        tracer.canvas.save(output)
    except (RayTracerError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not args.quiet:
        print(f"Escena {args.scene} completada en {elapsed:.2f} segundos")
        print(f"Imagen guardada en: {output}")

    if args.show:
        display_image(tracer.canvas, f"{args.scene} - {args.width}x{args.height}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

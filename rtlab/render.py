"""Path-traced rendering of sphere scenes to PPM images."""

from __future__ import annotations

import argparse
import math
import random
import sys
from typing import Iterable, Iterator, Optional, Sequence, TextIO, Tuple

from rtlab.camera import Camera
from rtlab.hitables import Hitable, HitableList, Sphere
from rtlab.materials import Dielectric, Lambertian, Metal
from rtlab.vec3 import Ray, Vec3, unit_vector

FLT_MAX = 3.4028234663852886e38
T_MIN = 0.001
MAX_DEPTH = 50

Pixel = Tuple[int, int, int]

_SKY_BOTTOM = Vec3(1.0, 1.0, 1.0)
_SKY_TOP = Vec3(0.5, 0.7, 1.0)


def color(
    ray: Ray, world: Hitable, depth: int = 0, rng: Optional[random.Random] = None
) -> Vec3:
    """Trace ``ray`` through ``world`` and return the light it gathers."""
    rng = rng if rng is not None else random.Random()
    attenuation = Vec3(1.0, 1.0, 1.0)
    while True:
        rec = world.hit(ray, T_MIN, FLT_MAX)
        if rec is None:
            t = 0.5 * (unit_vector(ray.direction).y + 1.0)
            return attenuation * ((1.0 - t) * _SKY_BOTTOM + t * _SKY_TOP)
        if depth >= MAX_DEPTH:
            return Vec3(0, 0, 0)
        scatter = rec.material.scatter(ray, rec, rng)
        if scatter is None:
            return Vec3(0, 0, 0)
        step, ray = scatter
        attenuation = attenuation * step
        depth += 1


def random_scene(rng: Optional[random.Random] = None) -> HitableList:
    """The cover scene: a ground plane, a grid of small spheres and three large ones."""
    rng = rng if rng is not None else random.Random()
    spheres = [Sphere(Vec3(0, -1000, 0), 1000, Lambertian(Vec3(0.5, 0.5, 0.5)))]
    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vec3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - Vec3(4, 0.2, 0)).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                albedo = Vec3(*(rng.random() * rng.random() for _ in range(3)))
                material = Lambertian(albedo)
            elif choose_mat < 0.95:
                albedo = Vec3(*(0.5 * (1 + rng.random()) for _ in range(3)))
                material = Metal(albedo, 0.5 * rng.random())
            else:
                material = Dielectric(1.5)
            spheres.append(Sphere(center, 0.2, material))

    spheres.append(Sphere(Vec3(0, 1, 0), 1.0, Dielectric(1.5)))
    spheres.append(Sphere(Vec3(-4, 1, 0), 1.0, Lambertian(Vec3(0.4, 0.2, 0.1))))
    spheres.append(Sphere(Vec3(4, 1, 0), 1.0, Metal(Vec3(0.7, 0.6, 0.5), 0.0)))
    return HitableList(spheres)


def demo_scene() -> HitableList:
    """Five spheres: diffuse, ground, metal and a hollow glass bubble."""
    return HitableList(
        [
            Sphere(Vec3(0, 0, -1), 0.5, Lambertian(Vec3(0.1, 0.2, 0.5))),
            Sphere(Vec3(0, -100.5, -1), 100, Lambertian(Vec3(0.8, 0.8, 0.0))),
            Sphere(Vec3(1, 0, -1), 0.5, Metal(Vec3(0.8, 0.6, 0.2), 0.0)),
            Sphere(Vec3(-1, 0, -1), 0.5, Dielectric(1.5)),
            Sphere(Vec3(-1, 0, -1), -0.45, Dielectric(1.5)),
        ]
    )


def render(
    world: Hitable,
    camera: Camera,
    width: int,
    height: int,
    samples: int = 10,
    rng: Optional[random.Random] = None,
) -> Iterator[Pixel]:
    """Yield gamma-corrected 8-bit pixels, top row first, left to right."""
    if width <= 0 or height <= 0:
        raise ValueError("image dimensions must be positive")
    if samples <= 0:
        raise ValueError("samples must be positive")
    rng = rng if rng is not None else random.Random()
    for j in range(height - 1, -1, -1):
        for i in range(width):
            col = Vec3(0, 0, 0)
            for _ in range(samples):
                u = (i + rng.random()) / width
                v = (j + rng.random()) / height
                col = col + color(camera.get_ray(u, v, rng), world, 0, rng)
            col = col / samples
            yield tuple(int(255.99 * math.sqrt(c)) for c in col)  # type: ignore[misc]


def write_ppm(stream: TextIO, width: int, height: int, pixels: Iterable[Pixel]) -> None:
    """Write pixels as a plain-text (P3) PPM image."""
    stream.write(f"P3\n{width} {height}\n255\n")
    for r, g, b in pixels:
        stream.write(f"{r} {g} {b}\n")


def _default_camera(width: int, height: int) -> Camera:
    return Camera(
        Vec3(13, 2, 3),
        Vec3(0, 0, 0),
        Vec3(0, 1, 0),
        20,
        width / height,
        aperture=0.1,
        focus_dist=10.0,
    )


def _echo(pixels: Iterable[Pixel], out: TextIO) -> Iterator[Pixel]:
    for pixel in pixels:
        out.write("{} {} {}\n".format(*pixel))
        yield pixel


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Render a sphere scene to a PPM image.")
    parser.add_argument("--width", type=int, default=1920)
    parser.add_argument("--height", type=int, default=1080)
    parser.add_argument("--samples", type=int, default=10)
    parser.add_argument("--output", default="img.ppm")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--scene", choices=("random", "demo"), default="random")
    parser.add_argument("--quiet", action="store_true", help="do not echo pixels to stdout")
    args = parser.parse_args(argv)

    if args.width <= 0 or args.height <= 0 or args.samples <= 0:
        parser.error("width, height and samples must be positive")

    rng = random.Random(args.seed)
    world = random_scene(rng) if args.scene == "random" else demo_scene()
    camera = _default_camera(args.width, args.height)
    pixels: Iterable[Pixel] = render(world, camera, args.width, args.height, args.samples, rng)
    if not args.quiet:
        pixels = _echo(pixels, sys.stdout)
    with open(args.output, "w", encoding="ascii") as stream:
        write_ppm(stream, args.width, args.height, pixels)
    return 0


if __name__ == "__main__":
    sys.exit(main())
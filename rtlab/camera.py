"""A thin-lens camera."""

from __future__ import annotations

import math
import random

from rtlab.vec3 import Ray, Vec3, cross, dot, unit_vector


def random_in_unit_disk(rng: random.Random) -> Vec3:
    """Pick a point inside the unit disk in the z = 0 plane."""
    while True:
        p = 2.0 * Vec3(rng.random(), rng.random(), 0) - Vec3(1, 1, 0)
        if dot(p, p) < 1.0:
            return p


class Camera:
    """Camera with vertical field of view in degrees and depth-of-field blur."""

    def __init__(
        self,
        lookfrom: Vec3,
        lookat: Vec3,
        vup: Vec3,
        vfov: float,
        aspect: float,
        aperture: float,
        focus_dist: float,
    ) -> None:
        self.lens_radius = aperture / 2
        theta = vfov * math.pi / 180
        half_height = math.tan(theta / 2)
        half_width = aspect * half_height
        self.origin = lookfrom
        self.w = unit_vector(lookfrom - lookat)
        self.u = unit_vector(cross(vup, self.w))
        self.v = cross(self.w, self.u)
        self.lower_left_corner = (
            self.origin
            - half_width * focus_dist * self.u
            - half_height * focus_dist * self.v
            - focus_dist * self.w
        )
        self.horizontal = 2 * half_width * focus_dist * self.u
        self.vertical = 2 * half_height * focus_dist * self.v

    def get_ray(self, s: float, t: float, rng: random.Random) -> Ray:
        """Ray through the image point (s, t), both in [0, 1]."""
        rd = self.lens_radius * random_in_unit_disk(rng)
        offset = self.u * rd.x + self.v * rd.y
        return Ray(
            self.origin + offset,
            self.lower_left_corner + s * self.horizontal + t * self.vertical - self.origin - offset,
        )
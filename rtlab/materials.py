"""Surface materials and the optics they rely on."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple

from rtlab.hitables import HitRecord
from rtlab.vec3 import Ray, Vec3, dot, unit_vector

Scatter = Tuple[Vec3, Ray]


def schlick(cosine: float, ref_idx: float) -> float:
    """Schlick's approximation of reflectance."""
    r0 = (1 - ref_idx) / (1 + ref_idx)
    r0 = r0 * r0
    return r0 + (1 - r0) * (1 - cosine) ** 5


def refract(v: Vec3, n: Vec3, ni_over_nt: float) -> Optional[Vec3]:
    """Refract ``v`` through a surface with normal ``n``; None on total internal reflection."""
    uv = unit_vector(v)
    dt = dot(uv, n)
    discriminant = 1.0 - ni_over_nt * ni_over_nt * (1 - dt * dt)
    if discriminant <= 0:
        return None
    return ni_over_nt * (uv - n * dt) - n * math.sqrt(discriminant)


def reflect(v: Vec3, n: Vec3) -> Vec3:
    return v - 2 * dot(v, n) * n


def random_in_unit_sphere(rng: random.Random) -> Vec3:
    """Pick a point inside the unit sphere by rejection sampling."""
    while True:
        p = 2.0 * Vec3(rng.random(), rng.random(), rng.random()) - Vec3(1, 1, 1)
        if p.squared_length() < 1.0:
            return p


class Material(ABC):
    @abstractmethod
    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Optional[Scatter]:
        """Return (attenuation, scattered ray), or None when the ray is absorbed."""


@dataclass
class Lambertian(Material):
    albedo: Vec3

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Optional[Scatter]:
        target = rec.p + rec.normal + random_in_unit_sphere(rng)
        return self.albedo, Ray(rec.p, target - rec.p)


@dataclass
class Metal(Material):
    albedo: Vec3
    fuzz: float = 0.0

    def __post_init__(self) -> None:
        if not self.fuzz < 1:
            self.fuzz = 1.0

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Optional[Scatter]:
        reflected = reflect(unit_vector(ray_in.direction), rec.normal)
        scattered = Ray(rec.p, reflected + self.fuzz * random_in_unit_sphere(rng))
        if dot(scattered.direction, rec.normal) > 0:
            return self.albedo, scattered
        return None


@dataclass
class Dielectric(Material):
    ref_idx: float

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Optional[Scatter]:
        direction = ray_in.direction
        reflected = reflect(direction, rec.normal)
        d_dot_n = dot(direction, rec.normal)
        cosine = d_dot_n / direction.length()
        exiting = d_dot_n > 0
        if exiting:
            outward_normal = -rec.normal
            ni_over_nt = self.ref_idx
        else:
            outward_normal = rec.normal
            ni_over_nt = 1.0 / self.ref_idx
            cosine = -cosine

        refracted = refract(direction, outward_normal, ni_over_nt)
        if refracted is None:
            reflect_prob = 1.0
        else:
            if exiting:
                cosine = math.sqrt(
                    max(0.0, 1 - self.ref_idx * self.ref_idx * (1 - cosine * cosine))
                )
            reflect_prob = schlick(cosine, self.ref_idx)

        if rng.random() < reflect_prob or refracted is None:
            return Vec3(1.0, 1.0, 1.0), Ray(rec.p, reflected)
        return Vec3(1.0, 1.0, 1.0), Ray(rec.p, refracted)
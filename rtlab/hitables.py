"""Objects a ray can hit: spheres and collections of hitables."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator, Optional

from rtlab.vec3 import Ray, Vec3, dot

if TYPE_CHECKING:
    from rtlab.materials import Material


@dataclass(frozen=True)
class HitRecord:
    """Where and how a ray met a surface."""

    t: float
    p: Vec3
    normal: Vec3
    material: Optional["Material"] = None


class Hitable(ABC):
    """Something a ray can intersect."""

    @abstractmethod
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Return the hit with t strictly between the bounds, or None."""


@dataclass
class Sphere(Hitable):
    center: Vec3
    radius: float
    material: Optional["Material"] = None

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = dot(ray.direction, ray.direction)
        b = dot(oc, ray.direction)
        c = dot(oc, oc) - self.radius * self.radius
        discriminant = b * b - a * c
        if discriminant <= 0:
            return None
        root = math.sqrt(discriminant)
        for t in ((-b - root) / a, (-b + root) / a):
            if t_min < t < t_max:
                p = ray.point_at_parameter(t)
                return HitRecord(t, p, (p - self.center) / self.radius, self.material)
        return None


class HitableList(Hitable):
    """A group of hitables reporting the closest hit among them."""

    def __init__(self, objects: Iterable[Hitable] = ()) -> None:
        self.objects = list(objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        closest: Optional[HitRecord] = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest = rec
                closest_so_far = rec.t
        return closest

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hitable]:
        return iter(self.objects)
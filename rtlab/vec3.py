"""Three-component vectors and rays."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

Number = Union[int, float]


@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector, also used for RGB colours."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    def length(self) -> float:
        return math.sqrt(self.squared_length())

    def squared_length(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def unit(self) -> Vec3:
        """Return the vector scaled to length one."""
        return self / self.length()

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union[Vec3, Number]) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: Number) -> Vec3:
        if isinstance(other, (int, float)):
            return Vec3(other * self.x, other * self.y, other * self.z)
        return NotImplemented

    def __truediv__(self, other: Union[Vec3, Number]) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x / other.x, self.y / other.y, self.z / other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x / other, self.y / other, self.z / other)
        return NotImplemented

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __pos__(self) -> Vec3:
        return self

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"{self.x:g} {self.y:g} {self.z:g}"

    @staticmethod
    def parse(text: str) -> Vec3:
        """Parse three whitespace-separated numbers."""
        parts = text.split()
        if len(parts) != 3:
            raise ValueError(f"expected three components, got {len(parts)}: {text!r}")
        return Vec3(*(float(part) for part in parts))


def dot(a: Vec3, b: Vec3) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a: Vec3, b: Vec3) -> Vec3:
    return Vec3(
        a.y * b.z - a.z * b.y,
        -(a.x * b.z - a.z * b.x),
        a.x * b.y - a.y * b.x,
    )


def unit_vector(v: Vec3) -> Vec3:
    return v.unit()


@dataclass(frozen=True)
class Ray:
    """A half-line starting at ``origin`` heading along ``direction``."""

    origin: Vec3 = Vec3()
    direction: Vec3 = Vec3()

    def point_at_parameter(self, t: float) -> Vec3:
        return self.origin + t * self.direction
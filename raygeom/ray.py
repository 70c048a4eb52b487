"""Rays and ray differentials."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from .point import Point3
from .scalar import FloatScalar
from .vector import Vector3


@dataclass(frozen=True)
class Ray:
    """Half-line ``origin + direction * t`` for ``t`` up to ``tmax``."""

    origin: Point3
    direction: Vector3
    tmax: float = FloatScalar("inf")
    time: float = FloatScalar(0)

    def with_tmax(self, tmax: float) -> "Ray":
        return replace(self, tmax=tmax)

    def with_time(self, time: float) -> "Ray":
        return replace(self, time=time)

    def point_at(self, t: float) -> Point3:
        return self.origin + self.direction * t


@dataclass(frozen=True)
class RayDifferential:
    """A primary ray plus optional rays offset by one pixel in x and y.

    The offset rays are only usable once all four of their fields are set,
    see :meth:`has_differentials`.
    """

    ray: Ray
    rx_origin: Optional[Point3] = None
    ry_origin: Optional[Point3] = None
    rx_direction: Optional[Vector3] = None
    ry_direction: Optional[Vector3] = None

    @staticmethod
    def of(origin: Point3, direction: Vector3) -> "RayDifferential":
        return RayDifferential(Ray(origin, direction))

    @staticmethod
    def from_ray(ray: Ray) -> "RayDifferential":
        return RayDifferential(ray)

    def with_differentials(
        self,
        rx_origin: Point3,
        rx_direction: Vector3,
        ry_origin: Point3,
        ry_direction: Vector3,
    ) -> "RayDifferential":
        return RayDifferential(self.ray, rx_origin, ry_origin, rx_direction, ry_direction)

    def has_differentials(self) -> bool:
        fields = (self.rx_origin, self.ry_origin, self.rx_direction, self.ry_direction)
        return all(f is not None for f in fields)

    def scale_differentials(self, t: float) -> "RayDifferential":
        """Pull (t < 1) or push (t > 1) the offset rays relative to the primary ray.

        Used to match the differentials to the actual sample spacing.
        Missing offset fields stay missing.
        """
        origin, direction = self.ray.origin, self.ray.direction

        def scale(aux, base):
            return None if aux is None else base + (aux - base) * t

        return RayDifferential(
            self.ray,
            rx_origin=scale(self.rx_origin, origin),
            ry_origin=scale(self.ry_origin, origin),
            rx_direction=scale(self.rx_direction, direction),
            ry_direction=scale(self.ry_direction, direction),
        )

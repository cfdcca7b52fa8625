"""Rays and their intersection with spheres."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from raysketch.sphere import Sphere
from raysketch.vector import Vector3

_FAR_AWAY = 1e9


@dataclass(frozen=True)
class Ray:
    """A half-line starting at ``origin`` and heading along ``direction``."""

    origin: Vector3
    direction: Vector3

    def intersect_sphere(self, sphere: Sphere) -> float | None:
        """Return the nearest non-negative hit parameter, or None on a miss."""
        diff = self.origin - sphere.center
        a = self.direction.dot(self.direction)
        b = 2 * diff.dot(self.direction)
        c = diff.dot(diff) - sphere.radius * sphere.radius
        delta = b * b - 4 * a * c
        if delta < 0:
            return None
        root = math.sqrt(delta)
        t1 = (-b - root) / (2.0 * a)
        t2 = (-b + root) / (2.0 * a)
        t = t1 if t1 >= 0 else t2
        return t if t >= 0 else None

    def at(self, t: float) -> Vector3:
        """Return the point reached after travelling ``t`` along the ray."""
        return self.origin + self.direction * t

    def color(
        self,
        spheres: Iterable[Sphere],
        background: Vector3,
        camera: Vector3,
    ) -> Vector3:
        """Shade the closest sphere hit, lit from the camera position."""
        closest_t = _FAR_AWAY
        nearest: Sphere | None = None
        for sphere in spheres:
            t = self.intersect_sphere(sphere)
            if t is not None and t < closest_t:
                closest_t = t
                nearest = sphere

        if nearest is None:
            return background

        hit_point = self.at(closest_t)
        light_dir = (camera - hit_point).normalized()
        normal = (hit_point - nearest.center).normalized()
        intensity = max(0.0, normal.dot(light_dir))
        return nearest.color * intensity
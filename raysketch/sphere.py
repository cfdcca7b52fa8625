"""Spheres that make up a scene."""

from __future__ import annotations

from dataclasses import dataclass, replace

from raysketch.vector import Vector3


@dataclass(frozen=True)
class Sphere:
    """A sphere with a centre, a radius and an RGB colour."""

    center: Vector3
    radius: float
    color: Vector3

    def moved(self, offset: Vector3) -> Sphere:
        """Return a copy of the sphere with its centre shifted by ``offset``."""
        return replace(self, center=self.center + offset)
"""Camera set-up and parallel rendering of a sphere scene into an image."""

from __future__ import annotations

import math
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from raysketch.image import Image, Pixel
from raysketch.ray import Ray
from raysketch.sphere import Sphere
from raysketch.vector import Vector3

WORLD_UP = Vector3(0.0, 1.0, 0.0)
DEFAULT_FOV = 60.0


def camera_basis(camera_dir: Vector3, world_up: Vector3 = WORLD_UP) -> tuple[Vector3, Vector3]:
    """Return the unit ``(right, up)`` vectors of a camera looking along ``camera_dir``."""
    right = camera_dir.cross(world_up).normalized()
    up = right.cross(camera_dir).normalized()
    return right, up


def rotate(direction: Vector3, axis: Vector3, angle: float) -> Vector3:
    """Rotate ``direction`` by ``angle`` radians around the unit vector ``axis``."""
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return (
        direction * cos_a
        + axis * axis.dot(direction) * (1 - cos_a)
        + axis.cross(direction) * sin_a
    )


def render_rows(
    image: Image,
    camera: Vector3,
    background: Vector3,
    spheres: Sequence[Sphere],
    camera_dir: Vector3,
    right: Vector3,
    up: Vector3,
    start: int,
    end: int,
    fov: float = DEFAULT_FOV,
) -> None:
    """Trace one ray per pixel for the rows ``start`` up to ``end`` (exclusive)."""
    if not 0 <= start <= end <= image.height:
        raise ValueError(f"row range {start}..{end} is outside the image")

    view_height = 2.0 * math.tan(math.radians(fov / 2.0))
    view_width = view_height * image.aspect_ratio
    lower_left = camera + camera_dir - right * (view_width / 2) - up * (view_height / 2)
    horizontal = right * view_width
    vertical = up * view_height

    column_span = max(image.width - 1, 1)
    row_span = max(image.height - 1, 1)

    for row in range(start, end):
        v = 1.0 - row / row_span
        for column in range(image.width):
            u = column / column_span
            direction = (lower_left + horizontal * u + vertical * v - camera).normalized()
            colour = Ray(camera, direction).color(spheres, background, camera)
            image.set_pixel(row, column, Pixel.from_vector(colour))


def render(
    image: Image,
    camera: Vector3,
    background: Vector3,
    spheres: Sequence[Sphere],
    camera_dir: Vector3,
    world_up: Vector3 = WORLD_UP,
    fov: float = DEFAULT_FOV,
    workers: int | None = None,
) -> tuple[Vector3, Vector3]:
    """Render the whole image, splitting rows between worker threads.

    Returns the camera's ``(right, up)`` basis used for the frame.
    """
    if workers is None:
        workers = os.cpu_count() or 1
    if workers < 1:
        raise ValueError("workers must be at least 1")

    right, up = camera_basis(camera_dir, world_up)
    chunk = image.height // workers
    bounds = [
        (i * chunk, image.height if i == workers - 1 else (i + 1) * chunk)
        for i in range(workers)
    ]

    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [
            pool.submit(
                render_rows, image, camera, background, spheres,
                camera_dir, right, up, start, end, fov,
            )
            for start, end in bounds
        ]
        for future in futures:
            future.result()
    return right, up
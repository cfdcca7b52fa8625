"""Interactive viewer: the default scene, keyboard controls and the command."""

from __future__ import annotations

import argparse
import logging
import time
from dataclasses import dataclass, field
from typing import Sequence

from raysketch.image import Image
from raysketch.render import DEFAULT_FOV, WORLD_UP, camera_basis, render, rotate
from raysketch.sphere import Sphere
from raysketch.vector import Vector3

log = logging.getLogger(__name__)

WINDOW_WIDTH = 600
WINDOW_HEIGHT = 400
TURN_ANGLE = 0.05
STEP = 0.5


@dataclass
class Scene:
    """Mutable viewer state: camera, spheres and background."""

    spheres: list[Sphere] = field(default_factory=list)
    camera: Vector3 = field(default_factory=Vector3)
    camera_dir: Vector3 = Vector3(0.0, 0.0, -1.0)
    background: Vector3 = field(default_factory=Vector3)
    world_up: Vector3 = WORLD_UP
    fov: float = DEFAULT_FOV
    workers: int | None = None
    right: Vector3 = field(init=False)
    up: Vector3 = field(init=False)

    def __post_init__(self) -> None:
        self.right, self.up = camera_basis(self.camera_dir, self.world_up)

    def render_into(self, image: Image) -> None:
        """Render the scene into ``image`` and remember the camera basis used."""
        self.right, self.up = render(
            image, self.camera, self.background, self.spheres,
            self.camera_dir, self.world_up, self.fov, self.workers,
        )


def default_scene() -> Scene:
    """Return the three-sphere scene seen from the origin looking down -z."""
    return Scene(
        spheres=[
            Sphere(Vector3(0.0, 0.0, -6.0), 2.0, Vector3(255.0, 0.0, 0.0)),
            Sphere(Vector3(3.0, 1.0, -6.0), 1.0, Vector3(0.0, 255.0, 0.0)),
            Sphere(Vector3(2.0, 2.0, -7.0), 2.0, Vector3(0.0, 0.0, 255.0)),
        ],
        camera=Vector3(0.0, 0.0, 0.0),
        camera_dir=Vector3(0.0, 0.0, -1.0).normalized(),
        background=Vector3(0.0, 0.0, 0.0),
    )


def _move_first_sphere(scene: Scene, offset: Vector3) -> None:
    if scene.spheres:
        scene.spheres[0] = scene.spheres[0].moved(offset)


def apply_key(scene: Scene, key: str) -> bool:
    """Apply one key press to ``scene``; return False for an unknown key.

    Keys: ``w``/``s`` move, ``a``/``d`` turn, ``up``/``down`` tilt,
    ``u``/``i`` raise or lower the first sphere.
    """
    if key == "w":
        scene.camera = scene.camera + scene.camera_dir * STEP
    elif key == "s":
        scene.camera = scene.camera + scene.camera_dir * -STEP
    elif key == "a":
        scene.camera_dir = rotate(scene.camera_dir, scene.world_up, TURN_ANGLE)
    elif key == "d":
        scene.camera_dir = rotate(scene.camera_dir, scene.world_up, -TURN_ANGLE)
    elif key == "up":
        scene.camera_dir = rotate(scene.camera_dir, scene.right, TURN_ANGLE)
    elif key == "down":
        scene.camera_dir = rotate(scene.camera_dir, scene.right, -TURN_ANGLE)
    elif key == "u":
        _move_first_sphere(scene, Vector3(0.0, 1.0, 0.0))
    elif key == "i":
        _move_first_sphere(scene, Vector3(0.0, -1.0, 0.0))
    else:
        log.warning("Not a valid input")
        return False
    return True


def run_viewer(image: Image, scene: Scene) -> None:
    """Open a window and re-render the scene every frame until it is closed."""
    import pygame

    key_names = {
        pygame.K_w: "w",
        pygame.K_s: "s",
        pygame.K_a: "a",
        pygame.K_d: "d",
        pygame.K_UP: "up",
        pygame.K_DOWN: "down",
        pygame.K_u: "u",
        pygame.K_i: "i",
    }

    pygame.init()
    try:
        window = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Raytracer")

        def present() -> None:
            frame = pygame.image.frombuffer(
                bytes(image.pixel_array), (image.width, image.height), "RGB"
            )
            window.blit(pygame.transform.scale(frame, window.get_size()), (0, 0))
            pygame.display.flip()

        present()
        last_tick = time.perf_counter()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    apply_key(scene, key_names.get(event.key, ""))
            pygame.time.delay(1)
            scene.render_into(image)
            present()
            now = time.perf_counter()
            elapsed = now - last_tick
            last_tick = now
            if elapsed > 0:
                log.info("%f", 1.0 / elapsed)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Render the default scene, save it, then open the interactive viewer."""
    parser = argparse.ArgumentParser(prog="raysketch", description="Render a sphere scene.")
    parser.add_argument("--output", default="result.ppm", help="PPM file to write")
    parser.add_argument("--width", type=int, default=WINDOW_WIDTH)
    parser.add_argument("--height", type=int, default=WINDOW_HEIGHT)
    parser.add_argument("--no-display", action="store_true", help="skip the viewer window")
    args = parser.parse_args(argv)

    if args.width < 1 or args.height < 1:
        parser.error("width and height must be positive")

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    image = Image(args.width, args.height, 255, "test.ppm")
    scene = default_scene()
    scene.render_into(image)
    image.save(args.output)

    if not args.no_display:
        run_viewer(image, scene)
    return 0
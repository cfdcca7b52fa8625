import math

import pytest

from raysketch.image import Image
from raysketch.render import camera_basis, render, render_rows, rotate
from raysketch.sphere import Sphere
from raysketch.vector import Vector3

FORWARD = Vector3(0.0, 0.0, -1.0)
UP = Vector3(0.0, 1.0, 0.0)
BLACK = Vector3(0.0, 0.0, 0.0)
RED = Vector3(255.0, 0.0, 0.0)


def _approx(vec):
    return pytest.approx(tuple(vec), abs=1e-9)


def test_camera_basis_default_orientation():
    right, up = camera_basis(FORWARD, UP)
    assert tuple(right) == _approx(Vector3(1.0, 0.0, 0.0))
    assert tuple(up) == _approx(UP)


def test_camera_basis_is_orthonormal():
    direction = Vector3(0.3, -0.2, -1.0).normalized()
    right, up = camera_basis(direction, UP)
    assert right.length() == pytest.approx(1.0)
    assert up.length() == pytest.approx(1.0)
    assert right.dot(up) == pytest.approx(0.0, abs=1e-12)
    assert right.dot(direction) == pytest.approx(0.0, abs=1e-12)
    assert up.dot(direction) == pytest.approx(0.0, abs=1e-12)


def test_rotate_zero_angle_is_identity():
    direction = Vector3(0.2, 0.4, -0.9)
    assert tuple(rotate(direction, UP, 0.0)) == _approx(direction)


def test_rotate_preserves_length_and_reverses():
    direction = Vector3(0.2, 0.4, -0.9).normalized()
    turned = rotate(direction, UP, 0.7)
    assert turned.length() == pytest.approx(1.0)
    assert tuple(rotate(turned, UP, -0.7)) == _approx(direction)


def test_rotate_keeps_component_along_axis():
    direction = Vector3(0.5, 0.5, -0.5)
    turned = rotate(direction, UP, 1.3)
    assert turned.y == pytest.approx(direction.y)


def test_full_turn_returns_to_start():
    direction = Vector3(0.1, 0.0, -1.0)
    assert tuple(rotate(direction, UP, 2 * math.pi)) == _approx(direction)


def test_render_empty_scene_is_background():
    image = Image(4, 3)
    background = Vector3(10.0, 20.0, 30.0)
    render(image, BLACK, background, [], FORWARD, workers=2)
    assert image.pixel_array == bytes([10, 20, 30]) * 12
    assert all(tuple(p) == (10.0, 20.0, 30.0) for row in image.pixels for p in row)


def test_render_centre_pixel_hits_sphere_head_on():
    image = Image(5, 5)
    sphere = Sphere(Vector3(0.0, 0.0, -5.0), 1.0, RED)
    render(image, BLACK, BLACK, [sphere], FORWARD, workers=1)
    assert tuple(image.pixels[2][2]) == pytest.approx(tuple(RED))
    assert tuple(image.pixels[0][0]) == (0.0, 0.0, 0.0)


def test_render_same_result_for_any_worker_count():
    spheres = [
        Sphere(Vector3(0.0, 0.0, -6.0), 2.0, RED),
        Sphere(Vector3(1.0, 1.0, -5.0), 1.0, Vector3(0.0, 255.0, 0.0)),
    ]
    single = Image(9, 7)
    many = Image(9, 7)
    render(single, BLACK, BLACK, spheres, FORWARD, workers=1)
    render(many, BLACK, BLACK, spheres, FORWARD, workers=4)
    assert single.pixel_array == many.pixel_array


def test_render_more_workers_than_rows():
    image = Image(3, 2)
    render(image, BLACK, Vector3(1.0, 2.0, 3.0), [], FORWARD, workers=8)
    assert image.pixel_array == bytes([1, 2, 3]) * 6


def test_render_returns_basis():
    image = Image(2, 2)
    right, up = render(image, BLACK, BLACK, [], FORWARD, workers=1)
    assert (right, up) == camera_basis(FORWARD, UP)


def test_render_rejects_zero_workers():
    with pytest.raises(ValueError):
        render(Image(2, 2), BLACK, BLACK, [], FORWARD, workers=0)


def test_render_rows_only_touches_given_rows():
    image = Image(3, 4)
    right, up = camera_basis(FORWARD, UP)
    render_rows(image, BLACK, Vector3(9.0, 9.0, 9.0), [], FORWARD, right, up, 1, 3)
    assert image.pixel_array[:9] == bytes(9)
    assert image.pixel_array[9:27] == bytes([9]) * 18
    assert image.pixel_array[27:] == bytes(9)


def test_render_rows_rejects_bad_range():
    image = Image(3, 4)
    right, up = camera_basis(FORWARD, UP)
    with pytest.raises(ValueError):
        render_rows(image, BLACK, BLACK, [], FORWARD, right, up, 2, 5)
from raysketch.sphere import Sphere
from raysketch.vector import Vector3


def test_moved_shifts_center_only():
    sphere = Sphere(Vector3(0, 0, -6.0), 2.0, Vector3(255, 0, 0))
    offset = Vector3(0, 1, 0)
    moved = sphere.moved(offset)
    assert moved.center == sphere.center + offset
    assert moved.radius == sphere.radius
    assert moved.color == sphere.color


def test_moved_leaves_original_untouched():
    sphere = Sphere(Vector3(3.0, 1.0, -6.0), 1.0, Vector3(0, 255, 0))
    sphere.moved(Vector3(0, -1, 0))
    assert sphere.center == Vector3(3.0, 1.0, -6.0)


def test_moving_there_and_back_is_identity():
    sphere = Sphere(Vector3(2.0, 2.0, -7.0), 2.0, Vector3(0, 0, 255))
    offset = Vector3(0, 1, 0)
    assert sphere.moved(offset).moved(-offset) == sphere
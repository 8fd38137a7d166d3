import numpy as np
import pytest

from pathtracer.camera import Camera, get_ray


def test_width_is_derived_from_aspect_ratio(small_camera):
    assert small_camera.width == 16
    assert small_camera.height == 9


def test_viewport_is_centered_on_the_view_axis(small_camera):
    assert np.allclose(small_camera.horizontal, [32.0 / 9.0, 0.0, 0.0])
    assert np.allclose(small_camera.vertical, [0.0, 2.0, 0.0])
    assert np.allclose(small_camera.lower_left_corner, [-16.0 / 9.0, -1.0, -1.0])


def test_too_small_image_is_rejected():
    with pytest.raises(ValueError):
        Camera(aspect_ratio=1.0, image_height=1, viewport_height=2.0)


def test_corner_pixels_without_jitter():
    camera = Camera(aspect_ratio=1.0, image_height=3, viewport_height=2.0)
    args = (camera.origin, camera.lower_left_corner, camera.horizontal, camera.vertical)

    origin, top_left = get_ray(0, 0, 3, 3, *args, False)
    _, bottom_right = get_ray(2, 2, 3, 3, *args, False)

    assert np.allclose(origin, camera.origin)
    assert np.allclose(top_left, np.array([-0.5, 1.5, -1.0]) / np.sqrt(3.5))
    assert np.allclose(bottom_right, np.array([1.5, -0.5, -1.0]) / np.sqrt(3.5))


def test_jittered_rays_are_unit_length(small_camera):
    args = (small_camera.origin, small_camera.lower_left_corner,
            small_camera.horizontal, small_camera.vertical)
    for x, y in [(0, 0), (7, 4), (15, 8)]:
        _, direction = get_ray(x, y, small_camera.width, small_camera.height, *args)
        assert abs(np.linalg.norm(direction) - 1.0) < 1e-9
        assert direction[2] < 0.0

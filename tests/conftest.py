"""Общие фикстуры для тестов."""

import numpy as np
import pytest

from pathtracer.camera import Camera
from pathtracer.materials import Material
from pathtracer.reference_scene import create_reference_scene
from pathtracer.scene import Scene


@pytest.fixture
def empty_scene():
    """Пустая скомпилированная сцена."""
    return Scene().compile()


@pytest.fixture
def reference_scene():
    return create_reference_scene()


@pytest.fixture
def mirror_trap_scene():
    """
    Две зеркальные сферы друг над другом. Вертикальный луч из начала
    координат отражается между ними бесконечно.
    """
    scene = Scene()
    scene.add_sphere([0.0, -2.0, 0.0], 1.0, Material.metal([0.9, 0.9, 0.9], 0.0))
    scene.add_sphere([0.0, 2.0, 0.0], 1.0, Material.metal([0.9, 0.9, 0.9], 0.0))
    return scene.compile()


@pytest.fixture
def small_camera():
    """Камера 16x9."""
    return Camera(aspect_ratio=16.0 / 9.0, image_height=9, viewport_height=2.0)


@pytest.fixture
def scene_arrays():
    """Массивы скомпилированной сцены в порядке аргументов trace_path."""
    def _arrays(scene):
        return (scene.centers, scene.radii, scene.material_kinds,
                scene.fuzziness, scene.colors)
    return _arrays


@pytest.fixture
def origin():
    return np.zeros(3)

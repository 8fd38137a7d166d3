import numpy as np
import pytest

from pathtracer.materials import LAMBERTIAN, METAL, Material
from pathtracer.ray import Ray
from pathtracer.scene import Scene, nearest_intersection


@pytest.fixture
def overlapping_scene():
    """Две сферы на оси -z; дальняя добавлена первой."""
    scene = Scene()
    scene.add_sphere([0.0, 0.0, -3.0], 1.0, Material.lambertian([0.1, 0.1, 0.1]))
    scene.add_sphere([0.0, 0.0, -1.5], 1.0, Material.lambertian([0.9, 0.9, 0.9]))
    return scene.compile()


# --- nearest_intersection ---

def test_nearest_of_two_overlapping_spheres(overlapping_scene, origin):
    hit_idx, t, hit_point, normal = nearest_intersection(
        origin, np.array([0.0, 0.0, -1.0]),
        overlapping_scene.centers, overlapping_scene.radii
    )
    assert hit_idx == 1
    assert t == pytest.approx(0.5)
    assert np.allclose(hit_point, [0.0, 0.0, -0.5])
    assert np.allclose(normal, [0.0, 0.0, 1.0])


def test_scene_nearest_intersection_returns_the_sphere(overlapping_scene):
    hit = overlapping_scene.nearest_intersection(Ray([0.0, 0.0, 0.0], [0.0, 0.0, -1.0]))
    assert hit is not None
    point, normal, sphere = hit
    assert sphere is overlapping_scene.objects[1]
    assert np.allclose(point, [0.0, 0.0, -0.5])


def test_tie_goes_to_the_first_sphere(origin):
    scene = Scene()
    scene.add_sphere([0.0, 0.0, -2.0], 0.5, Material.lambertian([1.0, 0.0, 0.0]))
    scene.add_sphere([0.0, 0.0, -2.0], 0.5, Material.lambertian([0.0, 1.0, 0.0]))
    scene.compile()
    hit_idx, _, _, _ = nearest_intersection(
        origin, np.array([0.0, 0.0, -1.0]), scene.centers, scene.radii
    )
    assert hit_idx == 0


def test_miss_returns_none(overlapping_scene):
    assert overlapping_scene.nearest_intersection(Ray([0.0, 0.0, 0.0], [0.0, 1.0, 0.0])) is None


def test_empty_scene_never_hits(empty_scene, origin):
    hit_idx, t, _, _ = nearest_intersection(
        origin, np.array([0.0, 0.0, -1.0]), empty_scene.centers, empty_scene.radii
    )
    assert hit_idx == -1
    assert t == -1.0


# --- Scene container ---

def test_compile_packs_arrays(reference_scene):
    assert len(reference_scene) == 4
    assert reference_scene.centers.shape == (4, 3)
    assert reference_scene.colors.shape == (4, 3)
    assert reference_scene.material_kinds.tolist() == [LAMBERTIAN, LAMBERTIAN, METAL, METAL]
    assert np.allclose(reference_scene.fuzziness, [0.0, 0.0, 0.15, 0.0])
    assert np.allclose(reference_scene.radii, [100.0, 0.5, 0.5, 0.5])


def test_empty_scene_compiles_to_empty_arrays(empty_scene):
    assert empty_scene.centers.shape == (0, 3)
    assert empty_scene.radii.shape == (0,)


def test_adding_a_sphere_invalidates_compiled_arrays(reference_scene):
    assert reference_scene.is_compiled
    reference_scene.add_sphere([0.0, 5.0, -1.0], 1.0, Material.lambertian([1.0, 1.0, 1.0]))
    assert not reference_scene.is_compiled
    reference_scene.ensure_compiled()
    assert reference_scene.centers.shape == (5, 3)


def test_nearest_intersection_compiles_lazily():
    scene = Scene()
    scene.add_sphere([0.0, 0.0, -1.0], 0.5, Material.lambertian([1.0, 1.0, 1.0]))
    assert not scene.is_compiled
    assert scene.nearest_intersection(Ray([0.0, 0.0, 0.0], [0.0, 0.0, -1.0])) is not None
    assert scene.is_compiled

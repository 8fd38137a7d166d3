"""
Создание эталонной сцены: земля и три сферы.
"""

from .materials import Material
from .scene import Scene


def create_reference_scene() -> Scene:
    """
    Четыре сферы: большая диффузная "земля", красная диффузная сфера
    в центре, размытый металл слева и чистое зеркало справа.
    """
    scene = Scene()

    # Земля
    scene.add_sphere([0.0, -100.5, -1.0], 100.0,
                     Material.lambertian([0.8, 0.8, 0.0]))

    # Центральная сфера
    scene.add_sphere([0.0, 0.0, -1.0], 0.5,
                     Material.lambertian([0.7, 0.3, 0.3]))

    # Левая: металл с размытием
    scene.add_sphere([-1.0, 0.0, -1.0], 0.5,
                     Material.metal([0.8, 0.8, 0.8], 0.15))

    # Правая: зеркало
    scene.add_sphere([1.0, 0.0, -1.0], 0.5,
                     Material.metal([0.8, 0.6, 0.2], 0.0))

    scene.compile()
    return scene

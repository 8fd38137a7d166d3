"""
Сцена: хранение сфер и их материалов.
"""

import logging
from typing import List, Optional, Tuple

import numpy as np
from numba import njit
from .geometry import intersect_sphere, sphere_normal
from .materials import Material
from .ray import Ray, ray_at

logger = logging.getLogger(__name__)


class Sphere:
    """
    Сфера сцены.

    Параметры:
        center: центр
        radius: радиус (> 0)
        material: материал (Material)
    """

    def __init__(self, center, radius: float, material: Material):
        if radius <= 0:
            raise ValueError(f"Радиус сферы должен быть положительным: {radius}")
        self.center = np.array(center, dtype=np.float64)
        self.radius = float(radius)
        self.material = material

    @property
    def color(self) -> np.ndarray:
        return self.material.color

    def intersect(self, ray: Ray) -> Optional[float]:
        """Расстояние до ближнего пересечения или None."""
        t = intersect_sphere(ray.origin, ray.direction, self.center, self.radius)
        if t < 0.0:
            return None
        return t

    def normal(self, point) -> np.ndarray:
        return sphere_normal(np.asarray(point, dtype=np.float64), self.center)

    def __repr__(self):
        return f"Sphere(center={self.center.tolist()}, radius={self.radius}, material={self.material!r})"


class Scene:
    """
    Контейнер для 3D сцены.

    Хранит упорядоченный список сфер. Перед рендерингом сцена
    компилируется в numpy массивы, которые только читаются всеми потоками:
        centers: (n, 3) - центры
        radii: (n,) - радиусы
        material_kinds: (n,) - типы материалов
        fuzziness: (n,) - размытость металла
        colors: (n, 3) - базовые цвета
    """

    def __init__(self):
        self._spheres: List[Sphere] = []

        self.centers = None
        self.radii = None
        self.material_kinds = None
        self.fuzziness = None
        self.colors = None

    @property
    def objects(self) -> List[Sphere]:
        return list(self._spheres)

    @property
    def is_compiled(self) -> bool:
        return self.centers is not None

    def __len__(self):
        return len(self._spheres)

    def add_sphere(self, center, radius: float, material: Material) -> Sphere:
        """Добавляет сферу. Скомпилированные массивы после этого сбрасываются."""
        sphere = Sphere(center, radius, material)
        self._spheres.append(sphere)
        self.centers = None
        return sphere

    def compile(self) -> "Scene":
        """
        Компилирует сцену в numpy массивы для быстрого доступа.
        Вызывать после добавления всей геометрии.
        """
        n = len(self._spheres)

        self.centers = np.zeros((n, 3), dtype=np.float64)
        self.radii = np.zeros(n, dtype=np.float64)
        self.material_kinds = np.zeros(n, dtype=np.int32)
        self.fuzziness = np.zeros(n, dtype=np.float64)
        self.colors = np.zeros((n, 3), dtype=np.float64)

        for i, sphere in enumerate(self._spheres):
            self.centers[i] = sphere.center
            self.radii[i] = sphere.radius
            self.material_kinds[i] = sphere.material.kind
            self.fuzziness[i] = sphere.material.fuzziness
            self.colors[i] = sphere.color

        logger.info("Сцена: %d сфер", n)
        return self

    def ensure_compiled(self) -> "Scene":
        if not self.is_compiled:
            self.compile()
        return self

    def nearest_intersection(self, ray: Ray) -> Optional[Tuple[np.ndarray, np.ndarray, Sphere]]:
        """Ближайшее пересечение: (точка, нормаль, сфера) или None."""
        self.ensure_compiled()
        hit_idx, _, hit_point, normal = nearest_intersection(
            ray.origin, ray.direction, self.centers, self.radii
        )
        if hit_idx < 0:
            return None
        return hit_point, normal, self._spheres[hit_idx]


@njit(cache=True, fastmath=True)
def nearest_intersection(ray_origin, ray_dir, centers, radii):
    """
    Поиск ближайшего пересечения луча со сценой.

    Перебирает все сферы и находит ближайшее пересечение.
    При равных t побеждает сфера, встретившаяся первой.

    Возвращает: (index, t, hit_point, normal)
        index: индекс сферы (-1 если нет пересечения)
        t: расстояние до пересечения (-1 если нет)
        hit_point: точка пересечения
        normal: нормаль в точке пересечения
    """
    closest_t = -1.0
    hit_idx = -1

    for i in range(centers.shape[0]):
        t = intersect_sphere(ray_origin, ray_dir, centers[i], radii[i])
        if t >= 0.0 and (hit_idx < 0 or t < closest_t):
            closest_t = t
            hit_idx = i

    # Нет пересечения
    if hit_idx < 0:
        return -1, -1.0, np.zeros(3), np.zeros(3)

    hit_point = ray_at(ray_origin, ray_dir, closest_t)
    normal = sphere_normal(hit_point, centers[hit_idx])

    return hit_idx, closest_t, hit_point, normal

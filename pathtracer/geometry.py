"""
Геометрические примитивы: пересечение луча со сферой.
"""

import numpy as np
from numba import njit
from .math_utils import dot, normalize


@njit(cache=True, fastmath=True)
def intersect_sphere(ray_origin, ray_dir, center, radius):
    """
    Пересечение луча со сферой (квадратное уравнение в форме half_b).

    Параметры:
        ray_origin: начало луча
        ray_dir: направление луча (нормализованное, поэтому a = 1)
        center, radius: центр и радиус сферы

    Возвращает:
        t - параметр луча для ближнего корня, или -1.0 если нет пересечения.
        Дальний корень не рассматривается: если начало луча внутри сферы
        или сфера позади, пересечения нет.
    """
    oc = ray_origin - center
    c = dot(oc, oc) - radius * radius
    half_b = dot(oc, ray_dir)
    discriminant = half_b * half_b - c

    # Луч проходит мимо
    if discriminant < 0.0:
        return -1.0

    t = -half_b - np.sqrt(discriminant)

    # Пересечение позади начала луча
    if t < 0.0:
        return -1.0

    return t


@njit(cache=True, fastmath=True)
def sphere_normal(point, center):
    """Внешняя нормаль сферы в точке на поверхности."""
    return normalize(point - center)

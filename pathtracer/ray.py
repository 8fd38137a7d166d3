"""
Луч: начало и единичное направление.

Внутри numba-ядер луч передаётся парой массивов (origin, direction),
которую возвращает make_ray. Класс Ray нужен для работы со сценой из Python.
"""

import numpy as np
from numba import njit
from .math_utils import length


@njit(cache=True, fastmath=True)
def make_ray(origin, direction):
    """
    Создаёт луч, нормализуя направление.

    Возвращает (origin, direction) с |direction| == 1.
    Нулевое направление - ошибка построения, а не штатная ситуация.
    """
    norm = length(direction)
    if norm == 0.0:
        raise ValueError("Нулевое направление луча")
    return origin, direction / norm


@njit(cache=True, fastmath=True)
def ray_at(origin, direction, t):
    """Точка луча на расстоянии t: origin + t * direction."""
    return origin + direction * t


class Ray:
    """Луч с нормализованным направлением."""

    def __init__(self, origin, direction):
        self.origin, self.direction = make_ray(
            np.asarray(origin, dtype=np.float64),
            np.asarray(direction, dtype=np.float64)
        )

    def at(self, t: float) -> np.ndarray:
        return ray_at(self.origin, self.direction, float(t))

    def __repr__(self):
        return f"Ray(origin={self.origin.tolist()}, direction={self.direction.tolist()})"

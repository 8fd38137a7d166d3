"""
Математические утилиты для работы с 3D векторами.
Оптимизировано с помощью numba для ускорения.
"""

import numpy as np
from numba import njit


@njit(cache=True, fastmath=True)
def length(v):
    """Длина вектора."""
    return np.sqrt(v[0]**2 + v[1]**2 + v[2]**2)


@njit(cache=True, fastmath=True)
def normalize(v):
    """Нормализация вектора (приведение к единичной длине)."""
    norm = length(v)
    if norm < 1e-10:
        return np.zeros(3)
    return v / norm


@njit(cache=True, fastmath=True)
def dot(a, b):
    """Скалярное произведение двух векторов."""
    return a[0]*b[0] + a[1]*b[1] + a[2]*b[2]


@njit(cache=True, fastmath=True)
def reflect(direction, normal):
    """Зеркальное отражение вектора direction относительно нормали."""
    return direction - normal * (2.0 * dot(direction, normal))


@njit(cache=True, fastmath=True)
def random_unit_vector():
    """
    Случайный единичный вектор.

    Каждая компонента берётся равномерно из [-1, 1), затем вектор
    нормализуется. Это выборка из куба, спроецированная на сферу,
    поэтому распределение по сфере не равномерное (сгущается к углам куба).

    Генератор numba свой у каждого потока, так что параллельные пиксели
    не делят между собой состояние.
    """
    v = np.empty(3)
    v[0] = np.random.uniform(-1.0, 1.0)
    v[1] = np.random.uniform(-1.0, 1.0)
    v[2] = np.random.uniform(-1.0, 1.0)
    return normalize(v)

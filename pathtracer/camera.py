"""
Точечная (pinhole) камера для рендеринга.
"""

import numpy as np
from numba import njit
from .ray import make_ray


class Camera:
    """
    Точечная камера с базисом, выровненным по осям.

    Параметры:
        aspect_ratio: отношение ширины к высоте
        image_height: высота изображения в пикселях (ширина выводится)
        viewport_height: высота виртуального экрана
        focal_length: расстояние до экрана вдоль -z
        origin: позиция камеры
    """

    def __init__(self, aspect_ratio, image_height, viewport_height,
                 focal_length=1.0, origin=(0.0, 0.0, 0.0)):
        self.width = int(image_height * aspect_ratio)
        self.height = int(image_height)

        # u, v считаются делением на (width - 1) и (height - 1)
        if self.width < 2 or self.height < 2:
            raise ValueError(
                f"Изображение должно быть не меньше 2x2, получено {self.width}x{self.height}"
            )

        viewport_width = viewport_height * aspect_ratio

        self.origin = np.array(origin, dtype=np.float64)
        self.horizontal = np.array([viewport_width, 0.0, 0.0])
        self.vertical = np.array([0.0, viewport_height, 0.0])
        self.lower_left_corner = (self.origin
                                  - self.horizontal / 2
                                  - self.vertical / 2
                                  - np.array([0.0, 0.0, focal_length]))


@njit(cache=True, fastmath=True)
def get_ray(x, y, width, height, origin, lower_left_corner,
            horizontal, vertical, jitter=True):
    """
    Генерирует луч из камеры через пиксель (x, y).

    Параметры:
        x, y: координаты пикселя (y = 0 - верхняя строка)
        jitter: если True, добавляет случайное смещение [0, 1) для антиалиасинга

    Возвращает:
        (origin, direction) - начало и направление луча
    """
    # Строки экрана считаются снизу вверх
    row = height - 1 - y

    if jitter:
        px = x + np.random.random()
        py = row + np.random.random()
    else:
        px = x + 0.5
        py = row + 0.5

    u = px / (width - 1)
    v = py / (height - 1)

    return make_ray(origin, lower_left_corner + horizontal * u + vertical * v - origin)

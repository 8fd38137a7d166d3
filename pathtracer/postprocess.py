"""
Постобработка: гамма-коррекция, отсечение, сохранение изображений.
"""

import logging

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)


class OutputError(OSError):
    """Не удалось создать или записать файл с изображением."""

    def __init__(self, destination, cause):
        super().__init__(f"Не удалось записать {destination}: {cause}")
        self.destination = str(destination)
        self.cause = cause


def gamma_correct(image):
    """Гамма-коррекция с гаммой 2: квадратный корень каждого канала."""
    return np.sqrt(image)


def clamp(image):
    """
    Отсечение значений выше 1.
    Снизу не ограничиваем: после рендеринга каналы неотрицательны.
    """
    return np.minimum(image, 1.0)


def postprocess_image(image):
    """Сначала гамма-коррекция, затем отсечение."""
    return clamp(gamma_correct(image))


def to_8bit(image):
    """Перевод [0, 1] в 8 бит с отбрасыванием дробной части: int(255 * c)."""
    return (image * 255).astype(np.uint8)


def save_ppm(filename, image):
    """
    Сохранение в формате PPM (P3 - текстовый).

    Формат PPM:
    - P3 - магическое число (текстовый RGB)
    - ширина высота
    - максимальное значение (255)
    - по одной строке "r g b" на пиксель, строки сверху вниз
    """
    height, width = image.shape[:2]
    image_8bit = to_8bit(image)

    try:
        with open(filename, 'w') as f:
            f.write(f"P3\n{width} {height}\n255\n")
            for y in range(height):
                for x in range(width):
                    r, g, b = image_8bit[y, x]
                    f.write(f"{r} {g} {b}\n")
    except OSError as exc:
        raise OutputError(filename, exc) from exc

    logger.info("Сохранено: %s", filename)


def save_png(filename, image):
    """Сохранение в формате PNG через Pillow."""
    img = Image.fromarray(to_8bit(image))
    try:
        img.save(filename, format="PNG")
    except (OSError, ValueError) as exc:
        raise OutputError(filename, exc) from exc

    logger.info("Сохранено: %s", filename)

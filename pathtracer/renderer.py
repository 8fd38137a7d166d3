"""
Ядро рендеринга методом трассировки путей (Path Tracing).
"""

import logging
import time

import numpy as np
from numba import njit, prange
from .camera import Camera, get_ray
from .materials import scatter
from .postprocess import postprocess_image, save_ppm, save_png
from .scene import Scene, nearest_intersection

logger = logging.getLogger(__name__)

MAX_DEPTH = 20
SAMPLES_PER_PIXEL = 500

# Цвет неба в зените; у горизонта - белый
SKY_COLOR = np.array([0.5, 0.7, 1.0])
WHITE = np.ones(3)


@njit(cache=True, fastmath=True)
def background_color(ray_dir):
    """Вертикальный градиент от белого (внизу) к голубому (вверху)."""
    t = 0.5 * (ray_dir[1] + 1.0)
    return (1.0 - t) * WHITE + t * SKY_COLOR


@njit(cache=True, fastmath=True)
def trace_path(ray_origin, ray_dir, centers, radii, material_kinds,
               fuzziness, colors, max_depth):
    """
    Трассировка одного пути.

    Алгоритм:
    1. Находим пересечение луча со сценой
    2. Луч ушёл в пустоту - умножаем накопленный цвет на цвет фона
    3. Иначе умножаем накопленный цвет на цвет объекта и рассеиваем луч
    4. Если за max_depth отскоков луч так и не ушёл - путь поглощён (чёрный)
    """
    attenuation = np.ones(3)     # коэффициент пропускания пути

    current_origin = ray_origin
    current_dir = ray_dir
    escaped = False

    for _ in range(max_depth):
        hit_idx, t, hit_point, normal = nearest_intersection(
            current_origin, current_dir, centers, radii
        )

        # Луч ушёл в пустоту
        if hit_idx < 0:
            escaped = True
            break

        attenuation = attenuation * colors[hit_idx]

        current_origin, current_dir = scatter(
            current_dir, hit_point, normal,
            material_kinds[hit_idx], fuzziness[hit_idx]
        )

    if not escaped:
        return np.zeros(3)

    return attenuation * background_color(current_dir)


@njit(parallel=True, cache=True, fastmath=True)
def render_image(width, height, samples_per_pixel,
                 cam_origin, cam_lower_left, cam_horizontal, cam_vertical,
                 centers, radii, material_kinds, fuzziness, colors,
                 max_depth):
    """
    Рендеринг изображения методом трассировки путей.

    Для каждого пикселя запускается samples_per_pixel лучей,
    результаты усредняются.

    Параллельный цикл идёт по строкам, пиксели внутри строки независимы.
    Каждый пиксель пишет только в свою ячейку image[y, x], поэтому порядок
    строк не зависит от того, какой поток закончил первым.
    """
    image = np.zeros((height, width, 3))

    # Параллельный цикл по строкам
    for y in prange(height):
        for x in range(width):
            pixel_color = np.zeros(3)

            # Усреднение по нескольким сэмплам
            for _ in range(samples_per_pixel):
                # Генерируем луч с jitter для антиалиасинга
                origin, direction = get_ray(
                    x, y, width, height,
                    cam_origin, cam_lower_left, cam_horizontal, cam_vertical, True
                )

                # Трассируем путь
                sample_color = trace_path(
                    origin, direction,
                    centers, radii, material_kinds, fuzziness, colors,
                    max_depth
                )

                pixel_color = pixel_color + sample_color

            # Среднее значение
            image[y, x] = pixel_color / samples_per_pixel

    return image


def render(scene: Scene, camera: Camera, samples_per_pixel: int = SAMPLES_PER_PIXEL,
           max_depth: int = MAX_DEPTH) -> np.ndarray:
    """
    Рендеринг сцены без постобработки.

    Возвращает массив (height, width, 3) со средним цветом каждого пикселя.
    """
    if samples_per_pixel < 1:
        raise ValueError(f"samples_per_pixel должно быть >= 1, получено {samples_per_pixel}")
    if max_depth < 0:
        raise ValueError(f"max_depth должно быть >= 0, получено {max_depth}")

    scene.ensure_compiled()

    logger.info("Рендеринг %dx%d, %d сэмплов/пиксель, глубина %d",
                camera.width, camera.height, samples_per_pixel, max_depth)
    start_time = time.time()

    image = render_image(
        camera.width, camera.height, samples_per_pixel,
        camera.origin, camera.lower_left_corner, camera.horizontal, camera.vertical,
        scene.centers, scene.radii, scene.material_kinds, scene.fuzziness, scene.colors,
        max_depth
    )

    logger.info("Завершено за %.1f секунд", time.time() - start_time)
    return image


def render_to_file(filename, scene: Scene, camera: Camera,
                   samples_per_pixel: int = SAMPLES_PER_PIXEL,
                   max_depth: int = MAX_DEPTH, png_filename=None) -> np.ndarray:
    """
    Рендеринг, постобработка и запись в PPM (и в PNG, если задан png_filename).

    Возвращает постобработанное изображение.
    Ошибки записи поднимаются как OutputError.
    """
    image = postprocess_image(render(scene, camera, samples_per_pixel, max_depth))

    save_ppm(filename, image)
    if png_filename is not None:
        save_png(png_filename, image)

    return image

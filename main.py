"""
Path Tracer - синтез изображения сцены из сфер методом трассировки путей.

Запуск: python main.py
"""

import sys

from pathtracer.camera import Camera
from pathtracer.logging_config import setup_logging
from pathtracer.materials import Material
from pathtracer.postprocess import OutputError
from pathtracer.reference_scene import create_reference_scene
from pathtracer.renderer import render_to_file


# ==================== КОНФИГУРАЦИЯ ====================

CONFIG = {
    # --- Параметры рендеринга ---
    'aspect_ratio': 16.0 / 9.0,   # ширина = высота * aspect_ratio
    'image_height': 256,          # высота изображения
    'samples_per_pixel': 500,     # сэмплов на пиксель (больше = меньше шума)
    'max_depth': 20,              # максимальное число отскоков

    # --- Камера ---
    'viewport_height': 2.0,       # высота виртуального экрана

    # --- Вывод ---
    'output': '05_spheres_pic.ppm',
    'png_output': None,           # например '05_spheres_pic.png'
    'log_level': 'INFO',
    'log_file': None,             # например 'logs/pathtracer.log'
}


def main(config=None):
    """Основная функция рендеринга. Возвращает код завершения."""
    cfg = dict(CONFIG)
    if config:
        cfg.update(config)

    setup_logging(level=cfg['log_level'], log_file=cfg['log_file'])

    print("=" * 60)
    print("Path Tracer - Трассировка путей")
    print("=" * 60)

    # 1. Создаём сцену
    print("\n[1/3] Создание сцены...")
    scene = create_reference_scene()

    # 2. Создаём камеру
    print("[2/3] Настройка камеры...")
    camera = Camera(
        aspect_ratio=cfg['aspect_ratio'],
        image_height=cfg['image_height'],
        viewport_height=cfg['viewport_height'],
    )

    # 3. Рендеринг и сохранение
    print(f"[3/3] Рендеринг {camera.width}x{camera.height}, "
          f"{cfg['samples_per_pixel']} сэмплов/пиксель...")
    try:
        render_to_file(
            cfg['output'], scene, camera,
            samples_per_pixel=cfg['samples_per_pixel'],
            max_depth=cfg['max_depth'],
            png_filename=cfg['png_output'],
        )
    except OutputError as exc:
        print(f"Ошибка при записи {exc.destination}: {exc.cause}")
        return 1

    print(f"Записано: {cfg['output']}")

    # Типы материалов в JSON
    mat1 = Material.lambertian([0.5, 0.5, 0.5])
    mat2 = Material.metal([0.5, 0.5, 0.5], 0.5)
    print(f"mat1 = {mat1.type_to_json()}")
    print(f"mat2 = {mat2.type_to_json()}")

    print("\n" + "=" * 60)
    print("Готово!")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())

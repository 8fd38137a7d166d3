"""
Материалы и рассеяние луча на поверхности.
"""

import json

import numpy as np
from numba import njit
from .math_utils import reflect, random_unit_vector
from .ray import make_ray

# Теги типов материала (хранятся в массиве material_kinds сцены)
LAMBERTIAN = 0
METAL = 1

KIND_NAMES = {LAMBERTIAN: "Lambertian", METAL: "Metal"}


class Material:
    """
    Материал сферы: тип + базовый цвет.

    Параметры:
        kind: LAMBERTIAN или METAL
        color: базовый цвет (коэффициент ослабления по каналам)
        fuzziness: размытость отражения металла, для Ламберта не используется
    """

    def __init__(self, kind, color, fuzziness=0.0):
        if kind not in KIND_NAMES:
            raise ValueError(f"Неизвестный тип материала: {kind}")
        self.kind = kind
        self.color = np.array(color, dtype=np.float64)
        self.fuzziness = float(fuzziness)

    @classmethod
    def lambertian(cls, color):
        """Диффузный материал."""
        return cls(LAMBERTIAN, color)

    @classmethod
    def metal(cls, color, fuzziness):
        """Металл; fuzziness не ограничивается."""
        return cls(METAL, color, fuzziness)

    def type_to_json(self) -> str:
        """Тип материала в JSON: "Lambertian" или {"Metal":0.5}."""
        if self.kind == METAL:
            return json.dumps({"Metal": self.fuzziness}, separators=(",", ":"))
        return json.dumps(KIND_NAMES[self.kind])

    def __repr__(self):
        if self.kind == METAL:
            return f"Material.metal({self.color.tolist()}, {self.fuzziness})"
        return f"Material.lambertian({self.color.tolist()})"


@njit(cache=True, fastmath=True)
def scatter(ray_dir, hit_point, normal, kind, fuzziness):
    """
    Рассеяние луча в точке пересечения.

    Ламберт: направление random_unit_vector() + normal без нормализации,
    её делает make_ray.
    Металл: отражение относительно нормали плюс fuzziness * random_unit_vector().

    Возвращает новый луч (origin, direction).
    """
    if kind == METAL:
        reflected = reflect(ray_dir, normal)
        return make_ray(hit_point, reflected + random_unit_vector() * fuzziness)

    return make_ray(hit_point, random_unit_vector() + normal)

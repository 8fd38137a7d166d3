"""
Path Tracer - трассировка путей для сцен из сфер.
"""

from .camera import Camera
from .materials import LAMBERTIAN, METAL, Material
from .postprocess import OutputError
from .ray import Ray
from .renderer import render, render_to_file
from .scene import Scene, Sphere

__version__ = "0.1.0"

__all__ = [
    "Camera",
    "LAMBERTIAN",
    "METAL",
    "Material",
    "OutputError",
    "Ray",
    "Scene",
    "Sphere",
    "render",
    "render_to_file",
]

# materials/textures.py
import math
from typing import Union
import numpy as np
from PIL import Image
from raytracer.core.interval import Interval
from raytracer.core.vector import Vector3

_UNIT = Interval(0.0, 1.0)

class Texture:
    """Base class for all textures: a pure function of (u, v, p) to a color."""
    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        raise NotImplementedError("value() must be implemented by texture subclasses.")

class SolidColor(Texture):
    """A solid color texture."""
    def __init__(self, albedo: Vector3):
        self.albedo = albedo

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        return self.albedo

def as_texture(albedo: Union[Vector3, Texture]) -> Texture:
    return SolidColor(albedo) if isinstance(albedo, Vector3) else albedo

class CheckerTexture(Texture):
    """
    A 3D checker pattern.

    Cells are 1/scale wide on every axis; the cell parity is the parity of the
    sum of the floored scaled coordinates.
    """
    def __init__(self, scale: float, even: Union[Vector3, Texture],
                 odd: Union[Vector3, Texture]):
        self.scale = scale
        self.even = as_texture(even)
        self.odd = as_texture(odd)

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        x = math.floor(self.scale * p.x)
        y = math.floor(self.scale * p.y)
        z = math.floor(self.scale * p.z)
        if (x + y + z) % 2 == 0:
            return self.even.value(u, v, p)
        return self.odd.value(u, v, p)

class ImageTexture(Texture):
    """A texture backed by an (height, width, 3) raster with values in [0, 1]."""
    def __init__(self, data: np.ndarray):
        self.data = np.asarray(data, dtype=np.float64)
        self.height = self.data.shape[0] if self.data.ndim == 3 else 0
        self.width = self.data.shape[1] if self.data.ndim == 3 else 0

    @classmethod
    def from_file(cls, image_path: str) -> "ImageTexture":
        with Image.open(image_path) as img:
            if img.mode != 'RGB':
                img = img.convert('RGB')
            return cls(np.array(img) / 255.0)

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        # Without texture data, return solid cyan as a debugging aid.
        if self.height == 0 or self.width == 0:
            return Vector3(0, 1, 1)

        # Clamp to [0,1] and flip v to image row order.
        u = _UNIT.clamp(u)
        v = 1.0 - _UNIT.clamp(v)

        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        color = self.data[y, x]
        return Vector3(float(color[0]), float(color[1]), float(color[2]))

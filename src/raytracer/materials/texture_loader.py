# materials/texture_loader.py
import logging
import os
from PIL import UnidentifiedImageError
from raytracer.materials.textures import ImageTexture

logger = logging.getLogger(__name__)

def load_texture(image_path: str) -> ImageTexture:
    """
    Read an image file into an ImageTexture, converting it to RGB.

    Raises:
        FileNotFoundError: No file at image_path.
        ValueError: The file exists but Pillow cannot decode it.
    """
    if not os.path.exists(image_path):
        raise FileNotFoundError(f"Texture file not found: {image_path}")

    try:
        texture = ImageTexture.from_file(image_path)
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError(f"Cannot decode texture {image_path}: {e}") from e

    logger.debug("Loaded texture %s (%dx%d)", image_path, texture.width, texture.height)
    return texture

def create_image_material(image_path: str, material_class, **material_params):
    """Build material_class around the texture loaded from image_path."""
    return material_class(load_texture(image_path), **material_params)

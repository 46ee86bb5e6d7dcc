"""Unit tests for textures and texture loading."""

import numpy as np
import pytest
from PIL import Image

from raytracer.core.vector import Vector3
from raytracer.materials.lambertian import Lambertian
from raytracer.materials.texture_loader import create_image_material, load_texture
from raytracer.materials.textures import CheckerTexture, ImageTexture, SolidColor

RED = Vector3(1, 0, 0)
BLUE = Vector3(0, 0, 1)


class TestSolidAndChecker:
    """Tests for procedural textures."""

    def test_solid_color_ignores_coordinates(self):
        texture = SolidColor(RED)
        assert texture.value(0.1, 0.9, Vector3(3, 4, 5)) == RED
        assert texture.value(0.7, 0.2, Vector3(-1, 0, 2)) == RED

    def test_checker_alternates_between_cells(self):
        checker = CheckerTexture(1.0, RED, BLUE)
        assert checker.value(0, 0, Vector3(0.5, 0.5, 0.5)) == RED
        assert checker.value(0, 0, Vector3(1.5, 0.5, 0.5)) == BLUE
        assert checker.value(0, 0, Vector3(-0.5, 0.5, 0.5)) == BLUE

    def test_checker_is_periodic(self):
        checker = CheckerTexture(2.0, RED, BLUE)
        p = Vector3(0.3, -1.2, 4.7)
        base = checker.value(0, 0, p)
        # One cell is 0.5 wide, so a one-unit shift crosses two cells.
        for shift in (Vector3(1, 0, 0), Vector3(0, 1, 0), Vector3(0, 0, 1)):
            assert checker.value(0, 0, p + shift) == base

    def test_checker_switches_exactly_at_cell_edges(self):
        """Cells are 1/scale wide and the color flips exactly on k/scale, negatives included."""
        checker = CheckerTexture(4.0, RED, BLUE)
        inside = 0.125  # center of cell 0 on the other two axes
        for axis in range(3):
            for k in (-3, -1, 0, 1, 2):
                edge = [inside, inside, inside]
                below = [inside, inside, inside]
                edge[axis] = k / 4.0
                below[axis] = k / 4.0 - 1e-9
                at_edge = checker.value(0, 0, Vector3(*edge))
                before_edge = checker.value(0, 0, Vector3(*below))
                assert at_edge != before_edge
                assert at_edge == (RED if k % 2 == 0 else BLUE)

    def test_checker_floors_negative_coordinates(self):
        checker = CheckerTexture(4.0, RED, BLUE)
        # floor(-0.4) is -1, so this point sits in an odd cell
        assert checker.value(0, 0, Vector3(-0.1, 0.125, 0.125)) == BLUE

    def test_checker_is_deterministic(self):
        checker = CheckerTexture(3.0, RED, BLUE)
        p = Vector3(0.123, 0.456, 0.789)
        assert checker.value(0.2, 0.4, p) == checker.value(0.9, 0.1, p)

    def test_checker_accepts_textures(self):
        checker = CheckerTexture(1.0, SolidColor(RED), SolidColor(BLUE))
        assert checker.value(0, 0, Vector3(0.5, 0.5, 0.5)) == RED


class TestImageTexture:
    """Tests for raster-backed textures."""

    @pytest.fixture
    def two_by_two(self):
        # Row 0 is the top of the image.
        data = np.array([
            [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]],
            [[0.0, 0.0, 1.0], [1.0, 1.0, 1.0]],
        ])
        return ImageTexture(data)

    def test_corners(self, two_by_two):
        assert two_by_two.value(0.0, 1.0, Vector3(0, 0, 0)) == Vector3(1, 0, 0)
        assert two_by_two.value(1.0, 1.0, Vector3(0, 0, 0)) == Vector3(0, 1, 0)
        assert two_by_two.value(0.0, 0.0, Vector3(0, 0, 0)) == Vector3(0, 0, 1)
        assert two_by_two.value(1.0, 0.0, Vector3(0, 0, 0)) == Vector3(1, 1, 1)

    def test_coordinates_are_clamped(self, two_by_two):
        assert two_by_two.value(-5.0, 7.0, Vector3(0, 0, 0)) == Vector3(1, 0, 0)
        assert two_by_two.value(5.0, -7.0, Vector3(0, 0, 0)) == Vector3(1, 1, 1)

    def test_missing_data_is_cyan(self):
        texture = ImageTexture(np.zeros((0,)))
        assert texture.value(0.5, 0.5, Vector3(0, 0, 0)) == Vector3(0, 1, 1)


class TestTextureLoader:
    """Tests for loading textures from image files."""

    def test_load_png(self, tmp_path):
        path = tmp_path / "red.png"
        Image.new("RGB", (4, 2), (255, 0, 0)).save(path)

        texture = load_texture(str(path))
        assert (texture.width, texture.height) == (4, 2)
        assert texture.value(0.5, 0.5, Vector3(0, 0, 0)) == Vector3(1, 0, 0)

    def test_non_rgb_image_is_converted(self, tmp_path):
        path = tmp_path / "grey.png"
        Image.new("L", (3, 3), 255).save(path)

        texture = load_texture(str(path))
        assert texture.data.shape == (3, 3, 3)
        assert texture.value(0.5, 0.5, Vector3(0, 0, 0)) == Vector3(1, 1, 1)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_texture(str(tmp_path / "nope.png"))

    def test_unreadable_file(self, tmp_path):
        path = tmp_path / "broken.png"
        path.write_bytes(b"definitely not an image")
        with pytest.raises(ValueError):
            load_texture(str(path))

    def test_create_image_material(self, tmp_path):
        path = tmp_path / "tex.png"
        Image.new("RGB", (2, 2), (0, 0, 255)).save(path)

        material = create_image_material(str(path), Lambertian)
        assert isinstance(material, Lambertian)
        assert isinstance(material.texture, ImageTexture)

import numpy as np
import pytest
from PIL import Image

from tilemap.source_grid import analyze_source_image, region_colors


def _two_tone(width=4, height=2):
	np_img = np.zeros((height, width, 3), dtype=np.uint8)
	np_img[:, : width // 2] = (255, 0, 0)
	np_img[:, width // 2 :] = (0, 0, 255)
	return np_img


def test_region_colors_from_image():
	grid = region_colors(Image.fromarray(_two_tone()), 1, 2)
	assert grid == {(0, 0): (255, 0, 0), (0, 1): (0, 0, 255)}


def test_region_colors_from_array():
	grid = region_colors(_two_tone(), 2, 1)
	assert grid == {(0, 0): (127, 0, 127), (1, 0): (127, 0, 127)}


def test_uneven_split_covers_every_pixel():
	grid = region_colors(np.full((7, 5, 3), 9, dtype=np.uint8), 3, 2)
	assert len(grid) == 6
	assert set(grid.values()) == {(9, 9, 9)}


def test_too_many_regions():
	with pytest.raises(ValueError):
		region_colors(_two_tone(), 3, 1)


def test_bad_array_shape():
	with pytest.raises(ValueError):
		region_colors(np.zeros((4, 4)), 1, 1)


def test_analyze_source_image():
	result = analyze_source_image(Image.new("RGB", (5, 4), (7, 8, 9)), cell_size=2)
	assert result["grid_size"] == (2, 2)
	assert result["cell_size"] == 2
	assert result["grid"][(1, 1)] == (7, 8, 9)


def test_analyze_source_image_too_small():
	with pytest.raises(ValueError):
		analyze_source_image(Image.new("RGB", (5, 4)), cell_size=10)

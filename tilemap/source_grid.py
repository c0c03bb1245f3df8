"""Average colors of the regions of a source image."""

import numpy as np
from PIL import Image


def _as_rgb_array(image):
	if isinstance(image, Image.Image):
		return np.array(image.convert("RGB"))
	np_img = np.asarray(image)
	if np_img.ndim != 3 or np_img.shape[2] < 3:
		raise ValueError(f"expected an HxWx3 array, got shape {np_img.shape}")
	return np_img[:, :, :3]


def region_colors(image, rows, columns):
	"""
	Split an image into a rows x columns grid and average each region.

	Region edges are spread evenly, so region sizes differ by at most one
	pixel when the image does not divide exactly.

	Args:
	    image: PIL Image or HxWx3 numpy array
	    rows: Number of grid rows
	    columns: Number of grid columns

	Returns:
	    Dict mapping (row, col) to an (r, g, b) tuple of ints
	"""
	np_img = _as_rgb_array(image)
	height, width = np_img.shape[:2]

	if rows < 1 or columns < 1:
		raise ValueError(f"grid must have at least one row and column, got {rows}x{columns}")
	if rows > height or columns > width:
		raise ValueError(f"cannot split a {width}x{height} image into {rows}x{columns} regions")

	grid = {}
	for row in range(rows):
		y_start = row * height // rows
		y_end = (row + 1) * height // rows
		for col in range(columns):
			x_start = col * width // columns
			x_end = (col + 1) * width // columns

			cell_data = np_img[y_start:y_end, x_start:x_end]
			avg_color = np.mean(cell_data, axis=(0, 1))
			grid[(row, col)] = tuple(int(c) for c in avg_color)

	return grid


def analyze_source_image(image, cell_size=50):
	"""
	Average a source image over square cells of a fixed pixel size.

	Pixels past the last whole cell on the right and bottom edges are ignored.

	Args:
	    image: PIL Image or HxWx3 numpy array
	    cell_size: Size of each grid cell in pixels

	Returns:
	    dict with 'grid' (RGB per cell), 'grid_size' (rows, cols) and 'cell_size'
	"""
	np_img = _as_rgb_array(image)
	height, width = np_img.shape[:2]

	grid_cols = width // cell_size
	grid_rows = height // cell_size
	if grid_rows == 0 or grid_cols == 0:
		raise ValueError(f"a {width}x{height} image is smaller than one {cell_size}px cell")

	cropped = np_img[: grid_rows * cell_size, : grid_cols * cell_size]
	return {
		"grid": region_colors(cropped, grid_rows, grid_cols),
		"grid_size": (grid_rows, grid_cols),
		"cell_size": cell_size,
	}

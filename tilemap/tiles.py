"""Tile images and their average colors."""

import numpy as np


class TileImage:
	"""
	An in-memory tile image that can stand in for one region of a mosaic.

	Decoding files into Pillow images is left to the caller.
	"""

	def __init__(self, image, name=None):
		"""
		Args:
		    image: Decoded PIL Image
		    name: Optional label (for example the source filename)
		"""
		width, height = image.size
		if width == 0 or height == 0:
			raise ValueError(f"tile image has no pixels ({width}x{height})")
		self.image = image
		self.name = name
		self._average_color = None

	def average_color(self):
		"""Mean RGB of the tile, rounded to integers, as a point."""
		if self._average_color is None:
			np_array = np.array(self.image.convert("RGB"))
			avg_color = np.mean(np_array, axis=(0, 1))
			self._average_color = tuple(int(round(c)) for c in avg_color)
		return self._average_color

	@property
	def size(self):
		return self.image.size

	def info(self):
		"""Summary of the tile: dimensions, pixel area and average color."""
		width, height = self.image.size
		return {
			"dimensions": f"{width}x{height}",
			"area": width * height,
			"average_rgb": self.average_color(),
		}

	def __repr__(self):
		label = self.name if self.name is not None else "unnamed"
		return f"TileImage({label!r}, average_rgb={self.average_color()})"

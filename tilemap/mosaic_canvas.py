"""Grid of tile assignments making up a mosaic."""

from collections import Counter

import numpy as np


class MosaicCanvas:
	"""
	A rows x columns grid holding one tile per cell.

	Only records which tile goes where; turning the grid into pixels is up to
	the caller.
	"""

	def __init__(self, rows, columns):
		if rows < 0 or columns < 0:
			raise ValueError(f"canvas size must not be negative, got {rows}x{columns}")
		self.rows = rows
		self.columns = columns
		self._grid = np.full((rows, columns), None, dtype=object)

	def _check_bounds(self, row, col):
		if not (0 <= row < self.rows and 0 <= col < self.columns):
			raise IndexError(f"cell ({row}, {col}) outside {self.rows}x{self.columns} canvas")

	def set_tile(self, row, col, tile):
		self._check_bounds(row, col)
		self._grid[row, col] = tile

	def get_tile(self, row, col):
		"""Return the tile at (row, col), or None if the cell is still empty."""
		self._check_bounds(row, col)
		return self._grid[row, col]

	def tiles(self):
		"""
		Iterate over filled cells in row-major order.

		Yields:
		    ((row, col), tile) tuples
		"""
		for row in range(self.rows):
			for col in range(self.columns):
				tile = self._grid[row, col]
				if tile is not None:
					yield (row, col), tile

	def is_complete(self):
		"""True once every cell holds a tile."""
		return all(tile is not None for tile in self._grid.flat)

	def usage_counts(self):
		"""Counter of how many cells each tile fills."""
		return Counter(tile for _, tile in self.tiles())

	@property
	def shape(self):
		return self.rows, self.columns

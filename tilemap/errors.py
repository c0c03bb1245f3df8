"""Exceptions raised by the tile mapping core."""


class TilemapError(Exception):
	"""Base class for every error raised by tilemap."""


class EmptyIndexError(TilemapError, LookupError):
	"""A nearest-neighbor query was made against an index with no points."""


class DimensionMismatchError(TilemapError, ValueError):
	"""A point does not have the dimension the index was built with."""


class PayloadLookupError(TilemapError, KeyError):
	"""The nearest point has no payload; the index and palette are out of sync."""

	def __init__(self, point):
		super().__init__(point)
		self.point = point

	def __str__(self):
		return f"no payload recorded for nearest point {self.point}"


class IndexConsistencyError(TilemapError, RuntimeError):
	"""Internal fault while building an index (for example an inverted range)."""

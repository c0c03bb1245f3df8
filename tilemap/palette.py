"""Nearest-color palette: maps any query point to the payload of the closest labeled point."""

from tqdm import tqdm

from tilemap.config import SHOW_PROGRESS, VERBOSE
from tilemap.errors import PayloadLookupError
from tilemap.kd_tree import KdTree
from tilemap.point import as_point


class PaletteIndex:
	"""
	K-d tree over labeled points plus a point -> payload dictionary.

	If two labels share the same point, the later payload replaces the earlier
	one in the dictionary while both points stay in the tree.
	"""

	def __init__(self, labeled_points, dimension=None, verbose=VERBOSE):
		"""
		Build the palette.

		Args:
		    labeled_points: Iterable of (point, payload) pairs
		    dimension: Number of coordinates per point, or None to infer it
		    verbose: Print a short summary once built
		"""
		labeled_points = list(labeled_points)
		points = [point for point, _ in labeled_points]
		self._tree = KdTree(points, dimension)

		self._payloads = {}
		for point, payload in labeled_points:
			self._payloads[as_point(point, self._tree.dimension)] = payload

		if verbose:
			print(f"Built palette of {len(self._payloads)} colors from {len(labeled_points)} entries")
			shadowed = len(labeled_points) - len(self._payloads)
			if shadowed > 0:
				print(f"  Warning: {shadowed} entries share a point with a later entry and were replaced")

	@classmethod
	def from_tiles(cls, tiles, verbose=VERBOSE):
		"""Build a palette keyed by each tile's average color."""
		return cls(((tile.average_color(), tile) for tile in tiles), verbose=verbose)

	def nearest_point(self, query):
		"""Return the palette point closest to query."""
		return self._tree.find_nearest_neighbor(query)

	def lookup(self, query):
		"""
		Return the payload of the palette point closest to query.

		Raises:
		    EmptyIndexError: The palette has no entries
		    PayloadLookupError: The nearest point has no recorded payload
		"""
		nearest = self._tree.find_nearest_neighbor(query)
		try:
			return self._payloads[nearest]
		except KeyError:
			raise PayloadLookupError(nearest) from None

	def lookup_many(self, queries, show_progress=SHOW_PROGRESS, desc="Matching colors"):
		"""
		Look up a stream of query points.

		Args:
		    queries: Iterable of query points
		    show_progress: Wrap the stream in a tqdm progress bar
		    desc: Progress bar label

		Yields:
		    The payload for each query, in order
		"""
		for query in tqdm(queries, desc=desc, disable=not show_progress):
			yield self.lookup(query)

	@property
	def tree(self):
		return self._tree

	@property
	def dimension(self):
		return self._tree.dimension

	def __len__(self):
		return len(self._payloads)

	def __contains__(self, point):
		return as_point(point) in self._payloads

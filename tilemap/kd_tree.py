"""
K-d tree over a fixed point set.

The tree is stored without node objects: the points are reordered in place so
that every subtree occupies a contiguous slice, and two integer arrays hold
the array index of each node's left and right subtree roots. A missing child
is marked with a sentinel equal to the number of points. The split dimension
of a node is its depth modulo the dimension and is tracked while walking the
tree instead of being stored.
"""

import numpy as np

from tilemap.config import COLOR_DIMENSION
from tilemap.errors import DimensionMismatchError, EmptyIndexError, IndexConsistencyError
from tilemap.point import as_point, closest_of, smaller_in_dimension, squared_distance


class KdTree:
	"""
	Balanced k-d tree answering nearest-neighbor queries.

	Built once from a complete set of points and read-only afterwards, so an
	instance can be queried from several threads without locking.

	Example:
	    >>> tree = KdTree([(0, 0, 0), (10, 10, 10), (5, 5, 4)])
	    >>> tree.find_nearest_neighbor((5, 5, 5))
	    (5, 5, 4)
	"""

	def __init__(self, points, dimension=None):
		"""
		Build the tree.

		Args:
		    points: Iterable of coordinate sequences, all of the same length
		    dimension: Number of coordinates per point. If None, taken from the
		        first point (or COLOR_DIMENSION when there are no points)
		"""
		points = list(points)
		if dimension is None:
			dimension = len(points[0]) if points else COLOR_DIMENSION
		if dimension < 1:
			raise DimensionMismatchError(f"dimension must be at least 1, got {dimension}")

		self._dimension = dimension
		self._points = [as_point(p, dimension) for p in points]

		count = len(self._points)
		self._absent = count
		self._left_child = np.full(count, count, dtype=np.intp)
		self._right_child = np.full(count, count, dtype=np.intp)

		self._root = self._build(0, count - 1, 0)

		# Freeze everything once built
		self._points = tuple(self._points)
		self._left_child.flags.writeable = False
		self._right_child.flags.writeable = False

	def _build(self, left, right, dim):
		"""Place the median of [left, right] and build both halves; return its index."""
		if left > right:
			return self._absent

		med = (left + right) // 2
		self._select(left, right, med, dim)

		next_dim = (dim + 1) % self._dimension
		self._left_child[med] = self._build(left, med - 1, next_dim)
		self._right_child[med] = self._build(med + 1, right, next_dim)
		return med

	def _select(self, left, right, k, dim):
		"""Quickselect: move the element ranked k within [left, right] to position k."""
		if not left <= k <= right:
			raise IndexConsistencyError(f"selection rank {k} outside range [{left}, {right}]")

		while left < right:
			split = self._partition(left, right, dim)
			if k <= split:
				right = split
			else:
				left = split + 1

	def _partition(self, left, right, dim):
		"""
		Hoare partition of [left, right] around its middle point.

		Both scans stop on points equal to the pivot, so runs of identical
		points are swapped across and split evenly instead of piling up on
		one side.

		Returns:
		    Index j with left <= j < right such that every point in [left, j]
		    is no larger than every point in [j + 1, right]
		"""
		points = self._points
		pivot = points[(left + right) // 2]
		i = left - 1
		j = right + 1

		while True:
			i += 1
			while smaller_in_dimension(points[i], pivot, dim):
				i += 1
			j -= 1
			while smaller_in_dimension(pivot, points[j], dim):
				j -= 1
			if i >= j:
				return j
			points[i], points[j] = points[j], points[i]

	def find_nearest_neighbor(self, query):
		"""
		Find the stored point closest to a query point.

		Distance is squared Euclidean distance. Equidistant points are resolved
		to the smaller one in tuple order, so the answer does not depend on the
		order the points were given in.

		Args:
		    query: Coordinate sequence with the tree's dimension

		Returns:
		    The nearest stored point as a tuple
		"""
		return self.nearest_with_distance(query)[0]

	def nearest_with_distance(self, query):
		"""Return (nearest point, squared distance to it) for a query point."""
		if not self._points:
			raise EmptyIndexError("cannot search an empty k-d tree")
		query = as_point(query, self._dimension)
		best = self._search(self._root, query, 0)
		return best, squared_distance(query, best)

	def _search(self, node, query, dim):
		point = self._points[node]
		next_dim = (dim + 1) % self._dimension

		if query[dim] < point[dim]:
			near, far = self._left_child[node], self._right_child[node]
		else:
			near, far = self._right_child[node], self._left_child[node]

		if near == self._absent:
			best = point
		else:
			best = closest_of(query, self._search(near, query, next_dim), point)

		# The far side can only win if the splitting plane is no farther than
		# the current best; at exactly equal distance a smaller point may wait there.
		plane_distance = (query[dim] - point[dim]) ** 2
		if far != self._absent and plane_distance <= squared_distance(query, best):
			best = closest_of(query, best, self._search(far, query, next_dim))

		return best

	def walk(self):
		"""
		Visit every node in pre-order.

		Yields:
		    (node index, split dimension) tuples
		"""
		if not self._points:
			return
		stack = [(self._root, 0)]
		while stack:
			node, dim = stack.pop()
			yield node, dim
			next_dim = (dim + 1) % self._dimension
			for child in (self._right_child[node], self._left_child[node]):
				if child != self._absent:
					stack.append((int(child), next_dim))

	def subtree_points(self, node):
		"""List every point in the subtree rooted at a node index."""
		if node == self._absent:
			return []
		return (
			self.subtree_points(self._left_child[node])
			+ [self._points[node]]
			+ self.subtree_points(self._right_child[node])
		)

	def height(self):
		"""Number of levels in the tree (0 when empty)."""

		def _height(node):
			if node == self._absent:
				return 0
			return 1 + max(_height(self._left_child[node]), _height(self._right_child[node]))

		return _height(self._root)

	@property
	def dimension(self):
		return self._dimension

	@property
	def points(self):
		"""Stored points in tree order."""
		return self._points

	@property
	def left_child(self):
		return self._left_child

	@property
	def right_child(self):
		return self._right_child

	@property
	def root(self):
		"""Index of the root node; equal to `absent` when the tree is empty."""
		return self._root

	@property
	def absent(self):
		"""Sentinel child index meaning "no subtree"."""
		return self._absent

	def __len__(self):
		return len(self._points)

	def __iter__(self):
		return iter(self._points)

	def __repr__(self):
		return f"KdTree(size={len(self._points)}, dimension={self._dimension})"

import pytest

from tilemap.point import squared_distance


@pytest.fixture
def brute_force_nearest():
	"""Exhaustive nearest point by (squared distance, point order); None for no points."""

	def nearest(points, target):
		return min(points, key=lambda p: (squared_distance(target, p), p), default=None)

	return nearest

"""Point helpers: conversion, distance and the tie-breaking order."""

import numpy as np

from tilemap.errors import DimensionMismatchError


def as_point(values, dimension=None):
	"""
	Convert a coordinate sequence into an immutable point.

	Points are plain tuples, so Python's tuple comparison gives the total
	(lexicographic) order used to break exact distance ties.

	Args:
	    values: Sequence or numpy array of coordinates
	    dimension: Expected number of coordinates, or None to accept any

	Returns:
	    Tuple of Python numbers
	"""
	array = np.asarray(values)
	if array.ndim != 1:
		raise DimensionMismatchError(f"a point must be one-dimensional, got shape {array.shape}")
	if dimension is not None and array.shape[0] != dimension:
		raise DimensionMismatchError(
			f"expected a point with {dimension} coordinates, got {array.shape[0]}"
		)
	# tolist() turns numpy scalars back into int/float so sums stay exact
	return tuple(array.tolist())


def squared_distance(first, second):
	"""Sum of squared coordinate differences (no square root)."""
	return sum((a - b) ** 2 for a, b in zip(first, second))


def smaller_in_dimension(first, second, dim):
	"""
	Order two points by one coordinate, falling back to the full point order.

	Args:
	    first, second: Points to compare
	    dim: Coordinate index to compare on

	Returns:
	    True if first sorts before second
	"""
	if first[dim] != second[dim]:
		return first[dim] < second[dim]
	return first < second


def should_replace(target, current_best, candidate):
	"""True if candidate is strictly closer to target, or equally close and smaller."""
	candidate_distance = squared_distance(target, candidate)
	best_distance = squared_distance(target, current_best)
	if candidate_distance != best_distance:
		return candidate_distance < best_distance
	return candidate < current_best


def closest_of(target, first, second):
	"""Return whichever of two points wins under should_replace."""
	if should_replace(target, first, second):
		return second
	return first

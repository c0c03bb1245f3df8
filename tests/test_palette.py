import pytest
from PIL import Image

from tilemap.errors import EmptyIndexError, PayloadLookupError
from tilemap.palette import PaletteIndex
from tilemap.tiles import TileImage


def test_black_and_white():
	palette = PaletteIndex([((0, 0, 0), "black"), ((255, 255, 255), "white")])
	assert palette.lookup((10, 10, 10)) == "black"
	assert palette.lookup((200, 180, 250)) == "white"


def test_nearest_point():
	palette = PaletteIndex([((0, 0, 0), "black"), ((255, 255, 255), "white")])
	assert palette.nearest_point((10, 10, 10)) == (0, 0, 0)


def test_lookup_many_keeps_order():
	palette = PaletteIndex([((0, 0, 0), "black"), ((255, 255, 255), "white")])
	queries = [(0, 0, 1), (250, 250, 250), (100, 100, 100), (130, 130, 130)]
	assert list(palette.lookup_many(queries)) == ["black", "white", "black", "white"]


def test_lookup_many_with_progress(capsys):
	palette = PaletteIndex([((0, 0, 0), "black")])
	assert list(palette.lookup_many([(1, 1, 1)] * 3, show_progress=True)) == ["black"] * 3
	assert "Matching colors" in capsys.readouterr().err


def test_empty_palette():
	palette = PaletteIndex([], dimension=3)
	assert len(palette) == 0
	with pytest.raises(EmptyIndexError):
		palette.lookup((0, 0, 0))


def test_later_duplicate_shadows_earlier():
	palette = PaletteIndex([((1, 2, 3), "first"), ((1, 2, 3), "second")])
	assert len(palette) == 1
	assert len(palette.tree) == 2
	assert palette.lookup((1, 2, 3)) == "second"


def test_verbose_reports_shadowed_entries(capsys):
	PaletteIndex([((1, 2, 3), "first"), ((1, 2, 3), "second")], verbose=True)
	out = capsys.readouterr().out
	assert "Built palette of 1 colors from 2 entries" in out
	assert "1 entries share a point" in out


def test_missing_payload_is_not_masked():
	palette = PaletteIndex([((0, 0, 0), "black"), ((255, 255, 255), "white")])
	# Simulate a palette whose dictionary fell out of sync with its tree
	del palette._payloads[(0, 0, 0)]
	with pytest.raises(PayloadLookupError) as excinfo:
		palette.lookup((10, 10, 10))
	assert excinfo.value.point == (0, 0, 0)
	assert isinstance(excinfo.value, KeyError)


def test_contains():
	palette = PaletteIndex([((0, 0, 0), "black")])
	assert (0, 0, 0) in palette
	assert (1, 0, 0) not in palette


def test_from_tiles():
	red = TileImage(Image.new("RGB", (4, 4), (250, 0, 0)), name="red")
	green = TileImage(Image.new("RGB", (4, 4), (0, 250, 0)), name="green")
	palette = PaletteIndex.from_tiles([red, green])
	assert palette.dimension == 3
	assert palette.lookup((200, 30, 30)) is red
	assert palette.lookup((20, 180, 40)) is green

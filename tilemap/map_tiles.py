"""
Tile mapping.

Matches every region of a source image to the tile whose average color is
closest, producing a MosaicCanvas:
1. Build a palette (k-d tree) over the tiles' average colors
2. Look up each region color in the palette
3. Record the winning tile in the canvas cell for that region
"""

from tqdm import tqdm

from tilemap.config import SHOW_PROGRESS, VERBOSE
from tilemap.errors import EmptyIndexError
from tilemap.mosaic_canvas import MosaicCanvas
from tilemap.palette import PaletteIndex


def print_mapping_summary(canvas, num_tiles):
	"""Print statistics about a finished mapping."""
	usage = canvas.usage_counts()
	cells = canvas.rows * canvas.columns
	tqdm.write("\n=== MAPPING SUMMARY ===")
	tqdm.write(f"Canvas: {canvas.rows} rows x {canvas.columns} cols = {cells} cells")
	tqdm.write(f"Unique tiles used: {len(usage)} out of {num_tiles} available")
	if usage:
		tile, count = usage.most_common(1)[0]
		tqdm.write(f"Most used tile: {tile!r} ({count} cells)")


def map_tiles(region_grid, tiles, show_progress=SHOW_PROGRESS, verbose=VERBOSE):
	"""
	Map each source region to its closest tile.

	Args:
	    region_grid: Dict mapping (row, col) to a region's average color, as
	        returned by region_colors()
	    tiles: Sequence of TileImage objects
	    show_progress: Show a tqdm progress bar over the regions
	    verbose: Print a summary when done

	Returns:
	    MosaicCanvas sized to cover every (row, col) in region_grid
	"""
	tiles = list(tiles)
	if not tiles:
		raise EmptyIndexError("cannot map regions without any tiles")

	if verbose:
		print(f"Building palette from {len(tiles)} tiles...")
	palette = PaletteIndex.from_tiles(tiles, verbose=verbose)

	grid_rows = max(r for r, c in region_grid.keys()) + 1 if region_grid else 0
	grid_cols = max(c for r, c in region_grid.keys()) + 1 if region_grid else 0
	canvas = MosaicCanvas(grid_rows, grid_cols)

	for (row, col), color in tqdm(
		sorted(region_grid.items()), desc="Mapping tiles", disable=not show_progress
	):
		canvas.set_tile(row, col, palette.lookup(color))

	if verbose:
		print_mapping_summary(canvas, len(tiles))

	return canvas

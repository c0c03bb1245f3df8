"""Default settings shared by the tile mapping helpers."""

# ==================== CONFIGURATION ====================

# Number of coordinates in a color point (red, green, blue)
COLOR_DIMENSION = 3

# Show tqdm progress bars while mapping regions to tiles
SHOW_PROGRESS = False

# Print summaries of what was built and mapped
VERBOSE = False

# ======================================================

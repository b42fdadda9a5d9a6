# constants.py

# =============================================================================
# --- PERMUTATION TABLE & LATTICE ---
# =============================================================================
PERMUTATION_SIZE = 256 # Number of distinct lattice hashes (values 0..255)
PERMUTATION_TABLE_SIZE = PERMUTATION_SIZE * 2 # Duplicated so corner lookups never wrap
LATTICE_MASK = PERMUTATION_SIZE - 1 # floor(x) & 255 gives the noise a period of 256 cells

# =============================================================================
# --- NOISE FIELD GENERATION ---
# =============================================================================
# How many grid cells span one lattice cell. Cell (row, col) is sampled at
# (col / PERLIN_SIZE, row / PERLIN_SIZE).
PERLIN_SIZE = 16
PERLIN_FILL_BAND_ROWS = 64 # Rows sampled per pass, bounds the temporaries of a fill
STATIC_NOISE_LEVELS = 256 # Static noise draws are uniform over [0, 255]
DEFAULT_MAP_WIDTH = 32
DEFAULT_MAP_HEIGHT = 32

# The simplified 4-direction gradient set lets the raw sample reach |x| + 2|y| <= 3
# at a corner, so after (result + 1) / 2 the only hard guarantee is [-1, 2].
PERLIN_LOOSE_MIN = -1.0
PERLIN_LOOSE_MAX = 2.0

# =============================================================================
# --- CONSOLE OUTPUT ---
# =============================================================================
STATIC_CELL_FORMAT = "%3d "
PERLIN_CELL_FORMAT = "%5.2f "
STATIC_MAP_HEADER = "Generating static noise map:\n"
PERLIN_MAP_HEADER = "\nNow for the perlin noise map:\n"
MAP_ERROR_MESSAGE = "Error, could not complete noiseMap operation."
ALLOCATION_ERROR_MESSAGE = "Memory allocation failed"

# =============================================================================
# --- PROCESS ---
# =============================================================================
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
PROFILER_PRINT_LINE_COUNT = 20

# =============================================================================
# --- VIEWER, UI & COLORS ---
# =============================================================================
VIEWER_CELL_SIZE_PIXELS = 12
VIEWER_MAP_GAP_PIXELS = 16
VIEWER_MARGIN_PIXELS = 16
VIEWER_CAPTION = "Random Noise Map"
VIEWER_FONT_SIZE = 24
VIEWER_LABEL_HEIGHT_PIXELS = 28
CLOCK_TICK_RATE = 30
VIEWER_VIEW_MODES = ("grayscale", "terrain")

COLOR_WHITE = (255, 255, 255); COLOR_BLACK = (0, 0, 0); COLOR_VOID = (10, 0, 20)
COLOR_DEEP_WATER = (0, 0, 50); COLOR_SHALLOW_WATER = (26, 102, 255)
COLOR_SAND = (240, 230, 140); COLOR_GRASS = (34, 139, 34); COLOR_DIRT = (139, 69, 19)
COLOR_MOUNTAIN = (112, 128, 144)

# Perlin output hovers around 0.5, so the bands are centered there.
TERRAIN_WATER_LEVEL = 0.45
TERRAIN_SAND_LEVEL = 0.48
TERRAIN_GRASS_LEVEL = 0.60
TERRAIN_DIRT_LEVEL = 0.66

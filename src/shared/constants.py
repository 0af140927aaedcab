import numpy as np

# Latitude limits (degrees)
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0

# Longitude limits (degrees)
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0

# Full turn of longitude
LONGITUDE_SPAN = 360.0

# Web Mercator latitude limit, atan(sinh(pi))
MAX_MERCATOR_LATITUDE = 85.05112877980659
MIN_MERCATOR_LATITUDE = -85.05112877980659

# Clamp for sin(lat) in the forward Mercator projection
MERCATOR_MAX_SIN = 0.9999

# Tolerance in tile units; an edge on a tile border selects a single tile
XY_EPSILON = 1e-6

# Persisted form: north, east, south, west as little-endian float64
BOUNDS_BINARY_DTYPE = np.dtype('<f8')
BOUNDS_FIELD_COUNT = 4
BOUNDS_BINARY_SIZE = BOUNDS_FIELD_COUNT * BOUNDS_BINARY_DTYPE.itemsize

# A builder needs at least this many distinct points
MIN_POINTS_FOR_BOUNDS = 2

# Upper zoom used when a region has an unbounded max zoom
DEFAULT_TILE_COUNT_MAX_ZOOM = 16

# --- Region profiles ---
# Environment variable that overrides the regions directory
REGIONS_DIR_ENV = 'LATLNG_BOUNDS_REGIONS_DIR'
# Project-local and per-user directory names
REGIONS_DIR_NAME = 'regions'
USER_CONFIG_DIR_NAME = '.latlng_bounds'

# --- Logging ---
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

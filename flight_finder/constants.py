"""Constants used throughout the flight finder.

This module centralizes all thresholds and configuration constants used
across the application. Keeping them in one place ensures the segmenter,
the spatial index and the command-line defaults agree with each other.

Categories:
- Altitude Thresholds: Limits for landing detection
- Sliding Window: Sample and step sizes for trend analysis
- Spatial Index: Grid neighbourhood for nearest-airport search
- Validation Ranges: Min/max bounds for coordinates
- Default Paths: Locations of source and result files
- Workers: Limits for parallel segmentation
"""

# === Altitude Thresholds ===
MAX_ALTITUDE_FT = 15000  # All airports are located below this altitude
GROUND_TOLERANCE_FT = 5000  # Max altitude vs. elevation gap for "landing at", not "flying over"

# === Sliding Window ===
SAMPLE_SIZE = 25  # Events per trend sample
WINDOW_STEP = 10  # Events the window advances per step
TREND_DECREASE_RATIO = 0.5  # Share of falling pairs that must be exceeded for a descent

# === Spatial Index ===
# Cell plus its 8 neighbours, in whole degrees of latitude/longitude
GRID_NEIGHBOR_OFFSETS = (-1, 0, 1)

# === Validation Ranges ===
LAT_MIN = -90.0
LAT_MAX = 90.0
LON_MIN = -180.0
LON_MAX = 180.0

# === Default Paths ===
DEFAULT_AIRPORTS_PATH = "Resources/airports.json"
DEFAULT_EVENTS_PATH = "Resources/events.txt"
DEFAULT_OUTPUT_PATH = "Resources/flights.json"

# Environment variables overriding the default paths
AIRPORTS_PATH_ENV = "FLIGHT_FINDER_AIRPORTS"
EVENTS_PATH_ENV = "FLIGHT_FINDER_EVENTS"
OUTPUT_PATH_ENV = "FLIGHT_FINDER_OUTPUT"

# === Workers ===
DEFAULT_WORKERS = 1
MAX_WORKERS = 8

# === Statistics ===
TOP_AIRPORTS_COUNT = 5

# === Time ===
SECONDS_PER_HOUR = 3600

# === File Size Limits ===
LARGE_FILE_WARNING_MB = 100  # Warn if a source file exceeds this size

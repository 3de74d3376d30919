# config.py — Central configuration for map georeferencing

# Control point input and map image
CONTROL_POINTS_FILE = "control_points.json"
MAP_IMAGE_PATH = "./map.png"

# Candidate CRSs scored by main.py
CRS_CANDIDATES = ["EPSG:2448", "EPSG:3099", "EPSG:3857", "EPSG:30166"]

# CRS the geographic control points are expressed in (lng, lat order)
GEOGRAPHIC_CRS = "EPSG:4326"

# Fit parameters
#   "affine"  — free 6-parameter affine
#   "similar" — uniform scale + rotation + translation
#   "noshear" — uniform scale + translation
DEFAULT_TRANSFORM_MODE = "affine"
#   "same" / "opposite" / "auto" — image vs map Y-axis direction
DEFAULT_Y_AXIS_MODE = "auto"

# CRS scoring metric: "rmse" (map units) or "ratio" (rmse / spread of points)
DEFAULT_SCORE_METRIC = "rmse"

# Numerical tolerances
SINGULAR_TOLERANCE = 1e-15    # |det| below this is treated as non-invertible
DEGENERATE_TOLERANCE = 1e-15  # point spread below this is treated as a single point

# Logging
LOG_LEVEL = "INFO"

# Visualization
DISPLAY_RESIDUALS = True  # plot residual vectors for the best CRS

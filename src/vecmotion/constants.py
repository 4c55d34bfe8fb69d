"""Global constants for the application."""

# Animation settings
DEFAULT_FPS = 30  # Default frames per second for rendered output
DEFAULT_RUN_TIME = 1.0  # Seconds a played animation lasts unless overridden
INITIAL_EVENT_TIME = 0.5  # First sequential animation starts after this delay
WAIT_TIME = 1.0  # Seconds added to the scheduling cursor by Scene.wait()

# Depth ordering
DEPTH_STEP_DIVISOR = 10.0  # depth = creation counter / divisor

# Path geometry
PATH_TOLERANCE = 0.01  # Flattening tolerance for lengths and partial paths
MORPH_TOLERANCE = 0.5  # Flattening tolerance used when resampling morphs
MORPH_START_CUTOFF = 0.001  # At or below this progress a morph returns its source
MORPH_END_CUTOFF = 0.999  # At or above this progress a morph returns its target

# Stroke weights in world units
STROKE_WEIGHT_THIN = 0.02
STROKE_WEIGHT_NORMAL = 0.05
STROKE_WEIGHT_THICK = 0.1

# Viewport (world units, centered on the origin)
DEFAULT_VIEWPORT_WIDTH = 16.0
DEFAULT_VIEWPORT_HEIGHT = 9.0

# Output canvas in pixels
DEFAULT_PIXEL_WIDTH = 640
DEFAULT_PIXEL_HEIGHT = 360

# Colors
BACKGROUND_COLOR = (20, 20, 28)  # Dark slate background
DEFAULT_FILL_COLOR = "#3a86ff"
DEFAULT_STROKE_COLOR = "#ffffff"
DEFAULT_TEXT_COLOR = "#f1f1f1"
DEFAULT_FONT_SIZE = 0.6  # Font size in world units

# Wander behaviour defaults.
DEFAULT_MOVE_SPEED = 5.0

DEFAULT_MIN_IDLE_TIME = 1.0
DEFAULT_MAX_IDLE_TIME = 4.0

DEFAULT_MIN_MOVE_TIME = 1.0
DEFAULT_MAX_MOVE_TIME = 3.0

DEFAULT_MIN_X = -3.0
DEFAULT_MAX_X = 3.0
DEFAULT_MIN_Y = -3.0
DEFAULT_MAX_Y = 3.0

# Durations are drawn from [min * LOW, min * HIGH); the max_* settings do not feed sampling.
DURATION_SCALE_LOW = 0.5
DURATION_SCALE_HIGH = 2.0

# Each direction component is drawn from [-1, 1) before normalising.
DIRECTION_COMPONENT_RANGE = (-1.0, 1.0)
# Redraws allowed when a direction sample lands exactly on (0, 0).
MAX_DIRECTION_SAMPLES = 8

# Demo window geometry
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
UPDATE_RATE = 1 / 60
# Screen pixels per world unit when drawing the wander area.
PIXELS_PER_UNIT = 80.0
WANDERER_RADIUS = 10
OVERLAY_BORDER_WIDTH = 2

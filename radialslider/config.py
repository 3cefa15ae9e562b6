# radialslider/config.py
import math

PI2 = 2 * math.pi

# range of the default angle selector
DEFAULT_MINIMUM = 0.0
DEFAULT_MAXIMUM = 360.0

# increments in degrees
DEFAULT_UNIT_INCREMENT  = 1
DEFAULT_BLOCK_INCREMENT = 45

# key-repeat: first repeat after the initial delay, then every interval
KEY_REPEAT_INITIAL_DELAY_MS = 250
KEY_REPEAT_INTERVAL_MS      = 40

# drawing
DEFAULT_LINE_WIDTH = 1.5
MIN_FONT_CHARS     = 7
UNIT_TICK_FRACTION  = 0.95   # unit ticks start at 95% of the radius
BLOCK_TICK_FRACTION = 0.90
ARROWHEAD_FRACTION  = 0.2

FOREGROUND_COLOR = (128, 128, 128)
DISABLED_COLOR   = (200, 200, 200)

# demo window (x, y, w, h)
COORDS = dict(
    slider_deg  =( 20,  20, 200, 200),
    slider_rad  =(240,  20, 200, 200),
    slider_pct  =(460,  20, 140, 200),
    log_box     =( 20, 240, 580, 140),
)
WINDOW_SIZE = (620, 400)

"""Layout constants and color definitions."""

# Timing
FPS = 60

# Layout dimensions
VIEW_W = 900
VIEW_H = 640
SIDEBAR_W = 180
STATUS_H = 36

SCREEN_W = VIEW_W + SIDEBAR_W
SCREEN_H = VIEW_H + STATUS_H

# Vertical field of view of the perspective camera
FOV_Y_DEG = 60.0
NEAR_PLANE = 1.0

# Transition duration editing
DURATION_STEP_MS = 250

# Colors
BG_COLOR = (0, 0, 0)
SIDEBAR_BG = (25, 25, 38)
STATUS_BG = (35, 35, 50)
BORDER_COLOR = (50, 50, 70)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
LABEL_COLOR = (180, 180, 200)
ACTIVE_COLOR = (100, 255, 100)

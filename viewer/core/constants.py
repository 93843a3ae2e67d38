"""
Floodwave Viewer - Constants

Layout, colours, slider ranges and defaults for the viewer window.
"""

# Window
DEFAULT_SCREEN_WIDTH = 1200
DEFAULT_SCREEN_HEIGHT = 800
FPS = 60

# UI Layout
SIDEBAR_WIDTH = 220
SIDEBAR_COLLAPSED_WIDTH = 40
STATUS_HEIGHT = 30
CANVAS_MARGIN = 11  # on each side of the grid

# Colors
COLOR_BG = (18, 18, 24)
COLOR_SIDEBAR = (32, 32, 40)
COLOR_STATUS = (32, 32, 40)
COLOR_GRID = (10, 10, 14)
COLOR_TEXT = (255, 255, 255)
COLOR_TEXT_DIM = (160, 160, 170)
COLOR_BUTTON = (64, 64, 72)
COLOR_BUTTON_HOVER = (80, 80, 90)
COLOR_BUTTON_ACTIVE = (100, 100, 200)
COLOR_BUTTON_DISABLED = (44, 44, 50)
COLOR_SLIDER_TRACK = (70, 70, 80)
COLOR_SLIDER_KNOB = (220, 220, 230)

# Cell size slider (pixels)
CELL_SIZE_MIN = 20
CELL_SIZE_MAX = 80
CELL_SIZE_STEP = 5
DEFAULT_CELL_SIZE = 40

# Organicness slider (percent)
ORGANICNESS_MIN = 0
ORGANICNESS_MAX = 100
ORGANICNESS_STEP = 10
DEFAULT_ORGANICNESS = 100

# Animation speed slider (milliseconds per fill wave)
SPEED_MIN = 30
SPEED_MAX = 300
SPEED_STEP = 10
DEFAULT_ANIMATION_SPEED = 100

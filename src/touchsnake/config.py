from __future__ import annotations

# Simulation
GRID_SIZE = 20
TICK_MS = 150
MAX_CATCHUP_TICKS = 3
FOOD_POINTS = 10

# Window
WIDTH, HEIGHT = 480, 800
FPS = 60

# Colours
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GREEN = (0, 200, 0)
DARK_GREEN = (0, 140, 0)
RED = (220, 30, 30)
GREY = (50, 50, 50)
BORDER = (0, 255, 0)

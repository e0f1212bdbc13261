# config.py
from dataclasses import dataclass, field
from typing import List, Tuple

# ----- Window & grid -----
CELL_SIZE = 10          # pixels per grid cell
GRID_DIVISOR = 20       # viewport pixels per grid cell when deriving grid width
DEFAULT_VIEWPORT = 600
HUD_HEIGHT = 28

# ----- Colors -----
BG     = (20, 20, 24)
FIELD  = (32, 32, 38)
SNAKE  = (200, 200, 200)
HEAD   = (255, 255, 255)
APPLE  = (220, 40, 40)
TEXT   = (220, 220, 230)
ACCENT = (120, 230, 120)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

DIRECTIONS = {
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
}

OPPOSITES = {
    "up": "down",
    "down": "up",
    "left": "right",
    "right": "left",
}


def grid_width_for(viewport_px: int) -> int:
    """Number of cells per side of the square field for a viewport size."""
    return max(viewport_px // GRID_DIVISOR, 1)


# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass
class Config:
    seed: int = 0
    start_speed: int = 220      # ms per tick at score 0
    speed_step: int = 2         # ms removed per point
    min_speed: int = 40         # floor
    walls: bool = True
    start_direction: str = "right"
    start_snake: List[Tuple[int, int]] = field(
        default_factory=lambda: [(3, 7), (2, 7), (1, 7), (0, 7)]
    )
    start_delay_ms: int = 500   # pause between showing the field and the first tick

CFG = Config(seed=0)

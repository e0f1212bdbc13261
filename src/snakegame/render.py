# render.py
from __future__ import annotations

from typing import Tuple

import numpy as np  # type: ignore
import pygame       # type: ignore

from .config import APPLE, ACCENT, BG, CELL_SIZE, FIELD, HEAD, HUD_HEIGHT, SNAKE, TEXT
from .game import GameOver
from .state import GameState

# Board cell codes
EMPTY, BODY, HEAD_CELL, APPLE_CELL = 0, 1, 2, 3

_COLORS = {
    BODY: SNAKE,
    HEAD_CELL: HEAD,
    APPLE_CELL: APPLE,
}


def board(state: GameState, grid_width: int) -> np.ndarray:
    """
    Read-only snapshot of the field as a (grid_width, grid_width) array
    indexed [y, x]. Cells outside the field are dropped.
    Apples are painted first so the snake covers one it is lying on.
    """
    grid = np.zeros((grid_width, grid_width), dtype=np.uint8)

    def inside(x: int, y: int) -> bool:
        return 0 <= x < grid_width and 0 <= y < grid_width

    for x, y in state.get_apples():
        if inside(x, y):
            grid[y, x] = APPLE_CELL

    snake = state.get_snake()
    for x, y in snake[1:]:
        if inside(x, y):
            grid[y, x] = BODY
    hx, hy = snake[0]
    if inside(hx, hy):
        grid[hy, hx] = HEAD_CELL
    return grid


def window_size(grid_width: int) -> Tuple[int, int]:
    arena = grid_width * CELL_SIZE
    return max(arena, 320), arena + HUD_HEIGHT


# ---------- Drawing ----------
def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(gx * CELL_SIZE, HUD_HEIGHT + gy * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, color, rect)


def draw_hud(screen: pygame.Surface, font: pygame.font.Font, score: int, highscore: int) -> None:
    txt = font.render(f"Score: {score}   Highscore: {highscore}", True, TEXT)
    screen.blit(txt, (8, 6))


def draw_game(screen: pygame.Surface, font: pygame.font.Font, state: GameState,
              grid_width: int, highscore: int) -> None:
    screen.fill(BG)
    arena = grid_width * CELL_SIZE
    pygame.draw.rect(screen, FIELD, pygame.Rect(0, HUD_HEIGHT, arena, arena))

    cells = board(state, grid_width)
    for gy, gx in np.argwhere(cells != EMPTY):
        draw_cell(screen, int(gx), int(gy), _COLORS[int(cells[gy, gx])])

    draw_hud(screen, font, state.get_score(), highscore)


def _centered(screen: pygame.Surface, font: pygame.font.Font, lines) -> None:
    width, height = screen.get_size()
    top = height // 2 - 16 * len(lines)
    for i, (text, color) in enumerate(lines):
        surf = font.render(text, True, color)
        screen.blit(surf, surf.get_rect(center=(width // 2, top + i * 28)))


def draw_start(screen: pygame.Surface, font: pygame.font.Font, highscore: int) -> None:
    screen.fill(BG)
    _centered(screen, font, [
        ("SNAKE", (240, 240, 250)),
        ("Press SPACE to start", TEXT),
        (f"Highscore: {highscore}", TEXT),
    ])


def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, result: GameOver) -> None:
    # Dim with translucent overlay
    overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    lines = [
        ("GAME OVER", (240, 240, 250)),
        (f"Your score: {result.score}", TEXT),
    ]
    if result.new_highscore:
        lines.append(("Congratulations, new highscore!", ACCENT))
    lines.append(("Press R to restart", TEXT))
    _centered(screen, font, lines)

# main.py
import argparse
import dataclasses
import logging
from typing import Optional

import pygame # type: ignore

from .config import CFG, DEFAULT_VIEWPORT, Config, grid_width_for
from .controls import RESTART_KEYS, START_KEYS, MidiPad, direction_for_key
from .game import Phase, SnakeGame
from .highscore import DEFAULT_HIGHSCORE_FILE, FileHighscoreStore
from .render import draw_game, draw_game_over, draw_start, window_size

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1
START_EVENT = pygame.USEREVENT + 2


class PygameTimer:
    """Posts TICK_EVENT every interval; restarting means cancel and re-arm."""

    def __init__(self, event_type: int = TICK_EVENT):
        self.event_type = event_type
        self.interval_ms: Optional[int] = None

    def start(self, interval_ms: int) -> None:
        self.interval_ms = interval_ms
        pygame.time.set_timer(self.event_type, interval_ms)

    def stop(self) -> None:
        self.interval_ms = None
        pygame.time.set_timer(self.event_type, 0)
        # drop a tick that was already queued for the old interval
        pygame.event.clear(self.event_type)


def show_intro() -> None:
    print(r"""
  ____              _
 / ___| _ __   __ _| | _____
 \___ \| '_ \ / _` | |/ / _ \
  ___) | | | | (_| |   <  __/
 |____/|_| |_|\__,_|_|\_\___|
""")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Snake")
    parser.add_argument("--grid", type=int, default=None,
                        help="cells per side (default: derived from the display height)")
    parser.add_argument("--speed", type=int, default=CFG.start_speed, help="ms per tick at score 0")
    parser.add_argument("--speed-step", type=int, default=CFG.speed_step, help="ms faster per point")
    parser.add_argument("--min-speed", type=int, default=CFG.min_speed, help="fastest tick in ms")
    parser.add_argument("--no-walls", action="store_true", help="don't end the game at the field edge")
    parser.add_argument("--seed", type=int, default=CFG.seed)
    parser.add_argument("--highscore-file", type=str, default=DEFAULT_HIGHSCORE_FILE)
    parser.add_argument("--midi", action="store_true", help="also listen to a MIDI pad")
    parser.add_argument("--midi-device", type=str, default="Akai MPD18")
    parser.add_argument("--debug", action="store_true", help="log every tick")
    return parser.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> Config:
    return dataclasses.replace(
        CFG,
        seed=args.seed,
        start_speed=args.speed,
        speed_step=args.speed_step,
        min_speed=args.min_speed,
        walls=not args.no_walls,
    )


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    show_intro()
    cfg = config_from_args(args)

    pygame.init()
    grid_width = args.grid
    if grid_width is None:
        viewport = pygame.display.Info().current_h or DEFAULT_VIEWPORT
        grid_width = grid_width_for(viewport)
    logger.info("Creating Snake Game on a %dx%d field", grid_width, grid_width)

    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode(window_size(grid_width))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    game = SnakeGame(grid_width, PygameTimer(), FileHighscoreStore(args.highscore_file), cfg)
    game.prepare()

    pad = MidiPad(args.midi_device)
    if args.midi:
        pad.open()

    showing_field = False
    running = True
    while running:
        # 1) input + scheduled events
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == TICK_EVENT:
                if game.running:
                    game.tick()
            elif event.type == START_EVENT:
                if game.phase is Phase.IDLE:
                    game.start()
            elif event.type == pygame.KEYDOWN:
                direction = direction_for_key(event.key)
                if direction is not None:
                    game.change_direction(direction)
                elif event.key in START_KEYS and not showing_field:
                    showing_field = True
                    pygame.time.set_timer(START_EVENT, cfg.start_delay_ms, loops=1)
                elif event.key in RESTART_KEYS and game.phase is Phase.ENDED:
                    game.prepare()
                    pygame.time.set_timer(START_EVENT, cfg.start_delay_ms, loops=1)

        for direction in pad.poll():
            game.change_direction(direction)

        # 2) render
        if not showing_field:
            draw_start(screen, font, game.highscore)
        else:
            draw_game(screen, font, game.state, grid_width, game.highscore)
            if game.phase is Phase.ENDED and game.last_game is not None:
                draw_game_over(screen, font, game.last_game)
        pygame.display.flip()
        clock.tick(60)

    if game.last_game is not None:
        print(f"Final score: {game.last_game.score} (highscore {game.last_game.highscore})")
    if pad.enabled:
        pad.close()
    pygame.quit()

if __name__ == "__main__":
    main()

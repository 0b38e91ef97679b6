import argparse
import logging
import os

import pygame

from car_dodge import config
from car_dodge.controls import poll
from car_dodge.game_state import GameState
from car_dodge.renderer import Renderer
from car_dodge.scheduler import TickScheduler

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Car dodge: switch lanes to avoid oncoming cars.")
    parser.add_argument("--lanes", type=int, default=config.LANES, help="number of lanes")
    parser.add_argument("--rows", type=int, default=config.ROWS, help="number of rows on screen")
    parser.add_argument("--tick-ms", type=int, default=config.TICK_MS, help="milliseconds between game ticks")
    parser.add_argument("--seed", type=int, default=None, help="seed for obstacle spawning")
    parser.add_argument("--width", type=int, default=config.SCREEN_WIDTH)
    parser.add_argument("--height", type=int, default=config.SCREEN_HEIGHT)
    parser.add_argument("--fullscreen", action="store_true", help="fill the whole screen instead of a window")
    parser.add_argument(
        "--assets",
        default=os.getcwd(),
        help=f"directory holding {config.PLAYER_IMAGE} and {config.ENEMY_IMAGE}",
    )
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def open_window(args):
    if args.fullscreen:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
    else:
        screen = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption("Car Dodge")
    return screen


def run(args):
    pygame.init()
    try:
        screen = open_window(args)
        clock = pygame.time.Clock()

        state = GameState(lanes=args.lanes, rows=args.rows, seed=args.seed)
        scheduler = TickScheduler(state.tick, interval_ms=args.tick_ms)
        state.scheduler = scheduler
        renderer = Renderer.from_assets(screen, args.assets)

        logger.info("Starting: %d lanes, %d rows, tick every %d ms", args.lanes, args.rows, args.tick_ms)
        scheduler.start()

        running = True
        while running:
            if poll(state, pygame.event.get()):
                running = False

            scheduler.update(clock.tick(config.FPS))

            if state.needs_redraw:
                renderer.draw(state.snapshot())
                pygame.display.flip()
                state.needs_redraw = False

        logger.info("Final score: %d", state.score)
        return state
    finally:
        pygame.quit()


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run(args)


if __name__ == "__main__":
    main()

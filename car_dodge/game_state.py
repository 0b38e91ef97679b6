import logging
from collections import namedtuple
from enum import Enum

from gymnasium.utils import seeding

from car_dodge.config import LANES, ROWS
from car_dodge.obstacles import ObstacleSet

logger = logging.getLogger(__name__)


class Direction(Enum):
    LEFT = "left"
    RIGHT = "right"


class Phase(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


Snapshot = namedtuple(
    "Snapshot",
    ["lanes", "rows", "player_lane", "player_row", "obstacles", "score", "game_over"],
)


class GameState:
    """
    The simulation behind the game: player position, oncoming cars, score
    and the game-over flag.

    ``tick()`` is driven by a fixed-interval scheduler, ``move_player()`` and
    ``restart()`` by input. If a scheduler is attached it is stopped when the
    player crashes and started again on restart.
    """

    def __init__(self, lanes=LANES, rows=ROWS, np_random=None, seed=None, scheduler=None):
        if lanes < 1:
            raise ValueError(f"lanes must be at least 1, got {lanes}")
        if rows < 3:
            raise ValueError(f"rows must be at least 3, got {rows}")

        self.lanes = lanes
        self.rows = rows
        self.player_row = rows - 2

        if np_random is None:
            np_random, _ = seeding.np_random(seed)
        self.np_random = np_random
        self.scheduler = scheduler

        self.obstacles = ObstacleSet()
        self.player_lane = lanes // 2
        self.score = 0
        self.game_over = False
        self.needs_redraw = True

    @property
    def phase(self):
        return Phase.GAME_OVER if self.game_over else Phase.PLAYING

    def tick(self):
        if self.game_over:
            return False

        # --- 1. Spawn ---
        if self.np_random.integers(0, 2) == 1:
            self.obstacles.append(int(self.np_random.integers(0, self.lanes)), 0)

        # --- 2. Advance and despawn ---
        self.obstacles.for_each_removable(self._advance)

        # --- 3. Collision ---
        for obstacle in self.obstacles:
            if obstacle.row == self.player_row and obstacle.lane == self.player_lane:
                self._crash()
                break

        # --- 4. Score ---
        self.score += 1
        if self.game_over:
            logger.info("Crashed in lane %d with score %d", self.player_lane, self.score)
        self.needs_redraw = True
        return True

    def _advance(self, obstacle):
        obstacle.row += 1
        return obstacle.row >= self.rows

    def _crash(self):
        self.game_over = True
        if self.scheduler is not None:
            self.scheduler.stop()

    def move_player(self, direction):
        direction = Direction(direction)
        if self.game_over:
            return False

        old_lane = self.player_lane
        if direction is Direction.LEFT and self.player_lane > 0:
            self.player_lane -= 1
        elif direction is Direction.RIGHT and self.player_lane < self.lanes - 1:
            self.player_lane += 1
        self.needs_redraw = True
        return self.player_lane != old_lane

    def restart(self):
        self.obstacles.clear()
        self.score = 0
        self.game_over = False
        self.player_lane = self.lanes // 2
        self.needs_redraw = True
        if self.scheduler is not None:
            self.scheduler.start()
        logger.debug("Restarted")

    def snapshot(self):
        return Snapshot(
            lanes=self.lanes,
            rows=self.rows,
            player_lane=self.player_lane,
            player_row=self.player_row,
            obstacles=tuple(obstacle.position for obstacle in self.obstacles),
            score=self.score,
            game_over=self.game_over,
        )

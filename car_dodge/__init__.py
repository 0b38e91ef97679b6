from car_dodge.game_state import Direction, GameState, Phase, Snapshot
from car_dodge.obstacles import Obstacle, ObstacleSet
from car_dodge.scheduler import TickScheduler

__all__ = [
    "Direction",
    "GameState",
    "Obstacle",
    "ObstacleSet",
    "Phase",
    "Snapshot",
    "TickScheduler",
]

import os

import gymnasium as gym
import numpy as np
import pygame
from gymnasium.spaces import MultiDiscrete

from car_dodge.config import LANES, ROWS
from car_dodge.game_state import Direction, GameState
from car_dodge.renderer import Renderer

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


class GameEnv(gym.Env):
    """
    Lane-dodging arcade racer. The car sits near the bottom of a multi-lane
    road and steps left or right to avoid oncoming traffic; every tick
    survived is worth one point.
    """
    metadata = {"render_modes": ["rgb_array"]}

    user_guide = (
        "Controls: ← and → to change lanes."
    )

    game_description = (
        "Dodge oncoming cars by switching lanes. Survive as long as you can."
    )

    auto_advance = True

    # --- Constants ---
    SCREEN_WIDTH, SCREEN_HEIGHT = 640, 400

    SURVIVAL_REWARD = 1.0
    CRASH_PENALTY = -10.0

    def __init__(self, render_mode="rgb_array", lanes=LANES, rows=ROWS):
        super().__init__()

        self.observation_space = gym.spaces.Box(
            low=0, high=255, shape=(self.SCREEN_HEIGHT, self.SCREEN_WIDTH, 3), dtype=np.uint8
        )
        self.action_space = MultiDiscrete([5, 2, 2])

        pygame.init()
        pygame.font.init()
        self.screen = pygame.Surface((self.SCREEN_WIDTH, self.SCREEN_HEIGHT))
        self.renderer = Renderer(self.screen)

        self.render_mode = render_mode
        self.state = GameState(lanes=lanes, rows=rows)
        self.steps = 0

        self.reset()

        self.validate_implementation()

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)

        self.state.np_random = self.np_random
        self.state.restart()
        self.steps = 0

        return self._get_observation(), self._get_info()

    def step(self, action):
        if self.state.game_over:
            return self._get_observation(), 0, True, False, self._get_info()

        movement = action[0]
        if movement == 3:  # Left
            self.state.move_player(Direction.LEFT)
        elif movement == 4:  # Right
            self.state.move_player(Direction.RIGHT)

        self.state.tick()
        self.steps += 1

        terminated = self.state.game_over
        reward = self.CRASH_PENALTY if terminated else self.SURVIVAL_REWARD

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self):
        return self._get_observation()

    def _get_observation(self):
        self.renderer.draw(self.state.snapshot())
        arr = pygame.surfarray.array3d(self.screen)
        return np.transpose(arr, (1, 0, 2)).astype(np.uint8)

    def _get_info(self):
        return {
            "score": self.state.score,
            "steps": self.steps,
            "player_lane": self.state.player_lane,
            "obstacles": len(self.state.obstacles),
        }

    def close(self):
        pygame.quit()

    def validate_implementation(self):
        # Test action space
        assert self.action_space.shape == (3,)
        assert self.action_space.nvec.tolist() == [5, 2, 2]

        # Test observation space
        test_obs = self._get_observation()
        assert test_obs.shape == (self.SCREEN_HEIGHT, self.SCREEN_WIDTH, 3)
        assert test_obs.dtype == np.uint8

        # Test reset
        obs, info = self.reset()
        assert obs.shape == (self.SCREEN_HEIGHT, self.SCREEN_WIDTH, 3)
        assert isinstance(info, dict)

        # Test step
        test_action = self.action_space.sample()
        obs, reward, term, trunc, info = self.step(test_action)
        assert obs.shape == (self.SCREEN_HEIGHT, self.SCREEN_WIDTH, 3)
        assert isinstance(reward, (int, float))
        assert isinstance(term, bool)
        assert not trunc
        assert isinstance(info, dict)

        print("✓ Implementation validated successfully")


if __name__ == "__main__":
    from policies.policy_car_dodge import policy

    env = GameEnv()
    obs, info = env.reset(seed=0)
    terminated = False
    while not terminated and info["steps"] < 2000:
        obs, reward, terminated, truncated, info = env.step(policy(env))
    print(f"Episode finished: {info}")
    env.close()

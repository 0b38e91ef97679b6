"""Tests for the gymnasium environment wrapper."""

import numpy as np
import pytest

from car_dodge.game_env import GameEnv
from car_dodge.game_state import Phase

from conftest import ScriptedRandom


@pytest.fixture
def env():
    env = GameEnv()
    yield env
    env.close()


class TestGameEnv:
    def test_spaces(self, env):
        assert env.action_space.nvec.tolist() == [5, 2, 2]
        assert env.observation_space.shape == (400, 640, 3)

    def test_reset(self, env):
        obs, info = env.reset(seed=0)
        assert obs.shape == (400, 640, 3)
        assert obs.dtype == np.uint8
        assert info == {"score": 0, "steps": 0, "player_lane": 1, "obstacles": 0}
        assert env.state.phase is Phase.PLAYING

    def test_reset_shares_env_generator(self, env):
        env.reset(seed=5)
        assert env.state.np_random is env.np_random

    def test_step_moves_and_ticks(self, env):
        env.reset(seed=0)
        env.state.np_random = ScriptedRandom()
        obs, reward, terminated, truncated, info = env.step([3, 0, 0])
        assert reward == GameEnv.SURVIVAL_REWARD
        assert terminated is False
        assert truncated is False
        assert info["player_lane"] == 0
        assert info["score"] == 1
        assert info["steps"] == 1

        env.step([4, 0, 0])
        env.step([4, 0, 0])
        assert env.state.player_lane == 2

    def test_other_movements_do_nothing(self, env):
        env.reset(seed=0)
        env.state.np_random = ScriptedRandom()
        for movement in (0, 1, 2):
            env.step([movement, 1, 1])
        assert env.state.player_lane == 1

    def test_crash_terminates(self, env):
        env.reset(seed=0)
        env.state.np_random = ScriptedRandom()
        env.state.obstacles.append(1, env.state.player_row - 1)
        obs, reward, terminated, truncated, info = env.step([0, 0, 0])
        assert terminated is True
        assert reward == GameEnv.CRASH_PENALTY
        assert info["score"] == 1

        obs, reward, terminated, truncated, info = env.step([3, 0, 0])
        assert terminated is True
        assert reward == 0
        assert info["score"] == 1
        assert info["player_lane"] == 1

    def test_reset_after_crash(self, env):
        env.reset(seed=0)
        env.state.np_random = ScriptedRandom()
        env.state.obstacles.append(1, env.state.player_row - 1)
        env.step([0, 0, 0])
        obs, info = env.reset(seed=1)
        assert info["score"] == 0
        assert env.state.game_over is False

    def test_same_seed_same_episode(self, env):
        def rollout(seed):
            env.reset(seed=seed)
            frames = []
            for _ in range(30):
                obs, reward, terminated, _, info = env.step([0, 0, 0])
                frames.append((env.state.snapshot(), reward))
                if terminated:
                    break
            return frames

        assert rollout(11) == rollout(11)

    def test_render_matches_observation(self, env):
        obs, _ = env.reset(seed=0)
        assert np.array_equal(env.render(), obs)

    def test_wider_road(self):
        env = GameEnv(lanes=5, rows=12)
        try:
            obs, info = env.reset(seed=0)
            assert obs.shape == (400, 640, 3)
            assert info["player_lane"] == 2
            assert env.state.player_row == 10
            env.state.np_random = ScriptedRandom()
            for _ in range(4):
                env.step([4, 0, 0])
            assert env.state.player_lane == 4
        finally:
            env.close()

"""
Unit tests for agents and the evaluator.
"""
import numpy as np
import pytest
from diamond_miners import DiamondMinersEnv, GridConfig
from diamond_miners.environment import BREAK_ACTION, NUM_ACTIONS
from agents import ExplorerAgent, RandomAgent
from evaluation import Evaluator


# ============================================================================
# Random Agent Tests
# ============================================================================

class TestRandomAgent:
    """Test the random baseline."""

    def test_selects_only_valid_actions(self) -> None:
        env = DiamondMinersEnv()
        obs, _ = env.reset()
        agent = RandomAgent(seed=1)
        mask = env.get_action_mask()
        for _ in range(50):
            assert mask[agent.select_action(obs, mask)]

    def test_empty_mask_returns_zero(self) -> None:
        agent = RandomAgent(seed=1)
        obs = np.zeros((8, 16), dtype=np.int8)
        assert agent.select_action(obs, np.zeros(NUM_ACTIONS, dtype=bool)) == 0

    def test_without_mask_stays_in_action_space(self) -> None:
        agent = RandomAgent(seed=1)
        obs = np.zeros((8, 16), dtype=np.int8)
        for _ in range(20):
            assert 0 <= agent.select_action(obs) < NUM_ACTIONS


# ============================================================================
# Explorer Agent Tests
# ============================================================================

class TestExplorerAgent:
    """Test the wall-breaking explorer."""

    def test_finds_player(self) -> None:
        env = DiamondMinersEnv()
        obs, _ = env.reset()
        assert ExplorerAgent().find_player(obs) == (0, 0)

    def test_first_step_heads_for_breakable_wall(self) -> None:
        env = DiamondMinersEnv()
        obs, _ = env.reset()
        agent = ExplorerAgent()
        assert agent.select_action(obs, env.get_action_mask()) == 0  # move up

    def test_breaks_when_facing_breakable_wall(self) -> None:
        env = DiamondMinersEnv()
        env.reset()
        for action in (0, 2, 2):
            obs, *_ = env.step(action)
        agent = ExplorerAgent()
        assert agent.select_action(obs, env.get_action_mask()) == BREAK_ACTION

    def test_turns_then_breaks_without_mask(self) -> None:
        config = GridConfig.from_rows(["+", "."], start=(0, 0), start_facing=(0, -1))
        env = DiamondMinersEnv(config=config)
        obs, _ = env.reset()
        agent = ExplorerAgent(grid_height=2, grid_width=1)
        assert agent.select_action(obs) == 4  # turn up
        assert agent.select_action(obs) == BREAK_ACTION

    def test_explores_more_than_start(self) -> None:
        env = DiamondMinersEnv(max_steps=100)
        obs, info = env.reset()
        agent = ExplorerAgent()
        done = False
        while not done:
            action = agent.select_action(obs, env.get_action_mask())
            obs, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated
        assert info["walls_broken"] >= 1
        assert info["discovered"] > 23


# ============================================================================
# Evaluator Tests
# ============================================================================

class TestEvaluator:
    """Test agent evaluation."""

    def test_evaluate_metrics(self) -> None:
        evaluator = Evaluator(num_episodes=2, max_steps=20)
        results = evaluator.evaluate(RandomAgent(seed=0))
        assert set(results) == {
            "avg_reward",
            "avg_steps",
            "avg_discovered",
            "discovered_fraction",
            "avg_walls_broken",
        }
        assert results["avg_steps"] == 20
        assert 15 <= results["avg_discovered"] <= 128
        assert 0.0 < results["discovered_fraction"] <= 1.0

    def test_explorer_beats_start_region(self) -> None:
        evaluator = Evaluator(num_episodes=1, max_steps=60)
        stats = evaluator.run_episode(ExplorerAgent())
        assert stats.steps == 60
        assert stats.walls_broken >= 1
        assert stats.discovered_cells > 15

    def test_compare_returns_each_agent(self) -> None:
        evaluator = Evaluator(num_episodes=1, max_steps=10)
        results = evaluator.compare({
            "Random": RandomAgent(seed=0),
            "Explorer": ExplorerAgent(),
        })
        assert set(results) == {"Random", "Explorer"}

    @pytest.mark.parametrize("num_episodes", [0, -3])
    def test_non_positive_episode_count_raises_error(
        self, num_episodes: int
    ) -> None:
        with pytest.raises(ValueError, match="episodes must be positive"):
            Evaluator(num_episodes=num_episodes)

    def test_zero_steps_raises_error(self) -> None:
        with pytest.raises(ValueError, match="Steps per episode"):
            Evaluator(max_steps=0)

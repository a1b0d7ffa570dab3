"""
Evaluation module for Diamond Miners agents.

Runs agents against fresh environments and collects exploration
statistics.
"""
from dataclasses import dataclass
from typing import Dict, Optional

from diamond_miners.environment import DiamondMinersEnv
from diamond_miners.grid import GridConfig

from agents.base_agent import BaseAgent


# ============================================================================
# Episode Statistics
# ============================================================================

@dataclass
class EpisodeStats:
    """Statistics for a single episode."""

    total_reward: float = 0.0
    steps: int = 0
    discovered_cells: int = 0
    walls_broken: int = 0


# ============================================================================
# Evaluator
# ============================================================================

class Evaluator:
    """Evaluates agent performance without learning."""

    def __init__(
        self,
        grid_config: Optional[GridConfig] = None,
        num_episodes: int = 10,
        max_steps: int = 200,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            grid_config: Grid configuration for evaluation.
            num_episodes: Number of episodes to run.
            max_steps: Steps per episode.
        """
        if num_episodes < 1:
            raise ValueError("Number of episodes must be positive")
        if max_steps < 1:
            raise ValueError("Steps per episode must be positive")
        self.grid_config = grid_config or GridConfig()
        self.num_episodes = num_episodes
        self.max_steps = max_steps

    def run_episode(self, agent: BaseAgent) -> EpisodeStats:
        """Play a single episode and return its statistics."""
        env = DiamondMinersEnv(config=self.grid_config, max_steps=self.max_steps)
        observation, info = env.reset()
        agent.reset()
        stats = EpisodeStats(discovered_cells=info["discovered"])

        while True:
            valid_actions = env.get_action_mask()
            action = agent.select_action(observation, valid_actions)
            observation, reward, terminated, truncated, info = env.step(action)

            stats.total_reward += float(reward)
            stats.steps += 1
            if terminated or truncated:
                break

        stats.discovered_cells = info["discovered"]
        stats.walls_broken = info["walls_broken"]
        return stats

    def evaluate(self, agent: BaseAgent) -> Dict[str, float]:
        """
        Evaluate an agent over multiple episodes.

        Returns:
            Dictionary with evaluation metrics.
        """
        total_cells = self.grid_config.width * self.grid_config.height
        total_reward = 0.0
        total_steps = 0
        total_discovered = 0
        total_broken = 0

        for _ in range(self.num_episodes):
            stats = self.run_episode(agent)
            total_reward += stats.total_reward
            total_steps += stats.steps
            total_discovered += stats.discovered_cells
            total_broken += stats.walls_broken

        avg_discovered = total_discovered / self.num_episodes
        return {
            "avg_reward": total_reward / self.num_episodes,
            "avg_steps": total_steps / self.num_episodes,
            "avg_discovered": avg_discovered,
            "discovered_fraction": avg_discovered / total_cells,
            "avg_walls_broken": total_broken / self.num_episodes,
        }

    def compare(
        self, agents: Dict[str, BaseAgent]
    ) -> Dict[str, Dict[str, float]]:
        """
        Compare multiple agents.

        Args:
            agents: Dictionary of agent_name -> agent.

        Returns:
            Dictionary of agent_name -> evaluation metrics.
        """
        results = {}
        for name, agent in agents.items():
            print(f"Evaluating {name}...")
            results[name] = self.evaluate(agent)
        return results

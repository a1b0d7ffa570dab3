"""
Evaluation module for Diamond Miners agents.

Provides episode statistics and agent comparison.
"""
from .evaluator import EpisodeStats, Evaluator

__all__ = [
    "EpisodeStats",
    "Evaluator",
]

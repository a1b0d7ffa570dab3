"""
Diamond Miners agents module.

Provides agents for exploring the playing field:
- RandomAgent: Baseline random selection
- ExplorerAgent: Walks to the nearest breakable wall and breaks it
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent
from .explorer_agent import ExplorerAgent

__all__ = [
    "BaseAgent",
    "RandomAgent",
    "ExplorerAgent",
]

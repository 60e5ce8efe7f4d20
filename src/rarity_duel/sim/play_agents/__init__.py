"""Play agent implementations for headless battle simulation.

Re-exports the base class and all concrete agent implementations so
consumers can do::

    from rarity_duel.sim.play_agents import PlayAgent, RandomAgent
"""

from .base import PlayAgent
from .random_agent import GreedyAgent, RandomAgent

__all__ = ["PlayAgent", "RandomAgent", "GreedyAgent"]

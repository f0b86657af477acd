"""
Hold'em seats that make betting decisions.
Contains the terminal-driven human agent and the random agent.
"""

from .human_agent import HumanAgent
from .random_agent import RandomAgent

__all__ = ["HumanAgent", "RandomAgent"]

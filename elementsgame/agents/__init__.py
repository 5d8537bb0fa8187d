"""Agents that can take a seat in a game."""

from elementsgame.agents.human_agent import HumanAgent

__all__ = ["HumanAgent"]

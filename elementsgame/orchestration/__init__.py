"""Game orchestration."""

from elementsgame.orchestration.game_runner import GameResult, GameRunner

__all__ = ["GameResult", "GameRunner"]

"""Agent protocol - interface a seat at the table implements."""

from typing import Protocol

from elementsgame.engine import Action, PlayerView


class AgentProtocol(Protocol):
    """Interface for whoever holds the device on a given turn."""

    @property
    def name(self) -> str:
        """Display name for the agent."""
        ...

    def get_action(
        self,
        player_view: PlayerView,
        legal_actions: list[Action],
    ) -> Action | None:
        """Choose an action given the player view and legal actions.

        Args:
            player_view: Snapshot with only the current player's hand and public info.
            legal_actions: List of valid actions to choose from.

        Returns:
            One of the legal actions, or None to draw (or pass once a card
            has been played).
        """
        ...

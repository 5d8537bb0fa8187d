"""Single hot-seat game runner."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from elementsgame.engine import (
    EndReason,
    InvalidMoveError,
    PlayerView,
    apply_action,
    get_legal_actions,
    init_game,
)
from elementsgame.engine.rules import DrawCards, EndTurn

if TYPE_CHECKING:
    from elementsgame.agent.protocol import AgentProtocol

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """Result of a completed game."""

    winners: list[int]
    end_reason: Optional[EndReason]
    num_turns: int
    num_players: int


class GameRunner:
    """Runs a single Elements game, one agent per seat, until it ends."""

    def __init__(
        self,
        agents: list["AgentProtocol"],
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        max_turns: int = 1000,
        on_turn_start: Optional[Callable[[PlayerView], None]] = None,
        on_invalid_move: Optional[Callable[[str], None]] = None,
    ):
        self._agents = agents
        self._seed = seed
        self._rng = rng
        self._max_turns = max_turns
        self._on_turn_start = on_turn_start
        self._on_invalid_move = on_invalid_move

    def run(self) -> GameResult:
        """Run the game and return the result."""
        state = init_game(len(self._agents), seed=self._seed, rng=self._rng)
        num_turns = 0
        turn_started = False

        while not state.is_over and num_turns < self._max_turns:
            player_view = PlayerView.from_state(state)
            if not turn_started:
                if self._on_turn_start is not None:
                    self._on_turn_start(player_view)
                turn_started = True

            legal = get_legal_actions(state)
            if not legal:
                break

            agent = self._agents[state.current_player]
            action = agent.get_action(player_view, legal)
            if action is None:
                action = next(
                    (a for a in legal if isinstance(a, (DrawCards, EndTurn))),
                    legal[0],
                )

            try:
                state = apply_action(state, action)
            except InvalidMoveError as exc:
                logger.debug("%s tried an invalid move: %s", agent.name, exc.message)
                if self._on_invalid_move is not None:
                    self._on_invalid_move(exc.message)
                continue

            # A fresh lock means the turn passed on.
            if state.lock.cards_played == 0 or state.is_over:
                num_turns += 1
                turn_started = False

        if not state.is_over:
            logger.warning("Game stopped after %d turns without a winner", num_turns)
        return GameResult(
            winners=list(state.winners),
            end_reason=state.end_reason,
            num_turns=num_turns,
            num_players=state.player_count,
        )

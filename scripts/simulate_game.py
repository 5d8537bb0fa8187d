"""Simulate a game with random legal actions to exercise the engine."""

import random

from elementsgame.engine import PlayerView, Action
from elementsgame.engine.rules import PlayCard
from elementsgame.orchestration.game_runner import GameRunner


class RandomSeat:
    def __init__(self, name, rng):
        self.name = name
        self._rng = rng

    def get_action(self, view: PlayerView, actions: list[Action]) -> Action | None:
        if not actions:
            return None

        # Log the last move from history to see the game progress
        if view.history:
            print(f"> {view.history[-1]}")

        # Prefer playing over drawing to make game progress
        play_actions = [a for a in actions if isinstance(a, PlayCard)]
        if play_actions:
            return self._rng.choice(play_actions)
        return self._rng.choice(actions)

def main():
    rng = random.Random(42)
    seats = [RandomSeat(f"Seat{i + 1}", rng) for i in range(4)]

    runner = GameRunner(seats, seed=42)
    result = runner.run()

    winners = ", ".join(f"Player {i + 1}" for i in result.winners) or "None"
    print(f"Game finished ({result.end_reason}). Winners: {winners}")
    print(f"Turns: {result.num_turns}")

if __name__ == "__main__":
    main()

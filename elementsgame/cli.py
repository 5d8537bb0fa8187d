"""CLI entry point."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="Elements, a hot-seat card game for 2+ players on one device")


def _configure_logging(level: str) -> None:
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        raise typer.BadParameter(f"Unknown log level: {level}")
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _hand_over(player_view) -> None:
    typer.echo(f"\n=== Pass the device to {player_view.label.upper()} ===")
    typer.prompt("Press Enter when ready", default="", show_default=False)


def _show_invalid(message: str) -> None:
    typer.secho(message, fg=typer.colors.RED)


@app.command()
def play(
    players: int = typer.Option(
        2,
        "--players",
        "-n",
        envvar="ELEMENTS_PLAYERS",
        help="Number of players sharing the device",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", "-s", envvar="ELEMENTS_SEED", help="Random seed"
    ),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        envvar="ELEMENTS_LOG_LEVEL",
        help="Logging level: DEBUG, INFO, WARNING or ERROR",
    ),
) -> None:
    """Run a single hot-seat Elements game."""
    from elementsgame.agents.human_agent import HumanAgent
    from elementsgame.engine import ConfigurationError, EndReason
    from elementsgame.orchestration.game_runner import GameRunner

    _configure_logging(log_level)
    agents = [HumanAgent(name=f"Player {i + 1}") for i in range(players)]
    runner = GameRunner(
        agents,
        seed=seed,
        on_turn_start=_hand_over,
        on_invalid_move=_show_invalid,
    )
    try:
        result = runner.run()
    except ConfigurationError as exc:
        raise typer.BadParameter(exc.message, param_hint="--players") from exc

    names = ", ".join(f"Player {i + 1}" for i in result.winners) or "None"
    if result.end_reason is EndReason.DECK_EXHAUSTED:
        typer.echo(f"Game Over! Deck Empty. Winners: {names}")
    elif result.end_reason is EndReason.EMPTY_HAND:
        typer.echo(f"{names} wins. Congratulations on becoming the supreme samurai!")
    else:
        typer.echo("Game stopped without a winner")
    typer.echo(f"Turns: {result.num_turns}")


@app.command()
def rules() -> None:
    """Print a short summary of the rules."""
    typer.echo(RULES_TEXT)


RULES_TEXT = """\
Match the top card by color or by shape. Within a turn you may keep playing
cards; the first card that matches on only one of color or shape locks the
turn to that property.
Single cards show only a color or only a shape and cannot go on other Single
cards.
An Elements card must be the only card of your turn; choose its color and
shape, and it counts as that card from then on. It can never be your last
card.
Instead of playing you may draw 3 cards: this reverses the direction and
ends your turn.
Empty your hand to win. When the deck runs out, the fewest cards win."""


if __name__ == "__main__":
    app()

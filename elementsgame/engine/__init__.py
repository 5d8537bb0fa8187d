"""Game engine for Elements."""

from elementsgame.engine.card import PLAIN_COLORS, PLAIN_SHAPES, Card, CardType, Color, Shape
from elementsgame.engine.deck import DECK_SIZE, create_deck
from elementsgame.engine.errors import (
    ConfigurationError,
    GameError,
    IllegalCommandError,
    InvalidMoveError,
)
from elementsgame.engine.game_state import (
    EffectiveTop,
    EndReason,
    MatchState,
    PlayerView,
    TurnLock,
    effective_top,
)
from elementsgame.engine.rules import (
    Action,
    PlayCard,
    DrawCards,
    ResolveElements,
    EndTurn,
    get_legal_actions,
    is_valid_move,
    apply_action,
    init_game,
    play_card,
    draw_cards,
    resolve_elements,
    end_turn,
)

__all__ = [
    "Card",
    "CardType",
    "Color",
    "Shape",
    "PLAIN_COLORS",
    "PLAIN_SHAPES",
    "DECK_SIZE",
    "create_deck",
    "GameError",
    "InvalidMoveError",
    "ConfigurationError",
    "IllegalCommandError",
    "EffectiveTop",
    "EndReason",
    "MatchState",
    "PlayerView",
    "TurnLock",
    "effective_top",
    "Action",
    "PlayCard",
    "DrawCards",
    "ResolveElements",
    "EndTurn",
    "get_legal_actions",
    "is_valid_move",
    "apply_action",
    "init_game",
    "play_card",
    "draw_cards",
    "resolve_elements",
    "end_turn",
]

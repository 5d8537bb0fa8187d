"""Elements rules: move validation, legal actions and state transitions."""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Union

from elementsgame.engine.card import PLAIN_COLORS, PLAIN_SHAPES, Card, CardType, Color, Shape
from elementsgame.engine.errors import (
    ConfigurationError,
    IllegalCommandError,
    InvalidMoveError,
)
from elementsgame.engine.game_state import (
    EffectiveTop,
    EndReason,
    MatchState,
    TurnLock,
    effective_top,
    player_label,
)

logger = logging.getLogger(__name__)

HAND_SIZE = 8
DRAW_COUNT = 3


@dataclass
class PlayCard:
    """Action: play the card at ``index`` of the current hand."""

    index: int


@dataclass
class DrawCards:
    """Action: draw up to three cards, reverse direction and end the turn."""

    pass


@dataclass
class ResolveElements:
    """Action: choose the color and shape of the Elements card just played."""

    color: Color
    shape: Shape


@dataclass
class EndTurn:
    """Action: pass after having played at least one card."""

    pass


Action = Union[PlayCard, DrawCards, ResolveElements, EndTurn]


def init_game(
    player_count: int,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> MatchState:
    """Create initial match state: deal 8 cards each, one card on discard.

    The flipped card may be an Elements card; it then stays unresolved and
    any card can be played on it.
    """
    from elementsgame.engine.deck import DECK_SIZE, create_deck

    if player_count < 2:
        raise ConfigurationError(f"Need at least 2 players, got {player_count}")
    if player_count * HAND_SIZE + 1 > DECK_SIZE:
        raise ConfigurationError(
            f"{player_count} players need {player_count * HAND_SIZE + 1} cards, "
            f"the deck has {DECK_SIZE}"
        )

    if rng is None:
        rng = random.Random(seed)
    deck = create_deck(rng=rng)
    hands: List[List[Card]] = [[] for _ in range(player_count)]
    for hand in hands:
        for _ in range(HAND_SIZE):
            hand.append(deck.pop())
    discard = [deck.pop()]
    starting_player = rng.randrange(player_count)

    logger.debug(
        "New game: %d players, %s starts, top card %s",
        player_count,
        player_label(starting_player),
        discard[-1],
    )
    return MatchState(
        hands=hands,
        deck=deck,
        discard_pile=discard,
        current_player=starting_player,
        direction=1,
        rng=rng,
    )


def _colors_match(color: Optional[Color], other: Optional[Color]) -> bool:
    return color == other and color is not Color.NONE


def _shapes_match(shape: Optional[Shape], other: Optional[Shape]) -> bool:
    return shape == other and shape is not Shape.NONE


def _would_strand_elements(card: Card, hand: List[Card]) -> bool:
    """Check the rule that an Elements card can never be the last card played."""
    if card.is_elements and len(hand) == 1:
        return True
    if len(hand) == 2:
        other = next((c for c in hand if c is not card), None)
        if other is not None and other.is_elements:
            return True
    return False


def _invalid_reason(card: Card, state: MatchState) -> Optional[str]:
    """Return why ``card`` cannot be played now, or None when it can."""
    lock = state.lock

    if _would_strand_elements(card, state.current_hand):
        return "an Elements card cannot be the last card in hand"

    if card.is_elements:
        if lock.cards_played > 0:
            return "an Elements card must be the only card of the turn"
        return None

    top = effective_top(state)
    if top is None:
        return None

    if card.type is CardType.SINGLE and top.type is CardType.SINGLE:
        return "a Single card cannot be played on a Single card"

    if lock.color is not None and card.color != lock.color:
        return f"this turn is locked to {lock.color.value}"
    if lock.shape is not None and card.shape != lock.shape:
        return f"this turn is locked to {lock.shape.value}"

    if top.type is CardType.VIRTUAL:
        if top.color is not None and card.color != top.color:
            return f"must play {top.color.value}"
        if top.shape is not None and card.shape != top.shape:
            return f"must play {top.shape.value}"
        return None

    if top.is_unresolved_elements:
        return None

    color_match = _colors_match(card.color, top.color)
    shape_match = _shapes_match(card.shape, top.shape)
    if lock.color is not None:
        return None if color_match else "card does not match the color"
    if lock.shape is not None:
        return None if shape_match else "card does not match the shape"
    if color_match or shape_match:
        return None
    return "card matches neither color nor shape"


def is_valid_move(card: Card, state: MatchState) -> bool:
    """Check if a card from the current hand can be played. Never mutates."""
    return _invalid_reason(card, state) is None


def get_legal_actions(state: MatchState) -> List[Action]:
    """Return all legal actions for the current player."""
    if state.is_over:
        return []

    if state.pending_choice:
        return [
            ResolveElements(color=color, shape=shape)
            for color in PLAIN_COLORS
            for shape in PLAIN_SHAPES
        ]

    actions: List[Action] = [
        PlayCard(index=i)
        for i, card in enumerate(state.current_hand)
        if is_valid_move(card, state)
    ]
    if state.lock.cards_played == 0:
        actions.append(DrawCards())
    else:
        actions.append(EndTurn())
    return actions


def _ensure_running(state: MatchState) -> None:
    if state.is_over:
        raise IllegalCommandError("The game is over")


def _ensure_no_pending_choice(state: MatchState) -> None:
    if state.pending_choice:
        raise IllegalCommandError("Choose a color and shape for the Elements card first")


def _lock_single_dimension(
    lock: TurnLock,
    card: Card,
    color: Optional[Color],
    shape: Optional[Shape],
) -> None:
    """Lock the one dimension ``card`` shares with the previous card, if only one."""
    color_match = _colors_match(card.color, color)
    shape_match = _shapes_match(card.shape, shape)
    if color_match and not shape_match:
        lock.color = card.color
    elif shape_match and not color_match:
        lock.shape = card.shape


def _update_lock(state: MatchState, card: Card, previous_top: Optional[EffectiveTop]) -> None:
    lock = state.lock
    if lock.cards_played == 1:
        if previous_top is None:
            return
        if previous_top.type is CardType.SINGLE:
            if previous_top.color is Color.NONE:
                lock.shape = previous_top.shape
            elif previous_top.shape is Shape.NONE:
                lock.color = previous_top.color
        elif previous_top.type is CardType.VIRTUAL:
            if previous_top.color is not None:
                lock.color = previous_top.color
            if previous_top.shape is not None:
                lock.shape = previous_top.shape
        else:
            _lock_single_dimension(lock, card, previous_top.color, previous_top.shape)
    elif lock.is_open:
        # Compared with the raw card below the one just played.
        below = state.discard_pile[-2]
        _lock_single_dimension(lock, card, below.color, below.shape)


def play_card(state: MatchState, index: int) -> MatchState:
    """Play the card at ``index`` of the current hand.

    Raises InvalidMoveError, leaving the state untouched, when the card is
    not playable now.
    """
    _ensure_running(state)
    _ensure_no_pending_choice(state)
    hand = state.current_hand
    if not 0 <= index < len(hand):
        raise IllegalCommandError(f"No card at index {index}")

    card = hand[index]
    previous_top = effective_top(state)
    reason = _invalid_reason(card, state)
    if reason is not None:
        logger.debug("%s rejected %s: %s", player_label(state.current_player), card, reason)
        raise InvalidMoveError(f"Invalid move: {reason}")

    label = player_label(state.current_player)
    hand.pop(index)
    state.discard_pile.append(card)
    state.lock.cards_played += 1

    if card.is_elements:
        state.lock.pending_choice = True
        state.history.append(f"{label} played {card}")
        logger.debug("%s played an Elements card, waiting for a choice", label)
        return state

    _update_lock(state, card, previous_top)

    # Check win
    if not hand:
        state.history.append(f"{label} played {card} and WON!")
        state.winners = [state.current_player]
        state.end_reason = EndReason.EMPTY_HAND
        logger.info("%s emptied their hand and wins", label)
        return state

    state.history.append(f"{label} played {card}")
    logger.debug(
        "%s played %s (lock color=%s shape=%s)",
        label,
        card,
        state.lock.color,
        state.lock.shape,
    )
    return state


def resolve_elements(state: MatchState, color: Color, shape: Shape) -> MatchState:
    """Give the Elements card on top of the discard pile its color and shape.

    Ends the turn: an Elements card is always the only play of its turn.
    """
    _ensure_running(state)
    if not state.pending_choice:
        raise IllegalCommandError("No Elements card is waiting for a choice")
    try:
        color, shape = Color(color), Shape(shape)
    except ValueError as exc:
        raise IllegalCommandError(str(exc)) from exc
    if color not in PLAIN_COLORS or shape not in PLAIN_SHAPES:
        raise IllegalCommandError(f"Cannot choose {color.value} {shape.value}")

    lock = state.lock
    lock.forced_color = color
    lock.forced_shape = shape
    top = state.discard_pile[-1]
    top.transform(color, shape)
    lock.color = color
    lock.shape = shape
    lock.pending_choice = False

    state.history.append(
        f"{player_label(state.current_player)} chose {color.value} {shape.value}"
    )
    return _advance_turn(state)


def draw_cards(state: MatchState) -> MatchState:
    """Draw up to three cards, reverse the direction and end the turn."""
    _ensure_running(state)
    _ensure_no_pending_choice(state)
    if state.lock.cards_played > 0:
        raise IllegalCommandError("Cannot draw after playing a card this turn")

    hand = state.current_hand
    drawn = 0
    for _ in range(DRAW_COUNT):
        if not state.deck:
            break
        hand.append(state.deck.pop())
        drawn += 1
    state.direction = -state.direction

    state.history.append(f"{player_label(state.current_player)} drew {drawn} cards")
    return _advance_turn(state)


def end_turn(state: MatchState) -> MatchState:
    """Pass the device on after playing at least one card."""
    _ensure_running(state)
    _ensure_no_pending_choice(state)
    if state.lock.cards_played == 0:
        raise IllegalCommandError("Play a card or draw before ending the turn")

    state.history.append(f"{player_label(state.current_player)} ended the turn")
    return _advance_turn(state)


def _advance_turn(state: MatchState) -> MatchState:
    state.current_player = (state.current_player + state.direction) % state.player_count
    state.lock = TurnLock()
    if not state.deck:
        _end_by_empty_deck(state)
    return state


def deck_exhaustion_winners(hand_counts: List[int]) -> List[int]:
    """Indices of the players holding the fewest cards."""
    fewest = min(hand_counts)
    return [i for i, count in enumerate(hand_counts) if count == fewest]


def _end_by_empty_deck(state: MatchState) -> None:
    state.winners = deck_exhaustion_winners(state.hand_counts())
    state.end_reason = EndReason.DECK_EXHAUSTED
    names = ", ".join(player_label(i) for i in state.winners)
    state.history.append(f"Deck empty! Winners: {names}")
    logger.info("Deck exhausted, winners: %s", names)


def apply_action(state: MatchState, action: Action) -> MatchState:
    """Apply an action for the current player and return the match state."""
    if isinstance(action, PlayCard):
        return play_card(state, action.index)
    if isinstance(action, DrawCards):
        return draw_cards(state)
    if isinstance(action, ResolveElements):
        return resolve_elements(state, action.color, action.shape)
    if isinstance(action, EndTurn):
        return end_turn(state)
    raise IllegalCommandError(f"Unknown action: {action!r}")

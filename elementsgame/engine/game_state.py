"""Match state for Elements."""

import random
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional

from elementsgame.engine.card import Card, CardType, Color, Shape


class EndReason(str, Enum):
    """How a finished game ended."""

    EMPTY_HAND = "empty_hand"
    DECK_EXHAUSTED = "deck_exhausted"


@dataclass
class TurnLock:
    """Constraints collected during the current turn.

    ``color``/``shape`` form the turn's current choice: once one is set it
    stays for the rest of the turn. ``forced_color``/``forced_shape`` are only
    set by resolving an Elements card.
    """

    cards_played: int = 0
    color: Optional[Color] = None
    shape: Optional[Shape] = None
    forced_color: Optional[Color] = None
    forced_shape: Optional[Shape] = None
    pending_choice: bool = False

    @property
    def is_open(self) -> bool:
        return self.color is None and self.shape is None


@dataclass(frozen=True)
class EffectiveTop:
    """The discard top as plays are matched against it.

    For VIRTUAL tops a ``None`` color or shape means "any".
    """

    type: CardType
    color: Optional[Color]
    shape: Optional[Shape]

    @classmethod
    def from_card(cls, card: Card) -> "EffectiveTop":
        if card.is_elements and card.is_resolved:
            return cls(type=CardType.REGULAR, color=card.display_color, shape=card.display_shape)
        return cls(type=card.type, color=card.color, shape=card.shape)

    @property
    def is_unresolved_elements(self) -> bool:
        return self.type is CardType.ELEMENTS


@dataclass
class MatchState:
    """Mutable Elements match state. Only the rules module changes it."""

    hands: List[List[Card]]
    deck: List[Card]  # draw from the end
    discard_pile: List[Card]  # top is last
    current_player: int
    direction: int = 1  # 1 = clockwise, -1 = counter-clockwise
    lock: TurnLock = field(default_factory=TurnLock)
    winners: List[int] = field(default_factory=list)
    end_reason: Optional[EndReason] = None
    history: List[str] = field(default_factory=list)  # Log of events
    rng: random.Random = field(default_factory=random.Random, repr=False)

    @property
    def player_count(self) -> int:
        return len(self.hands)

    @property
    def current_hand(self) -> List[Card]:
        return self.hands[self.current_player]

    @property
    def forced_color(self) -> Optional[Color]:
        return self.lock.forced_color

    @property
    def forced_shape(self) -> Optional[Shape]:
        return self.lock.forced_shape

    @property
    def pending_choice(self) -> bool:
        return self.lock.pending_choice

    @property
    def is_over(self) -> bool:
        return self.end_reason is not None

    def top_discard(self) -> Optional[Card]:
        """Return the top card on the discard pile."""
        return self.discard_pile[-1] if self.discard_pile else None

    def hand_counts(self) -> List[int]:
        return [len(hand) for hand in self.hands]

    def card_count(self) -> int:
        """Cards across deck, discard pile and hands."""
        return len(self.deck) + len(self.discard_pile) + sum(self.hand_counts())


def player_label(index: int) -> str:
    return f"Player {index + 1}"


def effective_top(state: MatchState) -> Optional[EffectiveTop]:
    """Derive the card plays are matched against.

    A transformed Elements top counts as a Regular card with its chosen
    values. Otherwise a forced choice from this turn yields a VIRTUAL top,
    and without one the raw top card is used.
    """
    top = state.top_discard()
    if top is None:
        return None
    if top.is_elements and top.is_resolved:
        return EffectiveTop.from_card(top)
    if state.lock.forced_color is not None or state.lock.forced_shape is not None:
        return EffectiveTop(
            type=CardType.VIRTUAL,
            color=state.lock.forced_color,
            shape=state.lock.forced_shape,
        )
    return EffectiveTop.from_card(top)


@dataclass
class PlayerView:
    """Read-only snapshot for the player whose turn it is.

    Holds copies only, so a presentation layer cannot reach back into the
    match state.
    """

    current_player: int
    label: str
    my_hand: List[Card]
    top_discard: Optional[Card]
    effective_top: Optional[EffectiveTop]
    forced_color: Optional[Color]
    forced_shape: Optional[Shape]
    locked_color: Optional[Color]
    locked_shape: Optional[Shape]
    cards_played: int
    pending_choice: bool
    direction: int
    deck_size: int
    num_cards_per_player: List[int]
    winners: List[int]
    end_reason: Optional[EndReason]
    history: List[str]  # Recent game events

    @classmethod
    def from_state(cls, state: MatchState) -> "PlayerView":
        """Create the current player's view, hiding other players' hands."""
        top = state.top_discard()
        return cls(
            current_player=state.current_player,
            label=player_label(state.current_player),
            my_hand=[replace(card) for card in state.current_hand],
            top_discard=replace(top) if top is not None else None,
            effective_top=effective_top(state),
            forced_color=state.forced_color,
            forced_shape=state.forced_shape,
            locked_color=state.lock.color,
            locked_shape=state.lock.shape,
            cards_played=state.lock.cards_played,
            pending_choice=state.pending_choice,
            direction=state.direction,
            deck_size=len(state.deck),
            num_cards_per_player=state.hand_counts(),
            winners=list(state.winners),
            end_reason=state.end_reason,
            history=list(state.history[-10:]),  # Last 10 events
        )

    @property
    def notice(self) -> str:
        """Message shown above the hand while a forced choice is active."""
        if self.forced_color is not None:
            return f"Must play: {self.forced_color.value.upper()}"
        if self.forced_shape is not None:
            return f"Must play: {self.forced_shape.value.upper()}"
        return ""

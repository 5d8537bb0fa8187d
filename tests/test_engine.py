"""Unit tests for deck building, setup and whole-game invariants."""

import random
from collections import Counter

import pytest
from elementsgame.engine import (
    PLAIN_COLORS,
    PLAIN_SHAPES,
    CardType,
    Color,
    ConfigurationError,
    DrawCards,
    EndReason,
    PlayCard,
    ResolveElements,
    Shape,
    apply_action,
    create_deck,
    get_legal_actions,
    init_game,
)


def test_create_deck_size() -> None:
    deck = create_deck(seed=42)
    assert len(deck) == 80


def test_create_deck_composition() -> None:
    deck = create_deck(seed=7)
    types = Counter(c.type for c in deck)
    assert types[CardType.REGULAR] == 64
    assert types[CardType.SINGLE] == 8
    assert types[CardType.ELEMENTS] == 8

    regular = Counter((c.color, c.shape) for c in deck if c.type is CardType.REGULAR)
    assert len(regular) == 16
    assert set(regular.values()) == {4}
    per_color = Counter(c.color for c in deck if c.type is CardType.REGULAR)
    assert all(per_color[color] == 16 for color in PLAIN_COLORS)

    singles = [c for c in deck if c.type is CardType.SINGLE]
    color_only = {c.color for c in singles if c.shape is Shape.NONE}
    shape_only = {c.shape for c in singles if c.color is Color.NONE}
    assert color_only == set(PLAIN_COLORS)
    assert shape_only == set(PLAIN_SHAPES)

    elements = [c for c in deck if c.type is CardType.ELEMENTS]
    assert all(c.color is Color.WILD and c.shape is Shape.WILD for c in elements)
    assert not any(c.is_resolved for c in elements)


def test_create_deck_reproducible() -> None:
    d1 = create_deck(seed=123)
    d2 = create_deck(seed=123)
    assert [str(c) for c in d1] == [str(c) for c in d2]


def test_create_deck_uses_injected_rng() -> None:
    d1 = create_deck(rng=random.Random(5))
    d2 = create_deck(rng=random.Random(5))
    d3 = create_deck(rng=random.Random(6))
    assert [str(c) for c in d1] == [str(c) for c in d2]
    assert [str(c) for c in d1] != [str(c) for c in d3]


def test_cards_have_identity() -> None:
    deck = create_deck(seed=1)
    assert len({id(c) for c in deck}) == 80
    blue_circles = [
        c for c in deck
        if c.type is CardType.REGULAR and c.color is Color.BLUE and c.shape is Shape.CIRCLE
    ]
    assert blue_circles[0] != blue_circles[1]


def test_init_game() -> None:
    state = init_game(3, seed=1)
    assert state.hand_counts() == [8, 8, 8]
    assert len(state.discard_pile) == 1
    assert 0 <= state.current_player < 3
    assert state.direction == 1
    assert state.winners == []
    assert not state.is_over
    assert state.lock.cards_played == 0
    assert len(state.deck) == 80 - 8 * 3 - 1


def test_init_game_reproducible() -> None:
    s1 = init_game(4, seed=99)
    s2 = init_game(4, seed=99)
    assert s1.current_player == s2.current_player
    assert [str(c) for c in s1.deck] == [str(c) for c in s2.deck]
    assert str(s1.top_discard()) == str(s2.top_discard())


def test_starting_player_varies_with_seed() -> None:
    starters = {init_game(4, seed=s).current_player for s in range(40)}
    assert len(starters) > 1


@pytest.mark.parametrize("player_count", [0, 1, 10, 12])
def test_init_game_rejects_player_count(player_count: int) -> None:
    with pytest.raises(ConfigurationError):
        init_game(player_count, seed=1)


def test_init_game_largest_table() -> None:
    state = init_game(9, seed=3)
    assert len(state.deck) == 80 - 9 * 8 - 1


def _play_random_game(seed: int, player_count: int, max_steps: int = 3000):
    rng = random.Random(seed)
    state = init_game(player_count, seed=seed)
    observed = [state.card_count()]
    for _ in range(max_steps):
        if state.is_over:
            break
        legal = get_legal_actions(state)
        plays = [a for a in legal if isinstance(a, PlayCard)]
        action = rng.choice(plays) if plays and rng.random() < 0.8 else rng.choice(legal)

        player = state.current_player
        locked = (state.lock.color, state.lock.shape)
        state = apply_action(state, action)
        observed.append(state.card_count())

        if isinstance(action, PlayCard) and not state.pending_choice and not state.is_over:
            assert state.current_player == player
            if locked[0] is not None:
                assert state.lock.color == locked[0]
            if locked[1] is not None:
                assert state.lock.shape == locked[1]
    return state, observed


@pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
def test_cards_are_conserved(seed: int) -> None:
    state, observed = _play_random_game(seed, player_count=2 + seed % 3)
    assert set(observed) == {80}
    assert state.is_over


def test_random_game_ends_with_winners() -> None:
    state, _ = _play_random_game(11, player_count=4)
    assert state.end_reason in (EndReason.EMPTY_HAND, EndReason.DECK_EXHAUSTED)
    assert state.winners
    if state.end_reason is EndReason.EMPTY_HAND:
        assert state.hands[state.winners[0]] == []


def test_legal_actions_start_of_turn() -> None:
    state = init_game(2, seed=5)
    actions = get_legal_actions(state)
    assert any(isinstance(a, DrawCards) for a in actions)
    assert not any(isinstance(a, ResolveElements) for a in actions)

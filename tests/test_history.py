"""Unit tests for game history logging and the player view."""

from elementsgame.engine import (
    Card,
    CardType,
    Color,
    PlayerView,
    Shape,
    init_game,
    get_legal_actions,
    apply_action,
    PlayCard,
    DrawCards,
    EndTurn,
    ResolveElements,
)


def _with_wild_top(state):
    """Swap an unresolved Elements card onto the discard pile so any card plays."""
    wild = next(c for c in state.deck if c.is_elements)
    state.deck.remove(wild)
    state.deck.append(state.discard_pile.pop())
    state.discard_pile.append(wild)
    return state


def test_history_initialization():
    state = init_game(2)
    assert len(state.history) == 0

def test_history_records_play():
    state = _with_wild_top(init_game(2, seed=42))
    actions = get_legal_actions(state)
    play_action = next(a for a in actions if isinstance(a, PlayCard))
    card = state.current_hand[play_action.index]
    label = f"Player {state.current_player + 1}"

    state = apply_action(state, play_action)

    assert len(state.history) == 1
    assert f"{label} played" in state.history[0]
    assert str(card) in state.history[0]

def test_history_records_draw():
    state = init_game(2, seed=42)
    label = f"Player {state.current_player + 1}"

    state = apply_action(state, DrawCards())

    assert state.history[-1] == f"{label} drew 3 cards"

def test_history_records_elements_choice():
    state = init_game(3, seed=42)
    state.current_hand.insert(0, Card(type=CardType.ELEMENTS, color=Color.WILD, shape=Shape.WILD))
    label = f"Player {state.current_player + 1}"

    state = apply_action(state, PlayCard(0))
    state = apply_action(state, ResolveElements(Color.GREEN, Shape.HEXAGON))

    assert state.history[-2] == f"{label} played elements"
    assert state.history[-1] == f"{label} chose green hexagon"

def test_history_persists_across_turns():
    state = _with_wild_top(init_game(2, seed=42))
    first = state.current_player

    # Turn 1: play a card that is not an Elements card, then pass
    play = next(
        a for a in get_legal_actions(state)
        if isinstance(a, PlayCard) and not state.current_hand[a.index].is_elements
    )
    state = apply_action(state, play)
    state = apply_action(state, EndTurn())

    # Turn 2: the other player draws
    state = apply_action(state, DrawCards())

    assert len(state.history) == 3
    assert state.history[0].startswith(f"Player {first + 1} played")
    assert state.history[1] == f"Player {first + 1} ended the turn"
    assert state.history[2].endswith("drew 3 cards")

def test_player_view_is_a_copy():
    state = init_game(3, seed=8)
    view = PlayerView.from_state(state)

    assert view.current_player == state.current_player
    assert view.label == f"Player {state.current_player + 1}"
    assert view.num_cards_per_player == [8, 8, 8]
    assert view.deck_size == 80 - 3 * 8 - 1
    assert view.notice == ""

    view.my_hand.clear()
    view.num_cards_per_player[0] = 0
    assert len(state.current_hand) == 8
    assert state.hand_counts() == [8, 8, 8]
    assert view.top_discard is not state.top_discard()

def test_player_view_notice_for_forced_color():
    state = init_game(2, seed=8)
    state.lock.forced_color = Color.GREEN
    view = PlayerView.from_state(state)
    assert view.notice == "Must play: GREEN"
